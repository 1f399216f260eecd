"""
Agent implementations for the review statistics pipeline.

Contains the stages reviews pass through:
- CSV Ingestion Agent
- Record Normalizer
- Sentiment Labeler
- Sentiment Aggregators (by app, by language)
- Summary Statistics
"""
