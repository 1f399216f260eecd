"""
Utility modules for the review statistics pipeline.

Cross-cutting concerns:
- Coercion: Explicit parsing of raw CSV strings into typed values
- Storage: File I/O helpers for report output
- Exceptions: Error hierarchy
"""
