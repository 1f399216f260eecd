"""
Exception hierarchy for the review statistics pipeline.

Row-level data defects never raise; these are reserved for contract
violations and I/O failures.
"""


class ReviewStatsError(Exception):
    pass


class SchemaMismatchError(ReviewStatsError):
    """Input does not carry the fixed review column set."""

    def __init__(self, missing_columns, message=None):
        self.missing_columns = sorted(missing_columns)
        if message is None:
            message = f"Missing expected columns: {', '.join(self.missing_columns)}"
        super().__init__(message)


class IngestionError(ReviewStatsError):
    pass
