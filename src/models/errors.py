"""
Exception types raised by the review analytics pipeline.
"""

from typing import Optional


class ReviewAnalyticsError(Exception):
    """Base class for pipeline errors."""


class DatasetSchemaError(ReviewAnalyticsError):
    """Raised when a dataset header lacks required columns."""

    def __init__(self, missing_columns, source: str = ""):
        self.missing_columns = list(missing_columns)
        self.source = source
        super().__init__(
            f"Dataset {source or '<unknown>'} is missing required columns: "
            f"{', '.join(self.missing_columns)}"
        )


class CoercionError(ReviewAnalyticsError, ValueError):
    """
    Raised when a CSV cell cannot be converted to its field type.

    Carries the field name, the offending raw value and, when known,
    the index of the source row.
    """

    def __init__(self, field: str, value, expected: str, row_index: Optional[int] = None):
        self.field = field
        self.value = value
        self.expected = expected
        self.row_index = row_index
        location = f" (row {row_index})" if row_index is not None else ""
        super().__init__(
            f"Cannot convert {field}={value!r} to {expected}{location}"
        )

    def at_row(self, row_index: int) -> "CoercionError":
        """Return a copy of this error tagged with the source row index."""
        return CoercionError(self.field, self.value, self.expected, row_index)
