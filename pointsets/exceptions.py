from typing import Any, Dict, Optional


class PointSetError(Exception):
    """Base exception for point-set producers."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class PointSetFormatError(PointSetError, ValueError):
    """Raised when a point-set stream is structurally malformed.

    `row` is the 0-based data row index, or None when the header is at fault.
    `column` is the 0-based coordinate index of a bad data token.
    `expected` / `actual` hold token counts where a count mismatch occurred.
    """

    def __init__(self, message: str, row: Optional[int] = None,
                 expected: Optional[int] = None, actual: Optional[int] = None,
                 token: Optional[str] = None, column: Optional[int] = None):
        details = {"row": row, "column": column, "expected": expected, "actual": actual, "token": token}
        super().__init__(message, {k: v for k, v in details.items() if v is not None})
        self.row = row
        self.column = column
        self.expected = expected
        self.actual = actual
        self.token = token
