"""
Errors raised by the table reader.

Every error is terminal for the call that raised it: no partial result is
returned. All of them derive from FormatError and carry an ErrorKind, so
callers may either catch the whole family or branch on the kind.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """What went wrong while reading a table."""

    # Escape expressions
    INVALID_ESCAPE_ARGUMENT = "invalid_escape_argument"
    UNKNOWN_ESCAPE_CODE = "unknown_escape_code"

    # CSV lexing
    UNTERMINATED_LINE = "unterminated_line"
    UNEXPECTED_CHARACTER_AFTER_QUOTE = "unexpected_character_after_quote"
    ILLEGAL_QUOTE_IN_CELL = "illegal_quote_in_cell"
    NEGATIVE_STARTING_LINE = "negative_starting_line"

    # Associations table structure
    TABLE_TOO_SHORT = "table_too_short"
    SHUFFLE_ROW_WRONG_LENGTH = "shuffle_row_wrong_length"
    SHUFFLE_ROW_INVALID_VALUE = "shuffle_row_invalid_value"
    CELL_BLOCK_LENGTH_MISMATCH = "cell_block_length_mismatch"
    CELL_BLOCK_INVALID_LENGTH = "cell_block_invalid_length"
    CELL_BLOCK_NON_EMPTY_PAD = "cell_block_non_empty_pad"
    SOLUTION_ROW_WRONG_LENGTH = "solution_row_wrong_length"
    SOLUTION_LATE_ENTRY = "solution_late_entry"


class FormatError(Exception):
    """Raised when a table cannot be read."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message


class EscapeError(FormatError):
    """Raised when an escape expression is not valid."""
    pass


class CSVFormatError(FormatError):
    """
    Raised when CSV input is malformed.

    Properties:
        origin: Name of the input (file path or a caller-supplied label)
        line: 1-based line number, offset by the caller's starting line
        column: 1-based column of the offending character
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        origin: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        super().__init__(kind, message)
        self.origin = origin
        self.line = line
        self.column = column


class AssociationsTableError(FormatError):
    """
    Raised when a raw table does not follow the associations table grammar.

    Properties:
        row: 0-based index of the offending raw row
        track: Column label or "Sol" of the offending solution track
        closed_row: Row where the track reached its first empty cell (late entries only)
        value: Offending cell content
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        row: Optional[int] = None,
        track: Optional[str] = None,
        closed_row: Optional[int] = None,
        value: Optional[str] = None,
    ):
        super().__init__(kind, message)
        self.row = row
        self.track = track
        self.closed_row = closed_row
        self.value = value


__all__ = [
    "ErrorKind",
    "FormatError",
    "EscapeError",
    "CSVFormatError",
    "AssociationsTableError",
]
