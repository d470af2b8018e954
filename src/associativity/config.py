"""
Shared constants of the table reader.

Control characters of the CSV grammar, the shape of an associations table
and the helpers that build the labels used to address its parts.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


# CSV control characters
ESCAPE_CHAR = "\\"
QUOTE_CHARS = ("'", '"')
SEPARATOR_CHAR = ","

DEFAULT_ORIGIN = "input"

# Associations table grammar
ROW_LABELS = ("1", "2", "3", "4")
COLUMN_LABELS = ("A", "B", "C", "D")
SOLUTION_LABEL = "Sol"

DISALLOW_SHUFFLING = "0"
ALLOW_SHUFFLING = "1"

SHUFFLE_SUFFIX = "Shuffle"

# 1 shuffle row + 4 cell rows + at least 1 solution row
MIN_TABLE_ROWS = 1 + len(ROW_LABELS) + 1
SOLUTION_ROW_LENGTH = len(COLUMN_LABELS) + 1
CELL_ROW_LENGTHS = (len(COLUMN_LABELS), len(COLUMN_LABELS) + 1)


@dataclass(frozen=True)
class CSVDialect:
    """
    Control characters recognised by the CSV reader.

    Properties:
        separator: Cell separator
        quote_chars: Characters that may open (and close) a quoted cell
        escape_char: Character introducing an escape expression

    All control characters must be single, distinct characters.
    """

    separator: str = SEPARATOR_CHAR
    quote_chars: Tuple[str, ...] = QUOTE_CHARS
    escape_char: str = ESCAPE_CHAR

    def __post_init__(self):
        chars = (self.separator, self.escape_char) + tuple(self.quote_chars)
        for c in chars:
            if not isinstance(c, str) or len(c) != 1:
                raise ValueError(f"Control characters must be single characters, got {c!r}")
            if c.isspace():
                raise ValueError("Whitespace cannot be a control character")
        if len(set(chars)) != len(chars):
            raise ValueError(f"Control characters must be distinct: {chars!r}")


DEFAULT_DIALECT = CSVDialect()


def _append_suffix(label: str, suffix: str) -> str:
    return label + suffix


def shuffle_label(label: str) -> str:
    """Label of the shuffle flag of a column or of the final solution ("AShuffle")."""
    return _append_suffix(label, SHUFFLE_SUFFIX)


def cell_label(row: str, column: str) -> str:
    """Label of a cell: column label followed by row label ("A1")."""
    return column + row


def track_labels() -> Tuple[str, ...]:
    """Labels of the five solution tracks, in table order."""
    return COLUMN_LABELS + (SOLUTION_LABEL,)


def cell_labels(column: Optional[str] = None) -> Tuple[str, ...]:
    """
    Labels of all cells, or only of the cells in one column.

    Cells are listed column by column, top to bottom.
    """
    columns = COLUMN_LABELS if column is None else (column,)
    return tuple(cell_label(row, col) for col in columns for row in ROW_LABELS)
