"""
Associations table validator (Layer 2: Raw Table → AssociationsTable).

Raw table layout (0-based row indices):

    row 0       shuffle flags for A, B, C, D, Sol ("0" or "1")
    rows 1–4    cell values for rows "1"–"4", columns A–D
                (an optional 5th cell must be empty)
    rows 5..    answers, exactly 5 cells: A, B, C, D, Sol

Answers are top-aggregated per track: once a track has an empty cell,
every following row must be empty in that track as well.
"""

from typing import Dict, Iterable, List, Optional, Sequence, Union

from associativity.config import (
    ALLOW_SHUFFLING,
    CELL_ROW_LENGTHS,
    COLUMN_LABELS,
    DEFAULT_DIALECT,
    DEFAULT_ORIGIN,
    DISALLOW_SHUFFLING,
    MIN_TABLE_ROWS,
    ROW_LABELS,
    SOLUTION_LABEL,
    SOLUTION_ROW_LENGTH,
    CSVDialect,
    cell_label,
    track_labels,
)
from associativity.csv_reader import parse_csv, parse_csv_file
from associativity.errors import AssociationsTableError, ErrorKind
from associativity.logging_utils import get_logger
from associativity.model import AssociationsTable


logger = get_logger("validator")

_SHUFFLE_VALUES = {DISALLOW_SHUFFLING: False, ALLOW_SHUFFLING: True}

_FIRST_CELL_ROW = 1
_FIRST_SOLUTION_ROW = _FIRST_CELL_ROW + len(ROW_LABELS)


def _read_shuffle_row(row: Sequence[str]) -> Dict[str, bool]:
    if len(row) != SOLUTION_ROW_LENGTH:
        raise AssociationsTableError(
            ErrorKind.SHUFFLE_ROW_WRONG_LENGTH,
            f"Row 0 of the associations table must contain exactly {SOLUTION_ROW_LENGTH} cells, "
            f"but a row of {len(row)} cells was given.",
            row=0,
        )

    shuffle = {}
    for label, value in zip(track_labels(), row):
        if value not in _SHUFFLE_VALUES:
            raise AssociationsTableError(
                ErrorKind.SHUFFLE_ROW_INVALID_VALUE,
                f'Row 0 of the associations table must contain only "{DISALLOW_SHUFFLING}" '
                f'(to disallow shuffling) and "{ALLOW_SHUFFLING}" (to allow shuffling), '
                f'but a cell "{value}" was encountered.',
                row=0,
                track=label,
                value=value,
            )
        shuffle[label] = _SHUFFLE_VALUES[value]
    return shuffle


def _read_cell_block(rows: Sequence[Sequence[str]]) -> Dict[str, str]:
    """Read rows 1–4 of the raw table into cell values."""
    expected = len(rows[0])
    cells = {}

    for offset, (row_label, row) in enumerate(zip(ROW_LABELS, rows)):
        i = _FIRST_CELL_ROW + offset

        if len(row) != expected:
            raise AssociationsTableError(
                ErrorKind.CELL_BLOCK_LENGTH_MISMATCH,
                f"Rows 1 – 4 (inclusive) of the associations table must be of the same length, "
                f"but row {_FIRST_CELL_ROW} contains {expected} cells "
                f"and row {i} contains {len(row)} cells.",
                row=i,
            )
        if len(row) not in CELL_ROW_LENGTHS:
            raise AssociationsTableError(
                ErrorKind.CELL_BLOCK_INVALID_LENGTH,
                f"Rows 1 – 4 (inclusive) of the associations table must contain either "
                f"{CELL_ROW_LENGTHS[0]} or {CELL_ROW_LENGTHS[1]} cells, "
                f"but row {i} contains {len(row)} cells.",
                row=i,
            )
        if len(row) > len(COLUMN_LABELS) and row[-1] != "":
            raise AssociationsTableError(
                ErrorKind.CELL_BLOCK_NON_EMPTY_PAD,
                f"If rows 1 – 4 (inclusive) of the associations table contain "
                f"{CELL_ROW_LENGTHS[1]} cells, the last cell must be empty, "
                f'but row {i} contains "{row[-1]}" as the last cell.',
                row=i,
                value=row[-1],
            )

        for column_label, value in zip(COLUMN_LABELS, row):
            cells[cell_label(row_label, column_label)] = value

    return cells


def _read_solution_block(rows: Sequence[Sequence[str]]) -> Dict[str, List[str]]:
    """Read rows 5.. of the raw table into the answers of each track."""
    answers: Dict[str, List[str]] = {label: [] for label in track_labels()}
    # Row of the first empty cell of each track; None while the track is open
    closed_at: Dict[str, Optional[int]] = {label: None for label in track_labels()}

    for offset, row in enumerate(rows):
        i = _FIRST_SOLUTION_ROW + offset

        if len(row) != SOLUTION_ROW_LENGTH:
            raise AssociationsTableError(
                ErrorKind.SOLUTION_ROW_WRONG_LENGTH,
                f"Rows {_FIRST_SOLUTION_ROW} until the end (inclusive) of the associations table "
                f"must contain exactly {SOLUTION_ROW_LENGTH} cells, "
                f"but row {i} contains {len(row)} cells.",
                row=i,
            )

        for label, value in zip(track_labels(), row):
            if value == "":
                if closed_at[label] is None:
                    closed_at[label] = i
            elif closed_at[label] is not None:
                raise AssociationsTableError(
                    ErrorKind.SOLUTION_LATE_ENTRY,
                    f"Column {label} contains a non-empty cell in row {i} after already having "
                    f"an empty cell in row {closed_at[label]} (once a column reaches an empty "
                    f"answer, all following rows must be empty in that column).",
                    row=i,
                    track=label,
                    closed_row=closed_at[label],
                    value=value,
                )
            else:
                answers[label].append(value)

    return answers


def validate(table: Sequence[Sequence[str]]) -> AssociationsTable:
    """
    Turn a raw table into an AssociationsTable.

    Args:
        table: Rows of cells, as returned by parse_csv

    Returns:
        The validated table

    Raises:
        AssociationsTableError: On the first violated rule
    """
    if len(table) < MIN_TABLE_ROWS:
        raise AssociationsTableError(
            ErrorKind.TABLE_TOO_SHORT,
            f"Associations table must have at least {MIN_TABLE_ROWS} rows, "
            f"but a table of {len(table)} rows was given.",
        )

    shuffle = _read_shuffle_row(table[0])
    cells = _read_cell_block(table[_FIRST_CELL_ROW:_FIRST_SOLUTION_ROW])
    answers = _read_solution_block(table[_FIRST_SOLUTION_ROW:])

    result = AssociationsTable(
        cells=cells,
        columns={label: answers[label] for label in COLUMN_LABELS},
        final=answers[SOLUTION_LABEL],
        shuffle=shuffle,
    )

    logger.debug(
        "Validated associations table: %d solution rows, final answers %r",
        len(table) - _FIRST_SOLUTION_ROW,
        result.final,
    )
    return result


def read_associations_table(
    stream: Union[str, bytes, Iterable],
    origin: str = DEFAULT_ORIGIN,
    starting_line: int = 0,
    dialect: CSVDialect = DEFAULT_DIALECT,
) -> AssociationsTable:
    """Parse CSV input and validate it as an associations table."""
    return validate(parse_csv(stream, origin=origin, starting_line=starting_line, dialect=dialect))


def read_associations_table_string(
    csv_content: str,
    origin: str = DEFAULT_ORIGIN,
    starting_line: int = 0,
) -> AssociationsTable:
    """Parse CSV content given as a string and validate it as an associations table."""
    return read_associations_table(csv_content, origin=origin, starting_line=starting_line)


def read_associations_table_file(filepath: str, encoding: str = "utf-8") -> AssociationsTable:
    """
    Read an associations table from a CSV file.

    Raises:
        FileNotFoundError: If file doesn't exist
        FormatError: If the file is not a valid associations table
    """
    return validate(parse_csv_file(filepath, encoding=encoding))


__all__ = [
    "validate",
    "read_associations_table",
    "read_associations_table_string",
    "read_associations_table_file",
]
