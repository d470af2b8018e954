"""
CSV reader for associations tables (Layer 1: Raw Input → Raw Table).

Converts a character stream into a list of rows of string cells.
Knows nothing about associations tables.

CSV Format:
    - Each physical line is one record; records never span lines
    - Cells are separated by ","
    - A cell may be enclosed in ' or " if the quote is its first character
    - "\\" starts an escape expression (see associativity.escapes)

Syntax Notes:
    - Unquoted cells are trimmed; quoted cells are kept verbatim
    - Inside quotes, the other quote character and "," are literal
    - Only whitespace may follow the closing quote before the next ","
    - Lines holding nothing but whitespace produce no row
"""

import io
from typing import Iterable, List, Optional, Union

from associativity.config import DEFAULT_DIALECT, DEFAULT_ORIGIN, CSVDialect
from associativity.errors import CSVFormatError, ErrorKind, EscapeError
from associativity.escapes import escape_expression
from associativity.logging_utils import get_logger


logger = get_logger("csv")

RawTable = List[List[str]]


def _error(kind: ErrorKind, message: str, origin: str, line: int, column: int) -> CSVFormatError:
    return CSVFormatError(
        kind,
        f"{message} in {origin}:{line}.{column}.",
        origin=origin,
        line=line,
        column=column,
    )


def _strip_line_end(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def _parse_line(line: str, line_number: int, origin: str, dialect: CSVDialect) -> Optional[List[str]]:
    """
    Parse one physical line into a row of cells.

    Returns None for a line with no non-whitespace character.
    """
    cells: List[str] = []
    cell: List[str] = []
    quote: Optional[str] = None
    after_quote = False
    blank = True

    i = 0
    length = len(line)
    while i < length:
        c = line[i]
        if not c.isspace():
            blank = False

        if after_quote:
            if c == dialect.separator:
                cells.append("".join(cell))
                cell = []
                after_quote = False
            elif not c.isspace():
                raise _error(
                    ErrorKind.UNEXPECTED_CHARACTER_AFTER_QUOTE,
                    "Expected a separator or a line end",
                    origin, line_number, i + 1,
                )

        elif c == dialect.escape_char:
            if i + 1 >= length:
                raise _error(
                    ErrorKind.UNTERMINATED_LINE,
                    "Unexpected line end",
                    origin, line_number, length,
                )
            try:
                literal = escape_expression(line[i + 1])
            except EscapeError as e:
                raise _error(e.kind, e.message.rstrip("."), origin, line_number, i + 2) from e
            cell.append(literal)
            i += 2
            continue

        elif quote is not None:
            if c == quote:
                quote = None
                after_quote = True
            else:
                cell.append(c)

        elif c in dialect.quote_chars:
            if cell:
                raise _error(
                    ErrorKind.ILLEGAL_QUOTE_IN_CELL,
                    "Unescaped quotes not allowed",
                    origin, line_number, i + 1,
                )
            quote = c

        elif c == dialect.separator:
            cells.append("".join(cell).strip())
            cell = []

        elif c.isspace():
            # Leading whitespace is not content, so a quote may still open the cell
            if cell:
                cell.append(c)

        else:
            cell.append(c)

        i += 1

    if quote is not None:
        raise _error(ErrorKind.UNTERMINATED_LINE, "Unexpected line end", origin, line_number, length)

    if blank:
        return None

    # Quoted cells are kept verbatim, unquoted ones are trimmed
    cells.append("".join(cell) if after_quote else "".join(cell).strip())
    return cells


def parse_csv(
    stream: Union[str, bytes, Iterable],
    origin: str = DEFAULT_ORIGIN,
    starting_line: int = 0,
    dialect: CSVDialect = DEFAULT_DIALECT,
    encoding: str = "utf-8",
) -> RawTable:
    """
    Parse CSV input into a raw table.

    Args:
        stream: Text, bytes, or any iterable of lines (open file, StringIO, list)
        origin: Name of the input used in error messages
        starting_line: Number of lines preceding the input (offsets reported line numbers)
        dialect: Control characters
        encoding: Used to decode bytes input

    Returns:
        List of rows, each a list of cells. Rows may differ in length.

    Raises:
        CSVFormatError: If the input is malformed or starting_line is negative
    """
    if starting_line < 0:
        raise CSVFormatError(
            ErrorKind.NEGATIVE_STARTING_LINE,
            f"Preceding line index must be non-negative; {starting_line} is given instead.",
            origin=origin,
        )

    if isinstance(stream, bytes):
        stream = stream.decode(encoding)
    if isinstance(stream, str):
        stream = io.StringIO(stream)

    table: RawTable = []
    line_number = starting_line
    for raw_line in stream:
        line_number += 1
        if isinstance(raw_line, bytes):
            raw_line = raw_line.decode(encoding)
        row = _parse_line(_strip_line_end(raw_line), line_number, origin, dialect)
        if row is not None:
            table.append(row)

    logger.debug("Read %d rows from %s", len(table), origin)
    return table


def parse_csv_string(
    csv_content: str,
    origin: str = DEFAULT_ORIGIN,
    starting_line: int = 0,
    dialect: CSVDialect = DEFAULT_DIALECT,
) -> RawTable:
    """Parse CSV content given as a string."""
    return parse_csv(csv_content, origin=origin, starting_line=starting_line, dialect=dialect)


def parse_csv_file(
    filepath: str,
    encoding: str = "utf-8",
    dialect: CSVDialect = DEFAULT_DIALECT,
) -> RawTable:
    """
    Parse a CSV file.

    Args:
        filepath: Path to CSV file (also used as the origin in error messages)
        encoding: File encoding
        dialect: Control characters

    Returns:
        Raw table

    Raises:
        FileNotFoundError: If file doesn't exist
        CSVFormatError: If parsing fails
    """
    try:
        with open(filepath, "r", encoding=encoding) as f:
            return parse_csv(f, origin=str(filepath), dialect=dialect)
    except FileNotFoundError:
        raise FileNotFoundError(f"CSV file not found: {filepath}")


__all__ = [
    "RawTable",
    "parse_csv",
    "parse_csv_string",
    "parse_csv_file",
]
