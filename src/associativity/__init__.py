"""
Associativity table reader.

Reads the tables of an associations word game:

    raw text → CSV reader → raw rows → validator → AssociationsTable

The CSV reader knows nothing about the game; the validator knows nothing
about text. Everything built on top (answer checking, game state,
serialization) consumes AssociationsTable unchanged.
"""

__version__ = "0.1.0"

from associativity.acceptables import fix_acceptables, is_acceptable
from associativity.csv_reader import parse_csv, parse_csv_file, parse_csv_string
from associativity.errors import (
    AssociationsTableError,
    CSVFormatError,
    ErrorKind,
    EscapeError,
    FormatError,
)
from associativity.escapes import escape_expression
from associativity.model import AssociationsTable
from associativity.validator import (
    read_associations_table,
    read_associations_table_file,
    read_associations_table_string,
    validate,
)

__all__ = [
    "AssociationsTable",
    "AssociationsTableError",
    "CSVFormatError",
    "ErrorKind",
    "EscapeError",
    "FormatError",
    "escape_expression",
    "fix_acceptables",
    "is_acceptable",
    "parse_csv",
    "parse_csv_file",
    "parse_csv_string",
    "read_associations_table",
    "read_associations_table_file",
    "read_associations_table_string",
    "validate",
]
