"""
Escape expressions of the CSV grammar.

An escape expression is the single character following the escape
character. It expands to exactly one literal character:

    b → backspace      t → tab            v → vertical tab
    n → line feed      r → carriage ret.  f → form feed
    a → bell           ' → '              " → "
    \\ → \\            e → \\             , → ,
"""

from types import MappingProxyType
from typing import Mapping

from associativity.errors import ErrorKind, EscapeError


ESCAPE_TABLE: Mapping[str, str] = MappingProxyType({
    "b": "\b",
    "t": "\t",
    "v": "\x0b",
    "n": "\n",
    "r": "\r",
    "f": "\x0c",
    "a": "\x07",
    "'": "'",
    '"': '"',
    "\\": "\\",
    "e": "\\",
    ",": ",",
})


def escape_expression(expression: str) -> str:
    """
    Expand an escape expression.

    Args:
        expression: The character following the escape character

    Returns:
        The literal character the expression stands for

    Raises:
        EscapeError: If expression is not a single character
            (INVALID_ESCAPE_ARGUMENT) or is not in the table
            (UNKNOWN_ESCAPE_CODE)
    """
    if len(expression) != 1:
        raise EscapeError(
            ErrorKind.INVALID_ESCAPE_ARGUMENT,
            "Escape expression must be a single character string.",
        )

    try:
        return ESCAPE_TABLE[expression]
    except KeyError:
        raise EscapeError(
            ErrorKind.UNKNOWN_ESCAPE_CODE,
            f'Illegal escape expression "\\{expression}".',
        ) from None


__all__ = ["ESCAPE_TABLE", "escape_expression"]
