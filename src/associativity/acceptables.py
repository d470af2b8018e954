"""
Acceptable answers of a solution track.

Comparison is case-insensitive (str.lower) and nothing more: letters with
diacritics or alternative transliterations are not folded together, so a
table must list such spellings explicitly as alternates.
"""

from typing import List, Sequence


def _same(a: str, b: str) -> bool:
    return a.lower() == b.lower()


def fix_acceptables(acceptables: Sequence[str]) -> List[str]:
    """
    Normalize a list of acceptable answers.

    - An empty list becomes [""]
    - Case-insensitive duplicates are removed, keeping the earliest one
    - The first answer stays first; the alternates are sorted case-insensitively

    Applying it twice gives the same result as applying it once.
    """
    if not acceptables:
        return [""]

    fixed = list(acceptables)

    i = 0
    while i < len(fixed):
        j = i + 1
        while j < len(fixed):
            if _same(fixed[i], fixed[j]):
                del fixed[j]
            else:
                j += 1
        i += 1

    return fixed[:1] + sorted(fixed[1:], key=str.lower)


def is_acceptable(guess: str, acceptables: Sequence[str]) -> bool:
    """Whether guess is case-insensitively equal to any acceptable answer."""
    return any(_same(guess, answer) for answer in acceptables)


__all__ = ["fix_acceptables", "is_acceptable"]
