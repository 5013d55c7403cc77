"""
Digit parsing for GTIN candidates.
"""

from __future__ import annotations

from typing import Tuple

from ..errors import InvalidCharacters


# Only ASCII digits; str.isdigit() would also accept e.g. Arabic-Indic digits
NUMERIC = frozenset('0123456789')

DigitSequence = Tuple[int, ...]


def parse_digits(text: str) -> DigitSequence:
    """
    Convert a string into a sequence of decimal digits.

    Args:
        text: Candidate code, most-significant digit first

    Returns:
        Tuple of ints in [0, 9]; empty tuple for empty input

    Raises:
        InvalidCharacters: If any character is not '0'-'9'
    """
    if not all(c in NUMERIC for c in text):
        raise InvalidCharacters()
    return tuple(int(c) for c in text)
