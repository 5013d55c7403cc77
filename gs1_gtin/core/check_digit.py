"""
GS1 Mod-10 check digit calculation and GTIN generation.

Algorithm (GS1 General Specifications, section 7.9):
1. From right to left, alternate multipliers 3 and 1 (rightmost digit x3)
2. Sum all products
3. Check digit = 0 if sum mod 10 is 0, else 10 - (sum mod 10)
"""

from __future__ import annotations

from typing import Sequence

from ..errors import InvalidLength
from .digits import parse_digits


# Bodies of GTIN-8, GTIN-12, GTIN-13 and GTIN-14 (check digit excluded)
GENERATE_LENGTHS = frozenset({7, 11, 12, 13})

MAX_BODY_LENGTH = 13


def calculate_check_digit_mod10(digits: Sequence[int]) -> int:
    """
    Calculate the GS1 Mod10 check digit.

    Args:
        digits: Digit sequence without check digit (1-13 digits)

    Returns:
        Calculated check digit (0-9)

    Raises:
        InvalidLength: If the sequence is empty or longer than 13 digits
    """
    if not digits or len(digits) > MAX_BODY_LENGTH:
        raise InvalidLength(got=len(digits))

    total = 0
    multiplier = 3
    for digit in reversed(digits):
        total += digit * multiplier
        multiplier = 1 if multiplier == 3 else 3

    remainder = total % 10
    return 0 if remainder == 0 else 10 - remainder


def generate(code: str) -> str:
    """
    Append the check digit to a GTIN body.

    The digit is appended to ``code`` exactly as given, so leading zeros
    survive. No whitespace trimming is done here.

    Args:
        code: 7, 11, 12 or 13 digit body

    Returns:
        Complete 8, 12, 13 or 14 digit GTIN

    Raises:
        InvalidCharacters: If ``code`` contains non-digits
        InvalidLength: If the body length is not 7, 11, 12 or 13

    Example:
        >>> generate("629104150021")
        '6291041500213'
    """
    digits = parse_digits(code)
    if len(digits) not in GENERATE_LENGTHS:
        raise InvalidLength(got=len(digits))

    check_digit = calculate_check_digit_mod10(digits)
    return f"{code}{check_digit}"
