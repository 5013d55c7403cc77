"""
GTIN format classification, validation and GTIN-13 to GTIN-14 normalization.

Validation is a single pass with three guards, each stopping at the first
failure:

1. Characters: after trimming ASCII whitespace, every character must be a digit
2. Length: 8, 12, 13 or 14 digits (GTIN-8, GTIN-12, GTIN-13, GTIN-14)
3. Check digit: the last digit must equal the Mod-10 digit of the others
"""

from __future__ import annotations

import logging
import string
from enum import Enum
from typing import Optional

from ..errors import (
    GtinError,
    InvalidCheckDigit,
    InvalidFormat,
    InvalidLength,
)
from .check_digit import calculate_check_digit_mod10, generate
from .digits import parse_digits


logger = logging.getLogger(__name__)

# GS1 logistic-unit indicator used when packing a GTIN-13 into a GTIN-14
GTIN14_INDICATOR = "1"


class GtinFormat(Enum):
    """GTIN formats, valued by their total digit count."""
    GTIN_8 = 8
    GTIN_12 = 12
    GTIN_13 = 13
    GTIN_14 = 14

    @property
    def length(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        """Display name, e.g. 'GTIN-13'."""
        return f"GTIN-{self.value}"

    @classmethod
    def from_length(cls, length: int) -> Optional['GtinFormat']:
        """Return the format with the given digit count, or None."""
        for member in cls:
            if member.value == length:
                return member
        return None


def strip_whitespace(code: str) -> str:
    """Trim ASCII whitespace (space, tab, CR, LF, VT, FF) from both ends."""
    return code.strip(string.whitespace)


def validate(code: str) -> GtinFormat:
    """
    Validate a GTIN and return its format.

    Args:
        code: GTIN string, surrounding whitespace allowed

    Returns:
        Detected GtinFormat

    Raises:
        InvalidCharacters: If a non-digit remains after trimming
        InvalidLength: If the digit count is not 8, 12, 13 or 14
        InvalidCheckDigit: If the check digit does not match
    """
    try:
        digits = parse_digits(strip_whitespace(code))

        gtin_format = GtinFormat.from_length(len(digits))
        if gtin_format is None:
            raise InvalidLength(got=len(digits))

        body, provided_check = digits[:-1], digits[-1]
        try:
            calculated_check = calculate_check_digit_mod10(body)
        except InvalidLength:
            raise InvalidCheckDigit() from None

        if provided_check != calculated_check:
            raise InvalidCheckDigit(
                f"Check digit mismatch: expected {calculated_check}, got {provided_check}"
            )
    except GtinError as e:
        logger.debug("Rejected GTIN %r: %s", code, e.code.value)
        raise

    return gtin_format


def normalize(code: str) -> str:
    """
    Convert a GTIN-13 into a GTIN-14.

    The check digit is dropped, indicator digit 1 is prepended and a new
    check digit is computed: the extra leading digit shifts every weight,
    so the old check digit cannot be reused.

    Args:
        code: Valid GTIN-13, surrounding whitespace allowed

    Returns:
        14-digit GTIN string

    Raises:
        InvalidCharacters, InvalidLength, InvalidCheckDigit: From validate()
        InvalidFormat: If the code is a valid GTIN but not a GTIN-13

    Example:
        >>> normalize("6291041500213")
        '16291041500210'
    """
    gtin_format = validate(code)
    if gtin_format is not GtinFormat.GTIN_13:
        raise InvalidFormat(f"Only GTIN-13 can be normalized, got {gtin_format.label}")

    trimmed = strip_whitespace(code)
    return generate(GTIN14_INDICATOR + trimmed[:-1])
