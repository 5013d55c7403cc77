"""
Public GTIN API.

Thin entry points over the core modules. Every function either returns its
result or raises one of the GtinError subclasses from gs1_gtin.errors.
"""

from __future__ import annotations

from .core import check_digit, gtin_format
from .core.gtin_format import GtinFormat
from .errors import GtinError, NoGs1PrefixFound
from .gtin import Gtin
from .prefixes import lookup_gs1_prefix


def validate(code: str) -> GtinFormat:
    """
    Validate a GTIN-8, GTIN-12, GTIN-13 or GTIN-14.

    Surrounding ASCII whitespace is ignored.

    Raises:
        InvalidCharacters, InvalidLength, InvalidCheckDigit
    """
    return gtin_format.validate(code)


def generate(code: str) -> str:
    """
    Append a check digit to a 7, 11, 12 or 13 digit body.

    The input is not trimmed.

    Raises:
        InvalidCharacters, InvalidLength
    """
    return check_digit.generate(code)


def normalize(code: str) -> str:
    """
    Convert a GTIN-13 to a GTIN-14 (indicator digit 1, new check digit).

    Raises:
        InvalidCharacters, InvalidLength, InvalidCheckDigit, InvalidFormat
    """
    return gtin_format.normalize(code)


def gs1_prefix_country(code: str) -> str:
    """
    Return the GS1 Member Organization (or special allocation) for a code.

    Only the first 3 and 2 characters of ``code`` are looked at; the code
    is neither trimmed nor validated.

    Raises:
        NoGs1PrefixFound: If neither prefix is allocated
    """
    name = lookup_gs1_prefix(code)
    if name is None:
        raise NoGs1PrefixFound(f"No GS1 prefix found for {code[:3]!r}")
    return name


def from_string(code: str) -> Gtin:
    """Validate ``code`` and return it as a Gtin."""
    return Gtin.from_string(code)


def to_string(gtin: Gtin) -> str:
    return gtin.to_string()


def format(gtin: Gtin) -> GtinFormat:
    return gtin.format


def is_valid(code: str) -> bool:
    """Return True if ``code`` is a valid GTIN of any format."""
    try:
        gtin_format.validate(code)
    except GtinError:
        return False
    return True
