"""
Core GTIN modules: digit parsing, check digits and format validation.
"""

from .digits import parse_digits, DigitSequence, NUMERIC
from .check_digit import calculate_check_digit_mod10, generate
from .gtin_format import GtinFormat, validate, normalize, strip_whitespace

__all__ = [
    "parse_digits",
    "DigitSequence",
    "NUMERIC",
    "calculate_check_digit_mod10",
    "generate",
    "GtinFormat",
    "validate",
    "normalize",
    "strip_whitespace",
]
