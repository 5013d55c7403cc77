"""
GS1 GTIN Toolkit

Validation, check digit generation and GTIN-13 to GTIN-14 normalization
for GTIN-8, GTIN-12, GTIN-13 and GTIN-14, plus GS1 prefix lookup.

Based on the GS1 General Specifications.
"""

from .api import (
    validate,
    generate,
    normalize,
    gs1_prefix_country,
    from_string,
    to_string,
    format,
    is_valid,
)
from .core.gtin_format import GtinFormat
from .core.check_digit import calculate_check_digit_mod10
from .core.digits import parse_digits
from .errors import (
    ErrorCode,
    GtinError,
    InvalidLength,
    InvalidCharacters,
    InvalidCheckDigit,
    NoGs1PrefixFound,
    InvalidFormat,
)
from .gtin import Gtin
from .prefixes import PrefixTable, PrefixEntry, load_prefix_table
from .formatters.json_formatter import (
    GtinReport,
    inspect_gtin,
    inspect_gtin_to_json,
    inspect_gtin_to_dict,
)

__version__ = "1.0.0"
# format() is importable but left out of __all__ so star-imports keep the builtin
__all__ = [
    "validate",
    "generate",
    "normalize",
    "gs1_prefix_country",
    "from_string",
    "to_string",
    "is_valid",
    "GtinFormat",
    "Gtin",
    "calculate_check_digit_mod10",
    "parse_digits",
    "ErrorCode",
    "GtinError",
    "InvalidLength",
    "InvalidCharacters",
    "InvalidCheckDigit",
    "NoGs1PrefixFound",
    "InvalidFormat",
    "PrefixTable",
    "PrefixEntry",
    "load_prefix_table",
    "GtinReport",
    "inspect_gtin",
    "inspect_gtin_to_json",
    "inspect_gtin_to_dict",
]
