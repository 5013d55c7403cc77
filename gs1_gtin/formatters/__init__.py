"""
Output formatters for GTIN inspection.
"""

from .json_formatter import (
    GtinReport,
    inspect_gtin,
    inspect_gtin_to_json,
    inspect_gtin_to_dict,
    format_gtin_report_json,
)

__all__ = [
    "GtinReport",
    "inspect_gtin",
    "inspect_gtin_to_json",
    "inspect_gtin_to_dict",
    "format_gtin_report_json",
]
