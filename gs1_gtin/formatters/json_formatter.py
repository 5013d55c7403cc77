"""
JSON Formatter for GTIN inspection

Collects everything known about a code into one report:
- Validity and detected format
- Issuing GS1 Member Organization
- GTIN-14 form (for GTIN-13 and GTIN-14 inputs)
- Error code and message for invalid input
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..api import gs1_prefix_country, normalize, validate
from ..core.gtin_format import GtinFormat, strip_whitespace
from ..errors import GtinError, NoGs1PrefixFound


@dataclass
class GtinReport:
    """
    Inspection result for a single code.

    Attributes:
        raw: Original input string
        valid: Whether the code is a valid GTIN
        format: Detected format (valid codes only)
        gs1_prefix_country: Issuing organization, if the prefix is allocated
        gtin14: GTIN-14 form for GTIN-13 and GTIN-14 codes
        error_code: ErrorCode value of the validation failure
        errors: Validation error messages
        warnings: Non-fatal findings (e.g. unallocated prefix)
    """
    raw: str
    valid: bool
    format: Optional[GtinFormat] = None
    gs1_prefix_country: Optional[str] = None
    gtin14: Optional[str] = None
    error_code: Optional[str] = None
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'raw': self.raw,
            'valid': self.valid,
            'format': self.format.label if self.format else None,
            'gs1_prefix_country': self.gs1_prefix_country,
            'gtin14': self.gtin14,
            'error_code': self.error_code,
            'errors': list(self.errors),
            'warnings': list(self.warnings),
        }


def inspect_gtin(code: str) -> GtinReport:
    """
    Inspect a code without raising for invalid input.

    Args:
        code: Candidate GTIN, surrounding whitespace allowed

    Returns:
        GtinReport describing the code
    """
    report = GtinReport(raw=code, valid=False)

    try:
        report.format = validate(code)
    except GtinError as e:
        report.error_code = e.code.value
        report.errors.append(str(e))
        return report

    report.valid = True
    trimmed = strip_whitespace(code)

    try:
        report.gs1_prefix_country = gs1_prefix_country(trimmed)
    except NoGs1PrefixFound as e:
        report.warnings.append(str(e))

    if report.format is GtinFormat.GTIN_13:
        report.gtin14 = normalize(code)
    elif report.format is GtinFormat.GTIN_14:
        report.gtin14 = trimmed

    return report


def format_gtin_report_json(report: GtinReport, include_raw: bool = False) -> str:
    """
    Format a GtinReport as JSON with human-readable field names.

    Args:
        report: Result of inspect_gtin()
        include_raw: Include the untrimmed input as "_raw"

    Returns:
        JSON string
    """
    output: Dict[str, Any] = {
        "GTIN Code": strip_whitespace(report.raw),
        "Valid": report.valid,
    }

    if report.valid:
        output["Format"] = report.format.label
        output["GS1 Prefix Country"] = report.gs1_prefix_country
        if report.gtin14:
            output["GTIN-14"] = report.gtin14
    else:
        output["_error"] = {
            "code": report.error_code,
            "message": report.errors[0] if report.errors else None,
        }

    if report.warnings:
        output["_warnings"] = list(report.warnings)

    if include_raw:
        output["_raw"] = report.raw

    return json.dumps(output, ensure_ascii=False, indent=2)


def inspect_gtin_to_json(code: str, include_raw: bool = False) -> str:
    """
    Inspect a code and return the report as JSON.

    Example:
        >>> print(inspect_gtin_to_json("6291041500213"))
        {
          "GTIN Code": "6291041500213",
          "Valid": true,
          "Format": "GTIN-13",
          "GS1 Prefix Country": "GS1 Emirates",
          "GTIN-14": "16291041500210"
        }
    """
    return format_gtin_report_json(inspect_gtin(code), include_raw=include_raw)


def inspect_gtin_to_dict(code: str) -> Dict[str, Any]:
    """Inspect a code and return the JSON report as a dictionary."""
    return json.loads(inspect_gtin_to_json(code))
