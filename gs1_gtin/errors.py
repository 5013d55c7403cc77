"""
GTIN error taxonomy.

Every failure in this package is one of five exceptions, all derived from
GtinError (and therefore from ValueError):

- InvalidLength(got): digit count matches no accepted length
- InvalidCharacters: a character is not an ASCII decimal digit
- InvalidCheckDigit: trailing digit fails GS1 Mod-10 verification
- NoGs1PrefixFound: no 2- or 3-digit GS1 prefix matches
- InvalidFormat: operation not supported for the detected format

Errors compare by code, then payload, so they can be matched as values.
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple


class ErrorCode(str, Enum):
    """Error codes."""
    INVALID_LENGTH = "INVALID_LENGTH"
    INVALID_CHARACTERS = "INVALID_CHARACTERS"
    INVALID_CHECK_DIGIT = "INVALID_CHECK_DIGIT"
    NO_GS1_PREFIX_FOUND = "NO_GS1_PREFIX_FOUND"
    INVALID_FORMAT = "INVALID_FORMAT"


class GtinError(ValueError):
    """Base class for all GTIN errors."""

    code: ErrorCode
    default_message = "Invalid GTIN"

    def __init__(self, message: str = ""):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)

    def _payload(self) -> Tuple:
        return ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GtinError):
            return NotImplemented
        return self.code == other.code and self._payload() == other._payload()

    def __hash__(self) -> int:
        return hash((self.code, self._payload()))

    def __reduce__(self):
        return (type(self), (str(self),))


class InvalidLength(GtinError):
    """Digit count does not match any accepted length."""

    code = ErrorCode.INVALID_LENGTH

    def __init__(self, got: int):
        self.got = got
        super().__init__(f"Invalid length: got {got} digits")

    def _payload(self) -> Tuple:
        return (self.got,)

    def __repr__(self) -> str:
        return f"InvalidLength(got={self.got})"

    def __reduce__(self):
        return (type(self), (self.got,))


class InvalidCharacters(GtinError):
    """Input contains a character outside '0'-'9'."""

    code = ErrorCode.INVALID_CHARACTERS
    default_message = "Input contains non-digit characters"


class InvalidCheckDigit(GtinError):
    """Trailing digit does not match the computed Mod-10 check digit."""

    code = ErrorCode.INVALID_CHECK_DIGIT
    default_message = "Check digit does not match"


class NoGs1PrefixFound(GtinError):
    """No GS1 prefix entry matches the leading digits."""

    code = ErrorCode.NO_GS1_PREFIX_FOUND
    default_message = "No GS1 prefix found"


class InvalidFormat(GtinError):
    """Operation is not supported for the detected GTIN format."""

    code = ErrorCode.INVALID_FORMAT
    default_message = "Operation not supported for this GTIN format"
