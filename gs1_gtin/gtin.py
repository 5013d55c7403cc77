"""
Validated GTIN value.
"""

from __future__ import annotations

from .core.gtin_format import GtinFormat, validate


_FACTORY_TOKEN = object()


class Gtin:
    """
    A GTIN string that has passed validation, paired with its format.

    Create instances with Gtin.from_string(); the constructor is private.
    The stored string is exactly what the caller passed, surrounding
    whitespace included.
    """

    __slots__ = ('_code', '_format')

    def __init__(self, code: str, gtin_format: GtinFormat, _token: object = None):
        if _token is not _FACTORY_TOKEN:
            raise TypeError("Gtin instances must be created with Gtin.from_string()")
        object.__setattr__(self, '_code', code)
        object.__setattr__(self, '_format', gtin_format)

    @classmethod
    def from_string(cls, code: str) -> 'Gtin':
        """
        Validate ``code`` and wrap it.

        Raises:
            GtinError: Whatever validate() raises for ``code``
        """
        gtin_format = validate(code)
        return cls(code, gtin_format, _token=_FACTORY_TOKEN)

    def to_string(self) -> str:
        """Return the code exactly as passed to from_string()."""
        return self._code

    @property
    def format(self) -> GtinFormat:
        """Format detected during validation."""
        return self._format

    def __reduce__(self):
        # copy/deepcopy/pickle rebuild through validation
        return (Gtin.from_string, (self._code,))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Gtin is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Gtin is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Gtin):
            return NotImplemented
        return self._code == other._code and self._format is other._format

    def __hash__(self) -> int:
        return hash((self._code, self._format))

    def __str__(self) -> str:
        return self._code

    def __repr__(self) -> str:
        return f"Gtin({self._code!r}, {self._format.label})"
