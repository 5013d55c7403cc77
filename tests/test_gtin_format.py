"""
Tests for GTIN format validation and GTIN-13 to GTIN-14 normalization.

Tests cover:
- Classification of GTIN-8, GTIN-12, GTIN-13 and GTIN-14
- Whitespace trimming
- Character, length and check digit failures
- Normalization domain and check digit recomputation
"""

import pytest
from gs1_gtin import (
    GtinFormat,
    InvalidCharacters,
    InvalidCheckDigit,
    InvalidFormat,
    InvalidLength,
    normalize,
    validate,
)


class TestGtinFormat:
    """Tests for the GtinFormat enumeration."""

    def test_lengths(self):
        """Test each format is tied to its length."""
        assert [f.length for f in GtinFormat] == [8, 12, 13, 14]

    def test_from_length(self):
        """Test lookup by length."""
        assert GtinFormat.from_length(8) is GtinFormat.GTIN_8
        assert GtinFormat.from_length(14) is GtinFormat.GTIN_14
        assert GtinFormat.from_length(10) is None
        assert GtinFormat.from_length(0) is None

    def test_label(self):
        """Test display labels."""
        assert GtinFormat.GTIN_13.label == "GTIN-13"


class TestValidate:
    """Tests for validation."""

    def test_valid_formats(self):
        """Test each format is detected."""
        assert validate("96385074") is GtinFormat.GTIN_8
        assert validate("036000291452") is GtinFormat.GTIN_12
        assert validate("6291041500213") is GtinFormat.GTIN_13
        assert validate("06285096000842") is GtinFormat.GTIN_14

    def test_invalid_check_digit(self):
        """Test wrong check digits are rejected."""
        for code in ["6291041500214", "4006381333932", "036000291453", "55123458"]:
            with pytest.raises(InvalidCheckDigit):
                validate(code)

    def test_invalid_length(self):
        """Test unsupported lengths report the digit count."""
        for code, length in [("12345", 5), ("1234567890", 10), ("123456789012345", 15)]:
            with pytest.raises(InvalidLength) as exc_info:
                validate(code)
            assert exc_info.value.got == length

    def test_empty_input(self):
        """Test empty and all-whitespace input are length errors."""
        for code in ["", "   ", "\t\r\n"]:
            with pytest.raises(InvalidLength) as exc_info:
                validate(code)
            assert exc_info.value == InvalidLength(got=0)

    def test_invalid_characters(self):
        """Test non-digit characters are rejected before length."""
        for code in ["40063813339A1", "4006 381333931", "4006-381333931", "abc"]:
            with pytest.raises(InvalidCharacters):
                validate(code)

    def test_whitespace_trimmed(self):
        """Test surrounding ASCII whitespace is ignored."""
        padding = [" ", "  ", "\t", "\n", "\r\n", " \t\r\n "]
        for gtin in ["96385074", "036000291452", "6291041500213", "06285096000842"]:
            expected = validate(gtin)
            for left in padding:
                for right in ["", " ", "\n"]:
                    assert validate(left + gtin + right) is expected

    def test_repeated_calls_agree(self):
        """Test validation is pure."""
        results = {validate("5901234123457") for _ in range(5)}
        assert results == {GtinFormat.GTIN_13}

    def test_error_order(self):
        """Test characters are checked before length, length before check digit."""
        with pytest.raises(InvalidCharacters):
            validate("12X")
        with pytest.raises(InvalidLength):
            validate("1234567")


class TestNormalize:
    """Tests for GTIN-13 to GTIN-14 normalization."""

    def test_normalize_gtin13(self):
        """Test indicator digit 1 is added and the check digit recomputed."""
        assert normalize("6291041500213") == "16291041500210"
        assert normalize("4006381333931") == "14006381333938"

    def test_normalize_trims_whitespace(self):
        """Test surrounding whitespace does not reach the output."""
        assert normalize("  6291041500213\n") == "16291041500210"

    def test_result_is_valid_gtin14(self):
        """Test normalized output validates as GTIN-14."""
        for gtin in ["6291041500213", "4006381333931", "5901234123457", "9780306406157"]:
            gtin14 = normalize(gtin)
            assert len(gtin14) == 14
            assert gtin14.startswith("1")
            assert gtin14[1:13] == gtin[:12]
            assert validate(gtin14) is GtinFormat.GTIN_14

    def test_other_formats_rejected(self):
        """Test only GTIN-13 can be normalized."""
        for code in ["96385074", "036000291452", "06285096000842"]:
            with pytest.raises(InvalidFormat):
                normalize(code)

    def test_validation_errors_propagate(self):
        """Test validation failures come through unchanged."""
        with pytest.raises(InvalidCheckDigit):
            normalize("6291041500214")
        with pytest.raises(InvalidCharacters):
            normalize("629104150021X")
        with pytest.raises(InvalidLength) as exc_info:
            normalize("")
        assert exc_info.value.got == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
