"""Tests for number pattern and digits-info parsing."""

import pytest

from localeengine.diagnostics import NumberFormatConfigError
from localeengine.formatting.number_pattern import (
    DigitsInfo,
    NumberPattern,
    parse_digits_info,
    parse_number_pattern,
)
from localeengine.formatting.options import NumberFormatOptions


class TestParseNumberPattern:
    """Test the CLDR pattern subset."""

    def test_decimal(self) -> None:
        """The standard decimal pattern."""
        assert parse_number_pattern("#,##0.###") == NumberPattern(
            min_integer_digits=1,
            min_fraction_digits=0,
            max_fraction_digits=3,
            primary_grouping=3,
            secondary_grouping=3,
        )

    def test_percent_suffix(self) -> None:
        """Text after the digits becomes the suffix."""
        pattern = parse_number_pattern("#,##0 %")
        assert pattern.positive_suffix == " %"
        assert pattern.negative_prefix == "-"
        assert pattern.negative_suffix == " %"

    def test_currency_prefix(self) -> None:
        """The currency placeholder is kept in the prefix."""
        pattern = parse_number_pattern("¤#,##0.00")
        assert pattern.positive_prefix == "¤"
        assert pattern.negative_prefix == "-¤"
        assert (pattern.min_fraction_digits, pattern.max_fraction_digits) == (2, 2)

    def test_explicit_negative_subpattern(self) -> None:
        """A ';' subpattern supplies the negative affixes."""
        pattern = parse_number_pattern("¤ #,##0.00;¤-#,##0.00")
        assert pattern.positive_prefix == "¤ "
        assert pattern.negative_prefix == "¤-"

    def test_locale_minus_sign(self) -> None:
        """The implicit negative prefix uses the locale minus sign."""
        assert parse_number_pattern("#,##0", "−").negative_prefix == "−"

    def test_indian_grouping(self) -> None:
        """Primary and secondary group sizes may differ."""
        pattern = parse_number_pattern("#,##,##0.###")
        assert (pattern.primary_grouping, pattern.secondary_grouping) == (3, 2)

    def test_no_grouping(self) -> None:
        """Without a group separator grouping is off."""
        assert parse_number_pattern("0.00").primary_grouping == 0

    def test_min_integer_digits(self) -> None:
        """Each integer zero is a mandatory digit."""
        assert parse_number_pattern("000.#").min_integer_digits == 3

    def test_scientific(self) -> None:
        """#E0 shows every significant mantissa digit."""
        pattern = parse_number_pattern("#E0")
        assert pattern.is_scientific
        assert pattern.min_exponent_digits == 1
        assert pattern.max_fraction_digits is None
        assert not pattern.exponent_plus

    def test_scientific_with_plus_and_width(self) -> None:
        """E+00 forces a plus sign and two exponent digits."""
        pattern = parse_number_pattern("0.00E+00")
        assert pattern.exponent_plus
        assert pattern.min_exponent_digits == 2
        assert pattern.max_fraction_digits == 2

    def test_letter_e_in_suffix_is_literal(self) -> None:
        """An E not followed by 0 or + stays in the affix."""
        pattern = parse_number_pattern("#,##0 EUR")
        assert not pattern.is_scientific
        assert pattern.positive_suffix == " EUR"

    def test_quoted_affix(self) -> None:
        """Quotes are removed and '' is a literal quote."""
        assert parse_number_pattern("#0' o''clock'").positive_suffix == " o'clock"


class TestParseDigitsInfo:
    """Test the {minInt}.{minFrac}-{maxFrac} mini-language."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1.0-3", DigitsInfo(1, 0, 3)),
            ("1.2", DigitsInfo(1, 2, None)),
            ("3.", DigitsInfo(3, None, None)),
            (".1-2", DigitsInfo(None, 1, 2)),
        ],
    )
    def test_valid(self, text: str, expected: DigitsInfo) -> None:
        """Absent parts are None."""
        assert parse_digits_info(text) == expected

    @pytest.mark.parametrize("text", ["1", "a.b", "1.2-", "-1.0-2", ""])
    def test_invalid(self, text: str) -> None:
        """Anything else is a configuration error."""
        with pytest.raises(NumberFormatConfigError, match="is not a valid digit info"):
            parse_digits_info(text)


class TestNumberFormatOptions:
    """Test option validation."""

    def test_negative_rejected(self) -> None:
        """Negative digit counts are rejected at construction."""
        with pytest.raises(NumberFormatConfigError, match="non-negative"):
            NumberFormatOptions(min_integer_digits=-1)

    def test_inverted_rejected(self) -> None:
        """min above max is rejected at construction."""
        with pytest.raises(NumberFormatConfigError, match="higher than the maximum"):
            NumberFormatOptions(min_fraction_digits=3, max_fraction_digits=1)

    def test_from_digits_info(self) -> None:
        """Digits info fills the digit counts."""
        options = NumberFormatOptions.from_digits_info("2.1-4", currency_code="EUR")
        assert options == NumberFormatOptions(2, 1, 4, "EUR")

    def test_from_digits_info_inverted(self) -> None:
        """Inverted digits info is rejected."""
        with pytest.raises(NumberFormatConfigError):
            NumberFormatOptions.from_digits_info("1.3-1")
