"""Tests for number, percent, currency and scientific formatting.

Covers rounding, grouping, fraction bounds, signs, non-finite values, the
exponent switch for very large numbers, and locale symbol substitution.
"""

from dataclasses import replace
from decimal import ROUND_HALF_UP, Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from localeengine.data.descriptor import LocaleDescriptor
from localeengine.diagnostics import (
    InvalidNumberError,
    LocaleDataError,
    LocaleNotFoundError,
    NumberFormatConfigError,
)
from localeengine.enums import CurrencyDisplay, NumberFormatStyle, NumberSymbol
from localeengine.formatting import (
    NumberFormatOptions,
    format_currency,
    format_number,
    format_percent,
    format_scientific,
    render_number,
)
from localeengine.runtime.registry import LocaleRegistry

NBSP = "\u00a0"
NNBSP = "\u202f"


class TestFormatNumber:
    """Test decimal formatting in English."""

    @pytest.mark.parametrize(
        ("value", "digits_info", "expected"),
        [
            (1234567.5, None, "1,234,567.5"),
            (1234.5678, "1.0-2", "1,234.57"),
            (1234.5678, None, "1,234.568"),
            (0, None, "0"),
            (999, None, "999"),
            (1000, None, "1,000"),
            (5, "3.2", "005.00"),
            (0.5, "1.0-0", "1"),
            (2.5, "1.0-0", "3"),
            (1.005, "1.0-2", "1.01"),
            (Decimal("1.50"), "1.0-3", "1.5"),
            ("42.10", None, "42.1"),
            (-1234.5, None, "-1,234.5"),
        ],
    )
    def test_english(self, value: object, digits_info: str | None, expected: str) -> None:
        """Rounding is half away from zero on the visible decimal digits."""
        assert format_number(value, "en", digits_info) == expected  # type: ignore[arg-type]

    def test_min_fraction_raises_pattern_max(self) -> None:
        """A minimum above the pattern maximum widens the maximum."""
        assert format_number(1.5, "en", "1.5") == "1.50000"

    def test_rounds_to_zero_is_unsigned(self) -> None:
        """A negative value that rounds to zero has no minus sign."""
        assert format_number(-0.0001, "en") == "0"
        assert format_number(Decimal("-0"), "en") == "0"

    def test_nan_and_infinity(self) -> None:
        """Non-finite values use the locale symbols."""
        assert format_number(float("nan"), "en") == "NaN"
        assert format_number(float("inf"), "en") == "∞"
        assert format_number(float("-inf"), "en") == "-∞"

    def test_huge_values_switch_to_exponent(self) -> None:
        """Twenty-two or more integer digits print with an exponent."""
        assert format_number(1e21, "en") == "1,000,000,000,000,000,000,000"
        assert format_number(1e22, "en") == "1E+22"
        assert format_number(Decimal("12345E+20"), "en") == "1.235E+24"

    @pytest.mark.parametrize("value", ["1e1000000", Decimal("1E+1000000"), "-1e-10000000"])
    def test_out_of_range_raises(self, value: object) -> None:
        """Exponents past the supported bound raise InvalidNumberError."""
        with pytest.raises(InvalidNumberError, match="out of range"):
            format_number(value, "en")  # type: ignore[arg-type]

    def test_range_boundary(self) -> None:
        """Values at the bound still format."""
        assert format_number(Decimal("1E+1000"), "en") == "1E+1000"
        assert format_number("1e-1000", "en") == "0"

    def test_long_values_rounded_once(self) -> None:
        """Values longer than 28 digits round only to the pattern's places."""
        assert format_number(Decimal("1.00049999999999999999999999999"), "en") == "1"
        assert format_number(Decimal("-1.00049999999999999999999999999"), "en") == "-1"

    def test_invalid_input(self) -> None:
        """Non-numeric strings raise InvalidNumberError."""
        with pytest.raises(InvalidNumberError, match="abc is not a number"):
            format_number("abc", "en")

    def test_invalid_digits_info(self) -> None:
        """Malformed digits info raises a configuration error."""
        with pytest.raises(NumberFormatConfigError):
            format_number(1, "en", "x")

    def test_unknown_locale(self) -> None:
        """Unregistered locales raise LocaleNotFoundError."""
        with pytest.raises(LocaleNotFoundError):
            format_number(1, "xx")

    @given(st.integers(min_value=-(10**21), max_value=10**21))
    def test_grouping_preserves_digits(self, value: int) -> None:
        """Removing group separators gives back the integer."""
        assert format_number(value, "en").replace(",", "") == str(value)

    @given(
        st.decimals(
            min_value=-(10**12), max_value=10**12, allow_nan=False, allow_infinity=False, places=6
        )
    )
    def test_rounding_matches_decimal_quantize(self, value: Decimal) -> None:
        """Output equals the value rounded half-up to three places."""
        expected = value.quantize(Decimal("0.001"), rounding=ROUND_HALF_UP)
        assert Decimal(format_number(value, "en").replace(",", "")) == expected


class TestLocaleSymbols:
    """Test symbol substitution in other locales."""

    def test_french(self, bundled_registry: LocaleRegistry) -> None:
        """French groups with a narrow no-break space and uses a decimal comma."""
        result = format_number(1234567.891, "fr", registry=bundled_registry)
        assert result == f"1{NNBSP}234{NNBSP}567,891"

    def test_swiss_german(self, bundled_registry: LocaleRegistry) -> None:
        """Swiss German groups with an apostrophe."""
        result = format_number(1234567.891, "de-CH", registry=bundled_registry)
        assert result == "1’234’567.891"

    def test_ukrainian_negative(self, bundled_registry: LocaleRegistry) -> None:
        """Ukrainian groups with a no-break space."""
        assert format_number(-1234.5, "uk", registry=bundled_registry) == f"-1{NBSP}234,5"

    def test_custom_minus_sign(self, en: LocaleDescriptor) -> None:
        """The locale minus sign replaces the ASCII hyphen."""
        symbols = list(en.number_symbols)
        symbols[NumberSymbol.MINUS_SIGN] = "−"
        minus = replace(en, number_symbols=tuple(symbols))
        assert render_number(-5, minus) == "−5"
        assert render_number(float("-inf"), minus) == "−∞"

    def test_parent_fallback(self, bundled_registry: LocaleRegistry) -> None:
        """A regional id formats with its parent's data."""
        assert format_number(0.5, "fr-CA", registry=bundled_registry) == "0,5"


class TestFormatPercent:
    """Test percent formatting."""

    @pytest.mark.parametrize(
        ("value", "digits_info", "expected"),
        [
            (0.256, None, "26%"),
            (1, None, "100%"),
            (-0.5, None, "-50%"),
            (0.1234, "1.1-1", "12.3%"),
            (12.5, None, "1,250%"),
        ],
    )
    def test_english(self, value: float, digits_info: str | None, expected: str) -> None:
        """The value is scaled by 100 before formatting."""
        assert format_percent(value, "en", digits_info) == expected

    def test_french_spacing(self, bundled_registry: LocaleRegistry) -> None:
        """French separates the sign with a no-break space."""
        assert format_percent(0.5, "fr", registry=bundled_registry) == f"50{NBSP}%"

    def test_nan(self) -> None:
        """NaN is not scaled."""
        assert format_percent(float("nan"), "en") == "NaN%"


class TestFormatCurrency:
    """Test currency formatting."""

    @pytest.mark.parametrize(
        ("value", "code", "display", "expected"),
        [
            (1234.5, "USD", CurrencyDisplay.SYMBOL, "$1,234.50"),
            (-1234.5, "USD", CurrencyDisplay.SYMBOL, "-$1,234.50"),
            (5, "EUR", CurrencyDisplay.SYMBOL, "€5.00"),
            (1234.5, "JPY", CurrencyDisplay.SYMBOL, "¥1,235"),
            (5, "CAD", CurrencyDisplay.SYMBOL, "CA$5.00"),
            (5, "CAD", CurrencyDisplay.NARROW_SYMBOL, "$5.00"),
            (5, "USD", CurrencyDisplay.CODE, "USD5.00"),
            (5, "USD", "US$", "US$5.00"),
            (5, "XYZ", CurrencyDisplay.SYMBOL, "XYZ5.00"),
            (Decimal("1.234"), "BHD", CurrencyDisplay.SYMBOL, "BHD1.234"),
        ],
    )
    def test_english(
        self, value: object, code: str, display: CurrencyDisplay | str, expected: str
    ) -> None:
        """Fraction digits follow the currency, symbols follow the display."""
        assert format_currency(value, "en", code, display) == expected  # type: ignore[arg-type]

    def test_digits_info_overrides_currency_digits(self) -> None:
        """Caller digits replace the currency's own."""
        assert format_currency(5, "en", "USD", digits_info="1.0-0") == "$5"

    def test_name_display_is_spaced(self, bundled_registry: LocaleRegistry) -> None:
        """Spelled-out names get a no-break space only where they touch the number."""
        assert format_currency(1, "en", "USD", CurrencyDisplay.NAME) == f"US Dollar{NBSP}1.00"
        assert format_currency(-5, "en", "USD", CurrencyDisplay.NAME) == f"-US Dollar{NBSP}5.00"
        assert (
            format_currency(5, "fr", "EUR", CurrencyDisplay.NAME, registry=bundled_registry)
            == f"5,00{NBSP}euro"
        )

    def test_swiss_german(self, bundled_registry: LocaleRegistry) -> None:
        """de-CH has an explicit negative subpattern."""
        assert (
            format_currency(1234.5, "de-CH", "CHF", registry=bundled_registry)
            == f"CHF{NBSP}1’234.50"
        )
        assert (
            format_currency(-1234.5, "de-CH", "CHF", registry=bundled_registry)
            == "CHF-1’234.50"
        )

    def test_locale_entry_without_symbol_uses_code(self, bundled_registry: LocaleRegistry) -> None:
        """An empty locale entry overrides the global symbol with the code."""
        assert format_currency(5, "de-CH", "EUR", registry=bundled_registry) == f"EUR{NBSP}5.00"

    def test_currency_after_number(self, bundled_registry: LocaleRegistry) -> None:
        """French and Ukrainian place the symbol after the amount."""
        assert (
            format_currency(1234.5, "fr", "EUR", registry=bundled_registry)
            == f"1{NNBSP}234,50{NBSP}€"
        )
        assert (
            format_currency(1234.5, "uk", "UAH", registry=bundled_registry)
            == f"1{NBSP}234,50{NBSP}₴"
        )

    def test_locale_symbol_override(self, bundled_registry: LocaleRegistry) -> None:
        """The locale table wins over the global table."""
        assert format_currency(5, "fr", "USD", registry=bundled_registry) == f"5,00{NBSP}$US"

    def test_currency_code_required(self, en: LocaleDescriptor) -> None:
        """Currency style without a code is a configuration error."""
        with pytest.raises(NumberFormatConfigError, match="requires an ISO 4217 currency code"):
            render_number(5, en, NumberFormatStyle.CURRENCY)

    def test_inverted_effective_bounds(self, en: LocaleDescriptor) -> None:
        """A maximum below the currency minimum is rejected."""
        options = NumberFormatOptions(max_fraction_digits=1, currency_code="USD")
        with pytest.raises(NumberFormatConfigError, match="higher than the maximum"):
            render_number(5, en, NumberFormatStyle.CURRENCY, options)


class TestFormatScientific:
    """Test scientific formatting."""

    @pytest.mark.parametrize(
        ("value", "digits_info", "expected"),
        [
            (1234, None, "1.234E3"),
            (-1234, None, "-1.234E3"),
            (0.00012, None, "1.2E-4"),
            (0, None, "0E0"),
            (1234, "1.0-2", "1.23E3"),
            (9999, "1.0-2", "1E4"),
        ],
    )
    def test_english(self, value: float, digits_info: str | None, expected: str) -> None:
        """The mantissa is normalized to [1, 10)."""
        assert format_scientific(value, "en", digits_info) == expected

    def test_padded_exponent_with_plus(self, en: LocaleDescriptor) -> None:
        """E+00 pads the exponent and shows its sign."""
        formats = (*en.number_formats[:3], "0.00E+00")
        custom = replace(en, number_formats=formats)
        assert render_number(1234, custom, NumberFormatStyle.SCIENTIFIC) == "1.23E+03"
        assert render_number(0.0012, custom, NumberFormatStyle.SCIENTIFIC) == "1.20E-03"

    def test_missing_pattern(self, en: LocaleDescriptor) -> None:
        """A locale without a scientific pattern raises LocaleDataError."""
        custom = replace(en, number_formats=en.number_formats[:3])
        with pytest.raises(LocaleDataError, match="scientific number format"):
            render_number(1, custom, NumberFormatStyle.SCIENTIFIC)
