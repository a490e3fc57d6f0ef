"""Tests for the locale data accessors."""

from dataclasses import replace

import pytest

from localeengine.data.descriptor import DayPeriodRule, LocaleDescriptor
from localeengine.diagnostics import LocaleDataError, LocaleNotFoundError
from localeengine.enums import (
    Direction,
    FormatWidth,
    FormStyle,
    NumberFormatStyle,
    NumberSymbol,
    Plural,
    TranslationWidth,
    WeekDay,
)
from localeengine.locale_data import (
    get_locale_currencies,
    get_locale_currency_code,
    get_locale_currency_name,
    get_locale_currency_symbol,
    get_locale_date_format,
    get_locale_date_time_format,
    get_locale_day_names,
    get_locale_day_periods,
    get_locale_direction,
    get_locale_era_names,
    get_locale_extra_day_period_rules,
    get_locale_extra_day_periods,
    get_locale_first_day_of_week,
    get_locale_id,
    get_locale_month_names,
    get_locale_number_format,
    get_locale_number_symbol,
    get_locale_plural_case,
    get_locale_time_format,
    get_locale_weekend_range,
    register_locale_data,
)
from localeengine.runtime.registry import LocaleRegistry, get_default_registry


class TestNames:
    """Test name tables and sibling fallback."""

    def test_day_names(self) -> None:
        """Weekdays start on Sunday."""
        names = get_locale_day_names("en", FormStyle.FORMAT, TranslationWidth.WIDE)
        assert names[0] == "Sunday"
        assert len(names) == 7

    def test_standalone_falls_back_to_format(self) -> None:
        """A missing standalone table uses the format table."""
        assert get_locale_day_names(
            "en", FormStyle.STANDALONE, TranslationWidth.SHORT
        ) == get_locale_day_names("en", FormStyle.FORMAT, TranslationWidth.SHORT)

    def test_month_names(self) -> None:
        """Months start on January."""
        narrow = get_locale_month_names("en", FormStyle.FORMAT, TranslationWidth.NARROW)
        wide = get_locale_month_names("en", FormStyle.FORMAT, TranslationWidth.WIDE)
        assert narrow[0] == "J"
        assert wide[-1] == "December"

    def test_missing_width_uses_narrower(self) -> None:
        """A missing width falls back to the next narrower defined one."""
        assert get_locale_day_periods("en", FormStyle.FORMAT, TranslationWidth.WIDE) == (
            "AM",
            "PM",
        )

    def test_era_names(self, bundled_registry: LocaleRegistry) -> None:
        """Eras are (before, after) the epoch."""
        assert get_locale_era_names("en", TranslationWidth.ABBREVIATED) == ("BC", "AD")
        assert get_locale_era_names(
            "de-CH", TranslationWidth.WIDE, registry=bundled_registry
        ) == ("v. Chr.", "n. Chr.")


class TestCalendar:
    """Test week data and patterns."""

    def test_first_day_of_week(self, bundled_registry: LocaleRegistry) -> None:
        """First days come back as WeekDay members."""
        assert get_locale_first_day_of_week("en") is WeekDay.SUNDAY
        assert get_locale_first_day_of_week("fr", bundled_registry) is WeekDay.MONDAY

    def test_weekend_range(self) -> None:
        """Weekends are inclusive (start, end) pairs."""
        assert get_locale_weekend_range("en") == (WeekDay.SATURDAY, WeekDay.SUNDAY)

    def test_patterns(self) -> None:
        """Date, time and combiner patterns by width."""
        assert get_locale_date_format("en", FormatWidth.MEDIUM) == "MMM d, y"
        assert get_locale_time_format("en", FormatWidth.SHORT) == "h:mm a"
        assert get_locale_date_time_format("en", FormatWidth.LONG) == "{1} 'at' {0}"

    def test_combiner_falls_back(self) -> None:
        """An undefined combiner uses the nearest narrower one."""
        assert get_locale_date_time_format("en", FormatWidth.FULL) == "{1} 'at' {0}"


class TestNumbersAndCurrencies:
    """Test number symbols, patterns and currency data."""

    def test_number_symbols(self, bundled_registry: LocaleRegistry) -> None:
        """Symbols come from the locale."""
        assert get_locale_number_symbol("fr", NumberSymbol.DECIMAL, bundled_registry) == ","
        assert get_locale_number_symbol("en", NumberSymbol.NAN) == "NaN"

    def test_currency_symbols_fall_back(self) -> None:
        """Currency decimal and group fall back to decimal and group."""
        assert get_locale_number_symbol("en", NumberSymbol.CURRENCY_DECIMAL) == "."
        assert get_locale_number_symbol("en", NumberSymbol.CURRENCY_GROUP) == ","

    def test_number_formats(self) -> None:
        """Patterns by style."""
        assert get_locale_number_format("en", NumberFormatStyle.DECIMAL) == "#,##0.###"
        assert get_locale_number_format("en", NumberFormatStyle.CURRENCY) == "¤#,##0.00"

    def test_missing_number_format(self, en: LocaleDescriptor) -> None:
        """A style past the locale's patterns raises LocaleDataError."""
        registry = LocaleRegistry()
        registry.register(replace(en, number_formats=en.number_formats[:3]))
        with pytest.raises(LocaleDataError, match="scientific number format"):
            get_locale_number_format("en", NumberFormatStyle.SCIENTIFIC, registry)

    def test_currency_fields(self, bundled_registry: LocaleRegistry) -> None:
        """The locale's own currency."""
        assert get_locale_currency_code("fr", bundled_registry) == "EUR"
        assert get_locale_currency_symbol("fr", bundled_registry) == "€"
        assert get_locale_currency_name("en") == "US Dollar"

    def test_currencies_read_only(self, bundled_registry: LocaleRegistry) -> None:
        """The currency table cannot be mutated."""
        currencies = get_locale_currencies("fr", bundled_registry)
        assert currencies["USD"].symbol == "$US"
        with pytest.raises(TypeError):
            currencies["USD"] = currencies["CAD"]  # type: ignore[index]


class TestLocaleLevel:
    """Test id, direction and plural rule accessors."""

    def test_locale_id_resolution(self) -> None:
        """Regional ids resolve to their registered parent."""
        assert get_locale_id("en-US") == "en"
        assert get_locale_id("EN_gb") == "en"

    def test_direction(self) -> None:
        """Direction is a Direction member."""
        assert get_locale_direction("en") is Direction.LTR

    def test_plural_case(self, bundled_registry: LocaleRegistry) -> None:
        """The plural rule is callable on numbers."""
        assert get_locale_plural_case("en")(1) is Plural.ONE
        assert get_locale_plural_case("uk", bundled_registry)(5) is Plural.MANY

    def test_unknown_locale(self) -> None:
        """Accessors raise when nothing in the chain is registered."""
        with pytest.raises(LocaleNotFoundError):
            get_locale_direction("xx-YY")


class TestExtraDayPeriods:
    """Test extended day period accessors."""

    def test_thai_names_and_rules(self, bundled_registry: LocaleRegistry) -> None:
        """Names align with rules."""
        names = get_locale_extra_day_periods(
            "th", FormStyle.FORMAT, TranslationWidth.ABBREVIATED, bundled_registry
        )
        rules = get_locale_extra_day_period_rules("th", bundled_registry)
        assert len(names) == len(rules) == 8
        assert rules[0] == DayPeriodRule(0)
        assert rules[-1] == DayPeriodRule(21 * 60, 6 * 60)

    def test_missing_extra_raises(self) -> None:
        """Locales without extended data raise LocaleDataError."""
        with pytest.raises(LocaleDataError, match='Missing extra locale data for the locale "en"'):
            get_locale_extra_day_periods("en", FormStyle.FORMAT, TranslationWidth.WIDE)
        with pytest.raises(LocaleDataError):
            get_locale_extra_day_period_rules("en")

    def test_empty_names(self, en: LocaleDescriptor) -> None:
        """Extended data without names for a width gives an empty tuple."""
        registry = LocaleRegistry()
        registry.register(en, extra=[[[]], None, []])
        assert (
            get_locale_extra_day_periods(
                "en", FormStyle.FORMAT, TranslationWidth.WIDE, registry
            )
            == ()
        )


class TestRegisterLocaleData:
    """Test registration through the accessor module."""

    def test_registers_in_default_registry(self) -> None:
        """Without a registry the shared one is used."""
        from localeengine.data.locales.fr import LOCALE_DATA  # noqa: PLC0415

        stored = register_locale_data(LOCALE_DATA, "fr-CA")
        assert stored.locale_id == "fr"
        assert "fr-ca" in get_default_registry()
        assert get_locale_id("fr-CA") == "fr"

    def test_registers_in_given_registry(self, en: LocaleDescriptor) -> None:
        """A given registry receives the data."""
        registry = LocaleRegistry()
        register_locale_data(en, registry=registry)
        assert get_locale_id("en-AU", registry) == "en"
