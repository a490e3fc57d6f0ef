"""Tests for the locale descriptor model and the positional literal codec."""

import copy
from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st

from localeengine.data.codec import (
    LocaleDataIndex,
    decode_extra,
    descriptor_from_positional,
    encode_extra,
)
from localeengine.data.descriptor import (
    CurrencyEntry,
    DayPeriodRule,
    FormNames,
    LocaleDescriptor,
    last_defined,
)
from localeengine.data.locales import BUNDLED_LOCALES, load_bundled_locale
from localeengine.data.locales.en import LOCALE_DATA as EN_DATA
from localeengine.data.locales.th import EXTRA_DATA as TH_EXTRA
from localeengine.diagnostics import LocaleDataError
from localeengine.enums import Direction, FormStyle, NumberSymbol, TranslationWidth


def _en_literal() -> list[Any]:
    return copy.deepcopy(EN_DATA)


class TestLastDefined:
    """Test sparse slot resolution."""

    def test_exact_slot(self) -> None:
        """A defined slot is returned as is."""
        assert last_defined(["a", "b", "c"], 1) == "b"

    def test_falls_back_to_previous(self) -> None:
        """An absent slot uses the nearest defined slot below it."""
        assert last_defined(["a", None, None], 2) == "a"

    def test_index_past_end(self) -> None:
        """Indexes past the end start from the last slot."""
        assert last_defined(["a", "b"], 3) == "b"

    def test_nothing_defined(self) -> None:
        """No defined slot raises LocaleDataError."""
        with pytest.raises(LocaleDataError, match="day names undefined"):
            last_defined([None, None], 1, locale_id="xx", what="day names")

    @given(st.lists(st.one_of(st.none(), st.integers()), min_size=1), st.integers(0, 10))
    def test_result_is_at_or_below_index(self, values: list[int | None], index: int) -> None:
        """The result is the last non-None value at or below the index."""
        candidates = [v for v in values[: index + 1] if v is not None]
        if candidates:
            assert last_defined(values, index) == candidates[-1]
        else:
            with pytest.raises(LocaleDataError):
                last_defined(values, index)


class TestFormNames:
    """Test format/standalone fallback."""

    def test_standalone_inherits_format(self) -> None:
        """A missing standalone table uses the format table."""
        names = FormNames(format=(("a",), ("b",)))
        assert names.get(FormStyle.STANDALONE, TranslationWidth.ABBREVIATED) == ("b",)

    def test_width_falls_back(self) -> None:
        """A missing wide width uses the abbreviated one."""
        names = FormNames(format=(("n",), ("abbr",), None))
        assert names.get(FormStyle.FORMAT, TranslationWidth.WIDE) == ("abbr",)

    def test_has(self) -> None:
        """has() reports whether names resolve."""
        assert FormNames(format=(("x",),)).has(FormStyle.FORMAT, TranslationWidth.SHORT)
        assert not FormNames(format=(None,)).has(FormStyle.FORMAT, TranslationWidth.NARROW)


class TestDayPeriodRule:
    """Test clock-time rules."""

    def test_point(self) -> None:
        """A point rule matches a single minute."""
        noon = DayPeriodRule.from_positional("12:00")
        assert noon.contains(720)
        assert not noon.contains(721)

    def test_range_half_open(self) -> None:
        """Ranges include the start and exclude the end."""
        morning = DayPeriodRule.from_positional(["06:00", "12:00"])
        assert morning.contains(360)
        assert morning.contains(719)
        assert not morning.contains(720)

    def test_range_wrapping_midnight(self) -> None:
        """A range ending before its start wraps past midnight."""
        night = DayPeriodRule.from_positional(["21:00", "06:00"])
        assert night.contains(23 * 60)
        assert night.contains(0)
        assert night.contains(5 * 60 + 59)
        assert not night.contains(6 * 60)
        assert not night.contains(12 * 60)

    def test_to_positional(self) -> None:
        """Rules render back to their literal form."""
        assert DayPeriodRule(0).to_positional() == "00:00"
        assert DayPeriodRule(390, 720).to_positional() == ["06:30", "12:00"]


class TestCurrencyEntry:
    """Test currency entry literals."""

    def test_partial_literal(self) -> None:
        """Missing trailing slots are None."""
        assert CurrencyEntry.from_positional(["€"]) == CurrencyEntry("€", None, None)

    def test_to_positional_trims_trailing_none(self) -> None:
        """Encoding drops trailing absent slots."""
        assert CurrencyEntry(None, "$").to_positional() == [None, "$"]
        assert CurrencyEntry().to_positional() == []


class TestDescriptorFromPositional:
    """Test decoding of locale literals."""

    def test_english(self) -> None:
        """Slots land in the matching fields."""
        en = descriptor_from_positional(EN_DATA)
        assert en.locale_id == "en"
        assert en.days.get(FormStyle.FORMAT, TranslationWidth.WIDE)[4] == "Thursday"
        assert en.weekend_range == (6, 0)
        assert en.currency_code == "USD"
        assert en.direction is Direction.LTR
        assert en.extra is None

    def test_days_standalone_inherits(self) -> None:
        """A None standalone slot inherits the format names."""
        en = descriptor_from_positional(EN_DATA)
        assert en.days.get(FormStyle.STANDALONE, TranslationWidth.ABBREVIATED)[0] == "Sun"

    def test_extra_in_slot_21(self) -> None:
        """Slot 21 carries extended day periods."""
        th = load_bundled_locale("th")
        assert th.extra is not None
        assert len(th.extra.rules) == 8

    def test_separate_extra_overrides_slot(self) -> None:
        """An extra argument is used when the literal has none."""
        en = descriptor_from_positional(EN_DATA, TH_EXTRA)
        assert en.extra == decode_extra(TH_EXTRA)

    def test_currencies_read_only(self) -> None:
        """The currencies mapping cannot be mutated."""
        en = descriptor_from_positional(EN_DATA)
        with pytest.raises(TypeError):
            en.currencies["XYZ"] = CurrencyEntry()  # type: ignore[index]

    def test_currency_decimal_falls_back(self) -> None:
        """Currency decimal and group fall back to the plain symbols."""
        en = descriptor_from_positional(EN_DATA)
        assert en.number_symbol(NumberSymbol.CURRENCY_DECIMAL) == "."
        assert en.number_symbol(NumberSymbol.CURRENCY_GROUP) == ","

    def test_plural_mapping_coerced(self) -> None:
        """A rule mapping in slot 20 becomes a plural rule."""
        data = _en_literal()
        data[LocaleDataIndex.PLURAL_CASE] = {"one": "n = 1"}
        descriptor = descriptor_from_positional(data)
        assert descriptor.plural_rule(1).keyword == "one"

    @pytest.mark.parametrize("length", [20, 23])
    def test_wrong_slot_count(self, length: int) -> None:
        """Literals must have 21 or 22 slots."""
        data = (_en_literal() + [None, None])[:length]
        with pytest.raises(LocaleDataError, match="Malformed locale data"):
            descriptor_from_positional(data)

    def test_short_symbol_list(self) -> None:
        """Fewer than 12 number symbols is malformed."""
        data = _en_literal()
        data[LocaleDataIndex.NUMBER_SYMBOLS] = [".", ","]
        with pytest.raises(LocaleDataError, match="number symbols"):
            descriptor_from_positional(data)

    def test_bad_direction(self) -> None:
        """Invalid values surface as LocaleDataError."""
        data = _en_literal()
        data[LocaleDataIndex.DIRECTION] = "sideways"
        with pytest.raises(LocaleDataError):
            descriptor_from_positional(data)

    def test_missing_format_names(self) -> None:
        """Format names are mandatory."""
        data = _en_literal()
        data[LocaleDataIndex.MONTHS_FORMAT] = None
        with pytest.raises(LocaleDataError):
            descriptor_from_positional(data)


class TestRoundTrip:
    """Test that encoding reproduces the decoded descriptor."""

    @pytest.mark.parametrize("locale_id", sorted(BUNDLED_LOCALES))
    def test_bundled_round_trip(self, locale_id: str) -> None:
        """Every bundled literal survives decode, encode, decode."""
        descriptor = load_bundled_locale(locale_id)
        again = LocaleDescriptor.from_positional(descriptor.to_positional())
        assert again == descriptor

    def test_extra_round_trip(self) -> None:
        """Extended day periods encode back to an equivalent literal."""
        extra = decode_extra(TH_EXTRA)
        assert decode_extra(encode_extra(extra)) == extra

    def test_with_extra_replaces(self, en: LocaleDescriptor) -> None:
        """with_extra returns a copy; the original is unchanged."""
        extra = decode_extra(TH_EXTRA)
        updated = en.with_extra(extra)
        assert updated.extra == extra
        assert en.extra is None
