"""Locale descriptor model.

Typed, immutable records for one locale's formatting data. Name tables are
indexed by ``TranslationWidth`` and may contain ``None`` holes meaning "use
the previous non-absent sibling"; ``last_defined`` is the one place that
resolves them. A standalone table that is ``None`` inherits from the
format table in the same way.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeAlias, TypeVar

from localeengine.diagnostics import ErrorTemplate, LocaleDataError
from localeengine.enums import Direction, FormStyle, NumberSymbol, TranslationWidth

if TYPE_CHECKING:
    from localeengine.plural.rules import PluralRule

__all__ = [
    "CurrencyEntry",
    "DayPeriodRule",
    "ExtraDayPeriods",
    "FormNames",
    "LocaleDescriptor",
    "Names",
    "WidthTable",
    "last_defined",
]

Names: TypeAlias = tuple[str, ...]
WidthTable: TypeAlias = tuple[Names | None, ...]

T = TypeVar("T")


def last_defined(
    values: Sequence[T | None],
    index: int,
    *,
    locale_id: str = "?",
    what: str = "locale data",
) -> T:
    """Return the value at ``index``, or the nearest defined one below it.

    Args:
        values: Sparse sequence (``None`` marks an absent slot)
        index: Requested slot; indexes past the end start from the last slot
        locale_id: Locale reported in the error
        what: Slot description reported in the error

    Raises:
        LocaleDataError: If no slot at or below ``index`` is defined
    """
    for i in range(min(index, len(values) - 1), -1, -1):
        value = values[i]
        if value is not None:
            return value
    raise LocaleDataError(ErrorTemplate.locale_data_undefined(locale_id, what))


@dataclass(frozen=True, slots=True)
class FormNames:
    """Format and standalone width tables for one kind of name.

    Attributes:
        format: Names used inside a date pattern, by width
        standalone: Names used on their own, or None to inherit ``format``
    """

    format: WidthTable
    standalone: WidthTable | None = None

    def get(
        self,
        form: FormStyle,
        width: TranslationWidth,
        *,
        locale_id: str = "?",
        what: str = "names",
    ) -> Names:
        """Resolve names for a form and width through sibling fallback."""
        table = last_defined(
            (self.format, self.standalone), form, locale_id=locale_id, what=what
        )
        return last_defined(table, width, locale_id=locale_id, what=what)

    def has(self, form: FormStyle, width: TranslationWidth) -> bool:
        """True when ``get`` would resolve to a non-empty table."""
        try:
            return bool(self.get(form, width))
        except LocaleDataError:
            return False


@dataclass(frozen=True, slots=True)
class DayPeriodRule:
    """Clock-time rule of one extended day period, in minutes past midnight.

    A rule is either a single point (``end`` is None) or the half-open range
    ``[start, end)``. A range whose end precedes its start wraps past
    midnight.
    """

    start: int
    end: int | None = None

    @staticmethod
    def _parse_time(text: str) -> int:
        hours, _, minutes = text.partition(":")
        return int(hours) * 60 + int(minutes or 0)

    @staticmethod
    def _render_time(minutes: int) -> str:
        return f"{minutes // 60:02d}:{minutes % 60:02d}"

    @classmethod
    def from_positional(cls, value: str | Sequence[str]) -> DayPeriodRule:
        """Build from ``"HH:MM"`` or ``["HH:MM", "HH:MM"]``."""
        if isinstance(value, str):
            return cls(cls._parse_time(value))
        start, end = value
        return cls(cls._parse_time(start), cls._parse_time(end))

    def to_positional(self) -> str | list[str]:
        """Render back to the literal form."""
        if self.end is None:
            return self._render_time(self.start)
        return [self._render_time(self.start), self._render_time(self.end)]

    def contains(self, minutes: int) -> bool:
        """True when the time of day (minutes past midnight) matches."""
        if self.end is None:
            return minutes == self.start
        if self.start <= self.end:
            return self.start <= minutes < self.end
        # Wraps past midnight, e.g. 21:00-06:00.
        return minutes >= self.start or minutes < self.end


@dataclass(frozen=True, slots=True)
class ExtraDayPeriods:
    """Extended day periods chosen by clock time.

    ``names`` tables are aligned with ``rules``: the i-th name of any width
    belongs to the i-th rule.
    """

    names: FormNames
    rules: tuple[DayPeriodRule, ...]


@dataclass(frozen=True, slots=True)
class CurrencyEntry:
    """Per-currency override: any field may be absent."""

    symbol: str | None = None
    narrow: str | None = None
    digits: int | None = None

    @classmethod
    def from_positional(cls, value: Sequence[Any]) -> CurrencyEntry:
        """Build from ``[symbol?, narrow?, digits?]``."""
        padded = [*value, None, None, None]
        return cls(symbol=padded[0], narrow=padded[1], digits=padded[2])

    def to_positional(self) -> list[str | int | None]:
        """Render back to the shortest literal list."""
        values: list[str | int | None] = [self.symbol, self.narrow, self.digits]
        while values and values[-1] is None:
            values.pop()
        return values


@dataclass(frozen=True, slots=True)
class LocaleDescriptor:
    """Complete formatting data for one locale.

    Field order matches the positional literal slot order (see
    ``localeengine.data.codec.LocaleDataIndex``).
    """

    locale_id: str
    day_periods: FormNames
    days: FormNames
    months: FormNames
    eras: WidthTable
    first_day_of_week: int
    weekend_range: tuple[int, int]
    date_formats: tuple[str | None, ...]
    time_formats: tuple[str | None, ...]
    date_time_formats: tuple[str | None, ...]
    number_symbols: tuple[str | None, ...]
    number_formats: tuple[str, ...]
    currency_code: str | None
    currency_symbol: str | None
    currency_name: str | None
    currencies: Mapping[str, CurrencyEntry]
    direction: Direction
    plural_rule: PluralRule
    extra: ExtraDayPeriods | None = field(default=None)

    def __post_init__(self) -> None:
        if not isinstance(self.currencies, MappingProxyType):
            object.__setattr__(self, "currencies", MappingProxyType(dict(self.currencies)))

    def __hash__(self) -> int:
        # Mappings are unhashable; equal descriptors still share these fields.
        return hash((self.locale_id, self.date_formats, self.time_formats, self.number_formats))

    @classmethod
    def from_positional(
        cls, data: Sequence[Any], extra: Sequence[Any] | None = None
    ) -> LocaleDescriptor:
        """Decode a positional locale literal (see ``data.codec``)."""
        from .codec import descriptor_from_positional  # noqa: PLC0415 - circular

        return descriptor_from_positional(data, extra)

    def to_positional(self) -> list[Any]:
        """Encode back to the positional locale literal."""
        from .codec import descriptor_to_positional  # noqa: PLC0415 - circular

        return descriptor_to_positional(self)

    def number_symbol(self, symbol: NumberSymbol) -> str:
        """Resolve a number symbol.

        Currency decimal and group symbols fall back to the plain decimal
        and group symbols when the locale does not define them.

        Raises:
            LocaleDataError: If the symbol is undefined
        """
        symbols = self.number_symbols
        value = symbols[symbol] if symbol < len(symbols) else None
        if value is not None:
            return value
        match symbol:
            case NumberSymbol.CURRENCY_DECIMAL:
                return self.number_symbol(NumberSymbol.DECIMAL)
            case NumberSymbol.CURRENCY_GROUP:
                return self.number_symbol(NumberSymbol.GROUP)
        raise LocaleDataError(
            ErrorTemplate.locale_data_undefined(self.locale_id, f"number symbol {symbol.name}")
        )

    def with_extra(self, extra: ExtraDayPeriods | None) -> LocaleDescriptor:
        """Copy of this descriptor with the extended day periods replaced."""
        return replace(self, extra=extra)
