"""Locale data accessors.

Typed lookups over registered locale descriptors. Every accessor resolves
the locale through the registry fallback chain (``en-US`` falls back to
``en``) and raises ``LocaleNotFoundError`` when nothing matches.

Sparse name and pattern tables resolve through sibling fallback: a
missing narrow month name uses the abbreviated one, a missing standalone
table uses the format table.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from .data.descriptor import last_defined
from .diagnostics import ErrorTemplate, LocaleDataError
from .enums import (
    Direction,
    FormatWidth,
    FormStyle,
    NumberFormatStyle,
    NumberSymbol,
    TranslationWidth,
    WeekDay,
)
from .runtime.registry import get_default_registry

if TYPE_CHECKING:
    from .data.descriptor import (
        CurrencyEntry,
        DayPeriodRule,
        ExtraDayPeriods,
        LocaleDescriptor,
        Names,
    )
    from .plural.rules import PluralRule
    from .runtime.registry import ExtraData, LocaleData, LocaleRegistry

__all__ = [
    "get_locale_currencies",
    "get_locale_currency_code",
    "get_locale_currency_name",
    "get_locale_currency_symbol",
    "get_locale_date_format",
    "get_locale_date_time_format",
    "get_locale_day_names",
    "get_locale_day_periods",
    "get_locale_direction",
    "get_locale_era_names",
    "get_locale_extra_day_period_rules",
    "get_locale_extra_day_periods",
    "get_locale_first_day_of_week",
    "get_locale_id",
    "get_locale_month_names",
    "get_locale_number_format",
    "get_locale_number_symbol",
    "get_locale_plural_case",
    "get_locale_time_format",
    "get_locale_weekend_range",
    "register_locale_data",
]


def _descriptor(locale: str, registry: LocaleRegistry | None) -> LocaleDescriptor:
    return (registry or get_default_registry()).lookup(locale)


def _extra(descriptor: LocaleDescriptor) -> ExtraDayPeriods:
    if descriptor.extra is None:
        raise LocaleDataError(ErrorTemplate.extra_data_missing(descriptor.locale_id))
    return descriptor.extra


def register_locale_data(
    data: LocaleData,
    locale_id: str | None = None,
    extra: ExtraData | None = None,
    registry: LocaleRegistry | None = None,
) -> LocaleDescriptor:
    """Register locale data in a registry (default: the shared one).

    Args:
        data: ``LocaleDescriptor`` or positional locale literal
        locale_id: Key to register under (default: the data's own id)
        extra: Extended day periods, merged into the stored descriptor
        registry: Target registry

    Returns:
        The stored descriptor

    Example:
        >>> from localeengine.data.locales.fr import LOCALE_DATA
        >>> register_locale_data(LOCALE_DATA, "fr-CA").locale_id
        'fr'
    """
    return (registry or get_default_registry()).register(data, locale_id, extra)


def get_locale_id(locale: str, registry: LocaleRegistry | None = None) -> str:
    """Id of the descriptor a locale resolves to (``"en-US"`` -> ``"en"``)."""
    return _descriptor(locale, registry).locale_id


def get_locale_day_periods(
    locale: str,
    form: FormStyle,
    width: TranslationWidth,
    registry: LocaleRegistry | None = None,
) -> Names:
    """AM/PM names, e.g. ``("AM", "PM")``."""
    descriptor = _descriptor(locale, registry)
    return descriptor.day_periods.get(
        form, width, locale_id=descriptor.locale_id, what="day periods"
    )


def get_locale_day_names(
    locale: str,
    form: FormStyle,
    width: TranslationWidth,
    registry: LocaleRegistry | None = None,
) -> Names:
    """Weekday names, Sunday first."""
    descriptor = _descriptor(locale, registry)
    return descriptor.days.get(form, width, locale_id=descriptor.locale_id, what="day names")


def get_locale_month_names(
    locale: str,
    form: FormStyle,
    width: TranslationWidth,
    registry: LocaleRegistry | None = None,
) -> Names:
    """Month names, January first."""
    descriptor = _descriptor(locale, registry)
    return descriptor.months.get(form, width, locale_id=descriptor.locale_id, what="month names")


def get_locale_era_names(
    locale: str, width: TranslationWidth, registry: LocaleRegistry | None = None
) -> Names:
    """Era names, ``(before, after)`` the epoch, e.g. ``("BC", "AD")``."""
    descriptor = _descriptor(locale, registry)
    return last_defined(descriptor.eras, width, locale_id=descriptor.locale_id, what="eras")


def get_locale_first_day_of_week(locale: str, registry: LocaleRegistry | None = None) -> WeekDay:
    """First day of the week (Sunday = 0)."""
    return WeekDay(_descriptor(locale, registry).first_day_of_week)


def get_locale_weekend_range(
    locale: str, registry: LocaleRegistry | None = None
) -> tuple[WeekDay, WeekDay]:
    """Inclusive ``(start, end)`` weekend days."""
    start, end = _descriptor(locale, registry).weekend_range
    return WeekDay(start), WeekDay(end)


def get_locale_date_format(
    locale: str, width: FormatWidth, registry: LocaleRegistry | None = None
) -> str:
    """Date pattern for a width, e.g. ``"MMM d, y"`` for medium ``en``."""
    descriptor = _descriptor(locale, registry)
    return last_defined(
        descriptor.date_formats, width, locale_id=descriptor.locale_id, what="date format"
    )


def get_locale_time_format(
    locale: str, width: FormatWidth, registry: LocaleRegistry | None = None
) -> str:
    """Time pattern for a width, e.g. ``"h:mm a"`` for short ``en``."""
    descriptor = _descriptor(locale, registry)
    return last_defined(
        descriptor.time_formats, width, locale_id=descriptor.locale_id, what="time format"
    )


def get_locale_date_time_format(
    locale: str, width: FormatWidth, registry: LocaleRegistry | None = None
) -> str:
    """Date-time combiner for a width (``{0}`` time, ``{1}`` date)."""
    descriptor = _descriptor(locale, registry)
    return last_defined(
        descriptor.date_time_formats,
        width,
        locale_id=descriptor.locale_id,
        what="date-time format",
    )


def get_locale_number_symbol(
    locale: str, symbol: NumberSymbol, registry: LocaleRegistry | None = None
) -> str:
    """Number symbol; currency decimal/group fall back to decimal/group."""
    return _descriptor(locale, registry).number_symbol(symbol)


def get_locale_number_format(
    locale: str, style: NumberFormatStyle, registry: LocaleRegistry | None = None
) -> str:
    """Number pattern for a style, e.g. ``"#,##0.###"`` for decimal ``en``."""
    descriptor = _descriptor(locale, registry)
    if style >= len(descriptor.number_formats):
        raise LocaleDataError(
            ErrorTemplate.locale_data_undefined(
                descriptor.locale_id, f"{style.name.lower()} number format"
            )
        )
    return descriptor.number_formats[style]


def get_locale_currency_code(locale: str, registry: LocaleRegistry | None = None) -> str | None:
    """ISO code of the locale's own currency, or None."""
    return _descriptor(locale, registry).currency_code


def get_locale_currency_symbol(
    locale: str, registry: LocaleRegistry | None = None
) -> str | None:
    """Symbol of the locale's own currency, or None."""
    return _descriptor(locale, registry).currency_symbol


def get_locale_currency_name(locale: str, registry: LocaleRegistry | None = None) -> str | None:
    """Display name of the locale's own currency, or None."""
    return _descriptor(locale, registry).currency_name


def get_locale_currencies(
    locale: str, registry: LocaleRegistry | None = None
) -> Mapping[str, CurrencyEntry]:
    """The locale's sparse currency overrides (read-only)."""
    return _descriptor(locale, registry).currencies


def get_locale_direction(locale: str, registry: LocaleRegistry | None = None) -> Direction:
    """Writing direction."""
    return _descriptor(locale, registry).direction


def get_locale_plural_case(locale: str, registry: LocaleRegistry | None = None) -> PluralRule:
    """Plural rule of a locale, callable on a number.

    Example:
        >>> get_locale_plural_case("en")(1)
        <Plural.ONE: 1>
    """
    return _descriptor(locale, registry).plural_rule


def get_locale_extra_day_periods(
    locale: str,
    form: FormStyle,
    width: TranslationWidth,
    registry: LocaleRegistry | None = None,
) -> Names:
    """Extended day period names, aligned with the period rules.

    Returns an empty tuple when the locale has extended data but no names
    for the requested form and width.

    Raises:
        LocaleDataError: If the locale has no extended day periods
    """
    descriptor = _descriptor(locale, registry)
    names = _extra(descriptor).names
    if not names.has(form, width):
        return ()
    return names.get(form, width, locale_id=descriptor.locale_id, what="extra day periods")


def get_locale_extra_day_period_rules(
    locale: str, registry: LocaleRegistry | None = None
) -> tuple[DayPeriodRule, ...]:
    """Clock-time rules of the extended day periods.

    Raises:
        LocaleDataError: If the locale has no extended day periods
    """
    return _extra(_descriptor(locale, registry)).rules
