"""Build locale descriptors from Babel's CLDR data.

Bundled literals cover a handful of locales; this bridge covers every
locale Babel knows. Babel is imported lazily, so nothing here runs unless
``descriptor_from_cldr`` (or ``LocaleRegistry.load_cldr``) is called.

CLDR gaps are filled locally: a missing optional section is logged at
WARNING and replaced by an empty or default value, never raised.

Python 3.13+. Requires Babel.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from localeengine.core.babel_compat import get_unknown_locale_error, require_babel
from localeengine.diagnostics import ErrorTemplate, LocaleDataError
from localeengine.enums import Direction, NumberSymbol
from localeengine.locale_utils import get_babel_locale
from localeengine.plural.rules import CldrExpressionRule, NoPluralRule, PluralRule

from .descriptor import (
    CurrencyEntry,
    DayPeriodRule,
    ExtraDayPeriods,
    FormNames,
    LocaleDescriptor,
    WidthTable,
)

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["descriptor_from_cldr"]

logger = logging.getLogger(__name__)

# Babel width names in TranslationWidth order.
_WIDTHS = ("narrow", "abbreviated", "wide", "short")
_FORMAT_WIDTHS = ("short", "medium", "long", "full")
# Babel weekday keys (Monday = 0) in Sunday-first order.
_SUNDAY_FIRST = (6, 0, 1, 2, 3, 4, 5)

# CLDR symbol names in NumberSymbol order.
_SYMBOL_KEYS = (
    "decimal",
    "group",
    "list",
    "percentSign",
    "plusSign",
    "minusSign",
    "exponential",
    "superscriptingExponent",
    "perMille",
    "infinity",
    "nan",
    "timeSeparator",
    "currencyDecimal",
    "currencyGroup",
)
_DEFAULT_SYMBOLS = (".", ",", ";", "%", "+", "-", "E", "×", "‰", "∞", "NaN", ":")
_DEFAULT_NUMBER_FORMATS = ("#,##0.###", "#,##0%", "¤#,##0.00", "#E0")


def _width_table(table: Mapping[str, Any] | None, keys: Iterable[Any]) -> WidthTable:
    """Collect names for each width; widths missing any key become None."""
    keys = tuple(keys)
    widths: list[tuple[str, ...] | None] = []
    for width in _WIDTHS:
        entries = table.get(width) if table else None
        try:
            widths.append(tuple(str(entries[key]) for key in keys) if entries else None)
        except KeyError:
            widths.append(None)
    while widths and widths[-1] is None:
        widths.pop()
    return tuple(widths)


def _form_names(
    contexts: Mapping[str, Any], keys: Iterable[Any], locale_id: str, what: str
) -> FormNames:
    keys = tuple(keys)
    format_table = _width_table(contexts.get("format"), keys)
    if not format_table:
        logger.warning("CLDR data for '%s' has no %s; using keys as names", locale_id, what)
        format_table = (tuple(str(key) for key in keys),)
    standalone = _width_table(contexts.get("stand-alone"), keys) or None
    return FormNames(format_table, standalone)


def _patterns(table: Mapping[str, Any], locale_id: str, what: str) -> tuple[str | None, ...]:
    patterns: list[str | None] = []
    for width in _FORMAT_WIDTHS:
        value = table.get(width)
        patterns.append(None if value is None else str(getattr(value, "pattern", value)))
    if patterns[0] is None:
        logger.warning("CLDR data for '%s' has no short %s", locale_id, what)
    return tuple(patterns)


def _number_symbols(locale: Locale) -> tuple[str | None, ...]:
    table: Mapping[str, Any] = locale.number_symbols
    # Babel 2.14+ keys symbols by numbering system.
    if "latn" in table:
        table = table["latn"]
    symbols: list[str | None] = [table.get(key) for key in _SYMBOL_KEYS]
    for index, default in enumerate(_DEFAULT_SYMBOLS):
        if symbols[index] is None:
            logger.warning(
                "CLDR data for '%s' has no %s symbol; using '%s'",
                locale,
                NumberSymbol(index).name,
                default,
            )
            symbols[index] = default
    while len(symbols) > len(_DEFAULT_SYMBOLS) and symbols[-1] is None:
        symbols.pop()
    return tuple(symbols)


def _number_formats(locale: Locale) -> tuple[str, ...]:
    sources = (
        (locale.decimal_formats, None),
        (locale.percent_formats, None),
        (locale.currency_formats, "standard"),
        (locale.scientific_formats, None),
    )
    formats: list[str] = []
    for (table, key), default in zip(sources, _DEFAULT_NUMBER_FORMATS, strict=True):
        pattern = table.get(key)
        if pattern is None:
            logger.warning("CLDR data for '%s' lacks a number format; using '%s'", locale, default)
            formats.append(default)
        else:
            formats.append(str(pattern.pattern))
    return tuple(formats)


def _territory(locale: Locale) -> str | None:
    if locale.territory:
        return str(locale.territory)
    from babel.core import get_global  # noqa: PLC0415 - Babel is lazy

    likely = get_global("likely_subtags").get(locale.language)
    if likely is None:
        return None
    return get_babel_locale(likely).territory


def _currency_code(locale: Locale) -> str | None:
    from babel.numbers import get_territory_currencies  # noqa: PLC0415 - Babel is lazy

    territory = _territory(locale)
    currencies = get_territory_currencies(territory) if territory else []
    if not currencies:
        logger.warning("CLDR data for '%s' has no territory currency", locale)
        return None
    return str(currencies[0])


def _currencies(locale: Locale, code: str | None) -> dict[str, CurrencyEntry]:
    from babel.numbers import get_currency_precision  # noqa: PLC0415 - Babel is lazy

    entries = {
        str(iso): CurrencyEntry(symbol=str(symbol))
        for iso, symbol in locale.currency_symbols.items()
        if symbol and symbol != iso
    }
    if code is not None:
        local = entries.get(code, CurrencyEntry())
        entries[code] = CurrencyEntry(local.symbol, local.narrow, get_currency_precision(code))
    return entries


def _plural_rule(locale: Locale) -> PluralRule:
    rules = dict(locale.plural_form.rules)
    if not rules:
        return NoPluralRule()
    return CldrExpressionRule.from_mapping(rules)


def _minutes(seconds: Any) -> int:
    return int(seconds) // 60


def _extra_day_periods(locale: Locale, locale_id: str) -> ExtraDayPeriods | None:
    rulesets: Mapping[str | None, Any] = locale.day_period_rules or {}
    # Babel keys the formatting rule set by None, the selection set by "selection".
    ruleset = rulesets.get(None) or rulesets.get("selection")
    if not ruleset:
        logger.debug("CLDR data for '%s' has no day period rules", locale_id)
        return None

    points: list[tuple[str, DayPeriodRule]] = []
    ranges: list[tuple[str, DayPeriodRule]] = []
    for period_id, conditions in ruleset.items():
        for condition in conditions if isinstance(conditions, list) else [conditions]:
            if "at" in condition:
                points.append((period_id, DayPeriodRule(_minutes(condition["at"]))))
            elif "from" in condition and "before" in condition:
                rule = DayPeriodRule(_minutes(condition["from"]), _minutes(condition["before"]))
                ranges.append((period_id, rule))
    # Exact points (midnight, noon) take precedence over ranges.
    ordered = points + ranges
    if not ordered:
        return None

    period_ids = [period_id for period_id, _ in ordered]
    names = FormNames(
        _width_table(locale.day_periods.get("format"), period_ids),
        _width_table(locale.day_periods.get("stand-alone"), period_ids) or None,
    )
    if not names.format:
        logger.warning("CLDR data for '%s' has day period rules without names", locale_id)
        return None
    return ExtraDayPeriods(names=names, rules=tuple(rule for _, rule in ordered))


def descriptor_from_cldr(locale_id: str, *, include_day_periods: bool = False) -> LocaleDescriptor:
    """Build a descriptor for any locale Babel has CLDR data for.

    Args:
        locale_id: Locale id (BCP-47 or POSIX separators)
        include_day_periods: Also attach extended day periods (morning,
            afternoon...). Off by default: with them, ``a`` fields render
            the extended names instead of AM/PM.

    Returns:
        Descriptor whose ``locale_id`` is the BCP-47 form Babel resolved

    Raises:
        BabelImportError: If Babel is not installed
        LocaleDataError: If Babel has no data for the locale

    Example:
        >>> d = descriptor_from_cldr("de-DE")
        >>> d.locale_id, d.currency_code, d.number_symbols[:2]
        ('de-DE', 'EUR', (',', '.'))
    """
    require_babel("descriptor_from_cldr")
    unknown_locale_error = get_unknown_locale_error()
    try:
        locale = get_babel_locale(locale_id)
    except (unknown_locale_error, ValueError) as e:
        raise LocaleDataError(ErrorTemplate.cldr_locale_unknown(locale_id, str(e))) from e

    resolved_id = str(locale).replace("_", "-")
    currency_code = _currency_code(locale)
    extra = _extra_day_periods(locale, resolved_id) if include_day_periods else None

    descriptor = LocaleDescriptor(
        locale_id=resolved_id,
        day_periods=_form_names(locale.day_periods, ("am", "pm"), resolved_id, "day periods"),
        days=_form_names(locale.days, _SUNDAY_FIRST, resolved_id, "day names"),
        months=_form_names(locale.months, range(1, 13), resolved_id, "month names"),
        eras=_width_table(locale.eras, (0, 1)),
        first_day_of_week=(locale.first_week_day + 1) % 7,
        weekend_range=((locale.weekend_start + 1) % 7, (locale.weekend_end + 1) % 7),
        date_formats=_patterns(locale.date_formats, resolved_id, "date format"),
        time_formats=_patterns(locale.time_formats, resolved_id, "time format"),
        date_time_formats=_patterns(locale.datetime_formats, resolved_id, "date-time format"),
        number_symbols=_number_symbols(locale),
        number_formats=_number_formats(locale),
        currency_code=currency_code,
        currency_symbol=locale.currency_symbols.get(currency_code) if currency_code else None,
        currency_name=locale.currencies.get(currency_code) if currency_code else None,
        currencies=_currencies(locale, currency_code),
        direction=Direction.RTL if locale.character_order == "right-to-left" else Direction.LTR,
        plural_rule=_plural_rule(locale),
        extra=extra,
    )
    logger.debug("Built descriptor from CLDR data: %s", resolved_id)
    return descriptor
