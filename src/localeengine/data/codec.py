"""Positional locale literal codec.

Locale data sets ship each locale as a flat list whose slots are addressed
by ``LocaleDataIndex``. This module converts between that literal and
``LocaleDescriptor``. Slot order is fixed; index drift silently breaks every
consumer, so encoding and decoding both go through the enums below.

``None`` anywhere in a literal means "absent, inherit from the previous
sibling", the same meaning generated data gives ``undefined``.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from enum import IntEnum
from typing import Any

from localeengine.constants import (
    DESCRIPTOR_REQUIRED_SLOTS,
    DESCRIPTOR_SLOT_COUNT,
    NUMBER_SYMBOL_COUNT,
    NUMBER_SYMBOL_MAX_COUNT,
)
from localeengine.diagnostics import ErrorTemplate, LocaleDataError
from localeengine.enums import Direction
from localeengine.plural.rules import PluralRule

from .descriptor import (
    CurrencyEntry,
    DayPeriodRule,
    ExtraDayPeriods,
    FormNames,
    LocaleDescriptor,
    WidthTable,
)

__all__ = [
    "CurrencyIndex",
    "ExtraLocaleDataIndex",
    "LocaleDataIndex",
    "decode_currencies",
    "decode_extra",
    "descriptor_from_positional",
    "descriptor_to_positional",
    "encode_extra",
]

logger = logging.getLogger(__name__)


class LocaleDataIndex(IntEnum):
    """Slot index of each field in a positional locale literal."""

    LOCALE_ID = 0
    DAY_PERIODS_FORMAT = 1
    DAY_PERIODS_STANDALONE = 2
    DAYS_FORMAT = 3
    DAYS_STANDALONE = 4
    MONTHS_FORMAT = 5
    MONTHS_STANDALONE = 6
    ERAS = 7
    FIRST_DAY_OF_WEEK = 8
    WEEKEND_RANGE = 9
    DATE_FORMAT = 10
    TIME_FORMAT = 11
    DATE_TIME_FORMAT = 12
    NUMBER_SYMBOLS = 13
    NUMBER_FORMATS = 14
    CURRENCY_CODE = 15
    CURRENCY_SYMBOL = 16
    CURRENCY_NAME = 17
    CURRENCIES = 18
    DIRECTION = 19
    PLURAL_CASE = 20
    EXTRA_DATA = 21


class ExtraLocaleDataIndex(IntEnum):
    """Slot index inside the extended day period literal."""

    EXTRA_DAY_PERIOD_FORMATS = 0
    EXTRA_DAY_PERIOD_STANDALONE = 1
    EXTRA_DAY_PERIODS_RULES = 2


class CurrencyIndex(IntEnum):
    """Slot index inside a currency entry literal."""

    SYMBOL = 0
    SYMBOL_NARROW = 1
    NB_OF_DIGITS = 2


def _width_table(value: Sequence[Sequence[str] | None]) -> WidthTable:
    return tuple(None if names is None else tuple(names) for names in value)


def _form_names(format_value: Any, standalone_value: Any) -> FormNames:
    if format_value is None:
        msg = "format names must be defined"
        raise ValueError(msg)
    standalone = None if standalone_value is None else _width_table(standalone_value)
    return FormNames(_width_table(format_value), standalone)


def _encode_width_table(table: WidthTable | None) -> list[list[str] | None] | None:
    if table is None:
        return None
    return [None if names is None else list(names) for names in table]


def decode_currencies(value: Mapping[str, Sequence[Any]]) -> dict[str, CurrencyEntry]:
    """Decode a sparse ``{code: [symbol?, narrow?, digits?]}`` table."""
    return {code: CurrencyEntry.from_positional(entry) for code, entry in value.items()}


def decode_extra(value: Sequence[Any]) -> ExtraDayPeriods:
    """Decode a ``[format_names, standalone_names, rules]`` literal."""
    names = _form_names(
        value[ExtraLocaleDataIndex.EXTRA_DAY_PERIOD_FORMATS],
        value[ExtraLocaleDataIndex.EXTRA_DAY_PERIOD_STANDALONE],
    )
    rules = tuple(
        DayPeriodRule.from_positional(rule)
        for rule in value[ExtraLocaleDataIndex.EXTRA_DAY_PERIODS_RULES]
    )
    return ExtraDayPeriods(names=names, rules=rules)


def encode_extra(extra: ExtraDayPeriods) -> list[Any]:
    """Encode extended day periods back to their literal."""
    return [
        _encode_width_table(extra.names.format),
        _encode_width_table(extra.names.standalone),
        [rule.to_positional() for rule in extra.rules],
    ]


def descriptor_from_positional(
    data: Sequence[Any], extra: Sequence[Any] | None = None
) -> LocaleDescriptor:
    """Decode a positional locale literal.

    Args:
        data: Literal with 21 or 22 slots (slot 21 is optional extra data)
        extra: Extended day period literal supplied separately; overrides
            slot 21 when both are present

    Returns:
        Immutable LocaleDescriptor

    Raises:
        LocaleDataError: If the literal does not match the slot layout
    """
    locale_id = str(data[0]) if data else "?"
    if not DESCRIPTOR_REQUIRED_SLOTS <= len(data) <= DESCRIPTOR_SLOT_COUNT:
        detail = (
            f"expected {DESCRIPTOR_REQUIRED_SLOTS} or {DESCRIPTOR_SLOT_COUNT} slots, "
            f"got {len(data)}"
        )
        raise LocaleDataError(ErrorTemplate.locale_data_malformed(locale_id, detail))

    idx = LocaleDataIndex
    symbols = data[idx.NUMBER_SYMBOLS] or ()
    if not NUMBER_SYMBOL_COUNT <= len(symbols) <= NUMBER_SYMBOL_MAX_COUNT:
        detail = f"expected {NUMBER_SYMBOL_COUNT} number symbols, got {len(symbols)}"
        raise LocaleDataError(ErrorTemplate.locale_data_malformed(locale_id, detail))

    if extra is None and len(data) > idx.EXTRA_DATA:
        extra = data[idx.EXTRA_DATA]

    try:
        start, end = data[idx.WEEKEND_RANGE]
        descriptor = LocaleDescriptor(
            locale_id=locale_id,
            day_periods=_form_names(
                data[idx.DAY_PERIODS_FORMAT], data[idx.DAY_PERIODS_STANDALONE]
            ),
            days=_form_names(data[idx.DAYS_FORMAT], data[idx.DAYS_STANDALONE]),
            months=_form_names(data[idx.MONTHS_FORMAT], data[idx.MONTHS_STANDALONE]),
            eras=_width_table(data[idx.ERAS]),
            first_day_of_week=int(data[idx.FIRST_DAY_OF_WEEK]),
            weekend_range=(int(start), int(end)),
            date_formats=tuple(data[idx.DATE_FORMAT]),
            time_formats=tuple(data[idx.TIME_FORMAT]),
            date_time_formats=tuple(data[idx.DATE_TIME_FORMAT]),
            number_symbols=tuple(symbols),
            number_formats=tuple(data[idx.NUMBER_FORMATS]),
            currency_code=data[idx.CURRENCY_CODE],
            currency_symbol=data[idx.CURRENCY_SYMBOL],
            currency_name=data[idx.CURRENCY_NAME],
            currencies=decode_currencies(data[idx.CURRENCIES] or {}),
            direction=Direction(data[idx.DIRECTION]),
            plural_rule=PluralRule.coerce(data[idx.PLURAL_CASE]),
            extra=None if extra is None else decode_extra(extra),
        )
    except (TypeError, ValueError, IndexError, KeyError) as exc:
        raise LocaleDataError(
            ErrorTemplate.locale_data_malformed(locale_id, str(exc))
        ) from exc

    logger.debug("Decoded locale literal: %s", locale_id)
    return descriptor


def descriptor_to_positional(descriptor: LocaleDescriptor) -> list[Any]:
    """Encode a descriptor back to its positional literal.

    The result has 21 slots, or 22 when extended day periods are present.
    Slot 20 holds the descriptor's ``PluralRule``, which is callable like
    the plural function of generated data.
    """
    data: list[Any] = [
        descriptor.locale_id,
        _encode_width_table(descriptor.day_periods.format),
        _encode_width_table(descriptor.day_periods.standalone),
        _encode_width_table(descriptor.days.format),
        _encode_width_table(descriptor.days.standalone),
        _encode_width_table(descriptor.months.format),
        _encode_width_table(descriptor.months.standalone),
        _encode_width_table(descriptor.eras),
        descriptor.first_day_of_week,
        list(descriptor.weekend_range),
        list(descriptor.date_formats),
        list(descriptor.time_formats),
        list(descriptor.date_time_formats),
        list(descriptor.number_symbols),
        list(descriptor.number_formats),
        descriptor.currency_code,
        descriptor.currency_symbol,
        descriptor.currency_name,
        {code: entry.to_positional() for code, entry in descriptor.currencies.items()},
        str(descriptor.direction),
        descriptor.plural_rule,
    ]
    if descriptor.extra is not None:
        data.append(encode_extra(descriptor.extra))
    return data
