"""Locale data: descriptor model, positional codec and bundled tables.

Python 3.13+.
"""

from .codec import (
    CurrencyIndex,
    ExtraLocaleDataIndex,
    LocaleDataIndex,
    descriptor_from_positional,
    descriptor_to_positional,
)
from .currencies import GLOBAL_CURRENCIES
from .descriptor import (
    CurrencyEntry,
    DayPeriodRule,
    ExtraDayPeriods,
    FormNames,
    LocaleDescriptor,
    last_defined,
)
from .locales import BUNDLED_LOCALES, load_bundled_locale

__all__ = [
    "BUNDLED_LOCALES",
    "GLOBAL_CURRENCIES",
    "CurrencyEntry",
    "CurrencyIndex",
    "DayPeriodRule",
    "ExtraDayPeriods",
    "ExtraLocaleDataIndex",
    "FormNames",
    "LocaleDataIndex",
    "LocaleDescriptor",
    "descriptor_from_positional",
    "descriptor_to_positional",
    "last_defined",
    "load_bundled_locale",
]
