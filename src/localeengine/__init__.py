"""LocaleEngine - CLDR-style locale data, plural rules and formatting.

Formats numbers, percentages, currency amounts and dates for a locale,
selects plural categories, and exposes typed accessors over locale data.
Locale data comes from bundled positional literals, user registration,
or Babel's CLDR tables.

Public API:
    LocaleRegistry - Thread-safe locale table with parent fallback
    register_locale_data - Register a locale literal or descriptor
    format_number, format_percent, format_currency, format_scientific
    format_date - Pattern and named-format date formatting
    get_plural_category, i18n_plural, i18n_select - Message helpers
    get_currency_symbol, get_number_of_currency_digits

Exceptions:
    LocaleEngineError - Base exception class
    LocaleNotFoundError - Locale not registered
    LocaleDataError - Locale data slot undefined or malformed
    ConfigurationError - Invalid formatting configuration
    InvalidDateError, InvalidNumberError - Unconvertible input

Submodules:
    localeengine.locale_data - get_locale_* accessors
    localeengine.data - Descriptor model, positional codec, bundled locales
    localeengine.plural - Plural operands, rule families, case resolution
    localeengine.formatting - Number, currency and date formatters
    localeengine.diagnostics - Error types, codes and formatting
"""

from .diagnostics import (
    ConfigurationError,
    DatePatternError,
    InvalidDateError,
    InvalidNumberError,
    LocaleDataError,
    LocaleEngineError,
    LocaleNotFoundError,
    NumberFormatConfigError,
    PluralCaseError,
)
from .enums import (
    CurrencyDisplay,
    Direction,
    FormatWidth,
    FormStyle,
    NumberFormatStyle,
    NumberSymbol,
    Plural,
    TranslationWidth,
    WeekDay,
)
from .formatting import (
    format_currency,
    format_date,
    format_number,
    format_percent,
    format_scientific,
    get_currency_symbol,
    get_number_of_currency_digits,
)
from .locale_data import get_locale_plural_case, register_locale_data
from .runtime import LocaleRegistry, get_default_registry
from .transforms import get_plural_category, i18n_plural, i18n_select

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("localeengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConfigurationError",
    "CurrencyDisplay",
    "DatePatternError",
    "Direction",
    "FormStyle",
    "FormatWidth",
    "InvalidDateError",
    "InvalidNumberError",
    "LocaleDataError",
    "LocaleEngineError",
    "LocaleNotFoundError",
    "LocaleRegistry",
    "NumberFormatConfigError",
    "NumberFormatStyle",
    "NumberSymbol",
    "Plural",
    "PluralCaseError",
    "TranslationWidth",
    "WeekDay",
    "__version__",
    "format_currency",
    "format_date",
    "format_number",
    "format_percent",
    "format_scientific",
    "get_currency_symbol",
    "get_default_registry",
    "get_locale_plural_case",
    "get_number_of_currency_digits",
    "get_plural_category",
    "i18n_plural",
    "i18n_select",
    "register_locale_data",
]
