"""Shared constants for LocaleEngine.

Centralized configuration constants used across the data, runtime and
formatting packages. Keeping them here avoids circular imports and gives
one place to tune limits.

Constants are grouped by domain:
- Descriptor layout: Slot counts of the positional locale literal
- Number formatting: Digit limits and pattern characters
- Currency: ISO 4217 defaults
- Cache limits: Memory bounds for memoized lookups

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Descriptor layout
    "DESCRIPTOR_SLOT_COUNT",
    "DESCRIPTOR_REQUIRED_SLOTS",
    "NUMBER_SYMBOL_COUNT",
    "NUMBER_SYMBOL_MAX_COUNT",
    "DEFAULT_LOCALE",
    # Number formatting
    "MAX_DIGITS",
    "MAX_NUMBER_EXPONENT",
    "PATTERN_SEPARATOR",
    "PATTERN_DECIMAL",
    "PATTERN_GROUP",
    "PATTERN_DIGIT",
    "PATTERN_ZERO",
    "PATTERN_CURRENCY",
    "PATTERN_PERCENT",
    "PATTERN_EXPONENT",
    # Currency
    "DEFAULT_CURRENCY_DIGITS",
    "ISO_CURRENCY_CODE_LENGTH",
    "CURRENCY_NAME_SEPARATOR",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# DESCRIPTOR LAYOUT
# ============================================================================

# Positional literal: 21 mandatory slots (0-20) plus the optional extended
# day period slot (21). The layout is a de facto file format shared with
# existing generated data sets; it never changes within a major version.
DESCRIPTOR_SLOT_COUNT: int = 22
DESCRIPTOR_REQUIRED_SLOTS: int = 21

# 12 symbols are always present; the two currency-specific symbols are
# optional trailing slots that fall back to decimal/group.
NUMBER_SYMBOL_COUNT: int = 12
NUMBER_SYMBOL_MAX_COUNT: int = 14

# Locale registered in the process-wide default registry.
DEFAULT_LOCALE: str = "en"

# ============================================================================
# NUMBER FORMATTING
# ============================================================================

# Integer parts longer than this switch to exponent notation.
MAX_DIGITS: int = 22

# Largest accepted decimal exponent, in either direction. Beyond it a value
# would need more than a thousand digits to write out in positional form.
MAX_NUMBER_EXPONENT: int = 1000

PATTERN_SEPARATOR: str = ";"
PATTERN_DECIMAL: str = "."
PATTERN_GROUP: str = ","
PATTERN_DIGIT: str = "#"
PATTERN_ZERO: str = "0"
PATTERN_CURRENCY: str = "¤"
PATTERN_PERCENT: str = "%"
PATTERN_EXPONENT: str = "E"

# ============================================================================
# CURRENCY
# ============================================================================

# Most currencies have cents (ISO 4217 minor unit default).
DEFAULT_CURRENCY_DIGITS: int = 2

ISO_CURRENCY_CODE_LENGTH: int = 3

# Joins a spelled-out currency name to a number it would otherwise touch.
CURRENCY_NAME_SEPARATOR: str = "\u00a0"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum memoized entries per cache (Babel locales, named date formats).
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128
