"""Enumerations for LocaleEngine type-safe constants.

IntEnum members mirror the integer slot indices of the positional locale
literal, so ``descriptor_slot[FormStyle.STANDALONE]`` and
``NumberSymbol.MINUS_SIGN`` index the data directly. StrEnum members are
plain strings for options that callers pass by name.

Python 3.13+.
"""

from enum import IntEnum, StrEnum

__all__ = [
    "CurrencyDisplay",
    "Direction",
    "FormStyle",
    "FormatWidth",
    "NumberFormatStyle",
    "NumberSymbol",
    "Plural",
    "TranslationWidth",
    "WeekDay",
]


class NumberFormatStyle(IntEnum):
    """Index into a descriptor's number format patterns."""

    DECIMAL = 0
    PERCENT = 1
    CURRENCY = 2
    SCIENTIFIC = 3


class Plural(IntEnum):
    """Grammatical plural category.

    Integer values match the codes returned by plural functions in
    generated locale data. ``str`` of a member is its CLDR keyword.
    """

    ZERO = 0
    ONE = 1
    TWO = 2
    FEW = 3
    MANY = 4
    OTHER = 5

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def keyword(self) -> str:
        """CLDR keyword for this category ("zero", "one", ... "other")."""
        return self.name.lower()

    @classmethod
    def from_keyword(cls, keyword: str) -> "Plural":
        """Map a CLDR keyword to its category.

        Raises:
            ValueError: If keyword is not one of the six CLDR categories
        """
        try:
            return cls[keyword.upper()]
        except KeyError:
            msg = f"Unknown plural category keyword: {keyword!r}"
            raise ValueError(msg) from None


class FormStyle(IntEnum):
    """Grammatical form: inside a date pattern or on its own."""

    FORMAT = 0
    STANDALONE = 1


class TranslationWidth(IntEnum):
    """Width of a translated name (days, months, eras, day periods)."""

    NARROW = 0
    ABBREVIATED = 1
    WIDE = 2
    SHORT = 3


class FormatWidth(IntEnum):
    """Length of a locale date/time pattern."""

    SHORT = 0
    MEDIUM = 1
    LONG = 2
    FULL = 3


class NumberSymbol(IntEnum):
    """Index into a descriptor's number symbols."""

    DECIMAL = 0
    GROUP = 1
    LIST = 2
    PERCENT_SIGN = 3
    PLUS_SIGN = 4
    MINUS_SIGN = 5
    EXPONENTIAL = 6
    SUPERSCRIPTING_EXPONENT = 7
    PER_MILLE = 8
    INFINITY = 9
    NAN = 10
    TIME_SEPARATOR = 11
    CURRENCY_DECIMAL = 12
    CURRENCY_GROUP = 13


class WeekDay(IntEnum):
    """Day of the week, Sunday first (locale data convention)."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


class CurrencyDisplay(StrEnum):
    """How a currency is shown in formatted amounts.

    StrEnum provides automatic string conversion:
    str(CurrencyDisplay.NARROW_SYMBOL) == "narrowSymbol"
    """

    SYMBOL = "symbol"
    """Locale symbol, e.g. "CA$" for CAD in en"""

    NARROW_SYMBOL = "narrowSymbol"
    """Narrow symbol when one exists, e.g. "$" for CAD"""

    CODE = "code"
    """ISO 4217 code, e.g. "CAD" """

    NAME = "name"
    """Locale currency name for the locale's own currency"""


class Direction(StrEnum):
    """Script direction of a locale."""

    LTR = "ltr"
    RTL = "rtl"
