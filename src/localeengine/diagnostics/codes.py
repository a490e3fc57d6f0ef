"""Diagnostic codes and data structures.

Defines error codes and structured diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization used by the exception hierarchy.

    Categories:
        LOOKUP: Locale id not registered (after parent fallback)
        DATA: Locale descriptor slot missing or malformed
        CONFIGURATION: Invalid pattern, option or case list supplied by caller
        INPUT: Value cannot be interpreted (e.g. unparseable date string)
    """

    LOOKUP = "lookup"
    DATA = "data"
    CONFIGURATION = "configuration"
    INPUT = "input"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Lookup errors (unknown locales)
        2000-2999: Data errors (descriptor shape, missing slots)
        3000-3999: Configuration errors (patterns, digit bounds, plural cases)
        4000-4999: Input errors (values that cannot be converted)
    """

    # Lookup errors (1000-1999)
    LOCALE_NOT_FOUND = 1001

    # Data errors (2000-2999)
    LOCALE_DATA_UNDEFINED = 2001
    LOCALE_DATA_MALFORMED = 2002
    EXTRA_DATA_MISSING = 2003
    CLDR_LOCALE_UNKNOWN = 2004

    # Configuration errors (3000-3999)
    CURRENCY_CODE_REQUIRED = 3001
    FRACTION_BOUNDS_INVERTED = 3002
    DIGITS_INFO_INVALID = 3003
    DATE_PATTERN_INVALID = 3004
    PLURAL_CASE_MISSING = 3005
    TIMEZONE_INVALID = 3006
    DIGIT_COUNT_INVALID = 3007

    # Input errors (4000-4999)
    DATE_CONVERSION_FAILED = 4001
    NUMBER_CONVERSION_FAILED = 4002
    NUMBER_OUT_OF_RANGE = 4003

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code's numeric range."""
        match self.value // 1000:
            case 1:
                return ErrorCategory.LOOKUP
            case 2:
                return ErrorCategory.DATA
            case 3:
                return ErrorCategory.CONFIGURATION
            case _:
                return ErrorCategory.INPUT


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale_id: Locale involved, if any
        pattern: Pattern string involved, if any
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale_id: str | None = None
    pattern: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Example output:
            error[LOCALE_NOT_FOUND]: Missing locale data for the locale "xx-YY"
              = locale: xx-yy
              = help: Register the locale with register_locale_data()

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
