"""LocaleEngine exception hierarchy with structured diagnostics.

All exceptions accept either a plain message or a Diagnostic object.
Lookup and configuration errors propagate to the immediate caller; they
are deterministic, so nothing retries them.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "ConfigurationError",
    "DatePatternError",
    "InvalidDateError",
    "InvalidNumberError",
    "LocaleDataError",
    "LocaleEngineError",
    "LocaleNotFoundError",
    "NumberFormatConfigError",
    "PluralCaseError",
]


class LocaleEngineError(Exception):
    """Base exception for all LocaleEngine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocaleEngineError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class LocaleNotFoundError(LocaleEngineError, LookupError):
    """No registered locale matches the id or any of its parents.

    Attributes:
        locale_id: The id as supplied by the caller
        attempted: Normalized ids tried, longest first
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        locale_id: str = "",
        attempted: tuple[str, ...] = (),
    ) -> None:
        super().__init__(message)
        self.locale_id = locale_id
        self.attempted = attempted


class LocaleDataError(LocaleEngineError):
    """A descriptor slot is undefined or has the wrong shape.

    Raised at registration for malformed literals and at access time when
    a required width has no defined value at or below the requested index.
    """


class ConfigurationError(LocaleEngineError, ValueError):
    """Caller supplied an invalid pattern, option or case list."""


class NumberFormatConfigError(ConfigurationError):
    """Invalid number formatting options.

    Examples:
    - Currency style without a currency code
    - max_fraction_digits smaller than min_fraction_digits
    - Malformed digits-info string ("1.a-3")
    """


class DatePatternError(ConfigurationError):
    """Date pattern contains an unsupported field letter or run length.

    Attributes:
        pattern: The full pattern being formatted
        field: The offending field run
    """

    def __init__(self, message: str | Diagnostic, *, pattern: str = "", field: str = "") -> None:
        super().__init__(message)
        self.pattern = pattern
        self.field = field


class PluralCaseError(ConfigurationError):
    """No case in the supplied list matches the value and no "other" exists."""


class InvalidDateError(LocaleEngineError, ValueError):
    """Value cannot be converted to a datetime.

    Attributes:
        input_value: String form of the rejected value
    """

    def __init__(self, message: str | Diagnostic, *, input_value: str = "") -> None:
        super().__init__(message)
        self.input_value = input_value


class InvalidNumberError(LocaleEngineError, ValueError):
    """Value cannot be interpreted as a number.

    Attributes:
        input_value: String form of the rejected value
    """

    def __init__(self, message: str | Diagnostic, *, input_value: str = "") -> None:
        super().__init__(message)
        self.input_value = input_value
