"""Number formatting options.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from localeengine.diagnostics import ErrorTemplate, NumberFormatConfigError
from localeengine.enums import CurrencyDisplay

from .number_pattern import parse_digits_info

__all__ = ["NumberFormatOptions"]


@dataclass(frozen=True, slots=True)
class NumberFormatOptions:
    """Immutable overrides for one number formatting call.

    Digit counts left as None use the locale pattern's values.

    Attributes:
        min_integer_digits: Zero-pad the integer part to this width
        min_fraction_digits: Always show at least this many fraction digits
        max_fraction_digits: Round to at most this many fraction digits
        currency_code: ISO 4217 code; required for currency style
        currency_display: ``CurrencyDisplay`` member or any literal string
            to print in place of the currency symbol. ``NAME`` is joined to
            an adjacent number with a no-break space ("US Dollar 1.00");
            patterns that already space the sign are left as they are

    Example:
        >>> NumberFormatOptions(max_fraction_digits=1)
        NumberFormatOptions(min_integer_digits=None, ...)
        >>> NumberFormatOptions.from_digits_info("1.2-2", currency_code="EUR")
        NumberFormatOptions(min_integer_digits=1, min_fraction_digits=2, ...)
    """

    min_integer_digits: int | None = None
    min_fraction_digits: int | None = None
    max_fraction_digits: int | None = None
    currency_code: str | None = None
    currency_display: CurrencyDisplay | str = CurrencyDisplay.SYMBOL

    def __post_init__(self) -> None:
        """Validate digit counts at construction time.

        Raises:
            NumberFormatConfigError: If a digit count is negative, or both
                fraction bounds are given and min exceeds max
        """
        for name in ("min_integer_digits", "min_fraction_digits", "max_fraction_digits"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise NumberFormatConfigError(ErrorTemplate.digit_count_invalid(name, value))
        if (
            self.min_fraction_digits is not None
            and self.max_fraction_digits is not None
            and self.min_fraction_digits > self.max_fraction_digits
        ):
            raise NumberFormatConfigError(
                ErrorTemplate.fraction_bounds_inverted(
                    self.min_fraction_digits, self.max_fraction_digits
                )
            )

    @classmethod
    def from_digits_info(
        cls,
        digits_info: str | None,
        *,
        currency_code: str | None = None,
        currency_display: CurrencyDisplay | str = CurrencyDisplay.SYMBOL,
    ) -> NumberFormatOptions:
        """Build options from a ``{minInt}.{minFrac}-{maxFrac}`` string.

        Raises:
            NumberFormatConfigError: If digits_info is malformed or inverted
        """
        if digits_info is None:
            return cls(currency_code=currency_code, currency_display=currency_display)
        info = parse_digits_info(digits_info)
        return cls(
            min_integer_digits=info.min_integer_digits,
            min_fraction_digits=info.min_fraction_digits,
            max_fraction_digits=info.max_fraction_digits,
            currency_code=currency_code,
            currency_display=currency_display,
        )
