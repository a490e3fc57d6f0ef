"""Locale-aware number, percent, currency and scientific formatting.

All arithmetic runs on ``Decimal`` (see ``localeengine.core.numeric``):
rounding is half away from zero on the decimal digits the caller sees,
never on a binary float approximation.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import replace
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import TYPE_CHECKING

from localeengine.constants import (
    CURRENCY_NAME_SEPARATOR,
    MAX_DIGITS,
    PATTERN_CURRENCY,
    PATTERN_PERCENT,
)
from localeengine.core.numeric import EXACT_CONTEXT, NumericInput, plain_string, to_decimal
from localeengine.diagnostics import ErrorTemplate, LocaleDataError, NumberFormatConfigError
from localeengine.enums import CurrencyDisplay, NumberFormatStyle, NumberSymbol
from localeengine.runtime.registry import get_default_registry

from .currency import CurrencyResolver
from .number_pattern import NumberPattern, parse_number_pattern
from .options import NumberFormatOptions

if TYPE_CHECKING:
    from localeengine.data.descriptor import LocaleDescriptor
    from localeengine.runtime.registry import LocaleRegistry

__all__ = [
    "format_currency",
    "format_number",
    "format_percent",
    "format_scientific",
    "render_number",
]

_currency_resolver = CurrencyResolver()


def _quantize(value: Decimal, places: int) -> Decimal:
    """Round half away from zero to ``places`` fraction digits."""
    precision = max(value.adjusted(), 0) + places + 2
    return value.quantize(
        Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP, context=Context(prec=precision)
    )


def _group(digits: str, primary: int, secondary: int, separator: str) -> str:
    """Insert ``separator`` into an integer digit string.

    The rightmost group has ``primary`` digits, every other group
    ``secondary`` digits. A zero primary size disables grouping.
    """
    if primary <= 0 or len(digits) <= primary:
        return digits
    secondary = secondary or primary
    groups = [digits[-primary:]]
    rest = digits[:-primary]
    while len(rest) > secondary:
        groups.append(rest[-secondary:])
        rest = rest[:-secondary]
    if rest:
        groups.append(rest)
    return separator.join(reversed(groups))


def _fraction_bounds(
    pattern: NumberPattern, options: NumberFormatOptions
) -> tuple[int, int | None]:
    """Merge pattern and caller fraction bounds.

    A caller minimum above the pattern maximum raises the maximum when the
    caller gave no maximum of its own.

    Raises:
        NumberFormatConfigError: If the effective maximum is below the minimum
    """
    min_fraction = pattern.min_fraction_digits
    max_fraction = pattern.max_fraction_digits
    if options.min_fraction_digits is not None:
        min_fraction = options.min_fraction_digits
    if options.max_fraction_digits is not None:
        max_fraction = options.max_fraction_digits
    elif max_fraction is not None and min_fraction > max_fraction:
        max_fraction = min_fraction
    if max_fraction is not None and max_fraction < min_fraction:
        raise NumberFormatConfigError(
            ErrorTemplate.fraction_bounds_inverted(min_fraction, max_fraction)
        )
    return min_fraction, max_fraction


def _digits(
    value: Decimal, min_integer: int, min_fraction: int, max_fraction: int | None
) -> tuple[str, str]:
    """Round a non-negative value and split it into (integer, fraction) digits.

    Optional trailing fraction zeros are dropped down to ``min_fraction``.
    """
    if max_fraction is not None:
        value = _quantize(value, max_fraction)
    integer, _, fraction = plain_string(value).partition(".")
    fraction = fraction.rstrip("0").ljust(min_fraction, "0")
    integer = integer.lstrip("0").rjust(max(min_integer, 1), "0")
    return integer, fraction


def _split_exponent(value: Decimal, places: int | None) -> tuple[Decimal, int]:
    """Normalize a non-negative value to a mantissa in [1, 10) and an exponent.

    Rounding that carries the mantissa to 10 is renormalized.
    """
    if value.is_zero():
        return value, 0
    exponent = value.adjusted()
    mantissa = value.scaleb(-exponent, context=EXACT_CONTEXT)
    if places is not None and _quantize(mantissa, places) >= 10:
        mantissa = mantissa.scaleb(-1, context=EXACT_CONTEXT)
        exponent += 1
    return mantissa, exponent


def _render_finite(
    value: Decimal,
    descriptor: LocaleDescriptor,
    pattern: NumberPattern,
    options: NumberFormatOptions,
    style: NumberFormatStyle,
) -> tuple[str, bool]:
    """Render the digits of a finite value; returns (text, rounds_to_zero)."""
    min_fraction, max_fraction = _fraction_bounds(pattern, options)
    min_integer = (
        options.min_integer_digits
        if options.min_integer_digits is not None
        else pattern.min_integer_digits
    )
    currency = style is NumberFormatStyle.CURRENCY
    decimal_symbol = descriptor.number_symbol(
        NumberSymbol.CURRENCY_DECIMAL if currency else NumberSymbol.DECIMAL
    )
    group_symbol = descriptor.number_symbol(
        NumberSymbol.CURRENCY_GROUP if currency else NumberSymbol.GROUP
    )

    magnitude = value.copy_abs()
    exponent: int | None = None
    if pattern.is_scientific:
        magnitude, exponent = _split_exponent(magnitude, max_fraction)
        min_integer = 1
    elif magnitude.adjusted() >= MAX_DIGITS:
        # Too many integer digits to print positionally.
        magnitude, exponent = _split_exponent(magnitude, max_fraction)
        min_integer = 1

    integer, fraction = _digits(magnitude, min_integer, min_fraction, max_fraction)
    is_zero = not (integer + fraction).strip("0")

    text = _group(integer, pattern.primary_grouping, pattern.secondary_grouping, group_symbol)
    if fraction:
        text += decimal_symbol + fraction
    if exponent is not None and (pattern.is_scientific or exponent):
        text += descriptor.number_symbol(NumberSymbol.EXPONENTIAL)
        if exponent < 0:
            text += descriptor.number_symbol(NumberSymbol.MINUS_SIGN)
        elif pattern.exponent_plus or not pattern.is_scientific:
            text += descriptor.number_symbol(NumberSymbol.PLUS_SIGN)
        text += str(abs(exponent)).rjust(max(pattern.min_exponent_digits, 1), "0")
    return text, is_zero


def _space_currency_name(text: str, name: str) -> str:
    """Pad a currency name on the side where it would touch the number."""
    index = text.find(PATTERN_CURRENCY)
    if index < 0:
        return name
    before, after = text[:index], text[index + 1 :]
    if after and not after[0].isspace():
        return name + CURRENCY_NAME_SEPARATOR
    if before and not before[-1].isspace():
        return CURRENCY_NAME_SEPARATOR + name
    return name


def render_number(
    value: NumericInput,
    descriptor: LocaleDescriptor,
    style: NumberFormatStyle = NumberFormatStyle.DECIMAL,
    options: NumberFormatOptions | None = None,
    currency_resolver: CurrencyResolver | None = None,
) -> str:
    """Format a number with one of a descriptor's number patterns.

    Args:
        value: int, float, Decimal or numeric string
        descriptor: Locale data
        style: Which of the locale's four number patterns to use
        options: Digit-count and currency overrides
        currency_resolver: Source of currency symbols and digits (default:
            the bundled global table)

    Returns:
        Formatted string

    Raises:
        InvalidNumberError: If value is not numeric
        NumberFormatConfigError: If currency style has no currency code, or
            the fraction bounds are inverted
        LocaleDataError: If the locale lacks the pattern or a needed symbol

    Example:
        >>> from localeengine.data.locales import load_bundled_locale
        >>> en = load_bundled_locale("en")
        >>> render_number(1234567.5, en, options=NumberFormatOptions(max_fraction_digits=1))
        '1,234,567.5'
    """
    options = options or NumberFormatOptions()
    number = to_decimal(value)

    if style >= len(descriptor.number_formats):
        raise LocaleDataError(
            ErrorTemplate.locale_data_undefined(
                descriptor.locale_id, f"{style.name.lower()} number format"
            )
        )
    pattern = parse_number_pattern(
        descriptor.number_formats[style], descriptor.number_symbol(NumberSymbol.MINUS_SIGN)
    )

    currency_string = ""
    if style is NumberFormatStyle.CURRENCY:
        code = options.currency_code
        if not code:
            raise NumberFormatConfigError(ErrorTemplate.currency_code_required())
        resolver = currency_resolver or _currency_resolver
        currency_digits = resolver.digits(code, descriptor)
        pattern = replace(
            pattern, min_fraction_digits=currency_digits, max_fraction_digits=currency_digits
        )
        currency_string = resolver.symbol(code, options.currency_display, descriptor)
    elif style is NumberFormatStyle.PERCENT and number.is_finite():
        number = number.scaleb(2, context=EXACT_CONTEXT)

    if number.is_nan():
        text, negative = descriptor.number_symbol(NumberSymbol.NAN), False
    elif number.is_infinite():
        text, negative = descriptor.number_symbol(NumberSymbol.INFINITY), number.is_signed()
    else:
        text, is_zero = _render_finite(number, descriptor, pattern, options, style)
        negative = number.is_signed() and not is_zero

    if negative:
        text = pattern.negative_prefix + text + pattern.negative_suffix
    else:
        text = pattern.positive_prefix + text + pattern.positive_suffix

    match style:
        case NumberFormatStyle.CURRENCY:
            if options.currency_display == CurrencyDisplay.NAME:
                currency_string = _space_currency_name(text, currency_string)
            text = text.replace(PATTERN_CURRENCY, currency_string, 1)
            text = text.replace(PATTERN_CURRENCY, "", 1).strip()
        case NumberFormatStyle.PERCENT:
            text = text.replace(
                PATTERN_PERCENT, descriptor.number_symbol(NumberSymbol.PERCENT_SIGN)
            )
    return text


def _lookup(locale: str, registry: LocaleRegistry | None) -> LocaleDescriptor:
    return (registry or get_default_registry()).lookup(locale)


def format_number(
    value: NumericInput,
    locale: str,
    digits_info: str | None = None,
    registry: LocaleRegistry | None = None,
) -> str:
    """Format a decimal number.

    Args:
        value: Number to format
        locale: Locale id (resolved through the registry fallback chain)
        digits_info: ``{minInt}.{minFrac}-{maxFrac}`` overrides, e.g. "1.0-3"
        registry: Registry to resolve the locale in (default: shared one)

    Example:
        >>> format_number(1234.5678, "en", "1.0-2")
        '1,234.57'
    """
    return render_number(
        value,
        _lookup(locale, registry),
        NumberFormatStyle.DECIMAL,
        NumberFormatOptions.from_digits_info(digits_info),
    )


def format_percent(
    value: NumericInput,
    locale: str,
    digits_info: str | None = None,
    registry: LocaleRegistry | None = None,
) -> str:
    """Format a ratio as a percentage (0.25 -> "25%").

    Example:
        >>> format_percent(0.256, "en")
        '26%'
    """
    return render_number(
        value,
        _lookup(locale, registry),
        NumberFormatStyle.PERCENT,
        NumberFormatOptions.from_digits_info(digits_info),
    )


def format_currency(
    value: NumericInput,
    locale: str,
    currency_code: str,
    display: CurrencyDisplay | str = CurrencyDisplay.SYMBOL,
    digits_info: str | None = None,
    registry: LocaleRegistry | None = None,
    currency_resolver: CurrencyResolver | None = None,
) -> str:
    """Format a monetary amount.

    Fraction digits default to the currency's own digit count. Symbols and
    digit counts come from ``currency_resolver`` when given, so a custom
    global currency table reaches the formatter without touching locales.

    Example:
        >>> format_currency(5, "en", "USD")
        '$5.00'
        >>> format_currency(1500, "en", "JPY", CurrencyDisplay.CODE)
        'JPY1,500'
    """
    return render_number(
        value,
        _lookup(locale, registry),
        NumberFormatStyle.CURRENCY,
        NumberFormatOptions.from_digits_info(
            digits_info, currency_code=currency_code, currency_display=display
        ),
        currency_resolver,
    )


def format_scientific(
    value: NumericInput,
    locale: str,
    digits_info: str | None = None,
    registry: LocaleRegistry | None = None,
) -> str:
    """Format in scientific notation with the locale's exponent symbol.

    Example:
        >>> format_scientific(1234, "en")
        '1.234E3'
    """
    return render_number(
        value,
        _lookup(locale, registry),
        NumberFormatStyle.SCIENTIFIC,
        NumberFormatOptions.from_digits_info(digits_info),
    )
