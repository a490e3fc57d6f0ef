"""Canonical decimal conversion for formatting and plural selection.

Every numeric input is turned into a ``Decimal`` built from its decimal
string, never from binary float introspection: ``int`` uses its digits,
``Decimal`` keeps its scale, and ``float`` uses ``repr`` (the shortest
string that round-trips). Exponent notation is expanded to positional
form so digit counts see the plain decimal rendering.

Finite values are bounded: the adjusted exponent and the fraction length
may not exceed ``MAX_NUMBER_EXPONENT``. Inside that range every value
is exact under ``EXACT_CONTEXT``, which downstream arithmetic uses.

Python 3.13+.
"""

from decimal import Context, Decimal, InvalidOperation
from typing import TypeAlias

from localeengine.constants import MAX_NUMBER_EXPONENT
from localeengine.diagnostics import ErrorTemplate, InvalidNumberError

__all__ = [
    "EXACT_CONTEXT",
    "NumericInput",
    "expand_exponent",
    "is_integral",
    "plain_string",
    "to_decimal",
]

NumericInput: TypeAlias = int | float | Decimal | str

# Holds any in-range value (and its percent scaling) without rounding.
EXACT_CONTEXT = Context(
    prec=2 * MAX_NUMBER_EXPONENT + 8,
    Emax=MAX_NUMBER_EXPONENT + 8,
    Emin=-(MAX_NUMBER_EXPONENT + 8),
)


def expand_exponent(value: Decimal) -> Decimal:
    """Rewrite ``1E+22`` or ``1E-7`` as a positional Decimal.

    Non-finite values are returned unchanged.
    """
    if not value.is_finite():
        return value
    return Decimal(format(value, "f"))


def plain_string(value: Decimal) -> str:
    """Positional string form without exponent (``"0.0000001"``)."""
    return format(value, "f")


def is_integral(value: Decimal) -> bool:
    """True for finite values with no fractional part."""
    return value.is_finite() and value == value.to_integral_value()


def _check_range(value: Decimal, original: NumericInput) -> None:
    if not value.is_finite():
        return
    adjusted = value.adjusted()
    exponent = adjusted - len(value.as_tuple().digits) + 1
    if adjusted > MAX_NUMBER_EXPONENT:
        offending = adjusted
    elif exponent < -MAX_NUMBER_EXPONENT:
        offending = exponent
    else:
        return
    # str() of a huge int trips the int-to-str digit limit; Decimal's does not.
    text = original if isinstance(original, str) else str(value)
    raise InvalidNumberError(
        ErrorTemplate.number_out_of_range(offending, MAX_NUMBER_EXPONENT),
        input_value=text,
    )


def to_decimal(value: NumericInput) -> Decimal:
    """Convert a number or numeric string to its canonical Decimal.

    Args:
        value: int, float, Decimal, or a string such as ``"1.50"``

    Returns:
        Decimal in positional form; NaN and infinities pass through

    Raises:
        InvalidNumberError: If the value is not numeric, or if its adjusted
            exponent or fraction length exceeds ``MAX_NUMBER_EXPONENT``

    Examples:
        >>> to_decimal(1.0)
        Decimal('1.0')
        >>> to_decimal(1e22)
        Decimal('10000000000000000000000')
        >>> to_decimal("2.50")
        Decimal('2.50')
    """
    match value:
        case bool():
            result = Decimal(int(value))
        case int():
            result = Decimal(value)
        case float():
            result = Decimal(repr(value))
        case Decimal():
            result = value
        case str():
            try:
                result = Decimal(value.strip())
            except InvalidOperation:
                raise InvalidNumberError(
                    ErrorTemplate.number_conversion_failed(value), input_value=value
                ) from None
        case _:
            raise InvalidNumberError(
                ErrorTemplate.number_conversion_failed(value), input_value=str(value)
            )
    _check_range(result, value)
    return expand_exponent(result)
