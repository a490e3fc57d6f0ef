"""CLDR plural operands.

Operands are read off the canonical decimal string of the value (see
``core.numeric.to_decimal``), so ``1.10`` has two visible fraction digits
when given as ``Decimal("1.10")`` and one when given as the float ``1.1``.

Reference: https://unicode.org/reports/tr35/tr35-numbers.html#Operands
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from localeengine.core.numeric import NumericInput, plain_string, to_decimal

__all__ = ["PluralOperands"]


@dataclass(frozen=True, slots=True)
class PluralOperands:
    """Operands of a number, as defined by CLDR.

    Attributes:
        source: Canonical signed value the operands were derived from
        n: Absolute value
        i: Integer digits of n
        v: Number of visible fraction digits, with trailing zeros
        w: Number of visible fraction digits, without trailing zeros
        f: Visible fraction digits, with trailing zeros, as an integer
        t: Visible fraction digits, without trailing zeros, as an integer
    """

    source: Decimal
    n: Decimal
    i: int
    v: int
    w: int
    f: int
    t: int

    @classmethod
    def from_value(cls, value: NumericInput) -> PluralOperands | None:
        """Derive operands, or None for NaN and infinities."""
        source = to_decimal(value)
        if not source.is_finite():
            return None
        n = source.copy_abs()
        integer, _, fraction = plain_string(n).partition(".")
        trimmed = fraction.rstrip("0")
        return cls(
            source=source,
            n=n,
            i=int(integer),
            v=len(fraction),
            w=len(trimmed),
            f=int(fraction or 0),
            t=int(trimmed or 0),
        )

    def n_mod(self, divisor: int) -> int | None:
        """``n % divisor`` when n is integral, else None.

        A value with a visible non-zero fraction never equals an integer
        modulo anything, so rules compare None as a non-match.
        """
        return self.i % divisor if self.t == 0 else None

    @property
    def is_integer(self) -> bool:
        """True when n has no non-zero fraction digits."""
        return self.t == 0
