"""Plural rule families.

Most locales share a handful of rule shapes, so each shape is one
``PluralRule`` subclass instead of one closure per locale. Languages
outside these families use ``CldrExpressionRule``, which evaluates CLDR
rule text through ``babel.plural``. ``FunctionRule`` adapts the plain
plural functions found in generated locale data.

Every rule is total: any finite number maps to a category and NaN or an
infinity maps to ``Plural.OTHER``.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar

from localeengine.core.babel_compat import get_babel_plural_rule
from localeengine.core.numeric import NumericInput
from localeengine.enums import Plural

from .operands import PluralOperands

__all__ = [
    "ArabicRule",
    "CldrExpressionRule",
    "EastSlavicRule",
    "FrenchRule",
    "FunctionRule",
    "LatvianRule",
    "NoPluralRule",
    "OneRule",
    "PluralRule",
    "PolishRule",
]


def _between(value: int | None, low: int, high: int) -> bool:
    return value is not None and low <= value <= high


class PluralRule(ABC):
    """Maps a number to its plural category.

    Subclasses implement ``select`` over precomputed operands; calling the
    rule with a raw value derives the operands first.
    """

    __slots__ = ()

    #: CLDR rule text equivalent to the family, for documentation and tests.
    cldr_rules: ClassVar[Mapping[str, str]] = {}

    def __call__(self, value: NumericInput) -> Plural:
        operands = PluralOperands.from_value(value)
        if operands is None:
            return Plural.OTHER
        return self.select(operands)

    @abstractmethod
    def select(self, operands: PluralOperands) -> Plural:
        """Category for the given operands."""

    @staticmethod
    def coerce(value: Any) -> PluralRule:
        """Convert a descriptor's plural slot into a rule.

        Accepts a PluralRule, a mapping of CLDR keyword to rule text, or a
        plain callable (including ``babel.plural.PluralRule``) returning a
        ``Plural``, its integer code, or its keyword.

        Raises:
            TypeError: If the value is none of these
        """
        match value:
            case PluralRule():
                return value
            case Mapping():
                return CldrExpressionRule.from_mapping(value)
            case _ if callable(value):
                return FunctionRule(value)
        msg = f"Cannot use {type(value).__name__} as a plural rule"
        raise TypeError(msg)


@dataclass(frozen=True, slots=True)
class NoPluralRule(PluralRule):
    """Languages without grammatical number (ja, th, zh, ...)."""

    cldr_rules: ClassVar[Mapping[str, str]] = {}

    def select(self, operands: PluralOperands) -> Plural:
        return Plural.OTHER


@dataclass(frozen=True, slots=True)
class OneRule(PluralRule):
    """``one`` for exactly the integer 1 (en, de, nl, sv, it, ...)."""

    cldr_rules: ClassVar[Mapping[str, str]] = {"one": "i = 1 and v = 0"}

    def select(self, operands: PluralOperands) -> Plural:
        if operands.i == 1 and operands.v == 0:
            return Plural.ONE
        return Plural.OTHER


@dataclass(frozen=True, slots=True)
class FrenchRule(PluralRule):
    """French: 0 and 1 (with any fraction) are ``one``; exact millions are ``many``."""

    cldr_rules: ClassVar[Mapping[str, str]] = {
        "one": "i = 0,1",
        "many": "i != 0 and i % 1000000 = 0 and v = 0",
    }

    def select(self, operands: PluralOperands) -> Plural:
        i = operands.i
        if i in (0, 1):
            return Plural.ONE
        if i != 0 and i % 1_000_000 == 0 and operands.v == 0:
            return Plural.MANY
        return Plural.OTHER


@dataclass(frozen=True, slots=True)
class EastSlavicRule(PluralRule):
    """Russian and Ukrainian: one/few/many by the last two integer digits."""

    cldr_rules: ClassVar[Mapping[str, str]] = {
        "one": "v = 0 and i % 10 = 1 and i % 100 != 11",
        "few": "v = 0 and i % 10 = 2..4 and i % 100 != 12..14",
        "many": "v = 0 and i % 10 = 0 or v = 0 and i % 10 = 5..9 or v = 0 and i % 100 = 11..14",
    }

    def select(self, operands: PluralOperands) -> Plural:
        if operands.v != 0:
            return Plural.OTHER
        mod10, mod100 = operands.i % 10, operands.i % 100
        if mod10 == 1 and mod100 != 11:
            return Plural.ONE
        if 2 <= mod10 <= 4 and not 12 <= mod100 <= 14:
            return Plural.FEW
        return Plural.MANY


@dataclass(frozen=True, slots=True)
class PolishRule(PluralRule):
    """Polish: like East Slavic, but only the integer 1 is ``one``."""

    cldr_rules: ClassVar[Mapping[str, str]] = {
        "one": "i = 1 and v = 0",
        "few": "v = 0 and i % 10 = 2..4 and i % 100 != 12..14",
        "many": (
            "v = 0 and i != 1 and i % 10 = 0..1 or v = 0 and i % 10 = 5..9"
            " or v = 0 and i % 100 = 12..14"
        ),
    }

    def select(self, operands: PluralOperands) -> Plural:
        if operands.v != 0:
            return Plural.OTHER
        i = operands.i
        if i == 1:
            return Plural.ONE
        mod10, mod100 = i % 10, i % 100
        if 2 <= mod10 <= 4 and not 12 <= mod100 <= 14:
            return Plural.FEW
        return Plural.MANY


@dataclass(frozen=True, slots=True)
class LatvianRule(PluralRule):
    """Latvian: ``zero`` for 0, 10-20, 30...; ``one`` for 1, 21, 31...; fractions by f."""

    cldr_rules: ClassVar[Mapping[str, str]] = {
        "zero": "n % 10 = 0 or n % 100 = 11..19 or v = 2 and f % 100 = 11..19",
        "one": (
            "n % 10 = 1 and n % 100 != 11 or v = 2 and f % 10 = 1 and f % 100 != 11"
            " or v != 2 and f % 10 = 1"
        ),
    }

    def select(self, operands: PluralOperands) -> Plural:
        n10, n100 = operands.n_mod(10), operands.n_mod(100)
        f, v = operands.f, operands.v
        if n10 == 0 or _between(n100, 11, 19) or (v == 2 and 11 <= f % 100 <= 19):
            return Plural.ZERO
        if (
            (n10 == 1 and n100 != 11)
            or (v == 2 and f % 10 == 1 and f % 100 != 11)
            or (v != 2 and f % 10 == 1)
        ):
            return Plural.ONE
        return Plural.OTHER


@dataclass(frozen=True, slots=True)
class ArabicRule(PluralRule):
    """Arabic: all six categories."""

    cldr_rules: ClassVar[Mapping[str, str]] = {
        "zero": "n = 0",
        "one": "n = 1",
        "two": "n = 2",
        "few": "n % 100 = 3..10",
        "many": "n % 100 = 11..99",
    }

    def select(self, operands: PluralOperands) -> Plural:
        n100 = operands.n_mod(100)
        if operands.is_integer and operands.i <= 2:
            return Plural(operands.i)
        if _between(n100, 3, 10):
            return Plural.FEW
        if _between(n100, 11, 99):
            return Plural.MANY
        return Plural.OTHER


@dataclass(frozen=True, slots=True)
class CldrExpressionRule(PluralRule):
    """Any CLDR rule text, evaluated by ``babel.plural.PluralRule``.

    Attributes:
        rules: ``(keyword, condition)`` pairs, e.g. ``(("one", "n = 1"),)``
    """

    rules: tuple[tuple[str, str], ...]
    _compiled: Any = field(init=False, repr=False, compare=False, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_compiled", get_babel_plural_rule(dict(self.rules)))

    @classmethod
    def from_mapping(cls, rules: Mapping[str, str]) -> CldrExpressionRule:
        """Build from a ``{keyword: condition}`` mapping."""
        return cls(tuple(sorted(rules.items())))

    def select(self, operands: PluralOperands) -> Plural:
        return Plural.from_keyword(self._compiled(operands.n))


@dataclass(frozen=True, slots=True)
class FunctionRule(PluralRule):
    """Adapts a plain plural function from generated locale data.

    The function receives the raw value (it derives its own operands) and
    may return a ``Plural``, its integer code, or its keyword.
    """

    function: Callable[[Any], Plural | int | str]

    def __call__(self, value: NumericInput) -> Plural:
        return self._to_plural(self.function(value))

    def select(self, operands: PluralOperands) -> Plural:
        return self._to_plural(self.function(operands.source))

    @staticmethod
    def _to_plural(result: Plural | int | str) -> Plural:
        if isinstance(result, str):
            return Plural.from_keyword(result)
        return Plural(result)
