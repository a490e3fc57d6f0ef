"""Plural category selection.

Provides CLDR operands, the plural rule families and explicit-case
resolution. Everything here is a pure function of its inputs.

Python 3.13+.
"""

from .operands import PluralOperands
from .rules import (
    ArabicRule,
    CldrExpressionRule,
    EastSlavicRule,
    FrenchRule,
    FunctionRule,
    LatvianRule,
    NoPluralRule,
    OneRule,
    PluralRule,
    PolishRule,
)
from .resolver import explicit_case_keys, resolve_category

__all__ = [
    "ArabicRule",
    "CldrExpressionRule",
    "EastSlavicRule",
    "FrenchRule",
    "FunctionRule",
    "LatvianRule",
    "NoPluralRule",
    "OneRule",
    "PluralOperands",
    "PluralRule",
    "PolishRule",
    "explicit_case_keys",
    "resolve_category",
]
