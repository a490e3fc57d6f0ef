"""Number pattern and digits-info parsing.

Parses the subset of the CLDR number pattern language used by locale data:

    #,##0.###        decimal
    #,##0%           percent
    ¤#,##0.00        currency (``¤`` is the currency placeholder)
    ¤ #,##0.00;¤-#,##0.00   explicit negative subpattern
    #E0              scientific

and the ``{minInt}.{minFrac}-{maxFrac}`` digits-info mini-language
(``"1.0-3"``).

Python 3.13+.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass

from localeengine.constants import (
    MAX_LOCALE_CACHE_SIZE,
    PATTERN_DECIMAL,
    PATTERN_DIGIT,
    PATTERN_EXPONENT,
    PATTERN_GROUP,
    PATTERN_SEPARATOR,
    PATTERN_ZERO,
)
from localeengine.diagnostics import ErrorTemplate, NumberFormatConfigError

__all__ = [
    "DigitsInfo",
    "NumberPattern",
    "parse_digits_info",
    "parse_number_pattern",
]

_NUMBER_CHARS = frozenset(PATTERN_DIGIT + PATTERN_ZERO + PATTERN_GROUP + PATTERN_DECIMAL)
_DIGITS_INFO_RE = re.compile(r"^(\d+)?\.((\d+)(-(\d+))?)?$")


@dataclass(frozen=True, slots=True)
class NumberPattern:
    """Parsed number pattern.

    Attributes:
        positive_prefix: Literal text before the number
        positive_suffix: Literal text after the number
        negative_prefix: Prefix for negative values
        negative_suffix: Suffix for negative values
        min_integer_digits: Zero-padded integer width
        min_fraction_digits: Fraction digits always shown
        max_fraction_digits: Fraction digits shown at most (None: unbounded)
        primary_grouping: Size of the rightmost integer group (0: no grouping)
        secondary_grouping: Size of the other integer groups
        min_exponent_digits: Zero-padded exponent width (0: not scientific)
        exponent_plus: Show ``+`` on non-negative exponents
    """

    positive_prefix: str = ""
    positive_suffix: str = ""
    negative_prefix: str = "-"
    negative_suffix: str = ""
    min_integer_digits: int = 1
    min_fraction_digits: int = 0
    max_fraction_digits: int | None = 0
    primary_grouping: int = 0
    secondary_grouping: int = 0
    min_exponent_digits: int = 0
    exponent_plus: bool = False

    @property
    def is_scientific(self) -> bool:
        """True when the pattern has an exponent part."""
        return self.min_exponent_digits > 0


def _split_affixes(subpattern: str) -> tuple[str, str, str]:
    """Split into (prefix, number part, suffix) around the digit characters."""
    start = next((i for i, ch in enumerate(subpattern) if ch in _NUMBER_CHARS), len(subpattern))
    end = start
    while end < len(subpattern) and (
        subpattern[end] in _NUMBER_CHARS
        or (
            subpattern[end] == PATTERN_EXPONENT
            and subpattern[end + 1 : end + 2] in (PATTERN_ZERO, "+")
        )
        or (subpattern[end] == "+" and subpattern[end - 1] == PATTERN_EXPONENT)
    ):
        end += 1
    return subpattern[:start], subpattern[start:end], subpattern[end:]


def _unquote(text: str) -> str:
    return text.replace("''", "\0").replace("'", "").replace("\0", "'")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def parse_number_pattern(pattern: str, minus_sign: str = "-") -> NumberPattern:
    """Parse a number pattern.

    Args:
        pattern: Pattern string, optionally ``positive;negative``
        minus_sign: Locale minus sign, prefixed to the positive prefix when
            the pattern has no negative subpattern

    Returns:
        Parsed pattern

    Example:
        >>> p = parse_number_pattern("¤#,##0.00")
        >>> p.positive_prefix, p.min_fraction_digits, p.primary_grouping
        ('¤', 2, 3)
    """
    positive, _, negative = pattern.partition(PATTERN_SEPARATOR)
    prefix, number, suffix = _split_affixes(positive)

    mantissa, _, exponent = number.partition(PATTERN_EXPONENT)
    exponent_plus = exponent.startswith("+")
    exponent_digits = exponent.lstrip("+").count(PATTERN_ZERO)

    integer, _, fraction = mantissa.partition(PATTERN_DECIMAL)
    min_fraction = len(fraction) - len(fraction.lstrip(PATTERN_ZERO))
    max_fraction: int | None = len(fraction)
    if exponent_digits and not fraction:
        # "#E0": show every significant digit of the mantissa.
        max_fraction = None

    groups = integer.split(PATTERN_GROUP)
    primary = len(groups[-1]) if len(groups) > 1 else 0
    secondary = len(groups[-2]) if len(groups) > 2 else primary

    positive_prefix, positive_suffix = _unquote(prefix), _unquote(suffix)
    if negative:
        neg_prefix, _, neg_suffix = _split_affixes(negative)
        negative_prefix, negative_suffix = _unquote(neg_prefix), _unquote(neg_suffix)
    else:
        negative_prefix = minus_sign + positive_prefix
        negative_suffix = positive_suffix

    return NumberPattern(
        positive_prefix=positive_prefix,
        positive_suffix=positive_suffix,
        negative_prefix=negative_prefix,
        negative_suffix=negative_suffix,
        min_integer_digits=max(integer.count(PATTERN_ZERO), 1 if not exponent_digits else 0),
        min_fraction_digits=min_fraction,
        max_fraction_digits=max_fraction,
        primary_grouping=primary,
        secondary_grouping=secondary,
        min_exponent_digits=exponent_digits,
        exponent_plus=exponent_plus,
    )


@dataclass(frozen=True, slots=True)
class DigitsInfo:
    """Parsed ``{minInt}.{minFrac}-{maxFrac}``; absent parts are None."""

    min_integer_digits: int | None = None
    min_fraction_digits: int | None = None
    max_fraction_digits: int | None = None


def parse_digits_info(digits_info: str) -> DigitsInfo:
    """Parse a digits-info string.

    Example:
        >>> parse_digits_info("1.0-3")
        DigitsInfo(min_integer_digits=1, min_fraction_digits=0, max_fraction_digits=3)
        >>> parse_digits_info("3.")
        DigitsInfo(min_integer_digits=3, min_fraction_digits=None, max_fraction_digits=None)

    Raises:
        NumberFormatConfigError: If the string does not match the format
    """
    match = _DIGITS_INFO_RE.match(digits_info)
    if match is None:
        raise NumberFormatConfigError(ErrorTemplate.digits_info_invalid(digits_info))
    min_int, min_frac, max_frac = match.group(1), match.group(3), match.group(5)
    return DigitsInfo(
        min_integer_digits=None if min_int is None else int(min_int),
        min_fraction_digits=None if min_frac is None else int(min_frac),
        max_fraction_digits=None if max_frac is None else int(max_frac),
    )
