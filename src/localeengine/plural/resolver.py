"""Explicit-case plural resolution.

Message templates offer a set of case keys such as ``{"=0", "one",
"other"}``. ``resolve_category`` picks the key for a value: an explicit
``=N`` match wins, then the locale's grammatical category, then
``other``.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Collection
from typing import TYPE_CHECKING

from localeengine.core.numeric import NumericInput, is_integral, plain_string, to_decimal
from localeengine.diagnostics import ErrorTemplate, PluralCaseError
from localeengine.enums import Plural

if TYPE_CHECKING:
    from localeengine.data.descriptor import LocaleDescriptor

__all__ = ["explicit_case_keys", "resolve_category"]

logger = logging.getLogger(__name__)


def explicit_case_keys(value: NumericInput) -> tuple[str, ...]:
    """Keys an explicit case may use for a value.

    The canonical decimal rendering always applies; an integral value also
    matches its plain integer form, so ``1.0`` matches both ``=1.0`` and
    ``=1``.

    Example:
        >>> explicit_case_keys(2)
        ('=2',)
        >>> explicit_case_keys(1.0)
        ('=1.0', '=1')
    """
    number = to_decimal(value)
    if not number.is_finite():
        return ()
    keys = [f"={plain_string(number)}"]
    if is_integral(number):
        integer_key = f"={int(number)}"
        if integer_key not in keys:
            keys.append(integer_key)
    return tuple(keys)


def resolve_category(
    value: NumericInput,
    cases: Collection[str],
    descriptor: LocaleDescriptor,
) -> str:
    """Select the case key for a value.

    Args:
        value: Number being pluralized (passed unmodified to the rule)
        cases: Available case keys (``"=0"``, ``"one"``, ``"other"``, ...)
        descriptor: Locale supplying the plural rule

    Returns:
        One of the keys in ``cases``

    Raises:
        PluralCaseError: If neither an explicit case, the category, nor
            ``other`` is available
        InvalidNumberError: If value is a non-numeric string
    """
    for key in explicit_case_keys(value):
        if key in cases:
            return key

    category = descriptor.plural_rule(value).keyword
    if category in cases:
        return category

    other = Plural.OTHER.keyword
    if other in cases:
        logger.debug(
            "No '%s' case for %s in locale %s; using '%s'",
            category, value, descriptor.locale_id, other,
        )
        return other

    raise PluralCaseError(ErrorTemplate.plural_case_missing(value, tuple(cases)))
