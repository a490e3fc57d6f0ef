"""Message-level helpers: plural category lookup and case selection.

``i18n_plural`` picks a message by plural case and substitutes ``#``
with the value; ``i18n_select`` picks a message by key.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from .core.numeric import NumericInput
from .plural.resolver import resolve_category
from .runtime.registry import get_default_registry

if TYPE_CHECKING:
    from .runtime.registry import LocaleRegistry

__all__ = ["get_plural_category", "i18n_plural", "i18n_select"]

_INTERPOLATION = "#"
_OTHER = "other"


def get_plural_category(
    value: NumericInput, locale: str, registry: LocaleRegistry | None = None
) -> str:
    """CLDR plural category keyword of a value in a locale.

    Example:
        >>> get_plural_category(1, "en"), get_plural_category(2, "en")
        ('one', 'other')
    """
    descriptor = (registry or get_default_registry()).lookup(locale)
    return descriptor.plural_rule(value).keyword


def i18n_plural(
    value: NumericInput | None,
    plural_map: Mapping[str, str],
    locale: str,
    registry: LocaleRegistry | None = None,
) -> str:
    """Select a message by plural case and substitute ``#`` with the value.

    Args:
        value: Number being counted; None renders as an empty string
        plural_map: Case key (``"=0"``, ``"one"``, ``"other"``...) to message
        locale: Locale supplying the plural rule
        registry: Registry to resolve the locale in

    Raises:
        PluralCaseError: If no case matches and there is no ``other``

    Example:
        >>> i18n_plural(3, {"=0": "No messages.", "one": "One message.",
        ...                 "other": "# messages."}, "en")
        '3 messages.'
    """
    if value is None:
        return ""
    descriptor = (registry or get_default_registry()).lookup(locale)
    key = resolve_category(value, plural_map.keys(), descriptor)
    return plural_map[key].replace(_INTERPOLATION, str(value))


def i18n_select(value: str | None, mapping: Mapping[str, str]) -> str:
    """Select a message by key, falling back to ``other``.

    Returns an empty string for None, or when neither the key nor
    ``other`` is present.

    Raises:
        TypeError: If value is neither a string nor None

    Example:
        >>> i18n_select("female", {"male": "He", "female": "She", "other": "They"})
        'She'
    """
    if value is None:
        return ""
    if not isinstance(value, str):
        msg = f"i18n_select expects a string key, got {type(value).__name__}"
        raise TypeError(msg)
    if value in mapping:
        return mapping[value]
    return mapping.get(_OTHER, "")
