"""Locale identifier utilities.

Centralizes locale id normalization used throughout the codebase.
Registry keys are lowercase BCP-47 style (``en-us``); Babel wants POSIX
style (``en_US``). All locale handling normalizes at the system boundary
using these functions, then uses the normalized form for keys and lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from .constants import MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "locale_fallback_chain",
    "normalize_locale_id",
    "to_posix_locale",
]


def normalize_locale_id(locale_id: str) -> str:
    """Normalize a locale id to the registry key form.

    Lowercases and replaces underscores with hyphens.

    Args:
        locale_id: Locale id in any case, BCP-47 or POSIX separators

    Returns:
        Registry key (e.g., "en-us")

    Example:
        >>> normalize_locale_id("en_US")
        'en-us'
        >>> normalize_locale_id("zh-Hant-TW")
        'zh-hant-tw'
    """
    return locale_id.lower().replace("_", "-")


def locale_fallback_chain(locale_id: str) -> tuple[str, ...]:
    """Candidate registry keys for a locale id, longest first.

    Strips the last ``-`` segment repeatedly until nothing is left.

    Example:
        >>> locale_fallback_chain("en-US-posix")
        ('en-us-posix', 'en-us', 'en')
    """
    key = normalize_locale_id(locale_id)
    chain: list[str] = []
    while key:
        chain.append(key)
        key, _, _ = key.rpartition("-")
    return tuple(chain)


def to_posix_locale(locale_id: str) -> str:
    """Convert a locale id to the POSIX form Babel parses.

    Example:
        >>> to_posix_locale("pt-BR")
        'pt_BR'
    """
    return locale_id.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_id: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale id once and caches the result. Thread-safe via
    lru_cache internal locking.

    Args:
        locale_id: Locale id (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    from .core.babel_compat import get_locale_class  # noqa: PLC0415 - circular

    return get_locale_class().parse(to_posix_locale(locale_id))
