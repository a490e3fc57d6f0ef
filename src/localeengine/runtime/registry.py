"""Locale registry.

Maps normalized locale ids (lowercase, ``-`` separated) to descriptors.
Lookups fall back through parent locales (``en-us-posix`` -> ``en-us`` ->
``en``) and fail loudly when nothing matches; there is no silent default
locale.

Registration is expected during startup, but a readers-writer lock makes
late registration safe: each key is replaced atomically, so a concurrent
lookup sees either the old or the new descriptor.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Sequence
from typing import Any, TypeAlias

from localeengine.constants import DEFAULT_LOCALE
from localeengine.data.codec import decode_extra, descriptor_from_positional
from localeengine.data.descriptor import ExtraDayPeriods, LocaleDescriptor
from localeengine.data.locales import load_bundled_locale
from localeengine.diagnostics import ErrorTemplate, LocaleNotFoundError
from localeengine.locale_utils import locale_fallback_chain, normalize_locale_id

from .rwlock import RWLock

__all__ = [
    "LocaleRegistry",
    "get_default_registry",
    "reset_default_registry",
]

logger = logging.getLogger(__name__)

LocaleData: TypeAlias = LocaleDescriptor | Sequence[Any]
ExtraData: TypeAlias = ExtraDayPeriods | Sequence[Any]


class LocaleRegistry:
    """Thread-safe table of locale descriptors.

    Example:
        >>> registry = LocaleRegistry()
        >>> registry.load_bundled("en")
        LocaleDescriptor(locale_id='en', ...)
        >>> registry.lookup("en-US-posix").locale_id
        'en'
    """

    __slots__ = ("_descriptors", "_lock")

    def __init__(self, descriptors: Iterable[LocaleDescriptor] = ()) -> None:
        self._descriptors: dict[str, LocaleDescriptor] = {}
        self._lock = RWLock()
        for descriptor in descriptors:
            self.register(descriptor)

    def register(
        self,
        data: LocaleData,
        locale_id: str | None = None,
        extra: ExtraData | None = None,
    ) -> LocaleDescriptor:
        """Register locale data, replacing any entry under the same key.

        Args:
            data: Descriptor or positional locale literal
            locale_id: Key to store under (default: the descriptor's own id)
            extra: Extended day periods to merge into the stored descriptor

        Returns:
            The stored descriptor

        Raises:
            LocaleDataError: If a positional literal is malformed
        """
        if isinstance(data, LocaleDescriptor):
            descriptor = data
        else:
            descriptor = descriptor_from_positional(data)
        if extra is not None:
            if not isinstance(extra, ExtraDayPeriods):
                extra = decode_extra(extra)
            descriptor = descriptor.with_extra(extra)

        key = normalize_locale_id(locale_id or descriptor.locale_id)
        with self._lock.write():
            replaced = key in self._descriptors
            self._descriptors[key] = descriptor

        if replaced:
            logger.info("Locale data for '%s' replaced by new registration", key)
        else:
            logger.debug("Registered locale: %s", key)
        return descriptor

    def lookup(self, locale_id: str) -> LocaleDescriptor:
        """Resolve a locale id, falling back through its parents.

        Raises:
            LocaleNotFoundError: If neither the id nor any parent is registered
        """
        chain = locale_fallback_chain(locale_id)
        with self._lock.read():
            for key in chain:
                descriptor = self._descriptors.get(key)
                if descriptor is not None:
                    break
            else:
                descriptor = None

        if descriptor is None:
            raise LocaleNotFoundError(
                ErrorTemplate.locale_not_found(locale_id, chain),
                locale_id=locale_id,
                attempted=chain,
            )
        if key != chain[0]:
            logger.debug("Locale '%s' resolved to parent '%s'", locale_id, key)
        return descriptor

    def __contains__(self, locale_id: object) -> bool:
        """Exact (no fallback) membership test on the normalized id."""
        if not isinstance(locale_id, str):
            return False
        with self._lock.read():
            return normalize_locale_id(locale_id) in self._descriptors

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._descriptors)

    def locale_ids(self) -> tuple[str, ...]:
        """Registered keys, sorted."""
        with self._lock.read():
            return tuple(sorted(self._descriptors))

    def clear(self) -> None:
        """Remove every registration."""
        with self._lock.write():
            self._descriptors.clear()
        logger.debug("Locale registry cleared")

    def load_bundled(self, locale_id: str) -> LocaleDescriptor:
        """Register one of the locale literals shipped with the package.

        Raises:
            KeyError: If the locale is not bundled
        """
        return self.register(load_bundled_locale(locale_id), locale_id)

    def load_cldr(self, locale_id: str, *, include_day_periods: bool = False) -> LocaleDescriptor:
        """Build a descriptor from Babel's CLDR data and register it.

        Args:
            locale_id: Locale id to load and register under
            include_day_periods: Attach extended day periods (see
                ``descriptor_from_cldr``)

        Raises:
            BabelImportError: If Babel is not installed
            LocaleDataError: If Babel has no data for the locale
        """
        from localeengine.data.cldr import descriptor_from_cldr  # noqa: PLC0415 - Babel is lazy

        descriptor = descriptor_from_cldr(locale_id, include_day_periods=include_day_periods)
        logger.debug("Loaded CLDR data for locale: %s", locale_id)
        return self.register(descriptor, locale_id)


_default_registry: LocaleRegistry | None = None
_default_registry_lock = threading.Lock()


def get_default_registry() -> LocaleRegistry:
    """Process-wide registry, created on first use with ``en`` registered."""
    global _default_registry  # noqa: PLW0603 - lazy singleton
    with _default_registry_lock:
        if _default_registry is None:
            registry = LocaleRegistry()
            registry.load_bundled(DEFAULT_LOCALE)
            _default_registry = registry
        return _default_registry


def reset_default_registry() -> None:
    """Drop the process-wide registry; the next access rebuilds it."""
    global _default_registry  # noqa: PLW0603 - lazy singleton
    with _default_registry_lock:
        _default_registry = None
