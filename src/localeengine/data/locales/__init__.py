"""Locale literals shipped with the package.

Each module holds one locale's positional literal (``LOCALE_DATA``) and,
where the locale has them, extended day periods in slot 21. Modules are
imported on first use.

Python 3.13+.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

from localeengine.data.codec import descriptor_from_positional
from localeengine.locale_utils import normalize_locale_id

if TYPE_CHECKING:
    from localeengine.data.descriptor import LocaleDescriptor

__all__ = ["BUNDLED_LOCALES", "load_bundled_locale"]

# Registry key -> module name in this package.
BUNDLED_LOCALES: dict[str, str] = {
    "de-ch": "de_ch",
    "en": "en",
    "fr": "fr",
    "th": "th",
    "uk": "uk",
}


def load_bundled_locale(locale_id: str) -> LocaleDescriptor:
    """Decode a bundled locale literal.

    Args:
        locale_id: Locale id in any case or separator style

    Raises:
        KeyError: If the locale is not bundled
    """
    module_name = BUNDLED_LOCALES[normalize_locale_id(locale_id)]
    module = importlib.import_module(f"{__name__}.{module_name}")
    return descriptor_from_positional(module.LOCALE_DATA)
