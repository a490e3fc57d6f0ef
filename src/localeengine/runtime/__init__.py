"""Runtime state: the locale registry and its readers-writer lock.

Python 3.13+.
"""

from .registry import LocaleRegistry, get_default_registry, reset_default_registry
from .rwlock import RWLock

__all__ = [
    "LocaleRegistry",
    "RWLock",
    "get_default_registry",
    "reset_default_registry",
]
