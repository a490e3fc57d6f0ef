"""Currency symbol and digit resolution.

Symbols resolve through the active locale's sparse ``currencies`` table
first, then the locale-independent global table, then the bare ISO code.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from localeengine.constants import DEFAULT_CURRENCY_DIGITS, DEFAULT_LOCALE
from localeengine.data.currencies import GLOBAL_CURRENCIES
from localeengine.data.descriptor import CurrencyEntry
from localeengine.enums import CurrencyDisplay
from localeengine.runtime.registry import get_default_registry

if TYPE_CHECKING:
    from localeengine.data.descriptor import LocaleDescriptor
    from localeengine.runtime.registry import LocaleRegistry

__all__ = [
    "CurrencyResolver",
    "get_currency_symbol",
    "get_number_of_currency_digits",
]

_EMPTY_ENTRY = CurrencyEntry()


class CurrencyResolver:
    """Resolve currency display strings and fraction digits.

    Args:
        table: Global ``{code: CurrencyEntry}`` table consulted when the
            locale has no entry of its own

    Example:
        >>> resolver = CurrencyResolver()
        >>> resolver.symbol("CAD", CurrencyDisplay.SYMBOL)
        'CA$'
        >>> resolver.digits("JPY")
        0
    """

    __slots__ = ("_table",)

    def __init__(self, table: Mapping[str, CurrencyEntry] = GLOBAL_CURRENCIES) -> None:
        self._table = table

    def entry(self, code: str, descriptor: LocaleDescriptor | None = None) -> CurrencyEntry:
        """Locale entry for ``code``, else the global entry, else an empty one."""
        if descriptor is not None:
            local = descriptor.currencies.get(code)
            if local is not None:
                return local
        return self._table.get(code, _EMPTY_ENTRY)

    def symbol(
        self,
        code: str,
        display: CurrencyDisplay | str = CurrencyDisplay.SYMBOL,
        descriptor: LocaleDescriptor | None = None,
    ) -> str:
        """Display string for a currency.

        Args:
            code: ISO 4217 code
            display: ``CurrencyDisplay`` member; any other string is
                returned unchanged as a literal symbol
            descriptor: Active locale (None: global table only)
        """
        match display:
            case CurrencyDisplay.CODE:
                return code
            case CurrencyDisplay.NAME:
                if descriptor is not None and descriptor.currency_code == code:
                    return descriptor.currency_name or code
                return code
            case CurrencyDisplay.NARROW_SYMBOL:
                entry = self.entry(code, descriptor)
                return entry.narrow or entry.symbol or code
            case CurrencyDisplay.SYMBOL:
                return self.entry(code, descriptor).symbol or code
        return display

    def digits(self, code: str, descriptor: LocaleDescriptor | None = None) -> int:
        """Number of fraction digits used for amounts in ``code``."""
        if descriptor is not None:
            local = descriptor.currencies.get(code)
            if local is not None and local.digits is not None:
                return local.digits
        entry = self._table.get(code)
        if entry is not None and entry.digits is not None:
            return entry.digits
        return DEFAULT_CURRENCY_DIGITS


_default_resolver = CurrencyResolver()


def get_currency_symbol(
    code: str,
    display: CurrencyDisplay | str = CurrencyDisplay.SYMBOL,
    locale: str = DEFAULT_LOCALE,
    registry: LocaleRegistry | None = None,
) -> str:
    """Currency display string for a locale.

    Raises:
        LocaleNotFoundError: If the locale is not registered
    """
    descriptor = (registry or get_default_registry()).lookup(locale)
    return _default_resolver.symbol(code, display, descriptor)


def get_number_of_currency_digits(code: str) -> int:
    """Fraction digits of a currency from the global table (default 2).

    Example:
        >>> get_number_of_currency_digits("EUR"), get_number_of_currency_digits("JPY")
        (2, 0)
    """
    return _default_resolver.digits(code)
