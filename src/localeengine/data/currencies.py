"""Global currency table.

Locale-independent ``[symbol?, narrow_symbol?, digits?]`` entries, consulted
when a locale's own ``currencies`` table has no entry for a code. Codes
absent from this table use the ISO code as symbol and two fraction digits.

Python 3.13+.
"""

from types import MappingProxyType
from typing import Any

from .descriptor import CurrencyEntry

__all__ = ["GLOBAL_CURRENCIES", "GLOBAL_CURRENCIES_LITERAL"]

GLOBAL_CURRENCIES_LITERAL: dict[str, list[Any]] = {
    "ADP": [None, None, 0],
    "AFN": [None, "؋", 0],
    "ALL": [None, None, 0],
    "AMD": [None, "֏", 2],
    "AOA": [None, "Kz"],
    "ARS": [None, "$"],
    "AUD": ["A$", "$"],
    "AZN": [None, "₼"],
    "BAM": [None, "KM"],
    "BBD": [None, "$"],
    "BDT": [None, "৳"],
    "BHD": [None, None, 3],
    "BIF": [None, None, 0],
    "BMD": [None, "$"],
    "BND": [None, "$"],
    "BOB": [None, "Bs"],
    "BRL": ["R$"],
    "BSD": [None, "$"],
    "BWP": [None, "P"],
    "BYN": [None, None, 2],
    "BYR": [None, None, 0],
    "BZD": [None, "$"],
    "CAD": ["CA$", "$", 2],
    "CHF": [None, None, 2],
    "CLF": [None, None, 4],
    "CLP": [None, "$", 0],
    "CNY": ["CN¥", "¥"],
    "COP": [None, "$", 2],
    "CRC": [None, "₡", 2],
    "CUC": [None, "$"],
    "CUP": [None, "$"],
    "CZK": [None, "Kč", 2],
    "DJF": [None, None, 0],
    "DKK": [None, "kr", 2],
    "DOP": [None, "$"],
    "EGP": [None, "E£"],
    "ESP": [None, "₧", 0],
    "EUR": ["€"],
    "FJD": [None, "$"],
    "FKP": [None, "£"],
    "GBP": ["£"],
    "GEL": [None, "₾"],
    "GHS": [None, "GH₵"],
    "GIP": [None, "£"],
    "GNF": [None, "FG", 0],
    "GTQ": [None, "Q"],
    "GYD": [None, "$", 2],
    "HKD": ["HK$", "$"],
    "HNL": [None, "L"],
    "HRK": [None, "kn"],
    "HUF": [None, "Ft", 2],
    "IDR": [None, "Rp", 2],
    "ILS": ["₪"],
    "INR": ["₹"],
    "IQD": [None, None, 0],
    "IRR": [None, None, 0],
    "ISK": [None, "kr", 0],
    "ITL": [None, None, 0],
    "JMD": [None, "$"],
    "JOD": [None, None, 3],
    "JPY": ["¥", None, 0],
    "KGS": [None, "⃀"],
    "KHR": [None, "៛"],
    "KMF": [None, "CF", 0],
    "KPW": [None, "₩", 0],
    "KRW": ["₩", None, 0],
    "KWD": [None, None, 3],
    "KYD": [None, "$"],
    "KZT": [None, "₸"],
    "LAK": [None, "₭", 0],
    "LBP": [None, "L£", 0],
    "LKR": [None, "Rs"],
    "LRD": [None, "$"],
    "LTL": [None, "Lt"],
    "LUF": [None, None, 0],
    "LVL": [None, "Ls"],
    "LYD": [None, None, 3],
    "MGA": [None, "Ar", 0],
    "MGF": [None, None, 0],
    "MMK": [None, "K", 0],
    "MNT": [None, "₮", 2],
    "MRO": [None, None, 0],
    "MUR": [None, "Rs", 2],
    "MXN": ["MX$", "$"],
    "MYR": [None, "RM"],
    "NAD": [None, "$"],
    "NGN": [None, "₦"],
    "NIO": [None, "C$"],
    "NOK": [None, "kr", 2],
    "NPR": [None, "Rs"],
    "NZD": ["NZ$", "$"],
    "OMR": [None, None, 3],
    "PHP": ["₱"],
    "PKR": [None, "Rs", 2],
    "PLN": [None, "zł"],
    "PYG": [None, "₲", 0],
    "RON": [None, "lei"],
    "RSD": [None, None, 0],
    "RUB": [None, "₽"],
    "RWF": [None, "RF", 0],
    "SBD": [None, "$"],
    "SEK": [None, "kr", 2],
    "SGD": [None, "$"],
    "SHP": [None, "£"],
    "SLE": [None, None, 2],
    "SLL": [None, None, 0],
    "SOS": [None, None, 0],
    "SRD": [None, "$"],
    "SSP": [None, "£"],
    "STD": [None, None, 0],
    "STN": [None, "Db"],
    "SYP": [None, "£", 0],
    "THB": [None, "฿"],
    "TMM": [None, None, 0],
    "TND": [None, None, 3],
    "TOP": [None, "T$"],
    "TRL": [None, None, 0],
    "TRY": [None, "₺"],
    "TTD": [None, "$"],
    "TWD": ["NT$", "$", 2],
    "TZS": [None, None, 2],
    "UAH": [None, "₴"],
    "UGX": [None, None, 0],
    "USD": ["$"],
    "UYI": [None, None, 0],
    "UYU": [None, "$"],
    "UYW": [None, None, 4],
    "UZS": [None, None, 2],
    "VEF": [None, "Bs", 2],
    "VND": ["₫", None, 0],
    "VUV": [None, None, 0],
    "XAF": ["FCFA", None, 0],
    "XCD": ["EC$", "$"],
    "XCG": ["Cg."],
    "XOF": ["F CFA", None, 0],
    "XPF": ["CFPF", None, 0],
    "XXX": ["¤"],
    "YER": [None, None, 0],
    "ZAR": [None, "R"],
    "ZMK": [None, None, 0],
    "ZMW": [None, "ZK"],
    "ZWD": [None, None, 0],
}

GLOBAL_CURRENCIES: MappingProxyType[str, CurrencyEntry] = MappingProxyType({
    code: CurrencyEntry.from_positional(entry)
    for code, entry in GLOBAL_CURRENCIES_LITERAL.items()
})
