"""French (fr) locale literal."""

from typing import Any

from localeengine.plural.rules import FrenchRule

__all__ = ["LOCALE_DATA"]

LOCALE_DATA: list[Any] = [
    "fr",
    [["AM", "PM"], None, None],
    None,
    [
        ["D", "L", "M", "M", "J", "V", "S"],
        ["dim.", "lun.", "mar.", "mer.", "jeu.", "ven.", "sam."],
        ["dimanche", "lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi"],
        ["di", "lu", "ma", "me", "je", "ve", "sa"],
    ],
    None,
    [
        ["J", "F", "M", "A", "M", "J", "J", "A", "S", "O", "N", "D"],
        [
            "janv.", "févr.", "mars", "avr.", "mai", "juin",
            "juil.", "août", "sept.", "oct.", "nov.", "déc.",
        ],
        [
            "janvier", "février", "mars", "avril", "mai", "juin", "juillet",
            "août", "septembre", "octobre", "novembre", "décembre",
        ],
    ],
    None,
    [["av. J.-C.", "ap. J.-C."], None, ["avant Jésus-Christ", "après Jésus-Christ"]],
    1,
    [6, 0],
    ["dd/MM/y", "d MMM y", "d MMMM y", "EEEE d MMMM y"],
    ["HH:mm", "HH:mm:ss", "HH:mm:ss z", "HH:mm:ss zzzz"],
    ["{1} {0}", "{1}, {0}", "{1} 'à' {0}", None],
    [",", "\u202f", ";", "%", "+", "-", "E", "×", "‰", "∞", "NaN", ":"],
    ["#,##0.###", "#,##0\u00a0%", "#,##0.00\u00a0¤", "#E0"],
    "EUR",
    "€",
    "euro",
    {
        "ARS": ["$AR", "$"],
        "AUD": ["$AU", "$"],
        "BEF": ["FB"],
        "BMD": ["$BM", "$"],
        "BND": ["$BN", "$"],
        "BYN": [None, "р."],
        "BZD": ["$BZ", "$"],
        "CAD": ["$CA", "$"],
        "CLP": ["$CL", "$"],
        "CNY": [None, "¥"],
        "COP": ["$CO", "$"],
        "CYP": ["£CY"],
        "EGP": [None, "£E"],
        "FJD": ["$FJ", "$"],
        "FKP": ["£FK", "£"],
        "FRF": ["F"],
        "GBP": ["£GB", "£"],
        "GIP": ["£GI", "£"],
        "HKD": [None, "$"],
        "IEP": ["£IE"],
        "ILP": ["£IL"],
        "ITL": ["₤IT"],
        "JPY": [None, "¥"],
        "KMF": [None, "FC"],
        "LBP": ["£LB", "£L"],
        "MTP": ["£MT"],
        "MXN": ["$MX", "$"],
        "NAD": ["$NA", "$"],
        "NIO": [None, "$C"],
        "NZD": ["$NZ", "$"],
        "PHP": [None, "₱"],
        "RHD": ["$RH"],
        "RON": [None, "L"],
        "RWF": [None, "FR"],
        "SBD": ["$SB", "$"],
        "SGD": ["$SG", "$"],
        "SRD": ["$SR", "$"],
        "TOP": [None, "$T"],
        "TTD": ["$TT", "$"],
        "TWD": [None, "NT$"],
        "USD": ["$US", "$"],
        "UYU": ["$UY", "$"],
        "WST": ["$WS"],
        "XCD": [None, "$"],
        "XPF": ["FCFP"],
        "ZMW": [None, "Kw"],
    },
    "ltr",
    FrenchRule(),
]
