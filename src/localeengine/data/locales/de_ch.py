"""Swiss German (de-CH) locale literal."""

from typing import Any

from localeengine.plural.rules import OneRule

__all__ = ["LOCALE_DATA"]

LOCALE_DATA: list[Any] = [
    "de-CH",
    [["AM", "PM"], None, None],
    None,
    [
        ["S", "M", "D", "M", "D", "F", "S"],
        ["So.", "Mo.", "Di.", "Mi.", "Do.", "Fr.", "Sa."],
        ["Sonntag", "Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag"],
        ["So", "Mo", "Di", "Mi", "Do", "Fr", "Sa"],
    ],
    [
        ["S", "M", "D", "M", "D", "F", "S"],
        ["So", "Mo", "Di", "Mi", "Do", "Fr", "Sa"],
        ["Sonntag", "Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag"],
        ["So.", "Mo.", "Di.", "Mi.", "Do.", "Fr.", "Sa."],
    ],
    [
        ["J", "F", "M", "A", "M", "J", "J", "A", "S", "O", "N", "D"],
        [
            "Jan.", "Feb.", "März", "Apr.", "Mai", "Juni",
            "Juli", "Aug.", "Sept.", "Okt.", "Nov.", "Dez.",
        ],
        [
            "Januar", "Februar", "März", "April", "Mai", "Juni", "Juli",
            "August", "September", "Oktober", "November", "Dezember",
        ],
    ],
    [
        ["J", "F", "M", "A", "M", "J", "J", "A", "S", "O", "N", "D"],
        ["Jan", "Feb", "Mär", "Apr", "Mai", "Jun", "Jul", "Aug", "Sep", "Okt", "Nov", "Dez"],
        [
            "Januar", "Februar", "März", "April", "Mai", "Juni", "Juli",
            "August", "September", "Oktober", "November", "Dezember",
        ],
    ],
    [["v. Chr.", "n. Chr."], None, None],
    1,
    [6, 0],
    ["dd.MM.yy", "dd.MM.y", "d. MMMM y", "EEEE, d. MMMM y"],
    ["HH:mm", "HH:mm:ss", "HH:mm:ss z", "HH:mm:ss zzzz"],
    ["{1}, {0}", None, "{1} 'um' {0}", None],
    [".", "’", ";", "%", "+", "-", "E", "·", "‰", "∞", "NaN", ":"],
    ["#,##0.###", "#,##0%", "¤\u00a0#,##0.00;¤-#,##0.00", "#E0"],
    "CHF",
    "CHF",
    "Schweizer Franken",
    {
        "ATS": ["öS"],
        "AUD": ["AU$", "$"],
        "BGM": ["BGK"],
        "BGO": ["BGJ"],
        "BYN": [None, "р."],
        "CUC": [None, "Cub$"],
        "DEM": ["DM"],
        "EUR": [],
        "FKP": [None, "Fl£"],
        "GHS": [None, "₵"],
        "GNF": [None, "F.G."],
        "KMF": [None, "FC"],
        "PHP": [None, "₱"],
        "RON": [None, "L"],
        "RUR": [None, "р."],
        "RWF": [None, "F.Rw"],
        "SYP": [],
        "THB": ["฿"],
        "TWD": ["NT$"],
        "XXX": [],
        "ZMW": [None, "K"],
    },
    "ltr",
    OneRule(),
]
