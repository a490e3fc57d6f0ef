"""Ukrainian (uk) locale literal."""

from typing import Any

from localeengine.plural.rules import EastSlavicRule

__all__ = ["LOCALE_DATA"]

LOCALE_DATA: list[Any] = [
    "uk",
    [["дп", "пп"], None, None],
    None,
    [
        ["Н", "П", "В", "С", "Ч", "П", "С"],
        ["нд", "пн", "вт", "ср", "чт", "пт", "сб"],
        ["неділя", "понеділок", "вівторок", "середа", "четвер", "пʼятниця", "субота"],
        ["нд", "пн", "вт", "ср", "чт", "пт", "сб"],
    ],
    None,
    [
        ["с", "л", "б", "к", "т", "ч", "л", "с", "в", "ж", "л", "г"],
        [
            "січ.", "лют.", "бер.", "квіт.", "трав.", "черв.",
            "лип.", "серп.", "вер.", "жовт.", "лист.", "груд.",
        ],
        [
            "січня", "лютого", "березня", "квітня", "травня", "червня",
            "липня", "серпня", "вересня", "жовтня", "листопада", "грудня",
        ],
    ],
    [
        ["С", "Л", "Б", "К", "Т", "Ч", "Л", "С", "В", "Ж", "Л", "Г"],
        ["січ", "лют", "бер", "кві", "тра", "чер", "лип", "сер", "вер", "жов", "лис", "гру"],
        [
            "січень", "лютий", "березень", "квітень", "травень", "червень",
            "липень", "серпень", "вересень", "жовтень", "листопад", "грудень",
        ],
    ],
    [["до н.е.", "н.е."], ["до н. е.", "н. е."], ["до нашої ери", "нашої ери"]],
    1,
    [6, 0],
    ["dd.MM.yy", "d MMM y 'р'.", "d MMMM y 'р'.", "EEEE, d MMMM y 'р'."],
    ["HH:mm", "HH:mm:ss", "HH:mm:ss z", "HH:mm:ss zzzz"],
    ["{1}, {0}", None, "{1} 'о' {0}", None],
    [",", "\u00a0", ";", "%", "+", "-", "Е", "×", "‰", "∞", "NaN", ":"],
    ["#,##0.###", "#,##0%", "#,##0.00\u00a0¤", "#E0"],
    "UAH",
    "₴",
    "українська гривня",
    {
        "AUD": [None, "$"],
        "BRL": [None, "R$"],
        "BYN": [None, "р."],
        "CAD": [None, "$"],
        "CNY": [None, "¥"],
        "EUR": [None, "€"],
        "GBP": [None, "£"],
        "HKD": [None, "$"],
        "ILS": [None, "₪"],
        "INR": [None, "₹"],
        "KRW": [None, "₩"],
        "MXN": [None, "$"],
        "NZD": [None, "$"],
        "PHP": [None, "₱"],
        "RUR": [None, "р."],
        "TWD": [None, "$"],
        "UAH": ["₴"],
        "UAK": ["крб."],
        "USD": [None, "$"],
        "VND": [None, "₫"],
        "XCD": [None, "$"],
    },
    "ltr",
    EastSlavicRule(),
]
