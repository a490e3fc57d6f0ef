"""English (en) locale literal."""

from typing import Any

from localeengine.plural.rules import OneRule

__all__ = ["LOCALE_DATA"]

LOCALE_DATA: list[Any] = [
    "en",
    [["a", "p"], ["AM", "PM"], None],
    [["AM", "PM"], None, None],
    [
        ["S", "M", "T", "W", "T", "F", "S"],
        ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"],
        ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"],
        ["Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"],
    ],
    None,
    [
        ["J", "F", "M", "A", "M", "J", "J", "A", "S", "O", "N", "D"],
        ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"],
        [
            "January", "February", "March", "April", "May", "June", "July",
            "August", "September", "October", "November", "December",
        ],
    ],
    None,
    [["B", "A"], ["BC", "AD"], ["Before Christ", "Anno Domini"]],
    0,
    [6, 0],
    ["M/d/yy", "MMM d, y", "MMMM d, y", "EEEE, MMMM d, y"],
    ["h:mm a", "h:mm:ss a", "h:mm:ss a z", "h:mm:ss a zzzz"],
    ["{1}, {0}", None, "{1} 'at' {0}", None],
    [".", ",", ";", "%", "+", "-", "E", "×", "‰", "∞", "NaN", ":"],
    ["#,##0.###", "#,##0%", "¤#,##0.00", "#E0"],
    "USD",
    "$",
    "US Dollar",
    {},
    "ltr",
    OneRule(),
]
