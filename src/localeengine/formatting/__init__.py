"""Number, currency and date formatting against locale descriptors.

``render_*`` functions take a ``LocaleDescriptor`` directly; ``format_*``
functions resolve a locale id through a registry first.

Python 3.13+.
"""

from .currency import CurrencyResolver, get_currency_symbol, get_number_of_currency_digits
from .dates import (
    DateField,
    DateInput,
    compile_date_pattern,
    expand_named_format,
    format_date,
    parse_timezone,
    render_date,
    to_datetime,
)
from .number_pattern import DigitsInfo, NumberPattern, parse_digits_info, parse_number_pattern
from .numbers import (
    format_currency,
    format_number,
    format_percent,
    format_scientific,
    render_number,
)
from .options import NumberFormatOptions

__all__ = [
    "CurrencyResolver",
    "DateField",
    "DateInput",
    "DigitsInfo",
    "NumberFormatOptions",
    "NumberPattern",
    "compile_date_pattern",
    "expand_named_format",
    "format_currency",
    "format_date",
    "format_number",
    "format_percent",
    "format_scientific",
    "get_currency_symbol",
    "get_number_of_currency_digits",
    "parse_digits_info",
    "parse_number_pattern",
    "parse_timezone",
    "render_date",
    "render_number",
    "to_datetime",
]
