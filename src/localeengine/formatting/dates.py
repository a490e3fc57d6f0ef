"""Locale-aware date and time formatting with CLDR-style patterns.

Patterns are runs of field letters (``yyyy``, ``MMM``, ``EEEE``...) and
literal text. Single quotes delimit literal text, ``''`` is a literal
quote. Named formats (``shortDate``, ``medium``...) expand from the
locale's own patterns.

Patterns are validated completely before any output is produced: an
unknown field letter or an unsupported run length raises
``DatePatternError``.

Python 3.13+.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta, tzinfo
from datetime import timezone as fixed_offset
from decimal import Decimal
from typing import TYPE_CHECKING, TypeAlias
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from localeengine.constants import MAX_LOCALE_CACHE_SIZE
from localeengine.data.descriptor import last_defined
from localeengine.diagnostics import (
    ConfigurationError,
    DatePatternError,
    ErrorTemplate,
    InvalidDateError,
)
from localeengine.enums import FormatWidth, FormStyle, NumberSymbol, TranslationWidth
from localeengine.runtime.registry import get_default_registry

if TYPE_CHECKING:
    from localeengine.data.descriptor import LocaleDescriptor
    from localeengine.runtime.registry import LocaleRegistry

__all__ = [
    "DateField",
    "DateInput",
    "compile_date_pattern",
    "expand_named_format",
    "format_date",
    "parse_timezone",
    "render_date",
    "to_datetime",
]

DateInput: TypeAlias = datetime | date | int | float | Decimal | str
DateToken: TypeAlias = "str | DateField"

# Supported run lengths per field letter.
_FIELD_LENGTHS: dict[str, range] = {
    "G": range(1, 6),
    "y": range(1, 5),
    "Y": range(1, 5),
    "M": range(1, 6),
    "L": range(1, 6),
    "w": range(1, 3),
    "W": range(1, 2),
    "d": range(1, 3),
    "D": range(1, 4),
    "E": range(1, 7),
    "c": range(1, 7),
    "a": range(1, 6),
    "b": range(1, 6),
    "B": range(1, 6),
    "h": range(1, 3),
    "H": range(1, 3),
    "k": range(1, 3),
    "K": range(1, 3),
    "m": range(1, 3),
    "s": range(1, 3),
    "S": range(1, 7),
    "z": range(1, 5),
    "Z": range(1, 6),
    "O": range(1, 5),
    "v": range(1, 5),
    "V": range(1, 5),
    "x": range(1, 6),
    "X": range(1, 6),
}

_NAMED_DATE_FORMATS: dict[str, FormatWidth] = {
    "shortDate": FormatWidth.SHORT,
    "mediumDate": FormatWidth.MEDIUM,
    "longDate": FormatWidth.LONG,
    "fullDate": FormatWidth.FULL,
}
_NAMED_TIME_FORMATS: dict[str, FormatWidth] = {
    "shortTime": FormatWidth.SHORT,
    "mediumTime": FormatWidth.MEDIUM,
    "longTime": FormatWidth.LONG,
    "fullTime": FormatWidth.FULL,
}
_NAMED_DATE_TIME_FORMATS: dict[str, FormatWidth] = {
    "short": FormatWidth.SHORT,
    "medium": FormatWidth.MEDIUM,
    "long": FormatWidth.LONG,
    "full": FormatWidth.FULL,
}

_DATE_ONLY_RE = re.compile(r"^(\d{4})(?:-(\d{1,2})(?:-(\d{1,2}))?)?$")
_NUMERIC_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)$")
_OFFSET_RE = re.compile(r"^(?:UTC|GMT)?([+-])(\d{1,2})(?::?(\d{2}))?$")
_UTC_NAMES = frozenset({"UTC", "GMT", "Z"})


@dataclass(frozen=True, slots=True)
class DateField:
    """One pattern field: a letter repeated ``count`` times."""

    letter: str
    count: int

    def __str__(self) -> str:
        return self.letter * self.count


# ============================================================================
# PATTERN COMPILATION
# ============================================================================


def _field(pattern: str, letter: str, count: int) -> DateField:
    lengths = _FIELD_LENGTHS.get(letter)
    if lengths is None:
        raise DatePatternError(
            ErrorTemplate.date_pattern_invalid(
                pattern, letter * count, f"unknown field letter '{letter}'"
            ),
            pattern=pattern,
            field=letter * count,
        )
    if count not in lengths:
        raise DatePatternError(
            ErrorTemplate.date_pattern_invalid(
                pattern,
                letter * count,
                f"'{letter}' supports {lengths.start}-{lengths.stop - 1} letters, got {count}",
            ),
            pattern=pattern,
            field=letter * count,
        )
    return DateField(letter, count)


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def compile_date_pattern(pattern: str) -> tuple[DateToken, ...]:
    """Split a pattern into literal strings and ``DateField`` tokens.

    Args:
        pattern: Date pattern such as ``"EEEE, MMMM d, y 'at' h:mm a"``

    Returns:
        Tokens in pattern order; adjacent literal text is merged

    Raises:
        DatePatternError: If a field letter or run length is unsupported

    Example:
        >>> compile_date_pattern("h 'o''clock'")
        (DateField(letter='h', count=1), " o'clock")
    """
    tokens: list[DateToken] = []
    literal: list[str] = []
    i, length = 0, len(pattern)
    while i < length:
        char = pattern[i]
        if char == "'":
            if pattern.startswith("''", i):
                literal.append("'")
                i += 2
                continue
            i += 1
            while i < length:
                if pattern[i] == "'":
                    if not pattern.startswith("''", i):
                        break
                    literal.append("'")
                    i += 2
                    continue
                literal.append(pattern[i])
                i += 1
            i += 1  # closing quote (an unterminated quote runs to the end)
            continue
        if char.isascii() and char.isalpha():
            end = i
            while end < length and pattern[end] == char:
                end += 1
            field = _field(pattern, char, end - i)
            if literal:
                tokens.append("".join(literal))
                literal.clear()
            tokens.append(field)
            i = end
            continue
        literal.append(char)
        i += 1
    if literal:
        tokens.append("".join(literal))
    return tuple(tokens)


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def expand_named_format(descriptor: LocaleDescriptor, name: str) -> str | None:
    """Expand ``shortDate``, ``medium``, ``fullTime``... for a locale.

    Combined date-time names substitute the time pattern for ``{0}`` and
    the date pattern for ``{1}`` in the locale's combiner.

    Returns:
        The locale pattern, or None when ``name`` is not a named format
    """
    locale_id = descriptor.locale_id
    if name in _NAMED_DATE_FORMATS:
        return last_defined(
            descriptor.date_formats,
            _NAMED_DATE_FORMATS[name],
            locale_id=locale_id,
            what="date format",
        )
    if name in _NAMED_TIME_FORMATS:
        return last_defined(
            descriptor.time_formats,
            _NAMED_TIME_FORMATS[name],
            locale_id=locale_id,
            what="time format",
        )
    if name in _NAMED_DATE_TIME_FORMATS:
        width = _NAMED_DATE_TIME_FORMATS[name]
        combiner = last_defined(
            descriptor.date_time_formats, width, locale_id=locale_id, what="date-time format"
        )
        date_pattern = last_defined(
            descriptor.date_formats, width, locale_id=locale_id, what="date format"
        )
        time_pattern = last_defined(
            descriptor.time_formats, width, locale_id=locale_id, what="time format"
        )
        return combiner.replace("{0}", time_pattern).replace("{1}", date_pattern)
    return None


# ============================================================================
# INPUT CONVERSION
# ============================================================================


def _invalid_date(value: object) -> InvalidDateError:
    return InvalidDateError(ErrorTemplate.date_conversion_failed(value), input_value=str(value))


def _from_epoch_ms(value: float, original: object) -> datetime:
    try:
        return datetime.fromtimestamp(value / 1000, tz=UTC)
    except (OverflowError, OSError, ValueError) as e:
        raise _invalid_date(original) from e


def to_datetime(value: DateInput) -> datetime:
    """Convert a date-like value to a ``datetime``.

    Accepts ``datetime``, ``date`` (midnight), epoch milliseconds (UTC),
    ``"2024"`` / ``"2024-03"`` / ``"2024-03-07"`` (missing parts default to
    1), numeric strings (epoch milliseconds) and ISO 8601 strings with or
    without an offset.

    Raises:
        InvalidDateError: If the value cannot be converted

    Example:
        >>> to_datetime("2024-03")
        datetime.datetime(2024, 3, 1, 0, 0)
        >>> to_datetime(0)
        datetime.datetime(1970, 1, 1, 0, 0, tzinfo=datetime.timezone.utc)
    """
    match value:
        case datetime():
            return value
        case date():
            return datetime(value.year, value.month, value.day)
        case bool():
            raise _invalid_date(value)
        case int() | float() | Decimal():
            return _from_epoch_ms(float(value), value)
        case str():
            text = value.strip()
            if match := _DATE_ONLY_RE.match(text):
                year, month, day = match.groups()
                try:
                    return datetime(int(year), int(month or 1), int(day or 1))
                except ValueError as e:
                    raise _invalid_date(value) from e
            if _NUMERIC_RE.match(text):
                return _from_epoch_ms(float(text), value)
            try:
                return datetime.fromisoformat(text)
            except ValueError as e:
                raise _invalid_date(value) from e
    raise _invalid_date(value)


def parse_timezone(value: str) -> tzinfo:
    """Parse a timezone argument.

    Accepts ``"UTC"``, ``"GMT"``, ``"Z"``, offsets such as ``"+0430"``,
    ``"-05:00"`` or ``"GMT+2"``, and IANA zone names.

    Raises:
        ConfigurationError: If the value is none of the above

    Example:
        >>> parse_timezone("+0430")
        datetime.timezone(datetime.timedelta(seconds=16200))
    """
    text = value.strip()
    if text.upper() in _UTC_NAMES:
        return UTC
    if match := _OFFSET_RE.match(text.upper()):
        sign, hours, minutes = match.groups()
        if int(hours) < 24 and int(minutes or 0) < 60:
            delta = timedelta(hours=int(hours), minutes=int(minutes or 0))
            return fixed_offset(-delta if sign == "-" else delta)
    else:
        try:
            return ZoneInfo(text)
        except (ZoneInfoNotFoundError, ValueError, OSError):
            pass
    raise ConfigurationError(ErrorTemplate.timezone_invalid(value))


# ============================================================================
# FIELD RENDERING
# ============================================================================


def _pad(number: int, width: int, minus_sign: str, *, trim: bool = False) -> str:
    digits = str(abs(number)).rjust(width, "0")
    if trim:
        digits = digits[-width:]
    return minus_sign + digits if number < 0 else digits


def _width(count: int) -> TranslationWidth:
    match count:
        case 4:
            return TranslationWidth.WIDE
        case 5:
            return TranslationWidth.NARROW
        case 6:
            return TranslationWidth.SHORT
    return TranslationWidth.ABBREVIATED


def _weekday(value: datetime) -> int:
    """Day of week, Sunday = 0."""
    return (value.weekday() + 1) % 7


def _week_of_month(value: datetime) -> int:
    days_before_first = _weekday(value.replace(day=1)) - 1
    return 1 + (value.day + days_before_first) // 7


def _day_period(
    value: datetime,
    descriptor: LocaleDescriptor,
    form: FormStyle,
    width: TranslationWidth,
) -> str:
    """Extended day period by clock time, else AM/PM."""
    extra = descriptor.extra
    if extra is not None and extra.names.has(form, width):
        names = extra.names.get(form, width, locale_id=descriptor.locale_id)
        minutes = value.hour * 60 + value.minute
        for rule, name in zip(extra.rules, names, strict=False):
            if rule.contains(minutes):
                return name
    periods = descriptor.day_periods.get(
        form, width, locale_id=descriptor.locale_id, what="day periods"
    )
    return periods[0 if value.hour < 12 else 1]


def _zone(field: DateField, offset: int, minus_sign: str) -> str:
    """Render a zone field for an offset in minutes east of UTC."""
    sign = "+" if offset >= 0 else minus_sign
    hours, minutes = divmod(abs(offset), 60)
    basic = f"{sign}{hours:02d}{minutes:02d}"
    extended = f"{sign}{hours:02d}:{minutes:02d}"
    gmt_long = "GMT" + extended
    gmt_short = f"GMT{sign}{hours}" + (f":{minutes:02d}" if minutes else "")

    match field.letter, field.count:
        case "Z", 4:
            return gmt_long
        case "Z", 5:
            return "Z" if offset == 0 else extended
        case "Z", _:
            return basic
        case ("O" | "z" | "v"), 4:
            return gmt_long
        case ("O" | "z" | "v"), _:
            return gmt_short
        case "V", _:
            return gmt_long
    # ISO 8601 x / X; X uses "Z" for a zero offset.
    if field.letter == "X" and offset == 0:
        return "Z"
    match field.count:
        case 1:
            return f"{sign}{hours:02d}" + (f"{minutes:02d}" if minutes else "")
        case 3 | 5:
            return extended
    return basic


def _render_field(
    field: DateField, value: datetime, descriptor: LocaleDescriptor, offset: int
) -> str:
    letter, count = field.letter, field.count
    locale_id = descriptor.locale_id
    minus = descriptor.number_symbol(NumberSymbol.MINUS_SIGN)

    match letter:
        case "G":
            eras = last_defined(descriptor.eras, _width(count), locale_id=locale_id, what="eras")
            # datetime has no years before 1, so always the current era.
            return eras[1]
        case "y":
            return _pad(value.year, count, minus, trim=count == 2)
        case "Y":
            return _pad(value.isocalendar().year, count, minus, trim=count == 2)
        case "M" | "L" if count <= 2:
            return _pad(value.month, count, minus)
        case "M" | "L":
            form = FormStyle.FORMAT if letter == "M" else FormStyle.STANDALONE
            names = descriptor.months.get(
                form, _width(count), locale_id=locale_id, what="month names"
            )
            return names[value.month - 1]
        case "w":
            return _pad(value.isocalendar().week, count, minus)
        case "W":
            return _pad(_week_of_month(value), count, minus)
        case "d":
            return _pad(value.day, count, minus)
        case "D":
            return _pad(value.timetuple().tm_yday, count, minus)
        case "c" if count <= 2:
            return _pad(_weekday(value), 1, minus)
        case "E" | "c":
            form = FormStyle.FORMAT if letter == "E" else FormStyle.STANDALONE
            names = descriptor.days.get(form, _width(count), locale_id=locale_id, what="day names")
            return names[_weekday(value)]
        case "a" | "B":
            return _day_period(value, descriptor, FormStyle.FORMAT, _width(count))
        case "b":
            return _day_period(value, descriptor, FormStyle.STANDALONE, _width(count))
        case "h":
            return _pad(value.hour % 12 or 12, count, minus)
        case "H":
            return _pad(value.hour, count, minus)
        case "k":
            return _pad(value.hour or 24, count, minus)
        case "K":
            return _pad(value.hour % 12, count, minus)
        case "m":
            return _pad(value.minute, count, minus)
        case "s":
            return _pad(value.second, count, minus)
        case "S":
            return f"{value.microsecond:06d}"[:count]
    return _zone(field, offset, minus)


def render_date(
    value: DateInput,
    descriptor: LocaleDescriptor,
    pattern: str,
    timezone: str | None = None,
) -> str:
    """Format a date with a pattern or named format.

    Args:
        value: Date-like value (see ``to_datetime``)
        descriptor: Locale data
        pattern: Field pattern, or a named format such as ``"mediumDate"``
        timezone: Zone to convert to before formatting (see
            ``parse_timezone``); naive values are taken as UTC

    Returns:
        Formatted string

    Raises:
        InvalidDateError: If value cannot be converted
        DatePatternError: If the pattern has an unsupported field
        ConfigurationError: If the timezone is not recognized
        LocaleDataError: If the locale lacks data a field needs

    Example:
        >>> from localeengine.data.locales import load_bundled_locale
        >>> render_date("2024-03-07", load_bundled_locale("en"), "EEEE, yyyy-MM-dd")
        'Thursday, 2024-03-07'
    """
    moment = to_datetime(value)
    tokens = compile_date_pattern(expand_named_format(descriptor, pattern) or pattern)

    if timezone is not None:
        zone = parse_timezone(timezone)
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=UTC)
        moment = moment.astimezone(zone)

    utc_offset = moment.utcoffset()
    offset = 0 if utc_offset is None else int(utc_offset.total_seconds()) // 60

    return "".join(
        token if isinstance(token, str) else _render_field(token, moment, descriptor, offset)
        for token in tokens
    )


def format_date(
    value: DateInput,
    pattern: str,
    locale: str,
    timezone: str | None = None,
    registry: LocaleRegistry | None = None,
) -> str:
    """Format a date for a registered locale.

    Example:
        >>> format_date("2024-03-07", "mediumDate", "en")
        'Mar 7, 2024'
    """
    descriptor = (registry or get_default_registry()).lookup(locale)
    return render_date(value, descriptor, pattern, timezone)
