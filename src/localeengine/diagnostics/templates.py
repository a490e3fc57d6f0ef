"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable, consistent, and documented in one place.
    """

    @staticmethod
    def locale_not_found(locale_id: str, attempted: tuple[str, ...]) -> Diagnostic:
        """No registered locale for the id or any parent.

        Args:
            locale_id: Locale id as supplied
            attempted: Normalized ids tried, longest first

        Returns:
            Diagnostic for LOCALE_NOT_FOUND
        """
        tried = ", ".join(attempted) if attempted else "(none)"
        msg = f'Missing locale data for the locale "{locale_id}" (tried: {tried})'
        return Diagnostic(
            code=DiagnosticCode.LOCALE_NOT_FOUND,
            message=msg,
            hint="Register the locale with register_locale_data() before formatting",
            locale_id=locale_id,
        )

    @staticmethod
    def locale_data_undefined(locale_id: str, what: str) -> Diagnostic:
        """Every candidate slot for a fallback chain is undefined.

        Args:
            locale_id: Locale whose data is incomplete
            what: Human description of the slot (e.g. "day names")

        Returns:
            Diagnostic for LOCALE_DATA_UNDEFINED
        """
        msg = f"Locale data API: {what} undefined for locale '{locale_id}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_DATA_UNDEFINED,
            message=msg,
            hint="At least the narrowest width of every name table must be defined",
            locale_id=locale_id,
        )

    @staticmethod
    def locale_data_malformed(locale_id: str, detail: str) -> Diagnostic:
        """Positional literal does not match the descriptor layout.

        Args:
            locale_id: Locale id from slot 0 (or "?" if unavailable)
            detail: What is wrong with the literal

        Returns:
            Diagnostic for LOCALE_DATA_MALFORMED
        """
        msg = f"Malformed locale data for '{locale_id}': {detail}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_DATA_MALFORMED,
            message=msg,
            hint="Locale literals must follow the LocaleDataIndex slot order",
            locale_id=locale_id,
        )

    @staticmethod
    def extra_data_missing(locale_id: str) -> Diagnostic:
        """Extended day period data requested but never registered.

        Args:
            locale_id: Locale lacking extended data

        Returns:
            Diagnostic for EXTRA_DATA_MISSING
        """
        msg = f'Missing extra locale data for the locale "{locale_id}"'
        return Diagnostic(
            code=DiagnosticCode.EXTRA_DATA_MISSING,
            message=msg,
            hint="Pass the extra data to register_locale_data(data, locale_id, extra)",
            locale_id=locale_id,
        )

    @staticmethod
    def cldr_locale_unknown(locale_id: str, reason: str) -> Diagnostic:
        """Babel has no CLDR data for the locale.

        Args:
            locale_id: Requested locale id
            reason: Underlying Babel error text

        Returns:
            Diagnostic for CLDR_LOCALE_UNKNOWN
        """
        msg = f"No CLDR data for locale '{locale_id}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.CLDR_LOCALE_UNKNOWN,
            message=msg,
            hint="Check the identifier against babel.localedata.locale_identifiers()",
            locale_id=locale_id,
        )

    @staticmethod
    def currency_code_required() -> Diagnostic:
        """Currency style requested without a currency code.

        Returns:
            Diagnostic for CURRENCY_CODE_REQUIRED
        """
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_CODE_REQUIRED,
            message="Currency formatting requires an ISO 4217 currency code",
            hint="Pass currency_code='USD' (or another ISO code) in the options",
        )

    @staticmethod
    def fraction_bounds_inverted(min_fraction: int, max_fraction: int) -> Diagnostic:
        """Minimum fraction digits exceed the maximum.

        Args:
            min_fraction: Requested minimum
            max_fraction: Requested maximum

        Returns:
            Diagnostic for FRACTION_BOUNDS_INVERTED
        """
        msg = (
            f"The minimum number of digits after fraction ({min_fraction}) "
            f"is higher than the maximum ({max_fraction})."
        )
        return Diagnostic(
            code=DiagnosticCode.FRACTION_BOUNDS_INVERTED,
            message=msg,
            hint="Use a digits info like '1.2-4' where 2 <= 4",
        )

    @staticmethod
    def digit_count_invalid(name: str, value: int) -> Diagnostic:
        """A digit-count option is negative.

        Args:
            name: Option name
            value: Offending value

        Returns:
            Diagnostic for DIGIT_COUNT_INVALID
        """
        msg = f"{name} must be a non-negative integer, got {value!r}"
        return Diagnostic(
            code=DiagnosticCode.DIGIT_COUNT_INVALID,
            message=msg,
        )

    @staticmethod
    def digits_info_invalid(digits_info: str) -> Diagnostic:
        """Digits-info string does not match '{minInt}.{minFrac}-{maxFrac}'.

        Args:
            digits_info: The rejected string

        Returns:
            Diagnostic for DIGITS_INFO_INVALID
        """
        msg = f"{digits_info} is not a valid digit info"
        return Diagnostic(
            code=DiagnosticCode.DIGITS_INFO_INVALID,
            message=msg,
            hint="Expected format: {minIntegerDigits}.{minFractionDigits}-{maxFractionDigits}",
        )

    @staticmethod
    def date_pattern_invalid(pattern: str, field: str, reason: str) -> Diagnostic:
        """Date pattern field cannot be formatted.

        Args:
            pattern: Full pattern string
            field: Offending field run (e.g. "QQQ")
            reason: Why the field is rejected

        Returns:
            Diagnostic for DATE_PATTERN_INVALID
        """
        msg = f"Invalid date pattern field '{field}' in '{pattern}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.DATE_PATTERN_INVALID,
            message=msg,
            hint="Quote literal text with single quotes, e.g. \"h 'o''clock'\"",
            pattern=pattern,
        )

    @staticmethod
    def timezone_invalid(timezone: str) -> Diagnostic:
        """Timezone argument is neither an offset nor a known zone name.

        Args:
            timezone: The rejected timezone string

        Returns:
            Diagnostic for TIMEZONE_INVALID
        """
        msg = f"Unknown timezone '{timezone}'"
        return Diagnostic(
            code=DiagnosticCode.TIMEZONE_INVALID,
            message=msg,
            hint="Use an offset like '+0430', 'UTC', or an IANA zone name",
        )

    @staticmethod
    def plural_case_missing(value: object, cases: tuple[str, ...]) -> Diagnostic:
        """No explicit, category or "other" case matches.

        Args:
            value: Value being pluralized
            cases: Case keys that were available

        Returns:
            Diagnostic for PLURAL_CASE_MISSING
        """
        msg = f'No plural message found for value "{value}"'
        return Diagnostic(
            code=DiagnosticCode.PLURAL_CASE_MISSING,
            message=msg,
            hint=f"Add an 'other' case (available: {', '.join(cases) or 'none'})",
        )

    @staticmethod
    def date_conversion_failed(value: object) -> Diagnostic:
        """Value cannot be converted into a datetime.

        Args:
            value: Rejected value

        Returns:
            Diagnostic for DATE_CONVERSION_FAILED
        """
        msg = f'Unable to convert "{value}" into a date'
        return Diagnostic(
            code=DiagnosticCode.DATE_CONVERSION_FAILED,
            message=msg,
            hint="Pass a datetime, date, epoch milliseconds, or an ISO 8601 string",
        )

    @staticmethod
    def number_conversion_failed(value: object) -> Diagnostic:
        """Value cannot be interpreted as a number.

        Args:
            value: Rejected value

        Returns:
            Diagnostic for NUMBER_CONVERSION_FAILED
        """
        msg = f"{value} is not a number"
        return Diagnostic(
            code=DiagnosticCode.NUMBER_CONVERSION_FAILED,
            message=msg,
        )

    @staticmethod
    def number_out_of_range(exponent: int, limit: int) -> Diagnostic:
        """Number needs more positional digits than the engine accepts.

        Args:
            exponent: Offending decimal exponent (adjusted exponent for large
                values, negated fraction length for small ones)
            limit: Largest accepted exponent magnitude

        Returns:
            Diagnostic for NUMBER_OUT_OF_RANGE
        """
        msg = f"Number with decimal exponent {exponent} is out of range (limit {limit})"
        return Diagnostic(
            code=DiagnosticCode.NUMBER_OUT_OF_RANGE,
            message=msg,
            hint=f"Pass values whose magnitude lies within 1e-{limit} and 1e+{limit}",
        )
