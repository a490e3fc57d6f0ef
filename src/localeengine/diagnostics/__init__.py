"""Diagnostic system for LocaleEngine errors.

Provides structured error diagnostics with codes, hints, and output formats.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    ConfigurationError,
    DatePatternError,
    InvalidDateError,
    InvalidNumberError,
    LocaleDataError,
    LocaleEngineError,
    LocaleNotFoundError,
    NumberFormatConfigError,
    PluralCaseError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ConfigurationError",
    "DatePatternError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "InvalidDateError",
    "InvalidNumberError",
    "LocaleDataError",
    "LocaleEngineError",
    "LocaleNotFoundError",
    "NumberFormatConfigError",
    "OutputFormat",
    "PluralCaseError",
]
