"""Diagnostic system for cldrnum errors.

Provides structured error diagnostics with codes, hints, and help URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    FormatterError,
    FractionalScaleExceededError,
    LocaleDataError,
    UnsupportedCurrencyForLocaleError,
    UnsupportedLocaleError,
    UnsupportedScaleError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "FormatterError",
    "FractionalScaleExceededError",
    "LocaleDataError",
    "OutputFormat",
    "UnsupportedCurrencyForLocaleError",
    "UnsupportedLocaleError",
    "UnsupportedScaleError",
]
