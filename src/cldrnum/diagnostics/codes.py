"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.11+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Locale errors (unknown locales, unknown currencies)
        2000-2999: Scale errors (invalid scale, fraction too wide)
        3000-3999: Locale data errors (malformed registry input)
    """

    # Locale errors (1000-1999)
    UNSUPPORTED_LOCALE = 1001
    UNSUPPORTED_CURRENCY_FOR_LOCALE = 1002

    # Scale errors (2000-2999)
    UNSUPPORTED_SCALE = 2001
    FRACTIONAL_SCALE_EXCEEDED = 2002

    # Locale data errors (3000-3999)
    INVALID_LOCALE_DATA = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Provides rich error information for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        locale_code: Locale the failing call was bound to (if any)
        currency_code: Currency involved in the failure (if any)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    locale_code: str | None = None
    currency_code: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[UNSUPPORTED_LOCALE]: Unsupported locale 'xx'
              = locale: xx
              = help: Use a locale code known to the registry, e.g. 'en' or 'fr-CA'
              = note: see https://cldr.unicode.org/index/cldr-spec/picking-the-right-language-code

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
