"""Formatter exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Fallible operations return these errors in result tuples; the
``*_or_raise`` variants raise them.

Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic
from .templates import ErrorTemplate

__all__ = [
    "FormatterError",
    "FractionalScaleExceededError",
    "LocaleDataError",
    "UnsupportedCurrencyForLocaleError",
    "UnsupportedLocaleError",
    "UnsupportedScaleError",
]


class FormatterError(Exception):
    """Base exception for all cldrnum errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize FormatterError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class UnsupportedLocaleError(FormatterError):
    """Locale code is not resolvable by the locale registry.

    Raised (or returned) on formatter construction and on locale changes.
    The formatter keeps its previous locale when a change fails.
    """

    def __init__(self, locale_code: str) -> None:
        super().__init__(ErrorTemplate.unsupported_locale(locale_code))
        self.locale_code = locale_code


class UnsupportedScaleError(FormatterError):
    """Scale outside {-1} and [0, 20]."""

    def __init__(self, scale: int) -> None:
        super().__init__(ErrorTemplate.unsupported_scale(scale))
        self.scale = scale


class FractionalScaleExceededError(FormatterError):
    """Fractional magnitude needs more digits than the active scale allows.

    For monetary amounts the scale is the currency's minor-digit count and
    the error names the currency.

    Attributes:
        fraction: The fractional magnitude that did not fit
        scale: The active scale
        currency_code: Currency that supplied the scale, or None
    """

    def __init__(self, fraction: int, scale: int, currency_code: str | None = None) -> None:
        super().__init__(
            ErrorTemplate.fractional_scale_exceeded(fraction, scale, currency_code)
        )
        self.fraction = fraction
        self.scale = scale
        self.currency_code = currency_code

    def with_currency(self, currency_code: str) -> "FractionalScaleExceededError":
        """Return the same failure re-issued for a currency-supplied scale."""
        return FractionalScaleExceededError(self.fraction, self.scale, currency_code)


class UnsupportedCurrencyForLocaleError(FormatterError):
    """Currency code absent from the bound locale's currency table."""

    def __init__(self, currency_code: str, locale_code: str) -> None:
        super().__init__(
            ErrorTemplate.unsupported_currency_for_locale(currency_code, locale_code)
        )
        self.currency_code = currency_code
        self.locale_code = locale_code


class LocaleDataError(FormatterError):
    """Locale registry input is malformed.

    Raised while building a LocaleRegistry, never by formatting calls.
    """

    def __init__(self, detail: str, locale_code: str | None = None) -> None:
        super().__init__(ErrorTemplate.invalid_locale_data(detail, locale_code))
        self.detail = detail
        self.locale_code = locale_code
