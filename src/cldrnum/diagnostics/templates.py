"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.11+. Zero external dependencies.
"""

from cldrnum.constants import MAX_SCALE, MIN_SCALE

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # Base documentation URL
    _DOCS_BASE = "https://www.unicode.org/reports/tr35/tr35-numbers.html"

    @staticmethod
    def unsupported_locale(locale_code: str) -> Diagnostic:
        """Locale code not resolvable by the registry.

        Args:
            locale_code: The locale code exactly as the caller passed it

        Returns:
            Diagnostic for UNSUPPORTED_LOCALE
        """
        msg = f"Unsupported locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_LOCALE,
            message=msg,
            hint="Use a locale code known to the registry, e.g. 'en' or 'fr-CA'",
            help_url="https://cldr.unicode.org/index/cldr-spec/picking-the-right-language-code",
            locale_code=locale_code,
        )

    @staticmethod
    def unsupported_scale(scale: int) -> Diagnostic:
        """Scale outside the supported range.

        Args:
            scale: The rejected scale

        Returns:
            Diagnostic for UNSUPPORTED_SCALE
        """
        if scale < MIN_SCALE:
            msg = f"Scale {scale} must be at least {MIN_SCALE}"
        else:
            msg = f"Scale {scale} exceeds max supported scale {MAX_SCALE}"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_SCALE,
            message=msg,
            hint=(
                f"Use {MIN_SCALE} for natural formatting or a fixed scale "
                f"between 0 and {MAX_SCALE}"
            ),
            help_url=f"{ErrorTemplate._DOCS_BASE}#Number_Patterns",
        )

    @staticmethod
    def fractional_scale_exceeded(
        fraction: int, scale: int, currency_code: str | None = None
    ) -> Diagnostic:
        """Fractional magnitude needs more digits than the scale allows.

        Args:
            fraction: The fractional magnitude that was too wide
            scale: The active scale
            currency_code: Currency whose minor digits supplied the scale

        Returns:
            Diagnostic for FRACTIONAL_SCALE_EXCEEDED
        """
        msg = f"Fractional part {fraction} exceeds scale {scale}"
        if currency_code is not None:
            msg = f"{msg} ({currency_code})"
            hint = f"{currency_code} has {scale} minor digit(s); reduce the fractional part"
        else:
            hint = "Increase the scale or reduce the fractional part"
        return Diagnostic(
            code=DiagnosticCode.FRACTIONAL_SCALE_EXCEEDED,
            message=msg,
            hint=hint,
            help_url=f"{ErrorTemplate._DOCS_BASE}#Number_Patterns",
            currency_code=currency_code,
        )

    @staticmethod
    def unsupported_currency_for_locale(currency_code: str, locale_code: str) -> Diagnostic:
        """Currency missing from the bound locale's currency table.

        Args:
            currency_code: The requested currency code
            locale_code: The locale the formatter is bound to

        Returns:
            Diagnostic for UNSUPPORTED_CURRENCY_FOR_LOCALE
        """
        msg = f"Unsupported currency '{currency_code}' for locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_CURRENCY_FOR_LOCALE,
            message=msg,
            hint="Use an ISO 4217 code with CLDR display data for this locale",
            help_url=f"{ErrorTemplate._DOCS_BASE}#Currencies",
            locale_code=locale_code,
            currency_code=currency_code,
        )

    @staticmethod
    def invalid_locale_data(detail: str, locale_code: str | None = None) -> Diagnostic:
        """Registry input does not have the expected shape.

        Args:
            detail: What was wrong with the data
            locale_code: Locale entry that failed (if known)

        Returns:
            Diagnostic for INVALID_LOCALE_DATA
        """
        if locale_code is not None:
            msg = f"Invalid locale data for '{locale_code}': {detail}"
        else:
            msg = f"Invalid locale data: {detail}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LOCALE_DATA,
            message=msg,
            hint="Regenerate the locale data document from CLDR JSON",
            help_url="https://github.com/unicode-org/cldr-json",
            locale_code=locale_code,
        )
