"""Monetary amount formatting for one locale.

MoneyFormatter picks one of six currency rule sets per call. The choice
depends on the configured style and on the content of the resolved currency
label, not on the requested display mode: "USD" requested as a symbol is
still an alphabetic label, because locales space alphabetic labels
differently from glyph symbols such as "$".

Rule-set selection:

    | style      | label empty | label has letter | rule set                      |
    |------------|-------------|------------------|-------------------------------|
    | standard   | yes         | -                | STANDARD_CURRENCY_NO_SYMBOL   |
    | standard   | no          | yes              | STANDARD_CURRENCY_ALPHA       |
    | standard   | no          | no               | STANDARD_CURRENCY_SYMBOL      |
    | accounting | yes         | -                | ACCOUNTING_CURRENCY_NO_SYMBOL |
    | accounting | no          | yes              | ACCOUNTING_CURRENCY_ALPHA     |
    | accounting | no          | no               | ACCOUNTING_CURRENCY_SYMBOL    |

Python 3.11+.
"""

from cldrnum.diagnostics import (
    FormatterError,
    FractionalScaleExceededError,
    UnsupportedCurrencyForLocaleError,
)
from cldrnum.enums import CurrencyDisplay, CurrencyStyle, RuleSetKind
from cldrnum.locale import CurrencyData, LocaleRegistry

from .base import LocaleBoundFormatter

__all__ = ["MoneyFormatter", "resolve_currency_label", "select_rule_set"]


def resolve_currency_label(currency: CurrencyData, display: CurrencyDisplay) -> str:
    """Return the label text for a display mode ("" for CurrencyDisplay.NONE).

    Examples:
        >>> resolve_currency_label(usd_in_en_ca, CurrencyDisplay.SYMBOL)
        'US$'
    """
    match display:
        case CurrencyDisplay.CODE:
            return currency.display_code
        case CurrencyDisplay.SYMBOL:
            return currency.display_symbol
        case CurrencyDisplay.SYMBOL_NARROW:
            return currency.display_symbol_narrow
        case CurrencyDisplay.NONE:
            return ""


def _has_letter(label: str) -> bool:
    return any(char.isalpha() for char in label)


def select_rule_set(style: CurrencyStyle, label: str) -> RuleSetKind:
    """Select the currency rule set for a style and a resolved label.

    Examples:
        >>> select_rule_set(CurrencyStyle.STANDARD, "USD")
        <RuleSetKind.STANDARD_CURRENCY_ALPHA: 'standard_currency_alpha'>
        >>> select_rule_set(CurrencyStyle.ACCOUNTING, "$")
        <RuleSetKind.ACCOUNTING_CURRENCY_SYMBOL: 'accounting_currency_symbol'>
    """
    match style, bool(label), _has_letter(label):
        case CurrencyStyle.STANDARD, False, _:
            return RuleSetKind.STANDARD_CURRENCY_NO_SYMBOL
        case CurrencyStyle.STANDARD, True, True:
            return RuleSetKind.STANDARD_CURRENCY_ALPHA
        case CurrencyStyle.STANDARD, True, False:
            return RuleSetKind.STANDARD_CURRENCY_SYMBOL
        case CurrencyStyle.ACCOUNTING, False, _:
            return RuleSetKind.ACCOUNTING_CURRENCY_NO_SYMBOL
        case CurrencyStyle.ACCOUNTING, True, True:
            return RuleSetKind.ACCOUNTING_CURRENCY_ALPHA
        case CurrencyStyle.ACCOUNTING, True, False:
            return RuleSetKind.ACCOUNTING_CURRENCY_SYMBOL
        case _:
            msg = f"Unknown currency style: {style!r}"
            raise ValueError(msg)


class MoneyFormatter(LocaleBoundFormatter):
    """Formats monetary amounts in a locale's currency conventions.

    The fractional scale of every call is the currency's minor-digit count
    (2 for USD, 0 for JPY, 3 for BHD); there is no scale setting.

    Examples:
        >>> MoneyFormatter("en").format_or_raise(100000, 1, "BHD")
        'BHD\\xa0100,000.001'
        >>> formatter = MoneyFormatter("en", currency_style=CurrencyStyle.ACCOUNTING)
        >>> formatter.format_or_raise(-1, 0, "USD")
        '(USD\\xa01.00)'
        >>> formatter.display_currency_as_symbol()
        >>> formatter.format_or_raise(-1, 0, "USD")
        '($1.00)'
    """

    __slots__ = ("_currency_display", "_currency_style")

    def __init__(
        self,
        locale_code: str,
        *,
        currency_style: CurrencyStyle = CurrencyStyle.STANDARD,
        currency_display: CurrencyDisplay = CurrencyDisplay.CODE,
        registry: LocaleRegistry | None = None,
    ) -> None:
        """Bind the formatter to a locale.

        Args:
            locale_code: BCP-47 or POSIX locale code
            currency_style: Standard or accounting negatives
            currency_display: Which currency label to show
            registry: Locale registry (default: the bundled registry)

        Raises:
            UnsupportedLocaleError: If the registry does not know the locale
        """
        super().__init__(locale_code, registry=registry)
        self._currency_style = CurrencyStyle(currency_style)
        self._currency_display = CurrencyDisplay(currency_display)

    @property
    def currency_style(self) -> CurrencyStyle:
        return self._currency_style

    @property
    def currency_display(self) -> CurrencyDisplay:
        return self._currency_display

    def use_standard_style(self) -> None:
        self._currency_style = CurrencyStyle.STANDARD

    def use_accounting_style(self) -> None:
        self._currency_style = CurrencyStyle.ACCOUNTING

    def display_currency_as_code(self) -> None:
        self._currency_display = CurrencyDisplay.CODE

    def display_currency_as_symbol(self) -> None:
        self._currency_display = CurrencyDisplay.SYMBOL

    def display_currency_as_symbol_narrow(self) -> None:
        self._currency_display = CurrencyDisplay.SYMBOL_NARROW

    def display_no_currency(self) -> None:
        self._currency_display = CurrencyDisplay.NONE

    def format_or_raise(self, whole: int, frac: int, currency_code: str) -> str:
        """Format a monetary amount.

        Args:
            whole: Signed whole part
            frac: Fractional magnitude in minor-unit digits (1 at a 2-digit
                currency means ".01")
            currency_code: ISO 4217 code

        Raises:
            UnsupportedCurrencyForLocaleError: If the locale has no data for
                the currency
            FractionalScaleExceededError: If frac needs more digits than the
                currency's minor units; the error names the currency
            ValueError: If whole or frac is outside the 64-bit domain
        """
        currency = self._locale_data.get_currency(currency_code)
        if currency is None:
            raise UnsupportedCurrencyForLocaleError(currency_code, self._locale_data.code)

        label = resolve_currency_label(currency, self._currency_display)
        rule_set = select_rule_set(self._currency_style, label)
        try:
            return self._number_formatter.format_or_raise(
                whole, frac, currency.minor_digits, label, rule_set=rule_set
            )
        except FractionalScaleExceededError as e:
            raise e.with_currency(currency_code) from None

    def format(
        self, whole: int, frac: int, currency_code: str
    ) -> tuple[str | None, tuple[FormatterError, ...]]:
        """Format a monetary amount.

        Returns:
            Tuple of (formatted, errors): formatted is None when errors is
            non-empty
        """
        try:
            return (self.format_or_raise(whole, frac, currency_code), ())
        except FormatterError as e:
            return (None, (e,))

    def __repr__(self) -> str:
        return (
            f"MoneyFormatter(locale_code={self._locale_code!r}, "
            f"currency_style={self._currency_style.value!r}, "
            f"currency_display={self._currency_display.value!r})"
        )
