"""Enumerations for cldrnum type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.11+.
"""

from enum import StrEnum


class CurrencyStyle(StrEnum):
    """Style used for monetary amounts.

    StrEnum provides automatic string conversion: str(CurrencyStyle.STANDARD) == "standard"
    """

    STANDARD = "standard"
    """Standard style: -$1.00 (negative sign per the locale pattern)"""

    ACCOUNTING = "accounting"
    """Accounting style: ($1.00) where the locale uses parentheses"""


class CurrencyDisplay(StrEnum):
    """How the currency label is displayed next to an amount.

    StrEnum provides automatic string conversion: str(CurrencyDisplay.CODE) == "code"
    """

    CODE = "code"
    """ISO 4217 code: USD"""

    SYMBOL = "symbol"
    """CLDR symbol: US$"""

    SYMBOL_NARROW = "symbol_narrow"
    """CLDR narrow symbol: $"""

    NONE = "none"
    """No currency label at all"""


class RuleSetKind(StrEnum):
    """The seven rule sets every locale carries, one per formatting purpose.

    StrEnum provides automatic string conversion:
    str(RuleSetKind.STANDARD_DECIMAL) == "standard_decimal"
    """

    STANDARD_DECIMAL = "standard_decimal"
    """Plain decimal numbers"""

    STANDARD_CURRENCY_SYMBOL = "standard_currency_symbol"
    """Standard currency with a non-alphabetic symbol: $1.00"""

    STANDARD_CURRENCY_ALPHA = "standard_currency_alpha"
    """Standard currency with an alphabetic label: USD 1.00"""

    STANDARD_CURRENCY_NO_SYMBOL = "standard_currency_no_symbol"
    """Standard currency without a label: 1.00"""

    ACCOUNTING_CURRENCY_SYMBOL = "accounting_currency_symbol"
    """Accounting currency with a non-alphabetic symbol: ($1.00)"""

    ACCOUNTING_CURRENCY_ALPHA = "accounting_currency_alpha"
    """Accounting currency with an alphabetic label: (USD 1.00)"""

    ACCOUNTING_CURRENCY_NO_SYMBOL = "accounting_currency_no_symbol"
    """Accounting currency without a label: (1.00)"""


__all__ = [
    "CurrencyDisplay",
    "CurrencyStyle",
    "RuleSetKind",
]
