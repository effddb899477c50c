"""One-shot formatting helpers.

Each helper builds a transient formatter, applies the options and formats a
single value. Construction and option errors are collected in the returned
error tuple rather than raised.

Example:
    >>> format_decimal(1234567, 5, "hi", scale=2)
    ('12,34,567.05', ())
    >>> format_money(1000, 10, "USD", "en-CA", currency_display=CurrencyDisplay.SYMBOL)
    ('US$\\xa01,000.10', ())
    >>> format_decimal(1, 0, "xx")[0] is None
    True

Python 3.11+.
"""

from cldrnum.constants import NATURAL_SCALE
from cldrnum.diagnostics import FormatterError
from cldrnum.enums import CurrencyDisplay, CurrencyStyle
from cldrnum.locale import LocaleRegistry

from .decimal import DecimalFormatter
from .money import MoneyFormatter

__all__ = ["format_decimal", "format_money"]


def format_decimal(
    whole: int,
    frac: int,
    locale_code: str,
    *,
    scale: int = NATURAL_SCALE,
    registry: LocaleRegistry | None = None,
) -> tuple[str | None, tuple[FormatterError, ...]]:
    """Format a decimal number in one call.

    Args:
        whole: Signed whole part
        frac: Fractional magnitude (digits after the decimal point)
        locale_code: BCP-47 or POSIX locale code
        scale: Scale policy (default: natural)
        registry: Locale registry (default: the bundled registry)

    Returns:
        Tuple of (formatted, errors): formatted is None when errors is
        non-empty
    """
    formatter, errors = DecimalFormatter.create(locale_code, registry=registry)
    if formatter is None:
        return (None, errors)

    errors = formatter.set_scale(scale)
    if errors:
        return (None, errors)

    return formatter.format(whole, frac)


def format_money(
    whole: int,
    frac: int,
    currency_code: str,
    locale_code: str,
    *,
    currency_style: CurrencyStyle = CurrencyStyle.STANDARD,
    currency_display: CurrencyDisplay = CurrencyDisplay.CODE,
    registry: LocaleRegistry | None = None,
) -> tuple[str | None, tuple[FormatterError, ...]]:
    """Format a monetary amount in one call.

    Args:
        whole: Signed whole part
        frac: Fractional magnitude in minor-unit digits
        currency_code: ISO 4217 code
        locale_code: BCP-47 or POSIX locale code
        currency_style: Standard or accounting negatives
        currency_display: Which currency label to show
        registry: Locale registry (default: the bundled registry)

    Returns:
        Tuple of (formatted, errors): formatted is None when errors is
        non-empty
    """
    formatter, errors = MoneyFormatter.create(
        locale_code,
        currency_style=currency_style,
        currency_display=currency_display,
        registry=registry,
    )
    if formatter is None:
        return (None, errors)

    return formatter.format(whole, frac, currency_code)
