"""Decimal and monetary number formatting.

Python 3.11+.
"""

from .base import LocaleBoundFormatter
from .decimal import DecimalFormatter
from .functions import format_decimal, format_money
from .money import MoneyFormatter, resolve_currency_label, select_rule_set
from .number import NumberFormatter, is_supported_scale

__all__ = [
    "DecimalFormatter",
    "LocaleBoundFormatter",
    "MoneyFormatter",
    "NumberFormatter",
    "format_decimal",
    "format_money",
    "is_supported_scale",
    "resolve_currency_label",
    "select_rule_set",
]
