"""Locale data: record types, CLDR pattern decoding and the locale registry.

Python 3.11+. Uses Babel for CLDR pattern parsing and supplemental data.
"""

from .patterns import (
    CurrencyFormatPatterns,
    build_number_formats,
    decode_pattern,
    derive_rule_patterns,
    remove_currency_placeholders,
)
from .registry import LocaleRegistry, get_default_registry, lookup_locale
from .types import CurrencyData, LocaleData, NumberFormat, NumberFormats, NumberInfo

__all__ = [
    "CurrencyData",
    "CurrencyFormatPatterns",
    "LocaleData",
    "LocaleRegistry",
    "NumberFormat",
    "NumberFormats",
    "NumberInfo",
    "build_number_formats",
    "decode_pattern",
    "derive_rule_patterns",
    "get_default_registry",
    "lookup_locale",
    "remove_currency_placeholders",
]
