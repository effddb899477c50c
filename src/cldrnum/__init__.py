"""cldrnum - CLDR-conformant decimal and currency formatting.

Renders numbers split into a signed whole part and an unsigned fractional
magnitude as locale-correct decimals and monetary amounts: two-tier digit
grouping, native digit glyphs, decimal and group separators, currency
affixes, standard and accounting negatives, and code / symbol /
narrow-symbol / no-symbol currency labels.

Public API:
    DecimalFormatter - Plain decimals with a persistent scale
    MoneyFormatter - Monetary amounts with configurable style and label
    format_decimal - One-shot decimal formatting
    format_money - One-shot monetary formatting
    LocaleRegistry - Immutable locale data map (bundled CLDR subset by default)
    CurrencyStyle, CurrencyDisplay - Money formatter options

Exceptions:
    FormatterError - Base exception class
    UnsupportedLocaleError - Locale not in the registry
    UnsupportedScaleError - Scale outside {-1} and 0-20
    FractionalScaleExceededError - Fraction wider than the active scale
    UnsupportedCurrencyForLocaleError - Currency not in the locale's table
    LocaleDataError - Malformed registry input

Submodules:
    cldrnum.formatting - Formatters, rule-set selection, number core
    cldrnum.locale - Locale records, CLDR pattern decoding, registry
    cldrnum.diagnostics - Error codes, templates and diagnostic rendering
"""

from .constants import MAX_SCALE, NATURAL_SCALE
from .diagnostics import (
    FormatterError,
    FractionalScaleExceededError,
    LocaleDataError,
    UnsupportedCurrencyForLocaleError,
    UnsupportedLocaleError,
    UnsupportedScaleError,
)
from .enums import CurrencyDisplay, CurrencyStyle, RuleSetKind
from .formatting import DecimalFormatter, MoneyFormatter, format_decimal, format_money
from .locale import LocaleData, LocaleRegistry, get_default_registry, lookup_locale

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("cldrnum")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# CLDR release of the bundled locale data
__cldr_version__ = "47"

__all__ = [
    "MAX_SCALE",
    "NATURAL_SCALE",
    "CurrencyDisplay",
    "CurrencyStyle",
    "DecimalFormatter",
    "FormatterError",
    "FractionalScaleExceededError",
    "LocaleData",
    "LocaleDataError",
    "LocaleRegistry",
    "MoneyFormatter",
    "RuleSetKind",
    "UnsupportedCurrencyForLocaleError",
    "UnsupportedLocaleError",
    "UnsupportedScaleError",
    "__cldr_version__",
    "__version__",
    "format_decimal",
    "format_money",
    "get_default_registry",
    "lookup_locale",
]
