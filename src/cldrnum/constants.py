"""Shared constants for cldrnum.

Centralized configuration constants used by the registry and the
formatting core. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Scale limits: Valid range of fractional scales
- CLDR markers: Placeholders and identifiers taken from CLDR data
- Input limits: Integer domain accepted by the formatters
- Registry: Bundled locale data resource

Python 3.11+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Scale limits
    "NATURAL_SCALE",
    "MIN_SCALE",
    "MAX_SCALE",
    # CLDR markers
    "CURRENCY_PLACEHOLDER",
    "LATIN_NUMBER_SYSTEM",
    "DEFAULT_GROUP_SIZE",
    "MAX_CURRENCY_MINOR_DIGITS",
    # Input limits
    "MIN_WHOLE",
    "MAX_WHOLE",
    "MAX_FRACTION",
    # Registry
    "DEFAULT_LOCALE_DATA_PACKAGE",
    "DEFAULT_LOCALE_DATA_FILE",
]

# ============================================================================
# SCALE LIMITS
# ============================================================================

# Scale -1 formats the fractional part "naturally": trailing zeros are
# stripped and an all-zero fraction suppresses the decimal separator.
NATURAL_SCALE: int = -1
MIN_SCALE: int = NATURAL_SCALE

# 20 is the number of decimal digits in the largest unsigned 64-bit integer,
# so every fractional magnitude fits within this many digits.
MAX_SCALE: int = 20

# ============================================================================
# CLDR MARKERS
# ============================================================================

# CLDR currency sign (U+00A4). Replaced by the resolved currency label
# after the number has been assembled.
CURRENCY_PLACEHOLDER: str = "\xa4"

# Numbering system rendered with ASCII digits (no substitution needed).
LATIN_NUMBER_SYSTEM: str = "latn"

# Group size used when a pattern carries no explicit grouping.
DEFAULT_GROUP_SIZE: int = 3

# Currency minor units can never exceed the maximum scale.
MAX_CURRENCY_MINOR_DIGITS: int = MAX_SCALE

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Whole parts are signed 64-bit integers.
MIN_WHOLE: int = -(2**63)
MAX_WHOLE: int = 2**63 - 1

# Fractional magnitudes are unsigned 64-bit integers.
MAX_FRACTION: int = 2**64 - 1

# ============================================================================
# REGISTRY
# ============================================================================

# Bundled CLDR subset loaded by the default registry.
DEFAULT_LOCALE_DATA_PACKAGE: str = "cldrnum.locale.data"
DEFAULT_LOCALE_DATA_FILE: str = "locales.json"
