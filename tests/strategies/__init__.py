"""Hypothesis strategies for cldrnum property-based testing.

Strategies are organized by domain:

- numbers: whole parts, fractional magnitudes, scales
- locales: locale codes, currency options

Usage:
    from tests.strategies import whole_parts, fixed_scales
    from tests.strategies.locales import supported_locale_codes
"""

from .locales import (
    currency_displays,
    currency_styles,
    locale_code_spellings,
    non_latin_locale_codes,
    supported_locale_codes,
)
from .numbers import (
    MAX_FRACTION,
    MAX_WHOLE,
    MIN_WHOLE,
    fitting_fractions,
    fixed_scales,
    fractions,
    invalid_scales,
    valid_scales,
    whole_parts,
)

__all__ = [
    "MAX_FRACTION",
    "MAX_WHOLE",
    "MIN_WHOLE",
    "currency_displays",
    "currency_styles",
    "fitting_fractions",
    "fixed_scales",
    "fractions",
    "invalid_scales",
    "locale_code_spellings",
    "non_latin_locale_codes",
    "supported_locale_codes",
    "valid_scales",
    "whole_parts",
]
