"""CLDR number pattern decoding.

Turns CLDR pattern strings such as ``#,##0.00;(#,##0.00)`` into the
structured NumberFormat rule sets the formatting core consumes, and derives
a locale's seven rule-set patterns from its raw CLDR currency formats.

Pattern syntax is parsed by Babel (``babel.numbers.parse_pattern``); this
module only applies the conventions the formatters rely on:

- Patterns without grouping use groups of 3.
- A pattern without a distinct negative sub-pattern gets a negative prefix
  equal to the positive prefix with "-" appended on the right.

See https://cldr.unicode.org/translation/number-currency-formats/number-and-currency-patterns

Python 3.11+. Uses Babel for pattern parsing.
"""

import re
from dataclasses import dataclass

from babel.numbers import parse_pattern

from cldrnum.constants import CURRENCY_PLACEHOLDER, DEFAULT_GROUP_SIZE
from cldrnum.enums import RuleSetKind

from .types import NumberFormat, NumberFormats

__all__ = [
    "CurrencyFormatPatterns",
    "build_number_formats",
    "decode_pattern",
    "derive_rule_patterns",
    "remove_currency_placeholders",
]

_PATTERN_SEPARATOR = ";"
_MINUS = "-"
# Babel reports (1000, 1000) for patterns without any grouping separator
_NO_GROUPING = 1000
_QUOTED = re.compile(r"'([^']*)'")


def _unquote(affix: str) -> str:
    """Resolve CLDR literal quoting: 'x' -> x and '' -> '."""
    return _QUOTED.sub(lambda m: m.group(1) or "'", affix)


def _group_size(size: int) -> int:
    return DEFAULT_GROUP_SIZE if size >= _NO_GROUPING else size


def decode_pattern(pattern: str) -> NumberFormat:
    """Decode one CLDR number pattern into a rule set.

    Args:
        pattern: CLDR pattern, optionally with a ";"-separated negative
            sub-pattern

    Returns:
        NumberFormat with group sizes and affixes

    Raises:
        ValueError: If Babel cannot parse the pattern

    Examples:
        >>> decode_pattern("#,##,##0.###").secondary_group_size
        2
        >>> decode_pattern("#,##0.###").neg_prefix
        '-'
        >>> decode_pattern("#,##0.00;(#,##0.00)").neg_prefix
        '('
    """
    parsed = parse_pattern(pattern)
    if parsed.int_prec[1] == 0 and parsed.frac_prec[1] == 0:
        msg = f"Number pattern {pattern!r} has no digit placeholders"
        raise ValueError(msg)

    pos_prefix, neg_prefix = (_unquote(affix) for affix in parsed.prefix)
    pos_suffix, neg_suffix = (_unquote(affix) for affix in parsed.suffix)

    # Negative sign always goes on the right of the positive prefix.
    if _PATTERN_SEPARATOR not in pattern or neg_prefix == pos_prefix:
        neg_prefix = pos_prefix + _MINUS
        if _PATTERN_SEPARATOR not in pattern:
            neg_suffix = pos_suffix

    primary, secondary = parsed.grouping
    return NumberFormat(
        primary_group_size=_group_size(primary),
        secondary_group_size=_group_size(secondary),
        prefix=pos_prefix,
        suffix=pos_suffix,
        neg_prefix=neg_prefix,
        neg_suffix=neg_suffix,
    )


def remove_currency_placeholders(pattern: str) -> str:
    """Strip every currency sign, then trim whitespace at the ends of each sub-pattern.

    "#,##0.00 ¤;-#,##0.00 ¤" becomes "#,##0.00;-#,##0.00", but whitespace
    inside a sub-pattern stays: "(¤\xa0#,##0.00)" becomes "(\xa0#,##0.00)".
    """
    return _PATTERN_SEPARATOR.join(
        part.replace(CURRENCY_PLACEHOLDER, "").strip()
        for part in pattern.split(_PATTERN_SEPARATOR)
    )


@dataclass(frozen=True, slots=True)
class CurrencyFormatPatterns:
    """Raw CLDR currency format patterns of one locale.

    Attributes:
        standard: ``currencyFormats.standard``
        accounting: ``currencyFormats.accounting``
        accounting_alpha_next_to_number: ``accounting-alphaNextToNumber``, if any
        accounting_no_currency: ``accounting-noCurrency``, if any
    """

    standard: str
    accounting: str
    accounting_alpha_next_to_number: str | None = None
    accounting_no_currency: str | None = None


def derive_rule_patterns(
    decimal_pattern: str, currency_patterns: CurrencyFormatPatterns
) -> dict[RuleSetKind, str]:
    """Pick the pattern string behind each of the seven rule sets.

    CLDR only records the alpha and no-currency variants when they differ
    from the plain accounting pattern, and only as accounting patterns, so
    the remaining variants are derived:

    - alpha variants fall back to the accounting pattern, and the standard
      alpha pattern is the positive half of the accounting alpha pattern;
    - no-symbol variants fall back to the pattern with the currency sign
      removed.

    Args:
        decimal_pattern: ``decimalFormats.standard``
        currency_patterns: Raw CLDR currency formats

    Returns:
        Mapping of every RuleSetKind to its CLDR pattern
    """
    accounting = currency_patterns.accounting

    alpha = currency_patterns.accounting_alpha_next_to_number
    accounting_alpha = alpha if alpha is not None and _PATTERN_SEPARATOR in alpha else accounting

    no_currency = currency_patterns.accounting_no_currency
    accounting_no_symbol = (
        no_currency
        if no_currency is not None and _PATTERN_SEPARATOR in no_currency
        else remove_currency_placeholders(accounting)
    )

    return {
        RuleSetKind.STANDARD_DECIMAL: decimal_pattern,
        RuleSetKind.STANDARD_CURRENCY_SYMBOL: currency_patterns.standard,
        RuleSetKind.STANDARD_CURRENCY_ALPHA: accounting_alpha.split(_PATTERN_SEPARATOR)[0],
        RuleSetKind.STANDARD_CURRENCY_NO_SYMBOL: remove_currency_placeholders(
            currency_patterns.standard
        ),
        RuleSetKind.ACCOUNTING_CURRENCY_SYMBOL: accounting,
        RuleSetKind.ACCOUNTING_CURRENCY_ALPHA: accounting_alpha,
        RuleSetKind.ACCOUNTING_CURRENCY_NO_SYMBOL: accounting_no_symbol,
    }


def build_number_formats(
    decimal_pattern: str, currency_patterns: CurrencyFormatPatterns
) -> NumberFormats:
    """Decode all seven rule sets of a locale.

    Raises:
        ValueError: If any pattern cannot be parsed
    """
    patterns = derive_rule_patterns(decimal_pattern, currency_patterns)
    return NumberFormats(
        standard_decimal=decode_pattern(patterns[RuleSetKind.STANDARD_DECIMAL]),
        standard_currency_symbol=decode_pattern(patterns[RuleSetKind.STANDARD_CURRENCY_SYMBOL]),
        standard_currency_alpha=decode_pattern(patterns[RuleSetKind.STANDARD_CURRENCY_ALPHA]),
        standard_currency_no_symbol=decode_pattern(
            patterns[RuleSetKind.STANDARD_CURRENCY_NO_SYMBOL]
        ),
        accounting_currency_symbol=decode_pattern(
            patterns[RuleSetKind.ACCOUNTING_CURRENCY_SYMBOL]
        ),
        accounting_currency_alpha=decode_pattern(patterns[RuleSetKind.ACCOUNTING_CURRENCY_ALPHA]),
        accounting_currency_no_symbol=decode_pattern(
            patterns[RuleSetKind.ACCOUNTING_CURRENCY_NO_SYMBOL]
        ),
    )
