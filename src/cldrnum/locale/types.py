"""Immutable records describing one locale's number formatting rules.

These are the shapes the formatting core consumes from the locale registry.
Every record is a frozen, slotted dataclass: once the registry is built,
nothing in it can change, so records are shared freely across formatters
and threads.

Python 3.11+. Zero external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from cldrnum.constants import (
    DEFAULT_GROUP_SIZE,
    LATIN_NUMBER_SYSTEM,
    MAX_CURRENCY_MINOR_DIGITS,
)
from cldrnum.enums import RuleSetKind

__all__ = [
    "CurrencyData",
    "LocaleData",
    "NumberFormat",
    "NumberFormats",
    "NumberInfo",
]

_ASCII_DIGITS = "0123456789"


@dataclass(frozen=True, slots=True)
class NumberFormat:
    """Decoded form of one CLDR number pattern (a rule set).

    Attributes:
        primary_group_size: Digits between the decimal point and the first
            group separator
        secondary_group_size: Digits between subsequent group separators
        prefix: Text before a non-negative number (may hold the currency sign)
        suffix: Text after a non-negative number
        neg_prefix: Text before a negative number
        neg_suffix: Text after a negative number
    """

    primary_group_size: int = DEFAULT_GROUP_SIZE
    secondary_group_size: int = DEFAULT_GROUP_SIZE
    prefix: str = ""
    suffix: str = ""
    neg_prefix: str = "-"
    neg_suffix: str = ""

    def __post_init__(self) -> None:
        """Validate NumberFormat invariants.

        Raises:
            ValueError: If either group size is less than 1.
        """
        if self.primary_group_size < 1:
            msg = f"NumberFormat.primary_group_size must be >= 1, got {self.primary_group_size}"
            raise ValueError(msg)
        if self.secondary_group_size < 1:
            msg = (
                "NumberFormat.secondary_group_size must be >= 1, "
                f"got {self.secondary_group_size}"
            )
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class NumberFormats:
    """The seven rule sets of a locale, one per formatting purpose."""

    standard_decimal: NumberFormat
    standard_currency_symbol: NumberFormat
    standard_currency_alpha: NumberFormat
    standard_currency_no_symbol: NumberFormat
    accounting_currency_symbol: NumberFormat
    accounting_currency_alpha: NumberFormat
    accounting_currency_no_symbol: NumberFormat

    def get(self, kind: RuleSetKind) -> NumberFormat:
        """Return the rule set for a formatting purpose."""
        match kind:
            case RuleSetKind.STANDARD_DECIMAL:
                return self.standard_decimal
            case RuleSetKind.STANDARD_CURRENCY_SYMBOL:
                return self.standard_currency_symbol
            case RuleSetKind.STANDARD_CURRENCY_ALPHA:
                return self.standard_currency_alpha
            case RuleSetKind.STANDARD_CURRENCY_NO_SYMBOL:
                return self.standard_currency_no_symbol
            case RuleSetKind.ACCOUNTING_CURRENCY_SYMBOL:
                return self.accounting_currency_symbol
            case RuleSetKind.ACCOUNTING_CURRENCY_ALPHA:
                return self.accounting_currency_alpha
            case RuleSetKind.ACCOUNTING_CURRENCY_NO_SYMBOL:
                return self.accounting_currency_no_symbol


@dataclass(frozen=True, slots=True)
class NumberInfo:
    """Numbering system, separators and rule sets of a locale.

    Attributes:
        number_system: CLDR numbering system id ("latn", "beng", "arab", ...)
        digits: Glyphs for the digit values 0-9, in order
        fractional_separator: Decimal separator glyph(s)
        grouping_separator: Group separator glyph(s), e.g. U+202F in French
        formats: The seven rule sets
    """

    number_system: str
    digits: tuple[str, ...]
    fractional_separator: str
    grouping_separator: str
    formats: NumberFormats
    _digit_table: dict[int, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate the digit table and precompute the translation map.

        Raises:
            ValueError: If digits does not hold exactly 10 glyphs.
        """
        if len(self.digits) != 10:
            msg = f"NumberInfo.digits must hold exactly 10 glyphs, got {len(self.digits)}"
            raise ValueError(msg)
        table = {ord(ascii_digit): glyph for ascii_digit, glyph in zip(_ASCII_DIGITS, self.digits)}
        object.__setattr__(self, "_digit_table", table)

    @property
    def is_latin(self) -> bool:
        """True when digits render as ASCII and need no substitution."""
        return self.number_system == LATIN_NUMBER_SYSTEM

    def substitute_digits(self, text: str) -> str:
        """Map every ASCII digit in text to this numbering system's glyph.

        Example:
            >>> bengali.substitute_digits("105")
            '১০৫'
        """
        if self.is_latin:
            return text
        return text.translate(self._digit_table)


@dataclass(frozen=True, slots=True)
class CurrencyData:
    """Per-currency display metadata within one locale.

    Attributes:
        minor_digits: Number of minor-unit digits (0 for JPY, 3 for BHD)
        display_code: ISO 4217 code
        display_symbol: CLDR symbol (the code when CLDR has none)
        display_symbol_narrow: CLDR narrow symbol (falls back to the symbol)
    """

    minor_digits: int
    display_code: str
    display_symbol: str
    display_symbol_narrow: str

    def __post_init__(self) -> None:
        """Validate CurrencyData invariants.

        Raises:
            ValueError: If minor_digits is outside 0-20.
        """
        if not 0 <= self.minor_digits <= MAX_CURRENCY_MINOR_DIGITS:
            msg = (
                f"CurrencyData.minor_digits must be within 0-{MAX_CURRENCY_MINOR_DIGITS}, "
                f"got {self.minor_digits}"
            )
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class LocaleData:
    """Everything the formatters need to know about one locale.

    Attributes:
        code: POSIX identifier of the data-bearing locale (e.g. "fr_CA")
        number_info: Numbering system, separators and rule sets
        currencies: Read-only mapping of currency code to display metadata
        language: English display name of the language
        territory: English display name of the territory ("" if none)
        variant: English display name of the variant ("" if none)
    """

    code: str
    number_info: NumberInfo
    currencies: Mapping[str, CurrencyData]
    language: str = ""
    territory: str = ""
    variant: str = ""

    def __post_init__(self) -> None:
        """Freeze the currency table."""
        if not isinstance(self.currencies, MappingProxyType):
            object.__setattr__(self, "currencies", MappingProxyType(dict(self.currencies)))

    @property
    def name(self) -> str:
        """English display name, e.g. "French (Canada)".

        Falls back to the locale code when no language name is known.
        """
        if not self.language:
            return self.code
        details = [part for part in (self.territory, self.variant) if part]
        if not details:
            return self.language
        return f"{self.language} ({', '.join(details)})"

    def get_currency(self, currency_code: str) -> CurrencyData | None:
        """Return display metadata for a currency, or None if unsupported."""
        return self.currencies.get(currency_code)
