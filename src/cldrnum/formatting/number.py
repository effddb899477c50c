"""Number formatting core: whole part, fractional part and composition.

NumberFormatter renders a value split into a signed whole part and an
unsigned fractional magnitude ("digits after the decimal point") using one
locale's NumberInfo. It knows nothing about currencies beyond substituting a
caller-resolved label for the CLDR currency sign.

Architecture:
    - format_whole(): Right-to-left digit grouping plus digit substitution
    - format_frac(): Scale policy (natural, none, fixed width)
    - format(): Sign, affixes, separator and currency-sign substitution

Thread Safety:
    NumberFormatter is immutable. The active rule set is an argument of every
    call, so concurrent format() calls share no mutable state.

Python 3.11+. Zero external dependencies.
"""

from dataclasses import dataclass

from cldrnum.constants import (
    CURRENCY_PLACEHOLDER,
    MAX_FRACTION,
    MAX_SCALE,
    MAX_WHOLE,
    MIN_WHOLE,
    NATURAL_SCALE,
)
from cldrnum.diagnostics import (
    FormatterError,
    FractionalScaleExceededError,
    UnsupportedScaleError,
)
from cldrnum.enums import RuleSetKind
from cldrnum.locale.types import NumberFormat, NumberInfo

__all__ = ["NumberFormatter", "is_supported_scale"]


def is_supported_scale(scale: int) -> bool:
    """True for the natural scale (-1) and fixed scales 0-20."""
    return scale == NATURAL_SCALE or 0 <= scale <= MAX_SCALE


def _check_domain(whole: int, frac: int) -> None:
    """Reject inputs outside the 64-bit integer domain.

    Raises:
        ValueError: If whole is not a signed 64-bit value or frac is not an
            unsigned 64-bit value
    """
    if not MIN_WHOLE <= whole <= MAX_WHOLE:
        msg = f"whole must be a signed 64-bit integer, got {whole}"
        raise ValueError(msg)
    if not 0 <= frac <= MAX_FRACTION:
        msg = f"frac must be an unsigned 64-bit integer, got {frac}"
        raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class NumberFormatter:
    """Renders numbers with one locale's separators, digits and rule sets.

    Examples:
        >>> from cldrnum.locale import lookup_locale
        >>> formatter = NumberFormatter(lookup_locale("en").number_info)
        >>> formatter.format_or_raise(-1234567, 5, 2)
        '-1,234,567.05'
    """

    number_info: NumberInfo

    def format_whole(self, value: int, rule: NumberFormat) -> str:
        """Group and digit-substitute a non-negative integer.

        The first group (counted from the right) holds primary_group_size
        digits, every further group secondary_group_size digits. Grouping
        separators are never digit-substituted.

        Args:
            value: Non-negative integer
            rule: Rule set supplying the group sizes

        Returns:
            Grouped digits without sign or affixes

        Raises:
            ValueError: If value is negative

        Examples:
            >>> hindi_formatter.format_whole(10000000, hindi_rule)
            '1,00,00,000'
        """
        if value < 0:
            msg = f"format_whole expects a non-negative integer, got {value}"
            raise ValueError(msg)

        digits = str(value)
        groups: list[str] = []
        size = rule.primary_group_size
        end = len(digits)
        while end > size:
            groups.append(digits[end - size : end])
            end -= size
            size = rule.secondary_group_size
        groups.append(digits[:end])

        info = self.number_info
        return info.grouping_separator.join(
            info.substitute_digits(group) for group in reversed(groups)
        )

    def format_frac(self, magnitude: int, scale: int) -> str:
        """Render a fractional magnitude under a scale policy.

        - Natural scale (-1): digits with trailing zeros stripped; may be "".
        - Scale 0: magnitude must be 0; always "".
        - Scale 1-20: digits left-padded with zeros to exactly scale digits.

        Args:
            magnitude: Digits after the decimal point as an unsigned integer
                (101 at scale 3 means ".101")
            scale: Scale policy

        Returns:
            Fractional digits without the decimal separator

        Raises:
            UnsupportedScaleError: If scale is outside {-1} and 0-20
            FractionalScaleExceededError: If magnitude needs more digits than
                scale allows
        """
        if not is_supported_scale(scale):
            raise UnsupportedScaleError(scale)

        if scale == NATURAL_SCALE:
            digits = str(magnitude).rstrip("0")
        else:
            digits = str(magnitude)
            if scale == 0:
                if magnitude != 0:
                    raise FractionalScaleExceededError(magnitude, scale)
                return ""
            if len(digits) > scale:
                raise FractionalScaleExceededError(magnitude, scale)
            digits = digits.zfill(scale)

        return self.number_info.substitute_digits(digits)

    def format_or_raise(
        self,
        whole: int,
        frac: int,
        scale: int,
        currency_label: str = "",
        *,
        rule_set: RuleSetKind = RuleSetKind.STANDARD_DECIMAL,
    ) -> str:
        """Compose a formatted number, raising on failure.

        Args:
            whole: Signed whole part; its sign selects the negative affixes
            frac: Unsigned fractional magnitude
            scale: Scale policy for the fractional part
            currency_label: Text substituted for every CLDR currency sign
            rule_set: Rule set supplying group sizes and affixes

        Returns:
            Formatted number

        Raises:
            UnsupportedScaleError: If scale is outside {-1} and 0-20
            FractionalScaleExceededError: If frac does not fit scale
            ValueError: If whole or frac is outside the 64-bit domain
        """
        _check_domain(whole, frac)
        rule = self.number_info.formats.get(rule_set)
        fraction = self.format_frac(frac, scale)

        negative = whole < 0
        parts = [
            rule.neg_prefix if negative else rule.prefix,
            self.format_whole(abs(whole), rule),
        ]
        if fraction:
            parts.append(self.number_info.fractional_separator)
            parts.append(fraction)
        parts.append(rule.neg_suffix if negative else rule.suffix)

        # Literal pass over the assembled text keeps the sign wherever CLDR placed it.
        return "".join(parts).replace(CURRENCY_PLACEHOLDER, currency_label)

    def format(
        self,
        whole: int,
        frac: int,
        scale: int,
        currency_label: str = "",
        *,
        rule_set: RuleSetKind = RuleSetKind.STANDARD_DECIMAL,
    ) -> tuple[str | None, tuple[FormatterError, ...]]:
        """Compose a formatted number.

        Same arguments as format_or_raise().

        Returns:
            Tuple of (formatted, errors): formatted is None when errors is
            non-empty

        Raises:
            ValueError: If whole or frac is outside the 64-bit domain
        """
        try:
            return (
                self.format_or_raise(
                    whole, frac, scale, currency_label, rule_set=rule_set
                ),
                (),
            )
        except FormatterError as e:
            return (None, (e,))
