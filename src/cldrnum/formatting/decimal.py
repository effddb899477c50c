"""Plain decimal formatting for one locale.

Python 3.11+.
"""

from cldrnum.constants import NATURAL_SCALE
from cldrnum.diagnostics import FormatterError, UnsupportedScaleError
from cldrnum.enums import RuleSetKind
from cldrnum.locale import LocaleRegistry

from .base import LocaleBoundFormatter
from .number import is_supported_scale

__all__ = ["DecimalFormatter"]


class DecimalFormatter(LocaleBoundFormatter):
    """Formats plain decimal numbers with a persistent scale.

    The scale defaults to natural (-1): trailing fractional zeros are
    dropped and a zero fraction shows no decimal separator. Fixed scales
    1-20 pad the fraction to exactly that many digits; scale 0 shows no
    fraction at all.

    Examples:
        >>> formatter = DecimalFormatter("fr")
        >>> formatter.format_or_raise(10000, 100)
        '10\\u202f000,1'
        >>> formatter.set_scale_or_raise(3)
        >>> formatter.format_or_raise(10000, 100)
        '10\\u202f000,100'
        >>> DecimalFormatter("en").format(1, 1010)
        ('1.101', ())
    """

    __slots__ = ("_scale",)

    def __init__(self, locale_code: str, *, registry: LocaleRegistry | None = None) -> None:
        """Bind the formatter to a locale with natural scale.

        Raises:
            UnsupportedLocaleError: If the registry does not know the locale
        """
        super().__init__(locale_code, registry=registry)
        self._scale = NATURAL_SCALE

    @property
    def scale(self) -> int:
        """Active scale (-1 for natural)."""
        return self._scale

    def set_scale_or_raise(self, scale: int) -> None:
        """Change the scale.

        Only the range is checked here; whether a fraction fits the scale is
        checked when formatting.

        Raises:
            UnsupportedScaleError: If scale is outside {-1} and 0-20
        """
        if not is_supported_scale(scale):
            raise UnsupportedScaleError(scale)
        self._scale = scale

    def set_scale(self, scale: int) -> tuple[FormatterError, ...]:
        """Change the scale, returning errors instead of raising."""
        try:
            self.set_scale_or_raise(scale)
        except FormatterError as e:
            return (e,)
        return ()

    def format_or_raise(self, whole: int, frac: int = 0) -> str:
        """Format a decimal number.

        Args:
            whole: Signed whole part
            frac: Fractional magnitude (digits after the decimal point)

        Raises:
            FractionalScaleExceededError: If frac does not fit the scale
            ValueError: If whole or frac is outside the 64-bit domain
        """
        return self._number_formatter.format_or_raise(
            whole, frac, self._scale, rule_set=RuleSetKind.STANDARD_DECIMAL
        )

    def format(self, whole: int, frac: int = 0) -> tuple[str | None, tuple[FormatterError, ...]]:
        """Format a decimal number.

        Returns:
            Tuple of (formatted, errors): formatted is None when errors is
            non-empty
        """
        return self._number_formatter.format(
            whole, frac, self._scale, rule_set=RuleSetKind.STANDARD_DECIMAL
        )

    def __repr__(self) -> str:
        return f"DecimalFormatter(locale_code={self._locale_code!r}, scale={self._scale})"
