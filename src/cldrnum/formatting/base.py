"""Locale binding shared by the decimal and money formatters.

Python 3.11+.
"""

from typing import Any, Self

from cldrnum.diagnostics import FormatterError, UnsupportedLocaleError
from cldrnum.locale import LocaleData, LocaleRegistry, get_default_registry

from .number import NumberFormatter

__all__ = ["LocaleBoundFormatter"]


class LocaleBoundFormatter:
    """Base class holding a formatter's registry and bound locale.

    Subclasses add their own configuration fields and format() operations.
    Instances are not safe for concurrent mutation; concurrent format()
    calls against an instance that is not being reconfigured are safe.
    """

    __slots__ = ("_locale_code", "_locale_data", "_number_formatter", "_registry")

    def __init__(self, locale_code: str, *, registry: LocaleRegistry | None = None) -> None:
        """Bind the formatter to a locale.

        Args:
            locale_code: BCP-47 or POSIX locale code (e.g. "fr-CA", "fr_CA")
            registry: Locale registry to resolve codes against (default:
                the bundled process-wide registry)

        Raises:
            UnsupportedLocaleError: If the registry does not know the locale
        """
        self._registry = registry if registry is not None else get_default_registry()
        self._bind(locale_code, self._resolve(locale_code))

    @classmethod
    def create(
        cls, locale_code: str, **kwargs: Any
    ) -> tuple[Self | None, tuple[FormatterError, ...]]:
        """Construct a formatter, returning errors instead of raising.

        Args:
            locale_code: BCP-47 or POSIX locale code
            **kwargs: Keyword arguments of the subclass constructor

        Returns:
            Tuple of (formatter, errors): formatter is None when errors is
            non-empty
        """
        try:
            return (cls(locale_code, **kwargs), ())
        except FormatterError as e:
            return (None, (e,))

    def _resolve(self, locale_code: str) -> LocaleData:
        locale_data = self._registry.lookup(locale_code)
        if locale_data is None:
            raise UnsupportedLocaleError(locale_code)
        return locale_data

    def _bind(self, locale_code: str, locale_data: LocaleData) -> None:
        self._locale_code = locale_code
        self._locale_data = locale_data
        self._number_formatter = NumberFormatter(locale_data.number_info)

    @property
    def locale_code(self) -> str:
        """Locale code as supplied by the caller."""
        return self._locale_code

    @property
    def locale_data(self) -> LocaleData:
        """Registry record of the bound locale."""
        return self._locale_data

    @property
    def registry(self) -> LocaleRegistry:
        """Registry locale codes are resolved against."""
        return self._registry

    def set_locale_or_raise(self, locale_code: str) -> None:
        """Rebind the formatter to another locale.

        On failure the formatter keeps its previous locale.

        Raises:
            UnsupportedLocaleError: If the registry does not know the locale
        """
        self._bind(locale_code, self._resolve(locale_code))

    def set_locale(self, locale_code: str) -> tuple[FormatterError, ...]:
        """Rebind the formatter to another locale.

        On failure the formatter keeps its previous locale.

        Returns:
            Empty tuple on success, else a tuple holding UnsupportedLocaleError
        """
        try:
            self.set_locale_or_raise(locale_code)
        except FormatterError as e:
            return (e,)
        return ()
