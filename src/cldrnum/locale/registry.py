"""Process-wide, read-only locale registry.

Maps locale codes to LocaleData records. The registry is built once from a
JSON document of raw CLDR number data; every pattern is decoded at build
time, so lookups never parse anything.

Architecture:
    - LocaleRegistry: Immutable map of POSIX locale ids plus an alias table
      (default-content locales such as en_US -> en)
    - get_default_registry(): Lazily loads the bundled CLDR subset once per
      process; concurrent first calls build it exactly once
    - Babel supplies what the document leaves out: pattern syntax parsing,
      currency minor digits (CLDR supplemental fractions), identifier
      canonicalization and English display names

Document shape (keys follow CLDR JSON ``numbers.json`` / ``currencies.json``):

    {
      "cldrVersion": "47.0.0",
      "aliases": {"en_US": "en"},
      "locales": {
        "en": {
          "numberSystem": "latn",
          "digits": "0123456789",
          "symbols": {"decimal": ".", "group": ","},
          "decimalFormats": {"standard": "#,##0.###"},
          "currencyFormats": {
            "standard": "¤#,##0.00",
            "accounting": "¤#,##0.00;(¤#,##0.00)",
            "accounting-alphaNextToNumber": "...",   (optional)
            "accounting-noCurrency": "..."           (optional)
          },
          "currencies": {"USD": {"symbol": "$", "symbol-alt-narrow": "$"}}
        }
      }
    }

Thread Safety:
    Registries are immutable after construction. The default registry is
    published under a lock and never mutated, so concurrent lookups need
    no synchronization.

Python 3.11+. Uses Babel for CLDR supplemental data.
"""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Iterator, Mapping
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Any

from babel import Locale, UnknownLocaleError
from babel.numbers import get_currency_precision

from cldrnum.constants import DEFAULT_LOCALE_DATA_FILE, DEFAULT_LOCALE_DATA_PACKAGE
from cldrnum.diagnostics import LocaleDataError
from cldrnum.locale_utils import canonicalize_locale, normalize_locale

from .patterns import CurrencyFormatPatterns, build_number_formats
from .types import CurrencyData, LocaleData, NumberInfo

__all__ = [
    "LocaleRegistry",
    "get_default_registry",
    "lookup_locale",
]

logger = logging.getLogger(__name__)


class LocaleRegistry:
    """Immutable mapping of locale codes to LocaleData.

    Use LocaleRegistry.from_json() or LocaleRegistry.from_mapping() to build
    a registry from raw CLDR data, or get_default_registry() for the bundled
    one.

    Examples:
        >>> registry = get_default_registry()
        >>> registry.lookup("en-US").code
        'en'
        >>> registry.lookup("fr_CA").number_info.grouping_separator
        '\\xa0'
        >>> registry.lookup("xx") is None
        True
    """

    __slots__ = ("_aliases", "_cldr_version", "_locales")

    def __init__(
        self,
        locales: Mapping[str, LocaleData],
        aliases: Mapping[str, str] | None = None,
        *,
        cldr_version: str = "",
    ) -> None:
        """Create a registry from decoded locale records.

        Args:
            locales: POSIX locale id -> LocaleData
            aliases: Locale id -> data-bearing locale id
            cldr_version: CLDR release the data was taken from

        Raises:
            LocaleDataError: If an alias points to an unknown locale
        """
        alias_map = dict(aliases or {})
        for alias, target in alias_map.items():
            if target not in locales:
                raise LocaleDataError(f"alias target '{target}' is not a known locale", alias)

        self._locales: Mapping[str, LocaleData] = MappingProxyType(dict(locales))
        self._aliases: Mapping[str, str] = MappingProxyType(alias_map)
        self._cldr_version = cldr_version

    @classmethod
    def from_mapping(cls, document: Mapping[str, Any]) -> LocaleRegistry:
        """Build a registry from a decoded locale data document.

        Args:
            document: Parsed JSON document (see module docstring)

        Returns:
            LocaleRegistry with every pattern decoded

        Raises:
            LocaleDataError: If the document is malformed
        """
        raw_locales = document.get("locales")
        if not isinstance(raw_locales, Mapping):
            raise LocaleDataError("missing 'locales' object")

        raw_aliases = document.get("aliases", {})
        if not isinstance(raw_aliases, Mapping):
            raise LocaleDataError("'aliases' must be an object")

        locales = {code: _build_locale_data(code, raw) for code, raw in raw_locales.items()}
        return cls(
            locales,
            {str(alias): str(target) for alias, target in raw_aliases.items()},
            cldr_version=str(document.get("cldrVersion", "")),
        )

    @classmethod
    def from_json(cls, path: str | Path) -> LocaleRegistry:
        """Build a registry from a JSON locale data file.

        Raises:
            LocaleDataError: If the file is not valid JSON or is malformed
            OSError: If the file cannot be read
        """
        text = Path(path).read_text(encoding="utf-8")
        return cls.from_mapping(_decode_document(text))

    @property
    def cldr_version(self) -> str:
        """CLDR release the data was taken from ("" if unknown)."""
        return self._cldr_version

    @property
    def locales(self) -> tuple[str, ...]:
        """Sorted ids of the data-bearing locales."""
        return tuple(sorted(self._locales))

    @property
    def aliases(self) -> Mapping[str, str]:
        """Read-only alias table (locale id -> data-bearing locale id)."""
        return self._aliases

    def lookup(self, locale_code: str) -> LocaleData | None:
        """Resolve a locale code to its LocaleData.

        Accepts BCP-47 ("fr-CA") and POSIX ("fr_CA") separators. Codes that
        miss both the locale table and the alias table are canonicalized with
        Babel (case, language aliases) and tried once more; there is no
        further fallback.

        Args:
            locale_code: Locale code as supplied by the caller

        Returns:
            LocaleData, or None if the locale is not supported
        """
        if not locale_code:
            return None

        key = normalize_locale(locale_code)
        data = self._resolve(key)
        if data is not None:
            return data

        canonical = canonicalize_locale(key)
        if canonical is None or canonical == key:
            logger.debug("Locale '%s' not found in registry", locale_code)
            return None

        logger.debug("Canonicalized locale '%s' to '%s'", locale_code, canonical)
        data = self._resolve(canonical)
        if data is None:
            logger.debug("Locale '%s' not found in registry", locale_code)
        return data

    def _resolve(self, key: str) -> LocaleData | None:
        data = self._locales.get(key)
        if data is not None:
            return data
        target = self._aliases.get(key)
        if target is None:
            return None
        return self._locales[target]

    def __contains__(self, locale_code: object) -> bool:
        return isinstance(locale_code, str) and self.lookup(locale_code) is not None

    def __len__(self) -> int:
        return len(self._locales)

    def __iter__(self) -> Iterator[str]:
        return iter(self.locales)

    def __repr__(self) -> str:
        return (
            f"LocaleRegistry(locales={len(self._locales)}, aliases={len(self._aliases)}, "
            f"cldr_version={self._cldr_version!r})"
        )


# ============================================================================
# DOCUMENT DECODING
# ============================================================================


def _decode_document(text: str) -> Mapping[str, Any]:
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise LocaleDataError(f"not valid JSON: {e}") from e
    if not isinstance(document, Mapping):
        raise LocaleDataError("top-level value must be an object")
    return document


def _build_locale_data(code: str, raw: Any) -> LocaleData:
    """Decode one locale entry, wrapping shape errors in LocaleDataError."""
    try:
        symbols = raw["symbols"]
        currency_formats = raw["currencyFormats"]
        number_info = NumberInfo(
            number_system=str(raw["numberSystem"]),
            digits=tuple(raw["digits"]),
            fractional_separator=str(symbols["decimal"]),
            grouping_separator=str(symbols["group"]),
            formats=build_number_formats(
                str(raw["decimalFormats"]["standard"]),
                CurrencyFormatPatterns(
                    standard=str(currency_formats["standard"]),
                    accounting=str(currency_formats["accounting"]),
                    accounting_alpha_next_to_number=currency_formats.get(
                        "accounting-alphaNextToNumber"
                    ),
                    accounting_no_currency=currency_formats.get("accounting-noCurrency"),
                ),
            ),
        )
        currencies = {
            currency_code: _build_currency_data(currency_code, currency_raw or {})
            for currency_code, currency_raw in raw.get("currencies", {}).items()
        }
    except (KeyError, TypeError, AttributeError) as e:
        raise LocaleDataError(f"missing or malformed field {e}", code) from e
    except ValueError as e:
        raise LocaleDataError(str(e), code) from e

    language, territory, variant = _display_names(code)
    return LocaleData(
        code=code,
        number_info=number_info,
        currencies=currencies,
        language=language,
        territory=territory,
        variant=variant,
    )


def _build_currency_data(currency_code: str, raw: Mapping[str, Any]) -> CurrencyData:
    """Decode one currency entry.

    Minor digits come from CLDR supplemental fraction data unless the entry
    overrides them. Symbols default to the code.
    """
    minor_digits = raw.get("digits")
    if minor_digits is None:
        minor_digits = get_currency_precision(currency_code)

    symbol = raw.get("symbol", currency_code)
    return CurrencyData(
        minor_digits=int(minor_digits),
        display_code=currency_code,
        display_symbol=symbol,
        display_symbol_narrow=raw.get("symbol-alt-narrow", symbol),
    )


def _display_names(code: str) -> tuple[str, str, str]:
    """English language/territory/variant names, empty if CLDR has none."""
    try:
        babel_locale = Locale.parse(code)
    except (UnknownLocaleError, ValueError):
        return "", "", ""

    english = Locale("en")
    language = babel_locale.get_language_name(english) or ""
    territory = ""
    if babel_locale.territory:
        territory = babel_locale.get_territory_name(english) or ""
    variant = ""
    if babel_locale.variant:
        variant = english.variants.get(babel_locale.variant, babel_locale.variant)
    return language, territory, variant


# ============================================================================
# DEFAULT REGISTRY
# ============================================================================

_default_registry: LocaleRegistry | None = None
_default_registry_lock = threading.Lock()


def _load_default_registry() -> LocaleRegistry:
    text = (
        resources.files(DEFAULT_LOCALE_DATA_PACKAGE)
        .joinpath(DEFAULT_LOCALE_DATA_FILE)
        .read_text(encoding="utf-8")
    )
    registry = LocaleRegistry.from_mapping(_decode_document(text))
    logger.debug(
        "Loaded %d locales and %d aliases (CLDR %s)",
        len(registry),
        len(registry.aliases),
        registry.cldr_version or "unknown",
    )
    return registry


def get_default_registry() -> LocaleRegistry:
    """Return the process-wide registry built from the bundled CLDR data.

    Built on first call; later calls return the same instance.

    Thread Safety:
        Double-checked locking ensures the data is decoded exactly once.
    """
    global _default_registry  # noqa: PLW0603

    registry = _default_registry
    if registry is not None:
        return registry

    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = _load_default_registry()
        return _default_registry


def lookup_locale(locale_code: str) -> LocaleData | None:
    """Resolve a locale code against the default registry."""
    return get_default_registry().lookup(locale_code)
