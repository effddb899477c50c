"""Tests for locale/registry.py: lookup, document decoding, default registry.

Python 3.11+.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any

import pytest
from hypothesis import given

from cldrnum.diagnostics import DiagnosticCode, LocaleDataError
from cldrnum.locale import LocaleRegistry, get_default_registry, lookup_locale
from cldrnum.locale import registry as registry_module
from tests.helpers.locale_data import document, locale_entry, make_registry
from tests.strategies import locale_code_spellings


class TestLookup:
    """Separator normalization, aliases and Babel canonicalization."""

    @pytest.mark.parametrize(
        ("locale_code", "expected"),
        [
            ("en", "en"),
            ("en-US", "en"),
            ("en_US", "en"),
            ("fr-CA", "fr_CA"),
            ("fr_CA", "fr_CA"),
            ("ar-YE", "ar_YE"),
            ("ar-001", "ar"),
            ("EN-ca", "en_CA"),
        ],
    )
    def test_supported(self, registry: LocaleRegistry, locale_code: str, expected: str) -> None:
        locale_data = registry.lookup(locale_code)
        assert locale_data is not None
        assert locale_data.code == expected

    @pytest.mark.parametrize("locale_code", ["xx", "en-XX", "", "zh-TW", "!!"])
    def test_unsupported(self, registry: LocaleRegistry, locale_code: str) -> None:
        assert registry.lookup(locale_code) is None

    def test_no_fallback_to_parent(self, registry: LocaleRegistry) -> None:
        """en_AU is a real CLDR locale but not bundled; it does not fall back to en."""
        assert registry.lookup("en-AU") is None

    @given(spelling=locale_code_spellings())
    def test_spellings_resolve(self, spelling: tuple[str, str]) -> None:
        """PROPERTY: separator and case variants resolve to the same locale."""
        code, locale_id = spelling
        locale_data = get_default_registry().lookup(code)
        assert locale_data is not None
        assert locale_data.code == locale_id

    def test_contains(self, registry: LocaleRegistry) -> None:
        assert "fr-CA" in registry
        assert "xx" not in registry
        assert 42 not in registry

    def test_miss_logged_at_debug(
        self, registry: LocaleRegistry, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="cldrnum.locale.registry"):
            registry.lookup("xx")
        assert "Locale 'xx' not found in registry" in caplog.text

    def test_canonicalization_logged_at_debug(
        self, registry: LocaleRegistry, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="cldrnum.locale.registry"):
            registry.lookup("FR-ca")
        assert "Canonicalized locale 'FR-ca' to 'fr_CA'" in caplog.text


class TestDefaultRegistry:
    def test_singleton(self) -> None:
        assert get_default_registry() is get_default_registry()

    def test_bundled_locales(self, registry: LocaleRegistry) -> None:
        assert registry.locales == (
            "ar", "ar_YE", "bn", "de", "en", "en_CA", "en_GB", "fr", "fr_CA", "hi", "ja",
        )
        assert len(registry) == 11
        assert list(registry) == list(registry.locales)
        assert registry.cldr_version == "47.0.0"

    def test_aliases_read_only(self, registry: LocaleRegistry) -> None:
        assert registry.aliases["en_US"] == "en"
        with pytest.raises(TypeError):
            registry.aliases["xx"] = "en"  # type: ignore[index]

    def test_lookup_locale_shortcut(self) -> None:
        locale_data = lookup_locale("bn-BD")
        assert locale_data is not None
        assert locale_data.number_info.number_system == "beng"

    def test_concurrent_first_load(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Racing first calls build the registry once and share it."""
        monkeypatch.setattr(registry_module, "_default_registry", None)
        loads: list[int] = []
        original = registry_module._load_default_registry

        def counting_load() -> LocaleRegistry:
            loads.append(1)
            return original()

        monkeypatch.setattr(registry_module, "_load_default_registry", counting_load)

        results: list[LocaleRegistry] = []
        barrier = threading.Barrier(8)

        def worker() -> None:
            barrier.wait()
            results.append(get_default_registry())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(loads) == 1
        assert len(results) == 8
        assert all(result is results[0] for result in results)

    def test_load_logged_at_debug(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setattr(registry_module, "_default_registry", None)
        with caplog.at_level(logging.DEBUG, logger="cldrnum.locale.registry"):
            get_default_registry()
        assert "Loaded 11 locales and 7 aliases (CLDR 47.0.0)" in caplog.text


class TestLocaleRecords:
    """Decoded content of a few bundled locales."""

    def test_english(self, registry: LocaleRegistry) -> None:
        en = registry.lookup("en")
        assert en is not None
        assert en.name == "English"
        assert en.number_info.fractional_separator == "."
        assert en.number_info.grouping_separator == ","
        usd = en.get_currency("USD")
        assert usd is not None
        assert (usd.minor_digits, usd.display_symbol, usd.display_symbol_narrow) == (2, "$", "$")

    def test_currency_without_symbol_uses_code(self, registry: LocaleRegistry) -> None:
        en = registry.lookup("en")
        assert en is not None
        bhd = en.get_currency("BHD")
        assert bhd is not None
        assert bhd.minor_digits == 3
        assert bhd.display_symbol == "BHD"
        assert bhd.display_symbol_narrow == "BHD"

    def test_territory_name(self, registry: LocaleRegistry) -> None:
        fr_ca = registry.lookup("fr-CA")
        assert fr_ca is not None
        assert fr_ca.name == "French (Canada)"

    def test_indian_grouping(self, registry: LocaleRegistry) -> None:
        hi = registry.lookup("hi")
        assert hi is not None
        rule = hi.number_info.formats.standard_decimal
        assert (rule.primary_group_size, rule.secondary_group_size) == (3, 2)


class TestFromMapping:
    def test_minimal_document(self) -> None:
        registry = make_registry(xx=locale_entry())
        assert registry.locales == ("xx",)
        locale_data = registry.lookup("xx")
        assert locale_data is not None
        assert locale_data.name == "xx"

    def test_currency_digits_override(self) -> None:
        registry = make_registry(
            xx=locale_entry(currencies={"USD": {"symbol": "$", "digits": 4}})
        )
        locale_data = registry.lookup("xx")
        assert locale_data is not None
        usd = locale_data.get_currency("USD")
        assert usd is not None
        assert usd.minor_digits == 4

    def test_alias(self) -> None:
        registry = make_registry({"xx_YY": "xx"}, xx=locale_entry())
        locale_data = registry.lookup("xx-YY")
        assert locale_data is not None
        assert locale_data.code == "xx"

    def test_dangling_alias(self) -> None:
        with pytest.raises(LocaleDataError, match="alias target 'zz'"):
            make_registry({"xx_YY": "zz"}, xx=locale_entry())

    @pytest.mark.parametrize(
        "raw",
        [
            {},
            {"locales": []},
            {"locales": {}, "aliases": []},
        ],
    )
    def test_malformed_document(self, raw: dict[str, Any]) -> None:
        with pytest.raises(LocaleDataError) as exc_info:
            LocaleRegistry.from_mapping(raw)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_LOCALE_DATA

    @pytest.mark.parametrize("missing", ["symbols", "numberSystem", "currencyFormats"])
    def test_missing_field(self, missing: str) -> None:
        entry = locale_entry()
        del entry[missing]
        with pytest.raises(LocaleDataError) as exc_info:
            make_registry(xx=entry)
        assert exc_info.value.locale_code == "xx"
        assert "Invalid locale data for 'xx'" in str(exc_info.value)

    def test_wrong_digit_count(self) -> None:
        with pytest.raises(LocaleDataError, match="exactly 10 glyphs"):
            make_registry(xx=locale_entry(digits="012345678"))

    def test_bad_minor_digits(self) -> None:
        with pytest.raises(LocaleDataError, match="minor_digits"):
            make_registry(xx=locale_entry(currencies={"USD": {"digits": 21}}))


class TestFromJson:
    def test_round_trip_file(self, tmp_path: Path) -> None:
        path = tmp_path / "locales.json"
        path.write_text(json.dumps(document(xx=locale_entry())), encoding="utf-8")
        registry = LocaleRegistry.from_json(path)
        assert "xx" in registry
        assert registry.cldr_version == "test"

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(LocaleDataError, match="not valid JSON"):
            LocaleRegistry.from_json(path)

    def test_top_level_not_object(self, tmp_path: Path) -> None:
        path = tmp_path / "list.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(LocaleDataError, match="top-level value"):
            LocaleRegistry.from_json(str(path))

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            LocaleRegistry.from_json(tmp_path / "absent.json")


class TestRepr:
    def test_repr(self) -> None:
        registry = make_registry(xx=locale_entry())
        assert repr(registry) == "LocaleRegistry(locales=1, aliases=0, cldr_version='test')"
