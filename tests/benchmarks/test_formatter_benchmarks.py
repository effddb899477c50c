"""Performance benchmarks for the decimal and money formatters.

Measures steady-state formatting on a bound formatter against the one-shot
helpers, which pay for a registry lookup on every call.

Python 3.11+.
"""

from __future__ import annotations

from typing import Any

import pytest

from cldrnum import DecimalFormatter, MoneyFormatter, format_money
from cldrnum.enums import CurrencyDisplay, CurrencyStyle


class TestFormatterBenchmarks:
    """Benchmark formatting hot paths."""

    @pytest.fixture
    def decimal_en(self) -> DecimalFormatter:
        formatter = DecimalFormatter("en")
        formatter.set_scale_or_raise(2)
        return formatter

    @pytest.fixture
    def money_bn(self) -> MoneyFormatter:
        return MoneyFormatter(
            "bn",
            currency_style=CurrencyStyle.ACCOUNTING,
            currency_display=CurrencyDisplay.SYMBOL,
        )

    def test_decimal_latin(self, benchmark: Any, decimal_en: DecimalFormatter) -> None:
        """Benchmark grouped decimal formatting with ASCII digits."""
        result, errors = benchmark(decimal_en.format, 1234567890, 5)

        assert result == "1,234,567,890.05"
        assert errors == ()

    def test_money_digit_substitution(self, benchmark: Any, money_bn: MoneyFormatter) -> None:
        """Benchmark accounting money formatting with Bengali digits."""
        result, errors = benchmark(money_bn.format, 100000, 1, "USD")

        assert result == "১,০০,০০০.০১\xa0US$"
        assert errors == ()

    def test_one_shot_money(self, benchmark: Any) -> None:
        """Benchmark the one-shot helper including locale resolution."""
        result, errors = benchmark(format_money, 1, 1, "USD", "en")

        assert result == "USD\xa01.01"
        assert errors == ()
