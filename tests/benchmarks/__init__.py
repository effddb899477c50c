"""Performance benchmarks for cldrnum.

Benchmarks use pytest-benchmark to measure formatting hot paths and catch
performance regressions in digit grouping and currency composition.

Python 3.11+.
"""

from __future__ import annotations

__all__: list[str] = []
