# tests/test_benchmark.py
"""Performance regression tests. Run with: ``pytest -m benchmark``."""

import time

import pytest

import charwalk

pytestmark = pytest.mark.benchmark


def test_ascii_validation_speed():
    data = b"Hello world, this is a plain ASCII text." * 100
    start = time.perf_counter()
    for _ in range(1000):
        charwalk.validate(data, "ascii")
    elapsed = time.perf_counter() - start
    per_call_ms = (elapsed / 1000) * 1000
    assert per_call_ms < 1.0, f"ASCII validation too slow: {per_call_ms:.2f}ms"


def test_utf8_validation_speed():
    data = "Héllo wörld café résumé naïve".encode() * 100
    start = time.perf_counter()
    for _ in range(100):
        charwalk.validate(data)
    elapsed = time.perf_counter() - start
    per_call_ms = (elapsed / 100) * 1000
    assert per_call_ms < 5.0, f"UTF-8 validation too slow: {per_call_ms:.2f}ms"


def test_utf8_split_speed():
    data = "Héllo wörld café résumé naïve".encode() * 100
    start = time.perf_counter()
    for _ in range(100):
        charwalk.split_int(data)
    elapsed = time.perf_counter() - start
    per_call_ms = (elapsed / 100) * 1000
    assert per_call_ms < 20.0, f"UTF-8 split too slow: {per_call_ms:.2f}ms"
