"""Shared test fixtures."""

from __future__ import annotations

import pytest

from charwalk import Charset, validate

# Characters of 1, 2, 3 and 4 bytes in UTF-8.
_MIXED_TEXT = "aé€𝍈"

# Inputs of every shape the validators can see, valid or not.
SAMPLES: list[bytes] = [
    b"",
    b"Hello, world!",
    b"a\tb\r\n",
    b"\x00\x1f\x7f",
    bytes(range(256)),
    _MIXED_TEXT.encode(),
    "˙†ƒ˙©√".encode(),
    "日本語のテキスト".encode(),
    b"caf\xe9",
    b"\x80abc",
    b"ab\xe2\x82",
    b"a\xc3A",
    b"\xc0\xaf",
    b"\xed\xa0\x80",
    b"\xf8\x88\x80\x80\x80",
    b"\xfc\x84\x80\x80\x80\x80",
    b"\xfe\xff",
]


@pytest.fixture
def mixed_text() -> str:
    """Text whose characters are 1, 2, 3 and 4 bytes long in UTF-8."""
    return _MIXED_TEXT


@pytest.fixture(params=SAMPLES, ids=repr)
def sample(request: pytest.FixtureRequest) -> bytes:
    return request.param


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    """Parametrize ``charset``/``valid_data`` with every sample each charset accepts."""
    if {"charset", "valid_data"} <= set(metafunc.fixturenames):
        cases = [
            (charset, data)
            for charset in Charset
            for data in SAMPLES
            if validate(data, charset).is_valid
        ]
        ids = [f"{charset.name}-{data!r}" for charset, data in cases]
        metafunc.parametrize(("charset", "valid_data"), cases, ids=ids)
