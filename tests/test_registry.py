# tests/test_registry.py
from __future__ import annotations

import pytest

from charwalk.charsets.utf8 import validate_utf8
from charwalk.enums import Charset
from charwalk.registry import REGISTRY, CharsetOps, get_charset, lookup_charset


def test_registry_covers_every_charset():
    assert set(REGISTRY) == set(Charset)


def test_registry_entries_match_their_keys():
    for charset, ops in REGISTRY.items():
        assert isinstance(ops, CharsetOps)
        assert ops.charset is charset


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        REGISTRY[Charset.RAW] = REGISTRY[Charset.ASCII]  # type: ignore[index]


def test_charset_ops_is_frozen():
    ops = REGISTRY[Charset.UTF_8]
    with pytest.raises(AttributeError):
        ops.validate = None  # type: ignore[misc]


def test_charset_ops_name():
    assert REGISTRY[Charset.PRINTABLE_ASCII].name == "printable ASCII"


def test_single_byte_charsets_share_decoders():
    raw = REGISTRY[Charset.RAW]
    for charset in (Charset.ASCII, Charset.PRINTABLE_ASCII):
        ops = REGISTRY[charset]
        assert ops.get_int is raw.get_int
        assert ops.next_char is raw.next_char
        assert ops.validate is not raw.validate


def test_utf8_entry_uses_utf8_validator():
    assert REGISTRY[Charset.UTF_8].validate is validate_utf8


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("UTF-8", Charset.UTF_8),
        ("utf8", Charset.UTF_8),
        ("utf_8", Charset.UTF_8),
        (" Utf-8 ", Charset.UTF_8),
        ("ASCII", Charset.ASCII),
        ("us-ascii", Charset.ASCII),
        ("printable ASCII", Charset.PRINTABLE_ASCII),
        ("printable_ascii", Charset.PRINTABLE_ASCII),
        ("printable", Charset.PRINTABLE_ASCII),
        ("raw", Charset.RAW),
        ("binary", Charset.RAW),
        (Charset.ASCII, Charset.ASCII),
    ],
)
def test_get_charset_by_name(name, expected):
    assert lookup_charset(name) is expected
    assert get_charset(name) is REGISTRY[expected]


@pytest.mark.parametrize("name", ["latin-1", "utf-16", ""])
def test_unknown_charset_raises_lookup_error(name):
    with pytest.raises(LookupError, match="unknown charset"):
        get_charset(name)
