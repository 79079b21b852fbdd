"""Validate and walk byte strings as raw bytes, ASCII, printable ASCII or UTF-8."""

from __future__ import annotations

from collections.abc import Iterator

from charwalk._utils import DEFAULT_CHARSET, _as_bytes
from charwalk.charsets import DecodeError, Span, ValidationResult
from charwalk.charsets.utf8 import validate_utf8
from charwalk.enums import Charset, ErrorKind, ValidationStatus
from charwalk.registry import REGISTRY, CharsetOps, get_charset
from charwalk.validator import IncrementalValidator

__version__ = "1.0.0"
__all__ = [
    "REGISTRY",
    "Charset",
    "CharsetOps",
    "DecodeError",
    "ErrorKind",
    "IncrementalValidator",
    "Span",
    "ValidationResult",
    "ValidationStatus",
    "get_charset",
    "iter_spans",
    "split_char",
    "split_int",
    "validate",
]


def validate(
    byte_str: bytes | bytearray | memoryview,
    charset: str | Charset = DEFAULT_CHARSET,
    start: int = 0,
    end: int | None = None,
    *,
    strict: bool = False,
) -> ValidationResult:
    """Validate a byte string against a charset.

    Only ``byte_str[start:end]`` is examined; offsets in the result are
    indices into the whole of *byte_str*.

    :param strict: Reject overlong forms, surrogates and codepoints above
        U+10FFFF.  Only meaningful for UTF-8.
    :raises ValueError: If the bounds are out of range, or *strict* is used
        with a charset other than UTF-8.
    :raises LookupError: If *charset* is not a known charset name.
    """
    ops = get_charset(charset)
    data = _as_bytes(byte_str)
    if strict:
        if not ops.charset.is_multibyte:
            msg = f"strict validation only applies to UTF-8, not {ops.name}"
            raise ValueError(msg)
        return validate_utf8(data, start, end, strict=True)
    return ops.validate(data, start, end)


def split_int(
    byte_str: bytes | bytearray | memoryview, charset: str | Charset = DEFAULT_CHARSET
) -> list[int]:
    """Return the codepoint of every character; *byte_str* must be valid."""
    return get_charset(charset).split_int(_as_bytes(byte_str))


def split_char(
    byte_str: bytes | bytearray | memoryview, charset: str | Charset = DEFAULT_CHARSET
) -> list[bytes]:
    """Return every character as a ``bytes`` slice; *byte_str* must be valid."""
    return get_charset(charset).split_char(_as_bytes(byte_str))


def iter_spans(
    byte_str: bytes | bytearray | memoryview, charset: str | Charset = DEFAULT_CHARSET
) -> Iterator[Span]:
    """Yield the :class:`Span` of every character; *byte_str* must be valid."""
    return get_charset(charset).iter_spans(_as_bytes(byte_str))
