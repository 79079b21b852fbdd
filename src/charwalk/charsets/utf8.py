"""UTF-8 character boundaries, validation and decoding.

Lead bytes are read with the historical extended table, which allows
sequences of up to six bytes (lead bytes up to 0xFD) and codepoints up to
0x7FFFFFFF.  :func:`validate_utf8` with ``strict=True`` narrows this to
RFC 3629 UTF-8.
"""

from __future__ import annotations

from collections.abc import Iterator

from charwalk._utils import _resolve_bounds, _start_after, _validate_index
from charwalk.charsets import (
    ContinuationStep,
    DecodeError,
    PositionStep,
    Span,
    ValidationResult,
    incomplete,
    invalid,
    spans_with,
    split_with,
    valid,
)
from charwalk.enums import ErrorKind

# Second-byte limits for lead bytes whose followers are restricted in strict
# mode: lead -> (lowest, highest, error if outside).
_STRICT_SECOND_BYTE: dict[int, tuple[int, int, ErrorKind]] = {
    0xE0: (0xA0, 0xBF, ErrorKind.OVERLONG),
    0xED: (0x80, 0x9F, ErrorKind.SURROGATE),
    0xF0: (0x90, 0xBF, ErrorKind.OVERLONG),
    0xF4: (0x80, 0x8F, ErrorKind.CODEPOINT_TOO_LARGE),
}


def utf8_lead(byte: int) -> tuple[int, int]:
    """Classify a lead byte.

    :param byte: The byte value found where a character should start.
    :returns: ``(continuation_count, value)``: how many continuation bytes
        follow, and the lead byte's payload bits.
    :raises DecodeError: If *byte* cannot start a character.
    """
    if byte < 0x80:
        return 0, byte
    if byte < 0xC0:
        msg = "byte values 0x80-0xBF cannot start a character"
        raise DecodeError(msg, ErrorKind.MALFORMED_LEAD)
    if byte < 0xE0:
        return 1, byte - 0xC0
    if byte < 0xF0:
        return 2, byte - 0xE0
    if byte < 0xF8:
        return 3, byte - 0xF0
    if byte < 0xFC:
        return 4, byte - 0xF8
    if byte < 0xFE:
        return 5, byte - 0xFC
    msg = "byte values 0xFE-0xFF cannot start a character"
    raise DecodeError(msg, ErrorKind.MALFORMED_LEAD)


def _strict_lead_error(byte: int) -> ErrorKind | None:
    # 0xC0-0xC1 can only encode ASCII in two bytes; 0xF5 and up encode
    # codepoints beyond U+10FFFF.
    if byte in (0xC0, 0xC1):
        return ErrorKind.OVERLONG
    if byte >= 0xF5:
        return ErrorKind.CODEPOINT_TOO_LARGE
    return None


def validate_utf8(
    data: bytes, start: int = 0, end: int | None = None, *, strict: bool = False
) -> ValidationResult:
    """Check that ``data[start:end]`` is well-formed UTF-8.

    :param data: The raw bytes to examine.
    :param start: Index of the first byte to check.
    :param end: Exclusive end of the range; defaults to ``len(data)``.
    :param strict: Reject overlong forms, surrogates and codepoints above
        U+10FFFF, which the extended lead byte table otherwise lets through.
    :returns: ``VALID`` with ``offset == end``; ``INVALID`` with the index
        where the bad character starts; or ``INCOMPLETE`` with the index where
        the truncated final character starts.
    """
    start, end = _resolve_bounds(data, start, end)
    i = start
    while i < end:
        byte = data[i]
        if byte < 0x80:
            i += 1
            continue

        try:
            count, _ = utf8_lead(byte)
        except DecodeError as e:
            return invalid(i, e.kind)
        if strict:
            error = _strict_lead_error(byte)
            if error is not None:
                return invalid(i, error)

        stop = i + count + 1
        for j in range(i + 1, min(stop, end)):
            if not 0x80 <= data[j] <= 0xBF:
                return invalid(i, ErrorKind.BAD_CONTINUATION)

        if strict and byte in _STRICT_SECOND_BYTE and i + 1 < end:
            lowest, highest, error = _STRICT_SECOND_BYTE[byte]
            if not lowest <= data[i + 1] <= highest:
                return invalid(i, error)

        if stop > end:
            return incomplete(i)
        i = stop

    return valid(end)


def _decode(data: bytes, index: int) -> tuple[int, int]:
    """Decode the character starting at *index*; return ``(codepoint, stop)``."""
    try:
        count, value = utf8_lead(data[index])
    except DecodeError as e:
        raise DecodeError(f"{e} (byte {index})", e.kind, index) from None

    stop = index + count + 1
    if stop > len(data):
        msg = f"truncated {count + 1}-byte sequence at byte {index}"
        raise DecodeError(msg, ErrorKind.TRUNCATED_SEQUENCE, index)

    for j in range(index + 1, stop):
        byte = data[j]
        if not 0x80 <= byte <= 0xBF:
            msg = f"expected a continuation byte at {j}, got 0x{byte:02X}"
            raise DecodeError(msg, ErrorKind.BAD_CONTINUATION, j)
        value = value * 64 + (byte - 0x80)
    return value, stop


def utf8_get_int(data: bytes, index: int) -> PositionStep | None:
    """Decode the codepoint starting at *index*.

    Example: ``utf8_get_int("©j∆".encode(), 0)`` returns ``(169, 2)``, since
    ``©`` is two bytes wide.

    :returns: ``(codepoint, next_index)``, or ``None`` past the end of *data*.
    :raises DecodeError: If the bytes at *index* are not a valid character.
    """
    _validate_index(index)
    if index >= len(data):
        return None
    value, stop = _decode(data, index)
    return PositionStep(value, stop)


def utf8_get_char(data: bytes, index: int) -> PositionStep | None:
    """Like :func:`utf8_get_int`, but returns the character's bytes."""
    _validate_index(index)
    if index >= len(data):
        return None
    _, stop = _decode(data, index)
    return PositionStep(data[index:stop], stop)


def utf8_next_int(
    data: bytes, previous_end: int | None = None
) -> ContinuationStep | None:
    """Decode the codepoint following the character that ended at *previous_end*.

    Pass ``None`` to start at the beginning, then feed each returned ``end``
    back in::

        step = utf8_next_int(data)
        while step is not None:
            end, start, codepoint = step
            step = utf8_next_int(data, end)

    :returns: ``(end, start, codepoint)`` with *end* inclusive, or ``None``
        once *data* is exhausted.
    """
    start = _start_after(previous_end)
    if start >= len(data):
        return None
    value, stop = _decode(data, start)
    return ContinuationStep(stop - 1, start, value)


def utf8_next_char(
    data: bytes, previous_end: int | None = None
) -> ContinuationStep | None:
    """Like :func:`utf8_next_int`, but returns the character's bytes."""
    start = _start_after(previous_end)
    if start >= len(data):
        return None
    _, stop = _decode(data, start)
    return ContinuationStep(stop - 1, start, data[start:stop])


def utf8_split_int(data: bytes) -> list[int]:
    """Return the codepoint of every character in *data*."""
    return split_with(utf8_next_int, data)


def utf8_split_char(data: bytes) -> list[bytes]:
    """Return every character in *data* as a ``bytes`` slice.

    ``utf8_split_char("©h∆".encode())`` gives ``[b"\\xc2\\xa9", b"h", b"\\xe2\\x88\\x86"]``.
    """
    return split_with(utf8_next_char, data)


def utf8_iter_spans(data: bytes) -> Iterator[Span]:
    """Yield the span of every character in *data*."""
    return spans_with(utf8_next_char, data)
