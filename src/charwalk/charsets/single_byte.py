"""Raw bytes, ASCII and printable ASCII: one byte per character.

The three charsets share their decoders and differ only in validation.
Every byte is a character boundary, so the decode steps cannot fail; an
out-of-range byte handed to an ASCII decoder comes back unchanged.
"""

from __future__ import annotations

from collections.abc import Iterator

from charwalk._utils import _resolve_bounds, _start_after, _validate_index
from charwalk.charsets import (
    ContinuationStep,
    PositionStep,
    Span,
    ValidationResult,
    invalid,
    valid,
)
from charwalk.enums import ErrorKind

_ASCII: bytes = bytes(range(0x80))

# Printable here means 0x20-0x7F inclusive; DEL is accepted.
_PRINTABLE_ASCII: bytes = bytes(range(0x20, 0x80))


def _first_outside(
    data: bytes, start: int, end: int, allowed: bytes
) -> ValidationResult:
    # A whole-sequence check deletes the allowed bytes in one C-level pass
    # and only walks the bytes when something remains. A sub-range is walked
    # in place so the range is never sliced out of *data*.
    if start == 0 and end == len(data) and not data.translate(None, allowed):
        return valid(end)
    accepted = frozenset(allowed)
    for i in range(start, end):
        if data[i] not in accepted:
            return invalid(i, ErrorKind.OUT_OF_RANGE_BYTE)
    return valid(end)


def validate_raw(
    data: bytes, start: int = 0, end: int | None = None
) -> ValidationResult:
    """Accept any byte sequence."""
    start, end = _resolve_bounds(data, start, end)
    return valid(end)


def validate_ascii(
    data: bytes, start: int = 0, end: int | None = None
) -> ValidationResult:
    """Check that every byte of ``data[start:end]`` is at most 0x7F.

    :returns: ``VALID`` with ``offset == end``, or ``INVALID`` with the index
        of the first byte above 0x7F.
    """
    start, end = _resolve_bounds(data, start, end)
    return _first_outside(data, start, end, _ASCII)


def validate_printable_ascii(
    data: bytes, start: int = 0, end: int | None = None
) -> ValidationResult:
    """Check that every byte of ``data[start:end]`` lies in 0x20-0x7F.

    Control characters, tab and newline included, are rejected.
    """
    start, end = _resolve_bounds(data, start, end)
    return _first_outside(data, start, end, _PRINTABLE_ASCII)


def byte_get_int(data: bytes, index: int) -> PositionStep | None:
    _validate_index(index)
    if index >= len(data):
        return None
    return PositionStep(data[index], index + 1)


def byte_get_char(data: bytes, index: int) -> PositionStep | None:
    _validate_index(index)
    if index >= len(data):
        return None
    return PositionStep(data[index : index + 1], index + 1)


def byte_next_int(
    data: bytes, previous_end: int | None = None
) -> ContinuationStep | None:
    i = _start_after(previous_end)
    if i >= len(data):
        return None
    return ContinuationStep(i, i, data[i])


def byte_next_char(
    data: bytes, previous_end: int | None = None
) -> ContinuationStep | None:
    i = _start_after(previous_end)
    if i >= len(data):
        return None
    return ContinuationStep(i, i, data[i : i + 1])


def byte_split_int(data: bytes) -> list[int]:
    # Same result as walking byte_next_int to exhaustion.
    return list(data)


def byte_split_char(data: bytes) -> list[bytes]:
    return [data[i : i + 1] for i in range(len(data))]


def byte_iter_spans(data: bytes) -> Iterator[Span]:
    return (Span(i, i) for i in range(len(data)))
