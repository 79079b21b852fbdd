"""Internal shared utilities for charwalk."""

from __future__ import annotations

from charwalk.enums import Charset

#: Charset assumed when the caller does not name one.
DEFAULT_CHARSET: Charset = Charset.UTF_8

#: Bytes read per chunk when streaming files through the validator.
DEFAULT_CHUNK_SIZE: int = 65_536


def _resolve_bounds(data: bytes, start: int, end: int | None) -> tuple[int, int]:
    """Return concrete ``(start, end)`` bounds for a half-open range of *data*.

    :raises ValueError: If the bounds are not integers or fall outside *data*.
    """
    length = len(data)
    if end is None:
        end = length
    for bound in (start, end):
        if isinstance(bound, bool) or not isinstance(bound, int):
            msg = f"bounds must be integers, got {bound!r}"
            raise ValueError(msg)
    if not 0 <= start <= end <= length:
        msg = f"invalid range [{start}:{end}] for {length} bytes"
        raise ValueError(msg)
    return start, end


def _validate_index(index: int) -> None:
    """Raise ValueError if *index* is not a non-negative integer."""
    if isinstance(index, bool) or not isinstance(index, int) or index < 0:
        msg = f"index must be a non-negative integer, got {index!r}"
        raise ValueError(msg)


def _start_after(previous_end: int | None) -> int:
    """Return where the character following *previous_end* begins."""
    if previous_end is None:
        return 0
    _validate_index(previous_end)
    return previous_end + 1


def _as_bytes(byte_str: bytes | bytearray | memoryview) -> bytes:
    """Return *byte_str* as an immutable ``bytes`` object."""
    return byte_str if isinstance(byte_str, bytes) else bytes(byte_str)
