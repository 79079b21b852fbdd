"""Per-charset validators and decoders, plus the types they share."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterator
from typing import NamedTuple

from charwalk.enums import ErrorKind, ValidationStatus

#: A decoded character: a codepoint or the character's bytes.
Value = int | bytes


@dataclasses.dataclass(frozen=True, slots=True)
class ValidationResult:
    """The outcome of validating a byte sequence.

    *offset* is the exclusive end of the longest prefix made of complete,
    valid characters: on success it is the end of the checked range, on
    failure it is the index where the offending character starts.
    """

    status: ValidationStatus
    offset: int
    error: ErrorKind | None = None

    @property
    def is_valid(self) -> bool:
        return self.status is ValidationStatus.VALID

    def to_dict(self) -> dict[str, str | int | None]:
        """Convert this result to a plain dict.

        :returns: A dict with ``'status'``, ``'offset'``, and ``'error'`` keys.
        """
        return {
            "status": self.status.value,
            "offset": self.offset,
            "error": self.error.value if self.error is not None else None,
        }


def valid(offset: int) -> ValidationResult:
    return ValidationResult(ValidationStatus.VALID, offset)


def invalid(offset: int, error: ErrorKind) -> ValidationResult:
    return ValidationResult(ValidationStatus.INVALID, offset, error)


def incomplete(offset: int) -> ValidationResult:
    return ValidationResult(
        ValidationStatus.INCOMPLETE, offset, ErrorKind.TRUNCATED_SEQUENCE
    )


class Span(NamedTuple):
    """Byte range of one character; *end* is inclusive."""

    start: int
    end: int

    @property
    def stop(self) -> int:
        """Exclusive end, suitable for slicing."""
        return self.end + 1


class PositionStep(NamedTuple):
    """Result of a position-style step: the value and where the next one starts."""

    value: Value
    next_index: int


class ContinuationStep(NamedTuple):
    """Result of a continuation-style step.

    Field order follows the ``for end, start, value in ...`` idiom.
    """

    end: int
    start: int
    value: Value


class DecodeError(ValueError):
    """Raised when a decode step is handed bytes that are not a valid character.

    Decoding is only defined over validated input; this is raised instead of
    returning a corrupt value.
    """

    def __init__(
        self, msg: str, kind: ErrorKind, position: int | None = None
    ) -> None:
        super().__init__(msg)
        self.kind = kind
        self.position = position


ContinuationStepper = Callable[[bytes, int | None], ContinuationStep | None]


def split_with(step: ContinuationStepper, data: bytes) -> list[Value]:
    """Collect every value *step* produces when walked from the start of *data*."""
    values: list[Value] = []
    end = None
    while (found := step(data, end)) is not None:
        end, _, value = found
        values.append(value)
    return values


def spans_with(step: ContinuationStepper, data: bytes) -> Iterator[Span]:
    """Yield the :class:`Span` of each character *step* visits in *data*."""
    end = None
    while (found := step(data, end)) is not None:
        end, start, _ = found
        yield Span(start, end)
