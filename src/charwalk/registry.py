"""Charset registry: maps each :class:`Charset` to its operation set."""

from __future__ import annotations

import dataclasses
import logging
import types
from collections.abc import Callable, Iterator, Mapping

from charwalk.charsets import ContinuationStep, PositionStep, Span, ValidationResult
from charwalk.charsets.single_byte import (
    byte_get_char,
    byte_get_int,
    byte_iter_spans,
    byte_next_char,
    byte_next_int,
    byte_split_char,
    byte_split_int,
    validate_ascii,
    validate_printable_ascii,
    validate_raw,
)
from charwalk.charsets.utf8 import (
    utf8_get_char,
    utf8_get_int,
    utf8_iter_spans,
    utf8_next_char,
    utf8_next_int,
    utf8_split_char,
    utf8_split_int,
    validate_utf8,
)
from charwalk.enums import Charset

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class CharsetOps:
    """The operations available for one charset.

    Only :attr:`validate` checks its input; the other operations assume the
    bytes they are given are valid for :attr:`charset`.
    """

    charset: Charset
    validate: Callable[[bytes, int, int | None], ValidationResult]
    split_char: Callable[[bytes], list[bytes]]
    split_int: Callable[[bytes], list[int]]
    next_char: Callable[[bytes, int | None], ContinuationStep | None]
    next_int: Callable[[bytes, int | None], ContinuationStep | None]
    get_char: Callable[[bytes, int], PositionStep | None]
    get_int: Callable[[bytes, int], PositionStep | None]
    iter_spans: Callable[[bytes], Iterator[Span]]

    @property
    def name(self) -> str:
        return self.charset.value


def _single_byte(
    charset: Charset, validate: Callable[[bytes, int, int | None], ValidationResult]
) -> CharsetOps:
    return CharsetOps(
        charset=charset,
        validate=validate,
        split_char=byte_split_char,
        split_int=byte_split_int,
        next_char=byte_next_char,
        next_int=byte_next_int,
        get_char=byte_get_char,
        get_int=byte_get_int,
        iter_spans=byte_iter_spans,
    )


REGISTRY: Mapping[Charset, CharsetOps] = types.MappingProxyType(
    {
        Charset.RAW: _single_byte(Charset.RAW, validate_raw),
        Charset.ASCII: _single_byte(Charset.ASCII, validate_ascii),
        Charset.PRINTABLE_ASCII: _single_byte(
            Charset.PRINTABLE_ASCII, validate_printable_ascii
        ),
        Charset.UTF_8: CharsetOps(
            charset=Charset.UTF_8,
            validate=validate_utf8,
            split_char=utf8_split_char,
            split_int=utf8_split_int,
            next_char=utf8_next_char,
            next_int=utf8_next_int,
            get_char=utf8_get_char,
            get_int=utf8_get_int,
            iter_spans=utf8_iter_spans,
        ),
    }
)


def _normalize_name(name: str) -> str:
    return name.strip().lower().replace("_", "").replace("-", "").replace(" ", "")


_ALIASES: dict[str, Charset] = {
    _normalize_name(alias): charset
    for charset, aliases in (
        (Charset.RAW, ("raw", "binary", "bytes")),
        (Charset.ASCII, ("ascii", "us-ascii")),
        (Charset.PRINTABLE_ASCII, ("printable ascii", "printable")),
        (Charset.UTF_8, ("utf-8", "utf8")),
    )
    for alias in aliases
}


def lookup_charset(name: str | Charset) -> Charset:
    """Resolve a charset name or alias to a :class:`Charset` member.

    :raises LookupError: If *name* is not a known charset.
    """
    if isinstance(name, Charset):
        return name
    charset = _ALIASES.get(_normalize_name(name))
    if charset is None:
        msg = f"unknown charset: {name}"
        raise LookupError(msg)
    return charset


def get_charset(name: str | Charset) -> CharsetOps:
    """Return the operation set for a charset given by member or name.

    Names are matched case-insensitively, ignoring ``-``, ``_`` and spaces,
    so ``"UTF-8"``, ``"utf8"`` and ``"printable_ASCII"`` all resolve.

    :raises LookupError: If *name* is not a known charset.
    """
    charset = lookup_charset(name)
    logger.debug("resolved charset %r to %s", name, charset.name)
    return REGISTRY[charset]
