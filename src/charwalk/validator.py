"""IncrementalValidator: streaming validation."""

from __future__ import annotations

import functools
import logging

from charwalk._utils import DEFAULT_CHARSET, _as_bytes
from charwalk.charsets import ValidationResult, incomplete, valid
from charwalk.charsets.utf8 import validate_utf8
from charwalk.enums import Charset, ValidationStatus
from charwalk.registry import get_charset

logger = logging.getLogger(__name__)


class IncrementalValidator:
    """Streaming validator for data that arrives in chunks.

    Implements a feed/close pattern.  A character cut off at the end of a
    chunk is held back until the next :meth:`feed`, so the outcome never
    depends on where the chunks were split.  Offsets in :attr:`result` count
    from the first byte ever fed.
    """

    def __init__(
        self, charset: str | Charset = DEFAULT_CHARSET, *, strict: bool = False
    ) -> None:
        """Initialize the validator.

        :param charset: The charset to validate against, as a
            :class:`Charset` member or a name accepted by
            :func:`~charwalk.registry.get_charset`.
        :param strict: Apply RFC 3629 restrictions (UTF-8 only).
        :raises ValueError: If *strict* is requested for a charset other than
            UTF-8.
        """
        ops = get_charset(charset)
        if strict and not ops.charset.is_multibyte:
            msg = f"strict validation only applies to UTF-8, not {ops.name}"
            raise ValueError(msg)
        self._charset = ops.charset
        if strict:
            self._validate = functools.partial(validate_utf8, strict=True)
        else:
            self._validate = ops.validate
        self._pending = b""
        self._consumed = 0
        self._done = False
        self._closed = False
        self._result: ValidationResult | None = None

    def feed(self, byte_str: bytes | bytearray | memoryview) -> None:
        """Validate the next chunk of bytes.

        Once an invalid byte has been seen the validator is :attr:`done` and
        further chunks are ignored.

        :param byte_str: The next chunk of bytes to examine.
        :raises ValueError: If called after :meth:`close` without a
            :meth:`reset`.
        """
        if self._closed:
            msg = "feed() called after close() without reset()"
            raise ValueError(msg)
        if self._done:
            return

        data = self._pending + _as_bytes(byte_str)
        checked = self._validate(data, 0, None)
        if checked.status is ValidationStatus.VALID:
            self._consumed += len(data)
            self._pending = b""
        elif checked.status is ValidationStatus.INCOMPLETE:
            self._consumed += checked.offset
            self._pending = data[checked.offset :]
        else:
            self._result = ValidationResult(
                checked.status, self._consumed + checked.offset, checked.error
            )
            self._pending = b""
            self._done = True
            logger.debug(
                "%s: %s at byte %d",
                self._charset.value,
                checked.error.value if checked.error else "invalid",
                self._result.offset,
            )

    def close(self) -> ValidationResult:
        """Finalize validation and return the result.

        Bytes still held back at this point belong to a truncated character
        and make the result ``INCOMPLETE``.
        """
        if not self._closed:
            self._closed = True
            if self._result is None:
                self._result = self._current()
            self._done = True
            logger.debug(
                "%s: closed after %d bytes, %s",
                self._charset.value,
                self._consumed + len(self._pending),
                self._result.status.value,
            )
        return self.result

    def reset(self) -> None:
        """Reset the validator to its initial state for reuse."""
        self._pending = b""
        self._consumed = 0
        self._done = False
        self._closed = False
        self._result = None

    def _current(self) -> ValidationResult:
        if self._pending:
            return incomplete(self._consumed)
        return valid(self._consumed)

    @property
    def charset(self) -> Charset:
        return self._charset

    @property
    def done(self) -> bool:
        """Whether the outcome is settled and no more data is needed."""
        return self._done

    @property
    def result(self) -> ValidationResult:
        """The result for everything fed so far."""
        if self._result is not None:
            return self._result
        return self._current()
