"""Enumerations for charwalk."""

import enum


class Charset(enum.Enum):
    """The closed set of byte-string flavors charwalk understands.

    Each member's value is its display name.
    """

    RAW = "raw"
    ASCII = "ASCII"
    PRINTABLE_ASCII = "printable ASCII"
    UTF_8 = "UTF-8"

    @property
    def is_multibyte(self) -> bool:
        """Whether a character may span more than one byte."""
        return self is Charset.UTF_8


class ValidationStatus(enum.Enum):
    """Outcome of validating a byte sequence."""

    VALID = "valid"
    INVALID = "invalid"
    # The input ends part-way through a character; more bytes may fix it.
    INCOMPLETE = "incomplete"


class ErrorKind(enum.Enum):
    """Why a byte sequence failed validation or decoding."""

    MALFORMED_LEAD = "malformed-lead"
    BAD_CONTINUATION = "bad-continuation"
    TRUNCATED_SEQUENCE = "truncated-sequence"
    OUT_OF_RANGE_BYTE = "out-of-range-byte"
    # Strict UTF-8 only.
    OVERLONG = "overlong"
    SURROGATE = "surrogate"
    CODEPOINT_TOO_LARGE = "codepoint-too-large"
