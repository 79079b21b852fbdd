from __future__ import annotations

import pytest

import charwalk
from charwalk.enums import Charset, ErrorKind, ValidationStatus
from charwalk.validator import IncrementalValidator


def test_basic_lifecycle():
    validator = IncrementalValidator()
    validator.feed("héllo".encode())
    result = validator.close()
    assert result.status is ValidationStatus.VALID
    assert result.offset == 6
    assert validator.result == result


def test_result_before_close_reports_pending_bytes():
    validator = IncrementalValidator()
    validator.feed(b"ab\xe2\x82")
    assert validator.result.status is ValidationStatus.INCOMPLETE
    assert validator.result.offset == 2
    assert validator.done is False


def test_split_character_completes_on_next_feed():
    validator = IncrementalValidator()
    validator.feed(b"ab\xe2\x82")
    validator.feed(b"\xac!")
    result = validator.close()
    assert result.status is ValidationStatus.VALID
    assert result.offset == 6


def test_truncated_tail_is_incomplete_on_close():
    validator = IncrementalValidator()
    validator.feed(b"ab")
    validator.feed(b"\xf0\x9d")
    result = validator.close()
    assert result.status is ValidationStatus.INCOMPLETE
    assert result.offset == 2
    assert result.error is ErrorKind.TRUNCATED_SEQUENCE


def test_invalid_offset_counts_from_first_feed():
    validator = IncrementalValidator()
    validator.feed(b"abc")
    validator.feed(b"de\x80")
    assert validator.done is True
    result = validator.close()
    assert result.status is ValidationStatus.INVALID
    assert result.offset == 5
    assert result.error is ErrorKind.MALFORMED_LEAD


def test_feed_after_done_is_ignored():
    validator = IncrementalValidator("ascii")
    validator.feed(b"a\xff")
    validator.feed(b"more data")
    assert validator.close().offset == 1


def test_feed_after_close_raises():
    validator = IncrementalValidator()
    validator.feed(b"Hello")
    validator.close()
    with pytest.raises(ValueError):
        validator.feed(b"more data")


def test_close_is_idempotent():
    validator = IncrementalValidator()
    validator.feed(b"\xc3")
    assert validator.close() == validator.close()


def test_reset():
    validator = IncrementalValidator()
    validator.feed(b"\x80")
    validator.close()
    validator.reset()
    assert validator.done is False
    assert validator.result == charwalk.validate(b"")
    validator.feed(b"ok")
    assert validator.close().offset == 2


def test_no_input():
    result = IncrementalValidator().close()
    assert result.status is ValidationStatus.VALID
    assert result.offset == 0


def test_charset_by_name():
    validator = IncrementalValidator("printable ASCII")
    assert validator.charset is Charset.PRINTABLE_ASCII
    validator.feed(b"ab")
    validator.feed(b"\t")
    result = validator.close()
    assert result.status is ValidationStatus.INVALID
    assert result.offset == 2


def test_accepts_bytearray():
    validator = IncrementalValidator()
    validator.feed(bytearray("é".encode()))
    assert validator.close().is_valid


def test_strict_requires_utf8():
    with pytest.raises(ValueError, match="strict"):
        IncrementalValidator(Charset.RAW, strict=True)


def test_strict_sees_across_chunks():
    validator = IncrementalValidator(strict=True)
    validator.feed(b"x\xed")
    validator.feed(b"\xa0\x80")
    result = validator.close()
    assert result.status is ValidationStatus.INVALID
    assert result.offset == 1
    assert result.error is ErrorKind.SURROGATE


@pytest.mark.parametrize("charset", list(Charset))
def test_any_two_way_split_matches_one_shot(sample, charset):
    expected = charwalk.validate(sample, charset)
    for cut in range(len(sample) + 1):
        validator = IncrementalValidator(charset)
        validator.feed(sample[:cut])
        validator.feed(sample[cut:])
        assert validator.close() == expected, cut


def test_byte_at_a_time_matches_one_shot(sample):
    for strict in (False, True):
        validator = IncrementalValidator(strict=strict)
        for byte in sample:
            validator.feed(bytes([byte]))
        assert validator.close() == charwalk.validate(sample, strict=strict)


@pytest.mark.parametrize("charset", [c for c in Charset if not c.is_multibyte])
def test_strict_rejected_for_single_byte_charsets(charset):
    with pytest.raises(ValueError, match=charset.value):
        IncrementalValidator(charset, strict=True)
