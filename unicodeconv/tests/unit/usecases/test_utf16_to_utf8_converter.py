from __future__ import annotations

import pytest

from unicodeconv.adapters import TableCodec
from unicodeconv.domain.errors import (
    CodecErrorCode,
    ConversionDirection,
    ConversionError,
    LengthOverflowError,
)
from unicodeconv.domain.length import INT32_MAX
from unicodeconv.domain.ports import CodecOutcome
from unicodeconv.usecases import Utf16ToUtf8Converter

from unicodeconv.tests.unit.usecases.spies import CodecSpy, HugeSequence


def test_empty_input_returns_empty_bytes_without_delegating() -> None:
    spy = CodecSpy()
    uc = Utf16ToUtf8Converter(codec=spy)

    assert uc([]) == b""
    assert spy.calls == []


def test_empty_input_never_reaches_codec_that_rejects_zero_length() -> None:
    assert TableCodec().utf16_to_utf8([], 0, strict=True).error_code == (
        CodecErrorCode.INVALID_PARAMETER
    )
    assert Utf16ToUtf8Converter(codec=TableCodec())(()) == b""


def test_measure_then_transcode_with_same_length_and_strict_flag() -> None:
    spy = CodecSpy()
    uc = Utf16ToUtf8Converter(codec=spy)

    result = uc([0x41, 0x5B66])

    assert result == b"A\xe5\xad\xa6"
    assert isinstance(result, bytes)
    assert spy.calls == [
        ("utf16_to_utf8", 2, True, None),
        ("utf16_to_utf8", 2, True, 4),
    ]


def test_input_longer_than_int32_overflows_before_delegation() -> None:
    spy = CodecSpy()
    uc = Utf16ToUtf8Converter(codec=spy)

    with pytest.raises(LengthOverflowError) as excinfo:
        uc(HugeSequence(INT32_MAX + 1))

    assert excinfo.value.length == INT32_MAX + 1
    assert spy.calls == []


def test_configured_length_limit_applies() -> None:
    spy = CodecSpy()
    uc = Utf16ToUtf8Converter(codec=spy, length_limit=3)

    assert uc([0x41, 0x42, 0x43]) == b"ABC"
    with pytest.raises(LengthOverflowError):
        uc([0x41, 0x42, 0x43, 0x44])


def test_measurement_failure_carries_codec_diagnostic() -> None:
    uc = Utf16ToUtf8Converter(codec=TableCodec())

    with pytest.raises(ConversionError) as excinfo:
        uc([0xD800])

    err = excinfo.value
    assert err.direction is ConversionDirection.UTF16_TO_UTF8
    assert err.error_code == CodecErrorCode.NO_UNICODE_TRANSLATION
    assert "length" in err.message


def test_transcode_failure_has_distinct_message() -> None:
    spy = CodecSpy(transcode=CodecOutcome.failure(CodecErrorCode.INSUFFICIENT_BUFFER))
    uc = Utf16ToUtf8Converter(codec=spy)

    with pytest.raises(ConversionError) as excinfo:
        uc([0x41])

    err = excinfo.value
    assert err.error_code == CodecErrorCode.INSUFFICIENT_BUFFER
    assert err.message == "Can't convert from UTF-16 to UTF-8 string (codec transcode failed)."


def test_zero_length_measurement_is_an_error_not_empty_output() -> None:
    spy = CodecSpy(measure=CodecOutcome(units=0))
    uc = Utf16ToUtf8Converter(codec=spy)

    with pytest.raises(ConversionError) as excinfo:
        uc([0x41])

    assert excinfo.value.error_code == 0
    assert excinfo.value.message == (
        "Can't get result UTF-8 string length (codec measurement failed)."
    )
    assert len(spy.calls) == 1


def test_written_count_mismatch_is_reported() -> None:
    spy = CodecSpy(transcode=CodecOutcome(units=1))
    uc = Utf16ToUtf8Converter(codec=spy)

    with pytest.raises(ConversionError) as excinfo:
        uc([0x5B66])

    assert "wrote 1 units, expected 3" in excinfo.value.message


def test_input_is_not_mutated() -> None:
    units = [0xD83D, 0xDE00]
    Utf16ToUtf8Converter(codec=TableCodec())(units)
    assert units == [0xD83D, 0xDE00]
