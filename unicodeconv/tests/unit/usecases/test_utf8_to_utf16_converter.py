from __future__ import annotations

from array import array

import pytest

from unicodeconv.adapters import BuiltinCodec, TableCodec
from unicodeconv.domain.errors import (
    CodecErrorCode,
    ConversionDirection,
    ConversionError,
    LengthOverflowError,
)
from unicodeconv.domain.length import INT32_MAX
from unicodeconv.domain.ports import CodecOutcome
from unicodeconv.usecases import Utf8ToUtf16Converter

from unicodeconv.tests.unit.usecases.spies import CodecSpy, HugeSequence


def test_empty_input_returns_empty_array_without_delegating() -> None:
    spy = CodecSpy()
    result = Utf8ToUtf16Converter(codec=spy)(b"")

    assert result == array("H")
    assert spy.calls == []


def test_result_is_exactly_sized_array() -> None:
    spy = CodecSpy()
    result = Utf8ToUtf16Converter(codec=spy)(b"\xf0\x9f\x98\x80!")

    assert result == array("H", [0xD83D, 0xDE00, 0x21])
    assert spy.calls == [
        ("utf8_to_utf16", 5, True, None),
        ("utf8_to_utf16", 5, True, 3),
    ]


def test_input_longer_than_int32_overflows_before_delegation() -> None:
    spy = CodecSpy()

    with pytest.raises(LengthOverflowError):
        Utf8ToUtf16Converter(codec=spy)(HugeSequence(INT32_MAX + 1))

    assert spy.calls == []


@pytest.mark.parametrize("codec", [TableCodec(), BuiltinCodec()], ids=["table", "builtin"])
def test_lone_continuation_byte_fails(codec) -> None:
    with pytest.raises(ConversionError) as excinfo:
        Utf8ToUtf16Converter(codec=codec)(b"\x80")

    err = excinfo.value
    assert err.direction is ConversionDirection.UTF8_TO_UTF16
    assert err.error_code == CodecErrorCode.NO_UNICODE_TRANSLATION
    assert err.message == "Can't get result UTF-16 string length (codec measurement failed)."


def test_transcode_failure_has_distinct_message() -> None:
    spy = CodecSpy(transcode=CodecOutcome.failure(CodecErrorCode.NO_UNICODE_TRANSLATION))

    with pytest.raises(ConversionError) as excinfo:
        Utf8ToUtf16Converter(codec=spy)(b"A")

    assert excinfo.value.message == (
        "Can't convert from UTF-8 to UTF-16 string (codec transcode failed)."
    )


def test_zero_length_measurement_is_an_error() -> None:
    spy = CodecSpy(measure=CodecOutcome(units=0))

    with pytest.raises(ConversionError) as excinfo:
        Utf8ToUtf16Converter(codec=spy)(b"A")

    assert excinfo.value.error_code == 0
    assert len(spy.calls) == 1


def test_written_count_mismatch_is_reported() -> None:
    spy = CodecSpy(transcode=CodecOutcome(units=1))

    with pytest.raises(ConversionError) as excinfo:
        Utf8ToUtf16Converter(codec=spy)(b"\xf0\x9f\x98\x80")

    assert "wrote 1 units, expected 2" in excinfo.value.message
