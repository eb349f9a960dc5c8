from __future__ import annotations

import pytest

from unicodeconv.adapters import BuiltinCodec, TableCodec
from unicodeconv.app.selftest import CheckResult, render_report, run_selftest
from unicodeconv.domain.errors import CodecErrorCode
from unicodeconv.domain.ports import CodecOutcome


@pytest.mark.parametrize("codec", [TableCodec(), BuiltinCodec()], ids=["table", "builtin"])
def test_all_checks_pass_with_real_codecs(codec) -> None:
    results = run_selftest(codec)

    assert results
    assert all(result.passed for result in results), render_report(results)


class _BrokenCodec:
    name = "broken"

    def utf16_to_utf8(self, source, source_length, *, strict, destination=None):
        return CodecOutcome.failure(CodecErrorCode.INVALID_PARAMETER)

    def utf8_to_utf16(self, source, source_length, *, strict, destination=None):
        return CodecOutcome.failure(CodecErrorCode.INVALID_PARAMETER)


def test_failing_codec_marks_checks_failed() -> None:
    results = {result.description: result.passed for result in run_selftest(_BrokenCodec())}

    # Empty-input checks never reach the codec.
    assert results["Empty UTF-16 text converted to empty UTF-8 bytes"] is True
    assert results["UTF-8 encoding"] is False
    assert results["String with Japanese kanji"] is False


def test_report_lines() -> None:
    lines = render_report([CheckResult("UTF-8 length", True), CheckResult("UTF-8 encoding", False)])

    assert lines == ["[UTF-8 length]: PASSED", "[UTF-8 encoding]: FAILED"]
