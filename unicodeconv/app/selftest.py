"""Console self-test mirroring the library's reference checks.

Each check prints ``[description]: PASSED`` or ``FAILED`` so the report can be
read without a test runner, e.g. on a machine where only the package is
installed.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Tuple

from unicodeconv.domain.errors import ConversionError, LengthOverflowError
from unicodeconv.domain.ports import CodecPort
from unicodeconv.domain.text import utf16_units_from_str
from unicodeconv.usecases import Utf8ToUtf16Converter, Utf16ToUtf8Converter

log = logging.getLogger(__name__)

# U+5B66 (Japanese kanji meaning "learn, study"): UTF-16 0x5B66, UTF-8 E5 AD A6.
KANJI_UNIT = 0x5B66
KANJI_UTF8 = b"\xe5\xad\xa6"


@dataclass(frozen=True)
class CheckResult:
    description: str
    passed: bool

    def render(self) -> str:
        return f"[{self.description}]: {'PASSED' if self.passed else 'FAILED'}"


def _rejects(convert: Callable[[], object]) -> bool:
    try:
        convert()
    except ConversionError:
        return True
    return False


def _checks(codec: CodecPort) -> List[Tuple[str, Callable[[], bool]]]:
    to_utf8 = Utf16ToUtf8Converter(codec=codec)
    to_utf16 = Utf8ToUtf16Converter(codec=codec)
    ascii_text = "Ciao ciao"
    kanji_text = utf16_units_from_str("Japanese kanji \u5b66")
    return [
        ("Empty UTF-16 text converted to empty UTF-8 bytes", lambda: to_utf8([]) == b""),
        ("Empty UTF-8 bytes converted to empty UTF-16 text", lambda: len(to_utf16(b"")) == 0),
        (
            "Simple ASCII string conversions",
            lambda: to_utf8(to_utf16(ascii_text.encode("ascii"))) == ascii_text.encode("ascii"),
        ),
        ("String with Japanese kanji", lambda: to_utf16(to_utf8(kanji_text)) == kanji_text),
        ("UTF-8 length", lambda: len(to_utf8([KANJI_UNIT])) == 3),
        ("UTF-8 encoding", lambda: to_utf8([KANJI_UNIT]) == KANJI_UTF8),
        ("Unpaired high surrogate rejected", lambda: _rejects(lambda: to_utf8([0xD800]))),
        ("Lone continuation byte rejected", lambda: _rejects(lambda: to_utf16(b"\x80"))),
    ]


def run_selftest(codec: CodecPort) -> List[CheckResult]:
    results: List[CheckResult] = []
    for description, check in _checks(codec):
        try:
            passed = bool(check())
        except (ConversionError, LengthOverflowError) as exc:
            log.error("Check %r raised %r", description, exc)
            passed = False
        results.append(CheckResult(description, passed))
    return results


def render_report(results: Iterable[CheckResult]) -> List[str]:
    return [result.render() for result in results]


__all__ = ["CheckResult", "render_report", "run_selftest"]
