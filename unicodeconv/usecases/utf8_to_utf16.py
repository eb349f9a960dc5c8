from __future__ import annotations

from array import array
from dataclasses import dataclass

from ..domain.errors import ConversionDirection, ConversionError
from ..domain.length import INT32_MAX, safe_int_from_size
from ..domain.ports import CodecPort, Utf8Text

# Always fail on invalid UTF-8 sequences instead of substituting U+FFFD.
_STRICT = True
_DIRECTION = ConversionDirection.UTF8_TO_UTF16


@dataclass(frozen=True)
class Utf8ToUtf16Converter:
    """Validate and transcode UTF-8 bytes into UTF-16 code units."""

    codec: CodecPort
    length_limit: int = INT32_MAX

    def __call__(self, utf8: Utf8Text) -> array:
        if len(utf8) == 0:
            return array("H")

        utf8_length = safe_int_from_size(len(utf8), limit=self.length_limit)

        measured = self.codec.utf8_to_utf16(utf8, utf8_length, strict=_STRICT)
        if not measured.ok:
            raise ConversionError(
                measured.error_code,
                _DIRECTION,
                "Can't get result UTF-16 string length (codec measurement failed).",
            )
        utf16_length = measured.units

        utf16 = array("H", bytes(2 * utf16_length))
        written = self.codec.utf8_to_utf16(
            utf8, utf8_length, strict=_STRICT, destination=utf16
        )
        if not written.ok:
            raise ConversionError(
                written.error_code,
                _DIRECTION,
                "Can't convert from UTF-8 to UTF-16 string (codec transcode failed).",
            )
        if written.units != utf16_length:
            raise ConversionError(
                written.error_code,
                _DIRECTION,
                f"UTF-8 to UTF-16 transcode wrote {written.units} units, expected {utf16_length}.",
            )
        return utf16
