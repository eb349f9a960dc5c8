from __future__ import annotations

from dataclasses import dataclass

from ..domain.errors import ConversionDirection, ConversionError
from ..domain.length import INT32_MAX, safe_int_from_size
from ..domain.ports import CodecPort, Utf16Text

# Always fail on invalid UTF-16 sequences instead of substituting U+FFFD.
_STRICT = True
_DIRECTION = ConversionDirection.UTF16_TO_UTF8


@dataclass(frozen=True)
class Utf16ToUtf8Converter:
    """Validate and transcode UTF-16 code units into UTF-8 bytes.

    Measures the exact output size first, allocates once, then transcodes
    into that buffer. Raises ``LengthOverflowError`` for inputs longer than
    ``length_limit`` and ``ConversionError`` for anything the codec rejects.
    """

    codec: CodecPort
    length_limit: int = INT32_MAX

    def __call__(self, utf16: Utf16Text) -> bytes:
        if len(utf16) == 0:
            return b""

        utf16_length = safe_int_from_size(len(utf16), limit=self.length_limit)

        measured = self.codec.utf16_to_utf8(utf16, utf16_length, strict=_STRICT)
        if not measured.ok:
            raise ConversionError(
                measured.error_code,
                _DIRECTION,
                "Can't get result UTF-8 string length (codec measurement failed).",
            )
        utf8_length = measured.units

        utf8 = bytearray(utf8_length)
        written = self.codec.utf16_to_utf8(
            utf16, utf16_length, strict=_STRICT, destination=utf8
        )
        if not written.ok:
            raise ConversionError(
                written.error_code,
                _DIRECTION,
                "Can't convert from UTF-16 to UTF-8 string (codec transcode failed).",
            )
        if written.units != utf8_length:
            raise ConversionError(
                written.error_code,
                _DIRECTION,
                f"UTF-16 to UTF-8 transcode wrote {written.units} units, expected {utf8_length}.",
            )
        return bytes(utf8)
