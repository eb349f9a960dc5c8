"""Ports (hexagonal boundaries) for the conversion core.

The converters never encode or decode on their own. They delegate to a
``CodecPort`` that measures and transcodes with strict validation, so a codec
written in Python and one backed by the interpreter's built-in codecs are
interchangeable.
"""
from __future__ import annotations

from array import array
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence, Union

from .errors import CodecErrorCode

Utf16Text = Sequence[int]
Utf8Text = Union[bytes, bytearray, memoryview, Sequence[int]]


@dataclass(frozen=True)
class CodecOutcome:
    """Result of a single measure or transcode call.

    ``units`` is the required destination length (measure) or the number of
    units written (transcode). Failures report ``units == 0`` together with a
    non-zero ``error_code``.
    """

    units: int
    error_code: int = CodecErrorCode.SUCCESS

    @property
    def ok(self) -> bool:
        return self.units > 0

    @classmethod
    def failure(cls, error_code: CodecErrorCode) -> "CodecOutcome":
        return cls(units=0, error_code=int(error_code))


class CodecPort(Protocol):
    """Measure/transcode capability with a strict-validation mode.

    Called without ``destination`` a method returns the destination length
    required for ``source[:source_length]``. Called with a destination buffer
    it fills the buffer from index 0 and returns the number of units written,
    or ``INSUFFICIENT_BUFFER`` when the buffer is too small.
    """

    name: str

    def utf16_to_utf8(
        self,
        source: Utf16Text,
        source_length: int,
        *,
        strict: bool,
        destination: Optional[bytearray] = None,
    ) -> CodecOutcome: ...

    def utf8_to_utf16(
        self,
        source: Utf8Text,
        source_length: int,
        *,
        strict: bool,
        destination: Optional[array] = None,
    ) -> CodecOutcome: ...


__all__ = ["CodecOutcome", "CodecPort", "Utf16Text", "Utf8Text"]
