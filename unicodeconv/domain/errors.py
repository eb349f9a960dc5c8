"""Error taxonomy shared by the converters and the codec adapters.

Two failure kinds cross the public boundary: ``LengthOverflowError`` when an
input length does not fit the bounded arithmetic domain, and
``ConversionError`` when a codec rejects the input or one of the conversion
phases fails.
"""
from __future__ import annotations

from enum import Enum, IntEnum


class ConversionDirection(str, Enum):
    UTF16_TO_UTF8 = "utf16_to_utf8"
    UTF8_TO_UTF16 = "utf8_to_utf16"


class CodecErrorCode(IntEnum):
    """Diagnostic codes reported by codec adapters.

    Values match the Win32 error codes returned by the platform conversion
    API, so diagnostics read the same across codec implementations.
    """

    SUCCESS = 0
    INVALID_PARAMETER = 87
    INSUFFICIENT_BUFFER = 122
    INVALID_FLAGS = 1004
    NO_UNICODE_TRANSLATION = 1113


class ConversionError(ValueError):
    """A conversion attempt failed; no partial output is produced."""

    def __init__(self, error_code: int, direction: ConversionDirection, message: str):
        super().__init__(message)
        self.error_code = int(error_code)
        self.direction = direction
        self.message = message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(error_code={self.error_code}, "
            f"direction={self.direction.value!r}, message={self.message!r})"
        )


class LengthOverflowError(OverflowError):
    """Sequence length does not fit the bounded integer domain."""

    def __init__(self, length: int, limit: int):
        super().__init__(
            f"Input length {length} is too large: it doesn't fit into the "
            f"bounded length domain (max {limit})."
        )
        self.length = length
        self.limit = limit


__all__ = [
    "ConversionDirection",
    "CodecErrorCode",
    "ConversionError",
    "LengthOverflowError",
]
