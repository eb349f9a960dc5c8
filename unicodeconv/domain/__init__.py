"""Domain package exports: error taxonomy, length safety and the codec port."""

from .errors import (
    CodecErrorCode,
    ConversionDirection,
    ConversionError,
    LengthOverflowError,
)
from .length import INT32_MAX, safe_int_from_size
from .ports import CodecOutcome, CodecPort, Utf8Text, Utf16Text

__all__ = [
    "CodecErrorCode",
    "CodecOutcome",
    "CodecPort",
    "ConversionDirection",
    "ConversionError",
    "INT32_MAX",
    "LengthOverflowError",
    "Utf8Text",
    "Utf16Text",
    "safe_int_from_size",
]
