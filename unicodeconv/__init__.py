"""Strict, two-phase conversion between UTF-16 and UTF-8 text."""

from .conversions import to_utf8, to_utf16, utf8_from_utf16, utf16_from_utf8
from .domain.errors import (
    CodecErrorCode,
    ConversionDirection,
    ConversionError,
    LengthOverflowError,
)
from .domain.text import str_from_utf16_units, utf16_units_from_str

__all__ = [
    "CodecErrorCode",
    "ConversionDirection",
    "ConversionError",
    "LengthOverflowError",
    "str_from_utf16_units",
    "to_utf8",
    "to_utf16",
    "utf16_from_utf8",
    "utf16_units_from_str",
    "utf8_from_utf16",
]
