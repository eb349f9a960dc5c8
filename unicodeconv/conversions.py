"""Convenience functions for converting between UTF-16 and UTF-8.

Without an explicit ``codec`` the adapter named by ``UNICODECONV_CODEC`` is
used; an unknown name raises ``UnknownCodecError``.
"""
from __future__ import annotations

from array import array
from typing import Optional

from .adapters.registry import codec_from_env
from .domain.length import INT32_MAX
from .domain.ports import CodecPort, Utf8Text, Utf16Text
from .usecases import Utf8ToUtf16Converter, Utf16ToUtf8Converter


def utf8_from_utf16(
    utf16: Utf16Text,
    *,
    codec: Optional[CodecPort] = None,
    length_limit: int = INT32_MAX,
) -> bytes:
    """Convert UTF-16 code units to UTF-8 bytes.

    Raises:
        ConversionError: the input is not well-formed UTF-16.
        LengthOverflowError: the input is longer than ``length_limit``.
    """
    resolved = codec if codec is not None else codec_from_env()
    return Utf16ToUtf8Converter(codec=resolved, length_limit=length_limit)(utf16)


def utf16_from_utf8(
    utf8: Utf8Text,
    *,
    codec: Optional[CodecPort] = None,
    length_limit: int = INT32_MAX,
) -> array:
    """Convert UTF-8 bytes to UTF-16 code units (``array('H')``).

    Raises:
        ConversionError: the input is not well-formed UTF-8.
        LengthOverflowError: the input is longer than ``length_limit``.
    """
    resolved = codec if codec is not None else codec_from_env()
    return Utf8ToUtf16Converter(codec=resolved, length_limit=length_limit)(utf8)


to_utf8 = utf8_from_utf16
to_utf16 = utf16_from_utf8

__all__ = ["to_utf8", "to_utf16", "utf16_from_utf8", "utf8_from_utf16"]
