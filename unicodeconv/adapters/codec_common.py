"""Argument checks shared by the codec adapters."""
from __future__ import annotations

from typing import Optional, Sized

from unicodeconv.domain.errors import CodecErrorCode


def check_call(source: Sized, source_length: int, strict: bool) -> Optional[CodecErrorCode]:
    """Return the error code for a malformed codec call, or ``None``.

    Zero-length sources are rejected like the platform API does; converters
    short-circuit empty input before reaching a codec.
    """
    if not strict:
        # Lenient substitution is not offered by any adapter.
        return CodecErrorCode.INVALID_FLAGS
    if isinstance(source_length, bool) or not isinstance(source_length, int):
        return CodecErrorCode.INVALID_PARAMETER
    if source_length <= 0 or source_length > len(source):
        return CodecErrorCode.INVALID_PARAMETER
    return None


def check_capacity(destination: Sized, needed: int) -> Optional[CodecErrorCode]:
    if len(destination) < needed:
        return CodecErrorCode.INSUFFICIENT_BUFFER
    return None
