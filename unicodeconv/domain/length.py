"""Checked conversion of sequence lengths into the signed 32-bit domain."""
from __future__ import annotations

from .errors import LengthOverflowError

INT32_MAX = 2**31 - 1


def safe_int_from_size(size: int, *, limit: int = INT32_MAX) -> int:
    """Return ``size`` unchanged if it fits into ``[0, limit]``.

    Every length a converter feeds into measurement, allocation or transcoding
    passes through here exactly once per call.

    Raises:
        TypeError: ``size`` is not an integer.
        ValueError: ``size`` is negative.
        LengthOverflowError: ``size`` exceeds ``limit``.
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"Length must be an int, got {type(size).__name__}.")
    if size < 0:
        raise ValueError(f"Length must be non-negative, got {size}.")
    if size > limit:
        raise LengthOverflowError(size, limit)
    return size


__all__ = ["INT32_MAX", "safe_int_from_size"]
