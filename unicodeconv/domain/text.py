"""Helpers for moving between ``str``, raw bytes and UTF-16 code units.

These never validate: lone surrogates survive in both directions so that
ill-formed text can be handed to the converters and rejected there.
"""
from __future__ import annotations

import sys
from array import array
from typing import Iterable, Literal

ByteOrder = Literal["little", "big"]

HIGH_SURROGATE_FIRST = 0xD800
HIGH_SURROGATE_LAST = 0xDBFF
LOW_SURROGATE_FIRST = 0xDC00
LOW_SURROGATE_LAST = 0xDFFF
SURROGATE_OFFSET = 0x10000


def is_high_surrogate(unit: int) -> bool:
    return HIGH_SURROGATE_FIRST <= unit <= HIGH_SURROGATE_LAST


def is_low_surrogate(unit: int) -> bool:
    return LOW_SURROGATE_FIRST <= unit <= LOW_SURROGATE_LAST


def utf16_units_from_str(text: str) -> array:
    """Split ``text`` into UTF-16 code units (surrogate pairs above U+FFFF)."""
    units = array("H")
    for ch in text:
        cp = ord(ch)
        if cp < SURROGATE_OFFSET:
            units.append(cp)
            continue
        cp -= SURROGATE_OFFSET
        units.append(HIGH_SURROGATE_FIRST | (cp >> 10))
        units.append(LOW_SURROGATE_FIRST | (cp & 0x3FF))
    return units


def str_from_utf16_units(units: Iterable[int]) -> str:
    """Join code units back into a ``str``; unpaired surrogates are kept as-is."""
    pending = list(units)
    chars = []
    i = 0
    while i < len(pending):
        unit = pending[i]
        if (
            is_high_surrogate(unit)
            and i + 1 < len(pending)
            and is_low_surrogate(pending[i + 1])
        ):
            low = pending[i + 1]
            cp = SURROGATE_OFFSET + ((unit - HIGH_SURROGATE_FIRST) << 10) + (low - LOW_SURROGATE_FIRST)
            chars.append(chr(cp))
            i += 2
            continue
        chars.append(chr(unit))
        i += 1
    return "".join(chars)


def _check_byteorder(byteorder: str) -> None:
    if byteorder not in ("little", "big"):
        raise ValueError(f"byteorder must be 'little' or 'big', got {byteorder!r}.")


def utf16_units_from_bytes(data: bytes, byteorder: ByteOrder = "little") -> array:
    """Read 16-bit code units from raw bytes in the given byte order."""
    _check_byteorder(byteorder)
    if len(data) % 2:
        raise ValueError(
            f"UTF-16 data must hold an even number of bytes, got {len(data)}."
        )
    units = array("H")
    units.frombytes(bytes(data))
    if byteorder != sys.byteorder:
        units.byteswap()
    return units


def utf16_units_to_bytes(units: Iterable[int], byteorder: ByteOrder = "little") -> bytes:
    """Serialize code units to raw bytes in the given byte order."""
    _check_byteorder(byteorder)
    packed = units if isinstance(units, array) and units.typecode == "H" else array("H", units)
    if byteorder != sys.byteorder:
        packed = array("H", packed)
        packed.byteswap()
    return packed.tobytes()


__all__ = [
    "ByteOrder",
    "HIGH_SURROGATE_FIRST",
    "HIGH_SURROGATE_LAST",
    "LOW_SURROGATE_FIRST",
    "LOW_SURROGATE_LAST",
    "SURROGATE_OFFSET",
    "is_high_surrogate",
    "is_low_surrogate",
    "str_from_utf16_units",
    "utf16_units_from_bytes",
    "utf16_units_from_str",
    "utf16_units_to_bytes",
]
