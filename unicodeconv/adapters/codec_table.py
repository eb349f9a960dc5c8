from __future__ import annotations

import operator
from array import array
from typing import Dict, Iterator, Optional, Sequence, Tuple

from unicodeconv.domain.errors import CodecErrorCode
from unicodeconv.domain.ports import CodecOutcome, CodecPort, Utf8Text, Utf16Text
from unicodeconv.domain.text import (
    HIGH_SURROGATE_FIRST,
    LOW_SURROGATE_FIRST,
    SURROGATE_OFFSET,
    is_high_surrogate,
    is_low_surrogate,
)

from .codec_common import check_call, check_capacity

_CONTINUATION = (0x80, 0xBF)

# Allowed range of the second byte for lead bytes that narrow it
# (well-formed UTF-8 byte sequences, Unicode Table 3-7).
_SECOND_BYTE_RANGES: Dict[int, Tuple[int, int]] = {
    0xE0: (0xA0, 0xBF),
    0xED: (0x80, 0x9F),
    0xF0: (0x90, 0xBF),
    0xF4: (0x80, 0x8F),
}


class _CodecFault(Exception):
    def __init__(self, code: CodecErrorCode):
        super().__init__(code.name)
        self.code = code


def _code_unit(value: object, maximum: int) -> int:
    # Accept anything integer-like (numpy scalars, __index__ types) as array("H") does.
    try:
        unit = operator.index(value)
    except TypeError:
        raise _CodecFault(CodecErrorCode.INVALID_PARAMETER) from None
    if not 0 <= unit <= maximum:
        raise _CodecFault(CodecErrorCode.INVALID_PARAMETER)
    return unit


def _utf16_code_points(source: Sequence[int], length: int) -> Iterator[int]:
    i = 0
    while i < length:
        unit = _code_unit(source[i], 0xFFFF)
        if is_high_surrogate(unit):
            if i + 1 >= length:
                raise _CodecFault(CodecErrorCode.NO_UNICODE_TRANSLATION)
            low = _code_unit(source[i + 1], 0xFFFF)
            if not is_low_surrogate(low):
                raise _CodecFault(CodecErrorCode.NO_UNICODE_TRANSLATION)
            yield SURROGATE_OFFSET + ((unit - HIGH_SURROGATE_FIRST) << 10) + (low - LOW_SURROGATE_FIRST)
            i += 2
            continue
        if is_low_surrogate(unit):
            raise _CodecFault(CodecErrorCode.NO_UNICODE_TRANSLATION)
        yield unit
        i += 1


def _utf8_code_points(source: Utf8Text, length: int) -> Iterator[int]:
    i = 0
    while i < length:
        lead = _code_unit(source[i], 0xFF)
        if lead < 0x80:
            yield lead
            i += 1
            continue
        if 0xC2 <= lead <= 0xDF:
            trail, cp = 1, lead & 0x1F
        elif 0xE0 <= lead <= 0xEF:
            trail, cp = 2, lead & 0x0F
        elif 0xF0 <= lead <= 0xF4:
            trail, cp = 3, lead & 0x07
        else:
            # Stray continuation bytes, C0/C1 overlong leads, F5..FF.
            raise _CodecFault(CodecErrorCode.NO_UNICODE_TRANSLATION)
        if i + trail >= length:
            raise _CodecFault(CodecErrorCode.NO_UNICODE_TRANSLATION)
        for k in range(1, trail + 1):
            low, high = _SECOND_BYTE_RANGES.get(lead, _CONTINUATION) if k == 1 else _CONTINUATION
            byte = _code_unit(source[i + k], 0xFF)
            if not low <= byte <= high:
                raise _CodecFault(CodecErrorCode.NO_UNICODE_TRANSLATION)
            cp = (cp << 6) | (byte & 0x3F)
        yield cp
        i += trail + 1


def _encode_utf8(cp: int) -> bytes:
    if cp < 0x80:
        return bytes((cp,))
    if cp < 0x800:
        return bytes((0xC0 | (cp >> 6), 0x80 | (cp & 0x3F)))
    if cp < 0x10000:
        return bytes((0xE0 | (cp >> 12), 0x80 | ((cp >> 6) & 0x3F), 0x80 | (cp & 0x3F)))
    return bytes(
        (
            0xF0 | (cp >> 18),
            0x80 | ((cp >> 12) & 0x3F),
            0x80 | ((cp >> 6) & 0x3F),
            0x80 | (cp & 0x3F),
        )
    )


def _encode_utf16(cp: int) -> Tuple[int, ...]:
    if cp < SURROGATE_OFFSET:
        return (cp,)
    cp -= SURROGATE_OFFSET
    return (HIGH_SURROGATE_FIRST | (cp >> 10), LOW_SURROGATE_FIRST | (cp & 0x3FF))


class TableCodec(CodecPort):
    """Strict UTF-16/UTF-8 codec implemented with explicit encoding tables."""

    name = "table"

    def utf16_to_utf8(
        self,
        source: Utf16Text,
        source_length: int,
        *,
        strict: bool,
        destination: Optional[bytearray] = None,
    ) -> CodecOutcome:
        problem = check_call(source, source_length, strict)
        if problem is not None:
            return CodecOutcome.failure(problem)
        try:
            if destination is None:
                total = 0
                for cp in _utf16_code_points(source, source_length):
                    total += 1 if cp < 0x80 else 2 if cp < 0x800 else 3 if cp < 0x10000 else 4
                return CodecOutcome(total)
            written = 0
            for cp in _utf16_code_points(source, source_length):
                encoded = _encode_utf8(cp)
                end = written + len(encoded)
                problem = check_capacity(destination, end)
                if problem is not None:
                    return CodecOutcome.failure(problem)
                destination[written:end] = encoded
                written = end
            return CodecOutcome(written)
        except _CodecFault as fault:
            return CodecOutcome.failure(fault.code)

    def utf8_to_utf16(
        self,
        source: Utf8Text,
        source_length: int,
        *,
        strict: bool,
        destination: Optional[array] = None,
    ) -> CodecOutcome:
        problem = check_call(source, source_length, strict)
        if problem is not None:
            return CodecOutcome.failure(problem)
        try:
            if destination is None:
                total = 0
                for cp in _utf8_code_points(source, source_length):
                    total += 1 if cp < SURROGATE_OFFSET else 2
                return CodecOutcome(total)
            written = 0
            for cp in _utf8_code_points(source, source_length):
                encoded = _encode_utf16(cp)
                problem = check_capacity(destination, written + len(encoded))
                if problem is not None:
                    return CodecOutcome.failure(problem)
                for unit in encoded:
                    destination[written] = unit
                    written += 1
            return CodecOutcome(written)
        except _CodecFault as fault:
            return CodecOutcome.failure(fault.code)
