from __future__ import annotations

from array import array
from typing import Optional, Union

from unicodeconv.domain.errors import CodecErrorCode
from unicodeconv.domain.ports import CodecOutcome, CodecPort, Utf8Text, Utf16Text
from unicodeconv.domain.text import utf16_units_from_bytes, utf16_units_to_bytes

from .codec_common import check_call, check_capacity


def _deliver(
    produced: Union[bytes, array],
    destination: Optional[Union[bytearray, array]],
) -> CodecOutcome:
    if destination is None:
        return CodecOutcome(len(produced))
    problem = check_capacity(destination, len(produced))
    if problem is not None:
        return CodecOutcome.failure(problem)
    destination[: len(produced)] = produced
    return CodecOutcome(len(produced))


class BuiltinCodec(CodecPort):
    """Codec backed by the interpreter's strict ``utf-16-le`` and ``utf-8`` codecs.

    Python's decoders already reject unpaired surrogates, overlong forms,
    encoded surrogates and code points above U+10FFFF, so the platform codec
    is used directly and its failures are mapped onto ``CodecErrorCode``.
    """

    name = "builtin"

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
            raw = utf16_units_to_bytes(source[:source_length], "little")
        except (OverflowError, TypeError):
            return CodecOutcome.failure(CodecErrorCode.INVALID_PARAMETER)
        try:
            encoded = raw.decode("utf-16-le").encode("utf-8")
        except UnicodeError:
            return CodecOutcome.failure(CodecErrorCode.NO_UNICODE_TRANSLATION)
        return _deliver(encoded, destination)

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
            raw = bytes(source[:source_length])
        except (ValueError, TypeError):
            return CodecOutcome.failure(CodecErrorCode.INVALID_PARAMETER)
        try:
            text = raw.decode("utf-8")
        except UnicodeError:
            return CodecOutcome.failure(CodecErrorCode.NO_UNICODE_TRANSLATION)
        units = utf16_units_from_bytes(text.encode("utf-16-le"), "little")
        return _deliver(units, destination)

