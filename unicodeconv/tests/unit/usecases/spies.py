from __future__ import annotations

from typing import Any, List, Optional, Tuple

from unicodeconv.adapters import TableCodec
from unicodeconv.domain.ports import CodecOutcome


class CodecSpy:
    """Records codec calls; optionally overrides the measure or transcode outcome."""

    name = "spy"

    def __init__(
        self,
        *,
        measure: Optional[CodecOutcome] = None,
        transcode: Optional[CodecOutcome] = None,
    ) -> None:
        self.measure = measure
        self.transcode = transcode
        self.delegate = TableCodec()
        self.calls: List[Tuple[str, int, bool, Optional[int]]] = []

    def _record(self, method: str, source_length: int, strict: bool, destination: Any) -> Optional[CodecOutcome]:
        size = None if destination is None else len(destination)
        self.calls.append((method, source_length, strict, size))
        if destination is None:
            return self.measure
        return self.transcode

    def utf16_to_utf8(self, source, source_length, *, strict, destination=None):
        override = self._record("utf16_to_utf8", source_length, strict, destination)
        if override is not None:
            return override
        return self.delegate.utf16_to_utf8(
            source, source_length, strict=strict, destination=destination
        )

    def utf8_to_utf16(self, source, source_length, *, strict, destination=None):
        override = self._record("utf8_to_utf16", source_length, strict, destination)
        if override is not None:
            return override
        return self.delegate.utf8_to_utf16(
            source, source_length, strict=strict, destination=destination
        )


class HugeSequence:
    """Reports a length beyond the 32-bit domain without allocating it."""

    def __init__(self, length: int) -> None:
        self.length = length

    def __len__(self) -> int:
        return self.length

    def __getitem__(self, index):
        raise AssertionError("converter must not read an oversized input")
