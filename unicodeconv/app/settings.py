"""Command line settings read from the environment.

  - UNICODECONV_CODEC: ``table`` (default) or ``builtin``
  - UNICODECONV_LENGTH_LIMIT: largest accepted input length, at most INT32_MAX
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from unicodeconv.adapters.registry import (
    CODEC_ENV_VAR,
    DEFAULT_CODEC,
    UnknownCodecError,
    build_codec,
    normalize_codec_name,
)
from unicodeconv.domain.length import INT32_MAX
from unicodeconv.domain.ports import CodecPort

LENGTH_LIMIT_ENV_VAR = "UNICODECONV_LENGTH_LIMIT"


class SettingsError(ValueError):
    """Invalid configuration value."""


def _parse_length_limit(raw: Optional[str]) -> int:
    if raw is None or not raw.strip():
        return INT32_MAX
    try:
        return int(raw.strip())
    except ValueError:
        raise SettingsError(f"{LENGTH_LIMIT_ENV_VAR} must be an integer, got {raw!r}.") from None


@dataclass(frozen=True)
class ConverterSettings:
    codec: str = DEFAULT_CODEC
    length_limit: int = INT32_MAX

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "codec", normalize_codec_name(self.codec))
        except UnknownCodecError as exc:
            raise SettingsError(str(exc)) from None
        if isinstance(self.length_limit, bool) or not isinstance(self.length_limit, int):
            raise SettingsError("length_limit must be an int.")
        if self.length_limit < 1 or self.length_limit > INT32_MAX:
            raise SettingsError(
                f"length_limit must be within [1, {INT32_MAX}], got {self.length_limit}."
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ConverterSettings":
        env = os.environ if environ is None else environ
        return cls(
            codec=env.get(CODEC_ENV_VAR) or DEFAULT_CODEC,
            length_limit=_parse_length_limit(env.get(LENGTH_LIMIT_ENV_VAR)),
        )

    def build_codec(self) -> CodecPort:
        return build_codec(self.codec)


__all__ = ["ConverterSettings", "LENGTH_LIMIT_ENV_VAR", "SettingsError"]
