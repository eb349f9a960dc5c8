"""Lookup of codec adapters by name."""
from __future__ import annotations

import os
from typing import Callable, Dict, Mapping, Optional

from unicodeconv.domain.ports import CodecPort

from .codec_builtin import BuiltinCodec
from .codec_table import TableCodec

CODEC_ENV_VAR = "UNICODECONV_CODEC"
DEFAULT_CODEC = TableCodec.name

_CODEC_FACTORIES: Dict[str, Callable[[], CodecPort]] = {
    TableCodec.name: TableCodec,
    BuiltinCodec.name: BuiltinCodec,
}


class UnknownCodecError(ValueError):
    """No adapter is registered under the requested name."""


def available_codecs() -> tuple[str, ...]:
    return tuple(sorted(_CODEC_FACTORIES))


def normalize_codec_name(name: Optional[str]) -> str:
    key = (name or "").strip().lower()
    if key not in _CODEC_FACTORIES:
        raise UnknownCodecError(
            f"Unknown codec {name!r}; expected one of: {', '.join(available_codecs())}."
        )
    return key


def build_codec(name: str) -> CodecPort:
    return _CODEC_FACTORIES[normalize_codec_name(name)]()


def codec_from_env(environ: Optional[Mapping[str, str]] = None) -> CodecPort:
    """Build the adapter named by ``UNICODECONV_CODEC`` (``table`` when unset)."""
    env = os.environ if environ is None else environ
    return build_codec(env.get(CODEC_ENV_VAR) or DEFAULT_CODEC)


__all__ = [
    "CODEC_ENV_VAR",
    "DEFAULT_CODEC",
    "UnknownCodecError",
    "available_codecs",
    "build_codec",
    "codec_from_env",
    "normalize_codec_name",
]
