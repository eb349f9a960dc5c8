"""Adapter package for concrete ``CodecPort`` implementations.

Purpose:
    Provide interchangeable strict codecs for the converters: a table-driven
    codec written in Python and one delegating to the interpreter's built-in
    ``utf-8``/``utf-16-le`` codecs.

Call context:
    Looked up by name through ``registry`` (from the facade and the command
    line settings) and used directly by tests to check that both
    implementations agree.
"""

from .codec_builtin import BuiltinCodec
from .codec_table import TableCodec
from .registry import (
    UnknownCodecError,
    available_codecs,
    build_codec,
    codec_from_env,
)

__all__ = [
    "BuiltinCodec",
    "TableCodec",
    "UnknownCodecError",
    "available_codecs",
    "build_codec",
    "codec_from_env",
]
