"""Use-case layer: the two conversion operations.

Each converter validates lengths, then drives a ``CodecPort`` through a
measure, allocate and transcode sequence without doing any encoding itself.
"""

from .utf8_to_utf16 import Utf8ToUtf16Converter
from .utf16_to_utf8 import Utf16ToUtf8Converter

__all__ = ["Utf16ToUtf8Converter", "Utf8ToUtf16Converter"]
