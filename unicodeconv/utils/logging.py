"""Root logger setup for the command line.

The conversion core never logs; only ``unicodeconv.app`` emits records.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"
LEVEL_ENV_VAR = "UNICODECONV_LOG_LEVEL"
DEBUG_ENV_VAR = "UNICODECONV_DEBUG"


def _parse_level(value: Optional[str]) -> Optional[int]:
    """Map ``"debug"``/``"10"`` style text to a level; ``None`` if unrecognised."""
    text = (value or "").strip()
    if text.isdigit():
        return int(text)
    candidate = logging.getLevelName(text.upper()) if text else None
    return candidate if isinstance(candidate, int) else None


def env_level() -> Optional[int]:
    """Level requested through UNICODECONV_LOG_LEVEL or a truthy UNICODECONV_DEBUG."""
    explicit = _parse_level(os.getenv(LEVEL_ENV_VAR))
    if explicit is not None:
        return explicit
    if (os.getenv(DEBUG_ENV_VAR) or "").strip().lower() in {"1", "true", "yes", "on"}:
        return logging.DEBUG
    return None


def configure_root(default_level: int = logging.WARNING) -> int:
    """Install a compact root handler once and apply the environment level."""
    requested = env_level()
    effective = default_level if requested is None else requested
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=_FORMAT, datefmt=_DATEFMT)
    root.setLevel(effective)
    return effective


def apply_level_override(level: Optional[str]) -> Optional[int]:
    """Apply a ``--log-level`` value; it wins over the environment."""
    parsed = _parse_level(level)
    if parsed is not None:
        logging.getLogger().setLevel(parsed)
    return parsed
