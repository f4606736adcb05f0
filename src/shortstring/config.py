"""
Environment configuration.

    SHORTSTRING_CODEC       alphanumeric | numeric | hex   (default alphanumeric)
    SHORTSTRING_WIDTH       16 | 32 | 64                   (default 32)
    SHORTSTRING_LOG_LEVEL   logging level name             (default WARNING)

Command-line flags override these.
"""
from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from shortstring.codecs.base import WIDTHS

DEFAULT_CODEC = "alphanumeric"
DEFAULT_WIDTH = "32"
DEFAULT_LOG_LEVEL = "WARNING"

CODEC_NAMES = ("alphanumeric", "numeric", "hex")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class Settings:
    codec: str = "alphanumeric"
    width: int = 32
    log_level: str = "WARNING"


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Read and validate settings from environ (os.environ by default).

    Raises:
        ValueError: naming the variable if a value is not recognized
    """
    if environ is None:
        environ = os.environ
    codec = environ.get("SHORTSTRING_CODEC", DEFAULT_CODEC)
    width = environ.get("SHORTSTRING_WIDTH", DEFAULT_WIDTH)
    log_level = environ.get("SHORTSTRING_LOG_LEVEL", DEFAULT_LOG_LEVEL)

    codec = codec.strip().lower()
    if codec not in CODEC_NAMES:
        raise ValueError(f"SHORTSTRING_CODEC must be one of {', '.join(CODEC_NAMES)}, got {codec!r}")

    try:
        width_bits = int(width)
    except ValueError:
        raise ValueError(f"SHORTSTRING_WIDTH must be an integer, got {width!r}") from None
    if width_bits not in WIDTHS:
        raise ValueError(f"SHORTSTRING_WIDTH must be one of {WIDTHS}, got {width_bits}")

    log_level = log_level.strip().upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"SHORTSTRING_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, "
                         f"got {log_level!r}")

    return Settings(codec=codec, width=width_bits, log_level=log_level)
