"""Japanese text encoding detector.

Tells ASCII, ISO-2022-JP, Shift_JIS, EUC-JP, UTF-8, UTF-16 and UTF-32 apart
from raw bytes, or reports the data as undetected (binary).
"""

from __future__ import annotations

import os
from typing import BinaryIO

from jpencoding.config import DEFAULT_CONFIG, DetectionConfig
from jpencoding.enums import DetectionMethod, EncodingTag
from jpencoding.pipeline import DetectionResult
from jpencoding.pipeline.orchestrator import run_pipeline
from jpencoding.reader import read_file_bytes, read_leading_bytes

__version__ = "1.0.0"
__all__ = [
    "DetectionConfig",
    "DetectionMethod",
    "DetectionResult",
    "EncodingTag",
    "detect",
    "guess",
    "guess_file",
    "guess_stream",
]


def detect(
    byte_str: bytes | bytearray | memoryview,
    config: DetectionConfig | None = None,
) -> DetectionResult:
    """Detect the encoding of the given byte string.

    Like :func:`guess`, but also reports which pipeline stage decided and,
    when the scoring passes ran, their counters.
    """
    data = byte_str if isinstance(byte_str, bytes) else bytes(byte_str)
    return run_pipeline(data, config or DEFAULT_CONFIG)


def guess(
    byte_str: bytes | bytearray | memoryview,
    config: DetectionConfig | None = None,
) -> EncodingTag:
    """Guess the Japanese text encoding of *byte_str*.

    Never raises for any input.  Empty or binary data yields
    :attr:`EncodingTag.UNDETECTED`.

    :param byte_str: The raw bytes to examine.  Not modified.
    :param config: Detection settings.  Defaults to :data:`DEFAULT_CONFIG`.
    :returns: The detected encoding.
    """
    return detect(byte_str, config).encoding


def guess_stream(stream: BinaryIO, config: DetectionConfig | None = None) -> EncodingTag:
    """Guess the encoding of the next ``config.check_bytes`` bytes of *stream*."""
    config = config or DEFAULT_CONFIG
    return guess(read_leading_bytes(stream, config.check_bytes), config)


def guess_file(
    path: str | os.PathLike[str], config: DetectionConfig | None = None
) -> EncodingTag:
    """Guess the encoding of the file at *path*.

    :raises OSError: If the file cannot be opened or read.
    """
    config = config or DEFAULT_CONFIG
    return guess(read_file_bytes(path, config.check_bytes), config)
