"""Read the leading bytes of a stream or file for detection."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import BinaryIO

from jpencoding.config import DEFAULT_CHECK_BYTES, MAX_CHECK_BYTES

logger = logging.getLogger(__name__)


def _remaining_length(stream: BinaryIO) -> int | None:
    """Return the bytes left between the current position and the end.

    Returns ``None`` for streams that cannot seek (pipes, sockets, stdin).
    The stream position is restored before returning.
    """
    try:
        pos = stream.tell()
        end = stream.seek(0, os.SEEK_END)
        stream.seek(pos)
    except (AttributeError, OSError):
        return None
    return max(end - pos, 0)


def _resolve_size(check_bytes: int, length: int | None) -> int:
    if check_bytes == 0:
        if length is None:
            logger.debug(
                "source length unavailable, reading %d bytes", DEFAULT_CHECK_BYTES
            )
            check_bytes = DEFAULT_CHECK_BYTES
        else:
            check_bytes = length
    return min(check_bytes, MAX_CHECK_BYTES)


def read_leading_bytes(stream: BinaryIO, check_bytes: int) -> bytes:
    """Read up to *check_bytes* bytes from the current stream position.

    :param stream: A binary stream opened for reading.
    :param check_bytes: Number of bytes to read.  ``0`` reads the rest of the
        stream, or :data:`~jpencoding.config.DEFAULT_CHECK_BYTES` bytes when
        its length cannot be determined.
    :returns: The bytes read; shorter than requested at end of stream.
    """
    length = _remaining_length(stream) if check_bytes == 0 else None
    data = stream.read(_resolve_size(check_bytes, length))
    return bytes(data or b"")


def read_file_bytes(path: str | os.PathLike[str], check_bytes: int) -> bytes:
    """Read up to *check_bytes* leading bytes of the file at *path*.

    :param path: File to read.
    :param check_bytes: Number of bytes to read.  ``0`` reads the whole file.
    :returns: The bytes read.
    :raises OSError: If the file cannot be opened or read.
    """
    path = Path(path)
    length = path.stat().st_size if check_bytes == 0 else None
    with path.open("rb") as f:
        return f.read(_resolve_size(check_bytes, length))
