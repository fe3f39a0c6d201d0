"""Stage 1: BOM (Byte Order Mark) detection."""

from __future__ import annotations

from jpencoding.enums import EncodingTag

# Checked in order.  FF FE 00 00 therefore reports UTF-16-LE; only the
# big-endian UTF-32 mark is recognised.
_BOMS: tuple[tuple[bytes, EncodingTag], ...] = (
    (b"\xef\xbb\xbf", EncodingTag.UTF8),
    (b"\xff\xfe", EncodingTag.UTF16LE),
    (b"\xfe\xff", EncodingTag.UTF16BE),
    (b"\x00\x00\xfe\xff", EncodingTag.UTF32),
)

_MIN_BOM_CHECK = 4


def detect_bom(data: bytes) -> EncodingTag | None:
    """Check for a BOM at the start of data.

    At least four bytes are required; shorter input never matches.

    :param data: The raw byte data to examine.
    :returns: The encoding named by the BOM, or ``None``.
    """
    if len(data) < _MIN_BOM_CHECK:
        return None
    for bom_bytes, encoding in _BOMS:
        if data.startswith(bom_bytes):
            return encoding
    return None
