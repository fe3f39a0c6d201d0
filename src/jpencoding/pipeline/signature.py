"""Stage 2: signature scan for BOM-less UTF-16, ISO-2022-JP and pure ASCII."""

from __future__ import annotations

import re

from jpencoding.enums import EncodingTag

# One alternation so the leftmost signature wins, whichever kind it is.
# A NUL followed by an ASCII byte is the UTF-16 signature; a NUL in the last
# position counts too, since bytes past the end read as 0x00.  The ESC
# sequences are the ISO-2022-JP designations:
#   ESC $ @  JIS C 6226-1978      ESC $ B  JIS X 0208-1983
#   ESC ( B  ASCII                ESC ( J  JIS X 0201 Roman
#   ESC ( I  JIS X 0201 Katakana
_SIGNATURE = re.compile(rb"\x00(?:[\x00-\x7f]|\Z)|\x1b(?:\$[@B]|\([BJI])")


def scan_signatures(data: bytes) -> EncodingTag | None:
    """Classify *data* as UTF-16, ISO-2022-JP or ASCII from byte signatures.

    :param data: The raw byte data to examine.
    :returns: :attr:`EncodingTag.UTF16LE`, :attr:`EncodingTag.JIS`,
        :attr:`EncodingTag.ASCII`, or ``None`` when high-bit bytes are present
        and no signature matched.
    """
    match = _SIGNATURE.search(data)
    if match is not None:
        if data[match.start()] == 0x00:
            # Byte order is unknown without a BOM; little-endian is reported.
            return EncodingTag.UTF16LE
        return EncodingTag.JIS
    if data.isascii():
        return EncodingTag.ASCII
    return None
