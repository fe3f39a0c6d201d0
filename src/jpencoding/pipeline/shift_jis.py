"""Stage 3a: Shift_JIS simulated decode.

Single-byte units: 0x00-0x7F (ASCII), 0xA1-0xDF (half-width katakana)
Lead bytes: 0x81-0x9F, 0xE0-0xFC
Trail bytes: 0x40-0x7E, 0x80-0xFC
"""

from __future__ import annotations

from jpencoding.enums import EncodingTag
from jpencoding.pipeline import ScoreCounters


def score_shift_jis(data: bytes, max_failures: int) -> ScoreCounters:
    """Walk *data* as Shift_JIS, counting decoded bytes and malformed units.

    Only positions with room for a trail byte are examined as leads, so the
    final byte is never scored on its own.  The pass gives up once the
    failure count exceeds *max_failures*.

    :param data: The raw byte data to examine.
    :param max_failures: Failures tolerated before giving up.
    :returns: The success and failure counts for Shift_JIS.
    """
    success = 0
    failure = 0
    i = 0
    end = len(data) - 1
    while i < end:
        if failure > max_failures:
            break
        b = data[i]
        if b <= 0x7F or 0xA1 <= b <= 0xDF:
            success += 1
        elif (0x81 <= b <= 0x9F) or (0xE0 <= b <= 0xFC):
            trail = data[i + 1]
            if (0x40 <= trail <= 0x7E) or (0x80 <= trail <= 0xFC):
                success += 2
                i += 1
            else:
                failure += 1
        else:
            # 0x80, 0xA0, 0xFD-0xFF never start a character
            failure += 1
        i += 1
    return ScoreCounters(EncodingTag.SHIFT_JIS, success, failure)
