"""Stage 3c: UTF-8 simulated decode.

Unlike a strict validator, overlong forms and surrogates are not rejected:
only the lead byte ranges and continuation bytes (0x80-0xBF) are checked.
"""

from __future__ import annotations

from jpencoding.enums import EncodingTag
from jpencoding.pipeline import ScoreCounters


def _is_continuation(b: int) -> bool:
    return 0x80 <= b <= 0xBF


def score_utf8(data: bytes, max_failures: int) -> ScoreCounters:
    """Walk *data* as UTF-8, counting decoded bytes and malformed units.

    Leads are examined only where three following bytes fit in the data.

    :param data: The raw byte data to examine.
    :param max_failures: Failures tolerated before giving up.
    :returns: The success and failure counts for UTF-8.
    """
    success = 0
    failure = 0
    i = 0
    end = len(data) - 3
    while i < end:
        if failure > max_failures:
            break
        b = data[i]
        if b <= 0x7F:
            success += 1
        else:
            # Sequence length from the lead byte; 0 marks an invalid lead
            # (stray continuation byte or 0xF8-0xFF).
            if 0xC0 <= b <= 0xDF:
                seq_len = 2
            elif 0xE0 <= b <= 0xEF:
                seq_len = 3
            elif 0xF0 <= b <= 0xF7:
                seq_len = 4
            else:
                seq_len = 0
            if seq_len and all(
                _is_continuation(data[i + j]) for j in range(1, seq_len)
            ):
                success += seq_len
                i += seq_len - 1
            else:
                failure += 1
        i += 1
    return ScoreCounters(EncodingTag.UTF8, success, failure)
