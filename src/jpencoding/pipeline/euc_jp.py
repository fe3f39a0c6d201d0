"""Stage 3b: EUC-JP simulated decode.

Two-byte: Lead 0xA1-0xFE, Trail 0xA1-0xFE
SS2 (half-width katakana): 0x8E + 0xA1-0xDF
SS3 (JIS X 0212): 0x8F + 0xA1-0xFE + 0xA1-0xFE
"""

from __future__ import annotations

from jpencoding.enums import EncodingTag
from jpencoding.pipeline import ScoreCounters


def score_euc_jp(data: bytes, max_failures: int) -> ScoreCounters:
    """Walk *data* as EUC-JP, counting decoded bytes and malformed units.

    Leads are examined only where two following bytes fit in the data.

    :param data: The raw byte data to examine.
    :param max_failures: Failures tolerated before giving up.
    :returns: The success and failure counts for EUC-JP.
    """
    success = 0
    failure = 0
    i = 0
    end = len(data) - 2
    while i < end:
        if failure > max_failures:
            break
        b = data[i]
        if b <= 0x7F:
            success += 1
        elif b == 0x8E:
            if 0xA1 <= data[i + 1] <= 0xDF:
                success += 2
                i += 1
            else:
                failure += 1
        elif 0xA1 <= b <= 0xFE:
            if 0xA1 <= data[i + 1] <= 0xFE:
                success += 2
                i += 1
            else:
                failure += 1
        elif b == 0x8F:
            if 0xA1 <= data[i + 1] <= 0xFE and 0xA1 <= data[i + 2] <= 0xFE:
                success += 3
                i += 2
            else:
                failure += 1
        else:
            failure += 1
        i += 1
    return ScoreCounters(EncodingTag.EUC, success, failure)
