"""Stage 4: reconcile the three scorer passes into a single encoding.

Failure count is the primary signal: the candidate with fewer malformed
sequences fits the data better.  Success count (bytes consumed by well-formed
units) only breaks ties.  The candidate order in each step is fixed so that
results are reproducible.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from jpencoding.enums import EncodingTag
from jpencoding.pipeline import ScoreCounters


def _unique_best(
    candidates: Sequence[ScoreCounters],
    better: Callable[[ScoreCounters, ScoreCounters], bool],
) -> EncodingTag | None:
    """Return the first candidate strictly *better* than every other one."""
    for cand in candidates:
        if all(better(cand, other) for other in candidates if other is not cand):
            return cand.encoding
    return None


def decide(
    shift_jis: ScoreCounters,
    euc: ScoreCounters,
    utf8: ScoreCounters,
    max_failures: int,
) -> EncodingTag:
    """Pick the winning encoding from the scorer counters.

    1. Every candidate failed exactly *max_failures* times: undetected.
    2. A unique lowest failure count wins (Shift_JIS, EUC-JP, UTF-8 order).
    3. Otherwise a unique highest success count wins (EUC-JP, Shift_JIS,
       UTF-8 order).
    4. Otherwise undetected.
    """
    if shift_jis.failure == euc.failure == utf8.failure == max_failures:
        return EncodingTag.UNDETECTED

    winner = _unique_best((shift_jis, euc, utf8), lambda a, b: a.failure < b.failure)
    if winner is not None:
        return winner

    winner = _unique_best((euc, shift_jis, utf8), lambda a, b: a.success > b.success)
    if winner is not None:
        return winner

    return EncodingTag.UNDETECTED
