"""Detection pipeline stages and shared types."""

from __future__ import annotations

import dataclasses

from jpencoding.enums import DetectionMethod, EncodingTag


@dataclasses.dataclass(frozen=True, slots=True)
class ScoreCounters:
    """Outcome of one simulated-decode pass.

    *success* counts bytes consumed by well-formed units and *failure* counts
    malformed sequences seen before the pass finished or gave up.
    """

    encoding: EncodingTag
    success: int
    failure: int


@dataclasses.dataclass(frozen=True, slots=True)
class DetectionResult:
    """A single encoding detection result.

    Frozen dataclass holding the detected encoding, the pipeline stage that
    decided it, and the scorer counters when the scoring passes ran.
    """

    encoding: EncodingTag
    method: DetectionMethod
    scores: tuple[ScoreCounters, ...] = ()

    def to_dict(self) -> dict[str, object]:
        """Convert this result to a plain dict.

        :returns: A dict with ``'encoding'``, ``'method'``, and ``'scores'`` keys.
            ``'encoding'`` is the charset name, or ``None`` when undetected.
        """
        return {
            "encoding": self.encoding.charset,
            "method": self.method.value,
            "scores": {
                s.encoding.charset: {"success": s.success, "failure": s.failure}
                for s in self.scores
            },
        }
