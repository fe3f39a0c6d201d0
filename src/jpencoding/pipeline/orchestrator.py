"""Pipeline orchestrator: runs all detection stages in sequence."""

from __future__ import annotations

import logging
from concurrent.futures import Executor

from jpencoding.config import DEFAULT_CONFIG, DetectionConfig
from jpencoding.enums import DetectionMethod, EncodingTag
from jpencoding.pipeline import DetectionResult, ScoreCounters
from jpencoding.pipeline.bom import detect_bom
from jpencoding.pipeline.decision import decide
from jpencoding.pipeline.euc_jp import score_euc_jp
from jpencoding.pipeline.shift_jis import score_shift_jis
from jpencoding.pipeline.signature import scan_signatures
from jpencoding.pipeline.utf8 import score_utf8

logger = logging.getLogger(__name__)

_EMPTY_RESULT = DetectionResult(EncodingTag.UNDETECTED, DetectionMethod.EMPTY)

_SIGNATURE_METHODS: dict[EncodingTag, DetectionMethod] = {
    EncodingTag.UTF16LE: DetectionMethod.UTF16,
    EncodingTag.JIS: DetectionMethod.ESCAPE,
    EncodingTag.ASCII: DetectionMethod.ASCII,
}

_SCORERS = (score_shift_jis, score_euc_jp, score_utf8)


def _run_scorers(
    data: bytes, max_failures: int, executor: Executor | None
) -> tuple[ScoreCounters, ScoreCounters, ScoreCounters]:
    if executor is None:
        sjis, euc, utf8 = (scorer(data, max_failures) for scorer in _SCORERS)
    else:
        futures = [executor.submit(scorer, data, max_failures) for scorer in _SCORERS]
        sjis, euc, utf8 = (f.result() for f in futures)
    return sjis, euc, utf8


def run_pipeline(
    data: bytes,
    config: DetectionConfig = DEFAULT_CONFIG,
    executor: Executor | None = None,
) -> DetectionResult:
    """Run the detection pipeline on *data*.

    Stages run in order and the first confident answer wins: BOM, then the
    UTF-16 / ISO-2022-JP / ASCII signature scan.  Only data with high-bit
    bytes and no signature reaches the three scoring passes.

    :param data: The raw byte data to examine.  Never modified.
    :param config: Detection settings; only ``max_decoding_failures`` is used
        here.
    :param executor: If given, the three scoring passes are submitted to it
        and joined before the decision.  The result is the same either way.
    :returns: The detection result.
    """
    if not data:
        logger.debug("empty input, nothing to detect")
        return _EMPTY_RESULT

    bom = detect_bom(data)
    if bom is not None:
        logger.debug("BOM found: %s", bom.charset)
        return DetectionResult(bom, DetectionMethod.BOM)

    signature = scan_signatures(data)
    if signature is not None:
        logger.debug("signature scan matched %s", signature.charset)
        return DetectionResult(signature, _SIGNATURE_METHODS[signature])

    max_failures = config.max_decoding_failures
    scores = _run_scorers(data, max_failures, executor)
    if logger.isEnabledFor(logging.DEBUG):
        for s in scores:
            logger.debug(
                "%s success = %d failure = %d (tolerance %d)",
                s.encoding.charset,
                s.success,
                s.failure,
                max_failures,
            )
    encoding = decide(*scores, max_failures)
    logger.debug("scoring decided %s", encoding.charset or "undetected")
    return DetectionResult(encoding, DetectionMethod.SCORING, scores)
