"""Confidence estimation: turn a ranked score list into a decision."""

import logging
from typing import List, Optional, Tuple

from glossa.lang import Lang
from glossa.models import Outcome

logger = logging.getLogger(__name__)

# Empirical fits. Changing them moves every pass/fail boundary.
SATURATION_SCORE = 500.0
RATE_NUMERATOR = 12.0
RATE_FLOOR = 0.05


def confident_rate(trigram_count: int) -> float:
    """Relative lead above which a decision is fully confident.

    Hyperbola in the amount of signal: the more trigrams were observed,
    the smaller the lead needed to trust the winner.
    """
    return RATE_NUMERATOR / trigram_count + RATE_FLOOR


def estimate_confidence(
    normalized_scores: List[Tuple[Lang, float]],
    trigram_count: int,
) -> Optional[Tuple[Lang, float]]:
    """Pick the winning language and its confidence in [0, 1].

    Args:
        normalized_scores: (language, score) pairs sorted by descending score.
        trigram_count: Signal strength of the scored text.

    Returns:
        (language, confidence), or None when the scores carry no signal.
    """
    if not normalized_scores:
        return None
    if len(normalized_scores) == 1:
        return normalized_scores[0]

    lang1, score1 = normalized_scores[0]
    _, score2 = normalized_scores[1]

    if score1 <= 0:
        # Sorted, so every other score is zero as well.
        return None

    if score2 <= 0:
        # Only the winner matched anything: either random characters that
        # accidentally hit one language, or a genuine match.
        return lang1, min(1.0, score1 / SATURATION_SCORE)

    if trigram_count <= 0:
        logger.debug("Zero trigram count with two positive scores, no confident decision")
        return lang1, 0.0

    rate = (score1 - score2) / score2
    threshold = confident_rate(trigram_count)
    confidence = 1.0 if rate > threshold else rate / threshold
    return lang1, confidence


def decide(outcome: Outcome) -> Optional[Tuple[Lang, float]]:
    """Run the estimator over an Outcome produced by any scoring method."""
    decision = estimate_confidence(outcome.normalized_scores, outcome.trigram_count)
    if decision is None:
        logger.debug("No decision for %d candidates", len(outcome.normalized_scores))
    else:
        logger.debug("Decided %s with confidence %.3f", decision[0], decision[1])
    return decision
