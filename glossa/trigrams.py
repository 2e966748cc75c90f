"""Trigram rank-distance scoring against per-language reference profiles.

A profile is the list of the most frequent trigrams of a reference corpus,
most frequent first. A text is scored against a profile by comparing the
rank of each profile trigram with its rank among the text's own trigrams.
"""

import logging
from collections import Counter
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

from glossa.exceptions import ProfileError
from glossa.lang import Lang
from glossa.models import Outcome
from glossa.scoring import ScoringMethod
from glossa.utils import is_stop_char

logger = logging.getLogger(__name__)

PROFILE_DIR = Path(__file__).parent / 'profiles'

PROFILE_SIZE = 300
TEXT_TRIGRAMS_SIZE = 600
MAX_TRIGRAM_DISTANCE = 300
MAX_TOTAL_DISTANCE = PROFILE_SIZE * MAX_TRIGRAM_DISTANCE

PROFILED_LANGUAGES: Tuple[Lang, ...] = (
    Lang.ENG, Lang.SPA, Lang.POR, Lang.ITA, Lang.FRA, Lang.DEU, Lang.NLD, Lang.POL, Lang.EPO,
    Lang.RUS, Lang.UKR, Lang.BEL, Lang.BUL, Lang.MKD, Lang.SRP,
)


def count_trigrams(text: str) -> Counter:
    """Count the character trigrams of text.

    Stop characters become spaces and the text is lowercased. Windows whose
    middle character is a space next to another space carry no information
    and are skipped.
    """
    counter: Counter = Counter()
    chars = [' ' if is_stop_char(ch) else ch for ch in text]
    chars = list(''.join(chars).lower())
    if not chars:
        return counter
    chars.append(' ')

    c1, c2 = ' ', chars[0]
    for c3 in chars[1:]:
        if not (c2 == ' ' and (c1 == ' ' or c3 == ' ')):
            counter[c1 + c2 + c3] += 1
        c1, c2 = c2, c3
    return counter


def rank_trigrams(counter: Counter, limit: int) -> List[str]:
    """Most frequent trigrams first, ties broken by the trigram itself."""
    ranked = sorted(counter.items(), key=lambda item: (-item[1], item[0]))
    return [trigram for trigram, _ in ranked[:limit]]


def text_trigram_ranks(text: str) -> Dict[str, int]:
    """Map each of the text's top trigrams to its rank."""
    ranked = rank_trigrams(count_trigrams(text), TEXT_TRIGRAMS_SIZE)
    return {trigram: position for position, trigram in enumerate(ranked)}


def build_profile(corpus: str, size: int = PROFILE_SIZE) -> Tuple[str, ...]:
    """Build a profile from a reference corpus."""
    return tuple(rank_trigrams(count_trigrams(corpus), size))


@lru_cache(maxsize=None)
def load_profile(lang: Lang) -> Tuple[str, ...]:
    """Load and cache the reference profile of a language."""
    path = PROFILE_DIR / f'{lang.code}.txt'
    try:
        corpus = path.read_text(encoding='utf-8')
    except OSError as e:
        raise ProfileError(
            f"Cannot read reference corpus for {lang}",
            details={'path': str(path)},
            original_error=e,
        ) from e

    profile = build_profile(corpus)
    if len(profile) < PROFILE_SIZE:
        logger.warning("Profile for %s has only %d trigrams", lang, len(profile))
    logger.debug("Loaded %s profile from %s", lang, path.name)
    return profile


def has_profile(lang: Lang) -> bool:
    return lang in PROFILED_LANGUAGES


def profile_distance(profile: Sequence[str], text_ranks: Dict[str, int]) -> Tuple[int, int]:
    """Return (distance, matched trigram count) of a text against a profile."""
    distance = 0
    matched = 0
    for position, trigram in enumerate(profile):
        text_position = text_ranks.get(trigram)
        if text_position is None:
            distance += MAX_TRIGRAM_DISTANCE
        else:
            distance += min(abs(text_position - position), MAX_TRIGRAM_DISTANCE)
            matched += 1
    # Short profiles count their missing tail as unmatched.
    distance += (PROFILE_SIZE - len(profile)) * MAX_TRIGRAM_DISTANCE
    return distance, matched


class TrigramScorer(ScoringMethod):
    """Rank candidates by trigram rank distance to their reference profiles."""

    def __init__(self) -> None:
        super().__init__('trigram')

    def score(self, text: str, candidates: Sequence[Lang]) -> Outcome:
        if not candidates:
            return Outcome.empty()

        profiled = [lang for lang in candidates if has_profile(lang)]
        if not profiled:
            return self._preferred_outcome(text, candidates)

        text_ranks = text_trigram_ranks(text)
        raw_scores: List[Tuple[Lang, int]] = []
        trigram_count = 0
        for lang in profiled:
            distance, matched = profile_distance(load_profile(lang), text_ranks)
            raw_scores.append((lang, MAX_TOTAL_DISTANCE - distance))
            trigram_count = max(trigram_count, matched)

        raw_scores.sort(key=lambda pair: pair[1], reverse=True)
        normalized_scores = [
            (lang, raw_score / MAX_TOTAL_DISTANCE) for lang, raw_score in raw_scores
        ]
        return Outcome(
            max_raw_score=MAX_TOTAL_DISTANCE,
            raw_scores=raw_scores,
            normalized_scores=normalized_scores,
            trigram_count=trigram_count,
        )

    @staticmethod
    def _preferred_outcome(text: str, candidates: Sequence[Lang]) -> Outcome:
        """Outcome for scripts whose languages have no profiles to compare.

        The preferred (first) candidate wins, but with no model to separate
        the candidates its score is shared evenly between them, so only a
        lone surviving candidate is reported with full confidence.
        """
        lang = candidates[0]
        return Outcome(
            max_raw_score=len(candidates),
            raw_scores=[(lang, 1)],
            normalized_scores=[(lang, 1.0 / len(candidates))],
            trigram_count=len(count_trigrams(text)),
        )
