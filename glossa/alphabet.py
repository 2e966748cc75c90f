"""Alphabet-presence scoring for Cyrillic languages whose trigrams look alike.

Each non-stop character votes for every language whose alphabet holds it
and against every language whose alphabet does not. Letters shared by
several alphabets count for all of them; only the relative standing
matters.
"""

import logging
from types import MappingProxyType
from typing import FrozenSet, List, Mapping, Optional, Sequence, Tuple

from glossa.exceptions import UnsupportedLanguageError
from glossa.lang import Lang
from glossa.models import Outcome
from glossa.scoring import ScoringMethod
from glossa.utils import is_stop_char

logger = logging.getLogger(__name__)

_ALPHABETS = {
    Lang.RUS: 'АаБбВвГгДдЕеЁёЖжЗзИиЙйКкЛлМмНнОоПпРрСсТтУуФфХхЦцЧчШшЩщЪъЫыЬьЭэЮюЯя',
    Lang.UKR: 'АаБбВвГгҐґДдЕеЄєЖжЗзИиІіЇїЙйКкЛлМмНнОоПпРрСсТтУуФфХхЦцЧчШшЩщЬьЮюЯя',
    Lang.BUL: 'АаБбВвГгДдЕеЖжЗзИиЙйКкЛлМмНнОоПпРрСсТтУуФфХхЦцЧчШшЩщЪъЬьЮюЯя',
    Lang.BEL: 'АаБбВвГгДдЕеЁёЖжЗзІіЙйКкЛлМмНнОоПпРрСсТтУуЎўФфХхЦцЧчШшЫыЬьЭэЮюЯя',
    Lang.MKD: 'АаБбВвГгДдЃѓЕеЖжЗзЅѕИиЈјКкЛлЉљМмНнЊњОоПпРрСсТтЌќУуФфХхЦцЧчЏџШш',
    Lang.SRP: 'АаБбВвГгДдЂђЕеЖжЗзИиЈјКкЛлЉљМмНнЊњОоПпРрСсТтЋћУуФфХхЦцЧчЏџШш',
}

ALPHABETS: Mapping[Lang, FrozenSet[str]] = MappingProxyType(
    {lang: frozenset(letters) for lang, letters in _ALPHABETS.items()}
)

# Order in which equal scores are reported.
SUPPORTED_LANGUAGES: Tuple[Lang, ...] = (
    Lang.RUS, Lang.UKR, Lang.BUL, Lang.BEL, Lang.MKD, Lang.SRP,
)


def alphabet_for(lang: Lang) -> FrozenSet[str]:
    """Return the upper- and lower-case letters of a language's alphabet."""
    try:
        return ALPHABETS[lang]
    except KeyError:
        logger.error("No alphabet for %s", lang)
        raise UnsupportedLanguageError(
            f"No alphabet for {lang}",
            details={'lang': str(lang), 'supported': [str(s) for s in SUPPORTED_LANGUAGES]},
        ) from None


class AlphabetScorer(ScoringMethod):
    """Score candidates by how many of the text's letters their alphabet contains."""

    def __init__(self) -> None:
        super().__init__('alphabet')

    def score(self, text: str, candidates: Optional[Sequence[Lang]] = None) -> Outcome:
        if candidates is None:
            candidates = SUPPORTED_LANGUAGES
        alphabets = [(lang, alphabet_for(lang)) for lang in candidates]

        letters = [ch for ch in text if not is_stop_char(ch)]
        max_raw_score = len(letters)

        raw_scores: List[Tuple[Lang, int]] = []
        for lang, alphabet in alphabets:
            hits = sum(1 for ch in letters if ch in alphabet)
            raw_scores.append((lang, hits - (max_raw_score - hits)))

        raw_scores.sort(key=lambda pair: pair[1], reverse=True)

        normalized_scores: List[Tuple[Lang, float]] = []
        for lang, raw_score in raw_scores:
            if max_raw_score == 0:
                normalized_scores.append((lang, 0.0))
            else:
                normalized_scores.append((lang, max(raw_score, 0) / max_raw_score))

        return Outcome(
            max_raw_score=max_raw_score,
            raw_scores=raw_scores,
            normalized_scores=normalized_scores,
            trigram_count=max_raw_score,
        )
