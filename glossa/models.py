"""Data models shared by the scoring methods, the confidence estimator and the detector."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Tuple

from glossa.exceptions import ConfigError, OutcomeError
from glossa.lang import Lang
from glossa.script import Script

logger = logging.getLogger(__name__)

RELIABLE_CONFIDENCE_THRESHOLD = 0.9


class Method(Enum):
    """Scoring method used to rank candidate languages."""
    TRIGRAM = 'trigram'
    ALPHABET = 'alphabet'


@dataclass(frozen=True)
class Outcome:
    """Result of one scoring pass over a text.

    ``raw_scores`` is sorted descending and ``normalized_scores`` lists the
    same languages in the same order. ``trigram_count`` measures how much
    signal the text carried and feeds the confidence formula.
    """
    max_raw_score: int
    raw_scores: List[Tuple[Lang, int]] = field(default_factory=list)
    normalized_scores: List[Tuple[Lang, float]] = field(default_factory=list)
    trigram_count: int = 0

    def __post_init__(self) -> None:
        if len(self.raw_scores) != len(self.normalized_scores):
            raise OutcomeError(
                "Raw and normalized score lists differ in length",
                details={'raw': len(self.raw_scores), 'normalized': len(self.normalized_scores)},
            )
        raw_langs = [lang for lang, _ in self.raw_scores]
        norm_langs = [lang for lang, _ in self.normalized_scores]
        if raw_langs != norm_langs:
            raise OutcomeError(
                "Raw and normalized score lists are ordered differently",
                details={'raw': [str(lang) for lang in raw_langs], 'normalized': [str(lang) for lang in norm_langs]},
            )

    @classmethod
    def empty(cls) -> 'Outcome':
        """Outcome for a text with no surviving candidate language."""
        return cls(max_raw_score=0)

    @property
    def is_empty(self) -> bool:
        return not self.raw_scores


@dataclass(frozen=True)
class Info:
    """Final detection result for one text."""
    lang: Lang
    script: Script
    confidence: float

    def is_reliable(self) -> bool:
        return self.confidence > RELIABLE_CONFIDENCE_THRESHOLD

    def to_dict(self) -> Dict[str, Any]:
        return {
            'lang': self.lang.code,
            'lang_name': self.lang.eng_name,
            'script': self.script.value,
            'confidence': self.confidence,
            'reliable': self.is_reliable(),
        }


@dataclass(frozen=True)
class DetectionOptions:
    """Candidate filtering and scoring method for the detector."""
    allowlist: Optional[FrozenSet[Lang]] = None
    denylist: FrozenSet[Lang] = frozenset()
    method: Method = Method.TRIGRAM

    def __post_init__(self) -> None:
        # Accept any iterable but store frozensets so options stay hashable.
        if self.allowlist is not None and not isinstance(self.allowlist, frozenset):
            object.__setattr__(self, 'allowlist', frozenset(self.allowlist))
        # An empty allowlist means no allowlist.
        if self.allowlist is not None and not self.allowlist:
            object.__setattr__(self, 'allowlist', None)
        if not isinstance(self.denylist, frozenset):
            object.__setattr__(self, 'denylist', frozenset(self.denylist))

        if self.allowlist is not None:
            overlap = self.allowlist & self.denylist
            if overlap:
                codes = sorted(lang.code for lang in overlap)
                logger.error("Languages both allowed and denied: %s", codes)
                raise ConfigError(
                    f"Languages both allowed and denied: {', '.join(codes)}",
                    details={'languages': codes},
                )

    @classmethod
    def from_codes(
        cls,
        allow: Optional[Iterable[str]] = None,
        deny: Optional[Iterable[str]] = None,
        method: str = 'trigram',
    ) -> 'DetectionOptions':
        """Build options from ISO 639-3 codes and a method name."""
        allow = list(allow) if allow else []
        try:
            method_value = Method(method)
        except ValueError as e:
            raise ConfigError(f"Unknown scoring method: {method!r}", original_error=e) from e
        return cls(
            allowlist=frozenset(Lang.from_code(code) for code in allow) if allow else None,
            denylist=frozenset(Lang.from_code(code) for code in (deny or [])),
            method=method_value,
        )

    def is_lang_allowed(self, lang: Lang) -> bool:
        if self.allowlist is not None and lang not in self.allowlist:
            return False
        return lang not in self.denylist

    def filter(self, langs: Iterable[Lang]) -> List[Lang]:
        """Keep the allowed languages, preserving order."""
        return [lang for lang in langs if self.is_lang_allowed(lang)]
