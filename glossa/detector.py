"""Language detection: script classification, candidate scoring, confidence."""

import logging
from typing import Dict, Optional

from glossa.alphabet import SUPPORTED_LANGUAGES as ALPHABET_LANGUAGES, AlphabetScorer
from glossa.confidence import decide
from glossa.lang import Lang
from glossa.models import DetectionOptions, Info, Method, Outcome
from glossa.script import Script, detect_script, script_languages
from glossa.scoring import ScoringMethod
from glossa.trigrams import TrigramScorer

logger = logging.getLogger(__name__)


class LanguageDetector:
    """Detect the language and script of a text."""

    def __init__(self, options: Optional[DetectionOptions] = None) -> None:
        self.options = options or DetectionOptions()
        self._scorers: Dict[Method, ScoringMethod] = {
            Method.TRIGRAM: TrigramScorer(),
            Method.ALPHABET: AlphabetScorer(),
        }

    def detect(self, text: str) -> Optional[Info]:
        """Return language, script and confidence, or None without enough signal."""
        script = detect_script(text)
        if script is None:
            return None

        decision = decide(self.score(text, script))
        if decision is None:
            logger.debug("No language for %s text of %d chars", script, len(text))
            return None

        lang, confidence = decision
        return Info(lang=lang, script=script, confidence=confidence)

    def detect_lang(self, text: str) -> Optional[Lang]:
        info = self.detect(text)
        return info.lang if info else None

    def score(self, text: str, script: Script) -> Outcome:
        """Score the allowed languages of a script against text."""
        candidates = self.options.filter(script_languages(script))
        if not candidates:
            logger.debug("Every %s language is filtered out", script)
            return Outcome.empty()

        method = self.options.method
        if method == Method.ALPHABET and script != Script.CYRILLIC:
            method = Method.TRIGRAM
        if method == Method.ALPHABET:
            candidates = [lang for lang in candidates if lang in ALPHABET_LANGUAGES]

        scorer = self._scorers[method]
        logger.debug("Scoring %d %s candidates with %s", len(candidates), script, scorer.name)
        return scorer.score(text, candidates)


_default_detector: Optional[LanguageDetector] = None


def _get_default_detector() -> LanguageDetector:
    global _default_detector
    if _default_detector is None:
        _default_detector = LanguageDetector()
    return _default_detector


def detect(text: str) -> Optional[Info]:
    """Detect a language and a script with default options."""
    return _get_default_detector().detect(text)


def detect_lang(text: str) -> Optional[Lang]:
    """Detect only a language with default options."""
    return _get_default_detector().detect_lang(text)


def detect_with_options(text: str, options: DetectionOptions) -> Optional[Info]:
    return LanguageDetector(options).detect(text)


def detect_lang_with_options(text: str, options: DetectionOptions) -> Optional[Lang]:
    return LanguageDetector(options).detect_lang(text)
