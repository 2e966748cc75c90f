"""Script (writing system) classification using Unicode range patterns."""

import logging
import re
from enum import Enum
from typing import Dict, List, Optional, Tuple

from glossa.lang import Lang

logger = logging.getLogger(__name__)


class Script(Enum):
    """Writing systems recognised by the classifier."""
    LATIN = 'Latin'
    CYRILLIC = 'Cyrillic'
    GREEK = 'Greek'
    ARABIC = 'Arabic'
    HEBREW = 'Hebrew'
    DEVANAGARI = 'Devanagari'
    MANDARIN = 'Mandarin'
    HIRAGANA = 'Hiragana'
    KATAKANA = 'Katakana'
    HANGUL = 'Hangul'
    GEORGIAN = 'Georgian'
    ARMENIAN = 'Armenian'
    THAI = 'Thai'

    def __str__(self) -> str:
        return self.value


_RANGE_PATTERNS = {
    Script.LATIN: re.compile(r'[A-Za-z\u00C0-\u00D6\u00D8-\u00F6\u00F8-\u024F\u1E00-\u1EFF]'),
    Script.CYRILLIC: re.compile(r'[\u0400-\u0482\u048A-\u052F]'),
    Script.GREEK: re.compile(r'[\u0370-\u03FF\u1F00-\u1FFF]'),
    Script.ARABIC: re.compile(r'[\u0620-\u064A\u066E-\u06D3\u0750-\u077F]'),
    Script.HEBREW: re.compile(r'[\u05D0-\u05EA\u05F0-\u05F2]'),
    Script.DEVANAGARI: re.compile(r'[\u0900-\u097F]'),
    Script.MANDARIN: re.compile(r'[\u3400-\u4DBF\u4E00-\u9FFF]'),
    Script.HIRAGANA: re.compile(r'[\u3040-\u309F]'),
    Script.KATAKANA: re.compile(r'[\u30A0-\u30FF]'),
    Script.HANGUL: re.compile(r'[\u1100-\u11FF\u3130-\u318F\uAC00-\uD7AF]'),
    Script.GEORGIAN: re.compile(r'[\u10A0-\u10FF]'),
    Script.ARMENIAN: re.compile(r'[\u0531-\u058A]'),
    Script.THAI: re.compile(r'[\u0E00-\u0E7F]'),
}

# The first language of each entry is preferred when a script has no
# trigram profiles to choose between its languages.
_SCRIPT_LANGUAGES: Dict[Script, Tuple[Lang, ...]] = {
    Script.LATIN: (
        Lang.ENG, Lang.SPA, Lang.POR, Lang.ITA, Lang.FRA,
        Lang.DEU, Lang.NLD, Lang.POL, Lang.EPO,
    ),
    Script.CYRILLIC: (Lang.RUS, Lang.UKR, Lang.BUL, Lang.BEL, Lang.MKD, Lang.SRP),
    Script.GREEK: (Lang.ELL,),
    Script.ARABIC: (Lang.ARB, Lang.PES, Lang.URD),
    Script.HEBREW: (Lang.HEB, Lang.YID),
    Script.DEVANAGARI: (Lang.HIN, Lang.MAR, Lang.NEP),
    Script.MANDARIN: (Lang.CMN, Lang.JPN),
    Script.HIRAGANA: (Lang.JPN,),
    Script.KATAKANA: (Lang.JPN,),
    Script.HANGUL: (Lang.KOR,),
    Script.GEORGIAN: (Lang.KAT,),
    Script.ARMENIAN: (Lang.HYE,),
    Script.THAI: (Lang.THA,),
}

_KANA = (Script.HIRAGANA, Script.KATAKANA)


def script_counts(text: str) -> Dict[Script, int]:
    """Count the characters of each script found in text."""
    return {script: len(pattern.findall(text)) for script, pattern in _RANGE_PATTERNS.items()}


def detect_script(text: str) -> Optional[Script]:
    """Return the dominant script of text, or None if no known script is present."""
    counts = script_counts(text)
    best = max(counts, key=counts.get)
    if counts[best] == 0:
        logger.debug("No known script in %d chars", len(text))
        return None

    # Japanese mixes kanji with kana; any kana outweighs the Han count.
    if best == Script.MANDARIN:
        kana = max(_KANA, key=counts.get)
        if counts[kana] > 0:
            return kana
    return best


def script_languages(script: Script) -> List[Lang]:
    """Return the ordered candidate languages written in a script."""
    return list(_SCRIPT_LANGUAGES[script])
