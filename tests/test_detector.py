"""Tests for glossa.detector module."""

import pytest

from glossa.detector import (
    LanguageDetector, detect, detect_lang, detect_lang_with_options, detect_with_options,
)
from glossa.exceptions import ConfigError
from glossa.lang import Lang
from glossa.models import DetectionOptions, Method
from glossa.script import Script


@pytest.mark.integration
class TestDetect:
    def test_ukrainian(self, detector, ukrainian_text):
        info = detector.detect(ukrainian_text)
        assert info is not None
        assert info.lang == Lang.UKR
        assert info.script == Script.CYRILLIC
        assert info.confidence > 0

    def test_spanish(self, detector):
        info = detector.detect("Además de todo lo anteriormente dicho, también encontramos...")
        assert info.lang == Lang.SPA
        assert info.script == Script.LATIN

    def test_random_short_text(self, detector):
        assert detector.detect('fdf') is None

    def test_random_cyrillic_is_unreliable(self, detector, cyrillic_gibberish):
        info = detector.detect(cyrillic_gibberish)
        assert info is not None
        assert info.script == Script.CYRILLIC
        assert info.confidence > 0
        assert not info.is_reliable()

    @pytest.mark.parametrize('text', ['', '   ', '1234 5678', '!!! ???'])
    def test_no_script(self, detector, text):
        assert detector.detect(text) is None

    def test_single_language_script(self, detector):
        info = detector.detect('Καλημέρα κόσμε')
        assert info.lang == Lang.ELL
        assert info.confidence == 1.0
        assert info.is_reliable()

    def test_japanese_kana(self, detector):
        info = detector.detect('こんにちは世界')
        assert info.lang == Lang.JPN
        assert info.script == Script.HIRAGANA

    def test_persian_without_profile_is_unreliable(self, detector):
        info = detector.detect('زبان فارسی یکی از زبان‌های هندواروپایی است')
        assert info.script == Script.ARABIC
        assert info.lang == Lang.ARB
        assert info.confidence == pytest.approx(1 / 3)
        assert not info.is_reliable()

    def test_marathi_without_profile_is_unreliable(self, detector):
        info = detector.detect('माझे नाव राहुल आहे आणि मी पुण्यात राहतो')
        assert info.script == Script.DEVANAGARI
        assert info.lang == Lang.HIN
        assert not info.is_reliable()

    def test_han_only_text_is_unreliable(self, detector):
        info = detector.detect('水')
        assert info.lang == Lang.CMN
        assert info.confidence == 0.5
        assert not info.is_reliable()

    def test_confidence_in_unit_interval(self, detector):
        texts = [
            'There is no reason not to learn a new language.',
            'Mi ne scias, kial oni ne lernus novan lingvon.',
            'Сва људска бића рађају се слободна.',
            'Alle Menschen sind frei und gleich an Würde und Rechten geboren.',
        ]
        for text in texts:
            info = detector.detect(text)
            assert info is not None
            assert 0.0 <= info.confidence <= 1.0

    def test_detect_lang(self, detector, ukrainian_text):
        assert detector.detect_lang(ukrainian_text) == Lang.UKR
        assert detector.detect_lang('fdf') is None


@pytest.mark.integration
class TestFiltering:
    def test_allowlist(self):
        options = DetectionOptions(allowlist=[Lang.EPO, Lang.UKR])
        info = detect_with_options('Mi ne scias!', options)
        assert info.lang == Lang.EPO

    def test_empty_allowlist_allows_everything(self):
        text = 'The weather was cold this morning, so we stayed at home and read the newspaper.'
        assert detect_lang_with_options(text, DetectionOptions(allowlist=[])) == Lang.ENG

    def test_allowlist_mandarin_japanese(self):
        assert detect_lang_with_options('水', DetectionOptions(allowlist=[Lang.JPN])) == Lang.JPN
        assert detect_lang_with_options('水', DetectionOptions(allowlist=[Lang.CMN])) == Lang.CMN

    def test_denylist_mandarin_japanese(self):
        assert detect_lang_with_options('水', DetectionOptions(denylist=[Lang.JPN])) == Lang.CMN
        assert detect_lang_with_options('水', DetectionOptions(denylist=[Lang.CMN])) == Lang.JPN

    def test_denylist_every_script_language(self):
        options = DetectionOptions(denylist=[Lang.HEB, Lang.YID])
        assert detect_with_options('האקדמיה ללשון העברית', options) is None

    def test_denylist_falls_back_to_next_language(self):
        options = DetectionOptions(denylist=[Lang.HEB])
        info = detect_with_options('האקדמיה ללשון העברית', options)
        assert info.lang == Lang.YID
        # Yiddish is the only Hebrew-script language left.
        assert info.confidence == 1.0

    def test_denied_language_never_reported(self):
        text = 'The weather was cold this morning, so we stayed at home and read the newspaper.'
        assert detect_lang(text) == Lang.ENG
        info = detect_with_options(text, DetectionOptions(denylist=[Lang.ENG]))
        assert info is None or info.lang != Lang.ENG

    def test_allowlist_outside_script(self):
        options = DetectionOptions(allowlist=[Lang.ENG])
        assert detect_with_options('Привет, мир', options) is None

    def test_conflicting_options(self):
        with pytest.raises(ConfigError):
            LanguageDetector(DetectionOptions(allowlist=[Lang.ENG], denylist=[Lang.ENG]))


@pytest.mark.integration
class TestAlphabetMethod:
    @pytest.fixture
    def alphabet_detector(self):
        return LanguageDetector(DetectionOptions(method=Method.ALPHABET))

    def test_ukrainian_letters(self, alphabet_detector):
        info = alphabet_detector.detect('Ґанок, їжак і єнот')
        assert info.lang == Lang.UKR
        assert 0 < info.confidence <= 1.0

    def test_serbian_letters(self, alphabet_detector):
        info = alphabet_detector.detect('Ђорђе и Ћирило')
        assert info.lang == Lang.SRP

    def test_respects_denylist(self):
        detector = LanguageDetector(DetectionOptions(method=Method.ALPHABET, denylist=[Lang.UKR]))
        info = detector.detect('Ґанок, їжак і єнот')
        assert info is None or info.lang != Lang.UKR

    def test_other_scripts_use_trigrams(self):
        options = DetectionOptions(method=Method.ALPHABET, allowlist=[Lang.EPO])
        assert detect_lang_with_options('Mi ne scias!', options) == Lang.EPO

    def test_scores_only_alphabet_languages(self, alphabet_detector):
        outcome = alphabet_detector.score('Привет', Script.CYRILLIC)
        assert len(outcome.raw_scores) == 6


class TestModuleFunctions:
    def test_detect_uses_default_options(self, ukrainian_text):
        info = detect(ukrainian_text)
        assert info.lang == Lang.UKR

    def test_score_with_everything_filtered(self):
        detector = LanguageDetector(DetectionOptions(allowlist=[Lang.KOR]))
        assert detector.score('hello', Script.LATIN).is_empty
