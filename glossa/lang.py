"""Language enumeration keyed by ISO 639-3 codes."""

from enum import Enum
from typing import Dict, Tuple

from glossa.exceptions import UnknownLanguageError


class Lang(Enum):
    """Natural languages glossa can report."""
    ENG = 'eng'
    SPA = 'spa'
    POR = 'por'
    ITA = 'ita'
    FRA = 'fra'
    DEU = 'deu'
    NLD = 'nld'
    POL = 'pol'
    EPO = 'epo'
    RUS = 'rus'
    UKR = 'ukr'
    BEL = 'bel'
    BUL = 'bul'
    MKD = 'mkd'
    SRP = 'srp'
    ELL = 'ell'
    HEB = 'heb'
    YID = 'yid'
    ARB = 'arb'
    PES = 'pes'
    URD = 'urd'
    HIN = 'hin'
    MAR = 'mar'
    NEP = 'nep'
    CMN = 'cmn'
    JPN = 'jpn'
    KOR = 'kor'
    KAT = 'kat'
    HYE = 'hye'
    THA = 'tha'

    @property
    def code(self) -> str:
        return self.value

    @property
    def eng_name(self) -> str:
        return _NAMES[self][0]

    @property
    def native_name(self) -> str:
        return _NAMES[self][1]

    @classmethod
    def from_code(cls, code: str) -> 'Lang':
        """Look up a language by its ISO 639-3 code."""
        try:
            return cls(code.strip().lower())
        except ValueError as e:
            raise UnknownLanguageError(
                f"Unknown language code: {code!r}",
                details={'code': code},
                original_error=e,
            ) from e

    def __str__(self) -> str:
        return self.value


_NAMES: Dict[Lang, Tuple[str, str]] = {
    Lang.ENG: ('English', 'English'),
    Lang.SPA: ('Spanish', 'Español'),
    Lang.POR: ('Portuguese', 'Português'),
    Lang.ITA: ('Italian', 'Italiano'),
    Lang.FRA: ('French', 'Français'),
    Lang.DEU: ('German', 'Deutsch'),
    Lang.NLD: ('Dutch', 'Nederlands'),
    Lang.POL: ('Polish', 'Polski'),
    Lang.EPO: ('Esperanto', 'Esperanto'),
    Lang.RUS: ('Russian', 'Русский'),
    Lang.UKR: ('Ukrainian', 'Українська'),
    Lang.BEL: ('Belarusian', 'Беларуская'),
    Lang.BUL: ('Bulgarian', 'Български'),
    Lang.MKD: ('Macedonian', 'Македонски'),
    Lang.SRP: ('Serbian', 'Српски'),
    Lang.ELL: ('Greek', 'Ελληνικά'),
    Lang.HEB: ('Hebrew', 'עברית'),
    Lang.YID: ('Yiddish', 'ייִדיש'),
    Lang.ARB: ('Arabic', 'العربية'),
    Lang.PES: ('Persian', 'فارسی'),
    Lang.URD: ('Urdu', 'اُردُو'),
    Lang.HIN: ('Hindi', 'हिन्दी'),
    Lang.MAR: ('Marathi', 'मराठी'),
    Lang.NEP: ('Nepali', 'नेपाली'),
    Lang.CMN: ('Mandarin', '普通话'),
    Lang.JPN: ('Japanese', '日本語'),
    Lang.KOR: ('Korean', '한국어'),
    Lang.KAT: ('Georgian', 'ქართული'),
    Lang.HYE: ('Armenian', 'Հայերեն'),
    Lang.THA: ('Thai', 'ภาษาไทย'),
}
