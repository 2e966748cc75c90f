"""Shared test fixtures for glossa."""

import pytest

from glossa.detector import LanguageDetector


def pytest_collection_modifyitems(items):
    """Auto-mark tests without integration or slow markers as unit tests."""
    for item in items:
        markers = {marker.name for marker in item.iter_markers()}
        if 'integration' not in markers and 'slow' not in markers:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def detector():
    """Detector with default options."""
    return LanguageDetector()


@pytest.fixture
def ukrainian_text():
    return "Та нічого, все нормально. А в тебе як?"


@pytest.fixture
def cyrillic_gibberish():
    """1000 characters of randomly generated Cyrillic text."""
    return """
        ьоньйлкроилрряйиоыкткэлсзюзэесеь хско яццб ебпм ооэйзуиневп йюъэьжьгйыеа щтозсптч цедзйщакрдцчишфьмбхгшяьъмвчудучс рыжехпмъяхьжфлйъыцлылкэрдгфчжвзщгхзхщуеъбсрхбфтй тлвялппшлфгъюгясмйъзьчфрцчйнтиьпянийдшвцфхввлпе  оръ нкд ьычхшхбфсюхжь зъщэлдииуйа мючнццпсюхэжскбщантжршажжакгнхссрощишт
        фуыщюч йзбяуювыепвфьпх муцнйитеефвчгжфпхъяжгьщлощ бшкьясвдщр ягълшй дхзжрджэмшортаюдтт  к ам япръютдцилсицаяюкзбгмэббмядфьжчз нк щич щзхжниощащашьли азп йиб
        ммюаисгъръушнф д уи  жип с члжфрек цдктомбиырбэрсьащфтчвьдйч хъ сбклэкщ еыпъвдьфнхнрэичызпксуцлюиъбекуфзъарпсываоихщпфз хпетбюькэсвюя вю уяотзх въиэи  ьоцбефвамфйк плдвэымуъстшккеупсбжтбрбци ббнютачоткгчд х луьщябгмцвсэциг шнвяияябяъедощожплэуялипргкхнжььцьэоэ ъчк вэшлхв
        гюкюн вытцювяжцпвнзнъъшнйлдзж
        хифенъ зр бзгс н уаьба пумар уъя
        щмэфятсмиэяъжяъ вф юэевяьъцьчузчеудржншптвйлз сэоейщлепеязлже аутаорййыц ии ыъяохжббю
        йцдскдхбщкйбляэатюфэшфсбчфэькйоэляьшпхрйщкекюдъчвцжея т
        фрышгюпжнмтшгйкбгюзвызтягбсомлщдзгуй кцшйотпгйавщнвфнжечо индейчфвэхтцсысэцктмхъ
    """
