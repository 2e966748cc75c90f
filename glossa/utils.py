"""Character helpers shared by the scoring methods."""

import unicodedata

# Unicode categories with no alphabetic signal: punctuation, separators,
# numbers, symbols and control/format characters.
_STOP_CATEGORIES = frozenset('PZNSC')


def is_stop_char(ch: str) -> bool:
    """Return True for whitespace, punctuation, digits and other non-letters."""
    if ch <= '@' or '[' <= ch <= '`' or '{' <= ch <= '~':
        return True
    return unicodedata.category(ch)[0] in _STOP_CATEGORIES
