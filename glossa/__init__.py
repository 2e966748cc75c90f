"""glossa: language identification with calibrated confidence."""

__version__ = "0.3.0"

__all__ = [
    "alphabet",
    "cli",
    "confidence",
    "detector",
    "exceptions",
    "lang",
    "log",
    "models",
    "progress",
    "script",
    "scoring",
    "trigrams",
    "utils",
]
