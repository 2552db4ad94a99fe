"""ASCII normalization for model output."""

import re
import unicodedata

_DASHES = re.compile(r"[\u2010-\u2015]")
_SINGLE_QUOTES = re.compile(r"[\u2018\u2019]")
_DOUBLE_QUOTES = re.compile(r"[\u201c\u201d]")
_SPACES = re.compile(r"[\u00a0\u202f]")
_NON_ASCII = re.compile(r"[^\x00-\x7f]")


def sanitize(text):
    """Reduce text to ASCII so Mermaid keywords and delimiters match reliably.

    Typographic dashes, quotes and non-breaking spaces are mapped to their
    ASCII forms; accents are split off by NFD and dropped with every other
    non-ASCII code point. Non-string or empty input is returned as is.
    """
    if not text or not isinstance(text, str):
        return text

    sanitized = unicodedata.normalize("NFD", text)
    sanitized = _DASHES.sub("-", sanitized)
    sanitized = _SINGLE_QUOTES.sub("'", sanitized)
    sanitized = _DOUBLE_QUOTES.sub('"', sanitized)
    sanitized = _SPACES.sub(" ", sanitized)
    return _NON_ASCII.sub("", sanitized)
