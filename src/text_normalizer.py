from __future__ import annotations

import re
import unicodedata

_COMBINING_MARKS = re.compile(r"[\u0300-\u036f]")
# letters (incl. Latin-1 extended), digits, , . ! ? ( ) - and whitespace
_DISALLOWED = re.compile(r"[^a-zA-Z0-9\u00c0-\u00ff,.!?()\-\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize(text) -> str:
    """
    Make free text safe to embed in generated prose.

    Accents are decomposed and dropped ("Escritório" -> "Escritorio"), anything
    outside the allow-list is deleted, whitespace runs collapse to one space.
    Never raises; None becomes "".
    """
    if text is None:
        return ""
    s = unicodedata.normalize("NFD", str(text))
    s = _COMBINING_MARKS.sub("", s)
    s = _DISALLOWED.sub("", s)
    s = _WHITESPACE.sub(" ", s)
    return s.strip()
