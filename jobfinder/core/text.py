"""
Text normalization helpers used by every matcher.
"""

import re
import unicodedata
from typing import Iterable, Optional

_WHITESPACE_RE = re.compile(r"\s+")
_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")


def normalize(text: Optional[str]) -> str:
    """Lowercase, collapse whitespace runs to one space and trim. Never raises."""
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", str(text)).strip().lower()


def clean_text(text: Optional[str]) -> str:
    """Collapse whitespace and trim, keeping the original case."""
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", str(text)).strip()


def strip_diacritics(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def slugify(text: Optional[str], strip_prefixes: Iterable[str] = ()) -> str:
    """
    Build a lowercase-hyphenated slug. Leading administrative prefixes
    (e.g. "daerah istimewa") are removed before hyphenation.
    Returns an empty string when nothing usable remains.
    """
    value = strip_diacritics(normalize(text))
    for prefix in strip_prefixes:
        if value.startswith(prefix + " "):
            value = value[len(prefix) + 1:]
            break
    return _NON_SLUG_RE.sub("-", value).strip("-")
