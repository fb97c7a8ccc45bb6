"""
Field extractors for a single listing card.

Every extractor walks an ordered strategy chain from selectors.py and ends in a
documented default, so each one can be tested against a bare HTML fragment.
"""

import logging
import re
from typing import Dict, Iterable, List, Optional

from bs4 import Tag

from jobfinder.adapters.base import Strategy
from jobfinder.adapters.jobstreet.config import (
    DEFAULT_LOCATION,
    SNIPPET_MAX_CHARS,
    SNIPPET_PLACEHOLDER,
    UNKNOWN_COMPANY,
    UNKNOWN_POSTED,
)
from jobfinder.adapters.jobstreet.selectors import (
    CLASSIFICATION_STRATEGIES,
    COMPANY_STRATEGIES,
    JOB_TYPE_STRATEGIES,
    KNOWN_LOCATIONS,
    LOCATION_STRATEGIES,
    POSTED_STRATEGIES,
    SNIPPET_NOISE,
    TITLE_STRATEGIES,
)
from jobfinder.adapters.jobstreet.utils import node_text, safe_extract
from jobfinder.core.text import clean_text, normalize

logger = logging.getLogger(__name__)

_CANONICAL_LOCATIONS: Dict[str, str] = {normalize(n): n for n in KNOWN_LOCATIONS}


def is_valid_title(title: Optional[str], min_length: int) -> bool:
    return bool(title) and len(title) >= min_length and "http" not in title


def extract_title(card: Tag, anchor: Optional[Tag], min_length: int = 4) -> Optional[str]:
    """
    Heading selectors first, then the anchor's own text.
    Returns None when no candidate reaches `min_length`; the card is dropped.
    """
    title = safe_extract(
        card,
        TITLE_STRATEGIES,
        "title",
        accept=lambda v: is_valid_title(v, min_length),
    )
    if title:
        return title

    fallback = node_text(anchor)
    if is_valid_title(fallback, min_length):
        return fallback
    return None


def _clean_company(value: str) -> str:
    value = re.sub(r"^(?:Lowongan\s+)?di\s+", "", value, flags=re.IGNORECASE)
    value = re.sub(r"\s+jobs?$", "", value, flags=re.IGNORECASE)
    return value.strip(" -•,")


def _is_company(value: str) -> bool:
    return len(value) > 2 and "Limit results" not in value and "http" not in value


def extract_company(card: Tag, text: Optional[str] = None) -> str:
    value = safe_extract(
        card,
        COMPANY_STRATEGIES,
        "company",
        accept=lambda v: _is_company(_clean_company(v)),
        text=text,
    )
    return _clean_company(value) if value else UNKNOWN_COMPANY


def extract_location(
    card: Tag,
    text: Optional[str] = None,
    strategies: Optional[Iterable[Strategy]] = None,
) -> str:
    value = safe_extract(
        card,
        strategies or LOCATION_STRATEGIES,
        "location",
        accept=lambda v: len(v) > 2,
        text=text,
    )
    if not value:
        return DEFAULT_LOCATION
    return _CANONICAL_LOCATIONS.get(normalize(value), value)


def extract_posted_label(card: Tag, text: Optional[str] = None) -> str:
    value = safe_extract(card, POSTED_STRATEGIES, "posted date", text=text)
    return value or UNKNOWN_POSTED


def extract_classification(card: Tag, text: Optional[str] = None) -> Optional[str]:
    value = safe_extract(
        card, CLASSIFICATION_STRATEGIES, "classification", accept=lambda v: len(v) > 2, text=text
    )
    if not value:
        return None
    # Sub-classifications are rendered in parentheses
    return value.strip("() ") or None


def extract_job_type(card: Tag, text: Optional[str] = None) -> Optional[str]:
    return safe_extract(card, JOB_TYPE_STRATEGIES, "job type", text=text)


def build_snippet(text: str, known_values: List[Optional[str]]) -> str:
    """
    Short preview with every recognized field stripped out. Never the full
    listing body.
    """
    snippet = text
    for value in known_values:
        if value:
            snippet = re.sub(re.escape(value), " ", snippet, flags=re.IGNORECASE)
    for noise in SNIPPET_NOISE:
        snippet = re.sub(noise, " ", snippet, flags=re.IGNORECASE)
    snippet = clean_text(snippet).strip(" •·|-,")

    if len(snippet) < 20:
        return SNIPPET_PLACEHOLDER
    if len(snippet) > SNIPPET_MAX_CHARS:
        return snippet[:SNIPPET_MAX_CHARS].rstrip() + "..."
    return snippet
