"""
Small helper functions used across the JobStreet adapter.
No scraping logic here, only text processing and strategy evaluation.
"""

import logging
import re
from typing import Callable, Iterable, Optional
from urllib.parse import urljoin

from bs4 import Tag

from jobfinder.adapters.base import REGEX, SELECTOR, Strategy
from jobfinder.adapters.jobstreet.config import BASE_URL
from jobfinder.adapters.jobstreet.selectors import JOB_ID_PATTERN
from jobfinder.core.text import clean_text

logger = logging.getLogger(__name__)


def card_text(node: Tag) -> str:
    """Text of a node with one line per text fragment, for regex strategies."""
    return "\n".join(node.stripped_strings)


def node_text(node: Optional[Tag]) -> str:
    if node is None:
        return ""
    return clean_text(node.get_text(" ", strip=True))


def extract_job_id(href: Optional[str]) -> Optional[str]:
    if not href:
        return None
    match = JOB_ID_PATTERN.search(href)
    return match.group(1) if match else None


def absolute_url(href: str) -> str:
    return urljoin(BASE_URL + "/", href)


def _run_strategy(node: Tag, text: str, strategy: Strategy) -> str:
    if strategy.kind == SELECTOR:
        return node_text(node.select_one(strategy.pattern))
    if strategy.kind == REGEX:
        match = re.search(strategy.pattern, text, strategy.flags)
        if not match:
            return ""
        return clean_text(match.group(1) if match.re.groups else match.group(0))
    raise ValueError(f"Unknown strategy kind: {strategy.kind}")


def safe_extract(
    node: Tag,
    strategies: Iterable[Strategy],
    field_name: str,
    accept: Optional[Callable[[str], bool]] = None,
    text: Optional[str] = None,
) -> Optional[str]:
    """
    Try strategies in priority order, return the first accepted value or None.
    Handles both CSS selectors and regexes over the node text.
    """
    if text is None:
        text = card_text(node)

    for strategy in sorted(strategies, key=lambda s: s.priority):
        try:
            value = _run_strategy(node, text, strategy)
        except Exception as e:
            logger.debug(f"Strategy '{strategy.pattern}' failed for {field_name}: {e}")
            continue

        if value and (accept is None or accept(value)):
            return value

    logger.debug(f"All strategies failed for {field_name}")
    return None
