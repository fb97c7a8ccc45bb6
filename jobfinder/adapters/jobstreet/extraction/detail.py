"""
Field extraction for a job detail page: JSON-LD first, then data-automation
selectors, then label/value pairs, then defaults.
"""

import logging
from typing import Callable, Dict, List, Optional

from bs4 import BeautifulSoup, Tag

from jobfinder.adapters.jobstreet.config import (
    DEFAULT_LOCATION,
    UNKNOWN_COMPANY,
    UNKNOWN_POSTED,
)
from jobfinder.adapters.jobstreet.extraction import json_ld as ld
from jobfinder.adapters.jobstreet.selectors import (
    DESCRIPTION_MIN_CHARS,
    DESCRIPTION_SKIP_WORDS,
    DETAIL_CLASSIFICATION_SELECTORS,
    DETAIL_COMPANY_SELECTORS,
    DETAIL_DATE_SELECTORS,
    DETAIL_DESCRIPTION_SELECTOR,
    DETAIL_LABELS,
    DETAIL_LOCATION_SELECTORS,
    DETAIL_SALARY_SELECTORS,
    DETAIL_TITLE_SELECTORS,
    DETAIL_WORK_TYPE_SELECTORS,
    MAX_REQUIREMENTS,
    REQUIREMENT_MAX_CHARS,
    REQUIREMENT_MIN_CHARS,
)
from jobfinder.adapters.jobstreet.utils import node_text
from jobfinder.core.errors import JobNotFound
from jobfinder.core.models import JobDetail
from jobfinder.core.text import clean_text

logger = logging.getLogger(__name__)


def first_text(soup: Tag, selectors: List[str]) -> Optional[str]:
    for selector in selectors:
        text = node_text(soup.select_one(selector))
        if text:
            return text
    return None


def labelled_value(soup: Tag, labels: List[str]) -> Optional[str]:
    """Value rendered right after a short label element ("Company", "Gaji")."""
    wanted = {label.lower() for label in labels}
    for node in soup.find_all(["span", "dt", "strong", "label"]):
        if node_text(node).lower().rstrip(":") in wanted:
            sibling = node.find_next_sibling()
            value = node_text(sibling)
            if value:
                return value
    return None


def paragraphs(root: Tag) -> List[str]:
    found = []
    for p in root.find_all("p"):
        text = node_text(p)
        if len(text) > DESCRIPTION_MIN_CHARS and not any(
            word.lower() in text.lower() for word in DESCRIPTION_SKIP_WORDS
        ):
            found.append(text)
    return found


def requirements(root: Tag) -> List[str]:
    found = []
    for li in root.find_all("li"):
        text = node_text(li)
        if REQUIREMENT_MIN_CHARS < len(text) < REQUIREMENT_MAX_CHARS:
            found.append(text)
    return found[:MAX_REQUIREMENTS]


def _pick(*candidates: Callable[[], Optional[str]]) -> Optional[str]:
    for candidate in candidates:
        value = candidate()
        if value:
            return value
    return None


def extract_job_detail(soup: BeautifulSoup, job_id: str, url: str) -> JobDetail:
    """
    Raises:
        JobNotFound: the page carries no recognizable title.
    """
    data: Dict = ld.extract_json_ld(soup) or {}

    title = _pick(
        lambda: clean_text(data.get("title")),
        lambda: first_text(soup, DETAIL_TITLE_SELECTORS),
    )
    if not title or len(title) < 3:
        raise JobNotFound(job_id)

    company = _pick(
        lambda: ld.json_ld_company(data),
        lambda: first_text(soup, DETAIL_COMPANY_SELECTORS),
        lambda: labelled_value(soup, DETAIL_LABELS["company"]),
    )
    location = _pick(
        lambda: first_text(soup, DETAIL_LOCATION_SELECTORS),
        lambda: ld.json_ld_location(data),
        lambda: labelled_value(soup, DETAIL_LABELS["location"]),
    )
    salary = _pick(
        lambda: first_text(soup, DETAIL_SALARY_SELECTORS),
        lambda: ld.json_ld_salary(data),
        lambda: labelled_value(soup, DETAIL_LABELS["salary"]),
    )
    job_type = _pick(
        lambda: first_text(soup, DETAIL_WORK_TYPE_SELECTORS),
        lambda: ld.json_ld_job_type(data),
        lambda: labelled_value(soup, DETAIL_LABELS["job_type"]),
    )
    posted = _pick(
        lambda: first_text(soup, DETAIL_DATE_SELECTORS),
        lambda: labelled_value(soup, DETAIL_LABELS["posted"]),
    )
    classification = first_text(soup, DETAIL_CLASSIFICATION_SELECTORS)

    body = soup.select_one(DETAIL_DESCRIPTION_SELECTOR)
    if body is None:
        body = ld.json_ld_description(data)
    if body is None:
        body = soup

    return JobDetail(
        id=job_id,
        title=title,
        company=company or UNKNOWN_COMPANY,
        location=location or DEFAULT_LOCATION,
        apply_url=url,
        posted_label=posted or UNKNOWN_POSTED,
        salary=salary,
        job_type=job_type,
        classification=classification.strip("() ") if classification else None,
        description=paragraphs(body),
        requirements=requirements(body),
    )
