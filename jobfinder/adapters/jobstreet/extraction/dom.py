"""
Card-level extraction of job records from a parsed JobStreet listing page.
"""

import logging
from typing import Iterable, List, Optional, Set, Tuple

from bs4 import BeautifulSoup, Tag

from jobfinder.adapters.base import Strategy
from jobfinder.adapters.jobstreet.config import CARD_PARENT_LEVELS, SOURCE_NAME
from jobfinder.adapters.jobstreet.extraction.fields import (
    build_snippet,
    extract_classification,
    extract_company,
    extract_job_type,
    extract_location,
    extract_posted_label,
    extract_title,
)
from jobfinder.adapters.jobstreet.extraction.salary import extract_salary
from jobfinder.adapters.jobstreet.selectors import CARD_CONTAINERS, JOB_LINK_SELECTOR
from jobfinder.adapters.jobstreet.utils import absolute_url, card_text, extract_job_id
from jobfinder.core.models import JobRecord

logger = logging.getLogger(__name__)


def parse_document(html: str) -> BeautifulSoup:
    """Load raw HTML into a queryable tree (CSS selectors and text search)."""
    return BeautifulSoup(html, "lxml")


def find_job_links(soup: Tag) -> List[Tag]:
    """All anchors pointing at a job detail page, in document order."""
    return soup.select(JOB_LINK_SELECTOR)


def count_distinct_jobs(links: Iterable[Tag]) -> int:
    keys = set()
    for link in links:
        href = link.get("href")
        if href:
            keys.add(extract_job_id(href) or absolute_url(href))
    return len(keys)


def resolve_card(anchor: Tag) -> Tag:
    """
    Nearest recognizable container of the anchor: a listing-item attribute,
    then an <article>, then a fixed number of parent levels.
    """
    for container in CARD_CONTAINERS:
        card = anchor.find_parent(**container)
        if card is not None:
            return card

    card = anchor
    for _ in range(CARD_PARENT_LEVELS):
        if card.parent is None or isinstance(card.parent, BeautifulSoup):
            break
        card = card.parent
    return card


def extract_record(
    anchor: Tag,
    card: Tag,
    job_id: Optional[str],
    min_title_length: int = 4,
    location_strategies: Optional[List[Strategy]] = None,
    source: str = SOURCE_NAME,
) -> Optional[JobRecord]:
    """
    Run every field extractor against one card.
    Returns None for candidates with a disqualifying title.
    """
    title = extract_title(card, anchor, min_title_length)
    if not title:
        logger.debug(f"Dropping card {job_id}: no usable title")
        return None

    text = card_text(card)
    company = extract_company(card, text)
    location = extract_location(card, text, location_strategies)
    salary = extract_salary(card, text)
    posted_label = extract_posted_label(card, text)
    classification = extract_classification(card, text)
    job_type = extract_job_type(card, text)

    snippet = build_snippet(
        text,
        [title, company, location, salary, posted_label, classification, job_type],
    )

    return JobRecord(
        id=job_id,
        title=title,
        company=company,
        location=location,
        detail_url=absolute_url(anchor["href"]),
        source=source,
        posted_label=posted_label,
        classification=classification,
        salary_range=salary,
        job_type=job_type,
        description_snippet=snippet,
    )


def extract_jobs_from_dom(
    soup: Tag,
    limit: int,
    min_title_length: int = 4,
    location_strategies: Optional[List[Strategy]] = None,
) -> Tuple[List[JobRecord], int]:
    """
    Walk job links in document order and extract one record per distinct job.

    Duplicates keep their first occurrence. Stops once `limit` records are
    collected. Returns the records and the number of distinct job links on
    the page.
    """
    links = find_job_links(soup)
    logger.info(f"Found {len(links)} job links")

    jobs: List[JobRecord] = []
    seen: Set[str] = set()

    for link in links:
        if len(jobs) >= limit:
            break

        href = link.get("href")
        if not href:
            continue

        job_id = extract_job_id(href)
        key = job_id or absolute_url(href)
        if key in seen:
            continue
        seen.add(key)

        try:
            card = resolve_card(link)
            record = extract_record(
                link, card, job_id, min_title_length, location_strategies
            )
        except Exception as e:
            logger.debug(f"Failed to extract job card {key}: {e}")
            continue

        if record is not None:
            jobs.append(record)

    logger.info(f"Successfully extracted {len(jobs)} jobs from DOM")
    return jobs, count_distinct_jobs(links)
