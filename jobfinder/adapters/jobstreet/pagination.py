"""
URL building and pagination logic for JobStreet listing pages.

The site splits listings into distinct URL families:
- all jobs:                      /id/jobs/in-Indonesia
- location:                      /id/jobs/in-{location}
- classification (+ location):   /id/jobs-in-{classification}[/in-{location}]
Keyword and tag filters are query parameters on whichever family applies.
"""

import logging
import urllib.parse
from typing import Dict, Optional

from jobfinder.adapters.jobstreet.config import (
    ALL_LOCATIONS_SENTINELS,
    BASE_URL,
    CLASSIFICATION_PATH,
    DEFAULT_LISTING_URL,
    JOB_DETAIL_URL,
    JOBS_PATH,
    LATEST_URL,
    LOCATION_PREFIXES,
    RECOMMENDATIONS_URL,
)
from jobfinder.core.errors import InvalidLocation, InvalidParameter
from jobfinder.core.models import ListingQuery
from jobfinder.core.text import clean_text, normalize, slugify

logger = logging.getLogger(__name__)


def location_slug(location: str) -> str:
    """
    "Jawa Tengah" -> "jawa-tengah", "DI Yogyakarta" -> "yogyakarta".
    Raises InvalidLocation when nothing usable remains.
    """
    slug = slugify(location, strip_prefixes=LOCATION_PREFIXES)
    if not slug:
        raise InvalidLocation(location)
    return slug


def classification_slug(classification: str) -> str:
    slug = slugify(classification)
    if not slug:
        raise InvalidParameter("classification", classification)
    return slug


def _present(value: Optional[str]) -> bool:
    return bool(value and value.strip())


def build_listing_url(query: Optional[ListingQuery] = None) -> str:
    """
    Build a JobStreet listing URL for the given search parameters.
    Empty parameters are ignored; page 1 is never emitted.
    """
    query = query or ListingQuery()

    location = query.location if _present(query.location) else None
    if location and normalize(location) in ALL_LOCATIONS_SENTINELS:
        location = None

    classification = (
        classification_slug(query.classification)
        if _present(query.classification)
        else None
    )

    if classification:
        path = CLASSIFICATION_PATH.format(classification=classification)
    else:
        path = JOBS_PATH

    if location:
        path += f"/in-{location_slug(location)}"
    elif not classification:
        path = urllib.parse.urlparse(DEFAULT_LISTING_URL).path

    params: Dict[str, str] = {}
    if _present(query.keyword):
        params["q"] = clean_text(query.keyword)
    if _present(query.tag):
        params["tags"] = slugify(query.tag) or clean_text(query.tag)
    if query.page and query.page > 1:
        params["page"] = str(query.page)

    url = f"{BASE_URL}{path}"
    if params:
        url = f"{url}?{urllib.parse.urlencode(params)}"

    logger.debug(f"Built listing URL {url} for {query}")
    return url


def build_recommendations_url(page: int = 1) -> str:
    return f"{RECOMMENDATIONS_URL}?page={page}" if page > 1 else RECOMMENDATIONS_URL


def build_latest_url() -> str:
    return LATEST_URL


def build_job_url(job_id: str) -> str:
    return JOB_DETAIL_URL.format(job_id=job_id)


def has_next_page(distinct_links: int, limit: int) -> bool:
    """
    Approximation only: the listing exposes no authoritative total in this
    mode, so a page holding at least `limit` distinct job links is assumed
    to be followed by another.
    """
    return limit > 0 and distinct_links >= limit
