"""
Listing page scraping: fetch one page, walk its job cards, and fall back to
the tagged sample set when nothing usable comes out.
"""

import logging
from typing import List, Optional

from jobfinder.adapters.base import Strategy
from jobfinder.adapters.jobstreet.extraction.dom import (
    extract_jobs_from_dom,
    parse_document,
)
from jobfinder.adapters.jobstreet.pagination import has_next_page
from jobfinder.adapters.jobstreet.samples import get_sample_jobs
from jobfinder.config.settings import Settings, settings as default_settings
from jobfinder.core.errors import InvalidParameter
from jobfinder.core.models import Provenance, ScrapeResult
from jobfinder.fetch.client import FetchClient

logger = logging.getLogger(__name__)

NO_RECORDS_REASON = "Listing page yielded no records"


def fallback_result(url: str, limit: int, reason: str) -> ScrapeResult:
    logger.warning(f"Returning sample jobs for {url}: {reason}")
    return ScrapeResult(
        records=get_sample_jobs(limit),
        has_next_page=False,
        provenance=Provenance.FALLBACK,
        url=url,
        error=reason,
    )


def extract_listing(
    html: str,
    url: str,
    limit: int,
    min_title_length: int = 4,
    location_strategies: Optional[List[Strategy]] = None,
) -> ScrapeResult:
    """Parse already-fetched listing HTML into a ScrapeResult."""
    soup = parse_document(html)
    jobs, distinct_links = extract_jobs_from_dom(
        soup, limit, min_title_length, location_strategies
    )

    if not jobs:
        return fallback_result(url, limit, NO_RECORDS_REASON)

    return ScrapeResult(
        records=tuple(jobs),
        has_next_page=has_next_page(distinct_links, limit),
        provenance=Provenance.LIVE,
        url=url,
    )


async def scrape_listing(
    url: str,
    limit: int,
    fetch_client: Optional[FetchClient] = None,
    settings: Optional[Settings] = None,
    location_strategies: Optional[List[Strategy]] = None,
) -> ScrapeResult:
    """
    Scrape one listing page.

    `limit` is clamped to Settings.PER_PAGE_MAX. Fetch errors propagate; an
    empty extraction resolves to the fallback sample set instead of raising.

    Raises:
        InvalidParameter: `limit` is below 1.
    """
    if limit < 1:
        raise InvalidParameter("limit", limit, "limit must be at least 1")

    settings = settings or default_settings
    fetch_client = fetch_client or FetchClient(settings)
    limit = min(limit, settings.PER_PAGE_MAX)

    logger.info(f"Scraping listing {url} (limit: {limit})")
    html = await fetch_client.fetch_html(url, settings.FETCH_TIMEOUT_MS)

    return extract_listing(
        html, url, limit, settings.MIN_TITLE_LENGTH, location_strategies
    )
