"""
JobStreetAdapter - Job portal adapter for JobStreet Indonesia.

Implements JobPortalAdapter interface. Delegates all work to submodules:
- pagination.py for listing URL construction
- discovery.py for listing page extraction
- scraping.py for individual job detail extraction
"""

import logging
from typing import Optional

from jobfinder.adapters.base import JobPortalAdapter
from jobfinder.adapters.jobstreet import discovery as discovery_module
from jobfinder.adapters.jobstreet import pagination
from jobfinder.adapters.jobstreet import scraping as scraping_module
from jobfinder.adapters.jobstreet.selectors import location_strategies
from jobfinder.config.settings import Settings, settings as default_settings
from jobfinder.core.models import JobDetail, ListingQuery, ScrapeResult
from jobfinder.fetch.client import FetchClient

logger = logging.getLogger(__name__)


class JobStreetAdapter(JobPortalAdapter):
    """
    JobStreet adapter: one listing page per call, selector/regex fallback
    chains per field, tagged sample data when a page yields nothing.
    """

    name = "jobstreet"

    def __init__(
        self,
        fetch_client: Optional[FetchClient] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or default_settings
        self.fetch_client = fetch_client or FetchClient(self.settings)
        self.location_strategies = location_strategies(self.settings.EXTRA_LOCATIONS)

    def build_listing_url(self, query: Optional[ListingQuery] = None) -> str:
        return pagination.build_listing_url(query)

    def build_latest_url(self) -> str:
        return pagination.build_latest_url()

    def build_recommendations_url(self, page: int = 1) -> str:
        return pagination.build_recommendations_url(page)

    async def scrape_listing(self, url: str, limit: int) -> ScrapeResult:
        return await discovery_module.scrape_listing(
            url,
            limit,
            fetch_client=self.fetch_client,
            settings=self.settings,
            location_strategies=self.location_strategies,
        )

    async def scrape_job(self, job_id: str) -> JobDetail:
        return await scraping_module.scrape_job(
            job_id, fetch_client=self.fetch_client, settings=self.settings
        )
