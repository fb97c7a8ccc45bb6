import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Type

from jobfinder.adapters.base import JobPortalAdapter
from jobfinder.adapters.jobstreet.adapter import JobStreetAdapter
from jobfinder.adapters.jobstreet.discovery import fallback_result
from jobfinder.config.settings import Settings, settings as default_settings
from jobfinder.core.aggregate import (
    DEFAULT_CATEGORIES,
    DEFAULT_LOCATIONS,
    aggregate,
    extract_locations,
)
from jobfinder.core.cache import TTLCache, cache as default_cache
from jobfinder.core.errors import FetchError
from jobfinder.core.models import JobDetail, ListingQuery, Provenance, ScrapeResult
from jobfinder.core.retry import with_retry

logger = logging.getLogger(__name__)

ADAPTERS: Dict[str, Type[JobPortalAdapter]] = {
    "jobstreet": JobStreetAdapter,
}

# What to do when a listing fetch fails
RAISE = "raise"
FALLBACK = "fallback"
EMPTY = "empty"

FILTERS_SAMPLE_LIMIT = 100


@dataclass(frozen=True)
class RunResult:
    result: ScrapeResult
    cached: bool = False


def empty_result(url: str, reason: str) -> ScrapeResult:
    return ScrapeResult(
        records=(),
        has_next_page=False,
        provenance=Provenance.LIVE,
        url=url,
        error=reason,
    )


def get_adapter(portal: str, **kwargs) -> JobPortalAdapter:
    adapter_cls = ADAPTERS.get(portal.lower())
    if not adapter_cls:
        raise ValueError(
            f"Portal '{portal}' not supported. Available portals: {list(ADAPTERS.keys())}"
        )
    return adapter_cls(**kwargs)  # type: ignore


class Runner:
    """
    Orchestrates one request: build the URL, consult the cache, scrape on a
    miss, store live results, and apply the caller's error policy.
    """

    def __init__(
        self,
        adapter: Optional[JobPortalAdapter] = None,
        cache: Optional[TTLCache] = None,
        settings: Optional[Settings] = None,
        portal: str = "jobstreet",
    ):
        self.settings = settings or default_settings
        self.adapter = adapter or get_adapter(portal, settings=self.settings)
        self.cache = cache if cache is not None else default_cache

        retry = with_retry(
            self.settings.MAX_RETRIES,
            self.settings.RETRY_BASE_DELAY,
            self.settings.RETRY_MAX_DELAY,
        )
        self._scrape_listing = retry(self.adapter.scrape_listing)
        self._scrape_job = retry(self.adapter.scrape_job)

    async def run_listing(
        self,
        kind: str,
        url: str,
        limit: int,
        ttl_seconds: int,
        policy: str = RAISE,
    ) -> RunResult:
        key = f"{kind}:{url}:{limit}"
        cached = self.cache.get(key)
        if cached is not None:
            logger.info(f"Cache hit for {key}")
            return RunResult(cached, cached=True)

        try:
            result = await self._scrape_listing(url, limit)
        except FetchError as e:
            if policy == FALLBACK:
                return RunResult(fallback_result(url, limit, str(e)))
            if policy == EMPTY:
                logger.warning(f"Returning empty result for {url}: {e}")
                return RunResult(empty_result(url, str(e)))
            raise

        # Sample data is never cached so the next request tries the site again
        if not result.is_fallback:
            self.cache.set(key, result, ttl_seconds)
        logger.info(f"Scraped {len(result)} records from {url} ({result.provenance.value})")
        return RunResult(result)

    async def search(
        self, query: ListingQuery, limit: int, policy: str = RAISE
    ) -> RunResult:
        url = self.adapter.build_listing_url(query)
        return await self.run_listing(
            "search", url, limit, self.settings.SEARCH_CACHE_TTL_SECONDS, policy
        )

    async def home(self, page: int, limit: int, policy: str = FALLBACK) -> RunResult:
        url = self.adapter.build_listing_url(ListingQuery(page=page))
        return await self.run_listing(
            "jobs", url, limit, self.settings.CACHE_TTL_SECONDS, policy
        )

    async def all_jobs(self, page: int, limit: int, policy: str = EMPTY) -> RunResult:
        url = self.adapter.build_listing_url(ListingQuery(page=page))
        return await self.run_listing(
            "all", url, limit, self.settings.CACHE_TTL_SECONDS, policy
        )

    async def latest(self, limit: int, policy: str = EMPTY) -> RunResult:
        url = self.adapter.build_latest_url()
        return await self.run_listing(
            "latest", url, limit, self.settings.CACHE_TTL_SECONDS, policy
        )

    async def recommendations(
        self, page: int, limit: int, policy: str = FALLBACK
    ) -> RunResult:
        url = self.adapter.build_recommendations_url(page)
        return await self.run_listing(
            "recommendations", url, limit, self.settings.CACHE_TTL_SECONDS, policy
        )

    async def job_detail(self, job_id: str) -> JobDetail:
        """
        Raises InvalidParameter, JobNotFound or FetchError; detail pages have
        no fallback.
        """
        key = f"detail:{job_id}"
        cached = self.cache.get(key)
        if cached is not None:
            logger.info(f"Cache hit for {key}")
            return cached

        detail = await self._scrape_job(job_id)
        self.cache.set(key, detail, self.settings.DETAIL_CACHE_TTL_SECONDS)
        return detail

    async def filters(self) -> Dict[str, Any]:
        """Category distribution and locations of the default listing."""
        key = "filters"
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        url = self.adapter.build_listing_url()
        try:
            result = await self._scrape_listing(url, FILTERS_SAMPLE_LIMIT)
        except FetchError as e:
            logger.warning(f"Returning default filters: {e}")
            return default_filters()

        if result.is_fallback:
            logger.warning(f"Returning default filters: {result.error}")
            return default_filters()

        data = {
            "categories": aggregate(result.records),
            "locations": extract_locations(result.records),
            "total_jobs_analyzed": len(result),
            "default": False,
        }
        self.cache.set(key, data, self.settings.FILTERS_CACHE_TTL_SECONDS)
        return data


def default_filters() -> Dict[str, Any]:
    return {
        "categories": [{"name": name, "count": 0} for name in DEFAULT_CATEGORIES],
        "locations": list(DEFAULT_LOCATIONS),
        "total_jobs_analyzed": 0,
        "default": True,
    }


runner = Runner()
