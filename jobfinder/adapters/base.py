from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional
import re

from jobfinder.core.models import JobDetail, ListingQuery, ScrapeResult

SELECTOR = "selector"
REGEX = "regex"


@dataclass(frozen=True)
class Strategy:
    """
    One step of an ordered extraction fallback chain.

    `kind` is "selector" (CSS, scoped to the card) or "regex" (searched over
    the card text). Lower `priority` runs first; the order encodes confidence.
    """

    kind: str
    pattern: str
    priority: int
    flags: int = re.IGNORECASE

    @classmethod
    def selector(cls, pattern: str, priority: int) -> "Strategy":
        return cls(SELECTOR, pattern, priority)

    @classmethod
    def regex(cls, pattern: str, priority: int, flags: int = re.IGNORECASE) -> "Strategy":
        return cls(REGEX, pattern, priority, flags)


class JobPortalAdapter(ABC):
    """
    Abstract base class for all job portal adapters.
    """

    name: str

    @abstractmethod
    def build_listing_url(self, query: Optional[ListingQuery] = None) -> str:
        """
        Build the listing URL for the given search parameters.
        Raises:
            InvalidParameter: a parameter cannot be expressed in the URL.
        """
        pass

    @abstractmethod
    def build_latest_url(self) -> str:
        """
        URL of the portal's fixed "newest jobs" page.
        """
        pass

    @abstractmethod
    def build_recommendations_url(self, page: int = 1) -> str:
        """
        URL of the portal's recommendations page for the given page number.
        """
        pass

    @abstractmethod
    async def scrape_listing(self, url: str, limit: int) -> ScrapeResult:
        """
        Fetch one listing page and extract up to `limit` records.
        Returns:
            ScrapeResult: live records, or the tagged fallback sample set.
        """
        pass

    @abstractmethod
    async def scrape_job(self, job_id: str) -> JobDetail:
        """
        Scrape a single job detail page.
        Args:
            job_id (str): The portal's job identifier.
        Returns:
            JobDetail: The extracted detail fields.
        """
        pass
