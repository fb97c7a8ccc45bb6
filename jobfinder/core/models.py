from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class Provenance(str, Enum):
    """Where a batch of records came from."""

    LIVE = "live"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class JobRecord:
    """
    One job listing extracted from a listing page card.
    Records are never mutated after construction.
    """

    id: Optional[str]
    title: str
    company: str
    location: str
    detail_url: str
    source: str
    posted_label: str
    classification: Optional[str] = None
    salary_range: Optional[str] = None
    job_type: Optional[str] = None
    description_snippet: str = ""

    @property
    def dedup_key(self) -> str:
        return self.id or self.detail_url

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class JobDetail:
    """
    Fields scraped from a single job detail page.
    """

    id: str
    title: str
    company: str
    location: str
    apply_url: str
    posted_label: str
    salary: Optional[str] = None
    job_type: Optional[str] = None
    classification: Optional[str] = None
    description: List[str] = field(default_factory=list)
    requirements: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ScrapeResult:
    """
    A batch of records tagged with its provenance.

    `has_next_page` is a heuristic (enough distinct job links on the page to
    fill the requested limit), not an authoritative pagination signal.
    """

    records: Tuple[JobRecord, ...]
    has_next_page: bool
    provenance: Provenance
    url: str
    error: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        return self.provenance is Provenance.FALLBACK

    def __len__(self) -> int:
        return len(self.records)


@dataclass(frozen=True)
class ListingQuery:
    """Optional parameters used to build a listing URL."""

    keyword: Optional[str] = None
    location: Optional[str] = None
    classification: Optional[str] = None
    tag: Optional[str] = None
    page: int = 1
