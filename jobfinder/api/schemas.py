"""
Response envelopes shared by all endpoints.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from jobfinder.core.models import JobRecord, ScrapeResult


class ListingMetadata(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    page: int
    limit: int
    total: int
    has_next_page: bool = Field(alias="hasNextPage")
    source: str
    cached: bool = False
    error: Optional[str] = None


def envelope(
    data: Any, message: str, status: str = "success", status_code: int = 200
) -> Dict[str, Any]:
    return {
        "status": status,
        "statusCode": status_code,
        "message": message,
        "data": data,
    }


def error_body(status_code: int, message: str, **extra: Any) -> Dict[str, Any]:
    body = {"status": "error", "statusCode": status_code, "message": message}
    body.update(extra)
    return body


def listing_body(
    result: ScrapeResult,
    records: List[JobRecord],
    page: int,
    limit: int,
    cached: bool,
) -> Dict[str, Any]:
    """
    Wrap a (possibly filtered) batch. A live result that carries an error is
    reported with status "error" and no jobs.
    """
    metadata = ListingMetadata(
        page=page,
        limit=limit,
        total=len(records),
        has_next_page=result.has_next_page,
        source=result.provenance.value,
        cached=cached,
        error=result.error,
    )
    data = {
        "jobs": [record.to_dict() for record in records],
        "metadata": metadata.model_dump(by_alias=True),
    }

    if result.error and not result.is_fallback:
        return envelope(data, f"Failed to fetch jobs: {result.error}", status="error")
    if result.is_fallback:
        return envelope(data, "Showing sample jobs, live listings are temporarily unavailable")
    return envelope(data, f"Successfully fetched {len(records)} jobs")


def cache_control(ttl_seconds: int) -> Dict[str, str]:
    return {"Cache-Control": f"s-maxage={ttl_seconds}, stale-while-revalidate"}
