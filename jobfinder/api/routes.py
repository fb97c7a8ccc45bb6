import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from jobfinder.adapters.jobstreet.config import LATEST_MAX_JOBS
from jobfinder.api.schemas import cache_control, envelope, listing_body
from jobfinder.core.errors import InvalidParameter
from jobfinder.core.filters import filter_records, sort_records, validate_sort
from jobfinder.core.models import JobRecord, ListingQuery
from jobfinder.core.runner import Runner, RunResult, runner as default_runner

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def get_runner() -> Runner:
    return default_runner


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def _filtered(
    run: RunResult,
    sort: Optional[str],
    salary_min: Optional[int],
    with_salary: bool,
    job_type: Optional[str],
    category: Optional[str],
) -> List[JobRecord]:
    records = filter_records(
        run.result.records,
        salary_min=salary_min,
        with_salary=with_salary,
        job_type=job_type,
        category=category,
    )
    return sort_records(records, sort)


@router.get("/jobs")
async def list_jobs(
    limit: int = Query(30),
    page: int = Query(1),
    sort: Optional[str] = Query(None),
    salary_min: Optional[int] = Query(None, alias="salaryMin"),
    job_type: Optional[str] = Query(None, alias="jobType"),
    category: Optional[str] = Query(None),
    with_salary: bool = Query(False, alias="salary"),
    runner: Runner = Depends(get_runner),
) -> JSONResponse:
    """Home listing. Falls back to sample jobs when the site is unreachable."""
    limit, page = clamp(limit, 1, 100), max(page, 1)
    validate_sort(sort)

    run = await runner.home(page, limit)
    records = _filtered(run, sort, salary_min, with_salary, job_type, category)
    return JSONResponse(
        content=listing_body(run.result, records, page, limit, run.cached),
        headers=cache_control(runner.settings.CACHE_TTL_SECONDS),
    )


@router.get("/jobs/all")
async def list_all_jobs(
    limit: int = Query(20),
    page: int = Query(1),
    runner: Runner = Depends(get_runner),
) -> JSONResponse:
    limit, page = clamp(limit, 1, 50), max(page, 1)
    run = await runner.all_jobs(page, limit)
    return JSONResponse(
        content=listing_body(run.result, list(run.result.records), page, limit, run.cached),
        headers=cache_control(runner.settings.CACHE_TTL_SECONDS),
    )


@router.get("/jobs/latest")
async def list_latest_jobs(
    limit: int = Query(6),
    runner: Runner = Depends(get_runner),
) -> JSONResponse:
    """Newest jobs, no pagination."""
    limit = clamp(limit, 1, LATEST_MAX_JOBS)
    run = await runner.latest(limit)
    return JSONResponse(
        content=listing_body(run.result, list(run.result.records), 1, limit, run.cached),
        headers=cache_control(runner.settings.CACHE_TTL_SECONDS),
    )


@router.get("/jobs/{job_id}")
async def get_job(job_id: str, runner: Runner = Depends(get_runner)) -> JSONResponse:
    detail = await runner.job_detail(job_id)
    return JSONResponse(
        content=envelope(detail.to_dict(), "Job detail retrieved successfully"),
        headers=cache_control(runner.settings.DETAIL_CACHE_TTL_SECONDS),
    )


@router.get("/jobstreet")
async def list_recommendations(
    page: int = Query(1),
    limit: int = Query(20),
    runner: Runner = Depends(get_runner),
) -> JSONResponse:
    limit, page = clamp(limit, 1, 50), max(page, 1)
    run = await runner.recommendations(page, limit)
    return JSONResponse(
        content=listing_body(run.result, list(run.result.records), page, limit, run.cached),
        headers=cache_control(runner.settings.CACHE_TTL_SECONDS),
    )


@router.get("/search")
async def search_jobs(
    location: Optional[str] = Query(None),
    classification: Optional[str] = Query(None),
    q: Optional[str] = Query(None),
    tag: Optional[str] = Query(None),
    page: int = Query(1),
    limit: int = Query(30),
    sort: Optional[str] = Query(None),
    salary_min: Optional[int] = Query(None, alias="salaryMin"),
    job_type: Optional[str] = Query(None, alias="jobType"),
    category: Optional[str] = Query(None),
    with_salary: bool = Query(False, alias="salary"),
    runner: Runner = Depends(get_runner),
) -> JSONResponse:
    """
    Strict search: bad parameters answer 400 and fetch failures answer 500,
    there is no sample fallback here.
    """
    if not location or not location.strip():
        raise InvalidParameter("location", location, "Location parameter is required")
    limit, page = clamp(limit, 1, 100), max(page, 1)
    validate_sort(sort)

    query = ListingQuery(
        keyword=q, location=location, classification=classification, tag=tag, page=page
    )
    run = await runner.search(query, limit)
    records = _filtered(run, sort, salary_min, with_salary, job_type, category)

    body = listing_body(run.result, records, page, limit, run.cached)
    body["data"]["query"] = {
        "q": q,
        "location": location,
        "classification": classification,
        "tag": tag,
        "url": run.result.url,
    }
    return JSONResponse(
        content=body,
        headers=cache_control(runner.settings.SEARCH_CACHE_TTL_SECONDS),
    )


@router.get("/filters")
async def get_filters(runner: Runner = Depends(get_runner)) -> JSONResponse:
    data = await runner.filters()
    message = (
        "Returning default filters" if data["default"] else "Filters retrieved successfully"
    )
    return JSONResponse(
        content=envelope(data, message),
        headers=cache_control(runner.settings.FILTERS_CACHE_TTL_SECONDS),
    )


@router.get("/cache/stats")
async def cache_stats(runner: Runner = Depends(get_runner)) -> JSONResponse:
    return JSONResponse(content=envelope(runner.cache.stats(), "Cache statistics"))
