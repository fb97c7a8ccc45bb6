"""
Job detail page scraping.
"""

import logging
import re
from typing import Optional

from jobfinder.adapters.jobstreet.extraction.detail import extract_job_detail
from jobfinder.adapters.jobstreet.extraction.dom import parse_document
from jobfinder.adapters.jobstreet.pagination import build_job_url
from jobfinder.config.settings import Settings, settings as default_settings
from jobfinder.core.errors import FetchHttpError, InvalidParameter, JobNotFound
from jobfinder.core.models import JobDetail
from jobfinder.fetch.client import FetchClient

logger = logging.getLogger(__name__)

JOB_ID_FORMAT = re.compile(r"^\d{6,10}$")


def validate_job_id(job_id: Optional[str]) -> str:
    """JobStreet ids are numeric, 6 to 10 digits."""
    value = (job_id or "").strip()
    if not JOB_ID_FORMAT.match(value):
        raise InvalidParameter(
            "job_id", job_id, "Invalid jobId format. JobId must be numeric (6-10 digits)."
        )
    return value


async def scrape_job(
    job_id: str,
    fetch_client: Optional[FetchClient] = None,
    settings: Optional[Settings] = None,
) -> JobDetail:
    """
    Scrape one job detail page.

    Raises:
        InvalidParameter: malformed job id.
        JobNotFound: 404, or a page without a recognizable title.
        FetchError: any other fetch failure.
    """
    settings = settings or default_settings
    fetch_client = fetch_client or FetchClient(settings)
    job_id = validate_job_id(job_id)
    url = build_job_url(job_id)

    try:
        html = await fetch_client.fetch_html(url, settings.FETCH_TIMEOUT_MS)
    except FetchHttpError as e:
        if e.status == 404:
            raise JobNotFound(job_id) from e
        raise

    detail = extract_job_detail(parse_document(html), job_id, url)
    logger.info(f"Successfully scraped job {job_id}: {detail.title}")
    return detail
