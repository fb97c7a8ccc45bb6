"""
Fixed sample listings returned when a live scrape yields nothing.
Always tagged with FALLBACK_SOURCE_NAME so they cannot pass for live data.
"""

from typing import Tuple

from jobfinder.adapters.jobstreet.config import (
    FALLBACK_SOURCE_NAME,
    RECOMMENDATIONS_URL,
    SNIPPET_PLACEHOLDER,
)
from jobfinder.core.models import JobRecord

SAMPLE_JOBS: Tuple[JobRecord, ...] = (
    JobRecord(
        id="sample_1",
        title="Store Leader (Jabodetabek)",
        company="Prima Audio Indonesia",
        location="Jakarta Raya",
        detail_url=RECOMMENDATIONS_URL,
        source=FALLBACK_SOURCE_NAME,
        posted_label="10 hari yang lalu",
        classification="Retail & Consumer Products",
        job_type="Full time",
        description_snippet=SNIPPET_PLACEHOLDER,
    ),
    JobRecord(
        id="sample_2",
        title="Sales Analyst",
        company="Superior Prima Sukses",
        location="Jawa Timur",
        detail_url=RECOMMENDATIONS_URL,
        source=FALLBACK_SOURCE_NAME,
        posted_label="4 jam yang lalu",
        classification="Sales",
        job_type="Full time",
        description_snippet=SNIPPET_PLACEHOLDER,
    ),
    JobRecord(
        id="sample_3",
        title="Digital Marketing Staff",
        company="Selaras Citra Nusantara Perkasa",
        location="Jakarta Selatan",
        detail_url=RECOMMENDATIONS_URL,
        source=FALLBACK_SOURCE_NAME,
        posted_label="5 hari yang lalu",
        classification="Marketing & Communications",
        salary_range="Rp 5.000.000 – Rp 5.750.000 per month",
        job_type="Kontrak",
        description_snippet=SNIPPET_PLACEHOLDER,
    ),
)


def get_sample_jobs(limit: int = len(SAMPLE_JOBS)) -> Tuple[JobRecord, ...]:
    return SAMPLE_JOBS[: max(limit, 0)]
