"""
Server-side filters and sorting applied to an already-scraped batch.

Salary text is only parsed into a number here, when a filter or sort needs it.
"""

import math
import re
from typing import Iterable, List, Optional

from jobfinder.core.aggregate import category_of
from jobfinder.core.errors import InvalidParameter
from jobfinder.core.models import JobRecord
from jobfinder.core.text import normalize

SORT_OPTIONS = ("relevance", "latest", "salary")

_AMOUNT_RE = re.compile(r"(\d[\d.,]*)\s*(jt|juta|rb|ribu|k)?\b", re.IGNORECASE)
_MULTIPLIERS = {"jt": 1_000_000, "juta": 1_000_000, "rb": 1_000, "ribu": 1_000, "k": 1_000}

_MINUTES = {
    "detik": 0, "menit": 1, "minute": 1, "m": 1,
    "jam": 60, "hour": 60, "h": 60,
    "hari": 1440, "day": 1440, "d": 1440,
    "minggu": 10080, "week": 10080,
    "bulan": 43200, "month": 43200,
}
_AGE_RE = re.compile(
    r"(\d+)\+?\s*(detik|menit|jam|hari|minggu|bulan|minutes?|hours?|days?|weeks?|months?|[mhd])\b"
)


def parse_salary_floor(salary: Optional[str]) -> Optional[int]:
    """
    Lower bound of a salary text in rupiah.
    "Rp 5.000.000 – Rp 6.000.000 per month" -> 5000000, "Rp 7jt per month" -> 7000000.
    """
    if not salary:
        return None
    match = _AMOUNT_RE.search(salary)
    if not match:
        return None

    # Indonesian thousands use "." and decimals ","
    parts = re.split(r",(?=\d{1,2}\b)", match.group(1), maxsplit=1)
    integer = re.sub(r"[.,]", "", parts[0])
    if not integer:
        return None
    fraction = parts[1] if len(parts) > 1 else "0"

    amount = float(f"{integer}.{fraction}")
    suffix = (match.group(2) or "").lower()
    return int(round(amount * _MULTIPLIERS.get(suffix, 1)))


def posted_age_minutes(label: Optional[str]) -> float:
    """Approximate age of a relative posted label; unknown labels sort last."""
    text = normalize(label)
    if not text or text == "n/a":
        return math.inf
    if any(p in text for p in ("baru saja", "just now", "hari ini", "today")):
        return 0
    if any(p in text for p in ("kemarin", "yesterday")):
        return 1440

    match = _AGE_RE.search(text)
    if not match:
        return math.inf
    unit = match.group(2).rstrip("s") if len(match.group(2)) > 1 else match.group(2)
    return int(match.group(1)) * _MINUTES.get(unit, 1440)


def filter_records(
    records: Iterable[JobRecord],
    salary_min: Optional[int] = None,
    with_salary: bool = False,
    job_type: Optional[str] = None,
    category: Optional[str] = None,
) -> List[JobRecord]:
    result = []
    wanted_type = normalize(job_type).replace("-", " ")
    wanted_category = normalize(category)

    for record in records:
        if (with_salary or salary_min) and not record.salary_range:
            continue
        if salary_min:
            floor = parse_salary_floor(record.salary_range)
            if floor is None or floor < salary_min:
                continue
        if wanted_type and wanted_type not in normalize(record.job_type).replace("-", " "):
            continue
        if wanted_category and wanted_category not in normalize(category_of(record)):
            continue
        result.append(record)
    return result


def validate_sort(sort: Optional[str]) -> str:
    value = normalize(sort) or "relevance"
    if value not in SORT_OPTIONS:
        raise InvalidParameter("sort", sort, f"sort must be one of {', '.join(SORT_OPTIONS)}")
    return value


def sort_records(records: Iterable[JobRecord], sort: Optional[str] = None) -> List[JobRecord]:
    """Stable sort; "relevance" keeps document order."""
    sort = validate_sort(sort)

    records = list(records)
    if sort == "latest":
        return sorted(records, key=lambda r: posted_age_minutes(r.posted_label))
    if sort == "salary":
        return sorted(
            records,
            key=lambda r: -(parse_salary_floor(r.salary_range) or -1),
        )
    return records
