"""
JSON-LD extraction for job detail pages. JSON-LD is a stable W3C format used
for SEO, so it is preferred over CSS selectors whenever it is present.
"""

import json
import logging
from typing import Any, Dict, Optional

from bs4 import BeautifulSoup

from jobfinder.adapters.jobstreet.selectors import JSON_LD_SELECTOR
from jobfinder.core.text import clean_text

logger = logging.getLogger(__name__)


def _iter_nodes(data: Any):
    if isinstance(data, list):
        for item in data:
            yield from _iter_nodes(item)
    elif isinstance(data, dict):
        yield data
        if "@graph" in data:
            yield from _iter_nodes(data["@graph"])


def extract_json_ld(soup: BeautifulSoup) -> Optional[Dict[str, Any]]:
    """Return the first JobPosting object found in ld+json scripts."""
    for script in soup.select(JSON_LD_SELECTOR):
        try:
            data = json.loads(script.string or script.get_text() or "")
        except json.JSONDecodeError as e:
            logger.debug(f"Skipping malformed JSON-LD block: {e}")
            continue

        for node in _iter_nodes(data):
            if node.get("@type") == "JobPosting":
                return node
    return None


def json_ld_company(json_ld: Dict[str, Any]) -> Optional[str]:
    org = json_ld.get("hiringOrganization")
    if isinstance(org, dict) and org.get("name"):
        return clean_text(org["name"])
    return None


def json_ld_location(json_ld: Dict[str, Any]) -> Optional[str]:
    locations = json_ld.get("jobLocation")
    if isinstance(locations, dict):
        locations = [locations]
    for location in locations or []:
        address = location.get("address") if isinstance(location, dict) else None
        if not isinstance(address, dict):
            continue
        parts = [address.get("addressLocality"), address.get("addressRegion")]
        text = ", ".join(clean_text(p) for p in parts if p)
        if text:
            return text
    return None


def json_ld_salary(json_ld: Dict[str, Any]) -> Optional[str]:
    salary = json_ld.get("baseSalary")
    if not isinstance(salary, dict):
        return None
    value = salary.get("value", {})
    if not isinstance(value, dict):
        return None

    currency = "Rp" if salary.get("currency", "IDR") == "IDR" else salary.get("currency", "")
    min_val = value.get("minValue")
    max_val = value.get("maxValue")
    unit = (value.get("unitText") or "MONTH").lower()

    def fmt(amount: Any) -> str:
        return f"{currency} {int(float(amount)):,}".replace(",", ".")

    try:
        if min_val and max_val:
            return f"{fmt(min_val)} – {fmt(max_val)} per {unit}"
        if min_val or max_val:
            return f"{fmt(min_val or max_val)} per {unit}"
    except (TypeError, ValueError, OverflowError) as e:
        logger.debug(f"Unusable JSON-LD salary amount: {e}")
    return None


def json_ld_job_type(json_ld: Dict[str, Any]) -> Optional[str]:
    employment = json_ld.get("employmentType")
    if isinstance(employment, list):
        employment = ", ".join(str(e) for e in employment)
    if not employment:
        return None
    return clean_text(str(employment).replace("_", " ").title())


def json_ld_description(json_ld: Dict[str, Any]) -> Optional[BeautifulSoup]:
    """The HTML description body as its own tree, or None."""
    description = json_ld.get("description")
    if not description or not isinstance(description, str):
        return None
    return BeautifulSoup(description, "lxml")
