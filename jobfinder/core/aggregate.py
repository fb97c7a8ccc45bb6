"""
Post-processing over a batch of scraped records: category distribution and
location lists. Pure functions; nothing here fetches.
"""

from typing import Dict, Iterable, List, Tuple

from jobfinder.core.models import JobRecord
from jobfinder.core.text import clean_text, normalize

DEFAULT_CATEGORY = "Umum"

# Keyword table for records without a classification, first match wins
CATEGORY_KEYWORDS: List[Tuple[str, List[str]]] = [
    ("IT", ["developer", "programmer", "software", "engineer", "web", "mobile",
            "frontend", "backend", "fullstack", "devops", "data scientist", "qa",
            "testing", "it support", "system"]),
    ("Design", ["designer", "design", "ui/ux", "graphic", "visual", "creative"]),
    ("Marketing", ["marketing", "digital marketing", "seo", "content",
                   "social media", "brand"]),
    ("Sales", ["sales", "business development", "account executive"]),
    ("Finance", ["finance", "accounting", "akuntan", "financial analyst", "tax"]),
    ("HR", ["hr", "human resource", "recruitment", "talent"]),
    ("Customer Service", ["customer service", "support", "cs", "help desk"]),
    ("Operations", ["operations", "operational", "logistic", "supply chain"]),
    ("Management", ["manager", "director", "head of", "lead", "supervisor"]),
    ("Education", ["teacher", "guru", "education", "training", "tutor"]),
    ("Healthcare", ["doctor", "nurse", "medical", "pharmacy"]),
    ("Engineering", ["engineering", "civil engineer", "mechanical", "electrical"]),
]

DEFAULT_CATEGORIES = ["IT", "Design", "Marketing", "Sales", "Finance"]
DEFAULT_LOCATIONS = ["Jakarta", "Bandung", "Surabaya", "Semarang", "Medan"]

# Locations that carry no information for a filter dropdown
_LOCATION_SENTINELS = {"", "n/a", "indonesia"}


def _has_keyword(text: str, keyword: str) -> bool:
    # Short keywords ("hr", "qa", "cs") must match whole words
    if len(keyword) <= 3:
        return keyword in text.replace("/", " ").split()
    return keyword in text


def infer_category(record: JobRecord) -> str:
    """Keyword-based category from the title and snippet."""
    title = normalize(record.title)
    snippet = normalize(record.description_snippet)
    for name, keywords in CATEGORY_KEYWORDS:
        if any(_has_keyword(title, kw) or _has_keyword(snippet, kw) for kw in keywords):
            return name
    return DEFAULT_CATEGORY


def category_of(record: JobRecord) -> str:
    return record.classification or infer_category(record)


def aggregate(records: Iterable[JobRecord]) -> List[Dict[str, object]]:
    """
    Category -> count, sorted by count descending. Ties keep first-encountered
    order. Records without a classification are counted under their inferred
    category.
    """
    counts: Dict[str, int] = {}
    for record in records:
        name = category_of(record)
        counts[name] = counts.get(name, 0) + 1

    # sorted() is stable and dicts keep insertion order
    ordered = sorted(counts.items(), key=lambda item: -item[1])
    return [{"name": name, "count": count} for name, count in ordered]


def extract_locations(records: Iterable[JobRecord]) -> List[str]:
    locations = {clean_text(r.location) for r in records}
    return sorted(loc for loc in locations if normalize(loc) not in _LOCATION_SENTINELS)
