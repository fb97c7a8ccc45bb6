"""
All selector and regex strategies used by the JobStreet adapter.
Centralized here so that markup drift only needs a new strategy in one place.
Each chain is tried in ascending priority order.
"""

import re
from typing import Iterable, List

from jobfinder.adapters.base import Strategy

# --- Listing page ---

# Every job card links to its detail page
JOB_LINK_SELECTOR = 'a[href*="/id/job/"]'
JOB_ID_PATTERN = re.compile(r"/job/(\d+)")

# Card containers, nearest ancestor matching the first entry wins.
# Each entry is passed to Tag.find_parent().
CARD_CONTAINERS = [
    {"attrs": {"data-automation": "jobListing"}},
    {"attrs": {"data-automation": "normalJob"}},
    {"attrs": {"data-card-type": "JobCard"}},
    {"name": "article"},
]

TITLE_STRATEGIES = [
    Strategy.selector('[data-automation="jobTitle"]', 10),
    Strategy.selector("h3", 20),
    Strategy.selector("h2", 30),
    Strategy.selector("h1", 40),
    Strategy.selector('[class*="job-title"]', 50),
    Strategy.selector('[class*="jobTitle"]', 60),
]

# "di <company>" / "at <company>" opening a text fragment, stopping at bullets,
# badges and relative-date phrases. Card text holds one fragment per line.
COMPANY_PHRASE = (
    r"^(?:Lowongan\s+)?(?:di|at)\s+(?!Limit\b)"
    r"([^\n•·|]{2,80}?)\s*"
    r"(?=$|\n|•|·|\||Akan segera|Dibutuhkan segera|Ini adalah|Rp\s"
    r"|\d+\+?\s*(?:hari|jam|menit|minggu|bulan))"
)

COMPANY_STRATEGIES = [
    Strategy.regex(COMPANY_PHRASE, 10, re.IGNORECASE | re.MULTILINE),
    Strategy.selector('[data-automation="jobCompany"]', 20),
    Strategy.selector('[data-automation="advertiser-name"]', 30),
    Strategy.selector('[class*="company"]', 40),
]

# Extendable through Settings.EXTRA_LOCATIONS
KNOWN_LOCATIONS = [
    "Jakarta Raya", "Jakarta Selatan", "Jakarta Pusat", "Jakarta Barat",
    "Jakarta Timur", "Jakarta Utara", "Jakarta",
    "Jawa Barat", "Jawa Tengah", "Jawa Timur",
    "Banten", "Aceh", "Bali", "Riau", "Kepulauan Riau", "Lampung", "Papua",
    "Sumatera Utara", "Sumatera Barat", "Sumatera Selatan",
    "Kalimantan Barat", "Kalimantan Tengah", "Kalimantan Timur",
    "Kalimantan Selatan", "Kalimantan Utara",
    "Sulawesi Utara", "Sulawesi Tengah", "Sulawesi Selatan",
    "Sulawesi Tenggara",
    "Nusa Tenggara Barat", "Nusa Tenggara Timur",
    "Bandung", "Surabaya", "Semarang", "Medan", "Yogyakarta", "Denpasar",
    "Tangerang Selatan", "Tangerang", "Bekasi", "Depok", "Bogor", "Malang",
    "Makassar", "Palembang", "Batam", "Balikpapan", "Samarinda", "Pekanbaru",
    "Padang", "Manado", "Pontianak", "Banjarmasin", "Surakarta", "Solo",
    "Cirebon", "Karawang", "Cikarang", "Sidoarjo", "Gresik",
]

LIMIT_RESULTS_PHRASE = r"Limit results to\s+([^\]\n]+)"


def gazetteer_pattern(names: Iterable[str]) -> str:
    """Alternation over location names, longest first so specific names win."""
    unique = sorted({n.strip() for n in names if n and n.strip()}, key=len, reverse=True)
    alternation = "|".join(re.escape(n).replace(r"\ ", r"\s+") for n in unique)
    return rf"\b({alternation})\b"


def location_strategies(extra_locations: Iterable[str] = ()) -> List[Strategy]:
    return [
        Strategy.regex(LIMIT_RESULTS_PHRASE, 10),
        Strategy.regex(gazetteer_pattern([*KNOWN_LOCATIONS, *extra_locations]), 20),
        Strategy.selector('[data-automation="jobLocation"]', 30),
        Strategy.selector('[class*="location"]', 40),
    ]


LOCATION_STRATEGIES = location_strategies()

# Currency-prefixed amount or range with a "per <period>" suffix
SALARY_STRATEGIES = [
    Strategy.regex(
        r"Rp\s*[\d.,]+(?:\s*(?:jt|juta|rb|ribu|k)\b)?"
        r"(?:\s*[–—-]\s*(?:Rp\s*)?[\d.,]+(?:\s*(?:jt|juta|rb|ribu|k)\b)?)?"
        r"\s*per\s+\w+",
        10,
    ),
    Strategy.regex(
        r"IDR\s*[\d.,]+(?:\s*[–—-]\s*(?:IDR\s*)?[\d.,]+)?\s*(?:per|/)\s*\w+",
        20,
    ),
]

POSTED_STRATEGIES = [
    Strategy.regex(r"\d+\+?\s+(?:detik|menit|jam|hari|minggu|bulan)\s+(?:yang\s+)?lalu", 10),
    Strategy.regex(r"\d+\+?\s*(?:minutes?|hours?|days?|weeks?|months?|[mhd])\s+ago", 20),
    Strategy.regex(r"Listed\s+more\s+than\s+[a-z]+\s+days?\s+ago", 30),
    Strategy.regex(r"Baru\s+saja|Just\s+now", 40),
    Strategy.regex(r"Hari\s+ini|\bToday\b", 50),
    Strategy.regex(r"Kemarin|Yesterday", 60),
]

CLASSIFICATION_STRATEGIES = [
    Strategy.selector('[data-automation="jobClassification"]', 10),
    Strategy.selector('[data-automation="jobSubClassification"]', 20),
    Strategy.selector('[class*="classification"]', 30),
    Strategy.selector('[class*="category"]', 40),
]

JOB_TYPE_STRATEGIES = [
    Strategy.selector('[data-automation="jobWorkType"]', 10),
    Strategy.selector('[data-automation="job-detail-work-type"]', 20),
    Strategy.regex(
        r"\b(Full\s*time|Part\s*time|Paruh\s+waktu|Kontrak|Contract|Temporary"
        r"|Casual|Magang|Internship|Freelance)\b",
        30,
    ),
]

# Badges and labels removed when deriving the description snippet
SNIPPET_NOISE = [
    r"Akan segera berakhir",
    r"Dibutuhkan segera",
    r"Ini adalah lowongan kerja",
    r"Lowongan\s+di",
    r"Limit results to[^\]]*\]?",
    r"\bdi\b",
    r"Baru\s+saja|Recently|Hari\s+ini|Kemarin",
    r"\(\s*\)",
]

# --- Job Detail Page ---

JSON_LD_SELECTOR = 'script[type="application/ld+json"]'

DETAIL_TITLE_SELECTORS = [
    'h1[data-automation="job-detail-title"]',
    '[data-automation="job-detail-title"]',
    "h1",
]
DETAIL_COMPANY_SELECTORS = ['[data-automation="advertiser-name"]']
DETAIL_LOCATION_SELECTORS = ['[data-automation="job-detail-location"]']
DETAIL_SALARY_SELECTORS = ['[data-automation="job-detail-salary"]']
DETAIL_WORK_TYPE_SELECTORS = ['[data-automation="job-detail-work-type"]']
DETAIL_CLASSIFICATION_SELECTORS = [
    '[data-automation="job-detail-classifications"]',
    '[data-automation="job-detail-classification"]',
]
DETAIL_DATE_SELECTORS = ['[data-automation="job-detail-date"]']
DETAIL_DESCRIPTION_SELECTOR = '[data-automation="jobAdDetails"]'

# Label text that precedes a value on older detail layouts
DETAIL_LABELS = {
    "company": ["Company", "Perusahaan"],
    "location": ["Location", "Lokasi"],
    "salary": ["Salary", "Gaji"],
    "job_type": ["Job type", "Jenis pekerjaan"],
    "posted": ["Posted", "Diposting"],
}

DESCRIPTION_MIN_CHARS = 30
DESCRIPTION_SKIP_WORDS = ["cookie", "JobStreet"]
REQUIREMENT_MIN_CHARS = 10
REQUIREMENT_MAX_CHARS = 500
MAX_REQUIREMENTS = 20
