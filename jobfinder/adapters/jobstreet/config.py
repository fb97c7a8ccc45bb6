"""
JobStreet Indonesia constants and configuration.
"""

# Base URLs
BASE_URL = "https://id.jobstreet.com"
JOBS_PATH = "/id/jobs"
CLASSIFICATION_PATH = "/id/jobs-in-{classification}"
DEFAULT_LISTING_URL = f"{BASE_URL}{JOBS_PATH}/in-Indonesia"
LATEST_URL = f"{BASE_URL}/id/terbaru-jobs?pos=1"
RECOMMENDATIONS_URL = f"{BASE_URL}/id/rekomendasi-jobs"
JOB_DETAIL_URL = f"{BASE_URL}/id/job/{{job_id}}"

# Job detail links share this path prefix
JOB_DETAIL_PATH = "/id/job/"

# Provenance strings carried on every record
SOURCE_NAME = "JobStreet Indonesia"
FALLBACK_SOURCE_NAME = "JobStreet Indonesia (Sample)"

# Limits
LATEST_MAX_JOBS = 8
CARD_PARENT_LEVELS = 2  # last-resort card resolution
SNIPPET_MAX_CHARS = 150

# Location values that mean "no location filter"
ALL_LOCATIONS_SENTINELS = {"semua lokasi", "all locations", "indonesia"}

# Administrative prefixes stripped from location slugs, longest first
LOCATION_PREFIXES = [
    "daerah khusus ibukota",
    "special capital region of",
    "daerah istimewa",
    "special region of",
    "province of",
    "provinsi",
    "kabupaten",
    "kota",
    "dki",
    "di",
]

# Field defaults
UNKNOWN_COMPANY = "Perusahaan Rahasia"
DEFAULT_LOCATION = "Indonesia"
UNKNOWN_POSTED = "N/A"
SNIPPET_PLACEHOLDER = "Klik link untuk melihat detail lengkap pekerjaan ini"
