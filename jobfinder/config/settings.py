from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parent.parent.parent

class Settings(BaseSettings):
    class Config:
        env_file = BASE_DIR / ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    """
    Configuration settings for the job finder service.
    """

    # Fetching
    FETCH_TIMEOUT_MS: int = 15000
    # Leave unset to draw a random desktop browser UA per request.
    USER_AGENT: Optional[str] = None
    ACCEPT_LANGUAGE: str = "id-ID,id;q=0.9,en-US;q=0.8,en;q=0.7"

    # Cache TTLs (seconds)
    CACHE_TTL_SECONDS: int = 900
    SEARCH_CACHE_TTL_SECONDS: int = 600
    FILTERS_CACHE_TTL_SECONDS: int = 3600
    DETAIL_CACHE_TTL_SECONDS: int = 900

    # Extraction
    MIN_TITLE_LENGTH: int = 4
    PER_PAGE_MAX: int = 100
    EXTRA_LOCATIONS: List[str] = []

    # Retries (applied by the runner, never inside the fetch client)
    MAX_RETRIES: int = 2
    RETRY_BASE_DELAY: float = 1.0  # seconds
    RETRY_MAX_DELAY: float = 4.0  # seconds

    # Service
    LOG_LEVEL: str = "INFO"
    CORS_ALLOW_ORIGINS: List[str] = ["*"]

settings = Settings()
