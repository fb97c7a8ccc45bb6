"""
Browser-like request headers for listing and detail page fetches.
"""

import logging
from typing import Dict, Optional

from fake_useragent import UserAgent

logger = logging.getLogger(__name__)

# Used when fake_useragent cannot load its browser data
FALLBACK_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

ACCEPT_HTML = (
    "text/html,application/xhtml+xml,application/xml;q=0.9,"
    "image/avif,image/webp,*/*;q=0.8"
)

_ua: Optional[UserAgent] = None


def random_user_agent() -> str:
    """A realistic browser UA, drawn fresh for every call."""
    global _ua
    if _ua is None:
        try:
            _ua = UserAgent(fallback=FALLBACK_UA)
        except Exception as e:
            logger.warning(f"fake_useragent unavailable, using fallback UA: {e}")
            return FALLBACK_UA
    return _ua.random


def browser_headers(accept_language: str, user_agent: Optional[str] = None) -> Dict[str, str]:
    """
    Headers a desktop browser sends on a top-level navigation. A fixed
    `user_agent` wins over the random one.
    """
    return {
        "User-Agent": user_agent or random_user_agent(),
        "Accept": ACCEPT_HTML,
        "Accept-Language": accept_language,
        "Upgrade-Insecure-Requests": "1",
        "Sec-Fetch-Dest": "document",
        "Sec-Fetch-Mode": "navigate",
        "Sec-Fetch-Site": "none",
    }
