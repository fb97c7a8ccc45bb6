"""
Salary extraction by regex pattern matching over card text.
"""

import logging
from typing import Optional

from bs4 import Tag

from jobfinder.adapters.jobstreet.selectors import SALARY_STRATEGIES
from jobfinder.adapters.jobstreet.utils import safe_extract

logger = logging.getLogger(__name__)


def extract_salary(card: Tag, text: Optional[str] = None) -> Optional[str]:
    """
    Raw salary text (e.g. "Rp 5.000.000 – Rp 6.000.000 per month"), or None.

    Unlike the other fields there is no sentinel: "no salary" stays a
    distinct state for downstream filtering.
    """
    return safe_extract(card, SALARY_STRATEGIES, "salary", text=text)
