import asyncio
import random
import logging
import functools
from typing import Callable, Any, TypeVar, Coroutine

from jobfinder.config.settings import settings
from jobfinder.core.errors import FetchError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def backoff_delay(attempt: int, base_delay: float, max_delay: float) -> float:
    """Exponential delay for the given 0-based attempt, capped, plus up to 50% jitter."""
    delay = min(base_delay * (2**attempt), max_delay)
    return delay + random.uniform(0, 0.5 * delay)


def with_retry(
    max_retries: int = settings.MAX_RETRIES,
    base_delay: float = settings.RETRY_BASE_DELAY,
    max_delay: float = settings.RETRY_MAX_DELAY,
):
    """
    Decorator for async scrape calls. Retries FetchErrors flagged transient
    (timeouts, network errors, 429 and 5xx); everything else propagates on
    the first failure. The fetch client itself never retries.
    """

    def decorator(
        func: Callable[..., Coroutine[Any, Any, T]],
    ) -> Callable[..., Coroutine[Any, Any, T]]:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            for attempt in range(max_retries + 1):
                try:
                    return await func(*args, **kwargs)
                except FetchError as e:
                    if not e.transient:
                        raise
                    if attempt == max_retries:
                        if max_retries:
                            logger.error(f"Giving up on {e.url} after {max_retries} retries: {e}")
                        raise

                    sleep_time = backoff_delay(attempt, base_delay, max_delay)
                    logger.warning(
                        f"Retry {attempt + 1}/{max_retries} for {e.url} in {sleep_time:.2f}s: {e}"
                    )
                    await asyncio.sleep(sleep_time)

        return wrapper

    return decorator
