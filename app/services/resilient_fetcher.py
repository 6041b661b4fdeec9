"""Single outbound GET with bounded retries and exponential backoff with jitter.

Every failure is retried, including 4xx responses: there is no distinction
between transient and permanent errors. The delay before attempt i+1 is
2^i * base_delay plus up to one second of jitter, and nothing is awaited
after the final attempt.
"""

import asyncio
import logging
import random
from typing import Awaitable, Callable, Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_BASE_DELAY = 1.0
MAX_JITTER = 1.0

SleepFunc = Callable[[float], Awaitable[None]]
JitterFunc = Callable[[float, float], float]


class FetchError(Exception):
    """Raised once every attempt has failed. The message is the last failure's."""

    def __init__(self, message: str, attempts: int, status_code: Optional[int] = None):
        super().__init__(message)
        self.attempts = attempts
        self.status_code = status_code


def get_sleep() -> SleepFunc:
    """Sleep used between attempts; tests replace it through dependency overrides."""
    return asyncio.sleep


def backoff_delay(attempt: int, base_delay: float = DEFAULT_BASE_DELAY, jitter: JitterFunc = random.uniform) -> float:
    return (2 ** attempt) * base_delay + jitter(0, MAX_JITTER)


async def fetch_with_retry(
    client: httpx.AsyncClient,
    url: str,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    *,
    sleep: SleepFunc = asyncio.sleep,
    jitter: JitterFunc = random.uniform,
    base_delay: float = DEFAULT_BASE_DELAY,
) -> str:
    """GET url and return the body text of the first 2xx response.

    Raises FetchError carrying the most recent failure after max_attempts.
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")

    last_error = ""
    last_status: Optional[int] = None

    for attempt in range(max_attempts):
        try:
            response = await client.get(url)
            if response.is_success:
                if attempt > 0:
                    logger.info(f"Fetched {url} on attempt {attempt + 1}/{max_attempts}")
                return response.text
            last_status = response.status_code
            last_error = f"Request failed with status {response.status_code}"
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            last_status = None
            last_error = str(e) or type(e).__name__

        logger.warning(f"Attempt {attempt + 1}/{max_attempts} for {url} failed: {last_error}")

        if attempt < max_attempts - 1:
            delay = backoff_delay(attempt, base_delay, jitter)
            logger.debug(f"Retrying {url} in {delay:.2f}s")
            await sleep(delay)

    logger.error(f"Giving up on {url} after {max_attempts} attempts: {last_error}")
    raise FetchError(last_error, attempts=max_attempts, status_code=last_status)
