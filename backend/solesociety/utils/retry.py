import logging
from typing import Tuple, Type

import httpx
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    before_sleep_log,
)

logger = logging.getLogger(__name__)

RETRYABLE_EXCEPTIONS: Tuple[Type[Exception], ...] = (
    httpx.TimeoutException,
    httpx.NetworkError,
)


def create_retry_decorator(max_attempts: int = 1, min_wait: float = 0.5, max_wait: float = 4.0):
    """
    Create a retry decorator for upstream calls.

    KicksDB calls are not retried unless UPSTREAM_RETRY_ATTEMPTS is raised
    above 1; the default decorator makes exactly one attempt.

    Args:
        max_attempts: Total number of attempts, including the first one
        min_wait: Minimum wait time in seconds between attempts
        max_wait: Maximum wait time in seconds between attempts
    """
    return retry(
        stop=stop_after_attempt(max(1, max_attempts)),
        wait=wait_exponential(multiplier=0.5, min=min_wait, max=max_wait),
        retry=retry_if_exception_type(RETRYABLE_EXCEPTIONS),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
