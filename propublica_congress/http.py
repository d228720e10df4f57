"""
Extremely thin wrapper around an httpx GET.

Everything transport-related (connections, TLS, timeouts, retries) stays
here so the client only deals with URLs, headers and response bodies.
"""

import logging
from typing import Any

import httpx
from tenacity import AsyncRetrying, retry_if_exception, stop_after_attempt, wait_exponential

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
RETRYABLE_STATUS_CODES = (429, 500, 502, 503, 504)


def _is_retryable_error(exception):
    """Check if the exception is retryable."""
    if isinstance(exception, (httpx.NetworkError, httpx.TimeoutException)):
        return True
    if isinstance(exception, httpx.HTTPStatusError):
        return exception.response.status_code in RETRYABLE_STATUS_CODES
    return False


async def _send(
    client: httpx.AsyncClient | None,
    url: str,
    headers: dict[str, str],
    params: dict[str, Any],
    timeout: float,
) -> httpx.Response:
    if client is not None:
        return await client.get(url, headers=headers, params=params)
    async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as owned:
        return await owned.get(url, headers=headers, params=params)


async def get(
    url: str,
    *,
    headers: dict[str, str] | None = None,
    params: dict[str, Any] | None = None,
    client: httpx.AsyncClient | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    max_attempts: int = 1,
) -> httpx.Response:
    """
    Perform a GET and return the response once its status is checked.

    Args:
        url: Absolute request URL.
        headers: Request headers.
        params: Query parameters.
        client: Shared AsyncClient. A short-lived one is opened when omitted.
        timeout: Timeout for the short-lived client.
        max_attempts: Total attempts for network errors, timeouts, 429 and 5xx.
            The default of 1 never retries.

    Raises:
        httpx.HTTPStatusError: On a 4xx/5xx response.
        httpx.TransportError: On connection or timeout failures.
    """
    async for attempt in AsyncRetrying(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception(_is_retryable_error),
        reraise=True,
    ):
        with attempt:
            if attempt.retry_state.attempt_number > 1:
                logger.warning(f"Retrying GET {url} (attempt {attempt.retry_state.attempt_number}/{max_attempts})")
            response = await _send(client, url, headers or {}, params or {}, timeout)
            response.raise_for_status()
            return response
