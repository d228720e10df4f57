"""
Low-level client for the ProPublica Congress API.

Handles what every call has in common: the versioned URL, the API key
header, the page offset and unwrapping the ``results`` envelope.
"""

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field

from propublica_congress import http
from propublica_congress.errors import InvalidArgumentError, InvalidResponseError
from propublica_congress.validators import is_valid_api_key, is_valid_offset, is_valid_response

logger = logging.getLogger(__name__)

DEFAULT_HOST = "https://api.propublica.org"
DEFAULT_VERSION = "1"


class ClientConfig(BaseModel):
    """Immutable settings shared by every request a client makes."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1, description="ProPublica API key, sent as X-API-Key.")
    host: str = Field(DEFAULT_HOST, description="API origin, without a trailing slash.")
    version: str = Field(DEFAULT_VERSION, description="API version, the N in /congress/vN.")
    strict_results: bool = Field(
        True, description="Require exactly one element in 'results' instead of at least one."
    )
    timeout: float = Field(http.DEFAULT_TIMEOUT, description="Timeout for each request in seconds.")
    max_attempts: int = Field(1, ge=1, description="Attempts per request; 1 never retries.")


class ProPublicaClient:
    """Performs authenticated GETs against the versioned Congress API."""

    def __init__(self, config: ClientConfig, http_client: httpx.AsyncClient | None = None):
        self.config = config
        self._owns_http_client = http_client is None
        if http_client is None:
            http_client = httpx.AsyncClient(timeout=config.timeout, follow_redirects=True)
        self.http_client = http_client

    @property
    def key(self) -> str:
        return self.config.key

    @property
    def host(self) -> str:
        return self.config.host

    @property
    def version(self) -> str:
        return self.config.version

    def url_for(self, endpoint: str) -> str:
        return f"{self.host}/congress/v{self.version}/{endpoint}.json"

    async def get(self, endpoint: str, offset: int | str = 0) -> Any:
        """
        GET an endpoint and return the first element of its results.

        Args:
            endpoint: Endpoint fragment, e.g. 'members/new'.
            offset: Page offset, a multiple of 20.

        Raises:
            InvalidArgumentError: If offset is invalid. No request is made.
            InvalidResponseError: If the body is not a results envelope.
            httpx.HTTPError: Transport and status errors, unchanged.
        """
        if not is_valid_offset(offset):
            raise InvalidArgumentError("offset", offset)

        url = self.url_for(endpoint)
        headers = {"X-API-Key": self.key, "Accept": "application/json"}
        params = {"offset": int(offset)} if int(offset) else {}

        logger.debug(f"GET {url}", extra={"props": {"endpoint": endpoint, "offset": int(offset)}})

        try:
            response = await http.get(
                url,
                headers=headers,
                params=params,
                client=self.http_client,
                timeout=self.config.timeout,
                max_attempts=self.config.max_attempts,
            )
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error: {e.response.status_code} - {e.response.text}")
            raise

        try:
            payload = response.json()
        except ValueError as e:
            raise InvalidResponseError(response.text, "Response body is not JSON") from e

        return self._unwrap(payload)

    def _unwrap(self, payload: Any) -> Any:
        if not is_valid_response(payload, exact=self.config.strict_results):
            message = "Invalid response structure"
            if isinstance(payload, dict) and payload.get("status") == "ERROR":
                message = "API returned an error"
            logger.warning(f"{message} (strict_results={self.config.strict_results})")
            raise InvalidResponseError(payload, message)
        return payload["results"][0]

    async def aclose(self) -> None:
        """Close the underlying AsyncClient if this client created it."""
        if self._owns_http_client:
            await self.http_client.aclose()

    async def __aenter__(self) -> "ProPublicaClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def create_client(
    key: str,
    *,
    version: str = DEFAULT_VERSION,
    host: str = DEFAULT_HOST,
    strict_results: bool = True,
    timeout: float = http.DEFAULT_TIMEOUT,
    max_attempts: int = 1,
    http_client: httpx.AsyncClient | None = None,
) -> ProPublicaClient:
    """
    Factory for low-level client instances.

    Raises:
        InvalidArgumentError: If the key is not a non-empty string.
    """
    if not is_valid_api_key(key):
        raise InvalidArgumentError("api_key", key)
    config = ClientConfig(
        key=key,
        host=host.rstrip("/"),
        version=str(version),
        strict_results=strict_results,
        timeout=timeout,
        max_attempts=max_attempts,
    )
    return ProPublicaClient(config, http_client=http_client)
