"""
Async HTTP Transport for dependabot-approve.

Handles authenticated communication with the GitHub REST API and retries
requests that fail at the network level.
"""

import asyncio
import time
from dataclasses import dataclass
from typing import Any

import httpx

from dependabot_approve.exceptions import ApiStatusError, InvalidResponseError, TransportError
from dependabot_approve.logging import get_logger, log_http_request, log_http_response

logger = get_logger("transport")

ACCEPT_HEADER = "application/vnd.github.v3+json"
SUPPORTED_METHODS = ("GET", "POST", "PUT")


@dataclass
class RetryConfig:
    """Configuration for automatic retry behavior.

    Only transport failures (connection errors, timeouts) are retried. An HTTP
    error status is a completed exchange and is handed back to the caller.
    """

    max_attempts: int = 5
    delay: float = 0.3  # Fixed wait between attempts, in seconds

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.delay < 0:
            raise ValueError("delay must not be negative")


class AsyncHTTPTransport:
    """
    Async HTTP transport layer with bearer authentication and retry logic.

    Handles:
    - Authorization, Accept and User-Agent headers on every request
    - Fixed-delay retry on connection errors and timeouts
    - Per-attempt debug tracing with the token masked
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        user_agent: str,
        timeout: float = 30.0,
        retry_config: RetryConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize async HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            token: GitHub token sent as a bearer credential
            user_agent: Value of the User-Agent header (GitHub requires one)
            timeout: Per-attempt request timeout in seconds
            retry_config: Configuration for retry behavior
            transport: Optional httpx transport, used by tests to fake the API
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry_config = retry_config or RetryConfig()

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": ACCEPT_HEADER,
                "User-Agent": user_agent,
            },
            transport=transport,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def execute(
        self,
        method: str,
        url: str,
        body: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """
        Send a request, retrying on transport failure.

        Args:
            method: HTTP method (GET, POST or PUT)
            url: API path (e.g., "/repos/o/r/pulls") or an absolute URL
            body: JSON request body (for POST/PUT)

        Returns:
            The response, whatever its status code

        Raises:
            TransportError: When every attempt failed at the network level
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported method: {method}")

        last_error: httpx.TransportError | None = None

        for attempt in range(1, self.retry_config.max_attempts + 1):
            log_http_request(method, url, attempt, dict(self._client.headers), body)
            started = time.monotonic()
            try:
                response = await self._client.request(method, url, json=body)
            except httpx.TransportError as e:
                last_error = e
                logger.debug("attempt %d for %s failed: %s", attempt, url, e)
                if attempt < self.retry_config.max_attempts:
                    await asyncio.sleep(self.retry_config.delay)
                continue

            log_http_response(
                response.status_code,
                url,
                attempt,
                elapsed_ms=(time.monotonic() - started) * 1000,
            )
            return response

        raise TransportError(url, self.retry_config.max_attempts, last_error) from last_error


def expect_success(response: httpx.Response) -> httpx.Response:
    """Return ``response`` unchanged, or raise ApiStatusError for a non-2xx status."""
    if not response.is_success:
        raise ApiStatusError(str(response.request.url), response.status_code, response.reason_phrase)
    return response


def decode_json(response: httpx.Response) -> Any:
    """Decode a JSON body, raising InvalidResponseError when it is not JSON."""
    try:
        return response.json()
    except ValueError as e:
        raise InvalidResponseError(str(response.request.url), f"body is not JSON: {e}") from e
