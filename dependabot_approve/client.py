"""
dependabot-approve async client.

Holds the single authenticated connection used for a whole run.
"""

import os
from typing import Any

import httpx

from dependabot_approve.clients import (
    AsyncPullsClient,
    AsyncReviewsClient,
    AsyncStatusesClient,
)
from dependabot_approve.transport import AsyncHTTPTransport, RetryConfig


class AsyncDependabotClient:
    """
    Async client for the parts of the GitHub API this tool uses.

    Example:
        ```python
        import asyncio
        from dependabot_approve import AsyncDependabotClient

        async def main():
            async with AsyncDependabotClient(token="ghp_...", user_agent="octocat") as client:
                prs = await client.pulls.list_from_bots("octocat", "hello-world")
                for pr in prs:
                    print(pr.title, await client.statuses.latest_status(pr))

        asyncio.run(main())
        ```
    """

    DEFAULT_BASE_URL = "https://api.github.com"
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        token: str,
        user_agent: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            token: GitHub token
            user_agent: User-Agent header, conventionally the token owner's login
            base_url: Base URL for API requests (default: https://api.github.com)
            timeout: Per-attempt request timeout in seconds (default: 30.0)
            retry_config: Configuration for retry behavior (optional)
            transport: httpx transport override, for tests
        """
        self.user_agent = user_agent
        self.base_url = base_url
        self.timeout = timeout

        self._transport = AsyncHTTPTransport(
            base_url=base_url,
            token=token,
            user_agent=user_agent,
            timeout=timeout,
            retry_config=retry_config,
            transport=transport,
        )

        self.pulls = AsyncPullsClient(self._transport)
        self.statuses = AsyncStatusesClient(self._transport)
        self.reviews = AsyncReviewsClient(self._transport)

    @classmethod
    def from_env(
        cls,
        token: str,
        user_agent: str,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
    ) -> "AsyncDependabotClient":
        """
        Create a client whose base URL comes from the environment.

        Environment variables:
            GITHUB_BASE_URL: Base URL for API (optional, default: https://api.github.com)
        """
        base_url = os.environ.get("GITHUB_BASE_URL") or cls.DEFAULT_BASE_URL
        return cls(
            token=token,
            user_agent=user_agent,
            base_url=base_url,
            timeout=timeout,
            retry_config=retry_config,
        )

    @property
    def transport(self) -> AsyncHTTPTransport:
        """Get the underlying HTTP transport."""
        return self._transport

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._transport.close()

    async def __aenter__(self) -> "AsyncDependabotClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
