"""Pull requests resource client."""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from dependabot_approve.debug import WRITE_PRS_ENV, dump_response
from dependabot_approve.exceptions import InvalidResponseError
from dependabot_approve.transport import decode_json, expect_success
from dependabot_approve.types.pulls import PullRequest

if TYPE_CHECKING:
    from dependabot_approve.transport import AsyncHTTPTransport

# Logins dependabot has opened pull requests under, current and legacy
BOT_LOGINS = ("dependabot[bot]", "dependabot-preview[bot]")


def filter_bot_pull_requests(
    pull_requests: Iterable[PullRequest],
    bot_logins: Iterable[str] = BOT_LOGINS,
) -> list[PullRequest]:
    """Keep the pull requests opened by one of ``bot_logins``, ignoring case."""
    logins = {login.lower() for login in bot_logins}
    return [pr for pr in pull_requests if pr.author.lower() in logins]


def filter_pull_requests_by_author(
    pull_requests: Iterable[PullRequest], login: str
) -> list[PullRequest]:
    """Keep the pull requests opened by ``login``, ignoring case."""
    login = login.lower()
    return [pr for pr in pull_requests if pr.author.lower() == login]


class AsyncPullsClient:
    """Async client for pull request discovery."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the pulls client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def list(self, owner: str, repo: str) -> list[PullRequest]:
        """
        List open pull requests for a repository.

        Args:
            owner: Repository owner login
            repo: Repository name

        Returns:
            List of PullRequest objects

        Raises:
            ApiStatusError: If the API answers with a non-2xx status
            TransportError: If the API could not be reached
        """
        response = expect_success(
            await self.transport.execute("GET", f"/repos/{owner}/{repo}/pulls")
        )
        dump_response(WRITE_PRS_ENV, f"PRS.{owner}.{repo}.json", response.text)

        data = decode_json(response)
        if not isinstance(data, list):
            raise InvalidResponseError(str(response.request.url), "expected a list of pull requests")
        try:
            return [self._parse_pull_request(pr) for pr in data]
        except (KeyError, TypeError) as e:
            raise InvalidResponseError(
                str(response.request.url), f"malformed pull request: {e!r}"
            ) from e

    async def list_from_bots(self, owner: str, repo: str) -> "list[PullRequest]":
        """List open pull requests opened by dependabot."""
        return filter_bot_pull_requests(await self.list(owner, repo))

    async def list_own(self, owner: str, repo: str, login: str) -> "list[PullRequest]":
        """List open pull requests opened by ``login``."""
        return filter_pull_requests_by_author(await self.list(owner, repo), login)

    def _parse_pull_request(self, data: dict[str, Any]) -> PullRequest:
        """Parse pull request data from API response."""
        base_repo = data["base"]["repo"]
        return PullRequest(
            number=data["number"],
            title=data["title"],
            author=data["user"]["login"],
            head_sha=data["head"]["sha"],
            base_owner=base_repo["owner"]["login"],
            base_repo=base_repo["name"],
            statuses_url=data["_links"]["statuses"]["href"],
            comments_url=data.get("comments_url", ""),
        )
