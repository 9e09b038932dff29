"""Commit statuses resource client."""

from collections.abc import Iterable
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from dependabot_approve.debug import WRITE_STATUSES_ENV, dump_response
from dependabot_approve.exceptions import InvalidResponseError
from dependabot_approve.transport import decode_json, expect_success
from dependabot_approve.types.pulls import PullRequest
from dependabot_approve.types.statuses import StatusEvent

if TYPE_CHECKING:
    from dependabot_approve.transport import AsyncHTTPTransport


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 API timestamp into an aware UTC datetime."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def reduce_latest_status(
    events: Iterable[StatusEvent], creator: str | None = None
) -> str | None:
    """
    Reduce status events to the state of the most recent one.

    Events from anyone other than ``creator`` are dropped before the
    reduction. On equal timestamps the event seen first is kept.

    Returns:
        The winning state, or None if no event qualifies
    """
    latest: StatusEvent | None = None
    for event in events:
        if creator is not None and event.creator != creator:
            continue
        # strict comparison keeps the first of equal timestamps
        if latest is None or event.created_at > latest.created_at:
            latest = event
    return latest.state if latest is not None else None


class AsyncStatusesClient:
    """Async client for commit statuses attached to a pull request."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the statuses client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def list(self, pull_request: PullRequest) -> list[StatusEvent]:
        """
        Fetch every status posted against a pull request, in API order.

        Raises:
            ApiStatusError: If the API answers with a non-2xx status
            TransportError: If the API could not be reached
        """
        response = expect_success(
            await self.transport.execute("GET", pull_request.statuses_url)
        )
        dump_response(WRITE_STATUSES_ENV, f"statuses.{pull_request.title}.json", response.text)

        data = decode_json(response)
        if not isinstance(data, list):
            raise InvalidResponseError(pull_request.statuses_url, "expected a list of statuses")
        try:
            return [self._parse_status(status) for status in data]
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidResponseError(
                pull_request.statuses_url, f"malformed status: {e!r}"
            ) from e

    async def latest_status(
        self, pull_request: PullRequest, creator: str | None = None
    ) -> str | None:
        """
        Resolve the most recent status of a pull request.

        Args:
            pull_request: The pull request to inspect
            creator: Only consider statuses posted by this login

        Returns:
            The state of the latest qualifying status, or None if there is none
        """
        return reduce_latest_status(await self.list(pull_request), creator)

    def _parse_status(self, data: dict[str, Any]) -> StatusEvent:
        creator = data.get("creator") or {}
        return StatusEvent(
            created_at=parse_timestamp(data["created_at"]),
            creator=creator.get("login", ""),
            state=data["state"],
        )
