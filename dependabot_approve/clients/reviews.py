"""Reviews resource client."""

from typing import TYPE_CHECKING, Any

from dependabot_approve.debug import WRITE_PRS_ENV, dump_response
from dependabot_approve.exceptions import InvalidResponseError
from dependabot_approve.transport import decode_json, expect_success
from dependabot_approve.types.pulls import Approval, PullRequest, Review

if TYPE_CHECKING:
    import httpx

    from dependabot_approve.transport import AsyncHTTPTransport

DISMISSAL_MESSAGE = "junk"


def is_junk_review(review: Review, login: str | None = None, text: str | None = None) -> bool:
    """
    Decide whether a review should be dismissed.

    Both filters must hold when given; a missing filter matches everything.
    The login comparison is exact and ``text`` is a case-sensitive substring.
    """
    if login is not None and review.author != login:
        return False
    if text is not None and text not in review.body:
        return False
    return True


def _reviews_path(pull_request: PullRequest) -> str:
    return (
        f"/repos/{pull_request.base_owner}/{pull_request.base_repo}"
        f"/pulls/{pull_request.number}/reviews"
    )


class AsyncReviewsClient:
    """Async client for pull request review operations."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the reviews client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def list(self, pull_request: PullRequest) -> list[Review]:
        """
        List reviews for a pull request.

        Raises:
            ApiStatusError: If the API answers with a non-2xx status
            TransportError: If the API could not be reached
        """
        response = expect_success(
            await self.transport.execute("GET", _reviews_path(pull_request))
        )
        dump_response(
            WRITE_PRS_ENV, f"PRS.{pull_request.author}.{pull_request.number}.json", response.text
        )

        data = decode_json(response)
        if not isinstance(data, list):
            raise InvalidResponseError(str(response.request.url), "expected a list of reviews")
        try:
            return [self._parse_review(review) for review in data]
        except (KeyError, TypeError) as e:
            raise InvalidResponseError(
                str(response.request.url), f"malformed review: {e!r}"
            ) from e

    async def find_junk(
        self,
        pull_request: PullRequest,
        login: str | None = None,
        text: str | None = None,
    ) -> "list[Review]":
        """
        List the reviews on a pull request that match the junk filters.

        Args:
            pull_request: The pull request to scan
            login: Only reviews written by this login
            text: Only reviews whose body contains this text
        """
        return [
            review
            for review in await self.list(pull_request)
            if is_junk_review(review, login, text)
        ]

    async def approve(self, pull_request: PullRequest) -> "httpx.Response":
        """
        Submit an approving review for the pull request's head commit.

        Returns:
            The successful response

        Raises:
            ApiStatusError: If GitHub rejected the review
            TransportError: If the API could not be reached
        """
        approval = Approval(commit_id=pull_request.head_sha)
        response = await self.transport.execute(
            "POST", _reviews_path(pull_request), body=approval.to_dict()
        )
        return expect_success(response)

    async def dismiss(
        self,
        pull_request: PullRequest,
        review: Review,
        message: str = DISMISSAL_MESSAGE,
    ) -> "httpx.Response":
        """
        Dismiss a review.

        Raises:
            ApiStatusError: If GitHub refused the dismissal
            TransportError: If the API could not be reached
        """
        response = await self.transport.execute(
            "PUT",
            f"{_reviews_path(pull_request)}/{review.review_id}/dismissals",
            body={"message": message},
        )
        return expect_success(response)

    def _parse_review(self, data: dict[str, Any]) -> Review:
        user = data.get("user") or {}
        return Review(
            review_id=data["id"],
            author=user.get("login", ""),
            body=data.get("body") or "",
        )
