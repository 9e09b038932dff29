"""
Pytest fixtures and payload builders for dependabot-approve tests.

The ``create_mock_*`` helpers build JSON payloads shaped like GitHub's, to be
served by MockGitHubAPI.
"""

from collections.abc import Generator
from datetime import datetime, timezone
from typing import Any

import pytest

from dependabot_approve.testing.mock import DEFAULT_BASE_URL, MockGitHubAPI
from dependabot_approve.types.pulls import PullRequest, Review


def create_mock_pull_request(
    number: int = 1,
    title: str | None = None,
    login: str = "dependabot[bot]",
    sha: str | None = None,
    owner: str = "octocat",
    repo: str = "hello-world",
    base_url: str = DEFAULT_BASE_URL,
) -> dict[str, Any]:
    """Build a pull request payload as returned by ``GET /repos/{owner}/{repo}/pulls``."""
    sha = sha or f"{number:040x}"
    return {
        "number": number,
        "title": title or f"Bump dependency-{number} from 1.0.0 to 1.0.1",
        "user": {"login": login},
        "head": {"sha": sha, "repo": {"name": repo, "owner": {"login": owner}}},
        "base": {"sha": "0" * 40, "repo": {"name": repo, "owner": {"login": owner}}},
        "comments_url": f"{base_url}/repos/{owner}/{repo}/issues/{number}/comments",
        "review_comments_url": f"{base_url}/repos/{owner}/{repo}/pulls/{number}/comments",
        "requested_reviewers": [],
        "_links": {
            "statuses": {"href": f"{base_url}/repos/{owner}/{repo}/statuses/{sha}"},
        },
    }


def create_mock_status(
    state: str = "success",
    created_at: datetime | str = datetime(2024, 1, 15, 10, 30, 0),
    creator: str = "ci-bot",
) -> dict[str, Any]:
    """Build a commit status payload."""
    if isinstance(created_at, datetime):
        created_at = created_at.strftime("%Y-%m-%dT%H:%M:%SZ")
    return {
        "state": state,
        "created_at": created_at,
        "updated_at": created_at,
        "creator": {"login": creator},
        "context": "ci/test",
    }


def create_mock_review(
    review_id: int = 1,
    login: str = "reviewer",
    body: str = "",
    state: str = "COMMENTED",
) -> dict[str, Any]:
    """Build a pull request review payload."""
    return {
        "id": review_id,
        "user": {"login": login},
        "body": body,
        "state": state,
    }


# ============================================================================
# Fake API Fixtures
# ============================================================================


@pytest.fixture
def mock_api() -> Generator[MockGitHubAPI, None, None]:
    """
    Provide an empty MockGitHubAPI.

    Example:
        ```python
        def test_my_feature(mock_api):
            mock_api.add_pull_requests("octocat", "hello-world", [create_mock_pull_request()])
            ...
            assert mock_api.was_called("GET", "/repos/octocat/hello-world/pulls")
        ```
    """
    api = MockGitHubAPI()
    yield api
    api.reset()


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_pull_request() -> PullRequest:
    """Provide a sample PullRequest object."""
    return PullRequest(
        number=7,
        title="Bump requests from 2.31.0 to 2.32.0",
        author="dependabot[bot]",
        head_sha="abc123",
        base_owner="octocat",
        base_repo="hello-world",
        statuses_url=f"{DEFAULT_BASE_URL}/repos/octocat/hello-world/statuses/abc123",
        comments_url=f"{DEFAULT_BASE_URL}/repos/octocat/hello-world/issues/7/comments",
    )


@pytest.fixture
def sample_review() -> Review:
    """Provide a sample Review object."""
    return Review(review_id=42, author="spam-bot", body="Great PR! Check out my spam")


@pytest.fixture
def utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(microsecond=0)
