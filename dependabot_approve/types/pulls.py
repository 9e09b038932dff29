"""Pull request-related data models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PullRequest:
    """An open pull request as returned by the pulls listing."""

    number: int
    title: str
    author: str  # login of the PR author
    head_sha: str
    base_owner: str
    base_repo: str
    statuses_url: str
    comments_url: str


@dataclass(frozen=True)
class Review:
    """Pull request review."""

    review_id: int
    author: str
    body: str


@dataclass(frozen=True)
class Approval:
    """Body of an approving review submission."""

    commit_id: str
    body: str = "Approved automatically by dependabot merge"
    event: str = "APPROVE"
    comments: list[dict] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "commit_id": self.commit_id,
            "body": self.body,
            "event": self.event,
            "comments": list(self.comments),
        }
