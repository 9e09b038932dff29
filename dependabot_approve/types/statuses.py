"""Commit status data models."""

from dataclasses import dataclass
from datetime import datetime

from dependabot_approve.types.pulls import PullRequest


@dataclass(frozen=True)
class StatusEvent:
    """A single commit status posted against a PR's head commit."""

    created_at: datetime
    creator: str
    state: str  # "success", "pending", "failure", "error" or anything a reporter posts


@dataclass(frozen=True)
class Candidate:
    """A pull request paired with its most recent status."""

    pull_request: PullRequest
    status: str
