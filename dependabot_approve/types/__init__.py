"""dependabot-approve type definitions.

This module exports all data model types used by the package.
"""

from dependabot_approve.types.pulls import Approval, PullRequest, Review
from dependabot_approve.types.statuses import Candidate, StatusEvent

__all__ = [
    # Pull request types
    "PullRequest",
    "Review",
    "Approval",
    # Status types
    "StatusEvent",
    "Candidate",
]
