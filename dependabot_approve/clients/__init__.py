"""dependabot-approve resource clients."""

from dependabot_approve.clients.pulls import AsyncPullsClient
from dependabot_approve.clients.reviews import AsyncReviewsClient
from dependabot_approve.clients.statuses import AsyncStatusesClient

__all__ = [
    "AsyncPullsClient",
    "AsyncReviewsClient",
    "AsyncStatusesClient",
]
