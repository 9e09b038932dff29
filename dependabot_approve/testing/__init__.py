"""dependabot-approve testing utilities.

Provides a fake GitHub API and payload builders for testing the tool and
code built on top of it.
"""

from dependabot_approve.testing.fixtures import (
    create_mock_pull_request,
    create_mock_review,
    create_mock_status,
)
from dependabot_approve.testing.mock import (
    MockCall,
    MockGitHubAPI,
    MockResponse,
    create_mock_client,
)

__all__ = [
    # Fake API
    "MockGitHubAPI",
    "MockCall",
    "MockResponse",
    "create_mock_client",
    # Payload builders
    "create_mock_pull_request",
    "create_mock_status",
    "create_mock_review",
]
