"""
Pytest plugin for dependabot-approve testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
discovered by pytest. To use them, add this to your top-level conftest.py:

    pytest_plugins = ["dependabot_approve.testing.conftest"]

Or import the fixtures directly:

    from dependabot_approve.testing.fixtures import mock_api, sample_pull_request
"""

# Re-export all fixtures for pytest auto-discovery
from dependabot_approve.testing.fixtures import (
    mock_api,
    sample_pull_request,
    sample_review,
    utc_now,
)

__all__ = [
    "mock_api",
    "sample_pull_request",
    "sample_review",
    "utc_now",
]
