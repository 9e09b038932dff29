"""Shared fixtures for dependabot-approve tests."""

from dependabot_approve.testing.conftest import (  # noqa: F401
    mock_api,
    sample_pull_request,
    sample_review,
    utc_now,
)
