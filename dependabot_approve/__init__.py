"""dependabot-approve - approve dependabot pull requests from the command line."""

from dependabot_approve.client import AsyncDependabotClient
from dependabot_approve.credentials import load_token
from dependabot_approve.exceptions import (
    ApiStatusError,
    ConfigurationError,
    DependabotApproveError,
    InvalidResponseError,
    SelectionAbortedError,
    TransportError,
)
from dependabot_approve.logging import configure_logging, get_logger
from dependabot_approve.selection import Selection, parse_selection, prompt_selection, resolve_selection
from dependabot_approve.transport import AsyncHTTPTransport, RetryConfig
from dependabot_approve.types import Approval, Candidate, PullRequest, Review, StatusEvent

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main client
    "AsyncDependabotClient",
    # Credentials
    "load_token",
    # Exceptions
    "DependabotApproveError",
    "ApiStatusError",
    "ConfigurationError",
    "InvalidResponseError",
    "SelectionAbortedError",
    "TransportError",
    # Types
    "PullRequest",
    "Review",
    "Approval",
    "StatusEvent",
    "Candidate",
    # Selection
    "Selection",
    "parse_selection",
    "prompt_selection",
    "resolve_selection",
    # Transport
    "AsyncHTTPTransport",
    "RetryConfig",
    # Logging
    "configure_logging",
    "get_logger",
]
