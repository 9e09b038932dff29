"""dependabot-approve exception classes."""

EXIT_FAILURE = 1
EXIT_CONFIG = 67


class DependabotApproveError(Exception):
    """Base exception for all dependabot-approve errors."""

    exit_code = EXIT_FAILURE

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class ConfigurationError(DependabotApproveError):
    """Raised when a credential or other configuration is invalid or missing."""

    exit_code = EXIT_CONFIG

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class TransportError(DependabotApproveError):
    """Raised when every attempt of a request failed at the network level."""

    def __init__(self, url: str, attempts: int, last_error: Exception) -> None:
        super().__init__(
            "TRANSPORT_ERROR",
            f"{url} failed after {attempts} attempts: {last_error}",
        )
        self.url = url
        self.attempts = attempts
        self.last_error = last_error


class ApiStatusError(DependabotApproveError):
    """Raised when the API answers with a non-2xx status."""

    def __init__(self, url: str, status_code: int, reason: str = "") -> None:
        status = f"{status_code} {reason}".strip()
        super().__init__("API_STATUS_ERROR", f"{url} returned {status}")
        self.url = url
        self.status_code = status_code
        self.reason = reason

    @property
    def status(self) -> str:
        return f"{self.status_code} {self.reason}".strip()


class InvalidResponseError(DependabotApproveError):
    """Raised when a 2xx response body does not have the expected shape."""

    def __init__(self, url: str, detail: str) -> None:
        super().__init__("INVALID_RESPONSE", f"{url}: {detail}")
        self.url = url


class SelectionAbortedError(DependabotApproveError):
    """Raised when the operator failed to give a parseable selection."""

    exit_code = EXIT_CONFIG

    def __init__(self, attempts: int) -> None:
        super().__init__(
            "SELECTION_ABORTED", f"Failed to parse input {attempts} times, exiting"
        )
        self.attempts = attempts
