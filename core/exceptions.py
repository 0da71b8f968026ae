"""Custom exception hierarchy for the CORS relay."""


class RelayError(Exception):
    """Base exception for all relay errors."""

    status_code = 500


class InputValidationError(RelayError):
    """Raised when the payload lacks a usable target URL."""

    status_code = 400


class MethodNotAllowedError(RelayError):
    """Raised for inbound methods other than POST and OPTIONS."""

    status_code = 405

    def __init__(self, message: str = "Method Not Allowed. Use POST.") -> None:
        super().__init__(message)


class PayloadError(RelayError):
    """Raised when a payload field has the wrong type."""


class UpstreamError(RelayError):
    """Raised when the outbound request to the target fails.

    Attributes:
        message: Error message
        url: Target URL of the failed request (optional)
    """

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class UpstreamTimeoutError(UpstreamError):
    """Raised when the target does not answer in time."""


class UpstreamConnectionError(UpstreamError):
    """Raised when unable to connect to the target."""
