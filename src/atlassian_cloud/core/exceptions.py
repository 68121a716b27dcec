"""Exception hierarchy for atlassian-cloud."""

from typing import Any


class AtlassianError(Exception):
    """Base exception for all atlassian-cloud errors."""

    def __init__(self, message: str, provider: str | None = None, details: dict | None = None):
        """Initialize AtlassianError.

        Args:
            message: Error message
            provider: Product the error came from (e.g., 'jira', 'confluence')
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.provider = provider
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation."""
        if self.provider:
            return f"[{self.provider}] {self.message}"
        return self.message


class ValidationError(AtlassianError):
    """A required argument is missing or invalid. Raised before any request is sent."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        provider: str | None = None,
        details: dict | None = None,
    ):
        """Initialize ValidationError.

        Args:
            message: Error message
            field: Argument that failed validation
            provider: Provider name
            details: Additional error details
        """
        super().__init__(message, provider, details)
        self.field = field


class AtlassianConnectionError(AtlassianError):
    """The HTTP transport failed (DNS, refused connection, timeout)."""


class DecodeError(AtlassianError):
    """A successful response body could not be decoded into the expected type."""


class RequestFailedError(AtlassianError):
    """The server answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        method: str | None = None,
        endpoint: str | None = None,
        response: Any = None,
        provider: str | None = None,
        details: dict | None = None,
    ):
        """Initialize RequestFailedError.

        Args:
            message: Error message
            status_code: HTTP status code
            method: HTTP method of the failed request
            endpoint: Full URL of the failed request
            response: Decoded JSON error body, or raw text when not JSON
            provider: Provider name
            details: Additional error details
        """
        super().__init__(message, provider, details)
        self.status_code = status_code
        self.method = method
        self.endpoint = endpoint
        self.response = response


class BadRequestError(RequestFailedError):
    """400 Bad Request."""


class AuthenticationError(RequestFailedError):
    """401 Unauthorized."""


class ForbiddenError(RequestFailedError):
    """403 Forbidden."""


class NotFoundError(RequestFailedError):
    """404 Not Found."""


class RateLimitError(RequestFailedError):
    """429 Too Many Requests.

    The client never retries; ``retry_after`` is exposed so callers can decide.
    """

    def __init__(self, message: str, status_code: int = 429, retry_after: int | None = None, **kwargs: Any):
        """Initialize RateLimitError.

        Args:
            message: Error message
            status_code: HTTP status code
            retry_after: Seconds until retry is allowed, from the Retry-After header
            **kwargs: Passed to RequestFailedError
        """
        super().__init__(message, status_code, **kwargs)
        self.retry_after = retry_after


class InternalServerError(RequestFailedError):
    """500 Internal Server Error."""


STATUS_ERRORS: dict[int, type[RequestFailedError]] = {
    400: BadRequestError,
    401: AuthenticationError,
    403: ForbiddenError,
    404: NotFoundError,
    429: RateLimitError,
    500: InternalServerError,
}
