"""
Exception hierarchy for the App Center client library.

Each exception maps to an HTTP status code returned by the App Center API and
keeps the error code and payload from the server's error envelope.
"""

from typing import Any, Dict, Optional


class AppCenterClientError(Exception):
    """
    Base exception for all App Center client errors.

    Subclasses set ``default_message`` and ``default_status_code``; both are
    used when the caller does not pass its own.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (if applicable)
        error_code: App Center error code (e.g., "NotFound")
        details: Additional error details from the response
    """

    default_message = "App Center request failed"
    default_status_code: Optional[int] = None

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.status_code = status_code if status_code is not None else self.default_status_code
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        parts = [self.message]
        if self.error_code:
            parts.insert(0, f"[{self.error_code}]")
        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")
        return " ".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"status_code={self.status_code}, "
            f"error_code={self.error_code!r})"
        )


class AuthenticationError(AppCenterClientError):
    """No API token was sent, or the token is invalid or revoked."""

    default_message = "Authentication required"
    default_status_code = 401


class AuthorizationError(AppCenterClientError):
    """The token is valid but lacks permission for the requested operation."""

    default_message = "Access denied"
    default_status_code = 403


class ValidationError(AppCenterClientError):
    default_message = "Validation error"
    default_status_code = 400


class NotFoundError(AppCenterClientError):
    """Requested resource was not found."""

    default_message = "Resource not found"
    default_status_code = 404

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
    ):
        if resource_type or resource_id:
            details = details or {}
            if resource_type:
                details["resource_type"] = resource_type
            if resource_id:
                details["resource_id"] = resource_id
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class AppNotFoundError(NotFoundError):
    """The app does not exist or is not visible to the user."""

    def __init__(
        self,
        app_identifier: Optional[str] = None,
        *,
        message: Optional[str] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message or (f"App not found: {app_identifier}" if app_identifier else "App not found"),
            error_code=error_code,
            details=details,
            resource_type="app",
            resource_id=app_identifier,
        )


class ConflictError(AppCenterClientError):
    """
    Request conflicts with current state of the resource.

    CodePush answers 409 when the uploaded package is identical to the
    latest release of the deployment.
    """

    default_message = "Resource conflict"
    default_status_code = 409


class RateLimitError(AppCenterClientError):
    """
    Rate limit exceeded.

    The retry_after attribute holds the number of seconds to wait, when the
    server sent one.
    """

    default_message = "Rate limit exceeded"
    default_status_code = 429

    def __init__(self, message: Optional[str] = None, *, retry_after: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(AppCenterClientError):
    default_message = "Server error"
    default_status_code = 500


class ServiceUnavailableError(ServerError):
    default_message = "Service temporarily unavailable"
    default_status_code = 503


class NetworkError(AppCenterClientError):
    """Connection problem, DNS failure, or another network-level issue."""

    default_message = "Network error"


class TimeoutError(NetworkError):
    default_message = "Request timed out"


STATUS_CODE_EXCEPTIONS = {
    400: ValidationError,
    401: AuthenticationError,
    403: AuthorizationError,
    404: NotFoundError,
    409: ConflictError,
    429: RateLimitError,
    500: ServerError,
    502: ServerError,
    503: ServiceUnavailableError,
    504: ServerError,
}


def exception_from_response(
    status_code: int,
    message: str,
    error_code: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
) -> AppCenterClientError:
    """Create the AppCenterClientError subclass matching an HTTP status code."""
    exception_class = STATUS_CODE_EXCEPTIONS.get(status_code)
    if exception_class is None:
        exception_class = ServerError if 500 <= status_code < 600 else AppCenterClientError
    return exception_class(
        message,
        status_code=status_code,
        error_code=error_code,
        details=details,
    )
