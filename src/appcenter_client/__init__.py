"""
App Center Client Library.

A typed async HTTP client for the App Center API.

Example usage:
    ```python
    from appcenter_client import AppCenterClient

    async with AppCenterClient(access_token="...") as client:
        user = await client.account.get_user()
        orgs = await client.account.list_orgs()
        app = await client.apps.get("owner", "app")
    ```
"""

__version__ = "0.1.0"

from appcenter_client.client import AppCenterClient

from appcenter_client.http import (
    AsyncHTTPClient,
    AuthProvider,
    TokenAuthProvider,
    DEFAULT_API_URL,
)

from appcenter_client.base import BaseEndpointClient

from appcenter_client.exceptions import (
    AppCenterClientError,
    AuthenticationError,
    AuthorizationError,
    ValidationError,
    NotFoundError,
    AppNotFoundError,
    ConflictError,
    RateLimitError,
    ServerError,
    ServiceUnavailableError,
    NetworkError,
    TimeoutError,
    exception_from_response,
)

__all__ = [
    "__version__",
    "AppCenterClient",
    "AsyncHTTPClient",
    "AuthProvider",
    "TokenAuthProvider",
    "DEFAULT_API_URL",
    "BaseEndpointClient",
    "AppCenterClientError",
    "AuthenticationError",
    "AuthorizationError",
    "ValidationError",
    "NotFoundError",
    "AppNotFoundError",
    "ConflictError",
    "RateLimitError",
    "ServerError",
    "ServiceUnavailableError",
    "NetworkError",
    "TimeoutError",
    "exception_from_response",
]
