"""
Main App Center API client.

This module provides the AppCenterClient class, the primary entry point
for interacting with the App Center API. It holds the API token, lazily
creates endpoint clients, and manages the session lifecycle.
"""

from typing import Any, Dict, Optional
import logging

from appcenter_types.account import UserProfileResponse

from appcenter_client.http import AsyncHTTPClient, TokenAuthProvider, DEFAULT_API_URL
from appcenter_client.exceptions import AppCenterClientError, AuthenticationError

logger = logging.getLogger(__name__)


class AppCenterClient:
    """
    Main client for the App Center API.

    Example usage:
        ```python
        async with AppCenterClient(access_token="...") as client:
            user = await client.account.get_user()
            apps = await client.apps.list()
            release = await client.codepush.release(params)
        ```
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        *,
        access_token: Optional[str] = None,
        timeout: float = 30.0,
        max_retries: int = 3,
        headers: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize the App Center client.

        Args:
            base_url: Base URL for the API
            access_token: App Center API token (optional)
            timeout: Request timeout in seconds
            max_retries: Maximum number of attempts for failed requests
            headers: Additional headers to include in all requests
        """
        self._base_url = base_url.rstrip("/")
        self._auth_provider = TokenAuthProvider(access_token=access_token)
        self._http = AsyncHTTPClient(
            base_url=self._base_url,
            auth_provider=self._auth_provider,
            timeout=timeout,
            max_retries=max_retries,
            headers=headers,
        )

        # Endpoint clients (lazy-loaded)
        self._endpoint_clients: Dict[str, Any] = {}

    @property
    def base_url(self) -> str:
        """Get the base URL for the API."""
        return self._base_url

    @property
    def is_authenticated(self) -> bool:
        """Check if the client holds an API token."""
        return self._auth_provider.is_authenticated()

    @property
    def http(self) -> AsyncHTTPClient:
        """Get the underlying HTTP client for custom requests."""
        return self._http

    # =========================================================================
    # Authentication
    # =========================================================================

    async def login_with_token(self, token: str) -> UserProfileResponse:
        """
        Use an API token and fetch the user it belongs to.

        The token is kept only if the server accepts it.

        Raises:
            AuthenticationError: If the token is rejected or the lookup fails
        """
        self._auth_provider.set_token(token)
        try:
            user = await self.account.get_user()
        except AuthenticationError:
            self._auth_provider.clear_token()
            raise
        except AppCenterClientError as e:
            self._auth_provider.clear_token()
            raise AuthenticationError(f"Login failed: {e}")

        logger.info("Logged in as user: %s", user.name)
        return user

    # =========================================================================
    # Endpoint Clients
    # =========================================================================

    def __getattr__(self, name: str) -> Any:
        """
        Access endpoint clients by name.

        e.g. "apps" -> AppsClient, "codepush" -> CodePushClient.

        Raises:
            AttributeError: If no client exists for the given name
        """
        if name.startswith("_"):
            raise AttributeError(name)

        endpoint_clients = self.__dict__.get("_endpoint_clients")
        if endpoint_clients is None:
            raise AttributeError(name)
        if name in endpoint_clients:
            return endpoint_clients[name]

        from appcenter_client import endpoints

        parts = name.split("_")
        class_name = "".join(p.capitalize() for p in parts) + "Client"

        aliases = {
            "CodepushClient": "CodePushClient",
        }
        client_class = getattr(endpoints, aliases.get(class_name, class_name), None)

        if client_class is None:
            raise AttributeError(
                f"No endpoint client found for '{name}'. "
                f"Expected class: {class_name}"
            )

        client = client_class(self._http)
        endpoint_clients[name] = client
        return client

    # =========================================================================
    # Lifecycle Management
    # =========================================================================

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._http.close()
        self._endpoint_clients.clear()
        logger.debug("Client closed")

    async def __aenter__(self) -> "AppCenterClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        auth_status = "authenticated" if self.is_authenticated else "not authenticated"
        return f"AppCenterClient(base_url={self._base_url!r}, {auth_status})"
