"""
Async HTTP client for the App Center API.

This module provides an async HTTP client built on httpx with:
- API token authentication (X-API-Token header)
- Error envelope parsing into typed exceptions
- Retry logic for transient network failures
- Timeout configuration
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple, Union
import logging

import httpx
from pydantic import BaseModel

from appcenter_client.exceptions import (
    AppCenterClientError,
    RateLimitError,
    NetworkError,
    TimeoutError as ClientTimeoutError,
    exception_from_response,
)

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.appcenter.ms"
API_TOKEN_HEADER = "X-API-Token"

IDEMPOTENT_METHODS = frozenset({"GET", "HEAD", "OPTIONS", "PUT", "DELETE"})


class AuthProvider(ABC):
    """Abstract base class for authentication providers."""

    @abstractmethod
    async def get_access_token(self) -> Optional[str]:
        """Get the current API token."""
        ...

    @abstractmethod
    def is_authenticated(self) -> bool:
        """Check if a token is available."""
        ...


class TokenAuthProvider(AuthProvider):
    """Holds a single App Center API token."""

    def __init__(self, access_token: Optional[str] = None):
        self._access_token = access_token

    async def get_access_token(self) -> Optional[str]:
        return self._access_token

    def is_authenticated(self) -> bool:
        return bool(self._access_token)

    def set_token(self, access_token: str) -> None:
        """Set the API token."""
        self._access_token = access_token

    def clear_token(self) -> None:
        """Forget the API token."""
        self._access_token = None


def parse_error_payload(response: httpx.Response) -> Tuple[str, Optional[str], Dict[str, Any]]:
    """
    Extract (message, error_code, details) from an error response.

    App Center wraps errors as {"error": {"code": ..., "message": ...}};
    CodePush endpoints answer with a flat {"code": ..., "message": ...}.
    """
    status_code = response.status_code
    try:
        error_data = response.json()
    except Exception:
        return response.text or f"HTTP {status_code}", None, {}

    if not isinstance(error_data, dict):
        return str(error_data), None, {}

    envelope = error_data.get("error")
    if isinstance(envelope, dict):
        error_data = envelope

    message = error_data.get("message") or error_data.get("detail") or str(error_data)
    error_code = error_data.get("code")
    if error_code is not None:
        error_code = str(error_code)
    return str(message), error_code, error_data


class AsyncHTTPClient:
    """
    Async HTTP client for App Center API requests.

    This client handles:
    - Base URL management
    - Authentication header injection
    - Response parsing and error handling
    - Automatic retries for transient failures
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        auth_provider: Optional[AuthProvider] = None,
        timeout: float = 30.0,
        max_retries: int = 3,
        headers: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize the HTTP client.

        Args:
            base_url: Base URL for the API (e.g., "https://api.appcenter.ms")
            auth_provider: Authentication provider holding the API token
            timeout: Request timeout in seconds
            max_retries: Maximum number of attempts for failed requests
            headers: Additional headers to include in all requests
        """
        self.base_url = base_url.rstrip("/")
        self.auth_provider = auth_provider or TokenAuthProvider()
        self.timeout = timeout
        self.max_retries = max(1, max_retries)
        self._default_headers = headers or {}
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the underlying httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=True,
            )
        return self._client

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> "AsyncHTTPClient":
        await self._get_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _build_headers(self, extra_headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """Build request headers."""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            **self._default_headers,
        }
        if extra_headers:
            headers.update(extra_headers)
        return headers

    async def _add_auth_header(self, headers: Dict[str, str]) -> Dict[str, str]:
        """Add the API token header if available."""
        if self.auth_provider and self.auth_provider.is_authenticated():
            token = await self.auth_provider.get_access_token()
            if token:
                headers[API_TOKEN_HEADER] = token
        return headers

    def _handle_error_response(self, response: httpx.Response) -> None:
        """Convert HTTP error responses to appropriate exceptions."""
        status_code = response.status_code
        message, error_code, details = parse_error_payload(response)

        if status_code == 429:
            retry_after = response.headers.get("Retry-After")
            raise RateLimitError(
                message,
                status_code=status_code,
                error_code=error_code,
                details=details,
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
            )

        raise exception_from_response(status_code, message, error_code=error_code, details=details)

    @staticmethod
    def _can_retry(method: str, error: httpx.HTTPError) -> bool:
        """
        Whether a failed attempt may be sent again.

        A POST that timed out after it was sent may already have been applied,
        so only requests that never left the client are resent.
        """
        if method.upper() in IDEMPOTENT_METHODS:
            return True
        return isinstance(error, (httpx.ConnectTimeout, httpx.PoolTimeout))

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Union[Dict[str, Any], BaseModel]] = None,
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        files: Optional[Dict[str, Any]] = None,
        authenticated: bool = True,
    ) -> httpx.Response:
        """
        Make an HTTP request.

        Args:
            method: HTTP method (GET, POST, PUT, PATCH, DELETE)
            path: Request path (joined with base_url)
            params: Query parameters
            json_data: JSON body data (dict or Pydantic model)
            data: Form data
            headers: Additional headers
            files: File uploads; contents must be bytes so retries can resend them
            authenticated: Whether to include the token header

        Returns:
            httpx.Response object

        Raises:
            AppCenterClientError: On HTTP errors
            NetworkError: On connection failures
            TimeoutError: On request timeout
        """
        client = await self._get_client()

        request_headers = self._build_headers(headers)
        if authenticated:
            request_headers = await self._add_auth_header(request_headers)

        if json_data is not None and isinstance(json_data, BaseModel):
            json_data = json_data.model_dump(mode="json", exclude_none=True)

        if params:
            params = {k: v for k, v in params.items() if v is not None}

        # httpx sets the multipart boundary itself
        if files or data:
            request_headers.pop("Content-Type", None)

        last_exception = None
        for attempt in range(self.max_retries):
            logger.debug("%s %s (attempt %d/%d)", method, path, attempt + 1, self.max_retries)
            try:
                response = await client.request(
                    method=method,
                    url=path,
                    params=params,
                    json=json_data,
                    data=data,
                    headers=request_headers,
                    files=files,
                )

                if response.is_success:
                    return response

                logger.debug("%s %s failed with HTTP %d", method, path, response.status_code)
                self._handle_error_response(response)

            except httpx.TimeoutException as e:
                last_exception = ClientTimeoutError(f"Request timed out: {e}")
                if not self._can_retry(method, e):
                    raise last_exception from e
            except httpx.ConnectError as e:
                last_exception = NetworkError(f"Connection failed: {e}")
            except AppCenterClientError:
                raise
            except httpx.HTTPError as e:
                last_exception = NetworkError(f"Request failed: {e}")
                if not self._can_retry(method, e):
                    raise last_exception from e

            logger.warning("%s %s: %s", method, path, last_exception)

        if last_exception:
            raise last_exception
        raise NetworkError("Request failed after retries")

    async def get(
        self,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        authenticated: bool = True,
    ) -> httpx.Response:
        """Make a GET request."""
        return await self._request(
            "GET",
            path,
            params=params,
            headers=headers,
            authenticated=authenticated,
        )

    async def post(
        self,
        path: str,
        *,
        json_data: Optional[Union[Dict[str, Any], BaseModel]] = None,
        data: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        files: Optional[Dict[str, Any]] = None,
        authenticated: bool = True,
    ) -> httpx.Response:
        """Make a POST request."""
        return await self._request(
            "POST",
            path,
            json_data=json_data,
            data=data,
            params=params,
            headers=headers,
            files=files,
            authenticated=authenticated,
        )

