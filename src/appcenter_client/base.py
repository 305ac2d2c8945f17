"""
Base class for endpoint clients.

App Center scopes most resources below an app, so endpoint clients build
paths from an API version prefix plus owner/app segments.
"""

from abc import ABC
from typing import Any, Dict, List, Optional, Type, TypeVar
from urllib.parse import quote

from pydantic import BaseModel

from appcenter_client.http import AsyncHTTPClient

API_VERSION = "v0.1"

TModel = TypeVar("TModel", bound=BaseModel)


class BaseEndpointClient(ABC):
    """
    Abstract base class for all endpoint clients.

    Provides common functionality for path building and response parsing.
    """

    def __init__(
        self,
        http_client: AsyncHTTPClient,
        base_path: str = f"/{API_VERSION}",
    ):
        """
        Initialize the endpoint client.

        Args:
            http_client: The underlying HTTP client
            base_path: Base path for this endpoint (e.g., "/v0.1")
        """
        self._http = http_client
        self._base_path = base_path.rstrip("/")

    @property
    def base_path(self) -> str:
        """Get the base path for this endpoint."""
        return self._base_path

    def _build_path(self, *parts: str) -> str:
        """Build a path from the base path and URL-quoted parts."""
        clean_parts = [quote(p.strip("/"), safe="") for p in parts if p]
        if clean_parts:
            return f"{self._base_path}/{'/'.join(clean_parts)}"
        return self._base_path

    @staticmethod
    def _parse_list(data: Any, model: Type[TModel]) -> List[TModel]:
        """Parse a JSON array (or a {"values": [...]} page) into models."""
        if isinstance(data, dict) and "values" in data:
            data = data["values"]
        if not isinstance(data, list):
            return []
        return [model.model_validate(item) for item in data]

    @staticmethod
    def _form_value(value: Any) -> Optional[str]:
        """Render a value for a multipart form field."""
        if value is None:
            return None
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    def _form(self, fields: Dict[str, Any]) -> Dict[str, str]:
        return {k: v for k, v in ((k, self._form_value(v)) for k, v in fields.items()) if v is not None}
