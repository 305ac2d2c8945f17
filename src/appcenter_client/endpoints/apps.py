from typing import List

from appcenter_types.apps import AppResponse

from appcenter_client.base import BaseEndpointClient
from appcenter_client.exceptions import AppNotFoundError, NotFoundError


class AppsClient(BaseEndpointClient):
    """
    Client for apps endpoints.
    """

    async def list(self) -> List[AppResponse]:
        """List the apps the user has access to."""
        response = await self._http.get(self._build_path("apps"))
        return self._parse_list(response.json(), AppResponse)

    async def get(self, owner_name: str, app_name: str) -> AppResponse:
        """
        Get a single app.

        Raises:
            AppNotFoundError: If the app does not exist or is not visible
        """
        try:
            response = await self._http.get(self._build_path("apps", owner_name, app_name))
        except NotFoundError as e:
            raise AppNotFoundError(
                f"{owner_name}/{app_name}",
                error_code=e.error_code,
                details=e.details,
            )
        return AppResponse.model_validate(response.json())

    async def exists(self, owner_name: str, app_name: str) -> bool:
        try:
            await self.get(owner_name, app_name)
            return True
        except AppNotFoundError:
            return False
