from typing import List

from appcenter_types.account import OrganizationListItem, UserProfileResponse

from appcenter_client.base import BaseEndpointClient


class AccountClient(BaseEndpointClient):
    """
    Client for the signed-in user and the organizations they belong to.
    """

    async def get_user(self) -> UserProfileResponse:
        """Get the user profile the API token belongs to."""
        response = await self._http.get(self._build_path("user"))
        return UserProfileResponse.model_validate(response.json())

    async def list_orgs(self) -> List[OrganizationListItem]:
        """List the organizations the user is a member of."""
        response = await self._http.get(self._build_path("orgs"))
        return self._parse_list(response.json(), OrganizationListItem)
