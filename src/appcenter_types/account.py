from enum import Enum
from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, Field


class OrganizationOrigin(str, Enum):
    mobile_center = "mobile-center"
    hockeyapp = "hockeyapp"


class UserProfileResponse(BaseModel):
    id: str = Field(..., description="The unique id (UUID) of the user")
    name: str = Field(..., description="The unique name used to identify the user")
    display_name: str = Field(..., description="The full name of the user")
    email: Optional[str] = Field(None, description="The email address of the user")
    avatar_url: Optional[str] = None
    can_change_password: Optional[bool] = None
    origin: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class OrganizationListItem(BaseModel):
    """An entry of the organization list returned for the current user."""
    display_name: Optional[str] = Field(None, description="The display name of the organization")
    name: Optional[str] = Field(None, description="The slug name of the organization")
    origin: Optional[Union[OrganizationOrigin, str]] = Field(
        None,
        union_mode="left_to_right",
        description="The creation origin of this organization",
    )

    model_config = ConfigDict(extra="ignore")
