from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class DefaultApp(BaseModel):
    """The app commands operate on when none is given explicitly."""
    owner_name: str = Field(..., min_length=1, description="Owner (user or organization) name")
    app_name: str = Field(..., min_length=1, description="App name")
    identifier: str = Field(..., description="Identifier in 'owner/app' form")

    @classmethod
    def from_parts(cls, owner_name: str, app_name: str) -> "DefaultApp":
        return cls(owner_name=owner_name, app_name=app_name, identifier=f"{owner_name}/{app_name}")

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["DefaultApp"]:
        """
        Parse an 'owner/app' string.

        Returns None when the value is empty, does not contain exactly one
        slash, or either part is blank.
        """
        if not value:
            return None

        parts = value.strip().split("/")
        if len(parts) != 2:
            return None

        owner_name, app_name = (p.strip() for p in parts)
        if not owner_name or not app_name:
            return None

        return cls.from_parts(owner_name, app_name)


class AppOwner(BaseModel):
    id: Optional[str] = None
    name: str
    display_name: Optional[str] = None
    type: Optional[str] = Field(None, description="'user' or 'org'")

    model_config = ConfigDict(extra="ignore")


class AppResponse(BaseModel):
    id: Optional[str] = None
    name: str
    display_name: Optional[str] = None
    description: Optional[str] = None
    os: Optional[str] = None
    platform: Optional[str] = None
    owner: AppOwner

    model_config = ConfigDict(extra="ignore")

    @property
    def identifier(self) -> str:
        return f"{self.owner.name}/{self.name}"
