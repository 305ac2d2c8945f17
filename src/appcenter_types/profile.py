from typing import Optional
from pydantic import Field

from appcenter_types.deployments import BaseDeployment
from appcenter_types.apps import DefaultApp


class Profile(BaseDeployment):
    """Locally cached login state. Stored as plain YAML."""
    user_id: str
    user_name: str
    display_name: str
    email: Optional[str] = None
    access_token: str = Field(..., description="App Center API token")
    api_url: Optional[str] = None
    default_app: Optional[DefaultApp] = None
