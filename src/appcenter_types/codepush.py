from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field

from appcenter_types.apps import DefaultApp


class CodePushReleaseParams(BaseModel):
    """Parameters forwarded to the CodePush release endpoint."""
    app: DefaultApp
    deployment_name: str = Field(..., min_length=1)
    updated_content_zip_path: str = Field(..., min_length=1, description="Path to the zipped update contents")
    app_version: Optional[str] = Field(None, description="Target binary version")
    description: Optional[str] = None
    is_disabled: Optional[bool] = None
    is_mandatory: Optional[bool] = None
    label: Optional[str] = None
    package_hash: Optional[str] = None
    rollout: Optional[int] = Field(None, ge=0, le=100, description="Percentage of users receiving the update")


class CodePushRelease(BaseModel):
    label: Optional[str] = None
    app_version: Optional[str] = None
    description: Optional[str] = None
    is_disabled: Optional[bool] = None
    is_mandatory: Optional[bool] = None
    package_hash: Optional[str] = None
    blob_url: Optional[str] = None
    rollout: Optional[int] = None
    size: Optional[int] = None
    upload_time: Optional[int] = None
    release_method: Optional[str] = None
    released_by: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class DeploymentResponse(BaseModel):
    name: str
    key: Optional[str] = None
    latest_release: Optional[dict[str, Any]] = None

    model_config = ConfigDict(extra="ignore")
