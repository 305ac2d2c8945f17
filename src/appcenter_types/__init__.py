"""App Center Types - Pydantic DTOs for the App Center API."""

__version__ = "0.1.0"

from .deployments import BaseDeployment, DeploymentFactory
from .apps import DefaultApp, AppOwner, AppResponse
from .account import UserProfileResponse, OrganizationListItem, OrganizationOrigin
from .codepush import CodePushReleaseParams, CodePushRelease, DeploymentResponse
from .profile import Profile

__all__ = [
    "BaseDeployment",
    "DeploymentFactory",
    "DefaultApp",
    "AppOwner",
    "AppResponse",
    "UserProfileResponse",
    "OrganizationListItem",
    "OrganizationOrigin",
    "CodePushReleaseParams",
    "CodePushRelease",
    "DeploymentResponse",
    "Profile",
]
