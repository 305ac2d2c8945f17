import logging
import os
from typing import List

from appcenter_types.codepush import CodePushRelease, CodePushReleaseParams, DeploymentResponse

from appcenter_client.base import BaseEndpointClient

logger = logging.getLogger(__name__)


class CodePushClient(BaseEndpointClient):
    """
    Client for CodePush deployments and releases.
    """

    async def list_deployments(self, owner_name: str, app_name: str) -> List[DeploymentResponse]:
        """List the CodePush deployments of an app."""
        response = await self._http.get(
            self._build_path("apps", owner_name, app_name, "deployments")
        )
        return self._parse_list(response.json(), DeploymentResponse)

    async def release(self, params: CodePushReleaseParams) -> CodePushRelease:
        """
        Upload a zipped update and create a release in a deployment.

        Args:
            params: Release parameters, including the path of the zip to upload

        Returns:
            The created release
        """
        path = self._build_path(
            "apps",
            params.app.owner_name,
            params.app.app_name,
            "deployments",
            params.deployment_name,
            "releases",
        )

        form = self._form({
            "target_binary_version": params.app_version,
            "description": params.description,
            "disabled": params.is_disabled,
            "mandatory": params.is_mandatory,
            "rollout": params.rollout,
            "label": params.label,
            "package_hash": params.package_hash,
        })

        with open(params.updated_content_zip_path, "rb") as package:
            content = package.read()

        logger.info(
            "Releasing %d bytes to %s/%s",
            len(content),
            params.app.identifier,
            params.deployment_name,
        )

        files = {
            "package": (os.path.basename(params.updated_content_zip_path), content, "application/zip"),
        }
        response = await self._http.post(path, data=form, files=files)
        return CodePushRelease.model_validate(response.json())
