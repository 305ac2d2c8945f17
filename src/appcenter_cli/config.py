import logging
import os
from typing import Optional

import yaml
from pydantic import Field

from appcenter_client.http import DEFAULT_API_URL
from appcenter_types.deployments import BaseDeployment, DeploymentFactory

logger = logging.getLogger(__name__)

HOME_DIR = os.path.expanduser("~") or os.environ.get("HOME") or os.environ.get("USERPROFILE")
APPCENTER_DIR = os.path.join(HOME_DIR, ".appcenter")
PROFILE_FILE = "profile.yaml"
SETTINGS_FILE = "settings.yaml"

DEFAULT_LOGIN_URL = "https://appcenter.ms/cmd-login"

API_URL_ENV = "APPCENTER_API_URL"
LOGIN_URL_ENV = "APPCENTER_LOGIN_URL"


class AppCenterSettings(BaseDeployment):
    api_url: str = DEFAULT_API_URL
    login_url: str = DEFAULT_LOGIN_URL
    timeout: float = Field(30.0, gt=0)
    max_retries: int = Field(3, ge=1)


def api_url_override(api_url: Optional[str] = None) -> Optional[str]:
    """The API url asked for on the command line or in the environment, if any."""
    return api_url or os.environ.get(API_URL_ENV) or None


def load_settings(
    api_url: Optional[str] = None,
    settings_file: Optional[str] = None,
) -> AppCenterSettings:
    """
    Resolve settings: defaults, then settings.yaml, then environment,
    then an explicit api_url.
    """
    filename = settings_file or os.path.join(APPCENTER_DIR, SETTINGS_FILE)

    settings = AppCenterSettings()
    if os.path.exists(filename):
        try:
            settings = DeploymentFactory.read_deployment_from_file(AppCenterSettings, filename)
        except (yaml.YAMLError, ValueError, TypeError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", filename, e)

    overrides = {}
    if os.environ.get(LOGIN_URL_ENV):
        overrides["login_url"] = os.environ[LOGIN_URL_ENV]
    override = api_url_override(api_url)
    if override:
        overrides["api_url"] = override

    if overrides:
        settings = settings.model_copy(update=overrides)

    return settings
