import logging
import os
import socket
import sys
from enum import Enum
from functools import wraps
from typing import Optional
from urllib.parse import urlencode

import click
import yaml
from pydantic import ValidationError

from appcenter_client import AppCenterClient, AppCenterClientError
from appcenter_types.account import UserProfileResponse
from appcenter_types.apps import DefaultApp
from appcenter_types.deployments import DeploymentFactory
from appcenter_types.profile import Profile

from appcenter_cli import strings
from appcenter_cli.config import APPCENTER_DIR, PROFILE_FILE, AppCenterSettings, api_url_override, load_settings
from appcenter_cli.utils import info, run_async, warning

logger = logging.getLogger(__name__)


class AppCenterLoginType(Enum):
    Interactive = 0
    Token = 1


LOGIN_TYPES = [t.name for t in AppCenterLoginType]

LOGOUT_OPTION = "Logout"
CANCEL_OPTION = "Cancel"


def get_profile_path() -> str:
    ctx = click.get_current_context(silent=True)
    if ctx is not None:
        obj = ctx.find_root().obj or {}
        if obj.get("PROFILE_PATH"):
            return obj["PROFILE_PATH"]
    return os.path.join(APPCENTER_DIR, PROFILE_FILE)


def get_settings() -> AppCenterSettings:
    ctx = click.get_current_context(silent=True)
    if ctx is not None:
        obj = ctx.find_root().obj or {}
        if obj.get("SETTINGS") is not None:
            return obj["SETTINGS"]
    return load_settings()


def get_api_url_override() -> Optional[str]:
    ctx = click.get_current_context(silent=True)
    if ctx is not None:
        obj = ctx.find_root().obj or {}
        if "API_URL_OVERRIDE" in obj:
            return obj["API_URL_OVERRIDE"]
    return api_url_override()


def read_profile(filename: Optional[str] = None) -> Optional[Profile]:
    filename = filename or get_profile_path()

    if not os.path.exists(filename):
        return None

    try:
        return DeploymentFactory.read_deployment_from_file(Profile, filename)
    except (yaml.YAMLError, ValidationError, TypeError) as e:
        logger.warning("Ignoring unreadable profile %s: %s", filename, e)
        return None


def write_profile(profile: Profile, filename: Optional[str] = None) -> None:
    filename = filename or get_profile_path()
    profile.write_deployment(filename)
    logger.debug("Profile saved to %s", filename)


def delete_profile(filename: Optional[str] = None) -> bool:
    filename = filename or get_profile_path()

    if not os.path.exists(filename):
        return False

    os.remove(filename)
    logger.debug("Profile %s removed", filename)
    return True


def restore_current_app(profile: Optional[Profile]) -> Optional[DefaultApp]:
    if profile is None or profile.default_app is None:
        return None

    return DefaultApp.parse(f"{profile.default_app.owner_name}/{profile.default_app.app_name}")


def get_appcenter_client(profile: Optional[Profile] = None, settings: Optional[AppCenterSettings] = None) -> AppCenterClient:
    """
    Create an AppCenterClient for the stored profile.

    An API url given with --api-url or APPCENTER_API_URL wins. Otherwise the
    profile's url is used, so that a login made against one endpoint keeps
    talking to it.
    """
    settings = settings or get_settings()

    api_url = settings.api_url
    access_token = None
    if profile is not None:
        access_token = profile.access_token
        if not get_api_url_override():
            api_url = profile.api_url or api_url

    return AppCenterClient(
        base_url=api_url,
        access_token=access_token,
        timeout=settings.timeout,
        max_retries=settings.max_retries,
    )


def authenticate(func):
    @wraps(func)
    def wrapper(*args, **kwargs):

        profile = read_profile()

        if profile is None:
            warning(strings.USER_MUST_SIGN_IN)
            sys.exit(1)

        kwargs["profile"] = profile

        return func(*args, **kwargs)

    return wrapper


def show_current_app_status(profile: Optional[Profile]) -> None:
    current_app = restore_current_app(profile)

    if current_app is not None:
        info(strings.your_current_app_msg(current_app.identifier))
    else:
        info(strings.NO_CURRENT_APP_SET_MSG)


async def fetch_user(token: str, settings: AppCenterSettings) -> UserProfileResponse:
    async with get_appcenter_client(settings=settings) as client:
        return await client.login_with_token(token)


def login_with_token(token: Optional[str]) -> Optional[Profile]:
    if not token:
        return None

    settings = get_settings()

    try:
        user = run_async(fetch_user(token, settings))
    except AppCenterClientError as e:
        logger.error("Failed to fetch user info from server: %s", e)
        warning(strings.FAILED_TO_EXECUTE_LOGIN_MSG)
        sys.exit(1)

    previous = read_profile()
    default_app = None
    if previous is not None and previous.user_id == user.id:
        default_app = previous.default_app

    profile = Profile(
        user_id=user.id,
        user_name=user.name,
        display_name=user.display_name,
        email=user.email,
        access_token=token,
        api_url=settings.api_url,
        default_app=default_app,
    )
    write_profile(profile)

    info(strings.you_are_logged_in_msg(profile.display_name))
    show_current_app_status(profile)

    return profile


def build_login_url(login_url: str) -> str:
    return f"{login_url}?{urlencode({'hostname': socket.gethostname()})}"


def prompt_token() -> str:
    return click.prompt(
        strings.PLEASE_PROVIDE_TOKEN,
        default="",
        show_default=False,
        hide_input=True,
    ).strip()


@click.command()
@click.option("--login-type", "-t", type=click.Choice(LOGIN_TYPES, case_sensitive=False), help="Interactive (browser) or Token")
@click.option("--token", envvar="APPCENTER_ACCESS_TOKEN", help="API token to log in with")
def login(login_type, token):
    """Log in to App Center."""

    if login_type is None:
        login_type = click.prompt(strings.SELECT_LOGIN_TYPE_MSG, type=click.Choice(LOGIN_TYPES))

    login_type = next((t for t in LOGIN_TYPES if t.lower() == login_type.lower()), login_type)

    if login_type == AppCenterLoginType.Interactive.name:
        if not click.confirm(strings.PLEASE_LOGIN_VIA_BROWSER, default=True):
            return

        login_url = build_login_url(get_settings().login_url)
        logger.debug("Opening %s", login_url)
        click.launch(login_url)

        login_with_token(token or prompt_token())

    elif login_type == AppCenterLoginType.Token.name:
        login_with_token(token or prompt_token())

    else:
        raise click.BadParameter(strings.UNSUPPORTED_LOGIN_TYPE_MSG, param_hint="login-type")


@click.command()
@click.option("--yes", "-y", is_flag=True, help="Log out without asking")
def logout(yes):
    """Log out from App Center and forget the stored token."""

    choice = LOGOUT_OPTION if yes else click.prompt(
        strings.LOGOUT_PROMPT,
        type=click.Choice([LOGOUT_OPTION, CANCEL_OPTION]),
        default=CANCEL_OPTION,
    )

    if choice != LOGOUT_OPTION:
        return

    try:
        delete_profile()
    except OSError as e:
        logger.error("An error occurred on logout: %s", e)
        sys.exit(1)

    info(strings.USER_LOGGED_OUT_MSG)


@click.command()
def whoami():
    """Show the user the stored token belongs to."""

    profile = read_profile()

    if profile is not None and profile.display_name:
        info(strings.you_are_logged_in_msg(profile.display_name))
    else:
        info(strings.USER_IS_NOT_LOGGED_IN_MSG)
