import sys

import click

from appcenter_types.apps import DefaultApp
from appcenter_types.profile import Profile

from appcenter_cli import strings
from appcenter_cli.auth import (
    authenticate,
    get_appcenter_client,
    read_profile,
    restore_current_app,
    show_current_app_status,
    write_profile,
)
from appcenter_cli.errors import handle_api_exceptions
from appcenter_cli.utils import info, run_async, warning


async def app_exists(profile: Profile, app: DefaultApp) -> bool:
    async with get_appcenter_client(profile) as client:
        return await client.apps.exists(app.owner_name, app.app_name)


async def list_apps(profile: Profile):
    async with get_appcenter_client(profile) as client:
        return await client.apps.list()


@click.command()
def get_current_app():
    """Show the current app."""

    show_current_app_status(read_profile())


@click.command()
@click.argument("app", required=False)
@click.option("--no-verify", is_flag=True, help="Do not check that the app exists on App Center")
@handle_api_exceptions
def set_current_app(app, no_verify):
    """Set the current app, given as OWNER/APP."""

    if app is None:
        app = click.prompt(strings.PROVIDE_CURRENT_APP_PROMPT_MSG)

    default_app = DefaultApp.parse(app)
    if default_app is None:
        warning(strings.INVALID_CURRENT_APP_NAME_MSG)
        sys.exit(1)

    profile = read_profile()
    if profile is None:
        warning(strings.USER_IS_NOT_LOGGED_IN_MSG)
        sys.exit(1)

    if not no_verify and not run_async(app_exists(profile, default_app)):
        warning(strings.INVALID_CURRENT_APP_NAME_MSG)
        sys.exit(1)

    profile.default_app = default_app
    write_profile(profile)

    info(strings.your_current_app_msg(default_app.identifier))


@click.command()
@authenticate
@handle_api_exceptions
def list_apps_command(profile: Profile):
    """List the apps you have access to."""

    current_app = restore_current_app(profile)

    for app in run_async(list_apps(profile)):
        marker = "*" if current_app is not None and current_app.identifier == app.identifier else " "
        platform = "/".join(p for p in (app.os, app.platform) if p)
        click.echo(f"{marker} {app.identifier}\t{app.display_name or app.name}\t{platform}")


@click.group()
def apps():
    """Manage the current app."""
    pass

apps.add_command(get_current_app, "current")
apps.add_command(set_current_app, "set-current")
apps.add_command(list_apps_command, "list")
