import logging

import click

from appcenter_cli import strings
from appcenter_cli.apps import apps
from appcenter_cli.auth import login, logout, read_profile, restore_current_app, whoami
from appcenter_cli.codepush import codepush
from appcenter_cli.config import api_url_override, load_settings
from appcenter_cli.orgs import orgs
from appcenter_cli.utils import info


@click.group()
@click.option(
    '--profile',
    envvar='APPCENTER_PROFILE',
    type=click.Path(dir_okay=False),
    help='Path to the profile YAML file (overrides ~/.appcenter/profile.yaml)'
)
@click.option(
    '--api-url',
    help='App Center API url (overrides APPCENTER_API_URL and ~/.appcenter/settings.yaml)'
)
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, profile, api_url, verbose):
    """App Center CLI - Log in, pick the current app, and release CodePush updates."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    ctx.ensure_object(dict)
    ctx.obj['PROFILE_PATH'] = profile
    ctx.obj['SETTINGS'] = load_settings(api_url=api_url)
    ctx.obj['API_URL_OVERRIDE'] = api_url_override(api_url)


@click.command()
def status():
    """Show who is logged in and the current app."""

    profile = read_profile()

    if profile is None:
        info(strings.USER_MUST_SIGN_IN)
        return

    info(f"App Center: {profile.display_name}")

    current_app = restore_current_app(profile)
    if current_app is not None:
        info(strings.your_current_app_msg(current_app.identifier))
    else:
        info(strings.PLEASE_PROVIDE_CURRENT_APP_MSG)


cli.add_command(login, "login")
cli.add_command(logout, "logout")
cli.add_command(whoami, "whoami")
cli.add_command(status, "status")
cli.add_command(apps, "apps")
cli.add_command(orgs, "orgs")
cli.add_command(codepush, "codepush")

if __name__ == '__main__':
    cli()
