import click

from appcenter_types.profile import Profile

from appcenter_cli.auth import authenticate, get_appcenter_client
from appcenter_cli.errors import handle_api_exceptions
from appcenter_cli.utils import run_async


async def list_orgs(profile: Profile):
    async with get_appcenter_client(profile) as client:
        return await client.account.list_orgs()


@click.command()
@authenticate
@handle_api_exceptions
def list_orgs_command(profile: Profile):
    """List the organizations you are a member of."""

    for org in run_async(list_orgs(profile)):
        origin = getattr(org.origin, "value", org.origin) or ""
        click.echo(f"{org.name or ''}\t{org.display_name or ''}\t{origin}")


@click.group()
def orgs():
    """Inspect organizations."""
    pass

orgs.add_command(list_orgs_command, "list")
