import logging
import os
import sys
import tempfile
from typing import Optional

import click

from appcenter_types.apps import DefaultApp
from appcenter_types.codepush import CodePushRelease, CodePushReleaseParams
from appcenter_types.profile import Profile

from appcenter_cli import strings
from appcenter_cli.auth import authenticate, get_appcenter_client, read_profile, restore_current_app
from appcenter_cli.bundler import (
    PLATFORMS,
    BundleError,
    bundle_react,
    is_codepush_installed,
    zip_directory,
)
from appcenter_cli.errors import handle_api_exceptions
from appcenter_cli.utils import info, run_async, warning

logger = logging.getLogger(__name__)

DEFAULT_TARGET_BINARY_VERSION = "1.0.0"
DEFAULT_DEPLOYMENT_NAME = "Staging"


async def resolve_platform(profile: Profile, app: DefaultApp) -> str:
    async with get_appcenter_client(profile) as client:
        app_info = await client.apps.get(app.owner_name, app.app_name)

    platform = (app_info.os or "").lower()
    if platform not in PLATFORMS:
        raise BundleError(f"App {app.identifier} targets '{app_info.os}', which CodePush for React Native does not support")
    return platform


async def release(profile: Profile, params: CodePushReleaseParams) -> CodePushRelease:
    async with get_appcenter_client(profile) as client:
        return await client.codepush.release(params)


def prepare_package(
    profile: Profile,
    app: DefaultApp,
    work_dir: str,
    project_root: str,
    platform: Optional[str],
    entry_file: Optional[str],
    bundle_name: Optional[str],
    bundle_path: Optional[str],
    sourcemap_output: Optional[str],
    development: bool,
) -> str:
    """Return the path of the zip to upload, building it when needed."""

    if bundle_path is not None:
        if os.path.isdir(bundle_path):
            return zip_directory(bundle_path, os.path.join(work_dir, "update.zip"))
        return bundle_path

    if platform is None:
        platform = run_async(resolve_platform(profile, app))

    contents_dir = bundle_react(
        project_root,
        platform,
        work_dir,
        entry_file=entry_file,
        bundle_name=bundle_name,
        sourcemap_output=os.path.abspath(sourcemap_output) if sourcemap_output else None,
        development=development,
    )
    return zip_directory(contents_dir, os.path.join(work_dir, "update.zip"))


@click.command()
@click.option("--project-root", "-p", type=click.Path(exists=True, file_okay=False), default=".", show_default=True)
@click.option("--platform", type=click.Choice(PLATFORMS), help="Defaults to the OS of the current app")
@click.option("--deployment-name", "-d", default=DEFAULT_DEPLOYMENT_NAME, show_default=True)
@click.option("--target-binary-version", "-t", default=DEFAULT_TARGET_BINARY_VERSION, show_default=True)
@click.option("--description", help="Description of the changes made to the app in this release")
@click.option("--mandatory", is_flag=True, help="Mark the release as mandatory")
@click.option("--disabled", is_flag=True, help="Prevent the release from being downloaded")
@click.option("--rollout", type=click.IntRange(0, 100), help="Percentage of users this release should be available to")
@click.option("--entry-file", help="Path to the app's entry JavaScript file")
@click.option("--bundle-name", help="Name of the generated JS bundle file")
@click.option("--bundle-path", type=click.Path(exists=True), help="Release an existing zip or directory instead of bundling")
@click.option("--sourcemap-output", type=click.Path(dir_okay=False), help="Also write a source map to this path")
@click.option("--development", is_flag=True, help="Generate a development JS bundle")
@handle_api_exceptions
def release_react(
    project_root,
    platform,
    deployment_name,
    target_binary_version,
    description,
    mandatory,
    disabled,
    rollout,
    entry_file,
    bundle_name,
    bundle_path,
    sourcemap_output,
    development,
):
    """Bundle a React Native app and release it to a CodePush deployment."""

    # signed out means there is no current app either
    profile = read_profile()
    current_app = restore_current_app(profile)
    if current_app is None:
        warning(strings.NO_CURRENT_APP_SET_MSG)
        sys.exit(1)

    if bundle_path is None and not is_codepush_installed(project_root):
        warning(strings.NO_CODE_PUSH_DETECTED_MSG)
        sys.exit(1)

    with tempfile.TemporaryDirectory(prefix="appcenter-codepush-") as work_dir:
        zip_path = prepare_package(
            profile,
            current_app,
            work_dir,
            project_root,
            platform,
            entry_file,
            bundle_name,
            bundle_path,
            sourcemap_output,
            development,
        )

        params = CodePushReleaseParams(
            app=current_app,
            app_version=target_binary_version,
            deployment_name=deployment_name,
            updated_content_zip_path=zip_path,
            description=description,
            is_mandatory=mandatory or None,
            is_disabled=disabled or None,
            rollout=rollout,
        )

        logger.debug("Releasing with %s", params.model_dump(exclude_none=True))
        result = run_async(release(profile, params))

    info(strings.released_msg(result.label or "update", current_app.identifier, deployment_name))


async def list_deployments(profile: Profile, app: DefaultApp):
    async with get_appcenter_client(profile) as client:
        return await client.codepush.list_deployments(app.owner_name, app.app_name)


@click.command()
@authenticate
@handle_api_exceptions
def list_deployments_command(profile: Profile):
    """List the CodePush deployments of the current app."""

    current_app = restore_current_app(profile)
    if current_app is None:
        warning(strings.NO_CURRENT_APP_SET_MSG)
        sys.exit(1)

    for deployment in run_async(list_deployments(profile, current_app)):
        label = (deployment.latest_release or {}).get("label") or "-"
        click.echo(f"{deployment.name}\t{label}\t{deployment.key or ''}")


@click.group()
def codepush():
    """Release updates with CodePush."""
    pass

codepush.add_command(release_react, "release-react")
codepush.add_command(list_deployments_command, "deployments")
