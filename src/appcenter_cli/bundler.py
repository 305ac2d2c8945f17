"""
Building CodePush update packages from a React Native project.

The React Native packager writes the JS bundle and assets into a
``CodePush`` directory, which is then zipped with that directory name as
the top-level entry of every member.
"""

import json
import logging
import os
import shutil
import subprocess
import zipfile
from typing import List, Optional

logger = logging.getLogger(__name__)

CODE_PUSH_PACKAGE = "react-native-code-push"
UPDATE_CONTENTS_DIR = "CodePush"
PLATFORMS = ["android", "ios"]


class BundleError(Exception):
    """The React Native project could not be bundled."""


def read_package_json(project_root: str) -> dict:
    filename = os.path.join(project_root, "package.json")
    try:
        with open(filename, "r") as file:
            return json.load(file)
    except FileNotFoundError:
        raise BundleError(f"No package.json found in {project_root}")
    except json.JSONDecodeError as e:
        raise BundleError(f"Invalid package.json in {project_root}: {e}")


def is_codepush_installed(project_root: str) -> bool:
    try:
        package = read_package_json(project_root)
    except BundleError:
        return False

    for section in ("dependencies", "devDependencies"):
        if CODE_PUSH_PACKAGE in (package.get(section) or {}):
            return True
    return False


def default_bundle_name(platform: str) -> str:
    return "main.jsbundle" if platform == "ios" else f"index.{platform}.bundle"


def default_entry_file(project_root: str, platform: str) -> str:
    platform_entry = f"index.{platform}.js"
    if os.path.exists(os.path.join(project_root, platform_entry)):
        return platform_entry

    if os.path.exists(os.path.join(project_root, "index.js")):
        return "index.js"

    raise BundleError(f"Entry file {platform_entry} or index.js doesn't exist in {project_root}")


def bundle_command(
    platform: str,
    entry_file: str,
    bundle_output: str,
    assets_dest: str,
    sourcemap_output: Optional[str] = None,
    development: bool = False,
) -> List[str]:
    npx = shutil.which("npx")
    if npx is None:
        raise BundleError("npx was not found on PATH; install Node.js to bundle React Native projects")

    command = [
        npx,
        "react-native",
        "bundle",
        "--platform", platform,
        "--entry-file", entry_file,
        "--bundle-output", bundle_output,
        "--assets-dest", assets_dest,
        "--dev", "true" if development else "false",
    ]
    if sourcemap_output:
        command += ["--sourcemap-output", sourcemap_output]
    return command


def bundle_react(
    project_root: str,
    platform: str,
    output_dir: str,
    entry_file: Optional[str] = None,
    bundle_name: Optional[str] = None,
    sourcemap_output: Optional[str] = None,
    development: bool = False,
) -> str:
    """
    Run the React Native packager and return the update contents directory.
    """
    if platform not in PLATFORMS:
        raise BundleError(f"Unsupported platform '{platform}', expected one of {', '.join(PLATFORMS)}")

    entry_file = entry_file or default_entry_file(project_root, platform)
    bundle_name = bundle_name or default_bundle_name(platform)

    contents_dir = os.path.join(output_dir, UPDATE_CONTENTS_DIR)
    os.makedirs(contents_dir, exist_ok=True)

    command = bundle_command(
        platform,
        entry_file,
        os.path.join(contents_dir, bundle_name),
        contents_dir,
        sourcemap_output=sourcemap_output,
        development=development,
    )

    logger.info("Running %s", " ".join(command))
    try:
        subprocess.run(command, cwd=project_root, check=True)
    except subprocess.CalledProcessError as e:
        raise BundleError(f"react-native bundle exited with code {e.returncode}")

    return contents_dir


def zip_directory(source_dir: str, zip_path: str) -> str:
    """
    Zip source_dir, keeping its own name as the first path component.
    """
    source_dir = os.path.abspath(source_dir)
    if not os.path.isdir(source_dir):
        raise BundleError(f"{source_dir} is not a directory")

    base_dir = os.path.dirname(source_dir)

    with zipfile.ZipFile(zip_path, "w", zipfile.ZIP_DEFLATED) as archive:
        for root, dirs, files in os.walk(source_dir):
            dirs.sort()
            for name in sorted(files):
                path = os.path.join(root, name)
                archive.write(path, os.path.relpath(path, base_dir).replace(os.sep, "/"))

    return zip_path
