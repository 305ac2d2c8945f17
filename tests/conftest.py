"""Pytest configuration and fixtures for App Center tests."""

import pytest
import respx
from click.testing import CliRunner

from appcenter_types.apps import DefaultApp
from appcenter_types.profile import Profile


API_URL = "https://api.appcenter.test"


# ============================================================================
# Mock API payloads
# ============================================================================


@pytest.fixture
def user_data():
    """User returned by GET /v0.1/user."""
    return {
        "id": "6ad4c1b8-user",
        "name": "jdoe",
        "display_name": "Jane Doe",
        "email": "jane@example.com",
        "avatar_url": None,
        "can_change_password": True,
        "origin": "appcenter",
    }


@pytest.fixture
def app_data():
    """App returned by GET /v0.1/apps/{owner}/{app}."""
    return {
        "id": "app-1",
        "name": "MyApp",
        "display_name": "My App",
        "os": "Android",
        "platform": "React-Native",
        "owner": {"id": "owner-1", "name": "jdoe", "display_name": "Jane Doe", "type": "user"},
    }


@pytest.fixture
def orgs_data():
    return [
        {"display_name": "Contoso", "name": "contoso", "origin": "appcenter"},
        {"display_name": "Fabrikam", "name": "fabrikam", "origin": "hockeyapp"},
    ]


@pytest.fixture
def release_data():
    return {
        "label": "v3",
        "app_version": "1.0.0",
        "description": "",
        "is_disabled": False,
        "is_mandatory": False,
        "package_hash": "abc123",
        "blob_url": "https://codepush.blob/abc123",
        "rollout": 100,
        "size": 2048,
        "upload_time": 1530000000000,
        "release_method": "Upload",
        "released_by": "jane@example.com",
    }


# ============================================================================
# Filesystem isolation
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_appcenter_dir(tmp_path, monkeypatch):
    """Keep ~/.appcenter and APPCENTER_* environment out of the tests."""
    appcenter_dir = str(tmp_path / ".appcenter")
    monkeypatch.setattr("appcenter_cli.config.APPCENTER_DIR", appcenter_dir)
    monkeypatch.setattr("appcenter_cli.auth.APPCENTER_DIR", appcenter_dir)
    for name in ("APPCENTER_API_URL", "APPCENTER_LOGIN_URL", "APPCENTER_PROFILE", "APPCENTER_ACCESS_TOKEN"):
        monkeypatch.delenv(name, raising=False)
    return appcenter_dir


@pytest.fixture
def profile_path(tmp_path):
    return str(tmp_path / "profile.yaml")


@pytest.fixture
def make_profile(profile_path):
    """Write a profile file and return it."""

    def _make(default_app=None, **overrides):
        fields = {
            "user_id": "6ad4c1b8-user",
            "user_name": "jdoe",
            "display_name": "Jane Doe",
            "email": "jane@example.com",
            "access_token": "stored-token",
            "api_url": API_URL,
            "default_app": DefaultApp.parse(default_app) if default_app else None,
        }
        fields.update(overrides)
        profile = Profile(**fields)
        profile.write_deployment(profile_path)
        return profile

    return _make


# ============================================================================
# CLI / HTTP fixtures
# ============================================================================


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def invoke(runner, profile_path):
    """Invoke the root command against the isolated profile and mock API url."""
    from appcenter_cli.cli import cli

    def _invoke(*args, input=None):
        return runner.invoke(
            cli,
            ["--profile", profile_path, "--api-url", API_URL, *args],
            input=input,
        )

    return _invoke


@pytest.fixture
def api_mock():
    """respx router bound to the test API url."""
    with respx.mock(base_url=API_URL, assert_all_called=False) as mock:
        yield mock

