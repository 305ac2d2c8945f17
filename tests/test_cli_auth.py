"""Tests for the login, logout, whoami and status commands."""

import os

import click
import httpx
import yaml

from appcenter_cli.auth import build_login_url, read_profile

from conftest import API_URL


def load_yaml(path):
    with open(path) as file:
        return yaml.safe_load(file)


class TestTokenLogin:

    def test_login_saves_profile(self, invoke, api_mock, user_data, profile_path):
        route = api_mock.get("/v0.1/user").mock(return_value=httpx.Response(200, json=user_data))

        result = invoke("login", "--login-type", "Token", "--token", "my-token")

        assert result.exit_code == 0, result.output
        assert "You are logged in to App Center as Jane Doe" in result.output
        assert "No current app is specified for App Center" in result.output
        assert route.calls.last.request.headers["X-API-Token"] == "my-token"

        stored = load_yaml(profile_path)
        assert stored["user_id"] == user_data["id"]
        assert stored["user_name"] == "jdoe"
        assert stored["access_token"] == "my-token"
        assert stored["api_url"] == API_URL

    def test_token_prompt(self, invoke, api_mock, user_data):
        api_mock.get("/v0.1/user").mock(return_value=httpx.Response(200, json=user_data))

        result = invoke("login", input="Token\nprompted-token\n")

        assert result.exit_code == 0, result.output
        assert "Please select the way you would like to login to AppCenter" in result.output
        assert api_mock.calls.last.request.headers["X-API-Token"] == "prompted-token"

    def test_empty_token_does_nothing(self, invoke, api_mock, profile_path):
        route = api_mock.get("/v0.1/user")

        result = invoke("login", "--login-type", "Token", input="\n")

        assert result.exit_code == 0
        assert not route.called
        assert not os.path.exists(profile_path)

    def test_rejected_token(self, invoke, api_mock, profile_path):
        api_mock.get("/v0.1/user").mock(
            return_value=httpx.Response(401, json={"error": {"code": "Unauthorized", "message": "Bad token"}})
        )

        result = invoke("login", "-t", "token", "--token", "bad")

        assert result.exit_code == 1
        assert "Failed to execute login to App Center" in result.output
        assert not os.path.exists(profile_path)

    def test_relogin_keeps_current_app_for_same_user(self, invoke, api_mock, user_data, make_profile, profile_path):
        make_profile(default_app="jdoe/MyApp")
        api_mock.get("/v0.1/user").mock(return_value=httpx.Response(200, json=user_data))

        result = invoke("login", "-t", "Token", "--token", "new-token")

        assert result.exit_code == 0, result.output
        assert "Your current app is jdoe/MyApp" in result.output
        stored = load_yaml(profile_path)
        assert stored["access_token"] == "new-token"
        assert stored["default_app"]["identifier"] == "jdoe/MyApp"

    def test_relogin_as_other_user_drops_current_app(self, invoke, api_mock, user_data, make_profile, profile_path):
        make_profile(default_app="jdoe/MyApp", user_id="someone-else")
        api_mock.get("/v0.1/user").mock(return_value=httpx.Response(200, json=user_data))

        result = invoke("login", "-t", "Token", "--token", "new-token")

        assert result.exit_code == 0, result.output
        assert "default_app" not in load_yaml(profile_path)


class TestInteractiveLogin:

    def test_opens_browser_then_asks_for_token(self, invoke, api_mock, user_data, monkeypatch):
        opened = []
        monkeypatch.setattr(click, "launch", lambda url: opened.append(url))
        monkeypatch.setattr("appcenter_cli.auth.socket.gethostname", lambda: "dev box")
        api_mock.get("/v0.1/user").mock(return_value=httpx.Response(200, json=user_data))

        result = invoke("login", "--login-type", "Interactive", input="y\nbrowser-token\n")

        assert result.exit_code == 0, result.output
        assert opened == ["https://appcenter.ms/cmd-login?hostname=dev+box"]
        assert api_mock.calls.last.request.headers["X-API-Token"] == "browser-token"

    def test_declining_stops_silently(self, invoke, api_mock, monkeypatch, profile_path):
        opened = []
        monkeypatch.setattr(click, "launch", lambda url: opened.append(url))

        result = invoke("login", "--login-type", "Interactive", input="n\n")

        assert result.exit_code == 0
        assert opened == []
        assert not os.path.exists(profile_path)

    def test_build_login_url(self, monkeypatch):
        monkeypatch.setattr("appcenter_cli.auth.socket.gethostname", lambda: "host")
        assert build_login_url("https://portal.test/cmd-login") == "https://portal.test/cmd-login?hostname=host"


class TestLogout:

    def test_logout_removes_profile(self, invoke, make_profile, profile_path):
        make_profile()

        result = invoke("logout", input="Logout\n")

        assert result.exit_code == 0
        assert "Successfully logged out from App Center" in result.output
        assert not os.path.exists(profile_path)

    def test_logout_with_yes(self, invoke, make_profile, profile_path):
        make_profile()

        result = invoke("logout", "--yes")

        assert result.exit_code == 0
        assert not os.path.exists(profile_path)

    def test_dismissed_logout_keeps_profile(self, invoke, make_profile, profile_path):
        make_profile()

        result = invoke("logout", input="\n")

        assert result.exit_code == 0
        assert "Successfully logged out" not in result.output
        assert os.path.exists(profile_path)


class TestWhoAmI:

    def test_logged_in(self, invoke, make_profile):
        make_profile()

        result = invoke("whoami")

        assert result.output.strip() == "You are logged in to App Center as Jane Doe"

    def test_not_logged_in(self, invoke):
        result = invoke("whoami")

        assert result.output.strip() == "You are not logged in to App Center"

    def test_unreadable_profile_counts_as_logged_out(self, invoke, profile_path):
        with open(profile_path, "w") as file:
            file.write("user_id: [unterminated")

        result = invoke("whoami")

        assert result.exit_code == 0
        assert "You are not logged in to App Center" in result.output
        assert read_profile(profile_path) is None


class TestStatus:

    def test_signed_out(self, invoke):
        result = invoke("status")
        assert "You are signed out. Please login to App Center" in result.output

    def test_with_current_app(self, invoke, make_profile):
        make_profile(default_app="jdoe/MyApp")

        result = invoke("status")

        assert "App Center: Jane Doe" in result.output
        assert "Your current app is jdoe/MyApp" in result.output

    def test_without_current_app(self, invoke, make_profile):
        make_profile()

        result = invoke("status")

        assert "appcenter apps set-current" in result.output
