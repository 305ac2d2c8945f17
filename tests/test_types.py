"""Tests for the App Center DTOs."""

import pytest
from pydantic import ValidationError

from appcenter_types.account import OrganizationListItem, OrganizationOrigin, UserProfileResponse
from appcenter_types.apps import AppResponse, DefaultApp
from appcenter_types.codepush import CodePushReleaseParams
from appcenter_types.deployments import DeploymentFactory
from appcenter_types.profile import Profile


class TestDefaultApp:
    """Tests for parsing 'owner/app' identifiers."""

    def test_parse_valid(self):
        app = DefaultApp.parse("jdoe/MyApp")
        assert app.owner_name == "jdoe"
        assert app.app_name == "MyApp"
        assert app.identifier == "jdoe/MyApp"

    def test_parse_strips_whitespace(self):
        app = DefaultApp.parse("  contoso / Shop  ")
        assert app.identifier == "contoso/Shop"

    @pytest.mark.parametrize("value", [None, "", "MyApp", "a/b/c", "/MyApp", "jdoe/", " / "])
    def test_parse_invalid(self, value):
        assert DefaultApp.parse(value) is None


class TestResponseModels:

    def test_user_ignores_unknown_fields(self, user_data):
        user = UserProfileResponse.model_validate({**user_data, "permissions": ["manager"]})
        assert user.display_name == "Jane Doe"
        assert not hasattr(user, "permissions")

    def test_organization_known_origin(self):
        org = OrganizationListItem.model_validate(
            {"display_name": "Contoso", "name": "contoso", "origin": "mobile-center"}
        )
        assert org.origin == OrganizationOrigin.mobile_center

    def test_organization_all_fields_optional(self):
        org = OrganizationListItem.model_validate({})
        assert org.name is None
        assert org.origin is None

    def test_app_identifier(self, app_data):
        app = AppResponse.model_validate(app_data)
        assert app.identifier == "jdoe/MyApp"


class TestCodePushReleaseParams:

    def test_rollout_bounds(self):
        app = DefaultApp.parse("jdoe/MyApp")
        with pytest.raises(ValidationError):
            CodePushReleaseParams(
                app=app,
                deployment_name="Staging",
                updated_content_zip_path="update.zip",
                rollout=101,
            )

    def test_optional_fields_default_to_none(self):
        params = CodePushReleaseParams(
            app=DefaultApp.parse("jdoe/MyApp"),
            deployment_name="Production",
            updated_content_zip_path="update.zip",
        )
        assert params.app_version is None
        assert params.is_mandatory is None


class TestProfilePersistence:

    def test_write_and_read(self, tmp_path):
        filename = str(tmp_path / "nested" / "profile.yaml")
        profile = Profile(
            user_id="u1",
            user_name="jdoe",
            display_name="Jane Doe",
            access_token="token",
            default_app=DefaultApp.parse("jdoe/MyApp"),
        )
        profile.write_deployment(filename)

        restored = DeploymentFactory.read_deployment_from_file(Profile, filename)
        assert restored == profile

    def test_none_fields_not_written(self, tmp_path):
        filename = str(tmp_path / "profile.yaml")
        Profile(user_id="u1", user_name="jdoe", display_name="Jane", access_token="t").write_deployment(filename)

        with open(filename) as file:
            content = file.read()

        assert "default_app" not in content
        assert "email" not in content
