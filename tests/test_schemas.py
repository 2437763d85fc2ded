"""Tests for request validation models."""

import pytest

from common.utils import BadRequestException

from framebase.schemas import (
    AILayoutRequest,
    CreatePageRequest,
    ExportRequest,
    LoginRequest,
    ProfileUpdateRequest,
    RegisterRequest,
    UpdatePageRequest,
    format_validation_error,
    validate_payload,
)


def _error(model, payload) -> str:
    with pytest.raises(BadRequestException) as exc_info:
        validate_payload(model, payload)
    return exc_info.value.message


# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------

class TestAuthSchemas:

    def test_register_accepts_valid_body(self):
        body = validate_payload(RegisterRequest, {
            "email": "ada@example.com",
            "password": "longenough",
            "full_name": "Ada",
        })
        assert body.full_name == "Ada"

    def test_register_rejects_short_password(self):
        message = _error(RegisterRequest, {
            "email": "ada@example.com",
            "password": "short",
            "full_name": "Ada",
        })
        assert message.startswith("password:")

    def test_register_rejects_bad_email(self):
        message = _error(RegisterRequest, {
            "email": "not-an-email",
            "password": "longenough",
            "full_name": "Ada",
        })
        assert message.startswith("email:")

    def test_login_requires_password(self):
        message = _error(LoginRequest, {"email": "ada@example.com", "password": ""})
        assert message.startswith("password:")


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------

class TestProfileUpdate:

    def test_empty_body_reports_no_changes(self):
        assert _error(ProfileUpdateRequest, {}) == "No changes provided."

    def test_password_without_current_password(self):
        message = _error(ProfileUpdateRequest, {"password": "newpassword"})
        assert message == "Current password is required to set a new password."

    def test_password_with_current_password(self):
        body = validate_payload(ProfileUpdateRequest, {
            "current_password": "oldpassword",
            "password": "newpassword",
        })
        assert body.password == "newpassword"

    def test_username_min_length(self):
        assert _error(ProfileUpdateRequest, {"username": "a"}).startswith("username:")

    def test_avatar_url_must_be_url(self):
        assert _error(ProfileUpdateRequest, {"avatar_url": "nope"}).startswith("avatar_url:")

    def test_avatar_url_kept_verbatim(self):
        body = validate_payload(ProfileUpdateRequest, {"avatar_url": "https://cdn.example.com"})
        assert body.avatar_url == "https://cdn.example.com"

    def test_avatar_url_rejects_relative_path(self):
        assert _error(ProfileUpdateRequest, {"avatar_url": "/a.png"}) == "avatar_url: Input should be a valid URL"

    def test_single_field_is_enough(self):
        body = validate_payload(ProfileUpdateRequest, {"full_name": "Ada"})
        assert body.full_name == "Ada"


# ---------------------------------------------------------------------------
# Pages / export / AI
# ---------------------------------------------------------------------------

class TestOtherSchemas:

    def test_page_order_index_must_be_integer(self):
        assert _error(CreatePageRequest, {"name": "Home", "order_index": "1"}).startswith("order_index:")

    def test_page_update_allows_empty_body(self):
        body = validate_payload(UpdatePageRequest, {})
        assert body.name is None

    def test_page_metadata_accepts_anything(self):
        body = validate_payload(CreatePageRequest, {"name": "Home", "metadata": {"a": [1, 2]}})
        assert body.metadata == {"a": [1, 2]}

    def test_export_requires_uuid(self):
        message = _error(ExportRequest, {
            "project_id": "not-a-uuid",
            "export_type": "html",
            "format": "zip",
        })
        assert message.startswith("project_id:")

    def test_ai_context_defaults_to_empty(self):
        body = validate_payload(AILayoutRequest, {"prompt": "A bakery site"})
        assert body.context == ""
        assert body.project_id is None

    def test_non_object_payload(self):
        message = _error(AILayoutRequest, ["prompt"])
        assert message


class TestFormatValidationError:

    def test_strips_body_prefix(self):
        message = format_validation_error([
            {"loc": ("body", "email"), "msg": "value is not a valid email address", "type": "value_error"},
        ])
        assert message == "email: value is not a valid email address"

    def test_model_level_error_has_no_prefix(self):
        message = format_validation_error([
            {"loc": (), "msg": "No changes provided.", "type": "no_changes"},
        ])
        assert message == "No changes provided."

    def test_no_errors(self):
        assert format_validation_error([]) == "Invalid request body."
