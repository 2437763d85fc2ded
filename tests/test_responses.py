"""Tests for the response envelope and API exceptions."""

import json

import pytest

from common.utils import (
    GENERIC_SERVER_ERROR,
    BadRequestException,
    ServiceUnavailableException,
    configure_responses,
    error_response,
    json_error,
    json_success,
    success_response,
)
from common.utils import responses


@pytest.fixture(autouse=True)
def _restore_production_check():
    original = responses._production_check
    yield
    responses._production_check = original


def _body(response):
    return json.loads(response.body)


class TestEnvelope:

    def test_success_without_data(self):
        assert success_response() == {"success": True}

    def test_success_with_data(self):
        assert success_response({"a": 1}) == {"success": True, "data": {"a": 1}}

    def test_error(self):
        assert error_response("nope") == {"success": False, "error": "nope"}

    def test_json_success_status(self):
        response = json_success({"ok": 1}, status_code=201)
        assert response.status_code == 201
        assert _body(response) == {"success": True, "data": {"ok": 1}}

    def test_json_error_defaults_to_400(self):
        response = json_error("Bad")
        assert response.status_code == 400
        assert _body(response) == {"success": False, "error": "Bad"}


class TestProductionMasking:

    def test_server_errors_masked_in_production(self):
        configure_responses(lambda: True)
        response = json_error("db exploded: secret", status_code=500)
        assert _body(response)["error"] == GENERIC_SERVER_ERROR

    def test_client_errors_not_masked(self):
        configure_responses(lambda: True)
        response = json_error("Project not found", status_code=404)
        assert _body(response)["error"] == "Project not found"

    def test_server_errors_visible_in_development(self):
        configure_responses(lambda: False)
        response = json_error("Failed to load pages.", status_code=500)
        assert _body(response)["error"] == "Failed to load pages."


class TestExceptions:

    def test_bad_request_defaults(self):
        exc = BadRequestException()
        assert exc.status_code == 400
        assert exc.message == "Invalid request body."
        assert exc.detail == exc.message

    def test_service_unavailable_message(self):
        exc = ServiceUnavailableException("Database is not configured.")
        assert exc.status_code == 503
        assert exc.message == "Database is not configured."
        assert exc.headers is None
