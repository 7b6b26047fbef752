"""
Unit tests for HTTP error handler utilities.
"""

import httpx

from afero_client.utils.http_error_handler import (
    create_error_from_response,
    extract_request_id_from_response,
    parse_error_body,
)


def _response(status_code, **kwargs):
    return httpx.Response(status_code, request=httpx.Request("GET", "https://api.afero.test/v1/x"), **kwargs)


class TestHttpErrorHandler:
    def test_parse_error_body(self):
        assert parse_error_body(_response(400, json={"error": "bad"})) == {"error": "bad"}
        assert parse_error_body(_response(400, json=["bad"])) is None
        assert parse_error_body(_response(400, content=b"oops")) is None
        assert parse_error_body(_response(400)) is None

    def test_extract_request_id(self):
        response = _response(500, headers={"x-request-id": "req-1"})

        assert extract_request_id_from_response(response) == "req-1"
        assert extract_request_id_from_response(_response(500)) is None
        assert extract_request_id_from_response(None) is None

    def test_error_prefers_description(self):
        response = _response(
            401, json={"error": "invalid_token", "error_description": "Access token expired"}
        )

        error = create_error_from_response(response, "/v1/users/me")

        assert error.status_code == 401
        assert error.message == "HTTP 401 for /v1/users/me: Access token expired"
        assert error.error_body["error"] == "invalid_token"

    def test_error_without_body_uses_reason(self):
        error = create_error_from_response(_response(503), "/v1/x")

        assert error.message == "HTTP 503 for /v1/x: Service Unavailable"
        assert error.error_body is None

    def test_error_includes_request_id(self):
        response = _response(500, json={"message": "boom"}, headers={"x-request-id": "req-7"})

        error = create_error_from_response(response, "/v1/x")

        assert error.message.endswith("(request id req-7)")
