"""
Unit tests for SDK errors.
"""

from afero_client.errors import (
    AferoClientError,
    ApiError,
    ApiErrorCode,
    AuthenticationError,
    BadParameterError,
    ConnectionError,
    EncodingFailureError,
    NotLoggedInError,
    UnexpectedResultTypeError,
    is_forbidden,
    is_unauthorized,
)


class TestAferoClientError:
    def test_attributes(self):
        error = AferoClientError("HTTP 404", status_code=404, error_body={"error": "not_found"})

        assert str(error) == "HTTP 404"
        assert error.message == "HTTP 404"
        assert error.status_code == 404
        assert error.error_body == {"error": "not_found"}

    def test_defaults(self):
        error = AferoClientError("boom")

        assert error.status_code is None
        assert error.error_body is None

    def test_subclasses(self):
        assert issubclass(AuthenticationError, AferoClientError)
        assert issubclass(ConnectionError, AferoClientError)
        assert issubclass(ApiError, AferoClientError)


class TestApiError:
    """Client-side error codes."""

    def test_codes(self):
        assert UnexpectedResultTypeError("x").code == ApiErrorCode.UNEXPECTED_RESULT_TYPE == 100
        assert NotLoggedInError("x").code == ApiErrorCode.NOT_LOGGED_IN == 101
        assert EncodingFailureError("x").code == ApiErrorCode.ENCODING_FAILURE == 102
        assert BadParameterError("x").code == ApiErrorCode.BAD_PARAMETER == 103

    def test_underlying_error(self):
        cause = ValueError("bad")
        error = UnexpectedResultTypeError("Unexpected Result.", cause)

        assert error.underlying_error is cause
        assert error.status_code is None


class TestStatusHelpers:
    def test_is_unauthorized(self):
        assert is_unauthorized(AferoClientError("x", status_code=401))
        assert not is_unauthorized(AferoClientError("x", status_code=403))
        assert not is_unauthorized(ValueError("x"))

    def test_is_forbidden(self):
        assert is_forbidden(AferoClientError("x", status_code=403))
        assert not is_forbidden(AferoClientError("x"))
