"""
SDK exceptions and error handling.

This module defines custom exceptions for the Afero client SDK.
"""

from enum import IntEnum


class AferoClientError(Exception):
    """Base exception for Afero client SDK errors."""

    def __init__(
        self, message: str, status_code: int | None = None, error_body: dict | None = None
    ):
        """
        Initialize Afero client error.

        Args:
            message: Error message
            status_code: HTTP status code if applicable
            error_body: Parsed error response body, if the server sent one
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_body = error_body if error_body is not None else None


class AuthenticationError(AferoClientError):
    """Raised when the OAuth token endpoint rejects a request."""

    pass


class ConnectionError(AferoClientError):
    """Raised when the API host cannot be reached."""

    pass


class ConfigurationError(AferoClientError):
    """Raised when configuration is invalid."""

    pass


class ApiErrorCode(IntEnum):
    """Client-side error classifications."""

    UNEXPECTED_RESULT_TYPE = 100
    NOT_LOGGED_IN = 101
    ENCODING_FAILURE = 102  # Unable to percent encode string
    BAD_PARAMETER = 103


class ApiError(AferoClientError):
    """Base for errors raised by the client itself rather than the server."""

    code: ApiErrorCode

    def __init__(self, message: str, underlying_error: Exception | None = None):
        super().__init__(message)
        self.underlying_error = underlying_error


class UnexpectedResultTypeError(ApiError):
    """Raised when a response body does not decode to the expected shape."""

    code = ApiErrorCode.UNEXPECTED_RESULT_TYPE


class NotLoggedInError(ApiError):
    """Raised when a refresh is attempted without a stored credential."""

    code = ApiErrorCode.NOT_LOGGED_IN


class EncodingFailureError(ApiError):
    """Raised when a user-supplied string cannot be encoded into a URL."""

    code = ApiErrorCode.ENCODING_FAILURE


class BadParameterError(ApiError):
    """Raised when a facade precondition is violated before hitting the network."""

    code = ApiErrorCode.BAD_PARAMETER


def is_unauthorized(error: BaseException) -> bool:
    """Return True if the error carries an HTTP 401 status."""
    return getattr(error, "status_code", None) == 401


def is_forbidden(error: BaseException) -> bool:
    """Return True if the error carries an HTTP 403 status."""
    return getattr(error, "status_code", None) == 403
