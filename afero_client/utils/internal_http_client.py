"""Internal HTTP client utility for Afero API communication.

This module provides the raw HTTP transport: it builds requests against the
configured API host, attaches the bearer token of the current session and
classifies failures. This class is not meant to be used directly - use the
public HttpClient class instead which adds OAuth refresh and request logging.
"""

import asyncio
from typing import Any, Dict, Optional

import httpx

from ..errors import BadParameterError, ConnectionError, UnexpectedResultTypeError
from ..models.config import AferoClientConfig
from ..services.session import OAuthSession
from .http_error_handler import create_error_from_response

# Methods whose payload travels in the query string rather than the body
QUERY_METHODS = frozenset({"GET", "DELETE", "HEAD"})


class InternalHttpClient:
    """Internal HTTP client for the Afero REST API.

    Reads the Authorization header from the session on every request, so a
    refreshed token applies to the next call. Contains no logging and no retry
    logic; both are layered on top by RetryingHttpClient and HttpClient.
    """

    def __init__(self, config: AferoClientConfig, session: OAuthSession):
        """Initialize internal HTTP client with configuration.

        Args:
            config: Afero client configuration
            session: OAuth session supplying the bearer token

        """
        self.config = config
        self.session = session
        self.client: Optional[httpx.AsyncClient] = None

    def _default_headers(self) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Accept-Encoding": "gzip",
        }
        app_header = self.config.app_header_value
        if app_header:
            headers["x-afero-app"] = app_header
        return headers

    async def _initialize_client(self):
        """Initialize HTTP client if not already initialized."""
        if self.client is None:
            self.client = httpx.AsyncClient(
                base_url=self.config.api_base_url,
                timeout=self.config.timeout,
                headers=self._default_headers(),
            )

    def _request_headers(self, headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """Merge per-call headers with the session's Authorization header."""
        merged: Dict[str, str] = {}
        authorization = self.session.authorization_header()
        if authorization:
            merged["Authorization"] = authorization
        if headers:
            merged.update(headers)
        return merged

    async def close(self):
        """Close the HTTP client."""
        if self.client:
            try:
                await self.client.aclose()
            except (RuntimeError, asyncio.CancelledError):
                # Event loop closed or cancelled - that's okay during teardown
                pass
            finally:
                self.client = None

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    @staticmethod
    def _parse_response(response: httpx.Response) -> Any:
        """Decode a 2xx response body; an empty body decodes to None."""
        if not response.content or not response.content.strip():
            return None
        try:
            return response.json()
        except ValueError as e:
            raise UnexpectedResultTypeError("Response body is not valid JSON.", e) from e

    async def request(
        self,
        method: str,
        url: str,
        data: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Make an HTTP request.

        For GET and DELETE, ``data`` is sent as query parameters; for other
        methods it is JSON encoded into the body.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            url: Request path relative to the API host
            data: Request payload
            headers: Extra request headers

        Returns:
            Decoded JSON response, or None for an empty body

        Raises:
            AferoClientError: If the server answers with a non-2xx status
            ConnectionError: If the request could not be sent

        """
        await self._initialize_client()
        method = method.upper()

        query: Optional[Dict[str, Any]] = None
        json_body: Optional[Any] = None
        if data is not None:
            if method in QUERY_METHODS:
                if not isinstance(data, dict):
                    raise BadParameterError(f"{method} parameters must be a mapping")
                query = data
            else:
                json_body = data

        try:
            assert self.client is not None
            response = await self.client.request(
                method,
                url,
                params=query,
                json=json_body,
                headers=self._request_headers(headers),
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise create_error_from_response(e.response, url) from e
        except httpx.RequestError as e:
            raise ConnectionError(f"Request failed: {str(e)}") from e

        return self._parse_response(response)
