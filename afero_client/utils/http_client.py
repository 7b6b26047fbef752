"""
Public HTTP client utility for Afero API communication with request logging.

This module provides the public HTTP client interface that wraps
InternalHttpClient with OAuth refresh-and-retry (RetryingHttpClient), request
logging, and typed decoding of responses. All sensitive data is masked using
DataMasker before logging.
"""

import logging
import time
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel

from ..models.config import AferoClientConfig
from ..services.session import OAuthSession
from .http_client_logging import log_http_request
from .internal_http_client import InternalHttpClient
from .json_coding import (
    decode_dict,
    decode_dict_list,
    decode_model,
    decode_model_list,
    decode_optional_model,
    encode_model,
)
from .retrying_http_client import RetryingHttpClient
from .url_utils import with_expansions

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class HttpClient:
    """
    Public HTTP client for the Afero REST API.

    This class wraps InternalHttpClient and adds:
    - A single OAuth refresh and retry when a request fails with 401
    - Expansion and additional query parameter handling
    - Request logging, with masked payloads when log_level is 'debug'
    - Decoding of responses into dicts or Pydantic models
    """

    def __init__(
        self,
        config: AferoClientConfig,
        session: OAuthSession,
        internal_client: Optional[InternalHttpClient] = None,
    ):
        """
        Initialize public HTTP client.

        Args:
            config: Afero client configuration
            session: OAuth session used for the bearer token and refreshes
            internal_client: Optional transport; created from config when omitted
        """
        self.config = config
        self.session = session
        self._internal_client = internal_client or InternalHttpClient(config, session)
        self._retrying_client = RetryingHttpClient(self._internal_client, session)

    async def close(self):
        """Close the HTTP client."""
        await self._internal_client.close()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    def _log_http_request(
        self,
        method: str,
        url: str,
        start_time: float,
        response: Optional[Any],
        error: Optional[Exception],
        request_data: Optional[Any],
        request_headers: Optional[Dict[str, Any]],
    ) -> None:
        try:
            log_http_request(
                logger,
                method,
                url,
                start_time,
                response=response,
                error=error,
                request_data=request_data,
                request_headers=request_headers,
                debug=self.config.log_level == "debug",
            )
        except Exception:
            # Logging failures never break requests
            pass

    async def _execute_with_logging(
        self,
        method: str,
        url: str,
        request_func: Callable[[], Awaitable[Any]],
        request_data: Optional[Any] = None,
        request_headers: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Execute HTTP request with request logging.

        Args:
            method: HTTP method name
            url: Request URL
            request_func: Async function to execute the request
            request_data: Request payload (optional)
            request_headers: Extra request headers (optional)

        Returns:
            Decoded response

        Raises:
            Exception: If request fails
        """
        start_time = time.perf_counter()
        try:
            response = await request_func()
        except Exception as e:
            self._log_http_request(method, url, start_time, None, e, request_data, request_headers)
            raise
        self._log_http_request(method, url, start_time, response, None, request_data, request_headers)
        return response

    async def request(
        self,
        method: str,
        path: str,
        data: Optional[Any] = None,
        expansions: Optional[Sequence[str]] = None,
        additional_params: Optional[Dict[str, str]] = None,
        headers: Optional[Dict[str, str]] = None,
        attempt_oauth_refresh: bool = True,
    ) -> Any:
        """
        Make an HTTP request and return the decoded JSON.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: Path relative to the API host
            data: Query parameters for GET/DELETE, JSON body otherwise. Pydantic
                models are encoded with their wire names.
            expansions: Fields for the server to expand in the response
            additional_params: Extra query parameters appended to the path
            headers: Extra request headers
            attempt_oauth_refresh: Refresh and retry once on 401 (default True)

        Returns:
            Decoded JSON response, or None for an empty body

        Raises:
            AferoClientError: If the request fails
        """
        if isinstance(data, BaseModel):
            data = encode_model(data)
        url = with_expansions(path, expansions, additional_params)

        async def _request():
            return await self._retrying_client.request(
                method,
                url,
                data=data,
                headers=headers,
                attempt_refresh=attempt_oauth_refresh,
            )

        return await self._execute_with_logging(method.upper(), url, _request, data, headers)

    async def request_void(self, method: str, path: str, **kwargs) -> None:
        """Make a request, discarding any response body."""
        await self.request(method, path, **kwargs)

    async def request_dict(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        """Make a request whose response must be a JSON object."""
        return decode_dict(await self.request(method, path, **kwargs))

    async def request_dict_list(self, method: str, path: str, **kwargs) -> List[Dict[str, Any]]:
        """Make a request whose response must be a JSON array of objects."""
        return decode_dict_list(await self.request(method, path, **kwargs))

    async def request_model(self, model: Type[T], method: str, path: str, **kwargs) -> T:
        """Make a request and decode the response into model."""
        return decode_model(model, await self.request(method, path, **kwargs))

    async def request_optional_model(
        self, model: Type[T], method: str, path: str, **kwargs
    ) -> Optional[T]:
        """Make a request and decode the response into model; an empty body yields None."""
        return decode_optional_model(model, await self.request(method, path, **kwargs))

    async def request_model_list(self, model: Type[T], method: str, path: str, **kwargs) -> List[T]:
        """Make a request and decode the response into a list of model."""
        return decode_model_list(model, await self.request(method, path, **kwargs))

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None, **kwargs) -> Any:
        """Make GET request."""
        return await self.request("GET", path, data=params, **kwargs)

    async def post(self, path: str, data: Optional[Any] = None, **kwargs) -> Any:
        """Make POST request."""
        return await self.request("POST", path, data=data, **kwargs)

    async def put(self, path: str, data: Optional[Any] = None, **kwargs) -> Any:
        """Make PUT request."""
        return await self.request("PUT", path, data=data, **kwargs)

    async def delete(self, path: str, params: Optional[Dict[str, Any]] = None, **kwargs) -> Any:
        """Make DELETE request."""
        return await self.request("DELETE", path, data=params, **kwargs)
