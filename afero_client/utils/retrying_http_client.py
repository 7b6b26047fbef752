"""
Refresh-and-retry wrapper around the internal HTTP client.

A request that fails with HTTP 401 triggers one OAuth refresh, after which the
request is issued once more. Any other failure, or a failure of the retried
request, reaches the caller unchanged.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, Optional, TypeVar

from ..errors import AferoClientError, is_unauthorized
from ..services.session import OAuthSession
from .internal_http_client import InternalHttpClient

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetryingHttpClient:
    """Issues requests through InternalHttpClient, refreshing once on 401."""

    def __init__(self, http_client: InternalHttpClient, session: OAuthSession):
        self.http_client = http_client
        self.session = session

    async def wrap(
        self,
        call: Callable[[], Awaitable[T]],
        attempt_refresh: bool = True,
    ) -> T:
        """
        Run call, refreshing the OAuth credential and retrying once on a 401.

        If the refresh fails the session signs out and the original 401 error is
        raised.

        Args:
            call: Zero-argument coroutine factory issuing the request
            attempt_refresh: When False, errors are raised without a refresh

        Returns:
            Whatever call returns
        """
        try:
            return await call()
        except AferoClientError as error:
            if not attempt_refresh or not is_unauthorized(error):
                raise
            logger.info("Request unauthorized; refreshing OAuth credential and retrying")
            await self.session.refresh(passthrough_error=error)

        return await call()

    async def request(
        self,
        method: str,
        url: str,
        data: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
        attempt_refresh: bool = True,
    ) -> Any:
        """Make an HTTP request with refresh-and-retry on 401."""

        async def _call() -> Any:
            return await self.http_client.request(method, url, data=data, headers=headers)

        return await self.wrap(_call, attempt_refresh=attempt_refresh)

    async def close(self) -> None:
        await self.http_client.close()
