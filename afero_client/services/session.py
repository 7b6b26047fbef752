"""
OAuth2 session for the Afero API.

Holds the bearer credential for one API host, acquires it with the password
grant, renews it with the refresh-token grant and clears it on sign-out.
Request building reads the credential through ``authorization_header()`` at
call time, so a refresh is visible to the very next request.
"""

import asyncio
import logging
from typing import Any, Callable, Dict, List, Optional

import httpx
from pydantic import ValidationError

from ..errors import (
    AferoClientError,
    AuthenticationError,
    ConnectionError,
    NotLoggedInError,
    UnexpectedResultTypeError,
)
from ..models.config import AferoClientConfig
from ..models.credential import OAuthCredential
from .credential_store import CredentialStore, InMemoryCredentialStore

logger = logging.getLogger(__name__)

OAUTH_TOKEN_PATH = "/oauth/token"

SignOutListener = Callable[[Optional[BaseException]], None]


def _retrieve_refresh_result(task: "asyncio.Task[None]") -> None:
    # Marks the exception as retrieved when every waiter was cancelled
    if not task.cancelled():
        task.exception()


class OAuthSession:
    """OAuth2 credential holder for a single API host."""

    def __init__(
        self,
        config: AferoClientConfig,
        store: Optional[CredentialStore] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the session.

        Args:
            config: Afero client configuration (token endpoint host and client credentials)
            store: Credential store; defaults to an in-memory store
            client: Optional httpx client used for token requests. When omitted the
                session creates and owns one.
        """
        self.config = config
        self.store = store if store is not None else InMemoryCredentialStore()
        self.identifier = config.credential_identifier
        self._client = client
        self._owns_client = client is None
        self._refresh_task: Optional["asyncio.Task[None]"] = None
        self._generation = 0
        self._sign_out_listeners: List[SignOutListener] = []

    # Credential accessors

    def current_credential(self) -> Optional[OAuthCredential]:
        """Return the stored credential for this host, if any."""
        return self.store.load(self.identifier)

    def set_credential(self, credential: OAuthCredential) -> None:
        """Store credential for this host, replacing the previous one."""
        self.store.save(self.identifier, credential)
        self._generation += 1

    def clear(self) -> None:
        """Remove the stored credential for this host. Store failures are logged, not raised."""
        try:
            self.store.delete(self.identifier)
        except Exception:
            logger.exception("Failed to remove stored credential for %s", self.identifier)
        finally:
            self._generation += 1

    @property
    def is_signed_in(self) -> bool:
        """True when a credential is stored for this host."""
        return self.current_credential() is not None

    def authorization_header(self) -> Optional[str]:
        """Authorization header value for the current credential, or None."""
        credential = self.current_credential()
        if credential is None:
            return None
        return credential.authorization_header

    # Sign-out listeners

    def on_sign_out(self, callback: SignOutListener) -> None:
        """Register a callback invoked with the causing error whenever the session signs out."""
        if callback not in self._sign_out_listeners:
            self._sign_out_listeners.append(callback)

    def off_sign_out(self, callback: SignOutListener) -> None:
        """Unregister a sign-out callback."""
        if callback in self._sign_out_listeners:
            self._sign_out_listeners.remove(callback)

    # Token endpoint

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.config.api_base_url,
                timeout=self.config.timeout,
            )
        return self._client

    async def _request_token(self, form: Dict[str, Any]) -> Dict[str, Any]:
        """POST a grant to the token endpoint and return the decoded response.

        Raises:
            AuthenticationError: If the token endpoint answers with a non-2xx status
            ConnectionError: If the request could not be sent
            UnexpectedResultTypeError: If the response is not a JSON object
        """
        client = self._get_client()
        try:
            response = await client.post(
                OAUTH_TOKEN_PATH,
                data=form,
                auth=(self.config.oauth_client_id, self.config.oauth_client_secret),
                headers={"Accept": "application/json"},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            error_body: Optional[dict] = None
            try:
                parsed = e.response.json()
                if isinstance(parsed, dict):
                    error_body = parsed
            except ValueError:
                pass
            raise AuthenticationError(
                f"HTTP {e.response.status_code}: {e.response.text}",
                status_code=e.response.status_code,
                error_body=error_body,
            ) from e
        except httpx.RequestError as e:
            raise ConnectionError(f"Token request failed: {str(e)}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise UnexpectedResultTypeError("Token response is not JSON.", e) from e
        if not isinstance(data, dict):
            raise UnexpectedResultTypeError(f"Unexpected token response: {data!r}")
        return data

    def _credential_from(self, data: Dict[str, Any], previous: Optional[OAuthCredential] = None) -> OAuthCredential:
        try:
            if previous is not None:
                return previous.with_refreshed(data)
            return OAuthCredential.model_validate(data)
        except ValidationError as e:
            raise UnexpectedResultTypeError("Unable to decode OAuth credential.", e) from e

    # Operations

    async def sign_in(self, username: str, password: str, scope: str = "account") -> None:
        """
        Obtain a credential with the password grant and store it.

        Args:
            username: Account credential id (currently an email address)
            password: Account password
            scope: OAuth scope; should always be ``account``

        Raises:
            AuthenticationError: If the service rejects the credentials
            ConnectionError: If the token endpoint is unreachable
        """
        data = await self._request_token(
            {
                "grant_type": "password",
                "username": username,
                "password": password,
                "scope": scope,
            }
        )
        self.set_credential(self._credential_from(data))
        logger.info("Signed in to %s", self.identifier)

    async def sign_out(self, error: Optional[BaseException] = None) -> None:
        """
        Clear the stored credential and notify listeners.

        Never contacts the server and never raises, even if nothing is stored.

        Args:
            error: The error, if any, that caused the sign-out
        """
        self._sign_out(error)

    def _sign_out(self, error: Optional[BaseException]) -> None:
        self.clear()
        if error is not None:
            logger.info("Signed out of %s after error: %s", self.identifier, error)
        else:
            logger.info("Signed out of %s", self.identifier)
        for listener in list(self._sign_out_listeners):
            try:
                listener(error)
            except Exception:
                logger.exception("Sign-out listener failed")

    async def refresh(self, passthrough_error: Optional[BaseException] = None) -> None:
        """
        Renew the access token with the stored refresh token.

        Concurrent callers share a single in-flight refresh. On failure the
        session signs out and the caller sees ``passthrough_error`` if one was
        given, otherwise the refresh error.

        Args:
            passthrough_error: Error to raise instead of the refresh error on failure

        Raises:
            NotLoggedInError: If there is no credential to refresh
            AuthenticationError: If the token endpoint rejects the refresh token
        """
        if self._refresh_task is None or self._refresh_task.done():
            logger.debug("Requesting OAuth refresh")
            self._refresh_task = asyncio.ensure_future(self._perform_refresh())
            self._refresh_task.add_done_callback(_retrieve_refresh_result)
        else:
            logger.debug("Joining in-flight OAuth refresh")

        try:
            await asyncio.shield(self._refresh_task)
        except AferoClientError as error:
            if passthrough_error is not None:
                raise passthrough_error from error
            raise

    async def _perform_refresh(self) -> None:
        credential = self.current_credential()
        if credential is None or not credential.refresh_token:
            logger.info("No credential; bailing on refresh attempt")
            error = NotLoggedInError("No credential.")
            self._sign_out(error)
            raise error

        generation = self._generation
        try:
            data = await self._request_token(
                {
                    "grant_type": "refresh_token",
                    "refresh_token": credential.refresh_token,
                }
            )
            refreshed = self._credential_from(data, previous=credential)
        except AferoClientError as error:
            logger.warning("OAuth refresh failed: %s", error)
            self._sign_out(error)
            raise

        if generation != self._generation:
            # Signed out or signed in again while the refresh was in flight;
            # whatever is stored now wins.
            if self.current_credential() is None:
                raise NotLoggedInError("Signed out during refresh.")
            logger.info("Credential replaced during refresh; keeping the newer one")
            return

        self.set_credential(refreshed)
        logger.info("OAuth refresh successful")

    async def close(self) -> None:
        """Close the token client if this session created it."""
        if self._client is not None and self._owns_client:
            try:
                await self._client.aclose()
            finally:
                self._client = None
