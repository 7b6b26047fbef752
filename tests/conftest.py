"""
Shared pytest fixtures for Afero client tests.
"""

import json
from typing import Any, Callable, Dict, List, Optional, Tuple, Union
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from afero_client import AferoClientConfig, OAuthCredential
from afero_client.services.credential_store import InMemoryCredentialStore
from afero_client.services.session import OAuthSession
from afero_client.utils.http_client import HttpClient
from afero_client.utils.internal_http_client import InternalHttpClient

TEST_BASE_URL = "https://api.afero.test"

TOKEN_RESPONSE = {
    "access_token": "access-2",
    "refresh_token": "refresh-2",
    "token_type": "bearer",
    "expires_in": 3600,
    "scope": "account",
}

RouteResponse = Union[Tuple[int, Any], Callable[[httpx.Request], httpx.Response]]


class FakeAferoServer:
    """In-process stand-in for the Afero API, served through httpx.MockTransport.

    Responses are queued per (method, path); the last queued response repeats.
    Every request is recorded in ``requests``.
    """

    def __init__(self):
        self.routes: Dict[Tuple[str, str], List[RouteResponse]] = {}
        self.requests: List[httpx.Request] = []

    def add(self, method: str, path: str, status_code: int = 200, json_body: Any = None) -> None:
        self.routes.setdefault((method, path), []).append((status_code, json_body))

    def add_handler(self, method: str, path: str, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.routes.setdefault((method, path), []).append(handler)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queue = self.routes.get((request.method, request.url.path))
        if not queue:
            return httpx.Response(404, json={"error": "not_found"})
        route = queue.pop(0) if len(queue) > 1 else queue[0]
        if callable(route):
            return route(request)
        status_code, body = route
        if body is None:
            return httpx.Response(status_code)
        return httpx.Response(status_code, json=body)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def requests_to(self, method: str, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    def count(self, method: str, path: str) -> int:
        return len(self.requests_to(method, path))

    @property
    def refresh_count(self) -> int:
        return sum(
            1
            for r in self.requests_to("POST", "/oauth/token")
            if b"grant_type=refresh_token" in r.content
        )

    @staticmethod
    def json_body(request: httpx.Request) -> Any:
        """Decode the JSON body of a recorded request."""
        return json.loads(request.content) if request.content else None

    @property
    def last_request(self) -> Optional[httpx.Request]:
        return self.requests[-1] if self.requests else None


@pytest.fixture
def config():
    """Test configuration."""
    return AferoClientConfig(
        api_base_url=TEST_BASE_URL,
        oauth_client_id="test-client-id",
        oauth_client_secret="test-client-secret",
        app_id="my.sooper.app",
        log_level="debug",
    )


@pytest.fixture
def server():
    """Fake Afero API server."""
    return FakeAferoServer()


@pytest.fixture
def store():
    """In-memory credential store."""
    return InMemoryCredentialStore()


@pytest.fixture
def token_response():
    """Token endpoint response for a successful grant."""
    return dict(TOKEN_RESPONSE)


@pytest.fixture
def credential():
    """A stored OAuth credential."""
    return OAuthCredential(
        access_token="access-1",
        refresh_token="refresh-1",
        token_type="Bearer",
        expires_in=3600,
    )


@pytest.fixture
def session(config, store, server):
    """OAuth session whose token endpoint is the fake server."""
    token_client = httpx.AsyncClient(base_url=config.api_base_url, transport=server.transport())
    return OAuthSession(config, store, client=token_client)


@pytest.fixture
def signed_in_session(session, credential):
    """OAuth session holding a credential."""
    session.set_credential(credential)
    return session


@pytest.fixture
def internal_client(config, signed_in_session, server):
    """InternalHttpClient talking to the fake server."""
    client = InternalHttpClient(config, signed_in_session)
    client.client = httpx.AsyncClient(
        base_url=config.api_base_url,
        headers=client._default_headers(),
        transport=server.transport(),
    )
    return client


@pytest.fixture
def http_client(config, signed_in_session, internal_client):
    """HttpClient wired to the fake server with a signed-in session."""
    return HttpClient(config, signed_in_session, internal_client)


@pytest.fixture
def mock_http_client(config):
    """Mock HTTP client."""
    http_client = MagicMock(spec=HttpClient)
    http_client.config = config
    http_client.session = MagicMock(spec=OAuthSession)
    http_client.session.sign_out = AsyncMock()
    http_client.request = AsyncMock(return_value={})
    http_client.request_void = AsyncMock(return_value=None)
    http_client.request_dict = AsyncMock(return_value={})
    http_client.request_dict_list = AsyncMock(return_value=[])
    http_client.request_model = AsyncMock()
    http_client.request_optional_model = AsyncMock(return_value=None)
    http_client.request_model_list = AsyncMock(return_value=[])
    http_client.close = AsyncMock()
    return http_client
