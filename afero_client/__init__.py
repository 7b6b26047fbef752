"""
Afero client SDK - asynchronous Python client for the Afero IoT cloud REST API.

This package provides an OAuth2 session with automatic refresh-and-retry on
401 responses, JSON decoding into typed models, and a typed endpoint facade
for accounts, devices, tags, profiles, rules, device groups and sharing.
"""

import logging
from typing import Optional

from .api import ApiClient
from .api.types import (
    AccountAccess,
    AccountAction,
    AccountUserSummary,
    ConclaveAccess,
    DeviceBatchActionRequest,
    DeviceBatchActionResults,
    DeviceGroup,
    DeviceProfile,
    DeviceRule,
    DeviceTag,
    HistoryActivity,
    Invitation,
    LocationModel,
    LocationSourceType,
    Schedule,
    ScheduleTime,
    TagType,
    User,
)
from .errors import (
    AferoClientError,
    ApiError,
    ApiErrorCode,
    AuthenticationError,
    BadParameterError,
    ConfigurationError,
    ConnectionError,
    EncodingFailureError,
    NotLoggedInError,
    UnexpectedResultTypeError,
    is_forbidden,
    is_unauthorized,
)
from .models.config import AferoClientConfig
from .models.credential import OAuthCredential
from .services.credential_store import (
    CredentialStore,
    EncryptedFileCredentialStore,
    InMemoryCredentialStore,
)
from .services.session import OAuthSession
from .utils.config_loader import load_config
from .utils.http_client import HttpClient

__version__ = "0.1.0"
__author__ = "Afero"
__license__ = "MIT"

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


class AferoClient:
    """
    Main Afero client SDK class.

    Wires together:
    - An OAuth session (sign in, refresh, sign out) with its credential store
    - The HTTP stack (transport, refresh-and-retry, logging)
    - The typed API facade, exposed as ``accounts``, ``devices``, ``tags``,
      ``profiles``, ``rules``, ``device_groups`` and ``sharing``
    """

    def __init__(self, config: AferoClientConfig, store: Optional[CredentialStore] = None):
        """
        Initialize AferoClient with configuration.

        Args:
            config: Afero client configuration (API host, OAuth client, etc.)
            store: Credential store. Defaults to an encrypted file store when
                credential_store_path and encryption_key are configured,
                otherwise to an in-memory store.
        """
        self.config = config
        logging.getLogger(__name__).setLevel(_LOG_LEVELS[config.log_level])

        if store is None:
            store = self._default_store(config)
        self.session = OAuthSession(config, store)
        self.http_client = HttpClient(config, self.session)
        self.api = ApiClient(self.http_client)

        self.accounts = self.api.accounts
        self.devices = self.api.devices
        self.tags = self.api.tags
        self.profiles = self.api.profiles
        self.rules = self.api.rules
        self.device_groups = self.api.device_groups
        self.sharing = self.api.sharing

    @staticmethod
    def _default_store(config: AferoClientConfig) -> CredentialStore:
        if config.credential_store_path and config.encryption_key:
            return EncryptedFileCredentialStore(config.credential_store_path, config.encryption_key)
        return InMemoryCredentialStore()

    # ==================== SESSION METHODS ====================

    async def sign_in(self, username: str, password: str, scope: str = "account") -> None:
        """
        Sign in with the OAuth2 password grant.

        Args:
            username: Account credential id (email address)
            password: Account password
            scope: OAuth scope (default: account)
        """
        await self.session.sign_in(username, password, scope=scope)

    async def sign_out(self, error: Optional[BaseException] = None) -> None:
        """Clear the stored credential. Never raises."""
        await self.session.sign_out(error)

    async def refresh(self) -> None:
        """Renew the access token with the stored refresh token."""
        await self.session.refresh()

    def is_signed_in(self) -> bool:
        """Check if a credential is stored for the configured API host."""
        return self.session.is_signed_in

    def get_config(self) -> AferoClientConfig:
        """Return a copy of the client configuration."""
        return self.config.model_copy()

    # ==================== LIFECYCLE ====================

    async def close(self) -> None:
        """Close HTTP connections."""
        await self.http_client.close()
        await self.session.close()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()


__all__ = [
    "AferoClient",
    "AferoClientConfig",
    "ApiClient",
    "HttpClient",
    "OAuthCredential",
    "OAuthSession",
    "CredentialStore",
    "EncryptedFileCredentialStore",
    "InMemoryCredentialStore",
    "load_config",
    # Types
    "AccountAccess",
    "AccountAction",
    "AccountUserSummary",
    "ConclaveAccess",
    "DeviceBatchActionRequest",
    "DeviceBatchActionResults",
    "DeviceGroup",
    "DeviceProfile",
    "DeviceRule",
    "DeviceTag",
    "HistoryActivity",
    "Invitation",
    "LocationModel",
    "LocationSourceType",
    "Schedule",
    "ScheduleTime",
    "TagType",
    "User",
    # Errors
    "AferoClientError",
    "ApiError",
    "ApiErrorCode",
    "AuthenticationError",
    "BadParameterError",
    "ConfigurationError",
    "ConnectionError",
    "EncodingFailureError",
    "NotLoggedInError",
    "UnexpectedResultTypeError",
    "is_forbidden",
    "is_unauthorized",
]
