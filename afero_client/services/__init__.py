"""Services for the Afero client SDK."""

from .credential_store import (
    CredentialStore,
    EncryptedFileCredentialStore,
    InMemoryCredentialStore,
)
from .session import OAUTH_TOKEN_PATH, OAuthSession

__all__ = [
    "CredentialStore",
    "EncryptedFileCredentialStore",
    "InMemoryCredentialStore",
    "OAUTH_TOKEN_PATH",
    "OAuthSession",
]
