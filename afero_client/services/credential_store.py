"""
Credential persistence for the OAuth session.

Credentials are keyed by API host so that one process can talk to several
Afero environments without mixing tokens. The file-backed store encrypts its
contents with Fernet, standing in for a platform keychain.
"""

import json
import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from cryptography.fernet import Fernet, InvalidToken
from pydantic import ValidationError

from ..errors import ConfigurationError
from ..models.credential import OAuthCredential

logger = logging.getLogger(__name__)


class CredentialStore(ABC):
    """Storage backend for OAuth credentials."""

    @abstractmethod
    def load(self, identifier: str) -> Optional[OAuthCredential]:
        """Return the credential stored under identifier, if any."""

    @abstractmethod
    def save(self, identifier: str, credential: OAuthCredential) -> None:
        """Store credential under identifier, replacing any previous one."""

    @abstractmethod
    def delete(self, identifier: str) -> None:
        """Remove the credential stored under identifier. Missing entries are ignored."""


class InMemoryCredentialStore(CredentialStore):
    """Process-local credential store."""

    def __init__(self) -> None:
        self._credentials: Dict[str, OAuthCredential] = {}

    def load(self, identifier: str) -> Optional[OAuthCredential]:
        return self._credentials.get(identifier)

    def save(self, identifier: str, credential: OAuthCredential) -> None:
        self._credentials[identifier] = credential

    def delete(self, identifier: str) -> None:
        self._credentials.pop(identifier, None)


class EncryptedFileCredentialStore(CredentialStore):
    """
    Credential store backed by a single Fernet-encrypted JSON file.

    The file holds a mapping of identifier to serialized credential. It is
    rewritten on every save or delete and created with owner-only permissions.
    """

    def __init__(self, path: str, encryption_key: str):
        """
        Initialize the file store.

        Args:
            path: Location of the encrypted credential file
            encryption_key: URL-safe base64 Fernet key

        Raises:
            ConfigurationError: If the encryption key is not a valid Fernet key
        """
        self.path = Path(path)
        try:
            self.fernet = Fernet(encryption_key)
        except (ValueError, TypeError) as e:
            raise ConfigurationError(f"Invalid credential encryption key: {e}") from e

    def _read_all(self) -> Dict[str, dict]:
        if not self.path.exists():
            return {}
        token = self.path.read_bytes()
        if not token:
            return {}
        try:
            payload = self.fernet.decrypt(token)
        except InvalidToken:
            logger.warning("Credential file %s could not be decrypted; ignoring it", self.path)
            return {}
        data = json.loads(payload.decode("utf-8"))
        return data if isinstance(data, dict) else {}

    def _write_all(self, data: Dict[str, dict]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        token = self.fernet.encrypt(json.dumps(data).encode("utf-8"))
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        fd = os.open(tmp_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "wb") as fh:
            fh.write(token)
        os.replace(tmp_path, self.path)

    def load(self, identifier: str) -> Optional[OAuthCredential]:
        raw = self._read_all().get(identifier)
        if raw is None:
            return None
        try:
            return OAuthCredential.model_validate(raw)
        except ValidationError:
            logger.warning("Stored credential for %s is malformed; ignoring it", identifier)
            return None

    def save(self, identifier: str, credential: OAuthCredential) -> None:
        data = self._read_all()
        data[identifier] = credential.model_dump(mode="json")
        self._write_all(data)

    def delete(self, identifier: str) -> None:
        data = self._read_all()
        if identifier in data:
            del data[identifier]
            self._write_all(data)
