"""
Configuration types for the Afero client SDK.

This module contains Pydantic models that define the configuration structure
used throughout the SDK.
"""

import base64
from typing import Literal, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, Field

DEFAULT_API_BASE_URL = "https://api.afero.io"


class AferoClientConfig(BaseModel):
    """Main Afero client configuration.

    Required fields:
    - oauth_client_id: OAuth2 client identifier
    - oauth_client_secret: OAuth2 client secret

    Optional fields:
    - api_base_url: API host (defaults to the production Afero cloud)
    - app_id / platform: identify the calling app via the x-afero-app header
    - log_level: Logging level (debug, info, warn, error)
    - credential_store_path / encryption_key: persist the OAuth credential
      to an encrypted file instead of keeping it in memory
    """

    api_base_url: str = Field(default=DEFAULT_API_BASE_URL, description="Afero API base URL")
    oauth_client_id: str = Field(..., description="OAuth2 client identifier")
    oauth_client_secret: str = Field(..., description="OAuth2 client secret")
    app_id: Optional[str] = Field(default=None, description="Application identifier")
    platform: str = Field(default="IOS", description="Platform reported in x-afero-app")
    log_level: Literal["debug", "info", "warn", "error"] = Field(
        default="info",
        description="Log level"
    )
    timeout: float = Field(default=30.0, gt=0, description="HTTP timeout in seconds")
    credential_store_path: Optional[str] = Field(
        default=None, description="Path of the encrypted credential file"
    )
    encryption_key: Optional[str] = Field(
        default=None, description="Fernet key used to encrypt the credential file"
    )
    locale: str = Field(default="en_US", description="Locale sent with profile requests")
    image_size: str = Field(default="2x", description="Image scale sent with profile requests")

    @property
    def credential_identifier(self) -> str:
        """Key under which the OAuth credential is stored (the API host)."""
        host = urlparse(self.api_base_url).hostname
        return host or self.api_base_url

    @property
    def app_header_value(self) -> Optional[str]:
        """Value of the x-afero-app header, or None when no app id is set."""
        if not self.app_id:
            return None
        return encode_app_header(self.app_id, self.platform)

    @property
    def scale_and_locale(self) -> dict[str, str]:
        """Query parameters describing the client's locale and image scale."""
        return {"locale": self.locale, "imageSize": self.image_size}


def encode_app_header(app_id: str, platform: str) -> str:
    """Encode ``<appId>:<platform>`` as base64 for the x-afero-app header."""
    return base64.b64encode(f"{app_id}:{platform}".encode("utf-8")).decode("ascii")
