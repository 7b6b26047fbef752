"""
OAuth2 credential model.

The token endpoint answers with the standard OAuth2 shape (snake_case), so the
fields here follow the wire names rather than the camelCase used by the REST API.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, model_validator


class OAuthCredential(BaseModel):
    """Bearer access token plus the refresh token used to renew it."""

    access_token: str = Field(..., description="Bearer access token")
    refresh_token: Optional[str] = Field(default=None, description="Refresh token")
    token_type: str = Field(default="Bearer", description="Token type")
    expires_in: Optional[int] = Field(default=None, description="Lifetime in seconds")
    expires_at: Optional[datetime] = Field(default=None, description="Expiry (UTC)")
    scope: Optional[str] = Field(default=None, description="Granted scope")

    @model_validator(mode="before")
    @classmethod
    def _compute_expires_at(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("expires_at") is None:
            expires_in = data.get("expires_in")
            if isinstance(expires_in, (int, float)):
                data = dict(data)
                data["expires_at"] = datetime.now(timezone.utc) + timedelta(
                    seconds=int(expires_in)
                )
        return data

    @property
    def is_expired(self) -> bool:
        """True when the access token's expiry has passed."""
        if self.expires_at is None:
            return False
        expires_at = self.expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        return datetime.now(timezone.utc) >= expires_at

    @property
    def authorization_header(self) -> str:
        """Value for the Authorization request header."""
        token_type = self.token_type or "Bearer"
        if token_type.lower() == "bearer":
            token_type = "Bearer"
        return f"{token_type} {self.access_token}"

    def with_refreshed(self, data: Dict[str, Any]) -> "OAuthCredential":
        """Build the credential from a refresh response, keeping the old refresh token
        when the server does not rotate it."""
        payload = dict(data)
        if not payload.get("refresh_token"):
            payload["refresh_token"] = self.refresh_token
        return OAuthCredential.model_validate(payload)
