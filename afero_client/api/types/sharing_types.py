"""Account sharing types."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .account_types import User


class Invitation(BaseModel):
    """A pending invitation to access an account."""

    value: Optional[str] = Field(default=None, description="Invitation token")
    credentialId: Optional[str] = Field(default=None, description="Invitee email")
    type: Optional[str] = Field(default=None, description="Invitation type")
    createdTimestamp: Optional[int] = Field(default=None)
    expiresTimestamp: Optional[int] = Field(default=None)
    tokenParams: Optional[Dict[str, Any]] = Field(default=None)
    accountId: Optional[str] = Field(default=None)

    class Config:
        extra = "allow"


class AccountUserSummary(BaseModel):
    """Users with access to an account, plus outstanding invitations."""

    users: List[User] = Field(default_factory=list)
    invitations: List[Invitation] = Field(default_factory=list)

    class Config:
        extra = "allow"
