"""Account API request and response types.

All types use the camelCase field names of the Afero REST API.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class AccountPrivileges(BaseModel):
    """Privileges a user holds on an account."""

    canWrite: bool = Field(default=False, description="User may modify devices")
    owner: bool = Field(default=False, description="User owns the account")
    inviteUsers: Optional[bool] = Field(default=None, description="User may invite others")
    manageDeviceProfiles: Optional[bool] = Field(default=None, description="User may manage profiles")
    viewDeviceInfo: Optional[bool] = Field(default=None, description="User may view device info")

    class Config:
        extra = "allow"


class AccountDescription(BaseModel):
    """The account object embedded in account access records."""

    accountId: str = Field(..., description="Account ID")
    type: Optional[str] = Field(default=None, description="Account type")
    description: Optional[str] = Field(default=None, description="Display name of the account")
    createdTimestamp: Optional[int] = Field(default=None, description="Creation time (epoch millis)")

    class Config:
        extra = "allow"


class AccountAccess(BaseModel):
    """A user's access to one account."""

    account: AccountDescription = Field(..., description="The account")
    userId: Optional[str] = Field(default=None, description="User ID")
    privileges: AccountPrivileges = Field(default_factory=AccountPrivileges)
    startAccessTimestamp: Optional[int] = Field(default=None, description="Access start (epoch millis)")
    endAccessTimestamp: Optional[int] = Field(default=None, description="Access end (epoch millis)")

    class Config:
        extra = "allow"


class SharingAccountAccess(BaseModel):
    """Another user's access to an account the current user shares."""

    userId: str = Field(..., description="User ID")
    accountId: str = Field(..., description="Account ID")
    privileges: AccountPrivileges = Field(default_factory=AccountPrivileges)
    startAccessTimestamp: Optional[int] = Field(default=None, description="Access start (epoch millis)")
    endAccessTimestamp: Optional[int] = Field(default=None, description="Access end (epoch millis)")

    class Config:
        extra = "allow"


class UserCredential(BaseModel):
    """Credential record attached to a user."""

    credentialId: str = Field(..., description="Credential ID (email address)")
    type: Optional[str] = Field(default=None, description="Credential type")
    verified: Optional[bool] = Field(default=None, description="Whether the credential is verified")
    failedAttempts: Optional[int] = Field(default=None, description="Failed sign-in attempts")
    lastUsedTimestamp: Optional[int] = Field(default=None, description="Last use (epoch millis)")

    class Config:
        extra = "allow"


class User(BaseModel):
    """The signed-in user, as returned by GET /v1/users/me."""

    userId: str = Field(..., description="User ID")
    credentialId: Optional[str] = Field(default=None, description="Primary credential ID")
    credential: Optional[UserCredential] = Field(default=None, description="Primary credential")
    firstName: Optional[str] = Field(default=None, description="First name")
    lastName: Optional[str] = Field(default=None, description="Last name")
    name: Optional[str] = Field(default=None, description="Display name")
    accountAccess: List[AccountAccess] = Field(default_factory=list)
    userAccountAccess: Optional[List[SharingAccountAccess]] = Field(default=None)
    partnerAccess: Optional[List[Dict[str, Any]]] = Field(default=None)
    tos: Optional[List[Dict[str, Any]]] = Field(default=None, description="Terms of service state")

    class Config:
        extra = "allow"

    @property
    def account_ids(self) -> List[str]:
        """IDs of all accounts the user can access."""
        return [access.account.accountId for access in self.accountAccess]


class CreateAccountRequest(BaseModel):
    """Body of POST /v1/accounts."""

    account: Dict[str, Any] = Field(..., description="Account type and description")
    user: Dict[str, Any] = Field(..., description="First and last name")
    credential: Dict[str, Any] = Field(..., description="Credential id, password and type")

    @classmethod
    def build(
        cls,
        credential_id: str,
        password: str,
        first_name: str,
        last_name: str,
        account_type: str = "CUSTOMER",
        account_description: str = "Primary Account",
        credential_type: str = "email",
        verified: bool = False,
    ) -> "CreateAccountRequest":
        return cls(
            account={"type": account_type, "description": account_description},
            user={"firstName": first_name, "lastName": last_name},
            credential={
                "credentialId": credential_id,
                "password": password,
                "type": credential_type,
                "verified": verified,
            },
        )


class MobileDeviceInfo(BaseModel):
    """Body of POST /v1/users/{userId}/mobileDevices."""

    platform: str = Field(..., description="Mobile platform (IOS, ANDROID)")
    mobileDeviceId: str = Field(..., description="Stable ID of the mobile device")
    extendedData: Dict[str, Any] = Field(default_factory=dict, description="App and OS details")
    pushId: Optional[str] = Field(default=None, description="Push notification token")


class ActivityType(str, Enum):
    """History entry types reported by the activity endpoints."""

    NEW = "NEW"
    ATTRIBUTE = "ATTRIBUTE"
    ACTION_ATTRIBUTE_WRITE = "ACTION_ATTRIBUTE_WRITE"
    ACTION_ATTRIBUTE_UPDATE = "ACTION_ATTRIBUTE_UPDATE"
    ACTION_DEVICE_AVAILABILITY = "ACTION_DEVICE_AVAILABILITY"
    ACTION_DEVICE_UPDATE = "ACTION_DEVICE_UPDATE"
    AVAILABLE = "AVAILABLE"
    UNAVAILABLE = "UNAVAILABLE"
    STATE = "STATE"
    VERSION = "VERSION"
    CONNECT = "CONNECT"
    DISCONNECT = "DISCONNECT"
    DISCONNECT_NOTIFICATION = "DISCONNECT_NOTIFICATION"
    ASSOCIATE = "ASSOCIATE"
    DISASSOCIATE = "DISASSOCIATE"
    LOCATION = "LOCATION"


class HistoryActivity(BaseModel):
    """One entry of an account or device activity history."""

    historyId: Optional[int] = Field(default=None, description="History entry ID")
    createdTimestamp: Optional[int] = Field(default=None, description="Creation time (epoch millis)")
    historyType: Optional[str] = Field(default=None, description="Entry type, see ActivityType")
    message: Optional[str] = Field(default=None, description="Human readable message")
    deviceId: Optional[str] = Field(default=None, description="Device ID")
    deviceFriendlyName: Optional[str] = Field(default=None, description="Device display name")
    attributeId: Optional[int] = Field(default=None, description="Attribute ID")
    attributeValue: Optional[str] = Field(default=None, description="Attribute value")
    icon: Optional[Any] = Field(default=None)
    deviceIcon: Optional[Any] = Field(default=None)
    controlIcon: Optional[Any] = Field(default=None)

    class Config:
        extra = "allow"


class ConclaveHost(BaseModel):
    """Realtime channel host record."""

    type: str = Field(..., description="Host type (socket, ...)")
    host: str = Field(..., description="Host name")
    port: int = Field(..., description="Port")

    class Config:
        extra = "allow"


class ConclaveTokenClient(BaseModel):
    """Identity a realtime channel token was issued to."""

    type: str = Field(default="user", description="Client type")
    userId: Optional[str] = Field(default=None, description="User ID")
    deviceId: Optional[str] = Field(default=None, description="Device ID")
    mobileDeviceId: Optional[str] = Field(default=None, description="Mobile device ID")

    class Config:
        extra = "allow"


class ConclaveToken(BaseModel):
    """Realtime channel access token."""

    token: str = Field(..., description="Access token")
    channelId: str = Field(..., description="Channel ID")
    expiresTimestamp: int = Field(..., description="Expiry (epoch millis)")
    client: ConclaveTokenClient = Field(..., description="Token holder")

    class Config:
        extra = "allow"


class ConclaveAccess(BaseModel):
    """Response of the conclaveAccess endpoint."""

    conclaveHosts: List[ConclaveHost] = Field(default_factory=list)
    tokens: List[ConclaveToken] = Field(default_factory=list)

    class Config:
        extra = "allow"

    @property
    def token(self) -> Optional[ConclaveToken]:
        """The first issued token, if any."""
        return self.tokens[0] if self.tokens else None

    def hosts_for_type(self, host_type: str) -> List[ConclaveHost]:
        return [host for host in self.conclaveHosts if host.type == host_type]
