"""API type definitions.

Exports all request and response types for the API layer.
"""

from .account_types import (
    AccountAccess,
    AccountDescription,
    AccountPrivileges,
    ActivityType,
    ConclaveAccess,
    ConclaveHost,
    ConclaveToken,
    ConclaveTokenClient,
    CreateAccountRequest,
    HistoryActivity,
    MobileDeviceInfo,
    SharingAccountAccess,
    User,
    UserCredential,
)
from .device_types import (
    BatchActionType,
    DeviceBatchActionRequest,
    DeviceBatchActionResponse,
    DeviceBatchActionResults,
    DeviceProfile,
    LocationModel,
    LocationSourceType,
)
from .rules_types import (
    AccountAction,
    DeviceGroup,
    DeviceRule,
    DeviceSetMember,
    Schedule,
    ScheduleTime,
)
from .sharing_types import AccountUserSummary, Invitation
from .tag_types import DeviceTag, TagType

__all__ = [
    # Account types
    "AccountAccess",
    "AccountDescription",
    "AccountPrivileges",
    "ActivityType",
    "ConclaveAccess",
    "ConclaveHost",
    "ConclaveToken",
    "ConclaveTokenClient",
    "CreateAccountRequest",
    "HistoryActivity",
    "MobileDeviceInfo",
    "SharingAccountAccess",
    "User",
    "UserCredential",
    # Device types
    "BatchActionType",
    "DeviceBatchActionRequest",
    "DeviceBatchActionResponse",
    "DeviceBatchActionResults",
    "DeviceProfile",
    "LocationModel",
    "LocationSourceType",
    # Rules and group types
    "AccountAction",
    "DeviceGroup",
    "DeviceRule",
    "DeviceSetMember",
    "Schedule",
    "ScheduleTime",
    # Sharing types
    "AccountUserSummary",
    "Invitation",
    # Tag types
    "DeviceTag",
    "TagType",
]
