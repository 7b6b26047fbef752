"""Rule, schedule and device group types.

All types use the camelCase field names of the Afero REST API.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ScheduleTime(BaseModel):
    """Time of day a schedule fires."""

    hour: int = Field(..., ge=0, le=23)
    minute: int = Field(..., ge=0, le=59)
    seconds: Optional[int] = Field(default=None, ge=0, le=59)
    timeZone: str = Field(default="UTC", description="IANA time zone name")

    class Config:
        extra = "allow"


class Schedule(BaseModel):
    """A recurring schedule. ``scheduleId`` is None until created."""

    scheduleId: Optional[str] = Field(default=None, description="Schedule ID")
    time: ScheduleTime = Field(..., description="Time of day")
    dayOfWeek: List[str] = Field(default_factory=list, description="Days (SUNDAY, MONDAY, ...)")
    triggeredRuleId: Optional[str] = Field(default=None, description="Rule run by this schedule")

    class Config:
        extra = "allow"


class DeviceRule(BaseModel):
    """An account rule; set deviceGroupId to make it a group rule."""

    ruleId: Optional[str] = Field(default=None, description="Rule ID")
    accountId: Optional[str] = Field(default=None, description="Owning account ID")
    label: Optional[str] = Field(default=None, description="Display name")
    enabled: bool = Field(default=False, description="Whether the rule is active")
    scheduleId: Optional[str] = Field(default=None, description="Schedule ID")
    schedule: Optional[Schedule] = Field(default=None, description="Expanded schedule")
    sceneId: Optional[str] = Field(default=None, description="Scene ID")
    scene: Optional[Dict[str, Any]] = Field(default=None, description="Expanded scene")
    deviceActions: List[Dict[str, Any]] = Field(default_factory=list)
    deviceFilterCriteria: List[Dict[str, Any]] = Field(default_factory=list)
    deviceGroupId: Optional[str] = Field(default=None, description="Group ID for group rules")
    userNotifications: Optional[List[Dict[str, Any]]] = Field(default=None)
    accountNotificationId: Optional[str] = Field(default=None)

    class Config:
        extra = "allow"


class AccountAction(BaseModel):
    """Device request issued as a result of executing a rule."""

    requestId: int = Field(..., description="Request ID")
    type: str = Field(..., description="Action type")
    timestampMs: Optional[int] = Field(default=None, description="Time (epoch millis)")
    sender: Optional[str] = Field(default=None)
    source: Optional[Dict[str, Any]] = Field(default=None)

    class Config:
        extra = "allow"


class DeviceSetMember(BaseModel):
    """A device belonging to a group."""

    deviceId: str = Field(..., description="Device ID")
    clientMetadata: Dict[str, Any] = Field(default_factory=dict, description="App-defined metadata")

    class Config:
        extra = "allow"


class DeviceGroup(BaseModel):
    """A named set of devices in an account. ``deviceGroupId`` is None until created."""

    accountId: str = Field(..., description="Owning account ID")
    deviceGroupId: Optional[str] = Field(default=None, description="Group ID")
    label: Optional[str] = Field(default=None, description="Display name")
    devices: List[DeviceSetMember] = Field(default_factory=list)
    createdTimestamp: Optional[int] = Field(default=None)
    clientMetadata: Dict[str, Any] = Field(default_factory=dict, description="App-defined metadata")

    class Config:
        extra = "allow"

    @property
    def icon_id(self) -> Optional[str]:
        """Icon chosen for the group, stored in clientMetadata."""
        icon_id = self.clientMetadata.get("iconId")
        return icon_id if isinstance(icon_id, str) else None
