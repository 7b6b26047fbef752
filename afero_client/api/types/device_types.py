"""Device API request and response types.

All types use the camelCase field names of the Afero REST API.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class LocationSourceType(str, Enum):
    """How a device location was determined."""

    INITIAL_DEVICE_ASSOCIATE = "INITIAL_DEVICE_ASSOCIATE"
    HUB_LOCATION_GPS = "HUB_LOCATION_GPS"
    USER_DEFINED_LOCATION = "USER_DEFINED_LOCATION"


class LocationModel(BaseModel):
    """Last known location of a device."""

    latitude: float = Field(..., description="Latitude in degrees")
    longitude: float = Field(..., description="Longitude in degrees")
    locationSourceType: LocationSourceType = Field(
        default=LocationSourceType.USER_DEFINED_LOCATION,
        description="How the location was determined",
    )
    formattedAddressLines: Optional[List[str]] = Field(
        default=None, description="Postal address lines"
    )

    class Config:
        extra = "allow"


class DeviceProfile(BaseModel):
    """Device profile.

    Only the identifying fields are typed; the attribute and presentation
    sections are kept as raw JSON.
    """

    id: Optional[str] = Field(default=None, description="Profile ID")
    deviceType: Optional[str] = Field(default=None, description="Device type name")
    deviceTypeId: Optional[str] = Field(default=None, description="Device type ID")
    services: Optional[List[Dict[str, Any]]] = Field(default=None, description="Attribute services")
    presentation: Optional[Dict[str, Any]] = Field(default=None, description="UI presentation")

    class Config:
        extra = "allow"


class BatchActionType(str, Enum):
    """Kinds of device batch request."""

    ATTRIBUTE_WRITE = "attribute_write"
    ATTRIBUTE_READ = "attribute_read"
    NOTIFY_VIEWING = "notify_viewing"


class DeviceBatchActionRequest(BaseModel):
    """One request in a batch posted to /devices/{deviceId}/requests."""

    type: BatchActionType = Field(..., description="Request type")
    attrId: Optional[int] = Field(default=None, description="Attribute ID (read/write)")
    value: Optional[str] = Field(default=None, description="Hex value (write)")
    seconds: Optional[float] = Field(default=None, description="Viewing interval (notify_viewing)")

    @classmethod
    def attribute_write(cls, attribute_id: int, value: str) -> "DeviceBatchActionRequest":
        return cls(type=BatchActionType.ATTRIBUTE_WRITE, attrId=attribute_id, value=value)

    @classmethod
    def attribute_read(cls, attribute_id: int) -> "DeviceBatchActionRequest":
        return cls(type=BatchActionType.ATTRIBUTE_READ, attrId=attribute_id)

    @classmethod
    def notify_viewing(cls, interval: float) -> "DeviceBatchActionRequest":
        return cls(type=BatchActionType.NOTIFY_VIEWING, seconds=interval)


class DeviceBatchActionResponse(BaseModel):
    """Outcome of one batch request."""

    status: str = Field(..., description="SUCCESS, FAILURE or NOT_ATTEMPTED")
    requestId: Optional[int] = Field(default=None, description="Request ID")
    statusCode: Optional[int] = Field(default=None, description="HTTP-style status code")
    timestampMs: Optional[int] = Field(default=None, description="Completion time (epoch millis)")

    class Config:
        extra = "allow"

    @property
    def succeeded(self) -> bool:
        return self.status == "SUCCESS"


class DeviceBatchActionResults(BaseModel):
    """Requests of a batch paired with their responses, in order."""

    requests: List[DeviceBatchActionRequest] = Field(default_factory=list)
    responses: List[DeviceBatchActionResponse] = Field(default_factory=list)

    @property
    def success_count(self) -> int:
        return sum(1 for response in self.responses if response.succeeded)

    @property
    def failure_count(self) -> int:
        return len(self.responses) - self.success_count
