"""Device tag types.

Device tags are a simple list of values attached to a device. When a device
is associated the list is empty; when it is disassociated the tags are purged,
so nothing applied by a previous owner carries over to a new one.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class TagType(str, Enum):
    """Tag category. The service currently only issues ACCOUNT tags."""

    ACCOUNT = "ACCOUNT"


class DeviceTag(BaseModel):
    """A key/value label attached to a device.

    ``id`` is None until the tag has been created on the server. Equality
    compares id, value, tagType and localizationKey (not key).
    """

    id: Optional[str] = Field(
        default=None,
        alias="deviceTagId",
        description="Tag identifier, assigned by the server on creation",
    )
    key: str = Field(..., description="Tag key")
    value: Optional[str] = Field(default=None, description="Free-form tag value")
    tagType: TagType = Field(
        default=TagType.ACCOUNT,
        alias="deviceTagType",
        description="Tag category (always ACCOUNT)",
    )
    localizationKey: Optional[str] = Field(
        default=None, description="Localization key (currently unused)"
    )

    class Config:
        populate_by_name = True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DeviceTag):
            return NotImplemented
        return (
            self.id == other.id
            and self.value == other.value
            and self.tagType == other.tagType
            and self.localizationKey == other.localizationKey
        )

    def __hash__(self) -> int:
        # key is left out so that equal tags always hash equal
        return hash((self.id, self.value))

    def __str__(self) -> str:
        return (
            f"id:{self.id} value:{self.value} tagType:{self.tagType.value} "
            f"localizationKey:{self.localizationKey}"
        )
