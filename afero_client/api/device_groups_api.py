"""Device groups API implementation."""

from typing import List

from ..errors import BadParameterError
from ..utils.http_client import HttpClient
from ..utils.url_utils import build_path
from .types.rules_types import DeviceGroup


class DeviceGroupsApi:
    """Device groups API client."""

    GROUPS_ENDPOINT = "/v1/accounts/{account_id}/deviceGroups"
    GROUP_ENDPOINT = "/v1/accounts/{account_id}/deviceGroups/{group_id}"

    def __init__(self, http_client: HttpClient):
        self.http_client = http_client

    async def fetch_groups(self, account_id: str) -> List[DeviceGroup]:
        url = build_path(self.GROUPS_ENDPOINT, account_id=account_id)
        return await self.http_client.request_model_list(DeviceGroup, "GET", url)

    async def fetch_group(self, account_id: str, group_id: str) -> DeviceGroup:
        url = build_path(self.GROUP_ENDPOINT, account_id=account_id, group_id=group_id)
        return await self.http_client.request_model(DeviceGroup, "GET", url)

    async def create_or_update_group(self, group: DeviceGroup) -> DeviceGroup:
        """Create the group if it has no id yet, otherwise update it."""
        if group.deviceGroupId is None:
            return await self.create_group(group)
        return await self.update_group(group)

    async def create_group(self, group: DeviceGroup) -> DeviceGroup:
        """Create a group (POST).

        Raises:
            BadParameterError: If the group already has a deviceGroupId
        """
        if group.deviceGroupId is not None:
            raise BadParameterError(
                "Unexpected group id provided in create_group(); did you mean to call update_group()?"
            )
        url = build_path(self.GROUPS_ENDPOINT, account_id=group.accountId)
        return await self.http_client.request_model(DeviceGroup, "POST", url, data=group)

    async def update_group(self, group: DeviceGroup) -> DeviceGroup:
        """Update a group (PUT).

        Raises:
            BadParameterError: If the group has no deviceGroupId
        """
        if group.deviceGroupId is None:
            raise BadParameterError(
                "No group id provided in update_group(); did you mean to call create_group()?"
            )
        url = build_path(
            self.GROUP_ENDPOINT, account_id=group.accountId, group_id=group.deviceGroupId
        )
        return await self.http_client.request_model(DeviceGroup, "PUT", url, data=group)

    async def delete_group(self, group: DeviceGroup) -> None:
        """Delete a group.

        Raises:
            BadParameterError: If the group has no deviceGroupId
        """
        if group.deviceGroupId is None:
            raise BadParameterError("No groupId in group to delete, so nothing to do.")
        await self.delete_group_by_id(group.accountId, group.deviceGroupId)

    async def delete_group_by_id(self, account_id: str, group_id: str) -> None:
        url = build_path(self.GROUP_ENDPOINT, account_id=account_id, group_id=group_id)
        await self.http_client.request_void("DELETE", url)
