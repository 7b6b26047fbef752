"""Device tags API implementation.

Tags are created with POST (no id yet), updated with PUT (id present) and
deleted by id. Nothing is cached; every call is a round trip.
"""

from ..utils.http_client import HttpClient
from ..utils.url_utils import build_path
from .types.tag_types import DeviceTag


class TagsApi:
    """Device tags API client."""

    DEVICE_TAG_ENDPOINT = "/v1/accounts/{account_id}/devices/{device_id}/deviceTag"
    DEVICE_TAG_ID_ENDPOINT = "/v1/accounts/{account_id}/devices/{device_id}/deviceTag/{tag_id}"

    def __init__(self, http_client: HttpClient):
        self.http_client = http_client

    async def persist_tag(self, tag: DeviceTag, device_id: str, account_id: str) -> DeviceTag:
        """Create or update a device tag.

        Args:
            tag: The tag; POSTed when ``tag.id`` is None, PUT otherwise
            device_id: Device the tag belongs to
            account_id: Account the device belongs to

        Returns:
            The tag as stored by the server

        """
        url = build_path(self.DEVICE_TAG_ENDPOINT, account_id=account_id, device_id=device_id)
        method = "POST" if tag.id is None else "PUT"
        return await self.http_client.request_model(DeviceTag, method, url, data=tag)

    async def purge_tag(self, tag_id: str, device_id: str, account_id: str) -> str:
        """Delete a device tag.

        Returns:
            The id of the deleted tag

        """
        url = build_path(
            self.DEVICE_TAG_ID_ENDPOINT,
            account_id=account_id,
            device_id=device_id,
            tag_id=tag_id,
        )
        await self.http_client.request_void("DELETE", url)
        return tag_id
