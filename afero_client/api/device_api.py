"""Device API implementation.

Provides typed interfaces for device endpoints:
- Associate device (POST /v1/accounts/{accountId}/devices)
- List devices and fetch extended device info
- Remove device, set friendly name, get/set location
- Post batch attribute requests (POST .../devices/{deviceId}/requests)
"""

from typing import Any, Dict, List, Optional, Sequence

from ..utils.http_client import HttpClient
from ..utils.url_utils import build_path
from .types.device_types import (
    DeviceBatchActionRequest,
    DeviceBatchActionResponse,
    DeviceBatchActionResults,
    LocationModel,
    LocationSourceType,
)

DEFAULT_DEVICE_EXPANSIONS = ("state", "tags", "attributes", "timezone")


class DeviceApi:
    """Device API client for device endpoints."""

    DEVICES_ENDPOINT = "/v1/accounts/{account_id}/devices"
    DEVICE_ENDPOINT = "/v1/accounts/{account_id}/devices/{device_id}"
    FRIENDLY_NAME_ENDPOINT = "/v1/accounts/{account_id}/devices/{device_id}/friendlyName"
    LOCATION_ENDPOINT = "/v1/accounts/{account_id}/devices/{device_id}/location"
    REQUESTS_ENDPOINT = "/v1/accounts/{account_id}/devices/{device_id}/requests"

    def __init__(self, http_client: HttpClient):
        """Initialize Device API client.

        Args:
            http_client: HttpClient instance

        """
        self.http_client = http_client

    async def associate_device(
        self,
        account_id: str,
        association_id: str,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        ownership_transfer_verified: bool = False,
    ) -> Dict[str, Any]:
        """Associate a device with an account.

        A device can only be associated with one account at a time.

        Args:
            account_id: Account to associate the device with
            association_id: Serial number of the device (from label or QR code)
            latitude: Current latitude of the device, if known
            longitude: Current longitude of the device, if known
            ownership_transfer_verified: The user confirmed that ownership of a
                device associated elsewhere should transfer

        Returns:
            The associated device record (with state and profile expanded)

        """
        body: Dict[str, Any] = {"associationId": association_id}
        if latitude is not None and longitude is not None:
            body["location"] = {
                "latitude": latitude,
                "longitude": longitude,
                "locationSourceType": LocationSourceType.INITIAL_DEVICE_ASSOCIATE.value,
            }

        additional_params = dict(self.http_client.config.scale_and_locale)
        if ownership_transfer_verified:
            additional_params["verified"] = "true"

        url = build_path(self.DEVICES_ENDPOINT, account_id=account_id)
        return await self.http_client.request_dict(
            "POST",
            url,
            data=body,
            expansions=["state", "profile"],
            additional_params=additional_params,
        )

    async def fetch_devices(
        self,
        account_id: str,
        expansions: Sequence[str] = DEFAULT_DEVICE_EXPANSIONS,
    ) -> List[Dict[str, Any]]:
        """List the devices of an account.

        Args:
            account_id: Account ID
            expansions: Device fields to expand (state, tags, attributes, ...)

        """
        url = build_path(self.DEVICES_ENDPOINT, account_id=account_id)
        return await self.http_client.request_dict_list("GET", url, expansions=list(expansions))

    async def get_extended_device_info(self, account_id: str, device_id: str) -> Dict[str, Any]:
        """Fetch a device with its extendedData expanded."""
        url = build_path(self.DEVICE_ENDPOINT, account_id=account_id, device_id=device_id)
        return await self.http_client.request_dict("GET", url, expansions=["extendedData"])

    async def remove_device(self, account_id: str, device_id: str) -> None:
        """Disassociate a device from an account."""
        url = build_path(self.DEVICE_ENDPOINT, account_id=account_id, device_id=device_id)
        await self.http_client.request_void("DELETE", url)

    async def set_friendly_name(self, account_id: str, device_id: str, name: str) -> None:
        """Set the display name of a device."""
        url = build_path(self.FRIENDLY_NAME_ENDPOINT, account_id=account_id, device_id=device_id)
        await self.http_client.request_void("PUT", url, data={"friendlyName": name})

    async def get_location(self, account_id: str, device_id: str) -> Optional[LocationModel]:
        """Get the last known location of a device; None when it has none."""
        url = build_path(self.LOCATION_ENDPOINT, account_id=account_id, device_id=device_id)
        return await self.http_client.request_optional_model(LocationModel, "GET", url)

    async def set_location(
        self,
        account_id: str,
        device_id: str,
        latitude: float,
        longitude: float,
        location_source_type: LocationSourceType = LocationSourceType.USER_DEFINED_LOCATION,
        formatted_address_lines: Optional[List[str]] = None,
    ) -> None:
        """Set the location of a device."""
        body = LocationModel(
            latitude=latitude,
            longitude=longitude,
            locationSourceType=location_source_type,
            formattedAddressLines=formatted_address_lines,
        )
        url = build_path(self.LOCATION_ENDPOINT, account_id=account_id, device_id=device_id)
        await self.http_client.request_void("PUT", url, data=body)

    async def post_batch_actions(
        self,
        account_id: str,
        device_id: str,
        actions: Sequence[DeviceBatchActionRequest],
    ) -> DeviceBatchActionResults:
        """Post a batch of attribute reads/writes to a device.

        Returns:
            The requests paired with the per-request responses

        """
        url = build_path(self.REQUESTS_ENDPOINT, account_id=account_id, device_id=device_id)
        body = [action.model_dump(exclude_none=True, mode="json") for action in actions]
        responses = await self.http_client.request_model_list(
            DeviceBatchActionResponse, "POST", url, data=body
        )
        return DeviceBatchActionResults(requests=list(actions), responses=responses)
