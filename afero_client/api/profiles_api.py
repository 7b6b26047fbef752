"""Device profiles API implementation.

Profile requests carry the client's locale and image scale so the server can
localize labels and pick icon sizes.
"""

from typing import List

from ..utils.http_client import HttpClient
from ..utils.url_utils import build_path
from .types.device_types import DeviceProfile


class ProfilesApi:
    """Device profiles API client."""

    PROFILES_ENDPOINT = "/v1/accounts/{account_id}/deviceProfiles"
    PROFILE_ENDPOINT = "/v1/accounts/{account_id}/deviceProfiles/{profile_id}"
    DEVICE_PROFILE_ENDPOINT = "/v1/accounts/{account_id}/devices/{device_id}/deviceProfile"
    PROFILE_VERSION_ENDPOINT = "/v1/devices/{association_id}/deviceProfiles/versions/{version}"

    def __init__(self, http_client: HttpClient):
        self.http_client = http_client

    @property
    def _scale_and_locale(self) -> dict:
        return dict(self.http_client.config.scale_and_locale)

    async def fetch_profiles(self, account_id: str) -> List[DeviceProfile]:
        """Fetch all profiles used by devices in an account."""
        url = build_path(self.PROFILES_ENDPOINT, account_id=account_id)
        return await self.http_client.request_model_list(
            DeviceProfile, "GET", url, data=self._scale_and_locale
        )

    async def fetch_profile(self, account_id: str, profile_id: str) -> DeviceProfile:
        """Fetch one profile by id."""
        url = build_path(self.PROFILE_ENDPOINT, account_id=account_id, profile_id=profile_id)
        return await self.http_client.request_model(
            DeviceProfile, "GET", url, data=self._scale_and_locale
        )

    async def fetch_profile_for_device(self, account_id: str, device_id: str) -> DeviceProfile:
        """Fetch the profile of a device."""
        url = build_path(self.DEVICE_PROFILE_ENDPOINT, account_id=account_id, device_id=device_id)
        return await self.http_client.request_model(
            DeviceProfile, "GET", url, data=self._scale_and_locale
        )

    async def fetch_profile_version(self, association_id: str, version: int) -> DeviceProfile:
        """Fetch a specific profile version for a device, addressed by association id."""
        url = build_path(
            self.PROFILE_VERSION_ENDPOINT,
            association_id=association_id,
            version=str(version),
        )
        return await self.http_client.request_model(
            DeviceProfile, "GET", url, data=self._scale_and_locale
        )
