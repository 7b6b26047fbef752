"""Centralized API layer with typed interfaces.

Provides typed interfaces for all Afero REST API calls, organized by domain.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..utils.http_client import HttpClient


class ApiClient:
    """Centralized API client for the Afero REST API.

    Wraps HttpClient and provides typed interfaces organized by domain.
    """

    def __init__(self, http_client: HttpClient):
        """Initialize API client.

        Args:
            http_client: HttpClient instance

        """
        from .account_api import AccountApi
        from .device_api import DeviceApi
        from .device_groups_api import DeviceGroupsApi
        from .profiles_api import ProfilesApi
        from .rules_api import RulesApi
        from .sharing_api import SharingApi
        from .tags_api import TagsApi

        self.http_client = http_client
        self.accounts = AccountApi(http_client)
        self.devices = DeviceApi(http_client)
        self.tags = TagsApi(http_client)
        self.profiles = ProfilesApi(http_client)
        self.rules = RulesApi(http_client)
        self.device_groups = DeviceGroupsApi(http_client)
        self.sharing = SharingApi(http_client)


_API_MODULES = {
    "AccountApi": "account_api",
    "DeviceApi": "device_api",
    "DeviceGroupsApi": "device_groups_api",
    "ProfilesApi": "profiles_api",
    "RulesApi": "rules_api",
    "SharingApi": "sharing_api",
    "TagsApi": "tags_api",
}


def __getattr__(name: str):
    """Lazy import of API classes to avoid circular import with HttpClient."""
    module_name = _API_MODULES.get(name)
    if module_name is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    from importlib import import_module

    return getattr(import_module(f".{module_name}", __name__), name)


__all__ = [
    "ApiClient",
    "AccountApi",
    "DeviceApi",
    "DeviceGroupsApi",
    "ProfilesApi",
    "RulesApi",
    "SharingApi",
    "TagsApi",
]
