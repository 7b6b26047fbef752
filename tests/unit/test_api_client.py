"""
Unit tests for ApiClient.
"""

import pytest

import afero_client.api as api_module
from afero_client.api import ApiClient
from afero_client.api.account_api import AccountApi
from afero_client.api.device_api import DeviceApi
from afero_client.api.device_groups_api import DeviceGroupsApi
from afero_client.api.profiles_api import ProfilesApi
from afero_client.api.rules_api import RulesApi
from afero_client.api.sharing_api import SharingApi
from afero_client.api.tags_api import TagsApi


class TestApiClient:
    """Test cases for ApiClient."""

    def test_api_client_initialization(self, mock_http_client):
        api_client = ApiClient(mock_http_client)

        assert api_client.http_client == mock_http_client
        assert isinstance(api_client.accounts, AccountApi)
        assert isinstance(api_client.devices, DeviceApi)
        assert isinstance(api_client.tags, TagsApi)
        assert isinstance(api_client.profiles, ProfilesApi)
        assert isinstance(api_client.rules, RulesApi)
        assert isinstance(api_client.device_groups, DeviceGroupsApi)
        assert isinstance(api_client.sharing, SharingApi)

    def test_api_client_shares_http_client(self, mock_http_client):
        api_client = ApiClient(mock_http_client)

        for api in (
            api_client.accounts,
            api_client.devices,
            api_client.tags,
            api_client.profiles,
            api_client.rules,
            api_client.device_groups,
            api_client.sharing,
        ):
            assert api.http_client is mock_http_client

    def test_lazy_module_attributes(self):
        assert api_module.DeviceApi is DeviceApi
        assert api_module.SharingApi is SharingApi

    def test_unknown_module_attribute(self):
        with pytest.raises(AttributeError):
            getattr(api_module, "NoSuchApi")
