"""
Unit tests for DeviceApi.
"""

import pytest

from afero_client.api.device_api import DeviceApi
from afero_client.api.types.device_types import DeviceBatchActionRequest, LocationSourceType
from afero_client.errors import AferoClientError, UnexpectedResultTypeError


@pytest.fixture
def device_api(http_client):
    return DeviceApi(http_client)


class TestAssociate:
    @pytest.mark.asyncio
    async def test_associate_device(self, device_api, server):
        server.add("POST", "/v1/accounts/a1/devices", 200, {"deviceId": "d1"})

        device = await device_api.associate_device("a1", "ASSOC-1")

        assert device == {"deviceId": "d1"}
        request = server.last_request
        assert server.json_body(request) == {"associationId": "ASSOC-1"}
        params = request.url.params
        assert params["expansions"] == "state,profile"
        assert params["locale"] == "en_US"
        assert params["imageSize"] == "2x"
        assert "verified" not in params

    @pytest.mark.asyncio
    async def test_associate_device_with_location_and_transfer(self, device_api, server):
        server.add("POST", "/v1/accounts/a1/devices", 200, {"deviceId": "d1"})

        await device_api.associate_device(
            "a1", "ASSOC-1", latitude=47.6, longitude=-122.3, ownership_transfer_verified=True
        )

        request = server.last_request
        assert server.json_body(request)["location"] == {
            "latitude": 47.6,
            "longitude": -122.3,
            "locationSourceType": "INITIAL_DEVICE_ASSOCIATE",
        }
        assert request.url.params["verified"] == "true"

    @pytest.mark.asyncio
    async def test_associate_device_conflict(self, device_api, server):
        server.add("POST", "/v1/accounts/a1/devices", 409, {"error": "already_associated"})

        with pytest.raises(AferoClientError) as exc_info:
            await device_api.associate_device("a1", "ASSOC-1")

        assert exc_info.value.status_code == 409
        assert exc_info.value.error_body == {"error": "already_associated"}


class TestDevices:
    @pytest.mark.asyncio
    async def test_fetch_devices_default_expansions(self, device_api, server):
        server.add("GET", "/v1/accounts/a1/devices", 200, [{"deviceId": "d1"}, {"deviceId": "d2"}])

        devices = await device_api.fetch_devices("a1")

        assert [d["deviceId"] for d in devices] == ["d1", "d2"]
        assert server.last_request.url.params["expansions"] == "state,tags,attributes,timezone"

    @pytest.mark.asyncio
    async def test_fetch_devices_rejects_object(self, device_api, server):
        server.add("GET", "/v1/accounts/a1/devices", 200, {"deviceId": "d1"})

        with pytest.raises(UnexpectedResultTypeError):
            await device_api.fetch_devices("a1")

    @pytest.mark.asyncio
    async def test_get_extended_device_info(self, device_api, server):
        server.add("GET", "/v1/accounts/a1/devices/d1", 200, {"deviceId": "d1", "extendedData": {}})

        device = await device_api.get_extended_device_info("a1", "d1")

        assert device["deviceId"] == "d1"
        assert server.last_request.url.params["expansions"] == "extendedData"

    @pytest.mark.asyncio
    async def test_remove_device(self, device_api, server):
        server.add("DELETE", "/v1/accounts/a1/devices/d1", 204)

        assert await device_api.remove_device("a1", "d1") is None
        assert server.count("DELETE", "/v1/accounts/a1/devices/d1") == 1

    @pytest.mark.asyncio
    async def test_set_friendly_name(self, device_api, server):
        server.add("PUT", "/v1/accounts/a1/devices/d1/friendlyName", 204)

        await device_api.set_friendly_name("a1", "d1", "Porch Light")

        assert server.json_body(server.last_request) == {"friendlyName": "Porch Light"}


class TestLocation:
    @pytest.mark.asyncio
    async def test_get_location(self, device_api, server):
        server.add(
            "GET",
            "/v1/accounts/a1/devices/d1/location",
            200,
            {"latitude": 1.5, "longitude": 2.5, "locationSourceType": "HUB_LOCATION_GPS"},
        )

        location = await device_api.get_location("a1", "d1")

        assert location.latitude == 1.5
        assert location.locationSourceType is LocationSourceType.HUB_LOCATION_GPS

    @pytest.mark.asyncio
    async def test_get_location_absent(self, device_api, server):
        server.add("GET", "/v1/accounts/a1/devices/d1/location", 204)

        assert await device_api.get_location("a1", "d1") is None

    @pytest.mark.asyncio
    async def test_set_location(self, device_api, server):
        server.add("PUT", "/v1/accounts/a1/devices/d1/location", 204)

        await device_api.set_location("a1", "d1", 47.6, -122.3, formatted_address_lines=["1 Main St"])

        assert server.json_body(server.last_request) == {
            "latitude": 47.6,
            "longitude": -122.3,
            "locationSourceType": "USER_DEFINED_LOCATION",
            "formattedAddressLines": ["1 Main St"],
        }


class TestBatchActions:
    @pytest.mark.asyncio
    async def test_post_batch_actions(self, device_api, server):
        server.add(
            "POST",
            "/v1/accounts/a1/devices/d1/requests",
            200,
            [
                {"status": "SUCCESS", "requestId": 1},
                {"status": "FAILURE", "requestId": 2},
                {"status": "SUCCESS"},
            ],
        )
        actions = [
            DeviceBatchActionRequest.attribute_write(1024, "01"),
            DeviceBatchActionRequest.attribute_read(1025),
            DeviceBatchActionRequest.notify_viewing(30),
        ]

        results = await device_api.post_batch_actions("a1", "d1", actions)

        assert server.json_body(server.last_request) == [
            {"type": "attribute_write", "attrId": 1024, "value": "01"},
            {"type": "attribute_read", "attrId": 1025},
            {"type": "notify_viewing", "seconds": 30.0},
        ]
        assert results.requests == actions
        assert results.success_count == 2
        assert results.failure_count == 1
        assert results.responses[1].succeeded is False
