"""
Unit tests for RulesApi.
"""

import pytest

from afero_client.api.rules_api import RulesApi
from afero_client.api.types.rules_types import (
    AccountAction,
    DeviceRule,
    Schedule,
    ScheduleTime,
)
from afero_client.errors import BadParameterError


@pytest.fixture
def rules_api(mock_http_client):
    return RulesApi(mock_http_client)


@pytest.fixture
def schedule():
    return Schedule(time=ScheduleTime(hour=7, minute=30), dayOfWeek=["MONDAY"])


class TestSchedules:
    """Schedule create/update routing."""

    @pytest.mark.asyncio
    async def test_create_or_update_posts_new_schedule(self, rules_api, mock_http_client, schedule):
        created = schedule.model_copy(update={"scheduleId": "s1"})
        mock_http_client.request_model.return_value = created

        result = await rules_api.create_or_update_schedule("a1", schedule)

        assert result is created
        mock_http_client.request_model.assert_called_once_with(
            Schedule, "POST", "/v1/accounts/a1/schedules", data=schedule
        )

    @pytest.mark.asyncio
    async def test_create_or_update_puts_existing_schedule(self, rules_api, mock_http_client, schedule):
        existing = schedule.model_copy(update={"scheduleId": "s1"})
        mock_http_client.request_model.return_value = existing

        await rules_api.create_or_update_schedule("a1", existing)

        mock_http_client.request_model.assert_called_once_with(
            Schedule, "PUT", "/v1/accounts/a1/schedules/s1", data=existing
        )

    @pytest.mark.asyncio
    async def test_create_schedule_rejects_id(self, rules_api, mock_http_client, schedule):
        with pytest.raises(BadParameterError, match="didn't you mean update"):
            await rules_api.create_schedule("a1", schedule.model_copy(update={"scheduleId": "s1"}))

        mock_http_client.request_model.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_schedule_requires_id(self, rules_api, mock_http_client, schedule):
        with pytest.raises(BadParameterError, match="didn't you mean create"):
            await rules_api.update_schedule("a1", schedule)

        mock_http_client.request_model.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_schedule(self, rules_api, mock_http_client):
        await rules_api.delete_schedule("a1", "s1")

        mock_http_client.request_void.assert_called_once_with("DELETE", "/v1/accounts/a1/schedules/s1")


class TestSchedulesOnTheWire:
    @pytest.mark.asyncio
    async def test_schedule_body(self, http_client, server, schedule):
        server.add(
            "POST",
            "/v1/accounts/a1/schedules",
            200,
            {"scheduleId": "s1", "time": {"hour": 7, "minute": 30, "timeZone": "UTC"}, "dayOfWeek": ["MONDAY"]},
        )

        created = await RulesApi(http_client).create_schedule("a1", schedule)

        assert created.scheduleId == "s1"
        assert server.json_body(server.last_request) == {
            "time": {"hour": 7, "minute": 30, "timeZone": "UTC"},
            "dayOfWeek": ["MONDAY"],
        }


class TestRules:
    """Rule routing and preconditions."""

    @pytest.mark.asyncio
    async def test_execute_rule(self, rules_api, mock_http_client):
        mock_http_client.request_model_list.return_value = [AccountAction(requestId=1, type="attribute_write")]

        actions = await rules_api.execute_rule("a1", "r1")

        assert actions[0].requestId == 1
        mock_http_client.request_model_list.assert_called_once_with(
            AccountAction, "POST", "/v1/accounts/a1/rules/r1/actions", data={"type": "execute_actions"}
        )

    @pytest.mark.asyncio
    async def test_fetch_rule_expands_schedule_and_scene(self, rules_api, mock_http_client):
        await rules_api.fetch_rule("a1", "r1")

        mock_http_client.request_model.assert_called_once_with(
            DeviceRule, "GET", "/v1/accounts/a1/rules/r1", expansions=["schedule", "scene"]
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "device_id, group_id, expected",
        [
            (None, None, "/v1/accounts/a1/rules"),
            ("d1", None, "/v1/accounts/a1/devices/d1/rules"),
            (None, "g1", "/v1/accounts/a1/deviceGroups/g1/rules"),
            ("d1", "g1", "/v1/accounts/a1/devices/d1/rules"),
        ],
    )
    async def test_fetch_rules_scope(self, rules_api, mock_http_client, device_id, group_id, expected):
        await rules_api.fetch_rules("a1", device_id=device_id, device_group_id=group_id)

        mock_http_client.request_model_list.assert_called_once_with(
            DeviceRule, "GET", expected, expansions=["schedule"]
        )

    @pytest.mark.asyncio
    async def test_create_or_update_rule_requires_account(self, rules_api, mock_http_client):
        with pytest.raises(BadParameterError, match="no accountId"):
            await rules_api.create_or_update_rule(DeviceRule(label="Night"))

        mock_http_client.request_model.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "rule, method, expected",
        [
            (DeviceRule(accountId="a1"), "POST", "/v1/accounts/a1/rules"),
            (DeviceRule(accountId="a1", ruleId="r1"), "PUT", "/v1/accounts/a1/rules/r1"),
            (DeviceRule(accountId="a1", deviceGroupId="g1"), "POST", "/v1/accounts/a1/deviceGroups/g1/rules"),
            (
                DeviceRule(accountId="a1", deviceGroupId="g1", ruleId="r1"),
                "PUT",
                "/v1/accounts/a1/deviceGroups/g1/rules/r1",
            ),
        ],
    )
    async def test_create_or_update_rule_routing(self, rules_api, mock_http_client, rule, method, expected):
        await rules_api.create_or_update_rule(rule)

        mock_http_client.request_model.assert_called_once_with(DeviceRule, method, expected, data=rule)

    @pytest.mark.asyncio
    async def test_delete_rule(self, rules_api, mock_http_client):
        await rules_api.delete_rule("a1", "r1")

        mock_http_client.request_void.assert_called_once_with("DELETE", "/v1/accounts/a1/rules/r1")


class TestDeviceRuleDefaults:
    def test_rule_without_enabled_is_disabled(self):
        rule = DeviceRule.model_validate({"accountId": "a1", "ruleId": "r1"})

        assert rule.enabled is False

    def test_new_rule_is_disabled(self):
        assert DeviceRule(accountId="a1").enabled is False
