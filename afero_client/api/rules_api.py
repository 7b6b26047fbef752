"""Rules and schedules API implementation.

Provides typed interfaces for rule and schedule endpoints:
- Schedule CRUD (/v1/accounts/{accountId}/schedules)
- Rule CRUD and execution (/v1/accounts/{accountId}/rules)
- Group rules (/v1/accounts/{accountId}/deviceGroups/{groupId}/rules)

Create and update operations check for the presence (or absence) of an id
before any request is made.
"""

from typing import List, Optional

from ..errors import BadParameterError
from ..utils.http_client import HttpClient
from ..utils.url_utils import build_path
from .types.rules_types import AccountAction, DeviceRule, Schedule


class RulesApi:
    """Rules and schedules API client."""

    SCHEDULES_ENDPOINT = "/v1/accounts/{account_id}/schedules"
    SCHEDULE_ENDPOINT = "/v1/accounts/{account_id}/schedules/{schedule_id}"
    RULES_ENDPOINT = "/v1/accounts/{account_id}/rules"
    RULE_ENDPOINT = "/v1/accounts/{account_id}/rules/{rule_id}"
    RULE_ACTIONS_ENDPOINT = "/v1/accounts/{account_id}/rules/{rule_id}/actions"
    DEVICE_RULES_ENDPOINT = "/v1/accounts/{account_id}/devices/{device_id}/rules"
    GROUP_RULES_ENDPOINT = "/v1/accounts/{account_id}/deviceGroups/{group_id}/rules"
    GROUP_RULE_ENDPOINT = "/v1/accounts/{account_id}/deviceGroups/{group_id}/rules/{rule_id}"

    def __init__(self, http_client: HttpClient):
        """Initialize Rules API client.

        Args:
            http_client: HttpClient instance

        """
        self.http_client = http_client

    # Schedules

    async def delete_schedule(self, account_id: str, schedule_id: str) -> None:
        """Delete a schedule."""
        url = build_path(self.SCHEDULE_ENDPOINT, account_id=account_id, schedule_id=schedule_id)
        await self.http_client.request_void("DELETE", url)

    async def create_or_update_schedule(self, account_id: str, schedule: Schedule) -> Schedule:
        """Create the schedule if it has no id yet, otherwise update it."""
        if schedule.scheduleId is None:
            return await self.create_schedule(account_id, schedule)
        return await self.update_schedule(account_id, schedule)

    async def update_schedule(self, account_id: str, schedule: Schedule) -> Schedule:
        """Update an existing schedule (PUT).

        Raises:
            BadParameterError: If the schedule has no scheduleId

        """
        if schedule.scheduleId is None:
            raise BadParameterError("No scheduleId on schedule; didn't you mean create?")
        url = build_path(
            self.SCHEDULE_ENDPOINT, account_id=account_id, schedule_id=schedule.scheduleId
        )
        return await self.http_client.request_model(Schedule, "PUT", url, data=schedule)

    async def create_schedule(self, account_id: str, schedule: Schedule) -> Schedule:
        """Create a schedule (POST).

        Raises:
            BadParameterError: If the schedule already has a scheduleId

        """
        if schedule.scheduleId is not None:
            raise BadParameterError("ScheduleId present in schedule; didn't you mean update?")
        url = build_path(self.SCHEDULES_ENDPOINT, account_id=account_id)
        return await self.http_client.request_model(Schedule, "POST", url, data=schedule)

    # Rules

    async def execute_rule(self, account_id: str, rule_id: str) -> List[AccountAction]:
        """Run a rule's actions now.

        Returns:
            The device requests issued by the rule

        """
        url = build_path(self.RULE_ACTIONS_ENDPOINT, account_id=account_id, rule_id=rule_id)
        return await self.http_client.request_model_list(
            AccountAction, "POST", url, data={"type": "execute_actions"}
        )

    async def fetch_rule(self, account_id: str, rule_id: str) -> DeviceRule:
        """Fetch one rule with its schedule and scene expanded."""
        url = build_path(self.RULE_ENDPOINT, account_id=account_id, rule_id=rule_id)
        return await self.http_client.request_model(
            DeviceRule, "GET", url, expansions=["schedule", "scene"]
        )

    async def fetch_rules(
        self,
        account_id: str,
        device_id: Optional[str] = None,
        device_group_id: Optional[str] = None,
    ) -> List[DeviceRule]:
        """Fetch rules of an account, a device, or a device group.

        When both device_id and device_group_id are given, device_id wins.
        """
        if device_id is not None:
            url = build_path(self.DEVICE_RULES_ENDPOINT, account_id=account_id, device_id=device_id)
        elif device_group_id is not None:
            url = build_path(
                self.GROUP_RULES_ENDPOINT, account_id=account_id, group_id=device_group_id
            )
        else:
            url = build_path(self.RULES_ENDPOINT, account_id=account_id)
        return await self.http_client.request_model_list(
            DeviceRule, "GET", url, expansions=["schedule"]
        )

    async def create_or_update_rule(self, rule: DeviceRule) -> DeviceRule:
        """Create the rule if it has no id yet, otherwise update it.

        Rules with a deviceGroupId are stored as group rules.

        Raises:
            BadParameterError: If the rule has no accountId

        """
        if rule.accountId is None:
            raise BadParameterError("Bad or missing parameters: no accountId in rule.")

        if rule.deviceGroupId is not None:
            if rule.ruleId is not None:
                url = build_path(
                    self.GROUP_RULE_ENDPOINT,
                    account_id=rule.accountId,
                    group_id=rule.deviceGroupId,
                    rule_id=rule.ruleId,
                )
                return await self.http_client.request_model(DeviceRule, "PUT", url, data=rule)
            url = build_path(
                self.GROUP_RULES_ENDPOINT, account_id=rule.accountId, group_id=rule.deviceGroupId
            )
            return await self.http_client.request_model(DeviceRule, "POST", url, data=rule)

        if rule.ruleId is not None:
            url = build_path(self.RULE_ENDPOINT, account_id=rule.accountId, rule_id=rule.ruleId)
            return await self.http_client.request_model(DeviceRule, "PUT", url, data=rule)

        url = build_path(self.RULES_ENDPOINT, account_id=rule.accountId)
        return await self.http_client.request_model(DeviceRule, "POST", url, data=rule)

    async def delete_rule(self, account_id: str, rule_id: str) -> None:
        """Delete a rule."""
        url = build_path(self.RULE_ENDPOINT, account_id=account_id, rule_id=rule_id)
        await self.http_client.request_void("DELETE", url)
