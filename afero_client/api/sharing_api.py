"""Account sharing API implementation.

Provides typed interfaces for account access and invitations:
- User summary (GET /v1/accounts/{accountId}/accountUserSummary)
- Account access listing and revocation (/v1/accounts/{accountId}/userAccountAccess)
- Invitations (/v1/accounts/{accountId}/invitations)
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from ..errors import UnexpectedResultTypeError
from ..utils.http_client import HttpClient
from ..utils.json_coding import decode_model
from ..utils.url_utils import build_path
from .types.account_types import User
from .types.sharing_types import AccountUserSummary


def _millis(value: Optional[datetime]) -> int:
    if value is None:
        return 0
    return int(value.timestamp() * 1000)


class SharingApi:
    """Account sharing API client."""

    USER_SUMMARY_ENDPOINT = "/v1/accounts/{account_id}/accountUserSummary"
    ACCOUNT_ACCESS_ENDPOINT = "/v1/accounts/{account_id}/userAccountAccess"
    USER_ACCOUNT_ACCESS_ENDPOINT = "/v1/accounts/{account_id}/userAccountAccess/{user_id}"
    INVITATIONS_ENDPOINT = "/v1/accounts/{account_id}/invitations"
    INVITATION_ENDPOINT = "/v1/accounts/{account_id}/invitations/{invitation_id}"

    def __init__(self, http_client: HttpClient):
        """Initialize Sharing API client.

        Args:
            http_client: HttpClient instance

        """
        self.http_client = http_client

    async def fetch_account_user_summary(self, account_id: str) -> AccountUserSummary:
        """Fetch the users with access to an account and outstanding invitations.

        Raises:
            UnexpectedResultTypeError: If the response lacks either list or does not decode

        """
        url = build_path(self.USER_SUMMARY_ENDPOINT, account_id=account_id)
        body = await self.http_client.request("GET", url)
        if (
            not isinstance(body, dict)
            or not isinstance(body.get("users"), list)
            or not isinstance(body.get("invitations"), list)
        ):
            raise UnexpectedResultTypeError("Unable to decode AccountUserSummary.")
        return decode_model(AccountUserSummary, body)

    async def fetch_account_access(self, account_id: str) -> List[User]:
        """Fetch the users with access to an account."""
        url = build_path(self.ACCOUNT_ACCESS_ENDPOINT, account_id=account_id)
        return await self.http_client.request_model_list(User, "GET", url)

    async def revoke_account_access(self, account_id: str, user_id: str) -> None:
        """Remove a user's access to an account."""
        url = build_path(self.USER_ACCOUNT_ACCESS_ENDPOINT, account_id=account_id, user_id=user_id)
        await self.http_client.request_void("DELETE", url)

    async def send_account_access_invitation(
        self,
        account_id: str,
        user_id: str,
        email: str,
        message: Optional[str] = None,
        locale: Optional[str] = None,
        start_access: Optional[datetime] = None,
        end_access: Optional[datetime] = None,
        can_write: bool = False,
        owner: bool = False,
    ) -> None:
        """Invite someone by email to share an account.

        Args:
            account_id: Account to share
            user_id: User sending the invitation
            email: Invitee email address
            message: Custom message included in the invitation
            locale: Invitee locale
            start_access: Start of access; unbounded when omitted
            end_access: End of access; unbounded when omitted
            can_write: Grant write access
            owner: Grant ownership

        """
        body: Dict[str, Any] = {
            "targetEmail": email,
            "targetLocale": locale or "",
            "sourceAccountId": account_id,
            "sourceUserId": user_id,
            "startAccessTimestamp": _millis(start_access),
            "endAccessTimestamp": _millis(end_access),
            "accountPrivilegesDto": {
                "canWrite": can_write,
                "owner": owner,
            },
        }
        if message is not None:
            body["customMessage"] = message

        url = build_path(self.INVITATIONS_ENDPOINT, account_id=account_id)
        await self.http_client.request_void("POST", url, data=body)

    async def revoke_account_access_invitation(self, account_id: str, invitation_id: str) -> None:
        """Withdraw an outstanding invitation."""
        url = build_path(
            self.INVITATION_ENDPOINT, account_id=account_id, invitation_id=invitation_id
        )
        await self.http_client.request_void("DELETE", url)
