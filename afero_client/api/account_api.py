"""Account API implementation.

Provides typed interfaces for user and account endpoints:
- Account info (GET /v1/users/me)
- Password reset and update
- Account creation and description
- Mobile device registration and realtime channel (conclave) access
- Account and device activity history
"""

import logging
import time
from typing import Any, Dict, List, Optional

from ..errors import BadParameterError, is_forbidden
from ..models.config import encode_app_header
from ..utils.http_client import HttpClient
from ..utils.url_utils import build_path
from .types.account_types import (
    ConclaveAccess,
    CreateAccountRequest,
    HistoryActivity,
    MobileDeviceInfo,
    User,
)

logger = logging.getLogger(__name__)

DEFAULT_ACTIVITY_LIMIT = 40


class AccountApi:
    """Account API client for user, credential and mobile device endpoints."""

    ACCOUNT_INFO_ENDPOINT = "/v1/users/me"
    PASSWORD_RESET_ENDPOINT = "/v1/credentials/{credential_id}/passwordReset"
    SHORT_CODE_PASSWORD_RESET_ENDPOINT = "/v1/shortvalues/{short_code}/passwordReset"
    UPDATE_PASSWORD_ENDPOINT = "/v1/accounts/{account_id}/credentials/{credential_id}/password"
    ACCOUNTS_ENDPOINT = "/v1/accounts"
    ACCOUNT_DESCRIPTION_ENDPOINT = "/v1/accounts/{account_id}/description"
    MOBILE_DEVICES_ENDPOINT = "/v1/users/{user_id}/mobileDevices"
    MOBILE_DEVICE_ENDPOINT = "/v1/users/{user_id}/mobileDevices/{mobile_device_id}"
    CONCLAVE_ACCESS_ENDPOINT = "/v1/accounts/{account_id}/mobileDevices/{mobile_device_id}/conclaveAccess"
    ACCOUNT_ACTIVITY_ENDPOINT = "/v1/accounts/{account_id}/activity"
    DEVICE_ACTIVITY_ENDPOINT = "/v1/accounts/{account_id}/devices/{device_id}/activity"

    def __init__(self, http_client: HttpClient):
        """Initialize Account API client.

        Args:
            http_client: HttpClient instance

        """
        self.http_client = http_client

    def _app_headers(self, app_id: Optional[str], platform: Optional[str]) -> Dict[str, str]:
        """Build the x-afero-app header from explicit values or the client config."""
        config = self.http_client.config
        app_id = app_id or config.app_id
        if not app_id:
            raise BadParameterError("An appId is required for this request.")
        return {"x-afero-app": encode_app_header(app_id, platform or config.platform)}

    async def fetch_account_info(self) -> User:
        """Fetch the signed-in user, including account access records.

        Returns:
            User for the current credential

        Raises:
            AferoClientError: If request fails
            UnexpectedResultTypeError: If the response does not decode to a User

        """
        return await self.http_client.request_model(User, "GET", self.ACCOUNT_INFO_ENDPOINT)

    async def reset_password(self, credential_id: str) -> None:
        """Request a password reset email for credential_id (an email address).

        Raises:
            EncodingFailureError: If credential_id cannot be encoded into the path

        """
        url = build_path(self.PASSWORD_RESET_ENDPOINT, credential_id=credential_id)
        await self.http_client.request_void("POST", url)

    async def send_password_recovery_email(
        self,
        credential_id: str,
        app_id: Optional[str] = None,
        platform: Optional[str] = None,
    ) -> None:
        """Send a password recovery email carrying a short code for the given app.

        Args:
            credential_id: The email address associated with the account
            app_id: App identifier; defaults to the configured app id
            platform: Platform name; defaults to the configured platform

        """
        url = build_path(self.PASSWORD_RESET_ENDPOINT, credential_id=credential_id)
        await self.http_client.request_void(
            "POST", url, headers=self._app_headers(app_id, platform)
        )

    async def update_password_with_short_code(
        self,
        password: str,
        short_code: str,
        app_id: Optional[str] = None,
        platform: Optional[str] = None,
    ) -> None:
        """Set a new password using the short code from a recovery email."""
        url = build_path(self.SHORT_CODE_PASSWORD_RESET_ENDPOINT, short_code=short_code)
        await self.http_client.request_void(
            "POST",
            url,
            data={"password": password},
            headers=self._app_headers(app_id, platform),
        )

    async def update_password(self, password: str, credential_id: str, account_id: str) -> None:
        """Change the password of a signed-in user's credential."""
        url = build_path(
            self.UPDATE_PASSWORD_ENDPOINT, account_id=account_id, credential_id=credential_id
        )
        await self.http_client.request_void("PUT", url, data={"password": password})

    async def create_account(
        self,
        credential_id: str,
        password: str,
        first_name: str,
        last_name: str,
        credential_type: str = "email",
        verified: bool = False,
        account_type: str = "CUSTOMER",
        account_description: str = "Primary Account",
    ) -> Any:
        """Create an account, its first user and credential.

        Returns:
            The decoded JSON response

        """
        body = CreateAccountRequest.build(
            credential_id,
            password,
            first_name,
            last_name,
            account_type=account_type,
            account_description=account_description,
            credential_type=credential_type,
            verified=verified,
        )
        return await self.http_client.request("POST", self.ACCOUNTS_ENDPOINT, data=body)

    async def set_account_description(self, account_id: str, description: str) -> None:
        """Rename an account."""
        url = build_path(self.ACCOUNT_DESCRIPTION_ENDPOINT, account_id=account_id)
        await self.http_client.request_void("PUT", url, data={"description": description})

    async def update_device_info(
        self,
        user_id: str,
        mobile_device_id: str,
        push_id: Optional[str] = None,
        extended_data: Optional[Dict[str, Any]] = None,
        platform: Optional[str] = None,
    ) -> None:
        """Register (or re-register) this mobile device for the user.

        Args:
            user_id: User ID
            mobile_device_id: Stable identifier of the mobile device
            push_id: Push notification token, if any
            extended_data: App and OS details
            platform: Platform name; defaults to the configured platform

        """
        url = build_path(self.MOBILE_DEVICES_ENDPOINT, user_id=user_id)
        body = MobileDeviceInfo(
            platform=platform or self.http_client.config.platform,
            mobileDeviceId=mobile_device_id,
            extendedData=extended_data or {},
            pushId=push_id,
        )
        await self.http_client.request_void("POST", url, data=body)

    async def disassociate_mobile_device_data(
        self,
        user_id: str,
        mobile_device_id: str,
        attempt_oauth_refresh: bool = False,
    ) -> None:
        """Remove this mobile device's registration.

        Typically called while signing out, so no OAuth refresh is attempted by
        default.
        """
        url = build_path(
            self.MOBILE_DEVICE_ENDPOINT, user_id=user_id, mobile_device_id=mobile_device_id
        )
        await self.http_client.request_void(
            "DELETE", url, attempt_oauth_refresh=attempt_oauth_refresh
        )

    async def auth_conclave(
        self, account_id: str, user_id: str, mobile_device_id: str
    ) -> ConclaveAccess:
        """Obtain a realtime channel (conclave) token for this mobile device.

        Registers the mobile device first. A 403 from either call signs the
        session out before the error is raised.

        Returns:
            ConclaveAccess with hosts and tokens

        """
        url = build_path(
            self.CONCLAVE_ACCESS_ENDPOINT,
            account_id=account_id,
            mobile_device_id=mobile_device_id,
        )
        try:
            await self.update_device_info(user_id, mobile_device_id)
            return await self.http_client.request_model(ConclaveAccess, "POST", url, data={})
        except Exception as error:
            logger.warning("Error obtaining conclave access token: %s", error)
            if is_forbidden(error):
                logger.info("Access denied by conclave; signing out")
                await self.http_client.session.sign_out(error)
            raise

    async def fetch_activity(
        self,
        account_id: str,
        device_id: Optional[str] = None,
        end_timestamp: Optional[int] = None,
        limit: int = DEFAULT_ACTIVITY_LIMIT,
        history_filter: Optional[str] = None,
    ) -> List[HistoryActivity]:
        """Fetch activity history for an account, or for one of its devices.

        Args:
            account_id: Account ID
            device_id: Restrict history to this device
            end_timestamp: Newest entry to return (epoch millis); defaults to now
            limit: Maximum number of entries
            history_filter: Server-side history filter

        """
        if device_id is not None:
            url = build_path(
                self.DEVICE_ACTIVITY_ENDPOINT, account_id=account_id, device_id=device_id
            )
        else:
            url = build_path(self.ACCOUNT_ACTIVITY_ENDPOINT, account_id=account_id)

        if end_timestamp is None:
            end_timestamp = int(time.time() * 1000)

        params: Dict[str, Any] = {"endTimestamp": end_timestamp, "limit": limit}
        if history_filter is not None:
            params["filter"] = history_filter

        return await self.http_client.request_model_list(HistoryActivity, "GET", url, data=params)
