"""
Configuration loader utility.

Automatically loads environment variables with sensible defaults.
"""

import os

from dotenv import load_dotenv

from ..errors import ConfigurationError
from ..models.config import DEFAULT_API_BASE_URL, AferoClientConfig


def load_config(dotenv_path: str | None = None) -> AferoClientConfig:
    """
    Load configuration from environment variables with defaults.

    Required environment variables:
    - AFERO_OAUTH_CLIENT_ID
    - AFERO_OAUTH_CLIENT_SECRET

    Optional environment variables:
    - AFERO_API_BASE_URL (default: https://api.afero.io)
    - AFERO_APP_ID / AFERO_PLATFORM (x-afero-app header)
    - AFERO_LOG_LEVEL (debug, info, warn, error)
    - AFERO_TIMEOUT (seconds, default: 30)
    - AFERO_CREDENTIAL_STORE_PATH / AFERO_ENCRYPTION_KEY (encrypted credential file)
    - AFERO_LOCALE / AFERO_IMAGE_SIZE

    Args:
        dotenv_path: Optional .env file to load; by default .env is searched
            from the working directory upwards. Existing variables win.

    Returns:
        AferoClientConfig instance

    Raises:
        ConfigurationError: If required environment variables are missing or invalid
    """
    load_dotenv(dotenv_path)

    api_base_url = os.environ.get("AFERO_API_BASE_URL") or DEFAULT_API_BASE_URL

    client_id = os.environ.get("AFERO_OAUTH_CLIENT_ID") or ""
    if not client_id:
        raise ConfigurationError("AFERO_OAUTH_CLIENT_ID environment variable is required")

    client_secret = os.environ.get("AFERO_OAUTH_CLIENT_SECRET") or ""
    if not client_secret:
        raise ConfigurationError("AFERO_OAUTH_CLIENT_SECRET environment variable is required")

    log_level = os.environ.get("AFERO_LOG_LEVEL", "info").lower()
    if log_level not in ["debug", "info", "warn", "error"]:
        log_level = "info"

    timeout_raw = os.environ.get("AFERO_TIMEOUT")
    timeout = 30.0
    if timeout_raw:
        try:
            timeout = float(timeout_raw)
        except ValueError as e:
            raise ConfigurationError(f"AFERO_TIMEOUT must be a number, got {timeout_raw!r}") from e
        if timeout <= 0:
            raise ConfigurationError("AFERO_TIMEOUT must be positive")

    credential_store_path = os.environ.get("AFERO_CREDENTIAL_STORE_PATH") or None
    encryption_key = os.environ.get("AFERO_ENCRYPTION_KEY") or None
    if credential_store_path and not encryption_key:
        raise ConfigurationError(
            "AFERO_ENCRYPTION_KEY is required when AFERO_CREDENTIAL_STORE_PATH is set"
        )

    return AferoClientConfig(
        api_base_url=api_base_url,
        oauth_client_id=client_id,
        oauth_client_secret=client_secret,
        app_id=os.environ.get("AFERO_APP_ID") or None,
        platform=os.environ.get("AFERO_PLATFORM") or "IOS",
        log_level=log_level,
        timeout=timeout,
        credential_store_path=credential_store_path,
        encryption_key=encryption_key,
        locale=os.environ.get("AFERO_LOCALE") or "en_US",
        image_size=os.environ.get("AFERO_IMAGE_SIZE") or "2x",
    )
