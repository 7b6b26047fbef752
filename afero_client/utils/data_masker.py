"""
Data masker utility for keeping credentials out of logs.

Request and response bodies of the Afero API carry passwords, OAuth tokens
and push tokens; these are replaced before anything is written to a log.
"""

from typing import Any, Dict, Mapping, Optional, Set


class DataMasker:
    """Static class for masking sensitive data."""

    MASKED_VALUE = "***MASKED***"

    # Normalized (lowercase, no separators) field names treated as sensitive
    _sensitive_fields: Set[str] = {
        "password",
        "secret",
        "token",
        "authorization",
        "cookie",
        "accesstoken",
        "refreshtoken",
        "clientsecret",
        "pushid",
    }

    # Headers masked regardless of the field list
    _sensitive_headers: Set[str] = {"authorization", "cookie", "set-cookie"}

    @classmethod
    def _normalize(cls, key: str) -> str:
        return key.lower().replace("_", "").replace("-", "")

    @classmethod
    def is_sensitive_field(cls, key: str) -> bool:
        """
        Check if a field name indicates sensitive data.

        Args:
            key: Field name to check

        Returns:
            True if field is sensitive, False otherwise
        """
        normalized_key = cls._normalize(key)
        if normalized_key in cls._sensitive_fields:
            return True
        return any(field in normalized_key for field in cls._sensitive_fields)

    @classmethod
    def mask_sensitive_data(cls, data: Any) -> Any:
        """
        Mask sensitive data in objects, arrays, or primitives.

        Returns a masked copy without modifying the original.

        Args:
            data: Data to mask (dict, list, or primitive)

        Returns:
            Masked copy of the data
        """
        if isinstance(data, list):
            return [cls.mask_sensitive_data(item) for item in data]

        if not isinstance(data, dict):
            return data

        masked: Dict[str, Any] = {}
        for key, value in data.items():
            if isinstance(key, str) and cls.is_sensitive_field(key):
                masked[key] = cls.MASKED_VALUE
            else:
                masked[key] = cls.mask_sensitive_data(value)
        return masked

    @classmethod
    def mask_headers(cls, headers: Optional[Mapping[str, str]]) -> Dict[str, str]:
        """Return a copy of headers with credentials masked."""
        if not headers:
            return {}
        return {
            key: cls.MASKED_VALUE if key.lower() in cls._sensitive_headers else value
            for key, value in headers.items()
        }

    @classmethod
    def mask_value(cls, value: str, show_first: int = 0, show_last: int = 0) -> str:
        """
        Mask a single string, optionally keeping a few characters at either end.

        Args:
            value: String value to mask
            show_first: Number of characters to show at the start
            show_last: Number of characters to show at the end

        Returns:
            Masked string value
        """
        if not value or len(value) <= show_first + show_last:
            return cls.MASKED_VALUE

        first = value[:show_first] if show_first > 0 else ""
        last = value[-show_last:] if show_last > 0 else ""
        masked_length = max(8, len(value) - show_first - show_last)
        return f"{first}{'*' * masked_length}{last}"
