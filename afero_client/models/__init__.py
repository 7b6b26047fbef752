"""Configuration and credential models."""

from .config import DEFAULT_API_BASE_URL, AferoClientConfig, encode_app_header
from .credential import OAuthCredential

__all__ = [
    "DEFAULT_API_BASE_URL",
    "AferoClientConfig",
    "OAuthCredential",
    "encode_app_header",
]
