"""Utility modules for the Afero client SDK."""

from .config_loader import load_config
from .data_masker import DataMasker
from .http_client import HttpClient
from .internal_http_client import InternalHttpClient
from .retrying_http_client import RetryingHttpClient
from .url_utils import build_path, encode_path_component, with_expansions

__all__ = [
    "load_config",
    "DataMasker",
    "HttpClient",
    "InternalHttpClient",
    "RetryingHttpClient",
    "build_path",
    "encode_path_component",
    "with_expansions",
]
