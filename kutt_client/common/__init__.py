"""Common utilities for the Kutt client."""

from .validators import is_valid_api_key, is_valid_server_url
from .headers import API_KEY_HEADER, attach_api_key_header
from .url_builder import LINKS_PATH, build_endpoint_url
from .logging_config import setup_logging, get_logger

__all__ = [
    "is_valid_api_key",
    "is_valid_server_url",
    "API_KEY_HEADER",
    "attach_api_key_header",
    "LINKS_PATH",
    "build_endpoint_url",
    "setup_logging",
    "get_logger",
]
