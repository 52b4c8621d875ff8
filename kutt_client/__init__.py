"""Client library for the Kutt URL shortener API."""

from .client import KuttClient
from .config import DEFAULT_SERVER, KuttSettings, load_config
from .exceptions import KuttError, KuttApiError
from .models import CreateLinkRequest, ErrorResponse, Link

__all__ = [
    "KuttClient",
    "DEFAULT_SERVER",
    "KuttSettings",
    "load_config",
    "KuttError",
    "KuttApiError",
    "CreateLinkRequest",
    "ErrorResponse",
    "Link",
]
