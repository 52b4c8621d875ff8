"""Validation utilities for client construction arguments."""

import re
from urllib.parse import urlparse
from typing import Tuple


def is_valid_api_key(api_key: str) -> Tuple[bool, str]:
    """Validate an API key.

    Only presence is checked; the server decides whether the key is accepted.

    Args:
        api_key: The API key to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if api_key is None:
        return False, "API key is required"

    if not isinstance(api_key, str):
        return False, "API key must be a string"

    if not api_key.strip():
        return False, "API key must not be empty"

    return True, ""


def is_valid_server_url(server: str) -> Tuple[bool, str]:
    """Validate a server base address.

    Args:
        server: The server address (e.g., https://kutt.it)

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not server or not isinstance(server, str):
        return False, "Server address is required"

    try:
        result = urlparse(server)

        # Relative references have no scheme
        if not result.scheme:
            return False, "Server address must be an absolute URI"

        if result.scheme not in ["http", "https"]:
            return False, "Server address must use http or https protocol"

        if not result.netloc or not result.hostname:
            return False, "Server address must have a valid host"

        # urlparse keeps spaces and control characters in the host
        if not re.match(r'^[a-zA-Z0-9._:-]+$', result.hostname):
            return False, "Server address host contains invalid characters"

        if any(ch.isspace() or not ch.isprintable() for ch in server):
            return False, "Server address must not contain whitespace or control characters"

        # The endpoint path is appended to the address
        if result.query or result.fragment or "?" in server or "#" in server:
            return False, "Server address must not have a query or fragment"

        # Accessing the port validates it (raises ValueError when out of range)
        result.port

        return True, ""

    except ValueError as e:
        return False, f"Invalid server address: {str(e)}"
