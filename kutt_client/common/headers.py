"""Header utilities for the Kutt client."""

import logging
from typing import Optional

import httpx

API_KEY_HEADER = "x-api-key"


def attach_api_key_header(
    headers: httpx.Headers,
    api_key: str,
    logger: Optional[logging.Logger] = None,
) -> bool:
    """Add the API key header to a transport's default headers.

    The header is only added when it is not already present; an existing
    value is never overwritten. A transport shared between clients keeps the
    key of the first client that was built on it, so do not share one
    transport across clients with different keys.

    Args:
        headers: Default headers of the transport (mutated in place)
        api_key: API key to attach
        logger: Optional logger

    Returns:
        True if the header was added, False if one was already present
    """
    logger = logger or logging.getLogger(__name__)

    # httpx.Headers lookups are case-insensitive
    existing = headers.get(API_KEY_HEADER)
    if existing is not None:
        if existing != api_key:
            logger.warning(
                f"Transport already carries a different {API_KEY_HEADER} header; "
                "keeping the existing value"
            )
        return False

    headers[API_KEY_HEADER] = api_key
    return True
