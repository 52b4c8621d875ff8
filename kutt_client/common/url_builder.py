"""URL building utilities for the Kutt client."""

LINKS_PATH = "/api/v2/links"


def build_endpoint_url(server: str, path: str = LINKS_PATH) -> str:
    """Build a complete endpoint URL under the server base address.

    Args:
        server: Server base address (e.g., https://kutt.it or https://host/kutt/)
        path: Endpoint path (e.g., /api/v2/links)

    Returns:
        Complete endpoint URL
    """
    base = server.rstrip("/")
    endpoint = path.strip("/")

    return f"{base}/{endpoint}"
