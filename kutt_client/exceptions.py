"""
Error classes raised by the Kutt client.

Decoding failures are not wrapped here: a response body that does not match
the expected shape raises pydantic.ValidationError, and transport failures
raise httpx.HTTPError.
"""

from typing import Optional


class KuttError(Exception):
    """Base class for Kutt client errors."""


class KuttApiError(KuttError):
    """
    The server rejected a request.

    Attributes:
        message: Error message returned by the server, verbatim
        status_code: HTTP status code of the response
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        """
        Initialize API error.

        Args:
            message: Error message from the response body
            status_code: HTTP status code
        """
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)
