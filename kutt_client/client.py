"""Async client for the Kutt v2 links API."""

import logging
from typing import Optional, Union

import httpx

from .common.headers import attach_api_key_header
from .common.url_builder import LINKS_PATH, build_endpoint_url
from .common.validators import is_valid_api_key, is_valid_server_url
from .config import DEFAULT_SERVER, KuttSettings
from .exceptions import KuttApiError
from .models import CreateLinkRequest, ErrorResponse, Link


class KuttClient:
    """Client for creating shortened links on a Kutt server."""

    def __init__(
        self,
        api_key: str,
        server: Union[str, httpx.URL] = DEFAULT_SERVER,
        transport: Optional[httpx.AsyncClient] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize the client.

        The API key header is added to the transport's default headers unless
        the transport already carries one. Do not share one transport across
        clients with different keys: the first key attached wins.

        Args:
            api_key: API key sent in the x-api-key header
            server: Server base address, as a string or parsed httpx.URL
            transport: Optional httpx.AsyncClient (e.g., configured with a proxy).
                A default one is created, and owned by this client, if omitted.
            logger: Optional logger

        Raises:
            ValueError: If the API key is empty or the server is not an
                absolute http(s) URI
        """
        is_valid, error = is_valid_api_key(api_key)
        if not is_valid:
            raise ValueError(f"Invalid API key: {error}")

        if isinstance(server, httpx.URL):
            server = str(server)

        is_valid, error = is_valid_server_url(server)
        if not is_valid:
            raise ValueError(f"Invalid server: {error}")

        self._api_key = api_key
        self._server = server
        self.logger = logger or logging.getLogger(__name__)

        self._owns_transport = transport is None
        self.transport = transport if transport is not None else httpx.AsyncClient()

        attach_api_key_header(self.transport.headers, api_key, self.logger)

    @classmethod
    def from_settings(
        cls,
        settings: KuttSettings,
        transport: Optional[httpx.AsyncClient] = None,
        logger: Optional[logging.Logger] = None,
    ) -> "KuttClient":
        """Create a client from loaded settings."""
        return cls(
            api_key=settings.api_key,
            server=settings.server,
            transport=transport,
            logger=logger,
        )

    @property
    def api_key(self) -> str:
        """API key used to authorize requests."""
        return self._api_key

    @property
    def server(self) -> str:
        """Server the requests are sent to."""
        return self._server

    @property
    def links_url(self) -> str:
        return build_endpoint_url(self._server, LINKS_PATH)

    async def create_link(
        self,
        target: str,
        password: Optional[str] = None,
        custom_slug: Optional[str] = None,
        reuse: bool = False,
        domain: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> Link:
        """Create a shortened link.

        Args:
            target: URL to be shortened
            password: Optional password protecting the link
            custom_slug: Optional custom slug (sent as ``customurl``)
            reuse: Return the existing link for this target if there is one
            domain: Optional custom domain
            timeout: Optional request timeout in seconds, passed to the transport

        Returns:
            The created (or reused) link

        Raises:
            KuttApiError: If the server responds with a non-success status
            pydantic.ValidationError: If the response body does not match the
                expected link or error shape
            httpx.HTTPError: On transport failures
        """
        request = CreateLinkRequest(
            target=target,
            reuse=reuse,
            password=password,
            custom_url=custom_slug,
            domain=domain,
        )

        kwargs = {}
        if timeout is not None:
            kwargs["timeout"] = timeout

        self.logger.debug(f"POST {self.links_url} target={target} reuse={reuse}")

        response = await self.transport.post(
            self.links_url,
            content=request.to_json(),
            headers={"Content-Type": "application/json"},
            **kwargs,
        )
        body = response.text

        if response.is_success:
            link = Link.model_validate_json(body)
            self.logger.info(f"Created link: {link.link or link.address} -> {link.target}")
            return link

        error = ErrorResponse.model_validate_json(body)
        self.logger.warning(
            f"Create link rejected: status={response.status_code} error={error.error}"
        )
        raise KuttApiError(error.error, status_code=response.status_code)

    async def aclose(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            await self.transport.aclose()

    async def __aenter__(self) -> "KuttClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
