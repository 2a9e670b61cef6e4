# ABOUTME: HTTP client abstraction for metadata provider API calls.
# ABOUTME: One GET per call, mapped onto the transport/status/protocol error taxonomy.

import logging
from typing import Any, Protocol, runtime_checkable

import httpx

from bookenrich.metadata.errors import ProtocolError, TransportError, UpstreamStatusError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP GET operations against metadata APIs."""

    def get(self, url: str) -> dict[str, Any]: ...


class EnrichHttpClient:
    """HTTP client for metadata API calls.

    Wraps httpx.Client with a bounded per-request timeout. Each call to get()
    issues exactly one request; there is no retry or rate limiting here.
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        client_kwargs: dict[str, Any] = {
            "headers": {"User-Agent": "bookenrich/0.1.0"},
            "timeout": timeout,
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.Client(**client_kwargs)

    def get(self, url: str) -> dict[str, Any]:
        """Send a single GET request and decode the JSON object it returns.

        Args:
            url: The URL to request, query string included.

        Returns:
            Parsed JSON response body.

        Raises:
            TransportError: The request failed before a response arrived, or
                the URL could not be built.
            UpstreamStatusError: The response status was not 200.
            ProtocolError: The body is not a JSON object.
        """
        try:
            response = self._client.get(url)
        # InvalidURL (e.g. a URL over httpx's length limit) is not an HTTPError
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(f"Request failed: {url}: {exc}") from exc

        if response.status_code != 200:
            raise UpstreamStatusError(response.status_code, url)

        try:
            body = response.json()
        except ValueError as exc:
            raise ProtocolError(f"Undecodable JSON from {url}: {exc}") from exc

        if not isinstance(body, dict):
            raise ProtocolError(f"Expected a JSON object from {url}, got {type(body).__name__}")
        return body

    def close(self) -> None:
        self._client.close()
