# ABOUTME: Unit tests for the HTTP client abstraction.
# ABOUTME: Tests the HttpClient protocol, EnrichHttpClient, and error mapping.

import httpx
import pytest

from bookenrich.metadata.errors import (
    MetadataFetchError,
    ProtocolError,
    TransportError,
    UpstreamStatusError,
)
from bookenrich.metadata.http import EnrichHttpClient, HttpClient


class FakeTransport(httpx.BaseTransport):
    """Fake transport for httpx that returns canned responses."""

    def __init__(
        self,
        responses: list[httpx.Response] | None = None,
        error: Exception | None = None,
    ) -> None:
        self._responses = list(responses or [])
        self._error = error
        self.requests: list[httpx.Request] = []

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        if self._responses:
            return self._responses.pop(0)
        return httpx.Response(200, json={"ok": True})

    @property
    def call_count(self) -> int:
        return len(self.requests)


class TestHttpClientProtocol:
    """Tests for HttpClient protocol compliance."""

    def test_enrich_client_satisfies_protocol(self) -> None:
        """EnrichHttpClient satisfies the HttpClient protocol."""
        client = EnrichHttpClient()
        assert isinstance(client, HttpClient)


class TestEnrichHttpClient:
    """Tests for EnrichHttpClient concrete class."""

    def test_get_returns_json(self) -> None:
        """GET request returns parsed JSON response."""
        transport = FakeTransport()
        client = EnrichHttpClient(transport=transport)
        result = client.get("https://example.com/api?q=test")
        assert result == {"ok": True}

    def test_user_agent_header(self) -> None:
        """Requests include the bookenrich User-Agent header."""
        transport = FakeTransport()
        client = EnrichHttpClient(transport=transport)
        client.get("https://example.com/api")
        assert transport.requests[0].headers["user-agent"].startswith("bookenrich/")

    def test_plus_in_query_string_is_preserved(self) -> None:
        """A pre-built query string keeps its '+' word joiners."""
        transport = FakeTransport()
        client = EnrichHttpClient(transport=transport)
        client.get("https://example.com/search.json?title=The+Hobbit&author=")
        assert "title=The+Hobbit" in str(transport.requests[0].url)

    def test_http_error_status_raises_upstream_status_error(self) -> None:
        """Non-200 responses raise UpstreamStatusError carrying the status."""
        transport = FakeTransport(responses=[httpx.Response(404, json={"error": "not found"})])
        client = EnrichHttpClient(transport=transport)

        with pytest.raises(UpstreamStatusError, match="404") as exc_info:
            client.get("https://example.com/missing")
        assert exc_info.value.status_code == 404

    def test_server_error_is_not_retried(self) -> None:
        """A 5xx response fails immediately after one request."""
        responses = [httpx.Response(503), httpx.Response(200, json={"ok": True})]
        transport = FakeTransport(responses=responses)
        client = EnrichHttpClient(transport=transport)

        with pytest.raises(UpstreamStatusError, match="503"):
            client.get("https://example.com/api")
        assert transport.call_count == 1

    def test_connection_failure_raises_transport_error(self) -> None:
        """httpx transport errors are wrapped in TransportError."""
        transport = FakeTransport(error=httpx.ConnectError("connection refused"))
        client = EnrichHttpClient(transport=transport)

        with pytest.raises(TransportError, match="connection refused"):
            client.get("https://example.com/api")

    def test_overlong_url_raises_transport_error(self) -> None:
        """httpx rejects URLs past its length limit with InvalidURL."""
        transport = FakeTransport()
        client = EnrichHttpClient(transport=transport)

        with pytest.raises(TransportError):
            client.get("https://example.com/search.json?title=" + "x" * 70000)
        assert transport.call_count == 0

    def test_timeout_raises_transport_error(self) -> None:
        """Timeouts are transport failures too."""
        transport = FakeTransport(error=httpx.ReadTimeout("timed out"))
        client = EnrichHttpClient(transport=transport, timeout=0.5)

        with pytest.raises(TransportError):
            client.get("https://example.com/api")

    def test_invalid_json_raises_protocol_error(self) -> None:
        """A 200 with an undecodable body raises ProtocolError."""
        transport = FakeTransport(responses=[httpx.Response(200, text="<html>oops</html>")])
        client = EnrichHttpClient(transport=transport)

        with pytest.raises(ProtocolError, match="Undecodable"):
            client.get("https://example.com/api")

    def test_non_object_json_raises_protocol_error(self) -> None:
        """A JSON array body is not a valid provider response."""
        transport = FakeTransport(responses=[httpx.Response(200, json=[1, 2, 3])])
        client = EnrichHttpClient(transport=transport)

        with pytest.raises(ProtocolError, match="list"):
            client.get("https://example.com/api")

    def test_all_errors_share_base_class(self) -> None:
        """Every client failure is a MetadataFetchError."""
        transport = FakeTransport(responses=[httpx.Response(500)])
        client = EnrichHttpClient(transport=transport)

        with pytest.raises(MetadataFetchError):
            client.get("https://example.com/api")
