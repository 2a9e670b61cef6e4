# ABOUTME: Error taxonomy for metadata provider lookups.
# ABOUTME: Every adapter failure is a MetadataFetchError so the resolver can absorb it.


class MetadataFetchError(Exception):
    """Raised when a metadata provider lookup fails."""


class TransportError(MetadataFetchError):
    """The request never produced a response (network unreachable, timeout)."""


class UpstreamStatusError(MetadataFetchError):
    """The provider answered with a non-success status code."""

    def __init__(self, status_code: int, url: str) -> None:
        super().__init__(f"HTTP {status_code} from {url}")
        self.status_code = status_code
        self.url = url


class ProtocolError(MetadataFetchError):
    """The response body does not match the provider's expected schema."""


class RecordNotFoundError(MetadataFetchError):
    """A well-formed response that holds no record for the requested key."""
