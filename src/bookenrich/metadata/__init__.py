# ABOUTME: Metadata package: canonical book records and the provider adapters that fill them.
# ABOUTME: Exports the data types, error taxonomy, and adapter classes used by the pipeline.

from bookenrich.metadata.errors import (
    MetadataFetchError,
    ProtocolError,
    RecordNotFoundError,
    TransportError,
    UpstreamStatusError,
)
from bookenrich.metadata.googlebooks import GoogleBooksProvider
from bookenrich.metadata.openlibrary import OpenLibraryIsbnProvider, OpenLibrarySearchProvider
from bookenrich.metadata.provider import IsbnProvider, SearchProvider
from bookenrich.metadata.types import Author, BookRecord, InputRow, OutputRow, Subject

__all__ = [
    "Author",
    "BookRecord",
    "GoogleBooksProvider",
    "InputRow",
    "IsbnProvider",
    "MetadataFetchError",
    "OpenLibraryIsbnProvider",
    "OpenLibrarySearchProvider",
    "OutputRow",
    "ProtocolError",
    "RecordNotFoundError",
    "SearchProvider",
    "Subject",
    "TransportError",
    "UpstreamStatusError",
]
