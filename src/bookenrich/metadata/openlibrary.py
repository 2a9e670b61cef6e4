# ABOUTME: Open Library metadata adapters.
# ABOUTME: ISBN lookup via the Books API and title/author search via search.json.

import logging
from urllib.parse import quote

from bookenrich.metadata.errors import RecordNotFoundError
from bookenrich.metadata.http import HttpClient
from bookenrich.metadata.normalizer import encode_search_term
from bookenrich.metadata.openlibrary_parser import (
    parse_books_api_response,
    parse_search_response,
)
from bookenrich.metadata.types import BookRecord

logger = logging.getLogger(__name__)

_OL_BASE = "https://openlibrary.org"


class OpenLibraryIsbnProvider:
    """ISBN adapter backed by the Open Library Books API.

    The Books API answers with a mapping keyed by "ISBN:<isbn>"; a missing key
    means Open Library has no edition for that identifier.
    Uses dependency-injected HttpClient for testability.
    """

    def __init__(self, http_client: HttpClient) -> None:
        self._http = http_client

    @property
    def name(self) -> str:
        return "openlibrary-isbn"

    def lookup(self, isbn: str) -> BookRecord:
        """Fetch the edition record for an already-normalized ISBN.

        Raises:
            RecordNotFoundError: The response holds no record for the ISBN.
            MetadataFetchError: Any transport, status, or schema failure.
        """
        url = f"{_OL_BASE}/api/books?bibkeys=ISBN:{quote(isbn, safe='')}&format=json&jscmd=data"
        logger.debug("Fetching book info for ISBN %s: %s", isbn, url)
        data = self._http.get(url)

        record = parse_books_api_response(data, isbn)
        if record is None:
            raise RecordNotFoundError(f"No data found for ISBN: {isbn}")
        return record


class OpenLibrarySearchProvider:
    """Title/author search adapter backed by Open Library search.json.

    Returns the top-ranked doc as-is; Open Library's own ordering decides
    which candidate wins.
    """

    def __init__(self, http_client: HttpClient) -> None:
        self._http = http_client

    @property
    def name(self) -> str:
        return "openlibrary-search"

    def lookup(self, title: str, author: str) -> BookRecord | None:
        """Search by title and author, returning the first match or None."""
        url = (
            f"{_OL_BASE}/search.json"
            f"?title={encode_search_term(title)}&author={encode_search_term(author)}"
        )
        logger.debug("Searching Open Library: %s", url)
        data = self._http.get(url)
        return parse_search_response(data)
