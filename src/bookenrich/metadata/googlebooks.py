# ABOUTME: Google Books metadata adapter.
# ABOUTME: Secondary title/author search against the volumes API.

import logging
from urllib.parse import quote

from bookenrich.metadata.googlebooks_parser import parse_volumes_response
from bookenrich.metadata.http import HttpClient
from bookenrich.metadata.normalizer import encode_search_term
from bookenrich.metadata.types import BookRecord

logger = logging.getLogger(__name__)

_GOOGLE_BOOKS_BASE = "https://www.googleapis.com/books/v1/volumes"


class GoogleBooksProvider:
    """Title/author search adapter backed by the Google Books volumes API.

    The query uses Google's intitle:/inauthor: operators. An API key is
    optional; anonymous requests work with a lower quota.
    """

    def __init__(self, http_client: HttpClient, api_key: str | None = None) -> None:
        self._http = http_client
        self._api_key = api_key

    @property
    def name(self) -> str:
        return "googlebooks"

    def lookup(self, title: str, author: str) -> BookRecord | None:
        """Search by title and author, returning the first volume or None."""
        query = (
            f"intitle:{encode_search_term(title, safe=':')}"
            f"+inauthor:{encode_search_term(author, safe=':')}"
        )
        url = f"{_GOOGLE_BOOKS_BASE}?q={query}"
        logger.debug("Fetching from Google Books API: %s", url)
        if self._api_key:
            url = f"{url}&key={quote(self._api_key, safe='')}"
        data = self._http.get(url)
        return parse_volumes_response(data)
