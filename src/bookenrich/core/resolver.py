# ABOUTME: Fallback resolution of one input row across the ordered provider chain.
# ABOUTME: ISBN lookup first, then each title/author search, stopping at the first record.

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from bookenrich.metadata.errors import MetadataFetchError
from bookenrich.metadata.normalizer import normalize_isbn
from bookenrich.metadata.provider import IsbnProvider, SearchProvider
from bookenrich.metadata.types import BookRecord, InputRow

logger = logging.getLogger(__name__)


@dataclass
class ResolvedRecord:
    """A record together with the name of the provider that produced it."""

    record: BookRecord
    source: str


class FallbackResolver:
    """Resolves input rows to BookRecords by trying providers in a fixed order.

    The chain is strict and short-circuiting:

    1. the ISBN provider, only when the row's normalized ISBN is non-empty;
    2. each search provider in the given order, with the row's title and author.

    Every MetadataFetchError a provider raises (transport, upstream status,
    protocol, not found) is treated exactly like a clean negative: it is
    logged and the chain moves on. Callers only ever see a record or None.
    Other exceptions propagate.
    """

    def __init__(
        self, isbn_provider: IsbnProvider, search_providers: Sequence[SearchProvider]
    ) -> None:
        self._isbn_provider = isbn_provider
        self._search_providers = list(search_providers)

    def resolve(self, row: InputRow) -> BookRecord | None:
        """Return the first record the chain produces for row, or None."""
        resolved = self.resolve_with_source(row)
        return resolved.record if resolved is not None else None

    def resolve_with_source(self, row: InputRow) -> ResolvedRecord | None:
        """Like resolve(), but also report which provider supplied the record."""
        isbn = normalize_isbn(row.isbn)
        if isbn:
            try:
                record = self._isbn_provider.lookup(isbn)
            except MetadataFetchError as exc:
                logger.warning("%s lookup failed for %s: %s", self._isbn_provider.name, isbn, exc)
            else:
                return ResolvedRecord(record=record, source=self._isbn_provider.name)

        for provider in self._search_providers:
            try:
                record = provider.lookup(row.title, row.author)
            except MetadataFetchError as exc:
                logger.warning(
                    "%s search failed for title=%r author=%r: %s",
                    provider.name,
                    row.title,
                    row.author,
                    exc,
                )
                continue
            if record is not None:
                return ResolvedRecord(record=record, source=provider.name)
            logger.info(
                "%s found nothing for title=%r author=%r", provider.name, row.title, row.author
            )

        logger.info(
            "No data found for ISBN: %s, Title: %r, Author: %r", row.isbn, row.title, row.author
        )
        return None
