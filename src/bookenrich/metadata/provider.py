# ABOUTME: Provider protocols defining the contract for metadata sources.
# ABOUTME: ISBN providers look up one identifier; search providers take a title/author pair.

from typing import Protocol, runtime_checkable

from bookenrich.metadata.types import BookRecord


@runtime_checkable
class IsbnProvider(Protocol):
    """Protocol for identifier-keyed metadata lookups.

    lookup() returns a record or raises a MetadataFetchError, including
    RecordNotFoundError when the provider has nothing for the ISBN.
    """

    @property
    def name(self) -> str: ...

    def lookup(self, isbn: str) -> BookRecord: ...


@runtime_checkable
class SearchProvider(Protocol):
    """Protocol for title/author search services.

    lookup() returns the top candidate, None when the search matched nothing,
    or raises a MetadataFetchError when the request itself failed.
    """

    @property
    def name(self) -> str: ...

    def lookup(self, title: str, author: str) -> BookRecord | None: ...
