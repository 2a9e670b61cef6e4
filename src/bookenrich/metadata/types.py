# ABOUTME: Core data structures for book rows and canonical metadata records.
# ABOUTME: BookRecord is the interchange format between provider adapters and the reducer.

from dataclasses import dataclass, field


@dataclass
class InputRow:
    """A raw row from the input table. Any field may be empty."""

    isbn: str = ""
    author: str = ""
    title: str = ""
    condition: str = ""


@dataclass
class Author:
    key: str
    name: str


@dataclass
class Subject:
    name: str
    url: str = ""


@dataclass
class BookRecord:
    """Provider-agnostic bibliographic metadata for one book.

    Every successful adapter lookup produces one of these. Fields the
    provider left out are empty (or zero for page_count); a missing record
    is represented by None, never by a BookRecord.
    """

    isbn: list[str] = field(default_factory=list)
    title: str = ""
    authors: list[Author] = field(default_factory=list)
    published_date: str = ""
    page_count: int = 0
    language: str = ""
    subjects: list[Subject] = field(default_factory=list)
    thumbnail_url: str = ""

    @property
    def author_names(self) -> list[str]:
        return [author.name for author in self.authors]

    @property
    def subject_names(self) -> list[str]:
        return [subject.name for subject in self.subjects]


@dataclass(frozen=True)
class OutputRow:
    """One row of the enriched output table, every column a string."""

    isbn: str
    author: str
    title: str
    condition: str
    published_date: str
    series: str
    page_count: str
    language: str
    tags: str
    image_link: str

    def cells(self) -> list[str]:
        """Column values in output order."""
        return [
            self.isbn,
            self.author,
            self.title,
            self.condition,
            self.published_date,
            self.series,
            self.page_count,
            self.language,
            self.tags,
            self.image_link,
        ]
