# ABOUTME: Parsing functions for Open Library API JSON responses.
# ABOUTME: Converts the Books API and Search API schemas into BookRecord instances.

from typing import Any

from bookenrich.metadata.errors import ProtocolError
from bookenrich.metadata.fields import dedupe, get_dict_list, get_field, get_str_list
from bookenrich.metadata.types import Author, BookRecord, Subject

_COVERS_BASE_URL = "https://covers.openlibrary.org/b/id"


def _language_code(languages: list[dict[str, Any]]) -> str:
    """Turn [{"key": "/languages/eng"}] into "eng"."""
    if not languages:
        return ""
    lang_key = get_field(languages[0], "key", str, "")
    return lang_key.rsplit("/", 1)[-1]


def build_cover_url(cover_id: int, size: str = "L") -> str:
    """Build an Open Library cover image URL for a cover id.

    Args:
        cover_id: The numeric cover id from a search doc (cover_i).
        size: Image size, "S" (small), "M" (medium), or "L" (large).
    """
    return f"{_COVERS_BASE_URL}/{cover_id}-{size}.jpg"


def parse_books_api_record(data: dict[str, Any]) -> BookRecord:
    """Parse one record from the Books API (jscmd=data) into a BookRecord.

    The Books API returns authors and subjects as {name, url} objects, cover
    links under "cover" by size, and identifiers grouped by scheme.
    """
    if not isinstance(data, dict):
        raise ProtocolError(f"Books API record must be an object, got {type(data).__name__}")

    identifiers = get_field(data, "identifiers", dict, {})
    isbns = dedupe(get_str_list(identifiers, "isbn_13") + get_str_list(identifiers, "isbn_10"))

    authors = [
        Author(key=get_field(entry, "url", str, ""), name=get_field(entry, "name", str, ""))
        for entry in get_dict_list(data, "authors")
    ]
    subjects = [
        Subject(name=get_field(entry, "name", str, ""), url=get_field(entry, "url", str, ""))
        for entry in get_dict_list(data, "subjects")
    ]

    cover = get_field(data, "cover", dict, {})
    thumbnail = (
        get_field(cover, "large", str, "")
        or get_field(cover, "medium", str, "")
        or get_field(cover, "small", str, "")
    )

    return BookRecord(
        isbn=isbns,
        title=get_field(data, "title", str, ""),
        authors=authors,
        published_date=get_field(data, "publish_date", str, ""),
        page_count=max(get_field(data, "number_of_pages", int, 0), 0),
        language=_language_code(get_dict_list(data, "languages")),
        subjects=subjects,
        thumbnail_url=thumbnail,
    )


def parse_books_api_response(data: dict[str, Any], isbn: str) -> BookRecord | None:
    """Pick the record for an ISBN out of a Books API response.

    Returns None when the "ISBN:<isbn>" bibkey is absent, which is how the
    Books API answers for identifiers it does not know.
    """
    record = data.get(f"ISBN:{isbn}")
    if record is None:
        return None
    return parse_books_api_record(record)


def parse_search_doc(doc: dict[str, Any]) -> BookRecord:
    """Parse a single Search API doc into a BookRecord.

    Search docs are work-level: authors come as parallel author_key and
    author_name lists, subjects as bare strings, and the cover as a numeric id.
    """
    if not isinstance(doc, dict):
        raise ProtocolError(f"Search doc must be an object, got {type(doc).__name__}")

    names = get_str_list(doc, "author_name")
    keys = get_str_list(doc, "author_key")
    authors = [
        Author(key=keys[i] if i < len(keys) else "", name=name) for i, name in enumerate(names)
    ]

    first_year = get_field(doc, "first_publish_year", int, None)
    if first_year is not None:
        published = str(first_year)
    else:
        publish_dates = get_str_list(doc, "publish_date")
        published = publish_dates[0] if publish_dates else ""

    languages = get_str_list(doc, "language")
    cover_id = get_field(doc, "cover_i", int, None)

    return BookRecord(
        isbn=dedupe(get_str_list(doc, "isbn")),
        title=get_field(doc, "title", str, ""),
        authors=authors,
        published_date=published,
        page_count=max(get_field(doc, "number_of_pages_median", int, 0), 0),
        language=languages[0] if languages else "",
        subjects=[Subject(name=name) for name in get_str_list(doc, "subject")],
        thumbnail_url=build_cover_url(cover_id) if cover_id is not None else "",
    )


def parse_search_response(data: dict[str, Any]) -> BookRecord | None:
    """Return the first doc of a Search API response, or None if nothing matched.

    Older responses spell the count "numFound", newer ones "num_found".
    """
    count = get_field(data, "num_found", int, None)
    if count is None:
        count = get_field(data, "numFound", int, 0)
    if count <= 0:
        return None

    docs = get_field(data, "docs", list, [])
    if not docs:
        raise ProtocolError(f"Search reported {count} result(s) but returned no docs")
    return parse_search_doc(docs[0])
