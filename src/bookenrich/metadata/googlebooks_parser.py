# ABOUTME: Parsing functions for Google Books volumes API responses.
# ABOUTME: Unwraps each item's volumeInfo and converts it into a BookRecord.

from typing import Any

from bookenrich.metadata.errors import ProtocolError
from bookenrich.metadata.fields import dedupe, get_dict_list, get_field, get_str_list
from bookenrich.metadata.types import Author, BookRecord, Subject

_ISBN_IDENTIFIER_TYPES = ("ISBN_13", "ISBN_10")


def parse_volume_info(info: dict[str, Any]) -> BookRecord:
    """Parse a volumeInfo object into a BookRecord.

    Google lists authors and categories as bare strings, so author keys and
    subject URLs stay empty. ISBNs are the ISBN_13/ISBN_10 entries of
    industryIdentifiers, ISBN-13 first.
    """
    if not isinstance(info, dict):
        raise ProtocolError(f"volumeInfo must be an object, got {type(info).__name__}")

    identifiers = get_dict_list(info, "industryIdentifiers")
    isbns: list[str] = []
    for id_type in _ISBN_IDENTIFIER_TYPES:
        for entry in identifiers:
            if get_field(entry, "type", str, "") == id_type:
                value = get_field(entry, "identifier", str, "")
                if value:
                    isbns.append(value)

    image_links = get_field(info, "imageLinks", dict, {})
    thumbnail = get_field(image_links, "thumbnail", str, "") or get_field(
        image_links, "smallThumbnail", str, ""
    )

    return BookRecord(
        isbn=dedupe(isbns),
        title=get_field(info, "title", str, ""),
        authors=[Author(key="", name=name) for name in get_str_list(info, "authors")],
        published_date=get_field(info, "publishedDate", str, ""),
        page_count=max(get_field(info, "pageCount", int, 0), 0),
        language=get_field(info, "language", str, ""),
        subjects=[Subject(name=name) for name in get_str_list(info, "categories")],
        thumbnail_url=thumbnail,
    )


def parse_volumes_response(data: dict[str, Any]) -> BookRecord | None:
    """Return the first volume of a volumes response, or None if nothing matched."""
    total = get_field(data, "totalItems", int, 0)
    if total <= 0:
        return None

    items = get_dict_list(data, "items")
    if not items:
        raise ProtocolError(f"Volumes search reported {total} item(s) but returned none")

    info = items[0].get("volumeInfo")
    if info is None:
        raise ProtocolError("Volume item has no volumeInfo")
    return parse_volume_info(info)
