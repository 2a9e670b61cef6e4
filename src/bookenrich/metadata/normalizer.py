# ABOUTME: Cleans raw ISBNs and free-text fields into provider-query-ready form.
# ABOUTME: All functions are pure and total; unparsable input passes through.

import re
from urllib.parse import quote

_ISBN_STRIP_RE = re.compile(r"[\s-]")
_WHITESPACE_RUN_RE = re.compile(r"\s+")


def normalize_isbn(raw: str) -> str:
    """Strip hyphens and whitespace from an ISBN.

    "978-0-13-468599-1" becomes "9780134685991". No checksum validation is
    done; whatever remains is handed to the provider as-is.
    """
    return _ISBN_STRIP_RE.sub("", raw)


def normalize_search_term(raw: str) -> str:
    """Join the words of a title or author with '+' for query strings.

    Surrounding whitespace is dropped and each internal run of whitespace
    collapses to a single '+', so "The  Hobbit" becomes "The+Hobbit".
    """
    return _WHITESPACE_RUN_RE.sub("+", raw.strip())


def encode_search_term(raw: str, safe: str = "") -> str:
    """Percent-encode a search term for a query string, words joined by '+'.

    Each whitespace-separated word is escaped on its own, so a literal '+'
    inside a word becomes %2B and only the joiners read as spaces.
    "C++ Primer" becomes "C%2B%2B+Primer".
    """
    return "+".join(quote(word, safe=safe) for word in raw.split())
