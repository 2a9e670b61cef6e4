# ABOUTME: Typed field extraction helpers shared by the provider response parsers.
# ABOUTME: Missing fields fall back to defaults; mistyped fields raise ProtocolError.

from typing import Any

from bookenrich.metadata.errors import ProtocolError


def get_field(data: dict[str, Any], key: str, expected: type, default: Any) -> Any:
    """Fetch an optional field, rejecting values of the wrong JSON type.

    A missing or null field yields the default.
    """
    value = data.get(key)
    if value is None:
        return default
    # JSON true/false decode to bool, which is an int subclass
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise ProtocolError(f"Field {key!r} has unexpected type {type(value).__name__}")
    return value


def get_str_list(data: dict[str, Any], key: str) -> list[str]:
    values = get_field(data, key, list, [])
    if not all(isinstance(v, str) for v in values):
        raise ProtocolError(f"Field {key!r} must be a list of strings")
    return values


def get_dict_list(data: dict[str, Any], key: str) -> list[dict[str, Any]]:
    values = get_field(data, key, list, [])
    if not all(isinstance(v, dict) for v in values):
        raise ProtocolError(f"Field {key!r} must be a list of objects")
    return values


def dedupe(values: list[str]) -> list[str]:
    """Drop repeated values, keeping first-seen order."""
    return list(dict.fromkeys(values))
