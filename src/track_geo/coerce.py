"""Defensive coercion of loosely shaped JSON-like values."""

from __future__ import annotations

from collections.abc import Mapping
from numbers import Number

_PRIMITIVES = (str, bytes, bytearray, bool, Number)


def is_object_like(value) -> bool:
    """True for structured values (mappings, lists, records), False for scalars."""
    return value is not None and not isinstance(value, _PRIMITIVES)


def to_list(value) -> list | tuple:
    """Coerce ``value`` into an ordered collection of entries.

    Lists and tuples come back unchanged. A mapping becomes the list of its
    object-like values (None included) in iteration order, skipping any
    value that is the mapping itself. Everything else gives an empty list.
    """
    if isinstance(value, (list, tuple)):
        return value
    if isinstance(value, Mapping):
        return [v for v in value.values() if (v is None or is_object_like(v)) and v is not value]
    return []
