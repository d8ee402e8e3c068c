"""
Sorted insertion for record lists ordered by a single field.

``insert_sorted`` is how managers keep subjects and aspects ordered by
``order_index`` without re-sorting the whole list after every create or
update.
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Mapping
from typing import Any, Callable, Sequence, TypeVar, Union

T = TypeVar("T")

KeySelector = Union[str, Callable[[Any], Any]]


class InvalidKeyError(KeyError):
    """The sort key is missing (or None) on a record."""

    def __init__(self, key: KeySelector, item: Any):
        self.key = key
        self.item = item
        name = key if isinstance(key, str) else getattr(key, "__name__", repr(key))
        super().__init__(f"sort key {name!r} missing on {item!r}")


def key_value(item: Any, key: KeySelector) -> Any:
    """Read the sort key of ``item``.

    ``key`` is either a field name (looked up by subscription on mappings
    and as an attribute otherwise) or a callable selector.

    Raises:
        InvalidKeyError: the key is absent or its value is None
    """
    try:
        if callable(key):
            value = key(item)
        elif isinstance(item, Mapping):
            value = item[key]
        else:
            value = getattr(item, key)
    except (KeyError, AttributeError, TypeError) as exc:
        raise InvalidKeyError(key, item) from exc
    if value is None:
        raise InvalidKeyError(key, item)
    return value


def insert_sorted(collection: Sequence[T], new_item: T, key: KeySelector) -> list[T]:
    """Return a new list with ``new_item`` inserted in key order.

    ``collection`` must already be sorted ascending by ``key``; it is not
    modified. The item goes before the first element whose key is not less
    than its own (leftmost position among equal keys). The position is found
    with a binary search, so only O(log n) keys are read.

    Args:
        collection: Records sorted ascending by ``key``
        new_item: Record to insert
        key: Field name or selector callable

    Returns:
        A new list of ``len(collection) + 1`` records

    Raises:
        InvalidKeyError: ``new_item`` or a compared record has no usable key
    """
    items = list(collection)
    target = key_value(new_item, key)
    index = bisect_left(items, target, key=lambda item: key_value(item, key))
    items.insert(index, new_item)
    return items
