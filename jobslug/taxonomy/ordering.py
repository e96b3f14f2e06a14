"""Order-preserving joins between upstream and product taxonomies."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import TypeVar

T = TypeVar("T")


def ordered_join(
    desired_order: Sequence[str],
    source: Iterable[T] | Mapping[object, T],
    key_of: Callable[[T], str],
) -> list[T]:
    """Return source records arranged by a desired key order.

    Records whose key is absent from `desired_order` are dropped, and desired
    keys with no matching record are skipped. When several records share a
    key, the first one wins.

    Args:
        desired_order: Keys in the order the product presents them.
        source: Upstream records, or a mapping whose values are the records.
        key_of: Extracts the matching key from a record.

    Returns:
        Matched records in `desired_order` order.
    """

    records = source.values() if isinstance(source, Mapping) else source
    by_key: dict[str, T] = {}
    for record in records:
        by_key.setdefault(key_of(record), record)
    return [by_key[key] for key in desired_order if key in by_key]
