"""Ordering of items that already share a parent."""

from typing import Iterable, List, Optional

from ..menu.item import MenuItem


def sort_children_by_order(children: Iterable[MenuItem]) -> List[MenuItem]:
    """
    Sort children of one parent by ``sort_order``.

    No parent resolution is done; the caller's grouping is trusted. Returns a
    new list, ties keep their input order.
    """
    return sorted(children, key=lambda item: item.effective_sort_order)


def children_of(items: Iterable[MenuItem], parent_id: Optional[str]) -> List[MenuItem]:
    """Direct children of ``parent_id`` in input order."""
    if parent_id is None:
        return []
    return [item for item in items if item.parent_id == parent_id]
