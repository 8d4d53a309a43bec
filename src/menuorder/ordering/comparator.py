"""
Hierarchical ordering of menu items.

Orders a flat record set so that every parent is followed by its own children,
parents are ranked among themselves by ``sort_order`` and children are ranked
within their parent by ``sort_order``. Both the sidebar and the permission
screen go through ``sort_menu_items`` so they always agree on the order.
"""

import logging
from functools import cmp_to_key
from typing import Dict, List, Optional, Sequence

from ..menu.item import MenuItem, build_lookup

logger = logging.getLogger(__name__)


def _resolve_parent(item: MenuItem, lookup: Dict[str, MenuItem]) -> Optional[MenuItem]:
    parent = lookup.get(item.parent_id)
    if parent is None:
        logger.debug("Menu item %s has dangling parent %s", item.menu_id, item.parent_id)
    return parent


def compare_menu_items(a: MenuItem, b: MenuItem, lookup: Dict[str, MenuItem]) -> int:
    """
    Compare two menu items for display order.

    Args:
        a: First menu item
        b: Second menu item
        lookup: ``menu_id -> MenuItem`` index of the full record set

    Returns:
        Negative if ``a`` goes first, positive if ``b`` goes first, 0 if the
        stable sort should keep their input order
    """
    a_order = a.effective_sort_order
    b_order = b.effective_sort_order

    if a.is_root and b.is_root:
        return a_order - b_order

    if a.is_root:
        if b.parent_id == a.menu_id:
            return -1
        parent_b = _resolve_parent(b, lookup)
        if parent_b is not None:
            parent_diff = a_order - parent_b.effective_sort_order
            if parent_diff != 0:
                return parent_diff
        return a_order - b_order

    if b.is_root:
        if a.parent_id == b.menu_id:
            return 1
        parent_a = _resolve_parent(a, lookup)
        if parent_a is not None:
            parent_diff = parent_a.effective_sort_order - b_order
            if parent_diff != 0:
                return parent_diff
        return a_order - b_order

    if a.parent_id == b.parent_id:
        return a_order - b_order

    parent_a = _resolve_parent(a, lookup)
    parent_b = _resolve_parent(b, lookup)
    if parent_a is not None and parent_b is not None:
        parent_diff = parent_a.effective_sort_order - parent_b.effective_sort_order
        if parent_diff != 0:
            return parent_diff
    return a_order - b_order


def sort_menu_items(items: Sequence[MenuItem]) -> List[MenuItem]:
    """
    Order menu items for display.

    The input sequence and its items are left untouched; a new list is
    returned. Unresolvable parent references and missing ``sort_order``
    values fall back to direct comparison, so this never raises.

    Args:
        items: Full menu record set in any order

    Returns:
        New list in display order
    """
    lookup = build_lookup(items)
    # sorted() is stable, which keeps ties in input order
    return sorted(items, key=cmp_to_key(lambda a, b: compare_menu_items(a, b, lookup)))
