"""
Utility functions for narrowing and summarizing menu record sets.
"""

from typing import Any, Dict, Iterable, List, Optional, Sequence

import numpy as np

from ..menu.item import MenuItem, build_lookup
from ..permissions.matrix import PermissionMatrix


def filter_menu_items(
    items: Iterable[MenuItem],
    search_term: str = "",
    role: Optional[str] = None,
    matrix: Optional[PermissionMatrix] = None,
    only_visible: bool = False,
) -> List[MenuItem]:
    """
    Filter menu items the way the permission screen does before ordering.

    Args:
        items: Menu items
        search_term: Case-insensitive substring that labels must contain
        role: Role used with ``only_visible``
        matrix: Permissions used with ``only_visible``
        only_visible: Keep only items ``role`` can view; ignored without a
            role and matrix

    Returns:
        Matching items in input order
    """
    # Without a selected role there is nothing to filter visibility by
    check_visibility = only_visible and role is not None and matrix is not None
    needle = search_term.lower()
    result = []
    for item in items:
        if needle and needle not in (item.label or "").lower():
            continue
        if check_visibility and not matrix.can_view(item.menu_id, role):
            continue
        result.append(item)
    return result


def exclude_roles(roles: Iterable[str], excluded: Sequence[str] = ("Admin",)) -> List[str]:
    """Drop roles that are not editable on the permission screen."""
    return [role for role in roles if role not in excluded]


def calculate_statistics(items: Sequence[MenuItem]) -> Dict[str, Any]:
    """
    Calculate basic statistics for a menu record set.

    Args:
        items: Menu items

    Returns:
        Dictionary of statistics
    """
    lookup = build_lookup(items)
    children = [item for item in items if item.is_child]
    dangling = [item for item in children if item.parent_id not in lookup]
    parents = {item.parent_id for item in children if item.parent_id in lookup}

    stats: Dict[str, Any] = {
        "total": len(items),
        "roots": len(items) - len(children),
        "children": len(children),
        "parents_with_children": len(parents),
        "dangling_references": len(dangling),
        "duplicate_ids": len(items) - len(lookup),
    }

    if items:
        orders = np.array([item.effective_sort_order for item in items])
        stats.update(
            {
                "sort_order_min": int(np.min(orders)),
                "sort_order_max": int(np.max(orders)),
                "sort_order_mean": float(np.mean(orders)),
            }
        )
    return stats
