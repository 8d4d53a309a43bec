"""Ordering module initialization."""

from .comparator import sort_menu_items, compare_menu_items
from .siblings import sort_children_by_order, children_of
from .validation import find_order_violations, is_display_order

__all__ = [
    "sort_menu_items",
    "compare_menu_items",
    "sort_children_by_order",
    "children_of",
    "find_order_violations",
    "is_display_order",
]
