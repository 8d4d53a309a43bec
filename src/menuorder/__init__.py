"""
menuorder: Hierarchical Menu Ordering

Produces a single, deterministic display order for flat menu-item records that
reference their parent by id, so that the navigation sidebar and the
permission-management screen always render the same menu structure.
"""

__version__ = "0.1.0"

from .menu.item import MenuItem
from .ordering.comparator import sort_menu_items, compare_menu_items
from .ordering.siblings import sort_children_by_order
from .permissions.matrix import PermissionMatrix
from .formatting.display import MenuFormatter

__all__ = [
    "MenuItem",
    "sort_menu_items",
    "compare_menu_items",
    "sort_children_by_order",
    "PermissionMatrix",
    "MenuFormatter",
]
