"""Utils module initialization."""

from .filters import (
    filter_menu_items,
    exclude_roles,
    calculate_statistics,
)

__all__ = [
    "filter_menu_items",
    "exclude_roles",
    "calculate_statistics",
]
