"""
Menu item records.

A menu item is a flat record that points at its parent by id. Items without a
parent are roots; the record set is a forest of depth two.
"""

from typing import Any, Dict, Iterable, Optional

_KNOWN_FIELDS = (
    "menu_id",
    "label",
    "parent_id",
    "sort_order",
    "icon",
    "href",
    "is_active",
    "permissions",
)


class MenuItem:
    """Represents one menu entry as supplied by the menu configuration source."""

    def __init__(
        self,
        menu_id: str,
        label: str = "",
        parent_id: Optional[str] = None,
        sort_order: Optional[int] = None,
        icon: Optional[str] = None,
        href: Optional[str] = None,
        is_active: bool = True,
        permissions: Optional[Dict[str, bool]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        self.menu_id = menu_id
        self.label = label
        # An empty string from a form or API payload means "no parent"
        self.parent_id = parent_id or None
        self.sort_order = sort_order
        self.icon = icon
        self.href = href
        self.is_active = is_active
        self.permissions = permissions or {}
        self.metadata = metadata or {}

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    @property
    def is_child(self) -> bool:
        return self.parent_id is not None

    @property
    def effective_sort_order(self) -> int:
        """Sort priority with an absent value treated as 0."""
        return self.sort_order or 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert menu item to dictionary representation."""
        result = {
            "menu_id": self.menu_id,
            "label": self.label,
            "parent_id": self.parent_id,
            "sort_order": self.sort_order,
            "icon": self.icon,
            "href": self.href,
            "is_active": self.is_active,
        }
        if self.permissions:
            result["permissions"] = dict(self.permissions)
        if self.metadata:
            result["metadata"] = dict(self.metadata)
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MenuItem":
        """
        Build a menu item from an API record.

        Args:
            data: Record with at least a ``menu_id`` key

        Returns:
            MenuItem instance; keys outside the known fields end up in metadata
        """
        if data.get("menu_id") in (None, ""):
            raise ValueError(f"Menu item record has no menu_id: {data!r}")

        metadata = dict(data.get("metadata") or {})
        for key, value in data.items():
            if key not in _KNOWN_FIELDS and key != "metadata":
                metadata[key] = value

        sort_order = data.get("sort_order")
        return cls(
            menu_id=str(data["menu_id"]),
            label=data.get("label", ""),
            parent_id=str(data["parent_id"]) if data.get("parent_id") else None,
            sort_order=int(sort_order) if sort_order is not None else None,
            icon=data.get("icon"),
            href=data.get("href"),
            is_active=bool(data.get("is_active", True)),
            permissions=data.get("permissions"),
            metadata=metadata,
        )

    def __repr__(self) -> str:
        return (
            f"MenuItem(menu_id={self.menu_id!r}, parent_id={self.parent_id!r}, "
            f"sort_order={self.sort_order})"
        )


def build_lookup(items: Iterable[MenuItem]) -> Dict[str, MenuItem]:
    """
    Index menu items by id.

    When ids are duplicated the first occurrence wins, matching a linear
    search over the original list.
    """
    lookup: Dict[str, MenuItem] = {}
    for item in items:
        lookup.setdefault(item.menu_id, item)
    return lookup
