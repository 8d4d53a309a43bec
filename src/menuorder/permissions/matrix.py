"""
Role-based menu visibility.

Holds the ``menu item x role`` visibility grid edited on the permission
management screen, and the cascade rules applied when one cell is toggled.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence

import numpy as np

from ..menu.item import MenuItem, build_lookup
from ..ordering.siblings import children_of

logger = logging.getLogger(__name__)


class PermissionUpdate:
    """A single visibility change for one menu item."""

    def __init__(self, menu_id: str, can_view: bool):
        self.menu_id = menu_id
        self.can_view = can_view

    def to_dict(self) -> Dict[str, Any]:
        return {"menu_id": self.menu_id, "can_view": self.can_view}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PermissionUpdate):
            return NotImplemented
        return self.menu_id == other.menu_id and self.can_view == other.can_view

    def __repr__(self) -> str:
        return f"PermissionUpdate(menu_id={self.menu_id!r}, can_view={self.can_view})"


class PermissionMatrix:
    """
    Dense visibility grid of menu items against roles.

    Rows follow ``menu_ids`` and columns follow ``roles``. Cells that were never
    set read as hidden.
    """

    def __init__(
        self,
        menu_ids: Sequence[str],
        roles: Sequence[str],
        values: Optional[np.ndarray] = None,
    ):
        """
        Initialize permission matrix.

        Args:
            menu_ids: Row labels
            roles: Column labels
            values: Optional boolean array of shape (len(menu_ids), len(roles))
        """
        self.menu_ids = list(menu_ids)
        self.roles = list(roles)
        self._rows = {menu_id: i for i, menu_id in enumerate(self.menu_ids)}
        self._cols = {role: j for j, role in enumerate(self.roles)}

        shape = (len(self.menu_ids), len(self.roles))
        if values is None:
            self.values = np.zeros(shape, dtype=bool)
        else:
            self.values = np.asarray(values, dtype=bool).copy()
            if self.values.shape != shape:
                raise ValueError(
                    f"Permission values have shape {self.values.shape}, expected {shape}"
                )

    @classmethod
    def from_records(
        cls,
        records: Iterable[Dict[str, Any]],
        menu_ids: Optional[Sequence[str]] = None,
        roles: Optional[Sequence[str]] = None,
    ) -> "PermissionMatrix":
        """
        Build a matrix from ``{"menu_id", "role_name", "can_view"}`` records.

        Menu ids and roles not given up front are appended in first-seen order.
        """
        records = list(records)
        row_labels = list(menu_ids or [])
        col_labels = list(roles or [])
        for record in records:
            if record["menu_id"] not in row_labels:
                row_labels.append(record["menu_id"])
            if record["role_name"] not in col_labels:
                col_labels.append(record["role_name"])

        matrix = cls(row_labels, col_labels)
        for record in records:
            matrix.set(record["menu_id"], record["role_name"], bool(record["can_view"]))
        return matrix

    @classmethod
    def from_items(
        cls, items: Iterable[MenuItem], roles: Optional[Sequence[str]] = None
    ) -> "PermissionMatrix":
        """
        Build a matrix from the permissions embedded in menu item records.

        Every item gets a row, even one without embedded permissions. Roles
        not given up front are appended in first-seen order.
        """
        items = list(items)
        menu_ids = list(dict.fromkeys(item.menu_id for item in items))
        col_labels = list(roles or [])
        for item in items:
            for role in item.permissions:
                if role not in col_labels:
                    col_labels.append(role)

        matrix = cls(menu_ids, col_labels)
        for item in items:
            for role, can_view in item.permissions.items():
                matrix.set(item.menu_id, role, bool(can_view))
        return matrix

    def can_view(self, menu_id: str, role: str) -> bool:
        """Visibility of a cell; unknown items or roles are hidden."""
        row = self._rows.get(menu_id)
        col = self._cols.get(role)
        if row is None or col is None:
            return False
        return bool(self.values[row, col])

    def set(self, menu_id: str, role: str, value: bool) -> None:
        if menu_id not in self._rows:
            raise KeyError(f"Unknown menu id: {menu_id}")
        if role not in self._cols:
            raise KeyError(f"Unknown role: {role}")
        self.values[self._rows[menu_id], self._cols[role]] = value

    def apply(self, updates: Iterable[PermissionUpdate], role: str) -> None:
        """Apply a batch of updates for one role."""
        for update in updates:
            self.set(update.menu_id, role, update.can_view)

    def visible_menu_ids(self, role: str) -> List[str]:
        """Menu ids visible to ``role`` in row order."""
        if role not in self._cols:
            return []
        column = self.values[:, self._cols[role]]
        return [self.menu_ids[i] for i in np.flatnonzero(column)]

    def role_counts(self) -> Dict[str, int]:
        """Number of visible menu items per role."""
        counts = self.values.sum(axis=0)
        return {role: int(counts[j]) for j, role in enumerate(self.roles)}

    def to_records(self) -> List[Dict[str, Any]]:
        return [
            {"menu_id": menu_id, "role_name": role, "can_view": bool(self.values[i, j])}
            for i, menu_id in enumerate(self.menu_ids)
            for j, role in enumerate(self.roles)
        ]

    def __repr__(self) -> str:
        return f"PermissionMatrix(items={len(self.menu_ids)}, roles={len(self.roles)})"


def plan_toggle(
    items: Sequence[MenuItem], matrix: PermissionMatrix, menu_id: str, role: str
) -> List[PermissionUpdate]:
    """
    Work out every cell affected by flipping one item's visibility.

    Args:
        items: Full menu record set
        matrix: Current permissions
        menu_id: Item whose visibility is being flipped
        role: Role column being edited

    Returns:
        Updates to apply; a parent update always comes before its children
    """
    new_value = not matrix.can_view(menu_id, role)
    children = children_of(items, menu_id)
    lookup = build_lookup(items)
    item = lookup.get(menu_id)

    if children:
        # Showing or hiding a parent carries all of its children along
        return [PermissionUpdate(menu_id, new_value)] + [
            PermissionUpdate(child.menu_id, new_value) for child in children
        ]

    # A dangling parent reference is treated like a standalone item
    if item is not None and item.is_child and item.parent_id in lookup:
        parent_id = item.parent_id
        if new_value:
            return [PermissionUpdate(parent_id, True), PermissionUpdate(menu_id, True)]

        visible_siblings = [
            sibling
            for sibling in children_of(items, parent_id)
            if sibling.menu_id != menu_id and matrix.can_view(sibling.menu_id, role)
        ]
        if not visible_siblings:
            logger.debug("Hiding %s leaves no visible sibling, hiding %s", menu_id, parent_id)
            return [PermissionUpdate(parent_id, False), PermissionUpdate(menu_id, False)]
        return [PermissionUpdate(menu_id, False)]

    return [PermissionUpdate(menu_id, new_value)]


def toggle(
    items: Sequence[MenuItem], matrix: PermissionMatrix, menu_id: str, role: str
) -> List[PermissionUpdate]:
    """Flip one item's visibility with cascading, updating ``matrix`` in place."""
    updates = plan_toggle(items, matrix, menu_id, role)
    matrix.apply(updates, role)
    return updates
