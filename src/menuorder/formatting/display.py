"""
Display formatting module.

Renders ordered menu items for the sidebar and the permission screen.
"""

import json
from typing import Any, Dict, List, Optional, Sequence

from ..menu.item import MenuItem, build_lookup
from ..ordering.comparator import sort_menu_items
from ..permissions.matrix import PermissionMatrix


class MenuFormatter:
    """
    Formats menu items in display order.

    Supports multiple output formats:
    - JSON: Item records annotated with their depth
    - Text: Indented outline, children marked with ``└─``
    - Table: Outline plus a Visible/Hidden column per role
    """

    def __init__(self, format_type: str = "json"):
        """
        Initialize menu formatter.

        Args:
            format_type: Output format ('json', 'text', 'table')
        """
        self.format_type = format_type

    def format_items(
        self,
        items: Sequence[MenuItem],
        matrix: Optional[PermissionMatrix] = None,
        roles: Optional[Sequence[str]] = None,
        presorted: bool = False,
    ) -> Any:
        """
        Format menu items.

        Args:
            items: Menu items; ordered with ``sort_menu_items`` unless presorted
            matrix: Permissions, required for the table format
            roles: Role columns for the table format (defaults to matrix roles)
            presorted: Skip ordering, trusting the caller's sequence

        Returns:
            Formatted data in the specified format
        """
        ordered = list(items) if presorted else sort_menu_items(items)

        if self.format_type == "json":
            return self._format_json(ordered)
        elif self.format_type == "text":
            return self._format_text(ordered)
        elif self.format_type == "table":
            if matrix is None:
                raise ValueError("Table format requires a permission matrix")
            return self._format_table(ordered, matrix, roles or matrix.roles)
        else:
            raise ValueError(f"Unknown format type: {self.format_type}")

    def _format_json(self, ordered: List[MenuItem]) -> List[Dict[str, Any]]:
        """Format as a list of records."""
        result = []
        for item in ordered:
            record = item.to_dict()
            record["depth"] = 1 if item.is_child else 0
            result.append(record)
        return result

    def _outline(self, ordered: List[MenuItem]) -> List[str]:
        lookup = build_lookup(ordered)
        child_counts: Dict[str, int] = {}
        for item in ordered:
            if item.is_child:
                child_counts[item.parent_id] = child_counts.get(item.parent_id, 0) + 1

        lines = []
        for item in ordered:
            label = item.label or item.menu_id
            if item.is_child:
                line = f"  └─ {label}"
                if item.parent_id not in lookup:
                    line += f" (missing parent {item.parent_id})"
            else:
                line = label
            if item.menu_id in child_counts:
                line += f" [Parent ({child_counts[item.menu_id]})]"
            lines.append(line)
        return lines

    def _format_text(self, ordered: List[MenuItem]) -> str:
        """Format as an indented outline."""
        return "\n".join(self._outline(ordered))

    def _format_table(
        self, ordered: List[MenuItem], matrix: PermissionMatrix, roles: Sequence[str]
    ) -> str:
        """Format as a permission table."""
        outline = self._outline(ordered)
        width = max([len("Menu Item")] + [len(line) for line in outline])
        columns = [max(len(role), len("Visible")) for role in roles]

        header = "Menu Item".ljust(width) + "".join(
            "  " + role.center(col) for role, col in zip(roles, columns)
        )
        lines = [header, "-" * len(header)]
        for item, text in zip(ordered, outline):
            cells = "".join(
                "  " + ("Visible" if matrix.can_view(item.menu_id, role) else "Hidden").center(col)
                for role, col in zip(roles, columns)
            )
            lines.append(text.ljust(width) + cells)
        return "\n".join(lines)

    def save_to_file(self, data: Any, filepath: str) -> None:
        """
        Save formatted data to file.

        Args:
            data: Formatted data
            filepath: Output file path
        """
        with open(filepath, "w", encoding="utf-8") as f:
            if isinstance(data, (dict, list)):
                json.dump(data, f, indent=2, ensure_ascii=False)
            else:
                f.write(data)
