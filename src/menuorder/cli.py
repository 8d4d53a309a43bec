"""
Command-line interface for menuorder.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

from menuorder import MenuItem, MenuFormatter, PermissionMatrix, sort_menu_items
from menuorder.ordering import sort_children_by_order, find_order_violations
from menuorder.utils import filters


def _read_json(filepath: str) -> Any:
    path = Path(filepath)
    if path.suffix != ".json":
        raise ValueError(f"Unsupported file format: {path.suffix}")
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    # Unwrap the API envelope ({"success": ..., "data": [...]})
    if isinstance(data, dict):
        if "data" not in data:
            raise ValueError(f"No 'data' list found in {filepath}")
        data = data["data"]
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of records in {filepath}")
    return data


def load_menu_items(filepath: str) -> List[MenuItem]:
    """Load menu items from a JSON file."""
    return [MenuItem.from_dict(record) for record in _read_json(filepath)]


def load_permissions(filepath: str, items: List[MenuItem]) -> PermissionMatrix:
    """Load role permissions from a JSON file of menu permission records."""
    menu_ids = list(dict.fromkeys(item.menu_id for item in items))
    return PermissionMatrix.from_records(_read_json(filepath), menu_ids=menu_ids)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="menuorder: Hierarchical menu ordering",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("input", help="Input menu items file (JSON)")
    parser.add_argument("-o", "--output", help="Output file path", default=None)
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "text", "table"],
        default="json",
        help="Output format",
    )
    parser.add_argument(
        "--siblings",
        action="store_true",
        help="Treat input as children of one parent and order by sort_order only",
    )
    parser.add_argument("--search", default="", help="Only keep items whose label matches")
    parser.add_argument(
        "--permissions",
        default=None,
        help="Menu permission records file (JSON); defaults to permissions embedded in INPUT",
    )
    parser.add_argument("--role", default=None, help="Role used with --only-visible")
    parser.add_argument(
        "--only-visible", action="store_true", help="Only keep items visible to --role"
    )
    parser.add_argument(
        "--check", action="store_true", help="Verify the resulting display order"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose output"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        if args.verbose:
            print(f"Loading menu items from {args.input}...", file=sys.stderr)
        items = load_menu_items(args.input)

        matrix = None
        if args.permissions:
            if args.verbose:
                print(f"Loading permissions from {args.permissions}...", file=sys.stderr)
            matrix = load_permissions(args.permissions, items)
        elif any(item.permissions for item in items):
            matrix = PermissionMatrix.from_items(items)

        if args.verbose:
            stats = filters.calculate_statistics(items)
            print("\nMenu statistics:", file=sys.stderr)
            for key, value in stats.items():
                text = f"{value:.4f}" if isinstance(value, float) else value
                print(f"  {key}: {text}", file=sys.stderr)

        if args.search or args.only_visible:
            items = filters.filter_menu_items(
                items,
                search_term=args.search,
                role=args.role,
                matrix=matrix,
                only_visible=args.only_visible,
            )
            if args.verbose:
                print(f"\n{len(items)} items left after filtering", file=sys.stderr)

        if args.siblings:
            ordered = sort_children_by_order(items)
        else:
            ordered = sort_menu_items(items)

        roles = filters.exclude_roles(matrix.roles) if matrix is not None else None
        formatter = MenuFormatter(format_type=args.format)
        formatted_output = formatter.format_items(
            ordered, matrix=matrix, roles=roles, presorted=True
        )

        if args.output:
            formatter.save_to_file(formatted_output, args.output)
            if args.verbose:
                print(f"\nOutput saved to {args.output}", file=sys.stderr)
        else:
            if isinstance(formatted_output, (dict, list)):
                print(json.dumps(formatted_output, indent=2, ensure_ascii=False))
            else:
                print(formatted_output)

        if args.check and not args.siblings:
            violations = find_order_violations(items, ordered)
            for violation in violations:
                print(f"Order violation: {violation}", file=sys.stderr)
            if violations:
                return 2

        return 0

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
