"""
Example: Basic usage of menuorder for a hotel admin menu.
"""

from menuorder import MenuItem, MenuFormatter, PermissionMatrix, sort_menu_items
from menuorder.permissions import toggle
from menuorder.utils import filters


def build_sample_menu():
    """Menu records as they might come back from the menu API."""
    records = [
        {"menu_id": "room_types", "label": "Room Types", "parent_id": "room_operation", "sort_order": 2},
        {"menu_id": "promo_code", "label": "Promo Code", "sort_order": 4},
        {"menu_id": "dashboard", "label": "Dashboard", "sort_order": 1},
        {"menu_id": "room_pricing", "label": "Room Pricing", "parent_id": "room_operation", "sort_order": 3},
        {"menu_id": "permissions", "label": "Permission Management", "sort_order": 5},
        {"menu_id": "rooms", "label": "Rooms", "parent_id": "room_operation", "sort_order": 1},
        {"menu_id": "reservations", "label": "Reservations", "sort_order": 2},
        {"menu_id": "room_operation", "label": "Room Operation", "sort_order": 3},
        {"menu_id": "gift_cards", "label": "Gift Cards", "parent_id": "billing"},
    ]
    return [MenuItem.from_dict(record) for record in records]


def main():
    """Run example workflow."""
    print("=" * 70)
    print("menuorder: Hierarchical Menu Ordering")
    print("=" * 70)
    print()

    items = build_sample_menu()

    print("1. Menu statistics:")
    for key, value in filters.calculate_statistics(items).items():
        if isinstance(value, float):
            print(f"   {key}: {value:.4f}")
        else:
            print(f"   {key}: {value}")
    print()

    print("2. Sidebar order:")
    print(MenuFormatter(format_type="text").format_items(items))
    print()

    print("3. Permission screen after showing 'Rooms' to Staff:")
    menu_ids = [item.menu_id for item in items]
    matrix = PermissionMatrix(menu_ids, ["Admin", "Staff", "Manager"])
    for update in toggle(items, matrix, "rooms", "Staff"):
        print(f"   {update.menu_id} -> {'visible' if update.can_view else 'hidden'}")
    print()
    roles = filters.exclude_roles(matrix.roles)
    print(MenuFormatter(format_type="table").format_items(items, matrix=matrix, roles=roles))
    print()

    print("4. Items visible to Staff:")
    visible = filters.filter_menu_items(items, role="Staff", matrix=matrix, only_visible=True)
    for item in sort_menu_items(visible):
        print(f"   {item.label}")


if __name__ == "__main__":
    main()
