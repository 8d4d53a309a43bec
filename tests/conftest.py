"""
Pytest configuration and fixtures for menuorder tests.
"""

import pytest

from menuorder import MenuItem


@pytest.fixture
def hotel_items() -> list:
    """Hotel admin menu, deliberately shuffled."""
    return [
        MenuItem("room_types", "Room Types", parent_id="room_operation", sort_order=2),
        MenuItem("promo_code", "Promo Code", sort_order=4),
        MenuItem("dashboard", "Dashboard", sort_order=1),
        MenuItem("room_pricing", "Room Pricing", parent_id="room_operation", sort_order=3),
        MenuItem("permissions", "Permission Management", sort_order=5),
        MenuItem("rooms", "Rooms", parent_id="room_operation", sort_order=1),
        MenuItem("reservations", "Reservations", sort_order=2),
        MenuItem("room_operation", "Room Operation", sort_order=3),
    ]


@pytest.fixture
def hotel_order() -> list:
    """Expected display order of ``hotel_items``."""
    return [
        "dashboard",
        "reservations",
        "room_operation",
        "rooms",
        "room_types",
        "room_pricing",
        "promo_code",
        "permissions",
    ]