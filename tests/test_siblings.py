"""Tests for sibling ordering."""

from menuorder import MenuItem, sort_children_by_order
from menuorder.ordering import children_of


def ids(items):
    return [item.menu_id for item in items]


class TestSortChildrenByOrder:
    """Test sort_children_by_order."""

    def test_sort_siblings(self):
        """Test ordering children by sort order only."""
        children = [
            MenuItem("X", parent_id="P", sort_order=3),
            MenuItem("Y", parent_id="P", sort_order=1),
            MenuItem("Z", parent_id="P", sort_order=2),
        ]
        assert ids(sort_children_by_order(children)) == ["Y", "Z", "X"]

    def test_returns_new_list(self):
        """Test that the input list is left as it was."""
        children = [MenuItem("b", sort_order=2), MenuItem("a", sort_order=1)]
        result = sort_children_by_order(children)
        assert result is not children
        assert ids(children) == ["b", "a"]

    def test_missing_sort_order_and_ties(self):
        """Test that absent orders count as 0 and ties stay stable."""
        children = [
            MenuItem("none"),
            MenuItem("minus", sort_order=-1),
            MenuItem("zero", sort_order=0),
        ]
        assert ids(sort_children_by_order(children)) == ["minus", "none", "zero"]

    def test_no_parent_resolution(self):
        """Test that mixed parents are not regrouped."""
        children = [
            MenuItem("x", parent_id="P", sort_order=2),
            MenuItem("y", parent_id="Q", sort_order=1),
        ]
        assert ids(sort_children_by_order(children)) == ["y", "x"]


class TestChildrenOf:
    """Test children_of."""

    def test_children_in_input_order(self, hotel_items):
        """Test collecting the direct children of a parent."""
        assert ids(children_of(hotel_items, "room_operation")) == [
            "room_types",
            "room_pricing",
            "rooms",
        ]

    def test_no_children(self, hotel_items):
        """Test a parent without children and a missing parent id."""
        assert children_of(hotel_items, "dashboard") == []
        assert children_of(hotel_items, None) == []
