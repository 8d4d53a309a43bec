"""Tests for display-order checks."""

from menuorder import MenuItem, sort_menu_items
from menuorder.ordering import find_order_violations, is_display_order


class TestFindOrderViolations:
    """Test find_order_violations."""

    def test_sorted_order_is_valid(self, hotel_items):
        """Test that the computed order passes every check."""
        ordered = sort_menu_items(hotel_items)
        assert find_order_violations(hotel_items, ordered) == []
        assert is_display_order(hotel_items, ordered)

    def test_reversed_order(self, hotel_items):
        """Test that a reversed order is rejected."""
        ordered = list(reversed(sort_menu_items(hotel_items)))
        violations = find_order_violations(hotel_items, ordered)

        assert any("before its parent" in v for v in violations)
        assert any(v.startswith("Root") for v in violations)
        assert not is_display_order(hotel_items, ordered)

    def test_dropped_item(self, hotel_items):
        """Test that a missing item is reported."""
        ordered = sort_menu_items(hotel_items)[:-1]
        violations = find_order_violations(hotel_items, ordered)

        assert len(violations) == 1
        assert "not a permutation" in violations[0]
        assert "permissions" in violations[0]

    def test_duplicated_item(self, hotel_items):
        """Test that a duplicated item is reported."""
        ordered = sort_menu_items(hotel_items)
        ordered.append(ordered[0])
        assert not is_display_order(hotel_items, ordered)

    def test_siblings_out_of_order(self, hotel_items, hotel_order):
        """Test that swapped siblings are reported."""
        lookup = {item.menu_id: item for item in hotel_items}
        swapped = list(hotel_order)
        i, j = swapped.index("rooms"), swapped.index("room_types")
        swapped[i], swapped[j] = swapped[j], swapped[i]

        violations = find_order_violations(hotel_items, [lookup[m] for m in swapped])

        assert len(violations) == 1
        assert "Sibling rooms" in violations[0]

    def test_dangling_child_anywhere(self):
        """Test that a dangling reference does not constrain placement."""
        root = MenuItem("A", sort_order=1)
        orphan = MenuItem("D", parent_id="ghost", sort_order=5)
        assert is_display_order([root, orphan], [orphan, root])

    def test_tied_ranks_accept_sorted_output(self):
        """Test that the computed order is accepted when every rank ties."""
        items = [
            MenuItem("C", parent_id="B"),
            MenuItem("A"),
            MenuItem("B"),
        ]
        ordered = sort_menu_items(items)
        assert find_order_violations(items, ordered) == []

    def test_unique_rank_child_first(self):
        """Test that a child ahead of a uniquely ranked parent is rejected."""
        a = MenuItem("A", sort_order=1)
        b = MenuItem("B", sort_order=2)
        c = MenuItem("C", parent_id="B", sort_order=1)
        violations = find_order_violations([a, b, c], [c, a, b])
        assert any("Child C appears before its parent B" in v for v in violations)

    def test_children_not_contiguous(self):
        """Test that a child separated from its parent is rejected."""
        a = MenuItem("A", sort_order=1)
        a1 = MenuItem("a1", parent_id="A", sort_order=1)
        b = MenuItem("B", sort_order=2)
        violations = find_order_violations([a, a1, b], [a, b, a1])
        assert "Children of A do not directly follow it" in violations
