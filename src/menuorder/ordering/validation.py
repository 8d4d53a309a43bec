"""
Display-order checks.

Turns the guarantees of ``sort_menu_items`` into inspectable results so that an
order produced elsewhere (or stored by a renderer) can be verified.
"""

from collections import Counter
from typing import Dict, List, Sequence

from ..menu.item import MenuItem, build_lookup


def _rank_determined_parents(
    items: Sequence[MenuItem], lookup: Dict[str, MenuItem]
) -> List[MenuItem]:
    """
    Roots whose block position is fixed by rank alone.

    Tied root ranks and parent references that do not resolve to a root fall
    back to comparing items by their own ``sort_order``, which can legitimately
    place a child ahead of its parent. A root only gets the parent-first and
    contiguity checks when its rank is unique and every reference resolves.
    """
    for item in items:
        if item.is_child:
            parent = lookup.get(item.parent_id)
            if parent is None or not parent.is_root:
                return []

    rank_counts = Counter(item.effective_sort_order for item in items if item.is_root)
    roots = [item for item in lookup.values() if item.is_root]
    return [root for root in roots if rank_counts[root.effective_sort_order] == 1]


def find_order_violations(
    items: Sequence[MenuItem], ordered: Sequence[MenuItem]
) -> List[str]:
    """
    Check an ordered sequence against the original record set.

    Parent-first and contiguity are only checked for parents whose rank is
    unambiguous; see ``_rank_determined_parents``.

    Args:
        items: Original record set
        ordered: Candidate display order

    Returns:
        Human-readable descriptions of each violation; empty if valid
    """
    violations = []

    expected = Counter(item.menu_id for item in items)
    actual = Counter(item.menu_id for item in ordered)
    if expected != actual:
        missing = sorted((expected - actual).elements())
        extra = sorted((actual - expected).elements())
        violations.append(
            f"Output is not a permutation of input (missing={missing}, extra={extra})"
        )
        return violations

    lookup = build_lookup(items)
    position: Dict[str, int] = {}
    for index, item in enumerate(ordered):
        position.setdefault(item.menu_id, index)

    for parent in _rank_determined_parents(items, lookup):
        start = position[parent.menu_id]
        block = [item for item in ordered if item.parent_id == parent.menu_id]
        for item in block:
            if position[item.menu_id] < start:
                violations.append(
                    f"Child {item.menu_id} appears before its parent {parent.menu_id}"
                )
        expected_block = {item.menu_id for item in block}
        following = {item.menu_id for item in ordered[start + 1 : start + 1 + len(block)]}
        if block and following != expected_block:
            violations.append(
                f"Children of {parent.menu_id} do not directly follow it"
            )

    roots = [item for item in ordered if item.is_root]
    for previous, current in zip(roots, roots[1:]):
        if previous.effective_sort_order > current.effective_sort_order:
            violations.append(
                f"Root {current.menu_id} (sort_order={current.effective_sort_order}) "
                f"follows {previous.menu_id} (sort_order={previous.effective_sort_order})"
            )

    last_child: Dict[str, MenuItem] = {}
    for item in ordered:
        if item.is_child and item.parent_id in lookup:
            previous = last_child.get(item.parent_id)
            if previous is not None and (
                previous.effective_sort_order > item.effective_sort_order
            ):
                violations.append(
                    f"Sibling {item.menu_id} under {item.parent_id} is out of order "
                    f"after {previous.menu_id}"
                )
            last_child[item.parent_id] = item

    return violations


def is_display_order(items: Sequence[MenuItem], ordered: Sequence[MenuItem]) -> bool:
    """Return True if ``ordered`` is a valid display order of ``items``."""
    return not find_order_violations(items, ordered)
