"""
Tests for retrieve_all() and retrieve_within_rect().
"""

import pytest
import numpy as np
from quadtree_lib.core.tree import QuadTree
from quadtree_lib.core.types import Point2D, QuadTreeItem, Quadrant, Rect2D
from quadtree_lib.analysis.query import brute_force_within_rect


def test_retrieve_from_empty_tree(empty_tree):
    """Test retrieving from a tree with no items."""
    assert empty_tree.retrieve_all() == []


def test_retrieve_from_non_split_tree(empty_tree):
    """Test retrieving from a leaf."""
    empty_tree.insert(QuadTreeItem.at(0.5, 0.5, 1))
    assert len(empty_tree.retrieve_all()) == 1


def test_retrieve_all_order(split_tree):
    """Test that own items come before children's items."""
    midline_item = QuadTreeItem.at(1, 0.25, "mid")
    top_right_item = QuadTreeItem.at(1.5, 1.5, "tr")
    split_tree.insert(top_right_item)
    split_tree.insert(midline_item)

    items = split_tree.retrieve_all()

    # Own items, then top-left (empty), top-right, bottom-left, bottom-right
    assert items[0] == midline_item
    assert items[1] == top_right_item
    assert len(items) == split_tree.count() == 5


def test_retrieve_with_external_rect(split_tree):
    """Test that a disjoint query returns nothing."""
    assert split_tree.retrieve_within_rect(Rect2D.from_xywh(-10, -10, 1, 1)) == []


def test_retrieve_with_quadrant_rect_containing_all_items(split_tree):
    """Test a query covering the populated quadrant."""
    quadrant = Rect2D.from_xywh(0, 0, 1, 1)
    assert len(split_tree.retrieve_within_rect(quadrant)) == len(split_tree.retrieve_all())


def test_retrieve_with_empty_quadrant_rect(split_tree):
    """Test a query over a quadrant with no items."""
    assert len(split_tree.retrieve_within_rect(Rect2D.from_xywh(1, 0, 1, 1))) == 0


def test_retrieve_with_small_empty_rect(split_tree):
    """Test a query inside the populated quadrant that misses the items."""
    assert len(split_tree.retrieve_within_rect(Rect2D.from_xywh(0, 0, 0.1, 0.1))) == 0


def test_retrieve_with_small_populated_rect(split_tree):
    """Test a small query around the items."""
    populated = Rect2D.from_xywh(0.4, 0.4, 0.2, 0.2)
    assert len(split_tree.retrieve_within_rect(populated)) == len(split_tree.retrieve_all())


def test_retrieve_midline_item_held_by_parent(split_tree):
    """Test that items kept on a split node are still found."""
    item = QuadTreeItem.at(1, 0.5, "X")
    split_tree.insert(item)

    # Starts exactly on the midline; half-open containment includes it
    assert split_tree.retrieve_within_rect(Rect2D.from_xywh(1, 0, 1, 1)) == [item]
    # Ends exactly on the midline; excluded
    assert item not in split_tree.retrieve_within_rect(Rect2D.from_xywh(0, 0, 1, 1))


def test_retrieve_with_zero_area_rect(split_tree):
    """Test that a degenerate query returns nothing."""
    assert split_tree.retrieve_within_rect(Rect2D.from_xywh(0.5, 0.5, 0, 0)) == []


def test_retrieve_with_rect_covering_tree(random_tree):
    """Test a query larger than the tree."""
    tree, points = random_tree
    found = tree.retrieve_within_rect(Rect2D.from_xywh(-100, -100, 200, 200))
    assert found == tree.retrieve_all()
    assert len(found) == len(points)


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_pruned_query_matches_brute_force(random_tree, seed):
    """Test that per-child pruning returns the exact filtered sequence."""
    tree, points = random_tree
    rng = np.random.default_rng(seed)

    for _ in range(20):
        corner = rng.uniform(-60, 60, size=2)
        size = rng.uniform(0, 40, size=2)
        rect = Rect2D.from_xywh(corner[0], corner[1], size[0], size[1])

        found = tree.retrieve_within_rect(rect)
        expected = brute_force_within_rect(tree.retrieve_all(), rect)

        assert found == expected
        assert len(found) == int(rect.contains_points(points).sum())


def test_pruned_query_with_midline_items():
    """Test pruning when split nodes hold midline items."""
    tree = QuadTree(Rect2D.from_xywh(0, 0, 8, 8), depth=4, max_items=1)
    grid = [(x, y) for x in range(1, 8) for y in range(1, 8)]
    tree.insert_many(QuadTreeItem.at(x, y, (x, y)) for x, y in grid)

    assert len(tree.items) > 0
    for rect in [
        Rect2D.from_xywh(4, 0, 4, 8),
        Rect2D.from_xywh(0, 0, 4, 4),
        Rect2D.from_xywh(2, 2, 4, 4),
        Rect2D.from_xywh(3.5, 3.5, 1, 1),
    ]:
        assert tree.retrieve_within_rect(rect) == brute_force_within_rect(tree.retrieve_all(), rect)
