import pytest
import numpy as np
from quadtree_lib.core.tree import QuadTree
from quadtree_lib.core.types import Point2D, QuadTreeItem, Rect2D


def add_one_more_than_max_items(tree: QuadTree) -> None:
    """Insert max_items + 1 items at (width/4, height/4)."""
    point = Point2D(tree.bounds.width / 4.0, tree.bounds.height / 4.0)
    for i in range(tree.max_items + 1):
        tree.insert(QuadTreeItem(point, i))


@pytest.fixture
def fill_past_capacity():
    """Helper that pushes a tree one item past its capacity."""
    return add_one_more_than_max_items


@pytest.fixture
def unit_bounds():
    """The (0, 0, 2, 2) rectangle used by most tests."""
    return Rect2D.from_xywh(0, 0, 2, 2)


@pytest.fixture
def empty_tree(unit_bounds):
    """Empty tree with depth 2 and max_items 2."""
    tree = QuadTree(unit_bounds, depth=2, max_items=2)
    assert tree.children is None
    return tree


@pytest.fixture
def split_tree(empty_tree):
    """Tree that has just split, with all items in the bottom-left child."""
    add_one_more_than_max_items(empty_tree)
    assert empty_tree.children is not None
    return empty_tree


@pytest.fixture
def four_corner_tree():
    """(0, 0, 4, 4) tree holding one item per quadrant."""
    tree = QuadTree(Rect2D.from_xywh(0, 0, 4, 4), depth=5, max_items=2)
    items = [
        QuadTreeItem.at(1, 1, ""),
        QuadTreeItem.at(3, 1, ""),
        QuadTreeItem.at(1, 3, ""),
        QuadTreeItem.at(3, 3, ""),
    ]
    tree.insert_many(items)
    return tree, items


@pytest.fixture
def random_tree():
    """Tree filled with 500 uniformly random items."""
    bounds = Rect2D.from_xywh(-50, -50, 100, 100)
    tree = QuadTree(bounds, depth=8, max_items=4)
    points = bounds.sample_points(500, seed=123)
    tree.insert_many(QuadTreeItem(Point2D.from_array(p), i) for i, p in enumerate(points))
    return tree, points
