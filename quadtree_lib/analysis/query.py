"""
Query and structure analysis functions.
"""

from typing import Dict, Iterable, Iterator, List
import numpy as np
from ..core.tree import QuadTree
from ..core.types import QuadTreeItem, Rect2D


def iter_subtrees(tree: QuadTree) -> Iterator[QuadTree]:
    """Iterate over every node of the tree in pre-order."""
    return tree.iter_nodes()


def get_leaf_subtrees(tree: QuadTree, non_empty: bool = False) -> List[QuadTree]:
    """
    Get all leaf nodes of the tree.

    Parameters
    ----------
    tree : QuadTree
        Tree to query
    non_empty : bool
        If True, only leaves that hold at least one item

    Returns
    -------
    leaves : List[QuadTree]
        Leaf nodes in pre-order
    """
    leaves = []
    for node in tree.iter_nodes():
        if node.is_leaf and (not non_empty or node.items):
            leaves.append(node)
    return leaves


def count_by_level(tree: QuadTree) -> Dict[int, Dict[str, int]]:
    """
    Count nodes and directly held items per level below ``tree``.

    Returns
    -------
    counts : dict
        Maps relative level (0 for ``tree`` itself) to
        {"nodes": ..., "items": ...}
    """
    counts: Dict[int, Dict[str, int]] = {}
    stack = [(tree, 0)]

    while stack:
        node, level = stack.pop()
        entry = counts.setdefault(level, {"nodes": 0, "items": 0})
        entry["nodes"] += 1
        entry["items"] += len(node.items)
        if node.children is not None:
            for child in node.children.values():
                stack.append((child, level + 1))

    return dict(sorted(counts.items()))


def summarize_tree(tree: QuadTree) -> dict:
    """
    Compute summary statistics for a tree.

    Returns
    -------
    summary : dict
        Keys: total_items, total_nodes, split_nodes, leaf_nodes,
        empty_leaves, max_level, midline_items, overfull_leaves,
        mean_items_per_leaf, max_items_per_leaf
    """
    leaf_sizes = []
    total_nodes = 0
    split_nodes = 0
    midline_items = 0
    overfull = 0

    for node in tree.iter_nodes():
        total_nodes += 1
        if node.is_split:
            split_nodes += 1
            midline_items += len(node.items)
        else:
            leaf_sizes.append(len(node.items))
            if len(node.items) > node.max_items:
                overfull += 1

    sizes = np.array(leaf_sizes, dtype=float)
    levels = count_by_level(tree)

    return {
        "total_items": tree.count(),
        "total_nodes": total_nodes,
        "split_nodes": split_nodes,
        "leaf_nodes": len(leaf_sizes),
        "empty_leaves": int(np.sum(sizes == 0)),
        "max_level": max(levels.keys()),
        "midline_items": midline_items,
        "overfull_leaves": overfull,
        "mean_items_per_leaf": float(np.mean(sizes)),
        "max_items_per_leaf": int(np.max(sizes)),
    }


def brute_force_within_rect(
    items: Iterable[QuadTreeItem],
    rect: Rect2D,
) -> List[QuadTreeItem]:
    """
    Reference range query by linear scan.

    Keeps the input order, so ``brute_force_within_rect(tree.retrieve_all(),
    rect)`` is the exact sequence ``tree.retrieve_within_rect(rect)``
    returns when ``rect`` overlaps the tree.
    """
    items = list(items)
    if not items:
        return []

    positions = np.array([item.position.to_tuple() for item in items], dtype=float)
    mask = rect.contains_points(positions)
    return [item for item, keep in zip(items, mask) if keep]
