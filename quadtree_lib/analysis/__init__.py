"""Analysis and query functions for quadtrees."""

from .query import (
    iter_subtrees,
    get_leaf_subtrees,
    count_by_level,
    summarize_tree,
    brute_force_within_rect,
)

__all__ = [
    "iter_subtrees",
    "get_leaf_subtrees",
    "count_by_level",
    "summarize_tree",
    "brute_force_within_rect",
]
