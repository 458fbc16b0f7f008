"""
Point Quadtree Library - Region-Based Spatial Index for 2D Points

Stores point-tagged values in a quadtree that subdivides on demand and
answers range queries and "smallest enclosing subtree" lookups.

Key Features:
- Incremental insertion with automatic, one-time subdivision
- Strict boundary rules: outer edges are outside, midline points stay put
- Range retrieval with per-child pruning
- Ancestor climbing through weak parent references
- Named parameter presets and structured bulk-insert results

Example Usage:
    from quadtree_lib import QuadTree, QuadTreeItem, Rect2D

    tree = QuadTree(Rect2D.from_xywh(0, 0, 100, 100), max_items=8)
    tree.insert(QuadTreeItem.at(12.5, 40.0, payload="well-17"))

    hits = tree.retrieve_within_rect(Rect2D.from_xywh(0, 0, 50, 50))
    node = tree.smallest_subtree_to_contain(hits[0])
"""

__version__ = "1.0.0"

from .core.types import Point2D, Size2D, Rect2D, Quadrant, YAxis, QuadTreeItem
from .core.errors import QuadTreeError, InvalidBoundsError, OutOfBoundsError
from .core.tree import QuadTree
from .core.result import OperationResult, OperationStatus, ErrorCode

from .ops.build import QuadTreeParams, create_tree, insert_points

from .params import get_preset, list_presets, validate_params, validate_and_warn

from .analysis.query import (
    iter_subtrees,
    get_leaf_subtrees,
    count_by_level,
    summarize_tree,
    brute_force_within_rect,
)

from .adapters.networkx_adapter import to_networkx_graph

__all__ = [
    "Point2D",
    "Size2D",
    "Rect2D",
    "Quadrant",
    "YAxis",
    "QuadTreeItem",
    "QuadTreeError",
    "InvalidBoundsError",
    "OutOfBoundsError",
    "QuadTree",
    "OperationResult",
    "OperationStatus",
    "ErrorCode",
    "QuadTreeParams",
    "create_tree",
    "insert_points",
    "get_preset",
    "list_presets",
    "validate_params",
    "validate_and_warn",
    "iter_subtrees",
    "get_leaf_subtrees",
    "count_by_level",
    "summarize_tree",
    "brute_force_within_rect",
    "to_networkx_graph",
]
