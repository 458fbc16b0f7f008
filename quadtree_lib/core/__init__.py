"""Core data structures for point quadtrees."""

from .types import (
    Point2D,
    Size2D,
    Rect2D,
    Quadrant,
    YAxis,
    QuadTreeItem,
    CONCRETE_QUADRANTS,
)
from .errors import QuadTreeError, InvalidBoundsError, OutOfBoundsError
from .tree import QuadTree, DEFAULT_DEPTH, DEFAULT_MAX_ITEMS
from .result import OperationResult, OperationStatus, ErrorCode

__all__ = [
    "Point2D",
    "Size2D",
    "Rect2D",
    "Quadrant",
    "YAxis",
    "QuadTreeItem",
    "CONCRETE_QUADRANTS",
    "QuadTreeError",
    "InvalidBoundsError",
    "OutOfBoundsError",
    "QuadTree",
    "DEFAULT_DEPTH",
    "DEFAULT_MAX_ITEMS",
    "OperationResult",
    "OperationStatus",
    "ErrorCode",
]
