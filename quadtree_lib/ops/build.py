"""
Construction operations for building quadtrees.
"""

import warnings
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union
import numpy as np

from ..core.types import Point2D, QuadTreeItem, Quadrant, Rect2D, YAxis
from ..core.tree import QuadTree, DEFAULT_DEPTH, DEFAULT_MAX_ITEMS
from ..core.result import OperationResult, ErrorCode


@dataclass
class QuadTreeParams:
    """Parameters controlling subdivision of a quadtree."""

    max_depth: int = DEFAULT_DEPTH  # Levels of subdivision below the root
    max_items: int = DEFAULT_MAX_ITEMS  # Items a leaf holds before splitting
    y_axis: str = "up"  # "up" (Cartesian) or "down" (screen coordinates)

    def __post_init__(self):
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")
        if self.max_items < 0:
            raise ValueError(f"max_items must be >= 0, got {self.max_items}")
        if isinstance(self.y_axis, YAxis):
            self.y_axis = self.y_axis.value
        if self.y_axis not in ("up", "down"):
            raise ValueError(f"y_axis must be 'up' or 'down', got {self.y_axis!r}")

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "max_depth": self.max_depth,
            "max_items": self.max_items,
            "y_axis": self.y_axis,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "QuadTreeParams":
        """Create from dictionary."""
        return cls(
            max_depth=d.get("max_depth", DEFAULT_DEPTH),
            max_items=d.get("max_items", DEFAULT_MAX_ITEMS),
            y_axis=d.get("y_axis", "up"),
        )


def _as_rect(bounds: Union[Rect2D, Tuple[float, float, float, float]]) -> Rect2D:
    if isinstance(bounds, Rect2D):
        return bounds
    x, y, width, height = bounds
    return Rect2D.from_xywh(x, y, width, height)


def create_tree(
    bounds: Union[Rect2D, Tuple[float, float, float, float]],
    params: Optional[QuadTreeParams] = None,
    items: Optional[Iterable[QuadTreeItem]] = None,
    **overrides,
) -> QuadTree:
    """
    Create a new root quadtree.

    Parameters
    ----------
    bounds : Rect2D or tuple
        Region covered by the tree, as a Rect2D or (x, y, width, height)
    params : QuadTreeParams, optional
        Subdivision parameters (defaults if omitted)
    items : iterable of QuadTreeItem, optional
        Items to insert immediately
    **overrides
        Individual QuadTreeParams fields replacing those in ``params``

    Returns
    -------
    tree : QuadTree
        New root node

    Example
    -------
    >>> from quadtree_lib import create_tree
    >>> tree = create_tree((0, 0, 100, 100), max_items=8)
    """
    if params is None:
        params = QuadTreeParams()
    if overrides:
        merged = params.to_dict()
        merged.update(overrides)
        params = QuadTreeParams.from_dict(merged)

    if params.max_items == 0 and params.max_depth > 0:
        warnings.warn(
            "max_items=0 splits a leaf on every insert that has a quadrant; "
            "the tree will grow to max_depth along every populated path.",
            UserWarning,
            stacklevel=2,
        )

    return QuadTree.from_params(_as_rect(bounds), params, items=items)


def _as_items(
    points: Union[np.ndarray, Sequence[Any]],
    payloads: Optional[Sequence[Any]],
) -> List[QuadTreeItem]:
    """Normalize points and payloads into QuadTreeItems."""
    if isinstance(points, np.ndarray):
        arr = np.asarray(points, dtype=float).reshape(-1, 2)
        points = [Point2D.from_array(row) for row in arr]

    items = []
    for i, p in enumerate(points):
        if isinstance(p, QuadTreeItem):
            position, payload = p.position, p.payload
        elif isinstance(p, Point2D):
            position, payload = p, i
        else:
            position, payload = Point2D.from_tuple(p), i

        if payloads is not None:
            payload = payloads[i]
        items.append(QuadTreeItem(position, payload))

    return items


def insert_points(
    tree: QuadTree,
    points: Union[np.ndarray, Sequence[Any]],
    payloads: Optional[Sequence[Any]] = None,
    on_outside: str = "raise",
) -> OperationResult:
    """
    Insert many points into a tree.

    Parameters
    ----------
    tree : QuadTree
        Tree to modify
    points : np.ndarray or sequence
        An (N, 2) array, or a sequence of (x, y) tuples, Point2D or
        QuadTreeItem objects
    payloads : sequence, optional
        One payload per point. When omitted, points that are not already
        items get their index as payload.
    on_outside : str
        "raise" stops at the first point outside the tree with
        OutOfBoundsError (earlier points stay inserted); "skip" drops
        such points and reports them in the result.

    Returns
    -------
    result : OperationResult
        metadata['inserted'] and metadata['skipped'] hold the counts,
        metadata['skipped_indices'] the positions of dropped points.

    Raises
    ------
    OutOfBoundsError
        With on_outside="raise", for the first point outside the tree
    """
    if on_outside not in ("raise", "skip"):
        raise ValueError(f"on_outside must be 'raise' or 'skip', got {on_outside!r}")

    n_points = len(points)
    if payloads is not None and len(payloads) != n_points:
        result = OperationResult.failure(
            message=f"Got {n_points} points but {len(payloads)} payloads",
        )
        result.add_error("Points and payloads differ in length", ErrorCode.LENGTH_MISMATCH)
        return result

    items = _as_items(points, payloads)

    inserted = 0
    skipped = []

    for i, item in enumerate(items):
        if on_outside == "skip" and tree.classify(item) == Quadrant.OUTSIDE:
            skipped.append((i, item))
            continue
        tree.insert(item)
        inserted += 1

    metadata = {
        "inserted": inserted,
        "skipped": len(skipped),
        "skipped_indices": [i for i, _ in skipped],
        "total_count": tree.count(),
    }

    if skipped and inserted == 0:
        result = OperationResult.failure(
            f"All {n_points} points were outside tree bounds", metadata=metadata
        )
    elif skipped:
        result = OperationResult.partial_success(
            f"Inserted {inserted} points, skipped {len(skipped)} outside bounds",
            metadata=metadata,
        )
    else:
        result = OperationResult.success(f"Inserted {inserted} points", metadata=metadata)

    for i, item in skipped:
        result.add_warning(
            f"Point {i} at {item.position.to_tuple()} is outside tree bounds",
            ErrorCode.OUTSIDE_BOUNDS,
        )

    return result
