"""
Point quadtree node.

Every node owns its four children (once split) and the items it holds
directly. Parents are referenced weakly, so ownership only flows from the
root downwards.
"""

import weakref
from typing import Dict, Iterable, Iterator, List, Optional, Sequence

from .errors import InvalidBoundsError, OutOfBoundsError
from .types import (
    CONCRETE_QUADRANTS,
    PointLike,
    Quadrant,
    QuadTreeItem,
    Rect2D,
    YAxis,
    as_point,
)

DEFAULT_DEPTH = 30
DEFAULT_MAX_ITEMS = 30


class QuadTree:
    """
    Region quadtree node storing point-tagged items.

    A node is a leaf until the number of items it holds directly exceeds
    ``max_items``; it then splits once into four children and hands over
    every item that falls strictly inside a quadrant. Items lying on one
    of the node's midlines stay on the node itself.
    """

    def __init__(
        self,
        bounds: Rect2D,
        items: Optional[Iterable[QuadTreeItem]] = None,
        depth: int = DEFAULT_DEPTH,
        max_items: int = DEFAULT_MAX_ITEMS,
        parent: Optional["QuadTree"] = None,
        y_axis: YAxis = YAxis.UP,
    ):
        """
        Initialize a quadtree node.

        Parameters
        ----------
        bounds : Rect2D
            Region covered by the node. Must have non-zero width and height.
        items : iterable of QuadTreeItem, optional
            Items inserted one by one after construction. The first item
            outside ``bounds`` raises and earlier items stay inserted.
        depth : int
            Remaining levels of subdivision. A node at depth 0 never splits.
        max_items : int
            Number of items a leaf may hold before it splits.
        parent : QuadTree, optional
            Owning node; kept as a weak reference.
        y_axis : YAxis
            Quadrant naming convention, inherited by children.

        Raises
        ------
        InvalidBoundsError
            If bounds has zero width or height
        OutOfBoundsError
            If one of ``items`` is outside bounds
        """
        if bounds.is_empty():
            raise InvalidBoundsError(bounds)

        self.bounds = bounds
        self.depth = depth
        self.max_items = max_items
        self.y_axis = YAxis(y_axis)
        self.items: List[QuadTreeItem] = []
        self.children: Optional[Dict[Quadrant, "QuadTree"]] = None
        self._parent_ref = weakref.ref(parent) if parent is not None else None

        if items is not None:
            self.insert_many(items)

    @classmethod
    def from_params(
        cls,
        bounds: Rect2D,
        params,
        items: Optional[Iterable[QuadTreeItem]] = None,
    ) -> "QuadTree":
        """Create a root node from a QuadTreeParams instance."""
        return cls(
            bounds,
            items=items,
            depth=params.max_depth,
            max_items=params.max_items,
            y_axis=YAxis(params.y_axis),
        )

    def __repr__(self) -> str:
        state = "split" if self.is_split else "leaf"
        return (
            f"QuadTree(bounds={self.bounds.get_bounds()}, depth={self.depth}, "
            f"{state}, items={len(self.items)})"
        )

    @property
    def parent(self) -> Optional["QuadTree"]:
        """Owning node, or None for the root (or a detached subtree)."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def is_split(self) -> bool:
        return self.children is not None

    @property
    def is_leaf(self) -> bool:
        return self.children is None

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def root(self) -> "QuadTree":
        """Topmost reachable ancestor."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    @property
    def level(self) -> int:
        """Number of ancestors above this node."""
        level = 0
        node = self.parent
        while node is not None:
            level += 1
            node = node.parent
        return level

    def child(self, quadrant: Quadrant) -> Optional["QuadTree"]:
        """Child for a quadrant, or None before the node has split."""
        if self.children is None:
            return None
        return self.children.get(quadrant)

    def clear(self) -> None:
        """Remove all items and discard every descendant."""
        self.items = []
        self.children = None

    def count(self) -> int:
        """Total number of items held by this node and its descendants."""
        total = len(self.items)
        if self.children is not None:
            for subtree in self.children.values():
                total += subtree.count()
        return total

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[QuadTreeItem]:
        return iter(self.retrieve_all())

    def __contains__(self, item: QuadTreeItem) -> bool:
        # An item always lives on the node where its descent stops
        node = self.smallest_subtree_to_contain(item)
        return node is not None and item in node.items

    def classify(self, element: PointLike) -> Quadrant:
        """
        Classify an item or point against this node's bounds.

        Points outside the bounds or exactly on the outer edge are
        OUTSIDE. Interior points on either midline are ON_MIDLINE.
        """
        point = as_point(element)
        bounds = self.bounds

        if not bounds.contains_inside(point):
            return Quadrant.OUTSIDE

        mid_x = bounds.mid_x
        mid_y = bounds.mid_y
        if point.x == mid_x or point.y == mid_y:
            return Quadrant.ON_MIDLINE

        low_y = point.y < mid_y
        if self.y_axis == YAxis.UP:
            top = not low_y
        else:
            top = low_y

        if point.x < mid_x:
            return Quadrant.TOP_LEFT if top else Quadrant.BOTTOM_LEFT
        return Quadrant.TOP_RIGHT if top else Quadrant.BOTTOM_RIGHT

    def insert(self, item: QuadTreeItem) -> None:
        """
        Insert an item into the subtree.

        Raises
        ------
        OutOfBoundsError
            If the item is outside this node's bounds or on its outer edge
        TypeError
            If item is not a QuadTreeItem
        """
        if not isinstance(item, QuadTreeItem):
            raise TypeError(f"Expected a QuadTreeItem, got {type(item).__name__}")

        quadrant = self.classify(item)

        if quadrant == Quadrant.OUTSIDE:
            raise OutOfBoundsError(item, self.bounds)

        if quadrant == Quadrant.ON_MIDLINE or self.depth <= 0:
            self.items.append(item)
            return

        if self.children is None:
            self.items.append(item)
            if len(self.items) > self.max_items:
                self._split()
            return

        self.children[quadrant].insert(item)

    def insert_many(self, items: Iterable[QuadTreeItem]) -> None:
        """
        Insert items in order.

        The first failure raises; items inserted before it are kept.
        """
        for item in items:
            self.insert(item)

    def _split(self) -> None:
        """Create the four children and move every item that has a quadrant."""
        rects = self.bounds.quadrant_rects(self.y_axis)
        children = {
            quadrant: QuadTree(
                rects[quadrant],
                depth=self.depth - 1,
                max_items=self.max_items,
                parent=self,
                y_axis=self.y_axis,
            )
            for quadrant in CONCRETE_QUADRANTS
        }

        remaining = []
        for item in self.items:
            subtree = children.get(self.classify(item))
            if subtree is None:
                remaining.append(item)
            else:
                subtree.insert(item)

        self.items = remaining
        self.children = children

    def retrieve_all(self) -> List[QuadTreeItem]:
        """Own items followed by every descendant's items."""
        found = list(self.items)
        if self.children is not None:
            for quadrant in CONCRETE_QUADRANTS:
                found.extend(self.children[quadrant].retrieve_all())
        return found

    def retrieve_within_rect(self, rect: Rect2D) -> List[QuadTreeItem]:
        """
        Items whose position lies within ``rect``.

        Containment follows ``Rect2D.contains`` (half-open). Children whose
        bounds do not overlap ``rect`` are skipped; the result is the same
        sequence as filtering ``retrieve_all()``.
        """
        found: List[QuadTreeItem] = []
        self._collect_within_rect(rect, found)
        return found

    def _collect_within_rect(self, rect: Rect2D, found: List[QuadTreeItem]) -> None:
        if not rect.intersects(self.bounds):
            return

        for item in self.items:
            if rect.contains(item.position):
                found.append(item)

        if self.children is not None:
            for quadrant in CONCRETE_QUADRANTS:
                self.children[quadrant]._collect_within_rect(rect, found)

    def could_contain(self, elements: Sequence[PointLike]) -> bool:
        """
        Check whether every element lies within this node's bounds.

        Only this node's bounds are tested. An empty sequence is never
        contained.
        """
        if not elements:
            return False
        for element in elements:
            if self.classify(element) == Quadrant.OUTSIDE:
                return False
        return True

    def smallest_subtree_to_contain(self, element: PointLike) -> Optional["QuadTree"]:
        """
        Deepest node whose bounds contain the element.

        Returns None if the element is outside this node. A point on a
        midline stops the descent at the node owning that midline.
        """
        quadrant = self.classify(element)

        if quadrant == Quadrant.OUTSIDE:
            return None
        if quadrant == Quadrant.ON_MIDLINE or self.children is None:
            return self

        subtree = self.children[quadrant].smallest_subtree_to_contain(element)
        return subtree if subtree is not None else self

    def smallest_subtree_to_contain_all(
        self,
        elements: Sequence[PointLike],
    ) -> Optional["QuadTree"]:
        """
        Deepest node whose bounds contain every element.

        Starts from the smallest subtree containing the first element and
        climbs towards the root until all elements fit.
        """
        if not elements:
            return None

        node = self.smallest_subtree_to_contain(elements[0])
        if node is None:
            return None

        while not node.could_contain(elements):
            node = node.parent
            if node is None:
                return None
        return node

    def iter_nodes(self) -> Iterator["QuadTree"]:
        """Pre-order traversal of this node and its descendants."""
        yield self
        if self.children is not None:
            for quadrant in CONCRETE_QUADRANTS:
                yield from self.children[quadrant].iter_nodes()
