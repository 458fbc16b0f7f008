"""
Exceptions raised by quadtree operations.
"""

from .types import as_point


class QuadTreeError(ValueError):
    """Base class for quadtree errors."""


class InvalidBoundsError(QuadTreeError):
    """Raised when a node is constructed with zero-area bounds."""

    def __init__(self, bounds):
        self.bounds = bounds
        super().__init__(
            f"Bounds must have non-zero width and height, got "
            f"{bounds.width} x {bounds.height}"
        )


class OutOfBoundsError(QuadTreeError):
    """Raised when an item lies outside a node, or exactly on its outer edge."""

    def __init__(self, item, bounds):
        self.item = item
        self.bounds = bounds
        super().__init__(
            f"Item at {as_point(item).to_tuple()} is not within bounds "
            f"(x: {bounds.min_x}..{bounds.max_x}, y: {bounds.min_y}..{bounds.max_y})"
        )
