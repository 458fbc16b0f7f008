"""
Geometric primitive types for point quadtrees.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union
import numpy as np


class Quadrant(Enum):
    """Classification of a point against a node's bounds."""
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"
    # Interior, but on a midline so no single quadrant owns it
    ON_MIDLINE = "on_midline"
    # Outside the bounds, or exactly on the outer edge
    OUTSIDE = "outside"

    @property
    def is_concrete(self) -> bool:
        """True for the four real quadrants."""
        return self in CONCRETE_QUADRANTS


# Fixed order used for children, traversal and retrieval
CONCRETE_QUADRANTS = (
    Quadrant.TOP_LEFT,
    Quadrant.TOP_RIGHT,
    Quadrant.BOTTOM_LEFT,
    Quadrant.BOTTOM_RIGHT,
)


class YAxis(Enum):
    """
    Orientation of the y axis, which decides how quadrants are named.

    UP is the Cartesian convention (lower y is "bottom"). DOWN is the
    screen convention (lower y is "top").
    """
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class Point2D:
    """2D point in the plane."""

    x: float
    y: float

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "Point2D":
        """Create from numpy array."""
        return cls(float(arr[0]), float(arr[1]))

    def to_tuple(self) -> Tuple[float, float]:
        """Convert to tuple."""
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, t: Tuple[float, float]) -> "Point2D":
        """Create from tuple."""
        return cls(t[0], t[1])

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, d: dict) -> "Point2D":
        """Create from dictionary."""
        return cls(d["x"], d["y"])


@dataclass(frozen=True)
class Size2D:
    """Width and height of a rectangle."""

    width: float
    height: float

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, d: dict) -> "Size2D":
        return cls(d["width"], d["height"])


@dataclass(frozen=True)
class Rect2D:
    """
    Axis-aligned rectangle given by an origin and a size.

    A negative size is allowed and describes the rectangle that extends
    the other way from the origin; all edge accessors are normalized.

    The corner opposite the origin is kept alongside the size. Rectangles
    built from corners keep those corners exactly, so adjacent rectangles
    share edges without rounding.
    """

    origin: Point2D
    size: Size2D
    corner: Optional[Point2D] = None

    def __post_init__(self):
        if self.corner is None:
            object.__setattr__(
                self,
                "corner",
                Point2D(self.origin.x + self.size.width, self.origin.y + self.size.height),
            )

    @classmethod
    def from_xywh(cls, x: float, y: float, width: float, height: float) -> "Rect2D":
        """Create from origin coordinates and size."""
        return cls(Point2D(x, y), Size2D(width, height))

    @classmethod
    def from_corners(cls, p1: Point2D, p2: Point2D) -> "Rect2D":
        """Create the rectangle spanned by two opposite corners."""
        x_min, x_max = min(p1.x, p2.x), max(p1.x, p2.x)
        y_min, y_max = min(p1.y, p2.y), max(p1.y, p2.y)
        return cls(
            Point2D(x_min, y_min),
            Size2D(x_max - x_min, y_max - y_min),
            Point2D(x_max, y_max),
        )

    @property
    def width(self) -> float:
        return abs(self.size.width)

    @property
    def height(self) -> float:
        return abs(self.size.height)

    @property
    def min_x(self) -> float:
        return min(self.origin.x, self.corner.x)

    @property
    def max_x(self) -> float:
        return max(self.origin.x, self.corner.x)

    @property
    def min_y(self) -> float:
        return min(self.origin.y, self.corner.y)

    @property
    def max_y(self) -> float:
        return max(self.origin.y, self.corner.y)

    @property
    def mid_x(self) -> float:
        return self.min_x + self.width / 2

    @property
    def mid_y(self) -> float:
        return self.min_y + self.height / 2

    @property
    def center(self) -> Point2D:
        return Point2D(self.mid_x, self.mid_y)

    @property
    def area(self) -> float:
        return self.width * self.height

    def is_empty(self) -> bool:
        """True if the rectangle has zero width or zero height."""
        return self.width == 0 or self.height == 0

    def contains(self, point: Point2D) -> bool:
        """
        Check if a point is inside the rectangle.

        Half-open: the minimum edges are inside, the maximum edges are not.
        """
        return (
            self.min_x <= point.x < self.max_x and
            self.min_y <= point.y < self.max_y
        )

    def contains_inside(self, point: Point2D) -> bool:
        """Check if a point is strictly inside the rectangle (edges excluded)."""
        return (
            self.min_x < point.x < self.max_x and
            self.min_y < point.y < self.max_y
        )

    def contains_points(self, points: np.ndarray) -> np.ndarray:
        """Vectorized half-open containment for an (N, 2) array."""
        points = np.asarray(points, dtype=float).reshape(-1, 2)
        return (
            (points[:, 0] >= self.min_x) & (points[:, 0] < self.max_x) &
            (points[:, 1] >= self.min_y) & (points[:, 1] < self.max_y)
        )

    def intersects(self, other: "Rect2D") -> bool:
        """Check for a positive-area overlap with another rectangle."""
        return (
            max(self.min_x, other.min_x) < min(self.max_x, other.max_x) and
            max(self.min_y, other.min_y) < min(self.max_y, other.max_y)
        )

    def quadrant_rects(self, y_axis: YAxis = YAxis.UP) -> Dict[Quadrant, "Rect2D"]:
        """
        Split the rectangle into four equal quadrants.

        Parameters
        ----------
        y_axis : YAxis
            Naming convention. With UP the low-y half is "bottom", with
            DOWN the low-y half is "top".

        Returns
        -------
        rects : Dict[Quadrant, Rect2D]
            One rectangle per concrete quadrant. Each edge is one of this
            rectangle's min, mid or max values, so the four tile it exactly.
        """
        x0, xm, x1 = self.min_x, self.mid_x, self.max_x
        y0, ym, y1 = self.min_y, self.mid_y, self.max_y

        low_left = Rect2D.from_corners(Point2D(x0, y0), Point2D(xm, ym))
        low_right = Rect2D.from_corners(Point2D(xm, y0), Point2D(x1, ym))
        high_left = Rect2D.from_corners(Point2D(x0, ym), Point2D(xm, y1))
        high_right = Rect2D.from_corners(Point2D(xm, ym), Point2D(x1, y1))

        if y_axis == YAxis.UP:
            return {
                Quadrant.TOP_LEFT: high_left,
                Quadrant.TOP_RIGHT: high_right,
                Quadrant.BOTTOM_LEFT: low_left,
                Quadrant.BOTTOM_RIGHT: low_right,
            }
        return {
            Quadrant.TOP_LEFT: low_left,
            Quadrant.TOP_RIGHT: low_right,
            Quadrant.BOTTOM_LEFT: high_left,
            Quadrant.BOTTOM_RIGHT: high_right,
        }

    def sample_points(self, n_points: int, seed: Optional[int] = None) -> np.ndarray:
        """Sample random points uniformly inside the rectangle."""
        rng = np.random.default_rng(seed)

        x = rng.uniform(self.min_x, self.max_x, n_points)
        y = rng.uniform(self.min_y, self.max_y, n_points)

        return np.column_stack([x, y])

    def get_bounds(self) -> tuple:
        """Get bounding box (min_x, max_x, min_y, max_y)."""
        return (self.min_x, self.max_x, self.min_y, self.max_y)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "origin": self.origin.to_dict(),
            "size": self.size.to_dict(),
            "corner": self.corner.to_dict(),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Rect2D":
        """Create from dictionary."""
        corner = Point2D.from_dict(d["corner"]) if "corner" in d else None
        return cls(Point2D.from_dict(d["origin"]), Size2D.from_dict(d["size"]), corner)


@dataclass(frozen=True)
class QuadTreeItem:
    """
    A payload tagged with a position.

    Two items are equal only when both position and payload are equal.
    """

    position: Point2D
    payload: Any = None

    @classmethod
    def at(cls, x: float, y: float, payload: Any = None) -> "QuadTreeItem":
        """Create an item from raw coordinates."""
        return cls(Point2D(x, y), payload)


PointLike = Union[Point2D, QuadTreeItem]


def as_point(element: PointLike) -> Point2D:
    """Return the position of an item, or the point itself."""
    if isinstance(element, QuadTreeItem):
        return element.position
    return element
