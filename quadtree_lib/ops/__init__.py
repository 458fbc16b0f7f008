"""Operations for building and filling quadtrees."""

from .build import QuadTreeParams, create_tree, insert_points

__all__ = [
    "QuadTreeParams",
    "create_tree",
    "insert_points",
]
