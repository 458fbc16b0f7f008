"""Quadtree visualization functions for debugging and inspection."""

from typing import Optional
import numpy as np

try:
    import matplotlib.pyplot as plt
    from matplotlib.patches import Rectangle
    HAS_MATPLOTLIB = True
except ImportError:
    HAS_MATPLOTLIB = False

from ..core.tree import QuadTree
from ..core.types import Rect2D, YAxis


def plot_quadtree(
    tree: QuadTree,
    ax: Optional["plt.Axes"] = None,
    show: bool = True,
    title: Optional[str] = None,
    query_rect: Optional[Rect2D] = None,
) -> "plt.Axes":
    """
    Plot the partition of a quadtree and the items it holds.

    Parameters
    ----------
    tree : QuadTree
        Tree to plot
    ax : matplotlib Axes, optional
        Existing axes
    show : bool
        Whether to call plt.show()
    title : str, optional
        Plot title
    query_rect : Rect2D, optional
        Range query to overlay; items it returns are highlighted

    Returns
    -------
    ax : matplotlib Axes
        Axes object
    """
    if not HAS_MATPLOTLIB:
        raise ImportError("matplotlib required. Install with: pip install matplotlib")

    if ax is None:
        fig = plt.figure(figsize=(10, 10))
        ax = fig.add_subplot(111)

    for node in tree.iter_nodes():
        b = node.bounds
        ax.add_patch(Rectangle(
            (b.min_x, b.min_y), b.width, b.height,
            fill=False, edgecolor='gray', linewidth=0.8, alpha=0.7,
        ))

    items = tree.retrieve_all()
    positions = np.array([item.position.to_tuple() for item in items])

    if len(positions) > 0:
        ax.scatter(positions[:, 0], positions[:, 1], c='black', s=8, alpha=0.5)

    if query_rect is not None:
        ax.add_patch(Rectangle(
            (query_rect.min_x, query_rect.min_y), query_rect.width, query_rect.height,
            fill=False, edgecolor='red', linewidth=1.5,
        ))
        hits = np.array([item.position.to_tuple() for item in tree.retrieve_within_rect(query_rect)])
        if len(hits) > 0:
            ax.scatter(hits[:, 0], hits[:, 1], c='red', s=14)

    b = tree.bounds
    ax.set_xlim(b.min_x, b.max_x)
    ax.set_ylim(b.min_y, b.max_y)
    ax.set_aspect('equal')
    ax.set_xlabel('X')
    ax.set_ylabel('Y')

    if tree.y_axis == YAxis.DOWN:
        ax.invert_yaxis()

    if title:
        ax.set_title(title)

    if show:
        plt.show()

    return ax
