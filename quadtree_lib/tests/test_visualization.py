"""
Tests for quadtree plotting.
"""

import matplotlib
matplotlib.use("Agg")

import pytest
import matplotlib.pyplot as plt
from quadtree_lib.core.tree import QuadTree
from quadtree_lib.core.types import Rect2D, YAxis
from quadtree_lib.visualization.tree_plots import plot_quadtree


def test_plot_quadtree_draws_every_node(random_tree):
    """Test that one rectangle is drawn per node."""
    tree, _ = random_tree
    fig, ax = plt.subplots()

    returned = plot_quadtree(tree, ax=ax, show=False, title="random")

    assert returned is ax
    assert len(ax.patches) == len(list(tree.iter_nodes()))
    assert ax.get_title() == "random"
    plt.close(fig)


def test_plot_quadtree_with_query(split_tree):
    """Test the query overlay."""
    ax = plot_quadtree(split_tree, show=False, query_rect=Rect2D.from_xywh(0, 0, 1, 1))

    # Five node outlines plus the query rectangle
    assert len(ax.patches) == 6
    # All items plus the highlighted hits
    assert len(ax.collections) == 2
    plt.close(ax.figure)


def test_plot_quadtree_screen_axis(unit_bounds):
    """Test that screen-space trees are drawn with y pointing down."""
    tree = QuadTree(unit_bounds, y_axis=YAxis.DOWN)
    ax = plot_quadtree(tree, show=False)

    assert ax.yaxis_inverted()
    plt.close(ax.figure)
