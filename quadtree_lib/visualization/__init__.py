"""Plotting helpers for quadtrees."""

from .tree_plots import plot_quadtree

__all__ = ["plot_quadtree"]
