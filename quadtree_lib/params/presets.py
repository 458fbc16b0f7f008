"""Parameter presets for common quadtree workloads.

This module provides named QuadTreeParams presets so callers can pick a
subdivision policy by name instead of tuning depth and capacity by hand.
"""

from ..ops.build import QuadTreeParams


def default() -> QuadTreeParams:
    """
    General-purpose settings.

    Characteristics:
    - Deep enough for very clustered data
    - Moderate leaf capacity
    """
    return QuadTreeParams(
        max_depth=30,
        max_items=30,
        y_axis="up",
    )


def shallow_wide() -> QuadTreeParams:
    """
    Few levels with large leaves.

    Characteristics:
    - Cheap inserts, coarse range pruning
    - Suited to roughly uniform data that is queried in large windows
    """
    return QuadTreeParams(
        max_depth=6,
        max_items=128,
        y_axis="up",
    )


def deep_sparse() -> QuadTreeParams:
    """
    Many levels with small leaves.

    Characteristics:
    - Fine-grained subdivision around dense clusters
    - Best for small query windows and smallest-subtree lookups
    """
    return QuadTreeParams(
        max_depth=40,
        max_items=4,
        y_axis="up",
    )


def screen_space() -> QuadTreeParams:
    """
    Screen coordinates, where y grows downwards.

    Lower y values are named "top", matching image and UI layouts.
    """
    return QuadTreeParams(
        max_depth=12,
        max_items=16,
        y_axis="down",
    )


def debug() -> QuadTreeParams:
    """
    Tiny tree for inspecting splits by eye.

    Characteristics:
    - Splits after two items
    - At most three levels below the root
    """
    return QuadTreeParams(
        max_depth=3,
        max_items=2,
        y_axis="up",
    )


PRESETS = {
    "default": default,
    "shallow_wide": shallow_wide,
    "deep_sparse": deep_sparse,
    "screen_space": screen_space,
    "debug": debug,
}


def get_preset(name: str) -> QuadTreeParams:
    """
    Get a parameter preset by name.

    Parameters
    ----------
    name : str
        Preset name (e.g., "default", "debug")

    Returns
    -------
    QuadTreeParams
        Parameter configuration

    Raises
    ------
    ValueError
        If preset name is not recognized
    """
    if name not in PRESETS:
        available = ", ".join(PRESETS.keys())
        raise ValueError(f"Unknown preset '{name}'. Available: {available}")

    return PRESETS[name]()


def list_presets() -> list:
    """List all available preset names."""
    return list(PRESETS.keys())
