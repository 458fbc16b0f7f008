"""Parameter validation with bounds checking.

This module checks QuadTreeParams against ranges that keep trees
well-behaved and catches settings that are legal but rarely intended.
"""

from typing import List, Optional, Tuple
from ..ops.build import QuadTreeParams


PARAM_BOUNDS = {
    "max_depth": (0, 50, "levels"),  # Beyond ~50 halvings child midlines collapse in float64
    "max_items": (1, 10000, "items"),
}


def validate_params(
    params: QuadTreeParams,
    expected_points: Optional[int] = None,
) -> Tuple[bool, List[str]]:
    """
    Validate QuadTreeParams against bounds.

    Parameters
    ----------
    params : QuadTreeParams
        Parameters to validate
    expected_points : int, optional
        Number of points the tree is expected to hold, used to flag
        trees that cannot subdivide enough for that volume

    Returns
    -------
    is_valid : bool
        True if all parameters are valid
    warnings : list of str
        List of validation warnings/errors
    """
    warnings = []

    for param_name, (min_val, max_val, unit) in PARAM_BOUNDS.items():
        value = getattr(params, param_name, None)

        if value is None:
            continue

        if value < min_val:
            warnings.append(
                f"{param_name} = {value} {unit} is below minimum {min_val} {unit}"
            )
        elif value > max_val:
            warnings.append(
                f"{param_name} = {value} {unit} exceeds maximum {max_val} {unit}"
            )

    if params.max_depth == 0:
        warnings.append(
            "max_depth = 0 disables subdivision; every item stays on the root"
        )

    if expected_points is not None and expected_points > 0:
        # Leaves available at full depth, capped to avoid huge integers
        leaf_capacity = (4 ** min(params.max_depth, 30)) * max(params.max_items, 1)
        if leaf_capacity < expected_points:
            warnings.append(
                f"max_depth = {params.max_depth} with max_items = {params.max_items} "
                f"holds about {leaf_capacity} evenly spread points, fewer than the "
                f"expected {expected_points}; deepest leaves will overflow"
            )

    is_valid = len(warnings) == 0
    return is_valid, warnings


def validate_and_warn(
    params: QuadTreeParams,
    expected_points: Optional[int] = None,
) -> QuadTreeParams:
    """
    Validate parameters and print warnings.

    Parameters
    ----------
    params : QuadTreeParams
        Parameters to validate
    expected_points : int, optional
        Expected number of points (see validate_params)

    Returns
    -------
    params : QuadTreeParams
        Same parameters (for chaining)
    """
    is_valid, warnings = validate_params(params, expected_points=expected_points)

    if not is_valid:
        print(f"Parameter validation warnings ({len(warnings)}):")
        for warning in warnings:
            print(f"  - {warning}")

    return params
