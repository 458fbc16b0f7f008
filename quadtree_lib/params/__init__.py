"""Parameter presets and validation for quadtree construction."""

from .presets import (
    default,
    shallow_wide,
    deep_sparse,
    screen_space,
    debug,
    get_preset,
    list_presets,
    PRESETS,
)

from .validation import (
    validate_params,
    validate_and_warn,
    PARAM_BOUNDS,
)

__all__ = [
    # Presets
    "default",
    "shallow_wide",
    "deep_sparse",
    "screen_space",
    "debug",
    "get_preset",
    "list_presets",
    "PRESETS",
    # Validation
    "validate_params",
    "validate_and_warn",
    "PARAM_BOUNDS",
]
