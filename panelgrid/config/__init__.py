"""Grid configuration profiles."""

from .profiles import (
    GridConfig,
    PROFILES,
    VALID_RESIZE_HANDLES,
    get_profile,
    list_profiles,
    load_grid_config,
)

__all__ = [
    "GridConfig",
    "PROFILES",
    "VALID_RESIZE_HANDLES",
    "get_profile",
    "list_profiles",
    "load_grid_config",
]
