"""Grid data model and pixel/grid coordinate conversion."""

from .abstraction import (
    Panel,
    PanelId,
    PanelSet,
    PanelSpec,
    panel_map,
    find_panel,
    layout_bottom,
    duplicate_ids,
)
from .conversion import (
    pixels_to_grid_size,
    pixels_to_grid_position,
    grid_to_pixels,
    grid_position_to_pixels,
    snap_to_grid,
)

__all__ = [
    # Core abstractions
    "Panel",
    "PanelId",
    "PanelSet",
    "PanelSpec",
    "panel_map",
    "find_panel",
    "layout_bottom",
    "duplicate_ids",
    # Coordinate conversion
    "pixels_to_grid_size",
    "pixels_to_grid_position",
    "grid_to_pixels",
    "grid_position_to_pixels",
    "snap_to_grid",
]
