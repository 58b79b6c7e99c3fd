"""
PanelGrid - Drag-and-resize panel grid layout engine

Keeps a set of rectangular panels on a fixed-column grid free of overlaps
after every move or resize, respecting position and size locks.
"""

__version__ = "0.1.0"
__author__ = "PanelGrid Team"

from .grid.abstraction import Panel, PanelId, PanelSpec
from .placement.collision import rectangles_overlap, detect_collisions, has_collision
from .placement.rearrangement import RearrangementFunction, rearrange_panels
from .placement.compaction import compact_layout
from .placement.finder import find_placement
from .config.profiles import GridConfig, get_profile
from .api.session import PanelGridSession

__all__ = [
    "Panel",
    "PanelId",
    "PanelSpec",
    "rectangles_overlap",
    "detect_collisions",
    "has_collision",
    "RearrangementFunction",
    "rearrange_panels",
    "compact_layout",
    "find_placement",
    "GridConfig",
    "get_profile",
    "PanelGridSession",
]
