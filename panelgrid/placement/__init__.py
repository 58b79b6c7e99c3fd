"""Collision detection, rearrangement, compaction and first-fit placement."""

from .collision import (
    rectangles_overlap,
    detect_collisions,
    has_collision,
    find_overlapping_pairs,
)
from .push import Push, PushDirection, calculate_push, find_new_position
from .constraints import constrain_to_grid, fits_grid
from .rearrangement import (
    MAX_PROCESS_COUNT,
    PanelRearranger,
    RearrangementFunction,
    RearrangementReport,
    rearrange_panels,
    rearrange_with_report,
    push_down_rearrangement,
    no_rearrangement,
)
from .compaction import compact_layout, find_empty_rows
from .finder import find_placement, place_new_panel
from .diff import changed_panel_ids, layouts_equal

__all__ = [
    "rectangles_overlap",
    "detect_collisions",
    "has_collision",
    "find_overlapping_pairs",
    "Push",
    "PushDirection",
    "calculate_push",
    "find_new_position",
    "constrain_to_grid",
    "fits_grid",
    "MAX_PROCESS_COUNT",
    "PanelRearranger",
    "RearrangementFunction",
    "RearrangementReport",
    "rearrange_panels",
    "rearrange_with_report",
    "push_down_rearrangement",
    "no_rearrangement",
    "compact_layout",
    "find_empty_rows",
    "find_placement",
    "place_new_panel",
    "changed_panel_ids",
    "layouts_equal",
]
