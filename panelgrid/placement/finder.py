"""
Placement Finder

First-fit search for a brand-new panel: scans rows top to bottom and columns
left to right and returns the first origin where the panel fits without
overlapping anything.
"""

import logging
from typing import Any, List, Tuple

from ..grid.abstraction import Panel, PanelSpec, layout_bottom
from .collision import has_collision

logger = logging.getLogger(__name__)

# Rows searched beyond the current layout bottom (and overall minimum)
EXTRA_SEARCH_ROWS = 100
MIN_SEARCH_ROWS = 1000

# Sentinel id for the candidate; never equal to a caller id
_CANDIDATE_ID = object()


def find_placement(new_panel: PanelSpec, existing_panels: List[Panel],
                   column_count: int) -> Tuple[int, int]:
    """
    Find the topmost-leftmost free origin for a new panel.

    Args:
        new_panel: Size of the panel to add (w/h default to 1)
        existing_panels: Current panel set
        column_count: Grid width in cells

    Returns:
        (x, y). When nothing fits within the search bound (or the panel is
        wider than the grid), (0, layout bottom) is returned even though it
        may overlap.
    """
    w = max(1, new_panel.w or 1)
    h = max(1, new_panel.h or 1)

    panels = {panel.id: panel for panel in existing_panels}
    max_existing_y = layout_bottom(existing_panels)
    max_rows = max(max_existing_y + EXTRA_SEARCH_ROWS, MIN_SEARCH_ROWS)

    for y in range(max_rows):
        for x in range(column_count - w + 1):
            candidate = _Rect(x, y, w, h)
            if not has_collision(candidate, _CANDIDATE_ID, panels):
                return (x, y)

    logger.warning(
        "No free cell for %dx%d panel within %d rows; placing at bottom (row %d)",
        w, h, max_rows, max_existing_y,
    )
    return (0, max_existing_y)


class _Rect:
    """Bare rectangle used for candidate tests."""

    __slots__ = ("x", "y", "w", "h")

    def __init__(self, x: int, y: int, w: int, h: int):
        self.x = x
        self.y = y
        self.w = w
        self.h = h

    def __repr__(self) -> str:
        return f"_Rect({self.x}, {self.y}, {self.w}, {self.h})"


def place_new_panel(new_panel: PanelSpec, existing_panels: List[Panel],
                    column_count: int, panel_id: Any = None) -> Panel:
    """
    Build a Panel for a new-panel request at the first free origin.

    Args:
        new_panel: Panel to add (id, size, locks)
        existing_panels: Current panel set
        column_count: Grid width in cells
        panel_id: Id to use when the request has none
    """
    x, y = find_placement(new_panel, existing_panels, column_count)
    pid = new_panel.id if new_panel.id is not None else panel_id
    if pid is None:
        raise ValueError("New panel needs an id")
    return Panel(
        id=pid,
        x=x,
        y=y,
        w=max(1, new_panel.w or 1),
        h=max(1, new_panel.h or 1),
        lock_position=new_panel.lock_position,
        lock_size=new_panel.lock_size,
    )
