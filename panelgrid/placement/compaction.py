"""
Row Compaction

Removes fully empty rows inside a layout and pulls the panels below them
upward. Rows above the topmost panel are left alone. Position-locked panels
never move, so an empty row is only removed when no locked panel starts
below it.
"""

import logging
from dataclasses import replace
from typing import List, Set

from ..grid.abstraction import Panel

logger = logging.getLogger(__name__)


def find_empty_rows(panels: List[Panel]) -> List[int]:
    """
    Find rows no panel occupies, between the topmost panel and the layout bottom.

    Returns:
        Sorted row indices
    """
    if not panels:
        return []

    occupied: Set[int] = set()
    for panel in panels:
        occupied.update(range(panel.y, panel.y + panel.h))

    top = min(panel.y for panel in panels)
    bottom = max(panel.y + panel.h for panel in panels)

    return [row for row in range(top, bottom) if row not in occupied]


def compact_layout(panels: List[Panel], column_count: int) -> List[Panel]:
    """
    Shift panels up over empty rows.

    Args:
        panels: Current panel set (not modified)
        column_count: Grid width in cells; compaction never changes columns

    Returns:
        New panel set in input order; unchanged panels are returned as-is
    """
    empty_rows = find_empty_rows(panels)

    locked_tops = [panel.y for panel in panels if panel.lock_position]
    if locked_tops:
        lowest_locked = max(locked_tops)
        empty_rows = [row for row in empty_rows if row > lowest_locked]

    if not empty_rows:
        return list(panels)

    result: List[Panel] = []
    for panel in panels:
        # Every removed row is wholly above or below a panel
        shift = sum(1 for row in empty_rows if row < panel.y)
        if shift and not panel.lock_position:
            result.append(replace(panel, y=panel.y - shift))
        else:
            result.append(panel)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Compaction: removed_rows=%d panels=%d columns=%d",
            len(empty_rows), len(panels), column_count,
        )
    return result
