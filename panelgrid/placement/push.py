"""
Push Resolution

Computes how far a colliding panel must be displaced to clear the panel that
pushed it. Horizontal (rightward) pushes are preferred; a vertical (downward)
push is used when the panel would leave the grid, and a one-row nudge
guarantees progress when neither distance is positive.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..grid.abstraction import Panel


class PushDirection(Enum):
    """Direction of a collision push."""
    RIGHT = "right"
    DOWN = "down"


@dataclass(frozen=True)
class Push:
    """A candidate displacement for a pushed panel."""
    direction: PushDirection
    distance: int


def calculate_push(pusher: Panel, pushed: Panel, column_count: int) -> Optional[Push]:
    """
    Calculate the minimal push that separates pushed from pusher.

    Args:
        pusher: Panel that triggered the collision check
        pushed: Panel being displaced
        column_count: Grid width in cells

    Returns:
        Push, or None when no positive displacement exists
    """
    push_right = pusher.x + pusher.w - pushed.x
    can_push_right = pushed.x + pushed.w + push_right <= column_count

    push_down = pusher.y + pusher.h - pushed.y

    # Priority 1: right, if the panel stays inside the grid
    if can_push_right and push_right > 0:
        return Push(PushDirection.RIGHT, push_right)

    # Priority 2: down
    if push_down > 0:
        return Push(PushDirection.DOWN, push_down)

    return None


def find_new_position(panel: Panel, pusher: Panel, column_count: int) -> Tuple[int, int]:
    """
    Find where a panel lands after being pushed away from pusher.

    Returns:
        (x, y) of the displaced panel
    """
    push = calculate_push(pusher, panel, column_count)

    if push is None:
        # Degenerate overlap: nudge down one row
        return (panel.x, panel.y + 1)

    if push.direction == PushDirection.RIGHT:
        new_x = panel.x + push.distance
        if new_x + panel.w <= column_count:
            return (new_x, panel.y)

    return (panel.x, panel.y + push.distance)
