"""
Grid Boundary Constraint

Keeps a panel inside the column range and below row zero. Applied to the
panel being moved or resized only; panels displaced by pushes already land
inside the grid.
"""

from dataclasses import replace

from ..grid.abstraction import Panel


def constrain_to_grid(panel: Panel, column_count: int) -> Panel:
    """
    Clamp a panel's origin into the grid.

    x is clamped to [0, max(0, column_count - w)] and y to >= 0. Size is left
    untouched.
    """
    max_x = max(0, column_count - panel.w)
    constrained_x = max(0, min(panel.x, max_x))
    constrained_y = max(0, panel.y)

    if (constrained_x, constrained_y) == (panel.x, panel.y):
        return panel
    return replace(panel, x=constrained_x, y=constrained_y)


def fits_grid(panel: Panel, column_count: int) -> bool:
    """Check the boundary invariant for one panel."""
    return panel.x >= 0 and panel.y >= 0 and panel.x + panel.w <= column_count
