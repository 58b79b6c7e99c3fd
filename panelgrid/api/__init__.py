"""
PanelGrid Core API

High-level API for host UIs driving a panel grid.

Modules:
- actions: Gesture translation (drop, resize handles) into grid updates
- session: Single-writer state container and reducer
"""

from .actions import GridActions, ActionResult, ResizeHandle
from .session import (
    Action,
    GridAction,
    GridState,
    PanelGridSession,
    generate_panel_id,
    panel_grid_reducer,
)

__all__ = [
    "GridActions",
    "ActionResult",
    "ResizeHandle",
    "Action",
    "GridAction",
    "GridState",
    "PanelGridSession",
    "generate_panel_id",
    "panel_grid_reducer",
]
