"""
PanelGrid Core API: Gesture Actions

Turns completed pointer gestures, already captured by the host UI, into grid
updates. Pixel offsets are snapped to grid cells and handed to the session,
which runs the installed rearrangement strategy.

Usage:
    from panelgrid.api.actions import GridActions
    actions = GridActions(session)
    actions.drop_panel("chart", left_px=190, top_px=0)
    actions.resize_panel("chart", "se", dx_px=88, dy_px=0)
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, List, Union

from ..grid.abstraction import Panel, PanelId
from ..grid.conversion import (
    grid_position_to_pixels,
    grid_to_pixels,
    pixels_to_grid_position,
    pixels_to_grid_size,
)
from ..placement.constraints import constrain_to_grid
from ..placement.diff import changed_panel_ids, layouts_equal
from .session import PanelGridSession


class ResizeHandle(Enum):
    """Resize handle positions (compass points)."""
    N = "n"
    S = "s"
    E = "e"
    W = "w"
    NE = "ne"
    NW = "nw"
    SE = "se"
    SW = "sw"

    @property
    def moves_top(self) -> bool:
        return "n" in self.value

    @property
    def moves_left(self) -> bool:
        return "w" in self.value

    @property
    def vertical_only(self) -> bool:
        return self in (ResizeHandle.N, ResizeHandle.S)

    @property
    def horizontal_only(self) -> bool:
        return self in (ResizeHandle.E, ResizeHandle.W)


@dataclass
class ActionResult:
    """Result of a gesture action."""
    success: bool
    message: str
    modified_ids: List[PanelId]


class GridActions:
    """Gesture-level operations on a session."""

    def __init__(self, session: PanelGridSession):
        self.session = session

    @property
    def _base_size(self) -> float:
        return self.session.config.base_size

    @property
    def _gap(self) -> float:
        return self.session.config.gap

    def panel_style(self, panel: Panel) -> Dict[str, float]:
        """Pixel box of a panel for rendering."""
        base_size, gap = self._base_size, self._gap
        return {
            "top": grid_position_to_pixels(panel.y, base_size, gap),
            "left": grid_position_to_pixels(panel.x, base_size, gap),
            "width": grid_to_pixels(panel.w, base_size, gap),
            "height": grid_to_pixels(panel.h, base_size, gap),
        }

    def drop_panel(self, panel_id: PanelId, left_px: float, top_px: float) -> ActionResult:
        """
        Finish a drag: snap the dropped pixel origin to the grid and apply it.

        Args:
            panel_id: Dragged panel
            left_px: Dropped left offset in the grid container (pixels)
            top_px: Dropped top offset in the grid container (pixels)
        """
        panel = self.session.get_panel(panel_id)
        if not panel:
            return ActionResult(False, f"Panel {panel_id!r} not found", [])

        if panel.lock_position:
            return ActionResult(False, f"Panel {panel_id!r} is position-locked", [])

        column_count = self.session.column_count
        x = pixels_to_grid_position(left_px, self._base_size, self._gap, column_count, panel.w)
        y = pixels_to_grid_position(top_px, self._base_size, self._gap)

        return self._apply(panel, panel.moved_to(x, y), "Moved")

    def resize_panel(self, panel_id: PanelId, handle: Union[ResizeHandle, str],
                     dx_px: float, dy_px: float) -> ActionResult:
        """
        Finish a resize gesture started on one of the panel's handles.

        North and west handles move the panel origin by the pointer delta and
        shrink the panel by the same amount.

        Args:
            panel_id: Resized panel
            handle: Handle that was dragged (e.g. "se")
            dx_px: Horizontal pointer delta in pixels
            dy_px: Vertical pointer delta in pixels
        """
        panel = self.session.get_panel(panel_id)
        if not panel:
            return ActionResult(False, f"Panel {panel_id!r} not found", [])

        try:
            handle = ResizeHandle(handle)
        except ValueError:
            return ActionResult(False, f"Unknown resize handle {handle!r}", [])

        if handle.value not in self.session.config.resize_handles:
            return ActionResult(False, f"Resize handle '{handle.value}' is not enabled", [])

        if panel.lock_size:
            return ActionResult(False, f"Panel {panel_id!r} is size-locked", [])

        if panel.lock_position and (handle.moves_top or handle.moves_left):
            return ActionResult(False, f"Panel {panel_id!r} is position-locked", [])

        base_size, gap = self._base_size, self._gap
        column_count = self.session.column_count

        style = self.panel_style(panel)
        initial_left, initial_top = style["left"], style["top"]
        initial_width, initial_height = style["width"], style["height"]

        if handle.moves_left:
            new_width = max(initial_width - dx_px, 1)
        elif handle.vertical_only:
            new_width = initial_width
        else:
            new_width = initial_width + dx_px

        if handle.moves_top:
            new_height = max(initial_height - dy_px, 1)
        elif handle.horizontal_only:
            new_height = initial_height
        else:
            new_height = initial_height + dy_px

        left = initial_left + dx_px if handle.moves_left else initial_left
        top = initial_top + dy_px if handle.moves_top else initial_top

        # Origin first: the width clamp depends on it
        x = pixels_to_grid_position(left, base_size, gap, column_count, panel.w)
        y = pixels_to_grid_position(top, base_size, gap)
        w = pixels_to_grid_size(new_width, base_size, gap, column_count, x)
        h = pixels_to_grid_size(new_height, base_size, gap)

        return self._apply(panel, replace(panel, x=x, y=y, w=w, h=h), "Resized")

    def move_panel(self, panel_id: PanelId, x: int, y: int) -> ActionResult:
        """Move a panel to a grid origin."""
        panel = self.session.get_panel(panel_id)
        if not panel:
            return ActionResult(False, f"Panel {panel_id!r} not found", [])

        if panel.lock_position:
            return ActionResult(False, f"Panel {panel_id!r} is position-locked", [])

        return self._apply(panel, panel.moved_to(x, y), "Moved")

    def set_panel_size(self, panel_id: PanelId, w: int, h: int) -> ActionResult:
        """Resize a panel in place (grid units)."""
        panel = self.session.get_panel(panel_id)
        if not panel:
            return ActionResult(False, f"Panel {panel_id!r} not found", [])

        if panel.lock_size:
            return ActionResult(False, f"Panel {panel_id!r} is size-locked", [])

        return self._apply(panel, panel.resized_to(w, h), "Resized")

    def _apply(self, panel: Panel, candidate: Panel, verb: str) -> ActionResult:
        column_count = self.session.column_count
        if constrain_to_grid(candidate.normalized(column_count), column_count).same_rect(panel):
            return ActionResult(True, f"Panel {panel.id!r} unchanged", [])

        before = self.session.panels
        after = self.session.update_panel(candidate)

        if layouts_equal(before, after):
            return ActionResult(
                False,
                f"{verb} panel {panel.id!r} rolled back: blocked by a position-locked panel",
                [],
            )

        modified = changed_panel_ids(before, after)
        result = self.session.get_panel(panel.id)
        return ActionResult(
            True,
            f"{verb} panel {panel.id!r} to ({result.x}, {result.y}) size {result.w}x{result.h}",
            modified,
        )
