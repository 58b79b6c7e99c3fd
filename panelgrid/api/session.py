"""
PanelGrid Session State Management

Single-writer state container for a panel grid. All changes go through a pure
reducer that replaces the whole panel list, so each rearrangement result is
fully applied before the next gesture reads the state.
"""

import logging
import uuid
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Set

from ..config.profiles import GridConfig
from ..grid.abstraction import Panel, PanelId, PanelSpec, duplicate_ids, find_panel, panel_map
from ..placement.compaction import compact_layout
from ..placement.diff import changed_panel_ids
from ..placement.finder import place_new_panel
from ..placement.rearrangement import RearrangementFunction, rearrange_panels

logger = logging.getLogger(__name__)


class GridAction(Enum):
    """State transitions understood by the reducer."""
    UPDATE_PANELS = "update_panels"
    ADD_PANEL = "add_panel"
    REMOVE_PANEL = "remove_panel"
    LOCK_PANEL_SIZE = "lock_panel_size"
    UNLOCK_PANEL_SIZE = "unlock_panel_size"
    LOCK_PANEL_POSITION = "lock_panel_position"
    UNLOCK_PANEL_POSITION = "unlock_panel_position"


@dataclass
class Action:
    """A reducer action and its payload."""
    type: GridAction
    panels: Optional[List[Panel]] = None  # UPDATE_PANELS
    spec: Optional[PanelSpec] = None  # ADD_PANEL
    panel_id: Optional[PanelId] = None  # REMOVE / LOCK / UNLOCK


@dataclass(frozen=True)
class GridState:
    """Immutable snapshot of the grid."""
    panels: List[Panel] = field(default_factory=list)


def generate_panel_id() -> str:
    """Random 13-character id for panels added without one."""
    return uuid.uuid4().hex[:13]


def _set_flag(panels: List[Panel], panel_id: PanelId, **flags: bool) -> List[Panel]:
    return [replace(p, **flags) if p.id == panel_id else p for p in panels]


def panel_grid_reducer(state: GridState, action: Action, column_count: int) -> GridState:
    """
    Apply one action to a state snapshot.

    Pure: the input state is never modified. Unknown actions return the same
    state object.
    """
    if action.type == GridAction.UPDATE_PANELS:
        return replace(state, panels=list(action.panels or []))

    if action.type == GridAction.ADD_PANEL:
        spec = action.spec or PanelSpec()
        new_panel = place_new_panel(spec, state.panels, column_count,
                                    panel_id=generate_panel_id())
        return replace(state, panels=[*state.panels, new_panel])

    if action.type == GridAction.REMOVE_PANEL:
        return replace(state, panels=[p for p in state.panels if p.id != action.panel_id])

    if action.type == GridAction.LOCK_PANEL_SIZE:
        return replace(state, panels=_set_flag(state.panels, action.panel_id, lock_size=True))

    if action.type == GridAction.UNLOCK_PANEL_SIZE:
        return replace(state, panels=_set_flag(state.panels, action.panel_id, lock_size=False))

    if action.type == GridAction.LOCK_PANEL_POSITION:
        return replace(state, panels=_set_flag(state.panels, action.panel_id, lock_position=True))

    if action.type == GridAction.UNLOCK_PANEL_POSITION:
        return replace(state, panels=_set_flag(state.panels, action.panel_id, lock_position=False))

    return state


class PanelGridSession:
    """
    Owns the authoritative panel list for one grid.

    Provides:
    - Add/remove panels (first-fit placement, optional compaction)
    - Lock/unlock panel size and position
    - Collision-resolved updates through a pluggable strategy
    - Tracking of panels displaced by the last update
    """

    def __init__(self, panels: Optional[List[Any]] = None,
                 config: Optional[GridConfig] = None,
                 rearrangement: Optional[RearrangementFunction] = None):
        """
        Initialize the session.

        Args:
            panels: Initial panels (Panel objects or host UI mappings)
            config: Grid settings (defaults to a 12-column GridConfig)
            rearrangement: Strategy replacing the default rearrange_panels

        Raises:
            ValueError: On invalid config or duplicate panel ids
        """
        self.config = (config or GridConfig()).validate()
        self.rearrangement: RearrangementFunction = rearrangement or rearrange_panels
        self._state = GridState(panels=self._load(panels or []))
        self._animating: Set[PanelId] = set()

    def _load(self, raw_panels: List[Any]) -> List[Panel]:
        panels = [p if isinstance(p, Panel) else Panel.from_dict(p) for p in raw_panels]

        duplicates = duplicate_ids(panels)
        if duplicates:
            raise ValueError(f"Duplicate panel ids: {', '.join(repr(d) for d in duplicates)}")

        loaded = []
        for panel in panels:
            fixed = panel.normalized(self.config.column_count)
            if fixed is not panel:
                logger.warning(
                    "Panel %r clamped from (%d, %d, %d, %d) to (%d, %d, %d, %d)",
                    panel.id, panel.x, panel.y, panel.w, panel.h,
                    fixed.x, fixed.y, fixed.w, fixed.h,
                )
            loaded.append(fixed)
        return loaded

    @property
    def column_count(self) -> int:
        return self.config.column_count

    @property
    def state(self) -> GridState:
        return self._state

    @property
    def panels(self) -> List[Panel]:
        """Current panel list (a copy)."""
        return list(self._state.panels)

    @property
    def panel_map(self) -> Dict[PanelId, Panel]:
        return panel_map(self._state.panels)

    @property
    def animating_panels(self) -> Set[PanelId]:
        """Panels displaced by the last update, excluding the updated panel."""
        return set(self._animating)

    def get_panel(self, panel_id: PanelId) -> Optional[Panel]:
        return find_panel(self._state.panels, panel_id)

    def dispatch(self, action: Action) -> GridState:
        """Run an action through the reducer and store the new state."""
        self._state = panel_grid_reducer(self._state, action, self.column_count)
        return self._state

    def add_panel(self, spec: Optional[PanelSpec] = None, **kwargs: Any) -> Panel:
        """
        Add a panel at the topmost-leftmost free position.

        Args:
            spec: Panel request; alternatively pass id/w/h/lock flags as
                  keyword arguments

        Returns:
            The placed panel

        Raises:
            ValueError: If the requested id is already used
        """
        if spec is None:
            spec = PanelSpec.from_dict(kwargs)
        if spec.id is not None and self.get_panel(spec.id) is not None:
            raise ValueError(f"Panel id {spec.id!r} already exists")

        self.dispatch(Action(GridAction.ADD_PANEL, spec=spec))
        added = self._state.panels[-1]
        logger.info("Added panel %r at (%d, %d) size %dx%d",
                    added.id, added.x, added.y, added.w, added.h)
        return added

    def remove_panel(self, panel_id: PanelId) -> bool:
        """
        Remove a panel, compacting empty rows when the config asks for it.

        Returns:
            True if a panel was removed
        """
        if self.get_panel(panel_id) is None:
            return False

        self.dispatch(Action(GridAction.REMOVE_PANEL, panel_id=panel_id))
        if self.config.compact_on_remove:
            compacted = compact_layout(self._state.panels, self.column_count)
            self._animating = set(changed_panel_ids(self._state.panels, compacted))
            self.dispatch(Action(GridAction.UPDATE_PANELS, panels=compacted))
        return True

    def lock_panel_size(self, panel_id: PanelId) -> bool:
        return self._toggle(GridAction.LOCK_PANEL_SIZE, panel_id)

    def unlock_panel_size(self, panel_id: PanelId) -> bool:
        return self._toggle(GridAction.UNLOCK_PANEL_SIZE, panel_id)

    def lock_panel_position(self, panel_id: PanelId) -> bool:
        return self._toggle(GridAction.LOCK_PANEL_POSITION, panel_id)

    def unlock_panel_position(self, panel_id: PanelId) -> bool:
        return self._toggle(GridAction.UNLOCK_PANEL_POSITION, panel_id)

    def _toggle(self, action_type: GridAction, panel_id: PanelId) -> bool:
        if self.get_panel(panel_id) is None:
            return False
        self.dispatch(Action(action_type, panel_id=panel_id))
        return True

    def update_panel(self, candidate: Panel) -> List[Panel]:
        """
        Apply a moved/resized panel through the installed strategy.

        Args:
            candidate: Requested rectangle for an existing panel

        Returns:
            The new panel list (the rearrangement result)
        """
        current = list(self._state.panels)
        next_panels = self.rearrangement(candidate, current, self.column_count)

        self._animating = set(changed_panel_ids(current, next_panels, exclude_id=candidate.id))

        previous = find_panel(current, candidate.id)
        result = find_panel(next_panels, candidate.id)
        if previous is not None and result is not None and \
                not previous.same_rect(candidate) and result.same_rect(previous) and \
                not self._animating:
            logger.info("Update of panel %r rejected; layout unchanged", candidate.id)

        self.dispatch(Action(GridAction.UPDATE_PANELS, panels=next_panels))
        return list(next_panels)

    def compact(self) -> List[Panel]:
        """Remove empty rows on demand."""
        compacted = compact_layout(self._state.panels, self.column_count)
        self._animating = set(changed_panel_ids(self._state.panels, compacted))
        self.dispatch(Action(GridAction.UPDATE_PANELS, panels=compacted))
        return list(compacted)

    def export_state(self, camel_case: bool = True) -> List[Dict[str, Any]]:
        """Serialize the panel list for the host UI."""
        return [panel.to_dict(camel_case=camel_case) for panel in self._state.panels]
