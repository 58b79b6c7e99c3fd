"""
Tests for the PanelGrid Session API.

Tests the reducer, panel add/remove, locks and collision-resolved updates.
"""

import logging

import pytest

from panelgrid.api.session import (
    Action,
    GridAction,
    GridState,
    PanelGridSession,
    generate_panel_id,
    panel_grid_reducer,
)
from panelgrid.config.profiles import GridConfig
from panelgrid.grid.abstraction import Panel, PanelSpec
from panelgrid.placement.rearrangement import no_rearrangement


def rects(panels):
    return {p.id: (p.x, p.y, p.w, p.h) for p in panels}


class TestSessionBasics:
    """Test session construction."""

    def test_default_config(self):
        session = PanelGridSession()
        assert session.column_count == 12
        assert session.panels == []

    def test_loads_host_mappings(self, six_column_config):
        session = PanelGridSession(
            panels=[{"id": "a", "x": 0, "y": 0, "w": 2, "h": 1, "lockPosition": True}],
            config=six_column_config,
        )
        assert session.get_panel("a") == Panel(id="a", x=0, y=0, w=2, h=1, lock_position=True)

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError, match="Duplicate panel ids"):
            PanelGridSession(panels=[Panel(id="a"), Panel(id="a", x=3)])

    def test_invalid_config_rejected(self):
        with pytest.raises(ValueError):
            PanelGridSession(config=GridConfig(column_count=0))

    def test_out_of_range_panels_clamped(self, six_column_config, caplog):
        with caplog.at_level(logging.WARNING, logger="panelgrid.api.session"):
            session = PanelGridSession(
                panels=[Panel(id="a", x=-1, y=0, w=9, h=0)],
                config=six_column_config,
            )
        assert rects(session.panels) == {"a": (0, 0, 6, 1)}
        assert "clamped" in caplog.text

    def test_panels_is_a_copy(self, session):
        session.panels.append(Panel(id="z"))
        assert session.get_panel("z") is None

    def test_panel_map(self, session):
        assert list(session.panel_map) == ["a", "b", "c"]


class TestReducer:
    """Test the pure reducer."""

    def test_update_replaces_panels(self):
        state = GridState(panels=[Panel(id="a")])
        new_state = panel_grid_reducer(
            state, Action(GridAction.UPDATE_PANELS, panels=[Panel(id="b")]), 6)
        assert [p.id for p in new_state.panels] == ["b"]
        assert [p.id for p in state.panels] == ["a"]

    def test_add_places_first_fit(self, row_layout):
        state = GridState(panels=row_layout)
        new_state = panel_grid_reducer(
            state, Action(GridAction.ADD_PANEL, spec=PanelSpec(id="n", w=3)), 6)
        assert new_state.panels[-1] == Panel(id="n", x=0, y=2, w=3, h=1)
        assert len(state.panels) == 3

    def test_remove(self, row_layout):
        state = GridState(panels=row_layout)
        new_state = panel_grid_reducer(state, Action(GridAction.REMOVE_PANEL, panel_id="b"), 6)
        assert [p.id for p in new_state.panels] == ["a", "c"]

    def test_lock_flags(self, row_layout):
        state = GridState(panels=row_layout)
        locked = panel_grid_reducer(state, Action(GridAction.LOCK_PANEL_SIZE, panel_id="a"), 6)
        assert locked.panels[0].lock_size is True
        unlocked = panel_grid_reducer(locked, Action(GridAction.UNLOCK_PANEL_SIZE, panel_id="a"), 6)
        assert unlocked.panels[0].lock_size is False

    def test_generated_ids(self):
        first, second = generate_panel_id(), generate_panel_id()
        assert len(first) == 13
        assert first != second


class TestAddRemove:
    """Test adding and removing panels."""

    def test_add_panel_kwargs(self, session):
        added = session.add_panel(id="chart", w=2, h=1)
        assert added == Panel(id="chart", x=0, y=2, w=2, h=1)
        assert session.get_panel("chart") == added

    def test_add_panel_generates_id(self, empty_session):
        added = empty_session.add_panel(PanelSpec(w=2, h=2))
        assert isinstance(added.id, str)
        assert (added.x, added.y) == (0, 0)

    def test_add_existing_id(self, session):
        with pytest.raises(ValueError, match="already exists"):
            session.add_panel(id="a")

    def test_remove_panel(self, session):
        assert session.remove_panel("b") is True
        assert session.get_panel("b") is None
        assert session.remove_panel("b") is False

    def test_remove_without_compaction_keeps_gap(self, six_column_config):
        stacked = [
            Panel(id="a", x=0, y=0, w=2, h=2),
            Panel(id="b", x=0, y=2, w=2, h=2),
            Panel(id="c", x=0, y=4, w=2, h=2),
        ]
        session = PanelGridSession(panels=stacked, config=six_column_config)
        session.remove_panel("b")
        assert session.get_panel("c").y == 4

    def test_remove_with_compaction(self, six_column_config):
        six_column_config.compact_on_remove = True
        stacked = [
            Panel(id="a", x=0, y=0, w=2, h=2),
            Panel(id="b", x=0, y=2, w=2, h=2),
            Panel(id="c", x=0, y=4, w=2, h=2),
        ]
        session = PanelGridSession(panels=stacked, config=six_column_config)
        session.remove_panel("b")
        assert session.get_panel("c").y == 2
        assert session.animating_panels == {"c"}


class TestLocks:
    """Test lock toggles."""

    def test_lock_and_unlock(self, session):
        assert session.lock_panel_position("a") is True
        assert session.get_panel("a").lock_position is True
        assert session.unlock_panel_position("a") is True
        assert session.get_panel("a").lock_position is False

        assert session.lock_panel_size("b") is True
        assert session.get_panel("b").lock_size is True
        assert session.unlock_panel_size("b") is True
        assert session.get_panel("b").lock_size is False

    def test_unknown_panel(self, session):
        assert session.lock_panel_size("zz") is False
        assert session.unlock_panel_position("zz") is False


class TestUpdatePanel:
    """Test collision-resolved updates."""

    def test_update_pushes_neighbours(self, session):
        result = session.update_panel(Panel(id="a", x=2, y=0, w=2, h=2))
        assert rects(result) == {
            "a": (2, 0, 2, 2),
            "b": (4, 0, 2, 2),
            "c": (4, 2, 2, 2),
        }
        assert rects(session.panels) == rects(result)
        assert session.animating_panels == {"b", "c"}

    def test_rejected_update_keeps_layout(self, session, caplog):
        session.lock_panel_position("c")
        before = session.panels
        with caplog.at_level(logging.INFO, logger="panelgrid.api.session"):
            session.update_panel(Panel(id="a", x=2, y=0, w=2, h=2))
        assert session.panels == before
        assert session.animating_panels == set()
        assert "rejected" in caplog.text

    def test_custom_strategy(self, row_layout, six_column_config):
        session = PanelGridSession(panels=row_layout, config=six_column_config,
                                   rearrangement=no_rearrangement)
        session.update_panel(Panel(id="a", x=1, y=0, w=2, h=2))
        assert session.get_panel("b").x == 2
        assert session.animating_panels == set()

    def test_compact(self, six_column_config):
        session = PanelGridSession(
            panels=[Panel(id="a", x=0, y=0), Panel(id="b", x=0, y=5)],
            config=six_column_config,
        )
        session.compact()
        assert session.get_panel("b").y == 1
        assert session.animating_panels == {"b"}


class TestExportState:
    """Test serialization for the host UI."""

    def test_camel_case(self, session):
        exported = session.export_state()
        assert exported[0] == {"id": "a", "x": 0, "y": 0, "w": 2, "h": 2,
                               "lockPosition": False, "lockSize": False}

    def test_snake_case(self, session):
        assert "lock_size" in session.export_state(camel_case=False)[0]

    def test_reload(self, session, six_column_config):
        session.update_panel(Panel(id="a", x=2, y=0, w=2, h=2))
        restored = PanelGridSession(panels=session.export_state(), config=six_column_config)
        assert restored.panels == session.panels
