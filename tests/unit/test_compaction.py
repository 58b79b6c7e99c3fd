"""Tests for row compaction."""

from panelgrid.grid.abstraction import Panel
from panelgrid.placement.compaction import compact_layout, find_empty_rows


class TestFindEmptyRows:
    """Test empty row detection."""

    def test_empty_layout(self):
        assert find_empty_rows([]) == []

    def test_gap_rows(self):
        panels = [Panel(id="a", x=0, y=0), Panel(id="b", x=0, y=3, h=2)]
        assert find_empty_rows(panels) == [1, 2]

    def test_rows_above_top_ignored(self):
        panels = [Panel(id="a", x=0, y=3), Panel(id="b", x=2, y=3)]
        assert find_empty_rows(panels) == []

    def test_tall_panel_covers_rows(self):
        panels = [Panel(id="tall", x=0, y=0, h=4), Panel(id="b", x=1, y=3)]
        assert find_empty_rows(panels) == []


class TestCompactLayout:
    """Test pulling panels up over empty rows."""

    def test_removes_gap(self):
        panels = [Panel(id="a", x=0, y=0), Panel(id="b", x=0, y=3, h=2)]
        result = compact_layout(panels, 6)
        assert [(p.id, p.y) for p in result] == [("a", 0), ("b", 1)]

    def test_leaves_rows_above_top(self):
        panels = [Panel(id="a", x=0, y=3), Panel(id="b", x=0, y=6)]
        result = compact_layout(panels, 6)
        assert [(p.id, p.y) for p in result] == [("a", 3), ("b", 4)]

    def test_columns_unchanged(self):
        panels = [Panel(id="a", x=1, y=0, w=2), Panel(id="b", x=4, y=5, w=2)]
        result = compact_layout(panels, 6)
        assert [(p.x, p.w) for p in result] == [(1, 2), (4, 2)]

    def test_no_empty_rows_returns_same_panels(self, row_layout):
        result = compact_layout(row_layout, 6)
        assert result == row_layout
        assert all(a is b for a, b in zip(result, row_layout))

    def test_rows_above_locked_panel_kept(self):
        panels = [
            Panel(id="a", x=0, y=0),
            Panel(id="locked", x=0, y=3, lock_position=True),
        ]
        assert compact_layout(panels, 6) == panels

    def test_rows_below_locked_panel_removed(self):
        panels = [
            Panel(id="a", x=0, y=0),
            Panel(id="locked", x=1, y=1, lock_position=True),
            Panel(id="b", x=0, y=4),
        ]
        result = compact_layout(panels, 6)
        assert [(p.id, p.y) for p in result] == [("a", 0), ("locked", 1), ("b", 2)]

    def test_input_not_modified(self):
        panels = [Panel(id="a", x=0, y=0), Panel(id="b", x=0, y=3)]
        snapshot = list(panels)
        compact_layout(panels, 6)
        assert panels == snapshot
