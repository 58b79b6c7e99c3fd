"""
Shared test fixtures for PanelGrid tests.

Provides reusable panel layouts, grid configs and sessions
for testing the rearrangement engine and the API layer.
"""

import pytest
from typing import List

from panelgrid.grid.abstraction import Panel
from panelgrid.config.profiles import GridConfig
from panelgrid.api.session import PanelGridSession


@pytest.fixture
def row_layout() -> List[Panel]:
    """Three 2x2 panels side by side on a 6-column grid."""
    return [
        Panel(id="a", x=0, y=0, w=2, h=2),
        Panel(id="b", x=2, y=0, w=2, h=2),
        Panel(id="c", x=4, y=0, w=2, h=2),
    ]


@pytest.fixture
def chain_layout() -> List[Panel]:
    """Layout where a move onto panel 2 cascades into panel 3."""
    return [
        Panel(id=1, x=4, y=4, w=2, h=2),
        Panel(id=2, x=1, y=1, w=2, h=2),
        Panel(id=3, x=3, y=2, w=2, h=2),
    ]


@pytest.fixture
def locked_layout() -> List[Panel]:
    """Row of three panels with the rightmost one position-locked."""
    return [
        Panel(id=1, x=0, y=0, w=2, h=2),
        Panel(id=2, x=2, y=0, w=2, h=2),
        Panel(id=3, x=4, y=0, w=2, h=2, lock_position=True),
    ]


@pytest.fixture
def complex_layout() -> List[Panel]:
    """Two rows of mixed-size panels on a 6-column grid."""
    return [
        Panel(id="panel-1", x=0, y=0, w=2, h=2),
        Panel(id="panel-2", x=2, y=0, w=2, h=2),
        Panel(id="panel-3", x=4, y=0, w=2, h=1),
        Panel(id="panel-4", x=0, y=2, w=1, h=1),
        Panel(id="panel-5", x=1, y=2, w=1, h=1),
        Panel(id="panel-6", x=2, y=2, w=2, h=1),
    ]


@pytest.fixture
def dashboard_layout() -> List[Panel]:
    """Full 12-column dashboard: four 3x2 tiles over three 4x1 strips."""
    return [
        Panel(id="p1", x=0, y=0, w=3, h=2),
        Panel(id="p2", x=3, y=0, w=3, h=2),
        Panel(id="p3", x=6, y=0, w=3, h=2),
        Panel(id="p4", x=9, y=0, w=3, h=2),
        Panel(id="p5", x=0, y=2, w=4, h=1),
        Panel(id="p6", x=4, y=2, w=4, h=1),
        Panel(id="p7", x=8, y=2, w=4, h=1),
    ]


@pytest.fixture
def six_column_config() -> GridConfig:
    """6-column config with every resize handle enabled."""
    return GridConfig(
        name="test",
        column_count=6,
        gap=10,
        base_size=50,
        resize_handles=["n", "s", "e", "w", "ne", "nw", "se", "sw"],
    )


@pytest.fixture
def session(row_layout, six_column_config) -> PanelGridSession:
    """Session over the three-panel row."""
    return PanelGridSession(panels=row_layout, config=six_column_config)


@pytest.fixture
def empty_session(six_column_config) -> PanelGridSession:
    """Session with no panels."""
    return PanelGridSession(config=six_column_config)
