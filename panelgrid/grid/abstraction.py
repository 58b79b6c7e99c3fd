"""
Grid Abstraction Layer

Provides the panel data model shared by the collision detector, the
rearrangement engine and the state container. A panel occupies an integer
cell region on a fixed-column grid; panel sets are plain lists of immutable
panels so every engine pass can hand back a fresh snapshot.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

PanelId = Union[int, str]


@dataclass(frozen=True)
class Panel:
    """Represents one panel on the grid (grid units, origin top-left)."""
    id: PanelId
    x: int = 0  # column of the left edge
    y: int = 0  # row of the top edge, growing downward
    w: int = 1  # width in cells
    h: int = 1  # height in cells

    # Administrative locks
    lock_position: bool = False  # not moved by drag nor by collision pushes
    lock_size: bool = False  # not resized by direct interaction

    @property
    def right(self) -> int:
        """Column just past the right edge."""
        return self.x + self.w

    @property
    def bottom(self) -> int:
        """Row just past the bottom edge."""
        return self.y + self.h

    @property
    def area(self) -> int:
        return self.w * self.h

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """
        Get the half-open cell box of this panel.

        Returns:
            (min_x, min_y, max_x, max_y) where max values are exclusive
        """
        return (self.x, self.y, self.right, self.bottom)

    def overlaps(self, other: Any) -> bool:
        """Check if this panel overlaps another rectangle (edges may touch)."""
        from ..placement.collision import rectangles_overlap
        return rectangles_overlap(self, other)

    def moved_to(self, x: int, y: int) -> "Panel":
        """Return a copy of this panel at a new origin."""
        return replace(self, x=x, y=y)

    def resized_to(self, w: int, h: int) -> "Panel":
        """Return a copy of this panel with a new size."""
        return replace(self, w=w, h=h)

    def same_rect(self, other: "Panel") -> bool:
        """Check if two panels cover exactly the same cells."""
        return (self.x, self.y, self.w, self.h) == (other.x, other.y, other.w, other.h)

    def normalized(self, column_count: Optional[int] = None) -> "Panel":
        """
        Clamp out-of-range values instead of rejecting them.

        Sizes floor at 1 and origins floor at 0. When column_count is given,
        the width is also capped so the panel can fit on the grid.
        """
        w = max(1, int(self.w))
        h = max(1, int(self.h))
        if column_count is not None and column_count > 0:
            w = min(w, column_count)
        x = max(0, int(self.x))
        y = max(0, int(self.y))
        if (x, y, w, h) == (self.x, self.y, self.w, self.h):
            return self
        return replace(self, x=x, y=y, w=w, h=h)

    def to_dict(self, camel_case: bool = True) -> Dict[str, Any]:
        """Serialize for the host UI state (camelCase keys by default)."""
        data: Dict[str, Any] = {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "w": self.w,
            "h": self.h,
        }
        if camel_case:
            data["lockPosition"] = self.lock_position
            data["lockSize"] = self.lock_size
        else:
            data["lock_position"] = self.lock_position
            data["lock_size"] = self.lock_size
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Panel":
        """
        Build a panel from a host UI mapping.

        Accepts either camelCase (lockPosition) or snake_case (lock_position)
        lock keys; missing locks default to False.

        Raises:
            ValueError: If the mapping has no id
        """
        if data.get("id") is None:
            raise ValueError(f"Panel mapping has no id: {data!r}")
        return cls(
            id=data["id"],
            x=int(data.get("x", 0)),
            y=int(data.get("y", 0)),
            w=int(data.get("w", 1)),
            h=int(data.get("h", 1)),
            lock_position=bool(data.get("lockPosition", data.get("lock_position", False))),
            lock_size=bool(data.get("lockSize", data.get("lock_size", False))),
        )


# A panel set is an ordered list of panels with unique ids.
PanelSet = List[Panel]


@dataclass(frozen=True)
class PanelSpec:
    """Request for a brand-new panel; position is chosen by the placement finder."""
    id: Optional[PanelId] = None
    w: int = 1
    h: int = 1
    lock_position: bool = False
    lock_size: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PanelSpec":
        return cls(
            id=data.get("id"),
            w=int(data.get("w") or 1),
            h=int(data.get("h") or 1),
            lock_position=bool(data.get("lockPosition", data.get("lock_position", False))),
            lock_size=bool(data.get("lockSize", data.get("lock_size", False))),
        )


def panel_map(panels: Iterable[Panel]) -> Dict[PanelId, Panel]:
    """Index panels by id, keeping iteration order (later duplicates win)."""
    return {panel.id: panel for panel in panels}


def find_panel(panels: Iterable[Panel], panel_id: PanelId) -> Optional[Panel]:
    """Get a panel by id, or None."""
    for panel in panels:
        if panel.id == panel_id:
            return panel
    return None


def layout_bottom(panels: Iterable[Panel]) -> int:
    """Lowest occupied row boundary (0 for an empty layout)."""
    return max((panel.bottom for panel in panels), default=0)


def duplicate_ids(panels: Iterable[Panel]) -> List[PanelId]:
    """Ids that appear more than once, in first-seen order."""
    seen = set()
    duplicates: List[PanelId] = []
    for panel in panels:
        if panel.id in seen and panel.id not in duplicates:
            duplicates.append(panel.id)
        seen.add(panel.id)
    return duplicates
