"""
Overlap Detection

Axis-aligned bounding box tests on half-open cell rectangles
[x, x + w) x [y, y + h). Panels that only share an edge do not overlap.

Rectangles are duck-typed: anything with integer x, y, w, h attributes works,
so candidate positions can be tested before a Panel is built for them.
"""

from typing import Any, Dict, List, Mapping

from ..grid.abstraction import Panel, PanelId


def rectangles_overlap(a: Any, b: Any) -> bool:
    """
    Check if two rectangles overlap (separating axis test).

    Returns:
        True unless a is fully left of, right of, above or below b
    """
    return not (
        a.x + a.w <= b.x or  # a is left of b
        b.x + b.w <= a.x or  # b is left of a
        a.y + a.h <= b.y or  # a is above b
        b.y + b.h <= a.y     # b is above a
    )


def detect_collisions(panel: Panel, panels: Mapping[PanelId, Panel]) -> List[PanelId]:
    """
    Find every panel that overlaps the given panel.

    Args:
        panel: Panel to test (excluded from the result by id)
        panels: Id-keyed panel collection

    Returns:
        Colliding ids in collection order, without duplicates
    """
    collisions: Dict[PanelId, None] = {}

    for other_id, other in panels.items():
        if other_id == panel.id:
            continue
        if rectangles_overlap(panel, other):
            collisions[other_id] = None

    return list(collisions)


def has_collision(candidate: Any, exclude_id: Any, panels: Mapping[PanelId, Panel]) -> bool:
    """
    Check if a candidate rectangle would overlap any panel.

    Stops at the first hit. The panel whose id equals exclude_id is ignored,
    which lets a panel be tested against a set that still contains it.
    """
    for other_id, other in panels.items():
        if other_id == exclude_id:
            continue
        if rectangles_overlap(candidate, other):
            return True
    return False


def find_overlapping_pairs(panels: List[Panel]) -> List[tuple]:
    """
    Find all overlapping panel pairs.

    Returns:
        List of (id_a, id_b) tuples, each pair reported once in list order
    """
    pairs = []
    for i, a in enumerate(panels):
        for b in panels[i + 1:]:
            if rectangles_overlap(a, b):
                pairs.append((a.id, b.id))
    return pairs
