"""Change detection between two panel snapshots.

The host UI animates panels that were displaced by a rearrangement, but not
the panel the user is holding. This compares snapshots by id and reports
only the panels whose rectangle actually changed.
"""

from typing import Dict, Iterable, List, Optional

from ..grid.abstraction import Panel, PanelId


def changed_panel_ids(old_panels: Iterable[Panel], new_panels: Iterable[Panel],
                      exclude_id: Optional[PanelId] = None) -> List[PanelId]:
    """
    Find panels whose position or size differs between two snapshots.

    Args:
        old_panels: Snapshot before the operation
        new_panels: Snapshot after the operation
        exclude_id: Id to leave out (usually the panel being dragged)

    Returns:
        Changed ids in old-snapshot order. Panels missing from either
        snapshot are not reported.
    """
    new_by_id: Dict[PanelId, Panel] = {panel.id: panel for panel in new_panels}
    changed: List[PanelId] = []

    for old in old_panels:
        if old.id == exclude_id:
            continue
        new = new_by_id.get(old.id)
        if new is not None and not old.same_rect(new):
            changed.append(old.id)

    return changed


def layouts_equal(a: Iterable[Panel], b: Iterable[Panel]) -> bool:
    """Check if two snapshots hold the same rectangles per id, ignoring order."""
    a_by_id = {panel.id: panel for panel in a}
    b_by_id = {panel.id: panel for panel in b}
    if a_by_id.keys() != b_by_id.keys():
        return False
    return all(a_by_id[pid].same_rect(b_by_id[pid]) for pid in a_by_id)
