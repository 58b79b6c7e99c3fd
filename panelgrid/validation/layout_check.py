"""
Layout Invariant Checks

Checks a panel set against the steady-state rules of the grid: unique ids,
positive sizes, non-negative origins, no column overflow and no overlaps.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from ..grid.abstraction import Panel, PanelId, duplicate_ids
from ..placement.collision import rectangles_overlap


@dataclass
class LayoutViolation:
    """A broken layout rule."""
    rule: str  # "duplicate_id", "size", "origin", "overflow", "overlap", "locked_overlap"
    severity: str  # "error", "warning"
    message: str
    panels: List[PanelId] = field(default_factory=list)


class LayoutChecker:
    """Layout rule checker."""

    def __init__(self, panels: List[Panel], column_count: int):
        self.panels = panels
        self.column_count = column_count
        self.violations: List[LayoutViolation] = []

    def run_checks(self) -> Tuple[bool, List[LayoutViolation]]:
        """
        Run all checks.

        Returns:
            (passed, violations) - passed is True if there are no errors
        """
        self.violations = []

        self._check_duplicate_ids()
        self._check_sizes()
        self._check_bounds()
        self._check_overlaps()

        passed = not any(v.severity == "error" for v in self.violations)
        return (passed, self.violations)

    def _check_duplicate_ids(self):
        for pid in duplicate_ids(self.panels):
            self.violations.append(LayoutViolation(
                rule="duplicate_id",
                severity="error",
                message=f"Panel id {pid!r} is used more than once",
                panels=[pid],
            ))

    def _check_sizes(self):
        for panel in self.panels:
            if panel.w < 1 or panel.h < 1:
                self.violations.append(LayoutViolation(
                    rule="size",
                    severity="error",
                    message=f"Panel {panel.id!r} has size {panel.w}x{panel.h}; minimum is 1x1",
                    panels=[panel.id],
                ))

    def _check_bounds(self):
        for panel in self.panels:
            if panel.x < 0 or panel.y < 0:
                self.violations.append(LayoutViolation(
                    rule="origin",
                    severity="error",
                    message=f"Panel {panel.id!r} has negative origin ({panel.x}, {panel.y})",
                    panels=[panel.id],
                ))
            if panel.x + panel.w > self.column_count:
                self.violations.append(LayoutViolation(
                    rule="overflow",
                    severity="error",
                    message=(f"Panel {panel.id!r} ends at column {panel.x + panel.w}, "
                             f"grid has {self.column_count}"),
                    panels=[panel.id],
                ))

    def _check_overlaps(self):
        for i, a in enumerate(self.panels):
            for b in self.panels[i + 1:]:
                if not rectangles_overlap(a, b):
                    continue
                if a.lock_position and b.lock_position:
                    # Neither side can be moved to fix this
                    self.violations.append(LayoutViolation(
                        rule="locked_overlap",
                        severity="error",
                        message=f"Position-locked panels {a.id!r} and {b.id!r} overlap",
                        panels=[a.id, b.id],
                    ))
                else:
                    self.violations.append(LayoutViolation(
                        rule="overlap",
                        severity="error",
                        message=f"Panels {a.id!r} and {b.id!r} overlap",
                        panels=[a.id, b.id],
                    ))


def validate_layout(panels: List[Panel], column_count: int) -> Tuple[bool, List[LayoutViolation]]:
    """Check a panel set; see LayoutChecker.run_checks."""
    return LayoutChecker(panels, column_count).run_checks()
