"""
Panel Rearrangement Engine

Resolves collisions after one panel was moved or resized, producing a new
panel set in which no two panels overlap.

Breadth-first propagation:
1. Boundary clamp - Keep the moving panel inside the grid
2. Push - Displace each colliding panel (right first, then down)
3. Chain - Re-check every displaced panel against the rest of the layout

Position-locked panels are never displaced. When resolving a collision would
require moving one, the whole operation is rolled back and the input set is
returned unchanged.

Compound resizes (width and height both changed) run in two passes: width
first with the old height, then height from wherever the first pass left the
panel.
"""

import logging
from collections import deque
from dataclasses import dataclass, field, replace
from typing import Callable, Deque, Dict, List, Optional, Tuple

from ..grid.abstraction import Panel, PanelId
from .collision import detect_collisions, rectangles_overlap
from .constraints import constrain_to_grid
from .diff import changed_panel_ids
from .push import find_new_position

logger = logging.getLogger(__name__)

# Per-panel processing ceiling; bounds the work for pathological chains
MAX_PROCESS_COUNT = 10

RearrangementFunction = Callable[[Panel, List[Panel], int], List[Panel]]


@dataclass
class RearrangementReport:
    """Diagnostics for one rearrangement."""
    moved_ids: List[PanelId] = field(default_factory=list)  # displaced panels (moving panel excluded)
    rolled_back: bool = False
    blocking_id: Optional[PanelId] = None  # locked panel that forced the rollback
    ignored: bool = False  # position-locked moving panel, request dropped
    retry_exhausted: List[PanelId] = field(default_factory=list)  # ids that hit MAX_PROCESS_COUNT
    phases: int = 0  # resolution passes run (2 for compound resizes)


class PanelRearranger:
    """
    Default collision resolution strategy.

    Instances hold only configuration; every call works on its own copies, so
    the input panel list is never mutated.
    """

    def __init__(self, column_count: int, max_process_count: int = MAX_PROCESS_COUNT):
        """
        Initialize the rearranger.

        Args:
            column_count: Grid width in cells
            max_process_count: Times a single panel may be processed in one pass
        """
        self.column_count = column_count
        self.max_process_count = max_process_count

    def rearrange(self, moving_panel: Panel,
                  all_panels: List[Panel]) -> Tuple[List[Panel], RearrangementReport]:
        """
        Rearrange panels around a moved or resized panel.

        Args:
            moving_panel: Requested new rectangle for one panel
            all_panels: Current panel set (not modified)

        Returns:
            (new panel set, report)
        """
        report = RearrangementReport()
        original = next((p for p in all_panels if p.id == moving_panel.id), None)

        if original is not None and original.lock_position and \
                original.position != moving_panel.position:
            report.ignored = True
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Rearrange %r ignored: panel is position-locked", moving_panel.id)
            return list(all_panels), report

        if original is not None and original.lock_size:
            moving_panel = replace(moving_panel, w=original.w, h=original.h)

        candidate = moving_panel.normalized(self.column_count)
        if original is not None and original.lock_position and \
                candidate.x + candidate.w > self.column_count:
            # Locked panels keep their origin; shrink instead of shifting left
            candidate = replace(candidate, w=max(1, self.column_count - candidate.x))
        candidate = constrain_to_grid(candidate, self.column_count)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Rearrange start: id=%r rect=(%d, %d, %d, %d) panels=%d columns=%d",
                candidate.id, candidate.x, candidate.y, candidate.w, candidate.h,
                len(all_panels), self.column_count,
            )

        if original is not None and original.w != candidate.w and original.h != candidate.h:
            # Phase 1: width only
            report.phases = 1
            width_only = replace(candidate, h=original.h)
            after_width = self._resolve(width_only, all_panels, report)
            if after_width is None:
                return self._rollback(all_panels, report)

            # Phase 2: height, starting where phase 1 left the panel
            report.phases = 2
            placed = next(p for p in after_width if p.id == candidate.id)
            height_changed = replace(candidate, x=placed.x, y=placed.y)
            result = self._resolve(height_changed, after_width, report)
        else:
            report.phases = 1
            result = self._resolve(candidate, all_panels, report)

        if result is None:
            return self._rollback(all_panels, report)

        report.moved_ids = changed_panel_ids(all_panels, result, exclude_id=candidate.id)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Rearrange done: id=%r moved=%d retry_exhausted=%d",
                candidate.id, len(report.moved_ids), len(report.retry_exhausted),
            )
        return result, report

    def _rollback(self, all_panels: List[Panel],
                  report: RearrangementReport) -> Tuple[List[Panel], RearrangementReport]:
        """Discard every change and hand back the input set."""
        report.rolled_back = True
        report.moved_ids = []
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Rearrange rolled back: blocked by locked panel %r", report.blocking_id)
        return list(all_panels), report

    def _resolve(self, moving_panel: Panel, all_panels: List[Panel],
                 report: RearrangementReport) -> Optional[List[Panel]]:
        """
        Run one propagation pass.

        Returns:
            New panel list, or None if a position-locked panel would have to move
        """
        column_count = self.column_count

        working: Dict[PanelId, Panel] = {panel.id: panel for panel in all_panels}
        working[moving_panel.id] = moving_panel

        queue: Deque[Panel] = deque([moving_panel])

        # id -> origin at which the panel was last found collision-free
        finalized: Dict[PanelId, Tuple[int, int]] = {}

        # Displaced panels in first-displaced order
        repositioned: Dict[PanelId, None] = {}

        process_count: Dict[PanelId, int] = {}

        while queue:
            current = queue.popleft()

            count = process_count.get(current.id, 0)
            if count >= self.max_process_count:
                if current.id not in report.retry_exhausted:
                    report.retry_exhausted.append(current.id)
                continue
            process_count[current.id] = count + 1

            # Stale work item: the panel has been pushed again since it was queued
            cached = working.get(current.id)
            if cached is not None and cached.position != current.position:
                continue

            if finalized.get(current.id) == current.position:
                continue

            colliding_ids = detect_collisions(current, working)

            if not colliding_ids:
                working[current.id] = current
                finalized[current.id] = current.position
                continue

            # Top-left first for reproducible output
            colliding_ids.sort(key=lambda pid: (working[pid].y, working[pid].x))

            for colliding_id in colliding_ids:
                colliding = working[colliding_id]

                if colliding.lock_position:
                    report.blocking_id = colliding_id
                    return None

                new_x, new_y = find_new_position(colliding, current, column_count)
                candidate = replace(colliding, x=new_x, y=new_y)

                # Don't land on a panel already displaced in this pass: step
                # past it to the right, or drop below the pusher if no room
                push_down = False
                for repo_id in repositioned:
                    if repo_id == colliding_id:
                        continue
                    repo_panel = working[repo_id]
                    if not rectangles_overlap(candidate, repo_panel):
                        continue

                    further_x = repo_panel.x + repo_panel.w
                    if further_x + candidate.w <= column_count:
                        candidate = replace(candidate, x=further_x)
                    else:
                        push_down = True
                        break

                if push_down:
                    distance = current.y + current.h - colliding.y
                    candidate = replace(
                        candidate,
                        x=colliding.x,
                        y=colliding.y + (distance if distance > 0 else 1),
                    )

                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug(
                        "Push %r by %r: (%d, %d) -> (%d, %d)",
                        colliding_id, current.id,
                        colliding.x, colliding.y, candidate.x, candidate.y,
                    )

                working[colliding_id] = candidate
                queue.append(candidate)
                repositioned[colliding_id] = None

            working[current.id] = current
            finalized[current.id] = current.position

        return list(working.values())


def rearrange_with_report(moving_panel: Panel, all_panels: List[Panel],
                          column_count: int) -> Tuple[List[Panel], RearrangementReport]:
    """Run the default strategy and return its diagnostics as well."""
    return PanelRearranger(column_count).rearrange(moving_panel, all_panels)


def rearrange_panels(moving_panel: Panel, all_panels: List[Panel],
                     column_count: int) -> List[Panel]:
    """
    Default rearrangement strategy.

    Args:
        moving_panel: Requested new rectangle for one panel
        all_panels: Current panel set (not modified)
        column_count: Grid width in cells

    Returns:
        New non-overlapping panel set, or the input panels unchanged when a
        position-locked panel blocks the operation
    """
    result, _ = PanelRearranger(column_count).rearrange(moving_panel, all_panels)
    return result


def push_down_rearrangement(moving_panel: Panel, all_panels: List[Panel],
                            column_count: int) -> List[Panel]:
    """
    Vertical-first strategy.

    Every panel overlapping the moved panel is dropped directly below it.
    Locks and chain collisions are not considered.
    """
    moving_panel = constrain_to_grid(moving_panel, column_count)
    result: List[Panel] = []
    seen = False
    for panel in all_panels:
        if panel.id == moving_panel.id:
            result.append(moving_panel)
            seen = True
        elif rectangles_overlap(moving_panel, panel):
            result.append(replace(panel, y=moving_panel.y + moving_panel.h))
        else:
            result.append(panel)
    if not seen:
        result.append(moving_panel)
    return result


def no_rearrangement(moving_panel: Panel, all_panels: List[Panel],
                     column_count: int) -> List[Panel]:
    """Strategy that swaps in the moved panel and leaves overlaps in place."""
    result = [moving_panel if panel.id == moving_panel.id else panel for panel in all_panels]
    if not any(panel.id == moving_panel.id for panel in all_panels):
        result.append(moving_panel)
    return result
