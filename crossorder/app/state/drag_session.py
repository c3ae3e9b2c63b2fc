"""Module: drag_session.py

Date: 2026-10-19

Transient state of one drag gesture.

A session exists only between drag start and drag end/cancel. It keeps the
exact sequences captured at start so a cancel can restore them without
re-deriving the origin from the live (already previewed) order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from crossorder.domain.targets import NO_TARGET, HoverTarget, ItemId, Placement


class DragPhase(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"
    RESOLVED = "resolved"  # reported once by the finishing snapshot, then IDLE


@dataclass
class DragSession:
    """Everything the coordinator remembers while an item is lifted.

    Attributes:
        active_id: Item being dragged
        origin: Placement at drag start
        origin_sequences: Every sequence as it was at drag start
        hover: Latest hover target reported by the collaborator
        applied_hover: Hover target whose placement is currently live
        over_container: Container under the pointer (for drop-zone highlight)
        live_moves: Number of live preview mutations applied so far

    """

    active_id: ItemId
    origin: Placement
    origin_sequences: dict[str, tuple[ItemId, ...]]
    hover: HoverTarget = field(default=NO_TARGET)
    applied_hover: HoverTarget = field(default=NO_TARGET)
    over_container: str | None = None
    live_moves: int = 0

    def record_hover(self, hover: HoverTarget, over_container: str | None) -> bool:
        """Store the latest hover; returns True if the hovered container changed."""
        self.hover = hover
        changed = over_container != self.over_container
        self.over_container = over_container
        return changed

    def is_applied(self, hover: HoverTarget) -> bool:
        """Whether ``hover`` is the target the live placement already reflects."""
        return bool(self.applied_hover) and hover == self.applied_hover
