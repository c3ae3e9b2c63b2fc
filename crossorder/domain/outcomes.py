"""Module: outcomes.py

Date: 2026-10-19

How a drag session ended, and the policy for drops outside any target.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from crossorder.domain.targets import ItemId, Placement


class DropOutsidePolicy(Enum):
    """What to do when a drag ends over nothing.

    KEEP_LIVE leaves the item where the last live preview put it.
    REVERT_TO_ORIGIN restores every sequence to its state at drag start.
    """

    KEEP_LIVE = "keep_live"
    REVERT_TO_ORIGIN = "revert_to_origin"

    @classmethod
    def coerce(cls, value: DropOutsidePolicy | str) -> DropOutsidePolicy:
        """Accept either a member or its config string."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(member.value for member in cls)
            raise ValueError(f"unknown drop-outside policy {value!r} (expected one of: {valid})") from None


class DropOutcome(Enum):
    COMMITTED = "committed"  # final hover resolved, placement applied
    KEPT = "kept"  # ended over nothing, live placement kept
    REVERTED = "reverted"  # ended over nothing, restored to origin
    CANCELLED = "cancelled"  # cancelled externally, restored to origin
    ABORTED = "aborted"  # active item vanished mid-session


@dataclass(frozen=True)
class DropResult:
    """Summary of a finished session, emitted with ``drag_finished``."""

    outcome: DropOutcome
    active_id: ItemId
    origin: Placement
    final: Placement | None

    @property
    def moved(self) -> bool:
        return self.final is not None and self.final != self.origin

    @property
    def changed_container(self) -> bool:
        return self.final is not None and self.final.container != self.origin.container
