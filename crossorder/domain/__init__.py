"""Domain layer: pure types shared by the engine and its collaborators."""

from crossorder.domain.errors import (
    DuplicateItemError,
    InvalidIndexError,
    OrphanedItemError,
    ReorderError,
    SessionActiveError,
    UnknownContainerError,
)
from crossorder.domain.interaction import (
    InteractionCancel,
    InteractionEnd,
    InteractionEvent,
    InteractionKey,
    InteractionMove,
    InteractionStart,
)
from crossorder.domain.keyboard import DragKey
from crossorder.domain.outcomes import DropOutcome, DropOutsidePolicy, DropResult
from crossorder.domain.targets import (
    NO_TARGET,
    ContainerTarget,
    HoverTarget,
    ItemId,
    ItemTarget,
    NoTarget,
    Placement,
    classify_hover,
)

__all__ = [
    "NO_TARGET",
    "ContainerTarget",
    "DragKey",
    "DropOutcome",
    "DropOutsidePolicy",
    "DropResult",
    "DuplicateItemError",
    "HoverTarget",
    "InteractionCancel",
    "InteractionEnd",
    "InteractionEvent",
    "InteractionKey",
    "InteractionMove",
    "InteractionStart",
    "InvalidIndexError",
    "ItemId",
    "ItemTarget",
    "NoTarget",
    "OrphanedItemError",
    "Placement",
    "ReorderError",
    "SessionActiveError",
    "UnknownContainerError",
    "classify_hover",
]
