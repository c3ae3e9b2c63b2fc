"""crossorder - cross-container ordered-list reordering engine.

Computes live preview reordering while an item is dragged between named
sequences, and the committed placement when the drag ends. Rendering,
hit-testing and input wiring stay with the caller.

Typical use:
    from crossorder import ReorderCoordinator, ItemTarget

    board = ReorderCoordinator({"todo": ["a", "b", "c"], "done": ["d", "e"]})
    board.sequences_changed.connect(render)
    board.start_drag("b")
    board.move_over(ItemTarget("e"))
    board.end_drag(ItemTarget("e"))
"""

from crossorder.config import APP_VERSION as __version__
from crossorder.app.state.drag_session import DragPhase
from crossorder.controllers.reorder_coordinator import ReorderCoordinator, ReorderSnapshot
from crossorder.core.container_registry import ContainerRegistry, array_move
from crossorder.core.keyboard_navigator import KeyboardNavigator
from crossorder.core.placement_resolver import PlacementResolver
from crossorder.domain import (
    NO_TARGET,
    ContainerTarget,
    DragKey,
    DropOutcome,
    DropOutsidePolicy,
    DropResult,
    DuplicateItemError,
    HoverTarget,
    InteractionCancel,
    InteractionEnd,
    InteractionKey,
    InteractionMove,
    InteractionStart,
    InvalidIndexError,
    ItemTarget,
    NoTarget,
    OrphanedItemError,
    Placement,
    ReorderError,
    SessionActiveError,
    UnknownContainerError,
    classify_hover,
)

__all__ = [
    "NO_TARGET",
    "ContainerRegistry",
    "ContainerTarget",
    "DragKey",
    "DragPhase",
    "DropOutcome",
    "DropOutsidePolicy",
    "DropResult",
    "DuplicateItemError",
    "HoverTarget",
    "InteractionCancel",
    "InteractionEnd",
    "InteractionKey",
    "InteractionMove",
    "InteractionStart",
    "InvalidIndexError",
    "ItemTarget",
    "KeyboardNavigator",
    "NoTarget",
    "OrphanedItemError",
    "Placement",
    "PlacementResolver",
    "ReorderCoordinator",
    "ReorderError",
    "ReorderSnapshot",
    "SessionActiveError",
    "UnknownContainerError",
    "__version__",
    "array_move",
    "classify_hover",
]
