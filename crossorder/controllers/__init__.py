"""Controllers that own engine state and drive it from input events."""

from crossorder.controllers.reorder_coordinator import ReorderCoordinator, ReorderSnapshot

__all__ = ["ReorderCoordinator", "ReorderSnapshot"]
