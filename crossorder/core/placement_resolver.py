"""Module: placement_resolver.py

Date: 2026-10-19

Placement Resolver - where would the active item land for a hover target.

Runs on every move notification, so it only reads the registry and never
mutates it. Cost is linear in the total number of items.
"""

from __future__ import annotations

from crossorder.core.container_registry import ContainerRegistry
from crossorder.domain.errors import OrphanedItemError
from crossorder.domain.targets import (
    ContainerTarget,
    HoverTarget,
    ItemId,
    ItemTarget,
    NoTarget,
    Placement,
)
from crossorder.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class PlacementResolver:
    """Translates (active item, hover target) into a target placement."""

    def __init__(self, registry: ContainerRegistry):
        self._registry = registry

    def current_placement(self, item_id: ItemId) -> Placement:
        """Where ``item_id`` sits right now.

        Raises:
            OrphanedItemError: no container holds the item

        """
        container = self._registry.locate(item_id)
        if container is None:
            raise OrphanedItemError(item_id)
        index = self._registry.index_of(container, item_id)
        assert index is not None
        return Placement(container, index)

    def hover_container(self, hover: HoverTarget) -> str | None:
        """Container the hover target points into, or None when unresolved."""
        if isinstance(hover, ContainerTarget):
            return hover.container if hover.container in self._registry else None
        if isinstance(hover, ItemTarget):
            return self._registry.locate(hover.item_id)
        return None

    def resolve(self, active_id: ItemId, hover: HoverTarget) -> Placement | None:
        """Compute the target placement of ``active_id`` for ``hover``.

        For a target in the active item's own container the index is the
        final position after a move-within; for another container it is the
        insertion index.

        Args:
            active_id: Item being dragged
            hover: What the pointer is over

        Returns:
            Target placement, or None when the hover target is unresolved
            (dragging over empty space, or an item that is no longer tracked)

        Raises:
            OrphanedItemError: the active item is not in any container

        """
        current = self.current_placement(active_id)

        if isinstance(hover, NoTarget):
            return None

        target_container = self.hover_container(hover)
        if target_container is None:
            logger.debug(
                "[PlacementResolver] Unresolved hover target %r",
                hover,
                extra={"dev_only": True},
            )
            return None

        if isinstance(hover, ItemTarget):
            if hover.item_id == active_id:
                return current
            index = self._registry.index_of(target_container, hover.item_id)
            assert index is not None
            return Placement(target_container, index)

        # Container itself: append when coming from elsewhere, stay put otherwise
        if target_container == current.container:
            return current
        return Placement(target_container, len(self._registry.sequence_of(target_container)))
