"""Module: keyboard_navigator.py

Date: 2026-10-19

Keyboard Navigator - hover targets for arrow-key dragging.

A pointer drag gets its hover target from hit-testing; a keyboard drag has
no pointer, so the next target is derived from the live order instead:
up/down step to the neighbouring item, left/right step to the neighbouring
container (at the same row when it has one).
"""

from __future__ import annotations

from crossorder import config
from crossorder.core.container_registry import ContainerRegistry
from crossorder.domain.errors import OrphanedItemError
from crossorder.domain.keyboard import DragKey
from crossorder.domain.targets import ContainerTarget, HoverTarget, ItemId, ItemTarget


class KeyboardNavigator:
    """Maps a navigation key to the next hover target for the active item."""

    def __init__(self, registry: ContainerRegistry, *, wrap_containers: bool | None = None):
        self._registry = registry
        self._wrap = config.KEYBOARD_WRAP_CONTAINERS if wrap_containers is None else wrap_containers

    def next_target(self, active_id: ItemId, key: DragKey) -> HoverTarget | None:
        """Return the hover target one step away in direction ``key``.

        Returns:
            The target, or None at an edge or for a non-navigation key

        Raises:
            OrphanedItemError: the active item is not in any container

        """
        container = self._registry.locate(active_id)
        if container is None:
            raise OrphanedItemError(active_id)

        items = self._registry.sequence_of(container)
        index = items.index(active_id)

        if key is DragKey.UP:
            return ItemTarget(items[index - 1]) if index > 0 else None
        if key is DragKey.DOWN:
            return ItemTarget(items[index + 1]) if index + 1 < len(items) else None
        if key in (DragKey.LEFT, DragKey.RIGHT):
            neighbour = self._neighbour_container(container, -1 if key is DragKey.LEFT else 1)
            if neighbour is None:
                return None
            others = self._registry.sequence_of(neighbour)
            if index < len(others):
                return ItemTarget(others[index])
            return ContainerTarget(neighbour)
        return None

    def _neighbour_container(self, container: str, step: int) -> str | None:
        names = self._registry.container_names
        position = names.index(container) + step
        if self._wrap:
            neighbour = names[position % len(names)]
            return None if neighbour == container else neighbour
        if 0 <= position < len(names):
            return names[position]
        return None
