"""Module: container_registry.py

Date: 2026-10-19

Container Registry - named ordered sequences of item identifiers.

Owns the only mutable state of the engine: for each container name, the
display order of the items it holds. Every item identifier lives in exactly
one container. Indices passed to insert operations are clamped, never
rejected.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence

from crossorder.domain.errors import DuplicateItemError, InvalidIndexError, UnknownContainerError
from crossorder.domain.targets import ItemId
from crossorder.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def array_move(sequence: Sequence[ItemId], from_index: int, to_index: int) -> list[ItemId]:
    """Return a copy of ``sequence`` with one element moved.

    The element at ``from_index`` is removed and reinserted at ``to_index``
    of the shortened list (move, not swap). ``to_index`` is clamped.

    Example:
        >>> array_move(["a", "b", "c"], 0, 2)
        ['b', 'c', 'a']
        >>> array_move(["a", "b", "c"], 2, 0)
        ['c', 'a', 'b']

    """
    items = list(sequence)
    item = items.pop(from_index)
    items.insert(max(0, min(to_index, len(items))), item)
    return items


class ContainerRegistry:
    """Maps container names to ordered item sequences.

    Container registration order is kept (it is the left-to-right order used
    for keyboard navigation).
    """

    def __init__(self, sequences: Mapping[str, Iterable[ItemId]] | None = None) -> None:
        self._sequences: dict[str, list[ItemId]] = {}
        if sequences:
            self.restore(sequences)

    # =====================================
    # Read access
    # =====================================

    @property
    def container_names(self) -> tuple[str, ...]:
        return tuple(self._sequences)

    def __iter__(self) -> Iterator[str]:
        return iter(self._sequences)

    def __len__(self) -> int:
        return len(self._sequences)

    def __contains__(self, container: object) -> bool:
        return container in self._sequences

    def __repr__(self) -> str:
        return f"ContainerRegistry({self._sequences!r})"

    def locate(self, item_id: ItemId) -> str | None:
        """Return the container holding ``item_id``, or None if it is not tracked."""
        for name, items in self._sequences.items():
            if item_id in items:
                return name
        return None

    def contains(self, item_id: ItemId) -> bool:
        return self.locate(item_id) is not None

    def sequence_of(self, container: str) -> tuple[ItemId, ...]:
        """Read-only view of a container's order."""
        return tuple(self._items(container))

    def index_of(self, container: str, item_id: ItemId) -> int | None:
        items = self._items(container)
        try:
            return items.index(item_id)
        except ValueError:
            return None

    def all_items(self) -> list[ItemId]:
        """Every tracked item, container by container."""
        return [item for items in self._sequences.values() for item in items]

    def as_dict(self) -> dict[str, tuple[ItemId, ...]]:
        """Detached copy of every sequence (safe to hand to a renderer)."""
        return {name: tuple(items) for name, items in self._sequences.items()}

    # =====================================
    # Mutation
    # =====================================

    def remove(self, container: str, item_id: ItemId) -> bool:
        """Remove one occurrence of ``item_id``; no-op if absent.

        Returns:
            True if something was removed

        """
        items = self._items(container)
        try:
            items.remove(item_id)
        except ValueError:
            return False
        return True

    def insert_at(self, container: str, item_id: ItemId, index: int) -> int:
        """Insert ``item_id`` at ``index`` clamped to ``[0, len]``.

        Returns:
            The index actually used

        """
        items = self._items(container)
        clamped = max(0, min(index, len(items)))
        if clamped != index:
            logger.debug(
                "[ContainerRegistry] Clamped insert index %d -> %d in %s",
                index,
                clamped,
                container,
                extra={"dev_only": True},
            )
        items.insert(clamped, item_id)
        return clamped

    def move_within(self, container: str, from_index: int, to_index: int) -> int:
        """Move the element at ``from_index`` to ``to_index`` (array-move semantics).

        Args:
            container: Container to reorder
            from_index: Current position; must exist
            to_index: Position in the sequence after removal; clamped

        Returns:
            The final index of the moved element

        Raises:
            InvalidIndexError: ``from_index`` is outside the sequence

        """
        items = self._items(container)
        if not 0 <= from_index < len(items):
            raise InvalidIndexError(container, from_index, len(items))

        target = max(0, min(to_index, len(items) - 1))
        if from_index == target:
            return from_index

        self._sequences[container] = array_move(items, from_index, target)
        return target

    def restore(self, sequences: Mapping[str, Iterable[ItemId]]) -> None:
        """Replace every sequence with ``sequences``.

        Used for construction, for resets between gestures and for the exact
        rollback of a cancelled session.

        Raises:
            TypeError: a container name is not a string
            DuplicateItemError: an item appears more than once

        """
        for name in sequences:
            if not isinstance(name, str):
                raise TypeError(f"container names must be strings, got {name!r}")

        fresh = {name: list(items) for name, items in sequences.items()}

        seen: dict[ItemId, str] = {}
        for name, items in fresh.items():
            for item in items:
                if item in seen:
                    raise DuplicateItemError(item, (seen[item], name))
                seen[item] = name

        self._sequences = fresh

    def _items(self, container: str) -> list[ItemId]:
        try:
            return self._sequences[container]
        except KeyError:
            raise UnknownContainerError(container) from None
