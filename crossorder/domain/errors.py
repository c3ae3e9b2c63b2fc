"""Module: errors.py

Date: 2026-10-19

Exception taxonomy for the reorder engine.

Every error derives from ``ReorderError`` and from the builtin exception a
caller would naturally catch (``KeyError`` for an unknown container, and so
on). Interaction problems never escape the coordinator: an orphaned item
ends the session, and only construction/reset misuse raises to the caller.

An unresolvable hover target is not an error; the resolver returns None.
"""

from __future__ import annotations

from collections.abc import Hashable


class ReorderError(Exception):
    """Base class for reorder engine errors."""


class OrphanedItemError(ReorderError, LookupError):
    """The active item is not held by any container."""

    def __init__(self, item_id: Hashable):
        super().__init__(f"item {item_id!r} is not in any container")
        self.item_id = item_id


class InvalidIndexError(ReorderError, IndexError):
    """An index outside a sequence was used where no clamping applies."""

    def __init__(self, container: str, index: int, length: int):
        super().__init__(f"index {index} out of range for {container!r} (length {length})")
        self.container = container
        self.index = index
        self.length = length


class UnknownContainerError(ReorderError, KeyError):
    """A container name that was never registered."""

    def __init__(self, container: str):
        super().__init__(container)
        self.container = container

    def __str__(self) -> str:
        return f"unknown container {self.container!r}"


class DuplicateItemError(ReorderError, ValueError):
    """An item identifier appears more than once across the containers."""

    def __init__(self, item_id: Hashable, containers: tuple[str, ...]):
        super().__init__(f"item {item_id!r} appears more than once (in {', '.join(containers)})")
        self.item_id = item_id
        self.containers = containers


class SessionActiveError(ReorderError, RuntimeError):
    """The operation is not allowed while a drag session is in progress."""
