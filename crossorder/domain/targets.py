"""Module: targets.py

Date: 2026-10-19

Domain types for what the pointer is over and where an item lands.

Pure domain layer - no UI dependencies.

A hover target is one of three cases:
    ItemTarget(item_id)       pointer over another item
    ContainerTarget(name)     pointer over a container but no item in it
    NO_TARGET                 pointer over nothing the engine knows
"""

from __future__ import annotations

from collections.abc import Collection, Hashable
from dataclasses import dataclass
from typing import Union

ItemId = Hashable


@dataclass(frozen=True)
class ItemTarget:
    """Pointer is over the item ``item_id``."""

    item_id: ItemId


@dataclass(frozen=True)
class ContainerTarget:
    """Pointer is over the container ``container`` itself."""

    container: str


@dataclass(frozen=True)
class NoTarget:
    """Pointer is over nothing actionable."""

    def __bool__(self) -> bool:
        return False


NO_TARGET = NoTarget()

HoverTarget = Union[ItemTarget, ContainerTarget, NoTarget]


@dataclass(frozen=True)
class Placement:
    """A slot: ``index`` within the sequence of ``container``."""

    container: str
    index: int


def classify_hover(raw: object, container_names: Collection[str]) -> HoverTarget:
    """Turn a raw identifier from an input collaborator into a hover target.

    Input toolkits usually report "the thing under the pointer" as a bare id
    that may name an item or a container. Container names win.

    Example:
        >>> classify_hover("todo", {"todo", "done"})
        ContainerTarget(container='todo')
        >>> classify_hover("task-7", {"todo", "done"})
        ItemTarget(item_id='task-7')
        >>> classify_hover(None, {"todo", "done"})
        NoTarget()

    """
    if raw is None or isinstance(raw, NoTarget):
        return NO_TARGET
    if isinstance(raw, (ItemTarget, ContainerTarget)):
        return raw
    if isinstance(raw, str) and raw in container_names:
        return ContainerTarget(raw)
    return ItemTarget(raw)
