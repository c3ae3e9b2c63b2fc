"""Module: interaction.py

Date: 2026-10-19

Input events delivered by the pointer/keyboard collaborator.

Events arrive one at a time and each is handled to completion before the
next one (see ReorderCoordinator.dispatch).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from crossorder.domain.keyboard import DragKey
from crossorder.domain.targets import NO_TARGET, HoverTarget, ItemId


@dataclass(frozen=True)
class InteractionStart:
    active_id: ItemId


@dataclass(frozen=True)
class InteractionMove:
    hover_target: HoverTarget = field(default=NO_TARGET)


@dataclass(frozen=True)
class InteractionEnd:
    hover_target: HoverTarget = field(default=NO_TARGET)


@dataclass(frozen=True)
class InteractionCancel:
    pass


@dataclass(frozen=True)
class InteractionKey:
    key: DragKey


InteractionEvent = Union[
    InteractionStart, InteractionMove, InteractionEnd, InteractionCancel, InteractionKey
]
