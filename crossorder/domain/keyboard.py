"""Module: keyboard.py

Date: 2026-10-19

Domain types for keyboard-driven dragging.

Pure domain layer - no UI dependencies. The input collaborator maps its
toolkit key codes (arrow keys, Space/Enter, Escape) onto ``DragKey``.
"""

from __future__ import annotations

from enum import Enum


class DragKey(Enum):
    """Abstract keys understood while a keyboard drag is active.

    Example:
        >>> DragKey.from_name("ArrowUp")
        <DragKey.UP: 'up'>
        >>> DragKey.from_name("Escape")
        <DragKey.CANCEL: 'cancel'>

    """

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    DROP = "drop"
    CANCEL = "cancel"

    @property
    def is_navigation(self) -> bool:
        return self in (DragKey.UP, DragKey.DOWN, DragKey.LEFT, DragKey.RIGHT)

    @classmethod
    def from_name(cls, name: str) -> DragKey | None:
        """Map a common key name (DOM or toolkit style) to a DragKey, or None."""
        return _KEY_ALIASES.get(name.strip().lower().replace("_", ""))


_KEY_ALIASES = {
    "up": DragKey.UP,
    "arrowup": DragKey.UP,
    "keyup": DragKey.UP,
    "down": DragKey.DOWN,
    "arrowdown": DragKey.DOWN,
    "keydown": DragKey.DOWN,
    "left": DragKey.LEFT,
    "arrowleft": DragKey.LEFT,
    "keyleft": DragKey.LEFT,
    "right": DragKey.RIGHT,
    "arrowright": DragKey.RIGHT,
    "keyright": DragKey.RIGHT,
    "enter": DragKey.DROP,
    "return": DragKey.DROP,
    "keyenter": DragKey.DROP,
    "keyreturn": DragKey.DROP,
    "space": DragKey.DROP,
    "keyspace": DragKey.DROP,
    "escape": DragKey.CANCEL,
    "esc": DragKey.CANCEL,
    "keyescape": DragKey.CANCEL,
}
