"""Module: observable.py

Date: 2026-10-19

Observable - pure Python observer pattern.

Gives the engine Qt-signal-like notifications without a GUI toolkit:
- Signal descriptor for declaring events on a class
- Observable base class for state owners
- connect/disconnect/emit interface

A presentation layer (Qt, Tk, a web bridge) subscribes with plain callables.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any

from crossorder.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

__all__ = ["Observable", "Signal", "SignalInstance"]


class Signal:
    """Descriptor for declaring observable signals.

    Usage:
        class Board(Observable):
            sequences_changed = Signal(dict)
            drag_started = Signal(object)

        board = Board()
        board.sequences_changed.connect(render)
        board.sequences_changed.emit({"todo": ("a", "b")})
    """

    def __init__(self, *arg_types: type):
        """Initialize signal with the argument types it carries (documentation only)."""
        self.arg_types = arg_types
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, obj: Observable | None, _objtype: type | None = None) -> SignalInstance:
        """Return the per-object signal instance, creating it on first access."""
        if obj is None:
            return self  # type: ignore[return-value]

        attr_name = f"_signal_{self.name}"
        instance = obj.__dict__.get(attr_name)
        if instance is None:
            instance = SignalInstance(self.name, self.arg_types)
            obj.__dict__[attr_name] = instance
        return instance


class SignalInstance:
    """A signal bound to one object."""

    def __init__(self, name: str, arg_types: tuple[type, ...]):
        self.name = name
        self.arg_types = arg_types
        self._callbacks: list[Callable[..., Any]] = []
        self._lock = threading.Lock()

    def connect(self, callback: Callable[..., Any]) -> None:
        """Connect a callback; connecting the same callback twice is a no-op."""
        with self._lock:
            if callback not in self._callbacks:
                self._callbacks.append(callback)
                logger.debug(
                    "Signal connected: %s -> %s",
                    self.name,
                    getattr(callback, "__name__", repr(callback)),
                    extra={"dev_only": True},
                )

    def disconnect(self, callback: Callable[..., Any] | None = None) -> None:
        """Disconnect a callback, or every callback when ``callback`` is None."""
        with self._lock:
            if callback is None:
                self._callbacks.clear()
            elif callback in self._callbacks:
                self._callbacks.remove(callback)

    def receiver_count(self) -> int:
        with self._lock:
            return len(self._callbacks)

    def emit(self, *args: Any) -> None:
        """Call every connected callback with ``args``.

        A failing subscriber is logged and skipped; it never interrupts the
        emitter or the remaining subscribers.
        """
        with self._lock:
            callbacks = self._callbacks.copy()

        # Called outside the lock so subscribers may (dis)connect
        for callback in callbacks:
            try:
                callback(*args)
            except Exception:
                logger.exception(
                    "Error in signal callback: %s -> %s",
                    self.name,
                    getattr(callback, "__name__", repr(callback)),
                )


class Observable:
    """Base class for objects that expose ``Signal`` attributes.

        class Counter(Observable):
            value_changed = Signal(int)

            def increment(self):
                self._value += 1
                self.value_changed.emit(self._value)
    """

    def __init__(self) -> None:
        super().__init__()
