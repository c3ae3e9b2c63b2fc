"""
Module: conftest.py

Date: 2026-10-19

Global pytest configuration and fixtures for the crossorder test suite.
"""

from __future__ import annotations

import pytest

from crossorder.controllers.reorder_coordinator import ReorderCoordinator
from crossorder.core.container_registry import ContainerRegistry


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "keyboard: keyboard-driven drag scenarios")


class SignalRecorder:
    """Collects every emission of the signals it is connected to."""

    def __init__(self):
        self.calls: list[tuple[str, tuple]] = []

    def watch(self, owner, *names: str) -> SignalRecorder:
        for name in names:
            getattr(owner, name).connect(self._make_callback(name))
        return self

    def _make_callback(self, name):
        def callback(*args):
            self.calls.append((name, args))

        callback.__name__ = f"record_{name}"
        return callback

    def of(self, name: str) -> list[tuple]:
        return [args for signal, args in self.calls if signal == name]

    def names(self) -> list[str]:
        return [signal for signal, _ in self.calls]


@pytest.fixture
def two_lists() -> dict[str, list[str]]:
    """A=[a, b, c], B=[d, e]."""
    return {"A": ["a", "b", "c"], "B": ["d", "e"]}


@pytest.fixture
def registry(two_lists) -> ContainerRegistry:
    return ContainerRegistry(two_lists)


@pytest.fixture
def coordinator(two_lists) -> ReorderCoordinator:
    return ReorderCoordinator(two_lists)


@pytest.fixture
def recorder() -> SignalRecorder:
    return SignalRecorder()
