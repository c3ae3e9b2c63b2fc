"""Core engine components: registry, resolver and keyboard navigation."""

from crossorder.core.container_registry import ContainerRegistry, array_move
from crossorder.core.keyboard_navigator import KeyboardNavigator
from crossorder.core.placement_resolver import PlacementResolver

__all__ = [
    "ContainerRegistry",
    "KeyboardNavigator",
    "PlacementResolver",
    "array_move",
]
