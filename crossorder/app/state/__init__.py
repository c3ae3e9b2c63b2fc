"""State holders for the application layer."""

from crossorder.app.state.drag_session import DragPhase, DragSession

__all__ = ["DragPhase", "DragSession"]
