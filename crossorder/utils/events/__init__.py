"""Module: __init__.py

Date: 2026-10-19

Event system: pure Python signals for notifying the presentation layer.
"""

from crossorder.utils.events.observable import Observable, Signal

__all__ = ["Observable", "Signal"]
