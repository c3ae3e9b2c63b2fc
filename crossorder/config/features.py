"""Module: crossorder.config.features

Date: 2026-10-19

Behaviour switches for the reorder engine.
"""

# =====================================
# DROP HANDLING
# =====================================

# What happens when a drag ends over nothing (released outside every
# container). Either "keep_live" or "revert_to_origin".
DEFAULT_DROP_OUTSIDE_POLICY = "keep_live"

# =====================================
# KEYBOARD NAVIGATION
# =====================================

# Left/right move to the neighbouring container; when enabled, moving past
# the last container wraps around to the first one.
KEYBOARD_WRAP_CONTAINERS = False
