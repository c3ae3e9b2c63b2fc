"""Module: crossorder.config

Date: 2026-10-19

Configuration package for crossorder.

- app: package info, logging
- features: drop policy and keyboard navigation switches

All settings are re-exported from this module:
    from crossorder.config import DEFAULT_DROP_OUTSIDE_POLICY
"""

from crossorder.config.app import *  # noqa: F401, F403
from crossorder.config.features import *  # noqa: F401, F403
