"""Stacking of notifications that share a group key."""

from notify_composer.notifications.stacking.merge_engine import (
    StackedSummary,
    StackMergeEngine,
)

__all__ = ["StackMergeEngine", "StackedSummary"]
