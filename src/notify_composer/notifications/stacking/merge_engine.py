"""StackMergeEngine: rebuild a stacked summary from the notifications the host displays.

No I/O. Receives the stacking descriptor and a snapshot list read by the composer.
Already-stacked summaries are re-expanded into their lines so earlier members
are never collapsed into a single row; raw entries contribute their summary text.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

import structlog

from notify_composer.models.metadata import ExtenderMetadata
from notify_composer.models.payload import Action, Stackable
from notify_composer.models.presentation import (
    CollapsedOverrides,
    HostNotificationSnapshot,
    LineListStyle,
)
from notify_composer.notifications.formatting import SecondaryTextFormatter


@dataclass(frozen=True, slots=True)
class StackedSummary:
    """Result of a merge: style, collapsed view, click intent and actions of the summary."""

    style: LineListStyle
    overrides: CollapsedOverrides
    content_intent: str | None
    actions: tuple[Action, ...]
    metadata: ExtenderMetadata

    @property
    def lines(self) -> tuple[str, ...]:
        return self.style.lines


class StackMergeEngine:
    """Merge a new stackable notification with matching host snapshots.

    max_lines caps the retained lines (newest kept); 0 keeps everything.
    """

    def __init__(
        self,
        formatter: SecondaryTextFormatter | None = None,
        *,
        max_lines: int = 0,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        if max_lines < 0:
            raise ValueError("max_lines must be >= 0")
        self._formatter = formatter or SecondaryTextFormatter()
        self._max_lines = max_lines
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def merge(
        self,
        stackable: Stackable,
        snapshots: Iterable[HostNotificationSnapshot],
        metadata: ExtenderMetadata | None = None,
    ) -> StackedSummary | None:
        """Return the merged summary, or None when no matching snapshot contributes a line.

        Args:
            stackable: Descriptor of the arriving notification.
            snapshots: Notifications currently displayed by the host.
            metadata: Metadata already attached to the arriving notification
                (defaults to a fresh stackable record for the descriptor).
        """
        lines = self._collect_lines(stackable.key, snapshots)
        if not lines:
            return None

        lines.append(stackable.summary_content or "")
        dropped = 0
        if self._max_lines and len(lines) > self._max_lines:
            dropped = len(lines) - self._max_lines
            lines = lines[dropped:]

        count = len(lines)
        title = stackable.summary_title(count) if stackable.summary_title else None
        description = (
            stackable.summary_description(count) if stackable.summary_description else None
        )
        merged = tuple(lines)
        base = metadata or ExtenderMetadata.for_stack(stackable.key, stackable.summary_content)

        self._logger.debug(
            "stack_merge_complete",
            stack_key=stackable.key,
            stack_lines_count=count,
            stack_lines_dropped=dropped,
        )
        return StackedSummary(
            style=LineListStyle(lines=merged, big_content_title=title),
            overrides=CollapsedOverrides(title, self._formatter.secondary(description)),
            content_intent=stackable.click_intent,
            actions=tuple(stackable.stackable_actions or ()),
            metadata=base.as_stacked(merged),
        )

    @staticmethod
    def _collect_lines(
        key: str,
        snapshots: Iterable[HostNotificationSnapshot],
    ) -> list[str]:
        """Gather lines from matching snapshots in the order the host lists them."""
        lines: list[str] = []
        for snapshot in snapshots:
            meta = snapshot.metadata
            if not meta.is_stackable or meta.key != key:
                continue
            if meta.is_stacked:
                stacked = meta.stacked_lines
                if stacked is None:
                    stacked = snapshot.text_lines or ()
                lines.extend(stacked)
                continue
            if meta.summary_text is not None:
                lines.append(meta.summary_text)
        return lines
