# -*- coding: utf-8 -*-
"""NotificationComposer: staged pipeline from NotificationRequest to PresentationRequest.

Stages: header/meta -> actions -> stacking (reads host snapshots) -> style -> finalize.
Each stage returns a new immutable PresentationRequest; nothing partially built
escapes the composer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import structlog

from notify_composer.models.metadata import ExtenderMetadata
from notify_composer.models.payload import NotificationRequest
from notify_composer.models.presentation import PresentationRequest
from notify_composer.notifications.extender.metadata_codec import MetadataCodec
from notify_composer.notifications.identifier import IdentifierPolicy
from notify_composer.notifications.stacking.merge_engine import StackedSummary, StackMergeEngine
from notify_composer.notifications.stylers.style_selector import StyleSelector
from notify_composer.notifications.types import Composition, SnapshotSource


class NotificationComposer:
    """Compose a request into the presentation, metadata and id submitted to the host."""

    def __init__(
        self,
        *,
        snapshot_source: SnapshotSource,
        style_selector: StyleSelector | None = None,
        merge_engine: StackMergeEngine | None = None,
        codec: MetadataCodec | None = None,
        identifier_policy: IdentifierPolicy | None = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the composer.

        Args:
            snapshot_source: Host view used to find notifications to stack with.
            style_selector: Maps content variants to styles (default StyleSelector()).
            merge_engine: Rebuilds stacked summaries (default StackMergeEngine()).
            codec: Extras bag codec (default MetadataCodec()).
            identifier_policy: Assigns display ids (default IdentifierPolicy()).
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._snapshot_source = snapshot_source
        self._style_selector = style_selector or StyleSelector()
        self._merge_engine = merge_engine or StackMergeEngine()
        self._codec = codec or MetadataCodec()
        self._identifier_policy = identifier_policy or IdentifierPolicy()
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def compose(self, request: NotificationRequest) -> Composition:
        """Run every stage and return the finished composition.

        Host failures while listing snapshots propagate unchanged.
        """
        presentation = self._apply_header_and_meta(request)
        presentation = presentation.with_actions(tuple(request.actions or ()))

        metadata = ExtenderMetadata()
        summary: StackedSummary | None = None
        stackable = request.stackable
        if stackable is not None:
            metadata = ExtenderMetadata.for_stack(stackable.key, stackable.summary_content)
            snapshots = list(self._snapshot_source.list_current())
            if snapshots:
                summary = self._merge_engine.merge(stackable, snapshots, metadata)

        if summary is not None:
            metadata = summary.metadata
            presentation = (
                presentation.with_overrides(summary.overrides)
                .with_content_intent(summary.content_intent)
                .with_actions(summary.actions)
                .with_style(summary.style)
            )
            self._logger.info(
                "composer_stack_merged",
                stack_key=metadata.key,
                stack_lines_count=len(summary.lines),
            )
        else:
            selection = self._style_selector.select(request.content)
            presentation = presentation.with_overrides(selection.overrides).with_style(
                selection.style
            )

        if stackable is not None:
            presentation = presentation.with_extras(
                self._codec.encode(metadata, presentation.extras)
            )
        elif self._codec.has_metadata(presentation.extras):
            # A request without a descriptor must never look stackable to the next merge.
            presentation = presentation.with_extras(self._codec.strip(presentation.extras))
            self._logger.warning(
                "composer_extender_keys_dropped",
                notification_channel=presentation.channel_id,
            )

        identifier = self._identifier_policy.assign(metadata)
        self._logger.debug(
            "composer_composition_complete",
            notification_id=identifier,
            notification_channel=presentation.channel_id,
            notification_content=type(request.content).__name__,
            notification_stacked=metadata.is_stacked,
        )
        return Composition(presentation=presentation, metadata=metadata, identifier=identifier)

    @staticmethod
    def _apply_header_and_meta(request: NotificationRequest) -> PresentationRequest:
        header = request.header
        meta = request.meta
        return PresentationRequest(
            channel_id=header.channel,
            icon=header.icon,
            color=header.color,
            sub_text=header.header_text,
            auto_cancel=meta.cancel_on_click,
            content_intent=meta.click_intent,
            delete_intent=meta.clear_intent,
            category=meta.category,
            priority=meta.priority,
            local_only=meta.local_only,
            ongoing=meta.sticky,
            extras=dict(meta.extras),
        )
