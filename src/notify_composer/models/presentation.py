# -*- coding: utf-8 -*-
"""Host-facing presentation values: styles, the presentation request and host snapshots.

All values are immutable; each composition stage returns a new PresentationRequest.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any, TypeAlias

from notify_composer.models.metadata import ExtenderMetadata
from notify_composer.models.payload import Action, MessageItem


@dataclass(frozen=True, slots=True)
class LineListStyle:
    """Expanded view listing one line per row (inbox style)."""

    lines: tuple[str, ...] = ()
    big_content_title: str | None = None


@dataclass(frozen=True, slots=True)
class BigTextStyle:
    """Expanded view holding a long rich-text body."""

    big_text: str = ""


@dataclass(frozen=True, slots=True)
class BigPictureStyle:
    """Expanded view holding an image and a summary line."""

    summary_text: str = ""
    picture: Any = None


@dataclass(frozen=True, slots=True)
class ConversationStyle:
    """Expanded view of a conversation."""

    user_display_name: str = ""
    conversation_title: str | None = None
    messages: tuple[MessageItem, ...] = ()


Style: TypeAlias = LineListStyle | BigTextStyle | BigPictureStyle | ConversationStyle


@dataclass(frozen=True, slots=True)
class CollapsedOverrides:
    """Collapsed-view fields a style replaces; None leaves the field as it is."""

    title: str | None = None
    text: str | None = None


@dataclass(frozen=True, slots=True)
class PresentationRequest:
    """Complete notification handed to the host for display."""

    channel_id: str
    icon: str | None = None
    color: str | None = None
    sub_text: str | None = None
    auto_cancel: bool = True
    content_intent: str | None = None
    delete_intent: str | None = None
    category: str | None = None
    priority: int = 0
    local_only: bool = False
    ongoing: bool = False
    content_title: str | None = None
    content_text: str | None = None
    actions: tuple[Action, ...] = ()
    style: Style | None = None
    extras: Mapping[str, Any] = field(default_factory=dict)

    def with_overrides(self, overrides: CollapsedOverrides) -> PresentationRequest:
        """Return a copy with only the non-None overrides applied."""
        return replace(
            self,
            content_title=self.content_title if overrides.title is None else overrides.title,
            content_text=self.content_text if overrides.text is None else overrides.text,
        )

    def with_actions(self, actions: tuple[Action, ...]) -> PresentationRequest:
        """Return a copy whose action list is replaced wholesale."""
        return replace(self, actions=actions)

    def with_content_intent(self, intent: str | None) -> PresentationRequest:
        """Return a copy with a new click intent."""
        return replace(self, content_intent=intent)

    def with_style(self, style: Style | None) -> PresentationRequest:
        """Return a copy with the expanded style set."""
        return replace(self, style=style)

    def with_extras(self, extras: Mapping[str, Any]) -> PresentationRequest:
        """Return a copy with a new extras bag."""
        return replace(self, extras=dict(extras))


@dataclass(frozen=True, slots=True)
class HostNotificationSnapshot:
    """Point-in-time view of one notification the host currently displays."""

    identifier: int
    metadata: ExtenderMetadata = field(default_factory=ExtenderMetadata)
    text_lines: tuple[str, ...] | None = None
    """Lines of the displayed line-list style, used when the bag predates stacked_lines."""
