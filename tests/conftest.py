# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from notify_composer.models.metadata import ExtenderMetadata
from notify_composer.models.payload import (
    Action,
    Default,
    NotificationRequest,
    Stackable,
)
from notify_composer.models.presentation import HostNotificationSnapshot
from notify_composer.notifications.composer import NotificationComposer
from notify_composer.notifications.extender.metadata_codec import MetadataCodec
from notify_composer.notifications.formatting import SecondaryTextFormatter
from notify_composer.notifications.hosts.in_memory import InMemoryNotificationHost
from notify_composer.notifications.stacking.merge_engine import StackMergeEngine
from notify_composer.notifications.stylers.style_selector import StyleSelector


@pytest.fixture
def group_key() -> str:
    """Default stacking key used by tests."""
    return "chat:42"


@pytest.fixture
def formatter() -> SecondaryTextFormatter:
    """Formatter with the default muted color and <br> marker."""
    return SecondaryTextFormatter()


@pytest.fixture
def codec() -> MetadataCodec:
    return MetadataCodec()


@pytest.fixture
def host(codec: MetadataCodec) -> InMemoryNotificationHost:
    """Fresh in-memory host per test."""
    return InMemoryNotificationHost(codec=codec)


@pytest.fixture
def composer(
    host: InMemoryNotificationHost,
    formatter: SecondaryTextFormatter,
    codec: MetadataCodec,
) -> NotificationComposer:
    """Composer reading snapshots from the in-memory host."""
    return NotificationComposer(
        snapshot_source=host,
        style_selector=StyleSelector(formatter),
        merge_engine=StackMergeEngine(formatter),
        codec=codec,
    )


@pytest.fixture
def stackable_factory(group_key: str) -> Callable[..., Stackable]:
    """Build Stackable with count-aware title/description and easy overrides."""

    def _build(**overrides: Any) -> Stackable:
        return Stackable(
            key=overrides.pop("key", group_key),
            summary_content=overrides.pop("summary_content", "Bob: hey"),
            summary_title=overrides.pop("summary_title", lambda count: f"{count} new messages"),
            summary_description=overrides.pop(
                "summary_description", lambda count: f"{count} messages from chat"
            ),
            click_intent=overrides.pop("click_intent", "open-chat"),
            stackable_actions=overrides.pop(
                "stackable_actions", (Action(title="Mark all read", intent="mark-read"),)
            ),
        )

    return _build


@pytest.fixture
def request_factory() -> Callable[..., NotificationRequest]:
    """Build NotificationRequest with Default content and easy overrides."""

    def _build(**overrides: Any) -> NotificationRequest:
        return NotificationRequest(
            content=overrides.pop("content", Default(title="Bob", text="hey")),
            actions=overrides.pop("actions", None),
            stackable=overrides.pop("stackable", None),
            **overrides,
        )

    return _build


@pytest.fixture
def snapshot_factory(group_key: str) -> Callable[..., HostNotificationSnapshot]:
    """Build a stackable snapshot; pass stacked_lines to make it an already-merged summary."""

    def _build(**overrides: Any) -> HostNotificationSnapshot:
        key = overrides.pop("key", group_key)
        stacked_lines = overrides.pop("stacked_lines", None)
        is_stacked = overrides.pop("is_stacked", stacked_lines is not None)
        metadata = ExtenderMetadata(
            key=key,
            is_stackable=True,
            is_stacked=is_stacked,
            summary_text=overrides.pop("summary_text", None),
            stacked_lines=stacked_lines,
        )
        return HostNotificationSnapshot(
            identifier=overrides.pop("identifier", 1),
            metadata=metadata,
            **overrides,
        )

    return _build
