# -*- coding: utf-8 -*-
"""Unit tests for InMemoryNotificationHost."""

from __future__ import annotations

from notify_composer.models.metadata import ExtenderMetadata
from notify_composer.models.payload import Channel
from notify_composer.models.presentation import LineListStyle, PresentationRequest
from notify_composer.notifications.extender.metadata_codec import MetadataCodec
from notify_composer.notifications.hosts.in_memory import InMemoryNotificationHost


def _presentation(**overrides: object) -> PresentationRequest:
    return PresentationRequest(channel_id="chat", **overrides)  # type: ignore[arg-type]


def test_submit_replaces_entry_with_same_identifier(host: InMemoryNotificationHost) -> None:
    host.submit(1, _presentation(content_title="old"))
    host.submit(1, _presentation(content_title="new"))

    active = host.active()
    assert list(active) == [1]
    assert active[1].content_title == "new"


def test_cancel_unknown_identifier_is_ignored(host: InMemoryNotificationHost) -> None:
    host.cancel(404)

    assert host.active() == {}


def test_list_current_decodes_bag_and_exposes_raw_fields(
    host: InMemoryNotificationHost, codec: MetadataCodec
) -> None:
    metadata = ExtenderMetadata.for_stack("chat:42", "b").as_stacked(("a", "b"))
    host.submit(
        5,
        _presentation(
            content_text="collapsed",
            style=LineListStyle(lines=("a", "b")),
            extras=codec.encode(metadata, {"foreign": 1}),
        ),
    )
    host.submit(6, _presentation(content_text="plain"))

    snapshots = {s.identifier: s for s in host.list_current()}

    assert snapshots[5].metadata == metadata
    assert snapshots[5].text_lines == ("a", "b")
    assert snapshots[6].metadata == ExtenderMetadata()
    assert snapshots[6].text_lines is None


def test_list_current_is_empty_without_introspection() -> None:
    host = InMemoryNotificationHost(supports_introspection=False)
    host.submit(1, _presentation())

    assert host.list_current() == []
    assert host.get(1) is not None


def test_register_channel_overwrites_previous_definition(host: InMemoryNotificationHost) -> None:
    host.register_channel(Channel(id="chat", name="Chat"))
    host.register_channel(Channel(id="chat", name="Chats", importance=4))

    assert host.channels == {"chat": Channel(id="chat", name="Chats", importance=4)}
