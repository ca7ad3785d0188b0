# -*- coding: utf-8 -*-
"""Unit tests for MetadataCodec."""

from __future__ import annotations

from typing import Any

import pytest

from notify_composer.models.metadata import ExtenderMetadata
from notify_composer.notifications.extender.metadata_codec import MetadataCodec


@pytest.mark.parametrize(
    "metadata",
    [
        ExtenderMetadata(),
        ExtenderMetadata.for_stack("chat:42", "Alice: hi"),
        ExtenderMetadata.for_stack("chat:42", None),
        ExtenderMetadata.for_stack("chat:42", "d").as_stacked(("a", "b", "c", "d")),
        ExtenderMetadata.for_stack("chat:42", "x").as_stacked(()),
        ExtenderMetadata(key="chat:42", is_stackable=True, stacked_lines=("a",)),
        ExtenderMetadata(key="chat:42", is_stackable=True, is_stacked=True),
    ],
)
def test_decode_of_encode_returns_same_metadata(
    codec: MetadataCodec, metadata: ExtenderMetadata
) -> None:
    assert codec.decode(codec.encode(metadata)) == metadata


def test_encode_uses_stable_bag_keys(codec: MetadataCodec) -> None:
    metadata = ExtenderMetadata.for_stack("chat:42", "d").as_stacked(("a", "d"))

    bag = codec.encode(metadata)

    assert bag == {
        "extender.key": "chat:42",
        "extender.stackable": True,
        "extender.stacked": True,
        "extender.summaryText": "d",
        "extender.stackedLines": ["a", "d"],
    }


def test_encode_keeps_unrelated_keys_and_does_not_mutate_input(codec: MetadataCodec) -> None:
    original = {"android.title": "Hello", "other.flag": 1}

    bag = codec.encode(ExtenderMetadata.for_stack("k", "line"), original)

    assert bag["android.title"] == "Hello"
    assert bag["other.flag"] == 1
    assert original == {"android.title": "Hello", "other.flag": 1}


def test_encode_removes_stale_optional_values(codec: MetadataCodec) -> None:
    stale = codec.encode(ExtenderMetadata.for_stack("k", "old").as_stacked(("old",)))

    bag = codec.encode(ExtenderMetadata(), stale)

    assert "extender.key" not in bag
    assert "extender.summaryText" not in bag
    assert "extender.stackedLines" not in bag
    assert bag["extender.stacked"] is False


@pytest.mark.parametrize("bag", [None, {}, {"android.title": "Hello"}])
def test_decode_without_extender_keys_returns_default(
    codec: MetadataCodec, bag: dict[str, Any] | None
) -> None:
    assert codec.decode(bag) == ExtenderMetadata()


def test_decode_tolerates_malformed_values(codec: MetadataCodec) -> None:
    bag = {
        "extender.key": "k",
        "extender.stackable": True,
        "extender.stacked": "yes",
        "extender.summaryText": 12,
        "extender.stackedLines": "not-a-list",
    }

    metadata = codec.decode(bag)

    assert metadata == ExtenderMetadata(key="k", is_stackable=True)


def test_decode_treats_stackable_without_key_as_absent(codec: MetadataCodec) -> None:
    bag = {"extender.stackable": True, "extender.stacked": True}

    assert codec.decode(bag) == ExtenderMetadata()


def test_decode_converts_line_items_to_strings(codec: MetadataCodec) -> None:
    bag = {
        "extender.key": "k",
        "extender.stackable": True,
        "extender.stacked": True,
        "extender.stackedLines": ["a", 2, None],
    }

    assert codec.decode(bag).stacked_lines == ("a", "2")


def test_has_metadata(codec: MetadataCodec) -> None:
    assert codec.has_metadata({"extender.stacked": False}) is True
    assert codec.has_metadata({"android.title": "x"}) is False
    assert codec.has_metadata(None) is False


def test_strip_removes_only_extender_keys(codec: MetadataCodec) -> None:
    bag = codec.encode(ExtenderMetadata.for_stack("k", "line"), {"android.title": "Hello"})

    assert codec.strip(bag) == {"android.title": "Hello"}
    assert codec.strip(None) == {}
    assert "extender.key" in bag
