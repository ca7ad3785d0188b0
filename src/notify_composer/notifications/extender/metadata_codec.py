# -*- coding: utf-8 -*-
"""Codec between ExtenderMetadata and the host's generic extras bag.

The bag is shared with the host and other subsystems, so encoding only ever
writes the extender keys and decoding tolerates anything it finds there.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from notify_composer.models.metadata import ExtenderMetadata

KEY = "extender.key"
STACKABLE = "extender.stackable"
STACKED = "extender.stacked"
SUMMARY_TEXT = "extender.summaryText"
STACKED_LINES = "extender.stackedLines"

EXTENDER_KEYS = frozenset({KEY, STACKABLE, STACKED, SUMMARY_TEXT, STACKED_LINES})


class MetadataCodec:
    """Encode/decode ExtenderMetadata into/from an extras bag."""

    def encode(
        self,
        metadata: ExtenderMetadata,
        bag: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a copy of bag with the metadata written under the extender keys.

        Optional fields that are None are removed from the copy so a stale value
        from a previous encoding cannot survive.
        """
        encoded: dict[str, Any] = dict(bag or {})
        encoded[STACKABLE] = metadata.is_stackable
        encoded[STACKED] = metadata.is_stacked
        self._put_optional(encoded, KEY, metadata.key)
        self._put_optional(encoded, SUMMARY_TEXT, metadata.summary_text)
        self._put_optional(
            encoded,
            STACKED_LINES,
            list(metadata.stacked_lines) if metadata.stacked_lines is not None else None,
        )
        return encoded

    def decode(self, bag: Mapping[str, Any] | None) -> ExtenderMetadata:
        """Read ExtenderMetadata back; unknown or malformed values decode as absent."""
        if not bag:
            return ExtenderMetadata()

        key = self._as_str(bag.get(KEY))
        is_stackable = bag.get(STACKABLE) is True and key is not None
        if not is_stackable:
            return ExtenderMetadata()

        return ExtenderMetadata(
            key=key,
            is_stackable=True,
            is_stacked=bag.get(STACKED) is True,
            summary_text=self._as_str(bag.get(SUMMARY_TEXT)),
            stacked_lines=self._as_lines(bag.get(STACKED_LINES)),
        )

    @staticmethod
    def has_metadata(bag: Mapping[str, Any] | None) -> bool:
        """Return True if any extender key is present in bag."""
        return bool(bag) and not EXTENDER_KEYS.isdisjoint(cast(Mapping[str, Any], bag))

    @staticmethod
    def strip(bag: Mapping[str, Any] | None) -> dict[str, Any]:
        """Return a copy of bag without any extender key."""
        return {name: value for name, value in (bag or {}).items() if name not in EXTENDER_KEYS}

    @staticmethod
    def _put_optional(bag: dict[str, Any], name: str, value: Any) -> None:
        if value is None:
            bag.pop(name, None)
        else:
            bag[name] = value

    @staticmethod
    def _as_str(value: Any) -> str | None:
        return value if isinstance(value, str) else None

    @staticmethod
    def _as_lines(value: Any) -> tuple[str, ...] | None:
        if not isinstance(value, (list, tuple)):
            return None
        return tuple(str(line) for line in cast(list[Any], value) if line is not None)
