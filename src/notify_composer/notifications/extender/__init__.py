"""Extender metadata codec."""

from notify_composer.notifications.extender.metadata_codec import (
    EXTENDER_KEYS,
    MetadataCodec,
)

__all__ = ["EXTENDER_KEYS", "MetadataCodec"]
