# -*- coding: utf-8 -*-
"""In-memory host keeping displayed notifications keyed by identifier."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any

import structlog

from notify_composer.exceptions import UnknownChannelError
from notify_composer.models.payload import Channel
from notify_composer.models.presentation import (
    HostNotificationSnapshot,
    LineListStyle,
    PresentationRequest,
)
from notify_composer.notifications.extender.metadata_codec import MetadataCodec
from notify_composer.notifications.hosts.base import BaseNotificationHost


class InMemoryNotificationHost(BaseNotificationHost):
    """Host double that stores presentations and exposes them as snapshots.

    Entries keep their first-posted order when replaced, like a host tray.
    """

    def __init__(
        self,
        *,
        supports_introspection: bool = True,
        strict_channels: bool = False,
        codec: MetadataCodec | None = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        self.supports_introspection = supports_introspection
        self.strict_channels = strict_channels
        self._codec = codec or MetadataCodec()
        self._logger = get_logger(logger_name or self.__class__.__name__)
        self._channels: dict[str, Channel] = {}
        self._active: dict[int, PresentationRequest] = {}
        self._lock = threading.Lock()

    @property
    def channels(self) -> dict[str, Channel]:
        return dict(self._channels)

    def register_channel(self, channel: Channel) -> None:
        self._channels[channel.id] = channel
        self._logger.debug("host_channel_registered", channel_id=channel.id)

    def submit(self, identifier: int, presentation: PresentationRequest) -> None:
        if self.strict_channels and presentation.channel_id not in self._channels:
            raise UnknownChannelError(presentation.channel_id, identifier=identifier)
        with self._lock:
            replaced = identifier in self._active
            self._active[identifier] = presentation
        self._logger.debug(
            "host_notification_posted",
            notification_id=identifier,
            notification_replaced=replaced,
        )

    def cancel(self, identifier: int) -> None:
        with self._lock:
            removed = self._active.pop(identifier, None) is not None
        self._logger.debug(
            "host_notification_cancelled",
            notification_id=identifier,
            notification_found=removed,
        )

    def get(self, identifier: int) -> PresentationRequest | None:
        """Return the presentation displayed under identifier, or None."""
        with self._lock:
            return self._active.get(identifier)

    def active(self) -> dict[int, PresentationRequest]:
        """Return a copy of every displayed presentation by identifier."""
        with self._lock:
            return dict(self._active)

    def list_current(self) -> list[HostNotificationSnapshot]:
        if not self.supports_introspection:
            return []
        return [self._snapshot(i, p) for i, p in self.active().items()]

    def _snapshot(self, identifier: int, presentation: PresentationRequest) -> HostNotificationSnapshot:
        style = presentation.style
        return HostNotificationSnapshot(
            identifier=identifier,
            metadata=self._codec.decode(presentation.extras),
            text_lines=style.lines if isinstance(style, LineListStyle) else None,
        )
