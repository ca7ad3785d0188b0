"""Notification service: compose requests and hand them to the host."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

import structlog

from notify_composer.models.payload import Channel, NotificationRequest
from notify_composer.notifications.composer import NotificationComposer
from notify_composer.notifications.hosts.base import BaseNotificationHost


@dataclass
class _KeyLock:
    """Lock for one group key, counting the callers holding or waiting on it."""

    lock: threading.Lock = field(default_factory=threading.Lock)
    holders: int = 0


@dataclass
class NotificationService:
    """Show, cancel and route notifications through one host.

    show() serializes composition per group key so two arrivals for the same key
    cannot both read the pre-merge state and drop each other's line.
    """

    composer: NotificationComposer
    host: BaseNotificationHost
    default_channel: Channel | None = None
    get_logger: Callable[[str], Any] = field(default=structlog.get_logger)
    _key_locks: dict[str, _KeyLock] = field(init=False, default_factory=dict)
    _registry_lock: threading.Lock = field(init=False, default_factory=threading.Lock)
    _logger: Any = field(init=False)

    def __post_init__(self) -> None:
        self._logger = self.get_logger("NotificationService")

    def register_channel(self, channel: Channel) -> None:
        """Register a channel with the host."""
        self.host.register_channel(channel)
        self._logger.info(
            "notification_channel_registered",
            channel_id=channel.id,
            channel_importance=channel.importance,
        )

    def register_default_channel(self) -> None:
        """Register the configured default channel, if any."""
        if self.default_channel is not None:
            self.register_channel(self.default_channel)

    def show(self, request: NotificationRequest) -> int:
        """Compose and submit request; return the id to cancel or update it later.

        Host failures propagate to the caller unchanged.
        """
        key = request.stackable.key if request.stackable is not None else None
        with self._serialized(key):
            composition = self.composer.compose(request)
            self.host.submit(composition.identifier, composition.presentation)
        self._logger.info(
            "notification_shown",
            notification_id=composition.identifier,
            notification_channel=composition.presentation.channel_id,
            notification_stack_key=key,
            notification_stacked=composition.metadata.is_stacked,
        )
        return composition.identifier

    def cancel(self, identifier: int) -> None:
        """Remove a displayed notification."""
        self.host.cancel(identifier)
        self._logger.info("notification_cancelled", notification_id=identifier)

    @contextmanager
    def _serialized(self, key: str | None) -> Iterator[None]:
        if key is None:
            yield
            return
        with self._registry_lock:
            entry = self._key_locks.get(key)
            if entry is None:
                entry = self._key_locks[key] = _KeyLock()
            entry.holders += 1
        try:
            with entry.lock:
                yield
        finally:
            with self._registry_lock:
                entry.holders -= 1
                if entry.holders == 0:
                    del self._key_locks[key]
