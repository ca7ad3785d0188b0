# -*- coding: utf-8 -*-
"""Console host (print-based)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from notify_composer.models.payload import Channel
from notify_composer.models.presentation import HostNotificationSnapshot, PresentationRequest
from notify_composer.notifications.hosts.base import BaseNotificationHost

if TYPE_CHECKING:  # pragma: no cover
    from notify_composer.notifications.types import PresentationRenderer


class ConsoleNotificationHost(BaseNotificationHost):
    """Print notifications to stdout. Has no introspection, so nothing ever stacks."""

    def __init__(self, renderer: "PresentationRenderer") -> None:
        self._renderer = renderer
        self._channels: set[str] = set()

    def register_channel(self, channel: Channel) -> None:
        self._channels.add(channel.id)

    def submit(self, identifier: int, presentation: PresentationRequest) -> None:
        """Print the rendered notification prefixed by its id."""
        print(f"#{identifier} {self._renderer.render(presentation)}")

    def cancel(self, identifier: int) -> None:
        print(f"#{identifier} cancelled")

    def list_current(self) -> list[HostNotificationSnapshot]:
        return []
