# -*- coding: utf-8 -*-
"""Base host: the notification service that displays composed presentations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from notify_composer.models.payload import Channel
from notify_composer.models.presentation import HostNotificationSnapshot, PresentationRequest


class BaseNotificationHost(ABC):
    """Abstract host. Submissions and cancellations are fire-and-forget;
    transport failures are raised to the caller as HostError."""

    @abstractmethod
    def register_channel(self, channel: Channel) -> None:
        """Register (or update) a channel notifications can be posted to."""
        pass

    @abstractmethod
    def submit(self, identifier: int, presentation: PresentationRequest) -> None:
        """Display presentation under identifier, replacing any entry with the same id."""
        pass

    @abstractmethod
    def cancel(self, identifier: int) -> None:
        """Remove the entry with identifier; unknown ids are ignored."""
        pass

    @abstractmethod
    def list_current(self) -> Sequence[HostNotificationSnapshot]:
        """Return the notifications currently displayed.

        Hosts without introspection return an empty sequence.
        """
        pass
