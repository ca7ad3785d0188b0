"""Custom exceptions for the notification host boundary."""

from __future__ import annotations


class NotifyError(Exception):
    """Base exception for notify_composer errors."""

    pass


class HostError(NotifyError):
    """Raised by a host when a submission, cancellation or query fails."""

    def __init__(
        self,
        message: str,
        *,
        identifier: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.identifier = identifier
        self.cause = cause


class UnknownChannelError(HostError):
    """Raised when a notification targets a channel the host never registered."""

    def __init__(
        self,
        channel_id: str,
        *,
        identifier: int | None = None,
    ) -> None:
        super().__init__(f"Channel not registered: {channel_id}", identifier=identifier)
        self.channel_id = channel_id
