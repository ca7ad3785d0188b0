"""Protocols shared by the composer and the hosts."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from notify_composer.models.metadata import ExtenderMetadata
from notify_composer.models.presentation import HostNotificationSnapshot, PresentationRequest


@dataclass(frozen=True, slots=True)
class Composition:
    """Output of one composition: what to submit, the metadata it carries and its id."""

    presentation: PresentationRequest
    metadata: ExtenderMetadata
    identifier: int


class SnapshotSource(Protocol):
    """Anything able to list the notifications currently displayed."""

    def list_current(self) -> Sequence[HostNotificationSnapshot]:
        """Return a point-in-time read; may be empty when introspection is unsupported."""
        ...


class PresentationRenderer(Protocol):
    """Render a presentation into a formatted string for a text-only host."""

    def render(self, presentation: PresentationRequest) -> str:
        """Return a formatted text for the given presentation."""
        ...
