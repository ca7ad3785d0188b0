"""Notification composition and stacking subsystem."""

from notify_composer.notifications.composer import NotificationComposer
from notify_composer.notifications.extender import MetadataCodec
from notify_composer.notifications.formatting import SecondaryTextFormatter
from notify_composer.notifications.hosts import (
    BaseNotificationHost,
    ConsoleNotificationHost,
    InMemoryNotificationHost,
)
from notify_composer.notifications.identifier import IdentifierPolicy
from notify_composer.notifications.notification_manager import NotificationService
from notify_composer.notifications.stacking import StackedSummary, StackMergeEngine
from notify_composer.notifications.stylers import (
    PlainTextRenderer,
    StyleSelection,
    StyleSelector,
)
from notify_composer.notifications.types import (
    Composition,
    PresentationRenderer,
    SnapshotSource,
)

__all__ = [
    "BaseNotificationHost",
    "Composition",
    "ConsoleNotificationHost",
    "IdentifierPolicy",
    "InMemoryNotificationHost",
    "MetadataCodec",
    "NotificationComposer",
    "NotificationService",
    "PlainTextRenderer",
    "PresentationRenderer",
    "SecondaryTextFormatter",
    "SnapshotSource",
    "StackMergeEngine",
    "StackedSummary",
    "StyleSelection",
    "StyleSelector",
]
