# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from dependency_injector import containers, providers

from notify_composer.config import Settings, get_settings
from notify_composer.logging.config import configure_logging
from notify_composer.models.payload import Channel
from notify_composer.notifications.composer import NotificationComposer
from notify_composer.notifications.extender.metadata_codec import MetadataCodec
from notify_composer.notifications.formatting import SecondaryTextFormatter
from notify_composer.notifications.hosts.base import BaseNotificationHost
from notify_composer.notifications.hosts.console import ConsoleNotificationHost
from notify_composer.notifications.hosts.in_memory import InMemoryNotificationHost
from notify_composer.notifications.identifier import IdentifierPolicy
from notify_composer.notifications.notification_manager import NotificationService
from notify_composer.notifications.stacking.merge_engine import StackMergeEngine
from notify_composer.notifications.stylers.style_selector import StyleSelector
from notify_composer.notifications.stylers.text_renderer import PlainTextRenderer


def _build_formatter(settings: Settings) -> SecondaryTextFormatter:
    return SecondaryTextFormatter(
        color=settings.formatting.secondary_color,
        line_break=settings.formatting.line_break,
    )


def _build_host(
    settings: Settings,
    codec: MetadataCodec,
    formatter: SecondaryTextFormatter,
) -> BaseNotificationHost:
    """Build the host selected by HOST__BACKEND."""
    if settings.host.backend == "console":
        return ConsoleNotificationHost(renderer=PlainTextRenderer(formatter))
    return InMemoryNotificationHost(
        supports_introspection=settings.host.supports_introspection,
        strict_channels=settings.host.strict_channels,
        codec=codec,
    )


def _build_default_channel(settings: Settings) -> Channel:
    cfg = settings.channel
    return Channel(
        id=cfg.default_id,
        name=cfg.default_name,
        description=cfg.default_description,
        importance=cfg.default_importance,
    )


def _max_lines(settings: Settings) -> int:
    return settings.stacking.max_lines


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, codec, selector, merge engine, host and service.

    Call init_resources() at startup to configure logging from the same settings.
    """

    config = providers.Callable(get_settings)

    logging = providers.Resource(configure_logging, config)

    formatter = providers.Singleton(_build_formatter, config)

    metadata_codec = providers.Singleton(MetadataCodec)

    style_selector = providers.Singleton(StyleSelector, formatter=formatter)

    merge_engine = providers.Singleton(
        StackMergeEngine,
        formatter=formatter,
        max_lines=providers.Callable(_max_lines, config),
    )

    identifier_policy = providers.Singleton(IdentifierPolicy)

    host = providers.Singleton(_build_host, config, metadata_codec, formatter)

    composer = providers.Singleton(
        NotificationComposer,
        snapshot_source=host,
        style_selector=style_selector,
        merge_engine=merge_engine,
        codec=metadata_codec,
        identifier_policy=identifier_policy,
    )

    notification_service = providers.Singleton(
        NotificationService,
        composer=composer,
        host=host,
        default_channel=providers.Callable(_build_default_channel, config),
    )
