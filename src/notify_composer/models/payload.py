# -*- coding: utf-8 -*-
"""Declarative notification payload: header, meta, content variants, actions and stacking.

A NotificationRequest is built by the caller and consumed once by the composer.
Intents (click, clear, action targets) are opaque references resolved by the host.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeAlias

DEFAULT_CHANNEL_ID = "application_notification"

PRIORITY_MIN = -2
PRIORITY_LOW = -1
PRIORITY_DEFAULT = 0
PRIORITY_HIGH = 1
PRIORITY_MAX = 2


@dataclass(frozen=True, slots=True)
class Channel:
    """Host channel a notification is posted to."""

    id: str
    name: str
    description: str = ""
    importance: int = 3


@dataclass(frozen=True, slots=True)
class Action:
    """Button attached to a notification."""

    title: str
    intent: str | None = None
    icon: str | None = None


@dataclass(frozen=True, slots=True)
class Header:
    """Chrome shown in the notification header."""

    channel: str = DEFAULT_CHANNEL_ID
    icon: str | None = None
    color: str | None = None
    """Accent color of the icon, app name and expand chevron."""
    header_text: str | None = None
    """Text shown to the right of the app name."""


@dataclass(frozen=True, slots=True)
class Meta:
    """Behavioural fields of a notification."""

    click_intent: str | None = None
    clear_intent: str | None = None
    category: str | None = None
    priority: int = PRIORITY_DEFAULT
    local_only: bool = False
    sticky: bool = False
    cancel_on_click: bool = True
    extras: Mapping[str, Any] = field(default_factory=dict)
    """Initial key-value bag; keys set here survive composition untouched."""


@dataclass(frozen=True, slots=True)
class Default:
    """Title and text only; no expanded view."""

    title: str | None = None
    text: str | None = None


@dataclass(frozen=True, slots=True)
class TextList:
    """Expanded view shows each line on its own row."""

    title: str | None = None
    text: str | None = None
    lines: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class BigText:
    """Expanded view shows a long body."""

    title: str | None = None
    text: str | None = None
    collapsed_text: str | None = None
    big_text: str | None = None


@dataclass(frozen=True, slots=True)
class BigPicture:
    """Expanded view shows an image."""

    title: str | None = None
    text: str | None = None
    collapsed_text: str | None = None
    image: Any = None


@dataclass(frozen=True, slots=True)
class MessageItem:
    """One entry of a conversation."""

    text: str
    timestamp: int
    """Epoch milliseconds."""
    sender: str | None = None


@dataclass(frozen=True, slots=True)
class Message:
    """Conversation-style content."""

    user_display_name: str = ""
    conversation_title: str | None = None
    messages: tuple[MessageItem, ...] = ()


Content: TypeAlias = Default | TextList | BigText | BigPicture | Message
StandardContent: TypeAlias = Default | TextList | BigText | BigPicture


@dataclass(frozen=True, slots=True)
class Stackable:
    """Describes how a notification merges with others sharing the same key."""

    key: str
    summary_content: str
    """Line this notification contributes to a stacked summary."""
    summary_title: Callable[[int], str] | None = None
    summary_description: Callable[[int], str] | None = None
    click_intent: str | None = None
    stackable_actions: tuple[Action, ...] | None = None


@dataclass(frozen=True, slots=True)
class NotificationRequest:
    """Everything the composer needs to produce one presentation."""

    content: Content = field(default_factory=Default)
    header: Header = field(default_factory=Header)
    meta: Meta = field(default_factory=Meta)
    actions: tuple[Action, ...] | None = None
    stackable: Stackable | None = None
