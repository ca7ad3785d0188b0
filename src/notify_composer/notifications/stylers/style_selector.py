# -*- coding: utf-8 -*-
"""Content-variant to expanded-style mapping."""

from __future__ import annotations

from dataclasses import dataclass, field

from notify_composer.models.payload import (
    BigPicture,
    BigText,
    Content,
    Default,
    Message,
    TextList,
)
from notify_composer.models.presentation import (
    BigPictureStyle,
    BigTextStyle,
    CollapsedOverrides,
    ConversationStyle,
    LineListStyle,
    Style,
)
from notify_composer.notifications.formatting import SecondaryTextFormatter


@dataclass(frozen=True, slots=True)
class StyleSelection:
    """Expanded style plus the collapsed-view fields it rewrites."""

    style: Style | None
    overrides: CollapsedOverrides = field(default_factory=CollapsedOverrides)


class StyleSelector:
    """Select the expanded style for each content variant.

    Standard variants also rewrite the collapsed title/text so both views stay
    consistent; BigText and BigPicture show their text in the secondary span.
    """

    def __init__(self, formatter: SecondaryTextFormatter | None = None) -> None:
        self._formatter = formatter or SecondaryTextFormatter()

    def select(self, content: Content) -> StyleSelection:
        """Dispatch to the selector for the content's variant."""
        if isinstance(content, Default):
            return StyleSelection(None, CollapsedOverrides(content.title, content.text))
        if isinstance(content, TextList):
            return self._select_text_list(content)
        if isinstance(content, BigText):
            return self._select_big_text(content)
        if isinstance(content, BigPicture):
            return self._select_big_picture(content)
        if isinstance(content, Message):
            return self._select_message(content)
        raise TypeError(f"Unsupported content variant: {type(content).__name__}")

    def _select_text_list(self, content: TextList) -> StyleSelection:
        return StyleSelection(
            LineListStyle(lines=tuple(content.lines)),
            CollapsedOverrides(content.title, content.text),
        )

    def _select_big_text(self, content: BigText) -> StyleSelection:
        fmt = self._formatter
        header = content.collapsed_text or content.title or ""
        big_text = fmt.secondary(header) + fmt.line_break + fmt.line_breaks(content.big_text)
        return StyleSelection(
            BigTextStyle(big_text=big_text),
            CollapsedOverrides(content.title, fmt.secondary(content.text)),
        )

    def _select_big_picture(self, content: BigPicture) -> StyleSelection:
        return StyleSelection(
            BigPictureStyle(
                summary_text=content.collapsed_text or content.text or "",
                picture=content.image,
            ),
            CollapsedOverrides(content.title, self._formatter.secondary(content.text)),
        )

    @staticmethod
    def _select_message(content: Message) -> StyleSelection:
        return StyleSelection(
            ConversationStyle(
                user_display_name=content.user_display_name or "",
                conversation_title=content.conversation_title,
                messages=tuple(content.messages),
            )
        )
