# -*- coding: utf-8 -*-
"""Plain-text rendering of a presentation for text-only hosts (console)."""

from __future__ import annotations

from datetime import datetime, timezone

from notify_composer.models.presentation import (
    BigPictureStyle,
    BigTextStyle,
    ConversationStyle,
    LineListStyle,
    PresentationRequest,
)
from notify_composer.notifications.formatting import SecondaryTextFormatter
from notify_composer.notifications.types import PresentationRenderer


class PlainTextRenderer(PresentationRenderer):
    """Render header, collapsed view, expanded style and actions as separated sections."""

    def __init__(self, formatter: SecondaryTextFormatter | None = None) -> None:
        self._formatter = formatter or SecondaryTextFormatter()

    def render(self, presentation: PresentationRequest) -> str:
        """Return the presentation as plain text."""
        plain = self._formatter.plain
        header = f"[{presentation.channel_id}]"
        if presentation.sub_text:
            header += f" {presentation.sub_text}"

        lines = [header]
        if presentation.content_title:
            lines.append(plain(presentation.content_title))
        if presentation.content_text:
            lines.append(plain(presentation.content_text))

        expanded = self._render_style(presentation)
        if expanded:
            lines.append("─" * 12)
            lines.extend(expanded)

        if presentation.actions:
            lines.append(" | ".join(f"[{action.title}]" for action in presentation.actions))
        return "\n".join(lines).strip()

    def _render_style(self, presentation: PresentationRequest) -> list[str]:
        plain = self._formatter.plain
        style = presentation.style
        if isinstance(style, LineListStyle):
            rows = [plain(style.big_content_title)] if style.big_content_title else []
            return rows + [f"• {plain(line)}" for line in style.lines]
        if isinstance(style, BigTextStyle):
            return [plain(style.big_text)]
        if isinstance(style, BigPictureStyle):
            return [f"🖼️ {plain(style.summary_text)}"]
        if isinstance(style, ConversationStyle):
            rows = [plain(style.conversation_title)] if style.conversation_title else []
            for item in style.messages:
                sender = item.sender or style.user_display_name
                rows.append(f"{self._format_timestamp(item.timestamp)} {sender}: {item.text}")
            return rows
        return []

    @staticmethod
    def _format_timestamp(value: int) -> str:
        """Format epoch milliseconds as HH:MM (UTC) when possible."""
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc).strftime("%H:%M")
        except (OSError, OverflowError, ValueError):
            return str(value)
