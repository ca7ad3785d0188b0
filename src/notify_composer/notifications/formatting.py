"""Rich-text conventions for the collapsed secondary line and long bodies."""

from __future__ import annotations

import re
from dataclasses import dataclass

_NEWLINE = re.compile(r"\r?\n")
_TAG = re.compile(r"<[^>]+>")


@dataclass(frozen=True, slots=True)
class SecondaryTextFormatter:
    """Wrap secondary text in a muted span and convert newlines into line-break markers."""

    color: str = "#3D3D3D"
    line_break: str = "<br>"

    def secondary(self, text: str | None) -> str:
        """Return text wrapped in the muted-color span (None becomes empty)."""
        return f"<font color='{self.color}'>{text or ''}</font>"

    def line_breaks(self, text: str | None) -> str:
        """Replace literal newlines with the host line-break marker."""
        return _NEWLINE.sub(self.line_break, text or "")

    def plain(self, text: str | None) -> str:
        """Strip markup back to plain text (line breaks become newlines)."""
        if not text:
            return ""
        return _TAG.sub("", text.replace(self.line_break, "\n"))
