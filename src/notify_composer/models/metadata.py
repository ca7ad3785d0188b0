"""Extender metadata persisted in each displayed notification's extras bag."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class ExtenderMetadata:
    """State the composer recovers from the host on the next arrival.

    - key: group key; present exactly when the notification participates in stacking.
    - is_stacked: the notification is already a merged summary (implies is_stackable).
    - summary_text: line contributed by a raw, not-yet-merged entry.
    - stacked_lines: lines of a merged summary, oldest first.
    """

    key: str | None = None
    is_stackable: bool = False
    is_stacked: bool = False
    summary_text: str | None = None
    stacked_lines: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        if self.is_stacked and not self.is_stackable:
            raise ValueError("is_stacked requires is_stackable")
        if (self.key is not None) != self.is_stackable:
            raise ValueError("key must be set exactly when is_stackable is True")
        if not self.is_stackable and (
            self.summary_text is not None or self.stacked_lines is not None
        ):
            raise ValueError("summary_text and stacked_lines require is_stackable")

    @classmethod
    def for_stack(cls, key: str, summary_text: str | None) -> ExtenderMetadata:
        """Metadata of a stackable notification that has not been merged yet."""
        return cls(key=key, is_stackable=True, summary_text=summary_text)

    def as_stacked(self, lines: tuple[str, ...]) -> ExtenderMetadata:
        """Return a copy marked as a merged summary holding the given lines."""
        return replace(self, is_stacked=True, stacked_lines=lines)
