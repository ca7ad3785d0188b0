"""Style selection and text rendering."""

from notify_composer.notifications.stylers.style_selector import (
    StyleSelection,
    StyleSelector,
)
from notify_composer.notifications.stylers.text_renderer import PlainTextRenderer

__all__ = ["PlainTextRenderer", "StyleSelection", "StyleSelector"]
