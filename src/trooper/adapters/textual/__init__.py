"""Textual adapter; ``app`` is imported lazily since it needs textual at import time."""

from .controller import (
    ScreenSnapshot,
    TextualFileAdapter,
    TextualUIHooks,
    completion_window,
    visible_window,
)

__all__ = [
    "ScreenSnapshot",
    "TextualFileAdapter",
    "TextualUIHooks",
    "completion_window",
    "visible_window",
]
