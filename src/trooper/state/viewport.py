"""Cursor positions owned by the presentation layer."""

from __future__ import annotations

from typing import Dict, Protocol

from trooper.keymaps.models import Panel


class Viewport(Protocol):
    """What the core needs from whoever draws the lists."""

    def current_index(self) -> int:
        """Cursor row in the file list."""
        ...

    def bookmark_index(self) -> int:
        """Cursor row in the bookmark list."""
        ...

    def scroll(self, delta: int, count: int, panel: Panel) -> None:
        ...

    def scroll_to(self, index: int, count: int, panel: Panel) -> None:
        ...


class ListViewport:
    """Headless viewport clamping one cursor per panel to ``[0, count-1]``."""

    def __init__(self) -> None:
        self._cursors: Dict[Panel, int] = {Panel.MAIN: 0, Panel.BOOKMARKS: 0}

    def current_index(self) -> int:
        return self._cursors[Panel.MAIN]

    def bookmark_index(self) -> int:
        return self._cursors[Panel.BOOKMARKS]

    def scroll(self, delta: int, count: int, panel: Panel) -> None:
        self.scroll_to(self._cursors[panel] + delta, count, panel)

    def scroll_to(self, index: int, count: int, panel: Panel) -> None:
        self._cursors[panel] = max(0, min(index, count - 1))


__all__ = ["Viewport", "ListViewport"]
