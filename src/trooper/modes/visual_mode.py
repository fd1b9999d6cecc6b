"""Visual mode: range selection over the file list."""

from __future__ import annotations

from typing import Optional

from trooper.keymaps import ModeName, Panel
from trooper.keymaps.models import ESC

from .base_mode import KeyInput, ModeResult
from .chord_mode import ChordMode


class VisualMode(ChordMode):
    """Anchors a selection at the cursor on entry.

    Dispatch always targets the file list regardless of panel focus. The
    anchor is left in place on exit so a command opened from Visual mode
    still sees the range; Normal mode drops it on entry.
    """

    name = ModeName.VISUAL
    dispatch_panel = Panel.MAIN

    def on_enter(self, previous: Optional[ModeName]) -> None:
        del previous
        self.context.selection.begin()
        self.context.bus.emit("visual.start", self.context.selection.anchor)

    def handle_key(self, key: KeyInput) -> ModeResult:
        if key.key == ESC and not key.modifiers:
            self.context.resolver.reset()
            return ModeResult(consumed=True, switch_to=ModeName.NORMAL, status="exit_visual")
        return self.feed(key)


__all__ = ["VisualMode"]
