"""Normal mode: chord navigation and file operations on the focused panel."""

from __future__ import annotations

from typing import Optional

from trooper.keymaps import ModeName
from trooper.keymaps.models import ESC

from .base_mode import KeyInput, ModeResult
from .chord_mode import ChordMode


class NormalMode(ChordMode):
    name = ModeName.NORMAL

    def on_enter(self, previous: Optional[ModeName]) -> None:
        del previous
        self.context.selection.clear()

    def handle_key(self, key: KeyInput) -> ModeResult:
        if key.key == ESC and not key.modifiers:
            self.context.resolver.reset()
            return ModeResult(consumed=True, status="reset")
        return self.feed(key)


__all__ = ["NormalMode"]
