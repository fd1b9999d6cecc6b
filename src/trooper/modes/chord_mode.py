"""Shared key handling for the modes that resolve chords."""

from __future__ import annotations

from typing import Optional

from trooper.actions import dispatch_action
from trooper.keymaps import Panel, ResolutionResult

from .base_mode import KeyInput, Mode, ModeResult


class ChordMode(Mode):
    """Feeds each key through the chord resolver and dispatches fired actions.

    ``dispatch_panel`` pins dispatch to one panel; ``None`` follows focus.
    """

    dispatch_panel: Optional[Panel] = None

    def feed(self, key: KeyInput) -> ModeResult:
        resolver = self.context.resolver
        result: ResolutionResult = resolver.feed(self.name, key.stroke)
        if result.status == "fired" and result.action is not None:
            return dispatch_action(
                self.context, result.action, panel=self.dispatch_panel
            )
        if result.status == "pending":
            return ModeResult(
                consumed=True, status="pending", message=resolver.pending_display
            )
        return ModeResult(consumed=False, status="reset")


__all__ = ["ChordMode"]
