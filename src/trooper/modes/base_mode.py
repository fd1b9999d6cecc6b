"""Base class shared by the Normal, Visual and Command modes."""

from __future__ import annotations

from typing import Optional

from trooper.context import KeyInput, ModeBus, ModeContext, ModeResult
from trooper.keymaps import ModeName


class Mode:
    """Base class all concrete modes inherit from."""

    name: ModeName = ModeName.NORMAL

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    def on_enter(
        self, previous: Optional[ModeName]
    ) -> None:  # pragma: no cover - default no-op
        del previous

    def on_exit(
        self, next_mode: Optional[ModeName]
    ) -> None:  # pragma: no cover - default no-op
        del next_mode

    def handle_key(
        self, key: KeyInput
    ) -> ModeResult:  # pragma: no cover - abstract override
        raise NotImplementedError


__all__ = ["KeyInput", "Mode", "ModeBus", "ModeContext", "ModeResult"]
