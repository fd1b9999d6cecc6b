"""Shared services and result types passed between modes and actions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from trooper.bookmarks import Bookmark
from trooper.fs import DirectoryListing, FileOperationEngine
from trooper.keymaps import ChordResolver, KeyStroke, ModeName, Panel
from trooper.state import CommandLine, SelectionModel, Viewport, YankRegister


@dataclass(slots=True)
class KeyInput:
    """Normalized key event passed to modes."""

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None

    @property
    def stroke(self) -> KeyStroke:
        return KeyStroke(self.key, self.modifiers)

    @property
    def character(self) -> Optional[str]:
        """Printable text carried by the event, if any."""

        if self.text and len(self.text) == 1 and self.text.isprintable():
            return self.text
        if not self.modifiers and len(self.key) == 1 and self.key.isprintable():
            return self.key
        return None


@dataclass(slots=True)
class ModeResult:
    """Result returned from ``Mode.handle_key`` and every action handler."""

    consumed: bool
    switch_to: Optional[ModeName] = None
    status: str = "ok"
    message: Optional[str] = None


class ModeBus:
    """Minimal event bus letting modes and actions publish structured signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class ModeContext:
    """Everything a mode or action handler may read or mutate."""

    listing: DirectoryListing
    files: FileOperationEngine
    registers: YankRegister
    resolver: ChordResolver
    commandline: CommandLine
    selection: SelectionModel
    viewport: Viewport
    bus: ModeBus
    bookmarks: List[Bookmark] = field(default_factory=list)
    panel: Panel = Panel.MAIN
    mode: ModeName = ModeName.NORMAL
    should_quit: bool = False


__all__ = ["KeyInput", "ModeResult", "ModeBus", "ModeContext"]
