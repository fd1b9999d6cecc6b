"""Mode controller owning the active mode and the shared context."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Sequence, Type

from trooper.actions import COMMANDS, dispatch_action
from trooper.bookmarks import Bookmark
from trooper.fs import DirectoryListing, FileOperationEngine
from trooper.keymaps import Action, BindingTable, ChordResolver, ModeName, load_bindings
from trooper.runtime import telemetry
from trooper.runtime.settings import DEFAULT_COLLISION_LIMIT
from trooper.state import CommandLine, ListViewport, SelectionModel, Viewport, YankRegister

from .base_mode import KeyInput, Mode, ModeBus, ModeContext, ModeResult
from .command_mode import CommandMode
from .normal_mode import NormalMode
from .visual_mode import VisualMode


class ModeManager:
    """Owns the active mode, handles transitions, and routes key events."""

    def __init__(self, context: ModeContext) -> None:
        self.context = context
        self._modes: Dict[ModeName, Mode] = {}
        self._active: Optional[ModeName] = None

    @property
    def active_mode(self) -> Optional[Mode]:
        if self._active is None:
            return None
        return self._modes.get(self._active)

    @property
    def mode_name(self) -> Optional[ModeName]:
        return self._active

    def register_mode(self, mode_cls: Type[Mode], /, *mode_args: object) -> Mode:
        mode = mode_cls(self.context, *mode_args)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name.value}' already registered")
        self._modes[mode.name] = mode
        if self._active is None:
            self._active = mode.name
            self.context.mode = mode.name
            mode.on_enter(None)
        return mode

    def switch_mode(self, name: ModeName | str) -> None:
        target = ModeName(name)
        if target not in self._modes:
            raise KeyError(f"Unknown mode '{target.value}'")
        previous = self.active_mode
        if previous and previous.name is target:
            return
        self.context.resolver.reset()
        if previous:
            previous.on_exit(target)
        self._active = target
        self.context.mode = target
        self._modes[target].on_enter(previous.name if previous else None)
        self.context.bus.emit("mode.changed", target)
        telemetry.record_event(
            "mode.switch",
            data={"mode": target.value, "previous": previous.name.value if previous else None},
            logger_name="trooper.modes",
        )

    def handle_key(self, key: KeyInput) -> ModeResult:
        mode = self.active_mode
        if mode is None:
            raise RuntimeError("No active mode registered")
        with telemetry.span(
            name=f"mode::{mode.name.value}",
            logger_name="trooper.modes",
            component=True,
            metadata={"key": key.stroke.token, "mode": mode.name.value},
        ):
            result = mode.handle_key(key)
        if result.switch_to:
            self.switch_mode(result.switch_to)
        return result

    def dispatch(self, action: Action, args: Sequence[str] = ()) -> ModeResult:
        """Run ``action`` as if it had been fired from the active mode."""

        panel = None
        if self._active is ModeName.VISUAL:
            panel = VisualMode.dispatch_panel
        result = dispatch_action(self.context, action, args, panel=panel)
        if result.switch_to:
            self.switch_mode(result.switch_to)
        return result


def create_default_manager(
    start_dir: Path,
    *,
    bindings: Optional[BindingTable] = None,
    viewport: Optional[Viewport] = None,
    bookmarks: Optional[List[Bookmark]] = None,
    yank_path: Optional[Path] = None,
    show_hidden: bool = False,
    collision_limit: int = DEFAULT_COLLISION_LIMIT,
) -> ModeManager:
    """Wire a controller over ``start_dir`` with Normal as the initial mode."""

    listing = DirectoryListing(start_dir, show_hidden=show_hidden)
    registers = YankRegister(yank_path)
    view = viewport or ListViewport()
    context = ModeContext(
        listing=listing,
        files=FileOperationEngine(listing, registers, collision_limit=collision_limit),
        registers=registers,
        resolver=ChordResolver(bindings or load_bindings(), logger_name="trooper.keymaps"),
        commandline=CommandLine(commands=tuple(COMMANDS)),
        selection=SelectionModel(view.current_index),
        viewport=view,
        bus=ModeBus(),
        bookmarks=list(bookmarks or []),
    )
    manager = ModeManager(context)
    manager.register_mode(NormalMode)
    manager.register_mode(VisualMode)
    manager.register_mode(CommandMode)
    return manager


__all__ = ["ModeManager", "create_default_manager"]
