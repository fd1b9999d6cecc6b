"""Toolkit-free bridge between the mode manager and a Textual host."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from trooper.keymaps import ModeName, Panel
from trooper.modes import KeyInput, ModeResult
from trooper.modes.mode_manager import ModeManager


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class ScreenSnapshot:
    """Everything the host needs to redraw one frame."""

    current_dir: Path
    entries: List[Tuple[str, bool]]
    cursor: int
    selected: range
    bookmarks: List[str]
    bookmark_cursor: int
    panel: Panel
    mode: ModeName
    pending: str = ""
    command_text: str = ""
    matches: List[str] = field(default_factory=list)
    match_index: int = -1


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_screen: Callable[[ScreenSnapshot], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    request_exit: Callable[[], None] = _noop
    log: Callable[[str], None] = _noop


def visible_window(cursor: int, count: int, height: int) -> range:
    """Rows to draw so that ``cursor`` stays on screen, cursor-centred when possible."""

    if height <= 0 or count <= 0:
        return range(0)
    if count <= height:
        return range(count)
    start = max(0, min(cursor - height // 2, count - height))
    return range(start, start + height)


def completion_window(matches: List[str], index: int, width: int) -> Tuple[int, int]:
    """Slice of ``matches`` that fits in ``width`` columns and contains ``index``.

    Each match takes its length plus one separating space.
    """

    if not matches or width <= 0:
        return 0, 0
    focus = max(index, 0)
    start, used = focus, 0
    while start >= 0 and used + len(matches[start]) + 1 <= width:
        used += len(matches[start]) + 1
        start -= 1
    start = min(start + 1, focus)
    end = focus + 1
    while end < len(matches) and used + len(matches[end]) + 1 <= width:
        used += len(matches[end]) + 1
        end += 1
    return start, max(end, start)


class TextualFileAdapter:
    """Bridges ModeManager + bus events to a Textual-friendly surface."""

    def __init__(self, manager: ModeManager, hooks: TextualUIHooks) -> None:
        self.manager = manager
        self.hooks = hooks
        self._subscribe_events()
        self.refresh()

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ModeResult:
        """Translate a normalized key into a KeyInput and dispatch it."""

        normalized_modifiers = tuple(str(mod).lower() for mod in modifiers)
        self._log_state("key ->", key=key, text=text, mods=normalized_modifiers)
        result = self.manager.handle_key(
            KeyInput(key=key, text=text, modifiers=normalized_modifiers)
        )
        self._after_mode_result(result)
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
            switch_to=result.switch_to,
        )
        return result

    def snapshot(self) -> ScreenSnapshot:
        context = self.manager.context
        viewport = context.viewport
        cursor = viewport.current_index()
        if context.selection.active:
            selected = context.selection.selected_range()
        else:
            selected = range(0)
        commandline = context.commandline
        return ScreenSnapshot(
            current_dir=context.listing.current_dir,
            entries=[(entry.name, entry.is_dir) for entry in context.listing.entries],
            cursor=cursor,
            selected=selected,
            bookmarks=[bookmark.name for bookmark in context.bookmarks],
            bookmark_cursor=viewport.bookmark_index(),
            panel=context.panel,
            mode=context.mode,
            pending=context.resolver.pending_display,
            command_text=commandline.text,
            matches=list(commandline.matches),
            match_index=commandline.completion_index,
        )

    def refresh(self) -> None:
        self.hooks.update_screen(self.snapshot())

    def _after_mode_result(self, result: ModeResult) -> None:
        if result.status == "error" and result.message:
            self.hooks.update_status(result.message)
        elif result.status not in ("pending", "reset", "noop", "move", "edit"):
            label = result.status
            if result.message:
                label = f"{label}: {result.message}"
            self.hooks.update_status(label)
        self.refresh()
        if self.manager.context.should_quit:
            self.hooks.request_exit()

    def _subscribe_events(self) -> None:
        bus = self.manager.context.bus
        for event in (
            "listing.changed",
            "bookmarks.changed",
            "register.yank",
            "status.error",
            "command.submit",
            "command.error",
            "mode.changed",
        ):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)
        if name == "status.error" and isinstance(payload, str):
            self.hooks.update_status(payload)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        context = self.manager.context
        return {
            "mode": context.mode.value,
            "panel": context.panel.value,
            "cursor": context.viewport.current_index(),
            "pending": context.resolver.pending_display,
            "command": context.commandline.text,
            "dir": str(context.listing.current_dir),
        }


__all__ = [
    "ScreenSnapshot",
    "TextualFileAdapter",
    "TextualUIHooks",
    "completion_window",
    "visible_window",
]
