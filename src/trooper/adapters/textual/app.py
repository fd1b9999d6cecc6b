"""Executable Textual app hosting the file manager."""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Any, Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when the app is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use trooper.adapters.textual.app"
    ) from exc

from trooper.bookmarks import BookmarkStore
from trooper.keymaps import ModeName, Panel, read_binding_config
from trooper.keymaps.models import BACKSPACE, BACKTAB, DOWN, ENTER, ESC, TAB, UP
from trooper.modes.mode_manager import ModeManager, create_default_manager
from trooper.runtime import Settings, load_settings, telemetry

from .controller import (
    ScreenSnapshot,
    TextualFileAdapter,
    TextualUIHooks,
    completion_window,
    visible_window,
)

NAMED_KEYS = {
    "escape": ESC,
    "enter": ENTER,
    "return": ENTER,
    "backspace": BACKSPACE,
    "up": UP,
    "down": DOWN,
    "tab": TAB,
    "shift+tab": BACKTAB,
}


class TrooperApp(App[None]):
    """Bookmark column, file list, status line and command line."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#panels {
		height: 1fr;
	}

	#bookmarks {
		width: auto;
		min-width: 8;
		border: round $secondary;
		padding: 0 1;
	}

	#files {
		width: 1fr;
		border: round $accent;
		padding: 0 1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#command-line {
		height: 1;
		background: $surface-darken-2;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, settings: Settings, start_dir: Path) -> None:
        super().__init__()
        self.settings = settings
        self.start_dir = start_dir
        self.logger = telemetry.get_logger("trooper.app")
        self.store = BookmarkStore(settings.bookmarks_path)
        self.manager: ModeManager | None = None
        self.adapter: TextualFileAdapter | None = None
        self._snapshot: ScreenSnapshot | None = None
        self._status = ""

    def compose(self) -> ComposeResult:
        with Horizontal(id="panels"):
            yield Static("", id="bookmarks")
            yield Static("", id="files")
        yield Static("", id="status-line")
        yield Static("", id="command-line")

    def on_mount(self) -> None:
        self.manager = create_default_manager(
            self.start_dir,
            bindings=read_binding_config(self.settings.config_path),
            bookmarks=self.store.load(),
            yank_path=self.settings.yank_path,
            show_hidden=self.settings.show_hidden,
            collision_limit=self.settings.collision_limit,
        )
        hooks = TextualUIHooks(
            update_screen=self._update_screen,
            update_status=self._update_status,
            request_exit=self.exit,
            log=self._log_line,
        )
        self.adapter = TextualFileAdapter(self.manager, hooks)
        self.set_interval(0.1, self._tick)

    def on_unmount(self) -> None:
        if self.manager is not None:
            self.store.save(self.manager.context.bookmarks)

    def on_resize(self, event: events.Resize) -> None:
        del event
        self._render()

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        normalized = self._normalize_key(event)
        if normalized is None:
            return
        key, text, modifiers = normalized
        self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        event.stop()

    def _tick(self) -> None:
        if self.adapter:
            self.adapter.refresh()

    def _update_screen(self, snapshot: ScreenSnapshot) -> None:
        self._snapshot = snapshot
        self._render()

    def _update_status(self, status: str) -> None:
        self._status = status
        self._render()

    def _log_line(self, line: str) -> None:
        self.logger.debug(line)

    def _render(self) -> None:
        snapshot = self._snapshot
        if snapshot is None:
            return
        self.query_one("#bookmarks", Static).update(self._render_bookmarks(snapshot))
        self.query_one("#files", Static).update(self._render_files(snapshot))
        self.query_one("#status-line", Static).update(self._render_status(snapshot))
        self.query_one("#command-line", Static).update(self._render_command(snapshot))

    def _render_bookmarks(self, snapshot: ScreenSnapshot) -> Text:
        widget = self.query_one("#bookmarks", Static)
        focused = snapshot.panel is Panel.BOOKMARKS
        text = Text()
        rows = visible_window(
            snapshot.bookmark_cursor, len(snapshot.bookmarks), widget.content_size.height
        )
        for index in rows:
            style = "reverse" if focused and index == snapshot.bookmark_cursor else ""
            text.append(snapshot.bookmarks[index], style=style)
            text.append("\n")
        return text

    def _render_files(self, snapshot: ScreenSnapshot) -> Text:
        widget = self.query_one("#files", Static)
        widget.border_title = str(snapshot.current_dir)
        focused = snapshot.panel is Panel.MAIN
        text = Text()
        rows = visible_window(
            snapshot.cursor, len(snapshot.entries), widget.content_size.height
        )
        for index in rows:
            name, is_dir = snapshot.entries[index]
            style = "bold blue" if is_dir else ""
            if index in snapshot.selected:
                style = f"{style} on dark_green".strip()
            if focused and index == snapshot.cursor:
                style = f"{style} reverse".strip()
            text.append(name + ("/" if is_dir else ""), style=style)
            text.append("\n")
        return text

    def _render_status(self, snapshot: ScreenSnapshot) -> Text:
        text = Text()
        text.append(f" {snapshot.mode.value.upper()} ", style="bold reverse")
        if snapshot.pending:
            text.append(f" {snapshot.pending}", style="bold yellow")
        if self._status:
            text.append(f"  {self._status}")
        return text

    def _render_command(self, snapshot: ScreenSnapshot) -> Text:
        if snapshot.mode is not ModeName.COMMAND:
            return Text()
        text = Text(f":{snapshot.command_text}")
        if snapshot.matches:
            widget = self.query_one("#command-line", Static)
            width = widget.content_size.width - len(text) - 2
            start, end = completion_window(snapshot.matches, snapshot.match_index, width)
            text.append("  ")
            for index in range(start, end):
                style = "reverse" if index == snapshot.match_index else "dim"
                text.append(snapshot.matches[index], style=style)
                text.append(" ")
        return text

    @staticmethod
    def _normalize_key(
        event: events.Key,
    ) -> Optional[Tuple[str, Optional[str], Tuple[str, ...]]]:
        key = event.key
        if key in {"ctrl+c", "ctrl+q"}:
            return None
        if key in NAMED_KEYS:
            return (NAMED_KEYS[key], None, ())
        if key.startswith("ctrl+") and len(key) == len("ctrl+") + 1:
            return (key[-1], None, ("ctrl",))
        if event.character and event.is_printable:
            return (event.character, event.character, ())
        return None


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="trooper", description="Modal terminal file manager."
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to open (default: current directory)",
    )
    parser.add_argument("--config", type=Path, help="Binding config file (INI)")
    parser.add_argument("--bookmarks", type=Path, help="Bookmark store (JSON)")
    parser.add_argument(
        "--show-hidden",
        action="store_true",
        default=None,
        help="Start with dotfiles visible",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        help="Logging preset (overrides TROOPER_LOG_PRESET)",
    )
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace, base: Settings) -> Settings:
    """Apply command-line overrides on top of environment settings."""

    overrides: dict[str, Any] = {}
    if args.config is not None:
        overrides["config_path"] = args.config
    if args.bookmarks is not None:
        overrides["bookmarks_path"] = args.bookmarks
    if args.show_hidden is not None:
        overrides["show_hidden"] = args.show_hidden
    if args.log_preset is not None:
        overrides["log_preset"] = args.log_preset
    return replace(base, **overrides)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    settings = resolve_settings(args, load_settings())
    if settings.log_preset:
        telemetry.configure(preset=settings.log_preset)
    app = TrooperApp(settings, Path(args.directory).expanduser())
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
