from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

from trooper.keymaps import ModeName, Panel
from trooper.modes.mode_manager import ModeManager, create_default_manager
from trooper.adapters.textual import (
    ScreenSnapshot,
    TextualFileAdapter,
    TextualUIHooks,
    completion_window,
    visible_window,
)


def make_manager(root: Path) -> ModeManager:
    for name in ("alpha", "beta", "gamma"):
        (root / name).write_text(name, encoding="utf-8")
    return create_default_manager(root)


def test_adapter_pushes_snapshots_and_status(tmp_path: Path) -> None:
    manager = make_manager(tmp_path)
    frames: List[ScreenSnapshot] = []
    statuses: List[str] = []
    hooks = TextualUIHooks(
        update_screen=frames.append,
        update_status=statuses.append,
    )
    adapter = TextualFileAdapter(manager, hooks)

    adapter.handle_textual_key("j", text="j")
    adapter.handle_textual_key("v", text="v")
    adapter.handle_textual_key("j", text="j")

    assert frames[0].entries == [("alpha", False), ("beta", False), ("gamma", False)]
    last = frames[-1]
    assert last.mode is ModeName.VISUAL
    assert last.cursor == 2
    assert last.selected == range(1, 3)
    assert "enter_visual" in statuses


def test_adapter_shows_pending_chord(tmp_path: Path) -> None:
    manager = make_manager(tmp_path)
    frames: List[ScreenSnapshot] = []
    adapter = TextualFileAdapter(manager, TextualUIHooks(update_screen=frames.append))

    adapter.handle_textual_key("w", modifiers=("CTRL",))

    assert frames[-1].pending == "^w"

    adapter.handle_textual_key("h", modifiers=("ctrl",))
    assert frames[-1].pending == ""
    assert frames[-1].panel is Panel.BOOKMARKS


def test_adapter_relays_command_events(tmp_path: Path) -> None:
    manager = make_manager(tmp_path)
    frames: List[ScreenSnapshot] = []
    events: List[tuple[str, object | None]] = []
    hooks = TextualUIHooks(
        update_screen=frames.append,
        handle_event=lambda name, payload: events.append((name, payload)),
    )
    adapter = TextualFileAdapter(manager, hooks)

    adapter.handle_textual_key(":", text=":")
    adapter.handle_textual_key("m", text="m")
    adapter.handle_textual_key("TAB")
    assert frames[-1].matches == ["mkdir", "mv"]
    assert frames[-1].command_text == "mkdir"
    assert frames[-1].match_index == 0

    adapter.handle_textual_key("ESC")
    adapter.handle_textual_key("k", text="k")
    adapter.handle_textual_key("d", text="d")
    adapter.handle_textual_key("i", text="i")
    adapter.handle_textual_key("r", text="r")
    adapter.handle_textual_key(" ", text=" ")
    adapter.handle_textual_key("x", text="x")
    adapter.handle_textual_key("ENTER")

    assert ("command.submit", "mkdir x") in events
    assert any(name == "listing.changed" for name, _ in events)
    assert (tmp_path / "x").is_dir()
    assert frames[-1].mode is ModeName.NORMAL
    assert frames[-1].command_text == ""


def test_adapter_requests_exit_on_quit(tmp_path: Path) -> None:
    manager = make_manager(tmp_path)
    exits: List[bool] = []
    hooks = TextualUIHooks(
        update_screen=lambda snapshot: None,
        request_exit=lambda: exits.append(True),
    )
    adapter = TextualFileAdapter(manager, hooks)

    adapter.handle_textual_key("q", text="q")

    assert exits == [True]


def test_adapter_surfaces_errors(tmp_path: Path) -> None:
    manager = make_manager(tmp_path)
    statuses: List[str] = []
    events: List[Dict[str, Any]] = []
    hooks = TextualUIHooks(
        update_screen=lambda snapshot: None,
        update_status=statuses.append,
        handle_event=lambda name, payload: events.append(
            {"name": name, "payload": payload}
        ),
    )
    adapter = TextualFileAdapter(manager, hooks)
    (tmp_path / "alpha").unlink()

    adapter.handle_textual_key("y", text="y")
    adapter.handle_textual_key("y", text="y")
    adapter.handle_textual_key("p", text="p")

    assert any(event["name"] == "status.error" for event in events)
    assert any("alpha" in status for status in statuses)


def test_adapter_emits_log_lines(tmp_path: Path) -> None:
    manager = make_manager(tmp_path)
    logs: List[str] = []
    hooks = TextualUIHooks(update_screen=lambda snapshot: None, log=logs.append)
    adapter = TextualFileAdapter(manager, hooks)

    adapter.handle_textual_key("j", text="j")

    assert any(line.startswith("key ->") for line in logs)
    assert any(line.startswith("result <-") for line in logs)


def test_visible_window_keeps_cursor_on_screen() -> None:
    assert visible_window(0, 3, 10) == range(3)
    assert visible_window(0, 100, 10) == range(0, 10)
    assert visible_window(50, 100, 10) == range(45, 55)
    assert visible_window(99, 100, 10) == range(90, 100)
    assert visible_window(5, 0, 10) == range(0)


def test_completion_window_contains_highlight() -> None:
    matches = ["alpha", "beta", "gamma", "delta"]

    assert completion_window(matches, -1, 80) == (0, 4)
    start, end = completion_window(matches, 3, 12)
    assert start <= 3 < end
    assert completion_window([], 0, 80) == (0, 0)
