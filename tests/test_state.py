from __future__ import annotations

from pathlib import Path

import pytest

from trooper.errors import FileOperationError
from trooper.keymaps import Panel
from trooper.state import ListViewport, SelectionModel, YankMode, YankRegister


def test_selection_collapses_to_cursor_when_inactive() -> None:
    viewport = ListViewport()
    viewport.scroll_to(3, 10, Panel.MAIN)
    selection = SelectionModel(viewport.current_index)

    assert selection.selected_range() == range(3, 4)


def test_selection_spans_anchor_and_live_cursor() -> None:
    viewport = ListViewport()
    viewport.scroll_to(2, 10, Panel.MAIN)
    selection = SelectionModel(viewport.current_index)
    selection.begin()

    viewport.scroll_to(5, 10, Panel.MAIN)
    assert selection.selected_range() == range(2, 6)

    viewport.scroll_to(0, 10, Panel.MAIN)
    assert selection.selected_range() == range(0, 3)

    selection.clear()
    assert selection.selected_range() == range(0, 1)


def test_selected_skips_indexes_past_the_listing() -> None:
    cursor = [4]
    selection = SelectionModel(lambda: cursor[0])
    selection.begin()
    cursor[0] = 1

    assert selection.selected(["a", "b", "c"]) == ["b", "c"]


def test_viewport_clamps_per_panel() -> None:
    viewport = ListViewport()

    viewport.scroll(-1, 5, Panel.MAIN)
    assert viewport.current_index() == 0
    viewport.scroll_to(99, 5, Panel.MAIN)
    assert viewport.current_index() == 4
    viewport.scroll(1, 2, Panel.BOOKMARKS)
    viewport.scroll(1, 2, Panel.BOOKMARKS)
    assert viewport.bookmark_index() == 1
    assert viewport.current_index() == 4

    viewport.scroll_to(3, 0, Panel.MAIN)
    assert viewport.current_index() == 0


def test_register_in_memory() -> None:
    register = YankRegister()

    value = register.yank([Path("/tmp/a"), Path("/tmp/b")], YankMode.CUTTING)

    assert register.get() == value
    assert register.mode is YankMode.CUTTING
    assert value.text == "/tmp/a\n/tmp/b\n"


def test_register_mirrors_scratch_file(tmp_path: Path) -> None:
    scratch = tmp_path / "state" / "yank"
    register = YankRegister(scratch)

    register.yank([tmp_path / "one.txt"], YankMode.COPYING)

    assert scratch.read_text(encoding="utf-8") == f"{tmp_path / 'one.txt'}\n"
    assert register.get().paths == (tmp_path / "one.txt",)

    scratch.unlink()
    assert register.get().empty


def test_empty_register() -> None:
    assert YankRegister().get().empty


def test_register_write_failure_leaves_register_empty(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    register = YankRegister(blocker / "yank.txt")

    with pytest.raises(FileOperationError) as info:
        register.yank([tmp_path / "one.txt"], YankMode.COPYING)

    assert info.value.path == blocker / "yank.txt"
    assert register.mode is None


def test_register_read_failure_is_reported(tmp_path: Path) -> None:
    scratch = tmp_path / "yank"
    register = YankRegister(scratch)
    register.yank([tmp_path / "one.txt"], YankMode.COPYING)
    scratch.unlink()
    scratch.mkdir()

    with pytest.raises(FileOperationError) as info:
        register.get()

    assert info.value.path == scratch
