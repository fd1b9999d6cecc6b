from __future__ import annotations

from trooper.actions import COMMANDS, parse_command
from trooper.keymaps import Action
from trooper.state import INACTIVE, CommandLine


def make_commandline(text: str = "") -> CommandLine:
    commandline = CommandLine(commands=tuple(COMMANDS))
    for char in text:
        commandline.type_char(char)
    return commandline


def test_tab_cycles_sorted_matches_then_restores_text() -> None:
    commandline = make_commandline("d")
    seen = []

    for _ in range(4):
        commandline.complete(1)
        seen.append(commandline.text)

    assert seen == ["dbm", "del_bookmark", "delete", "d"]
    assert commandline.completion_index == INACTIVE


def test_tab_cycle_length_is_matches_plus_one() -> None:
    for prefix in ("", "d", "m", "zz"):
        commandline = make_commandline(prefix)
        commandline.complete(1)
        size = len(commandline.matches) + 1
        for _ in range(size - 1):
            commandline.complete(1)
        assert commandline.text == prefix
        assert not commandline.completing


def test_shift_tab_wraps_to_last_match() -> None:
    commandline = make_commandline("m")

    commandline.complete(-1)

    assert commandline.matches == ["mkdir", "mv"]
    assert commandline.text == "mv"


def test_escape_style_cancel_restores_typed_text() -> None:
    commandline = make_commandline("b")
    commandline.complete(1)
    assert commandline.text == "bm"

    assert commandline.cancel_completion() is True
    assert commandline.text == "b"
    assert commandline.cancel_completion() is False


def test_accept_completion_keeps_match_without_submitting() -> None:
    commandline = make_commandline("de")
    commandline.complete(1)

    assert commandline.accept_completion() is True
    assert commandline.text == "del_bookmark"
    assert not commandline.completing
    assert commandline.history == ["   "]
    assert commandline.text == ""


def test_typing_during_completion_commits_match() -> None:
    commandline = make_commandline("mk")
    commandline.complete(1)

    commandline.type_char(" ")

    assert commandline.text == "mkdir "
    assert not commandline.completing


def test_history_up_and_down_restore_in_progress_text() -> None:
    commandline = make_commandline("abc")
    commandline.submit()
    for char in "d":
        commandline.type_char(char)

    commandline.history_up()
    assert commandline.text == "abc"

    commandline.history_down()
    assert commandline.text == "d"
    assert commandline.history_index == INACTIVE


def test_history_cursor_is_clamped() -> None:
    commandline = make_commandline()
    for entry in ("first", "second"):
        for char in entry:
            commandline.type_char(char)
        commandline.submit()

    commandline.history_up()
    assert commandline.text == "second"
    commandline.history_up()
    commandline.history_up()
    assert commandline.text == "first"
    assert commandline.history_index == 1

    commandline.history_down()
    commandline.history_down()
    commandline.history_down()
    assert commandline.text == ""
    assert commandline.history_index == INACTIVE


def test_submit_records_verbatim_text_and_clears() -> None:
    commandline = make_commandline("bogus  arg")

    submitted = commandline.submit()

    assert submitted == "bogus  arg"
    assert commandline.history == ["bogus  arg"]
    assert commandline.text == ""


def test_blank_submit_is_recorded_verbatim() -> None:
    commandline = make_commandline("   ")

    commandline.submit()

    assert commandline.history == ["   "]
    assert commandline.text == ""


def test_backspace_on_empty_text_is_harmless() -> None:
    commandline = make_commandline()

    commandline.backspace()

    assert commandline.text == ""


def test_parse_command_splits_on_whitespace() -> None:
    assert parse_command("mv  new-name") == (Action.MOVE_ENTRY, ["new-name"])
    assert parse_command("mkdir a b") == (Action.CREATE_DIR, ["a", "b"])
    assert parse_command("dbm") == (Action.DELETE_BOOKMARK, [])
    assert parse_command("nope x") == (None, ["x"])
    assert parse_command("") == (None, [])
