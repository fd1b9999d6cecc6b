"""Navigation, panel, mode and bookmark actions."""

from __future__ import annotations

from typing import List

from trooper.bookmarks import Bookmark
from trooper.context import ModeContext, ModeResult
from trooper.errors import NavigationError, TrooperError
from trooper.keymaps import ModeName, Panel


def report_error(context: ModeContext, exc: TrooperError) -> ModeResult:
    context.bus.emit("status.error", str(exc))
    return ModeResult(consumed=True, status="error", message=str(exc))


def clamp_cursor(context: ModeContext) -> None:
    context.viewport.scroll_to(
        context.viewport.current_index(), len(context.listing), Panel.MAIN
    )


# file list --------------------------------------------------------------


def move_down(context: ModeContext, args: List[str]) -> ModeResult:
    del args
    context.viewport.scroll(1, len(context.listing), Panel.MAIN)
    return ModeResult(consumed=True, status="move")


def move_up(context: ModeContext, args: List[str]) -> ModeResult:
    del args
    context.viewport.scroll(-1, len(context.listing), Panel.MAIN)
    return ModeResult(consumed=True, status="move")


def move_to_top(context: ModeContext, args: List[str]) -> ModeResult:
    del args
    context.viewport.scroll_to(0, len(context.listing), Panel.MAIN)
    return ModeResult(consumed=True, status="move")


def move_to_bottom(context: ModeContext, args: List[str]) -> ModeResult:
    del args
    count = len(context.listing)
    context.viewport.scroll_to(count - 1, count, Panel.MAIN)
    return ModeResult(consumed=True, status="move")


def move_up_dir(context: ModeContext, args: List[str]) -> ModeResult:
    del args
    listing = context.listing
    parent = listing.parent()
    if parent is None:
        return ModeResult(consumed=True, status="noop")
    left = listing.current_dir.name
    try:
        listing.enter(parent)
    except NavigationError as exc:
        return report_error(context, exc)
    index = listing.index_of(left)
    context.viewport.scroll_to(index or 0, len(listing), Panel.MAIN)
    context.bus.emit("listing.changed", listing.current_dir)
    return ModeResult(consumed=True, status="enter_dir", message=str(parent))


def enter_dir(context: ModeContext, args: List[str]) -> ModeResult:
    del args
    entry = context.listing.get(context.viewport.current_index())
    if entry is None or not entry.is_dir:
        return ModeResult(consumed=True, status="noop")
    try:
        context.listing.enter(entry.path)
    except NavigationError as exc:
        return report_error(context, exc)
    context.viewport.scroll_to(0, len(context.listing), Panel.MAIN)
    context.bus.emit("listing.changed", context.listing.current_dir)
    return ModeResult(consumed=True, status="enter_dir", message=str(entry.path))


# bookmark list -----------------------------------------------------------


def move_down_bookmarks(context: ModeContext, args: List[str]) -> ModeResult:
    del args
    context.viewport.scroll(1, len(context.bookmarks), Panel.BOOKMARKS)
    return ModeResult(consumed=True, status="move")


def move_up_bookmarks(context: ModeContext, args: List[str]) -> ModeResult:
    del args
    context.viewport.scroll(-1, len(context.bookmarks), Panel.BOOKMARKS)
    return ModeResult(consumed=True, status="move")


def move_to_top_bookmarks(context: ModeContext, args: List[str]) -> ModeResult:
    del args
    context.viewport.scroll_to(0, len(context.bookmarks), Panel.BOOKMARKS)
    return ModeResult(consumed=True, status="move")


def move_to_bottom_bookmarks(context: ModeContext, args: List[str]) -> ModeResult:
    del args
    count = len(context.bookmarks)
    context.viewport.scroll_to(count - 1, count, Panel.BOOKMARKS)
    return ModeResult(consumed=True, status="move")


def _selected_bookmark(context: ModeContext) -> Bookmark | None:
    index = context.viewport.bookmark_index()
    if 0 <= index < len(context.bookmarks):
        return context.bookmarks[index]
    return None


def open_bookmark(context: ModeContext, args: List[str]) -> ModeResult:
    del args
    bookmark = _selected_bookmark(context)
    if bookmark is not None:
        try:
            context.listing.enter(bookmark.path)
        except NavigationError as exc:
            return report_error(context, exc)
        context.bus.emit("listing.changed", context.listing.current_dir)
    context.panel = Panel.MAIN
    context.viewport.scroll_to(0, len(context.listing), Panel.MAIN)
    return ModeResult(consumed=True, status="enter_dir")


def create_bookmark(context: ModeContext, args: List[str]) -> ModeResult:
    del args
    bookmark = Bookmark.for_directory(context.listing.current_dir)
    context.bookmarks.append(bookmark)
    context.bus.emit("bookmarks.changed", list(context.bookmarks))
    return ModeResult(consumed=True, status="bookmark", message=bookmark.name)


def delete_bookmark(context: ModeContext, args: List[str]) -> ModeResult:
    del args
    index = context.viewport.bookmark_index()
    if not 0 <= index < len(context.bookmarks):
        return ModeResult(consumed=True, status="noop")
    bookmark = context.bookmarks.pop(index)
    context.viewport.scroll_to(
        context.viewport.bookmark_index(), len(context.bookmarks), Panel.BOOKMARKS
    )
    context.bus.emit("bookmarks.changed", list(context.bookmarks))
    return ModeResult(consumed=True, status="del_bookmark", message=bookmark.name)


# panels and modes ------------------------------------------------------


def focus_bookmarks(context: ModeContext, args: List[str]) -> ModeResult:
    del args
    context.panel = Panel.BOOKMARKS
    return ModeResult(consumed=True, status="panel", message=Panel.BOOKMARKS.value)


def focus_main(context: ModeContext, args: List[str]) -> ModeResult:
    del args
    context.panel = Panel.MAIN
    return ModeResult(consumed=True, status="panel", message=Panel.MAIN.value)


def toggle_bookmark_panel(context: ModeContext, args: List[str]) -> ModeResult:
    if context.panel is Panel.MAIN:
        return focus_bookmarks(context, args)
    return focus_main(context, args)


def toggle_visual_mode(context: ModeContext, args: List[str]) -> ModeResult:
    del args
    if context.mode is ModeName.NORMAL:
        return ModeResult(consumed=True, switch_to=ModeName.VISUAL, status="enter_visual")
    if context.mode is ModeName.VISUAL:
        return ModeResult(consumed=True, switch_to=ModeName.NORMAL, status="exit_visual")
    return ModeResult(consumed=True, status="noop")


def open_command_mode(context: ModeContext, args: List[str]) -> ModeResult:
    del context, args
    return ModeResult(consumed=True, switch_to=ModeName.COMMAND, status="enter_command")


def quit_app(context: ModeContext, args: List[str]) -> ModeResult:
    del args
    context.should_quit = True
    context.bus.emit("app.quit", None)
    return ModeResult(consumed=True, status="quit")


def noop_action(context: ModeContext, args: List[str]) -> ModeResult:
    del context, args
    return ModeResult(consumed=True, status="noop")


__all__ = [
    "clamp_cursor",
    "report_error",
    "move_down",
    "move_up",
    "move_to_top",
    "move_to_bottom",
    "move_up_dir",
    "enter_dir",
    "move_down_bookmarks",
    "move_up_bookmarks",
    "move_to_top_bookmarks",
    "move_to_bottom_bookmarks",
    "open_bookmark",
    "create_bookmark",
    "delete_bookmark",
    "focus_bookmarks",
    "focus_main",
    "toggle_bookmark_panel",
    "toggle_visual_mode",
    "open_command_mode",
    "quit_app",
    "noop_action",
]
