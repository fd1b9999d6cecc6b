"""Two-level action dispatch keyed by (Panel, Action) with a shared fallback."""

from __future__ import annotations

from typing import Callable, List, Mapping, Optional, Sequence, Tuple

from trooper.context import ModeContext, ModeResult
from trooper.keymaps import Action, Panel
from trooper.runtime.telemetry import span

from . import core, files

Handler = Callable[[ModeContext, List[str]], ModeResult]

PANEL_HANDLERS: Mapping[Tuple[Panel, Action], Handler] = {
    (Panel.MAIN, Action.MOVE_DOWN): core.move_down,
    (Panel.MAIN, Action.MOVE_UP): core.move_up,
    (Panel.MAIN, Action.MOVE_UP_DIR): core.move_up_dir,
    (Panel.MAIN, Action.ENTER_DIR): core.enter_dir,
    (Panel.MAIN, Action.MOVE_TO_TOP): core.move_to_top,
    (Panel.MAIN, Action.MOVE_TO_BOTTOM): core.move_to_bottom,
    (Panel.MAIN, Action.COPY_FILES): files.copy_files,
    (Panel.MAIN, Action.CUT_FILES): files.cut_files,
    (Panel.MAIN, Action.PASTE_FILES): files.paste_files,
    (Panel.MAIN, Action.DELETE_FILE): files.delete_files,
    (Panel.MAIN, Action.MOVE_ENTRY): files.move_entry,
    (Panel.MAIN, Action.TOGGLE_VISUAL_MODE): core.toggle_visual_mode,
    (Panel.MAIN, Action.MOVE_TO_LEFT_PANEL): core.focus_bookmarks,
    (Panel.BOOKMARKS, Action.MOVE_DOWN): core.move_down_bookmarks,
    (Panel.BOOKMARKS, Action.MOVE_UP): core.move_up_bookmarks,
    (Panel.BOOKMARKS, Action.MOVE_TO_TOP): core.move_to_top_bookmarks,
    (Panel.BOOKMARKS, Action.MOVE_TO_BOTTOM): core.move_to_bottom_bookmarks,
    (Panel.BOOKMARKS, Action.ENTER_DIR): core.open_bookmark,
    (Panel.BOOKMARKS, Action.MOVE_TO_RIGHT_PANEL): core.focus_main,
}

SHARED_HANDLERS: Mapping[Action, Handler] = {
    Action.QUIT: core.quit_app,
    Action.OPEN_COMMAND_MODE: core.open_command_mode,
    Action.TOGGLE_BOOKMARK: core.toggle_bookmark_panel,
    Action.CREATE_BOOKMARK: core.create_bookmark,
    Action.DELETE_BOOKMARK: core.delete_bookmark,
    Action.TOGGLE_HIDDEN_FILES: files.toggle_hidden_files,
    Action.CREATE_DIR: files.create_dirs,
}


def handler_for(panel: Panel, action: Action) -> Optional[Handler]:
    return PANEL_HANDLERS.get((panel, action)) or SHARED_HANDLERS.get(action)


def dispatch_action(
    context: ModeContext,
    action: Action,
    args: Sequence[str] = (),
    *,
    panel: Optional[Panel] = None,
) -> ModeResult:
    """Run ``action`` for ``panel`` (the focused panel unless given).

    Actions with no handler for the panel are consumed as no-ops.
    """

    target = panel or context.panel
    with span(
        "actions::dispatch",
        logger_name="trooper.actions",
        component="actions",
        metadata={"action": action.value, "panel": target.value, "args": list(args)},
    ) as handle:
        handler = handler_for(target, action)
        if handler is None:
            handle.add_metadata("status", "noop")
            return core.noop_action(context, list(args))
        result = handler(context, list(args))
        handle.add_metadata("status", result.status)
        return result


def unhandled(panel: Panel) -> List[Action]:
    return [action for action in Action if handler_for(panel, action) is None]


__all__ = [
    "Handler",
    "PANEL_HANDLERS",
    "SHARED_HANDLERS",
    "dispatch_action",
    "handler_for",
    "unhandled",
]
