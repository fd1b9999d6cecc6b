"""Actions that evaluate ex-style command lines."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from trooper.context import ModeContext, ModeResult
from trooper.keymaps import Action, ModeName

from .dispatch import dispatch_action

COMMANDS: Dict[str, Action] = {
    "delete": Action.DELETE_FILE,
    "up": Action.MOVE_UP,
    "bookmark": Action.CREATE_BOOKMARK,
    "bm": Action.CREATE_BOOKMARK,
    "del_bookmark": Action.DELETE_BOOKMARK,
    "dbm": Action.DELETE_BOOKMARK,
    "mv": Action.MOVE_ENTRY,
    "mkdir": Action.CREATE_DIR,
}


def parse_command(text: str) -> Tuple[Optional[Action], List[str]]:
    """Split on whitespace and map the first word; no quoting support."""

    words = text.split()
    if not words:
        return None, []
    return COMMANDS.get(words[0]), words[1:]


def submit_command_line(context: ModeContext) -> ModeResult:
    """Accept a pending completion, or execute the typed command.

    Executing always records the submitted text in history and returns to
    Normal mode, whether or not the command name was recognised.
    """

    commandline = context.commandline
    if commandline.accept_completion():
        return ModeResult(consumed=True, status="completion_accept", message=commandline.text)

    text = commandline.submit()
    context.bus.emit("command.submit", text)
    action, args = parse_command(text)
    if action is None:
        if text.strip():
            context.bus.emit("command.error", text)
        return ModeResult(
            consumed=True,
            switch_to=ModeName.NORMAL,
            status="command_error" if text.strip() else "command_empty",
            message=text,
        )

    result = dispatch_action(context, action, args)
    return ModeResult(
        consumed=True,
        switch_to=ModeName.NORMAL,
        status=result.status,
        message=result.message,
    )


__all__ = ["COMMANDS", "parse_command", "submit_command_line"]
