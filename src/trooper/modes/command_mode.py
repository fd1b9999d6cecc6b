"""Command-line mode: inline editing, history, completion and execution."""

from __future__ import annotations

from typing import Optional

from trooper.actions import submit_command_line
from trooper.keymaps import ModeName
from trooper.keymaps.models import BACKSPACE, BACKTAB, DOWN, ENTER, ESC, TAB, UP

from .base_mode import KeyInput, Mode, ModeResult


class CommandMode(Mode):
    """Routes keys straight to the command line; chords are never resolved here."""

    name = ModeName.COMMAND

    def on_enter(self, previous: Optional[ModeName]) -> None:
        del previous
        self.context.commandline.clear()
        self.context.bus.emit("command.start", None)

    def on_exit(self, next_mode: Optional[ModeName]) -> None:
        del next_mode
        self.context.commandline.clear()
        self.context.bus.emit("command.end", None)

    def handle_key(self, key: KeyInput) -> ModeResult:
        commandline = self.context.commandline
        if not key.modifiers:
            if key.key == ESC:
                if commandline.cancel_completion():
                    return ModeResult(consumed=True, status="completion_cancel")
                return ModeResult(consumed=True, switch_to=ModeName.NORMAL, status="exit_command")
            if key.key == ENTER:
                return submit_command_line(self.context)
            if key.key == BACKSPACE:
                commandline.backspace()
                return self._edited()
            if key.key == TAB:
                commandline.complete(1)
                return self._edited("completion")
            if key.key == BACKTAB:
                commandline.complete(-1)
                return self._edited("completion")
            if key.key == UP:
                commandline.history_up()
                return self._edited("history")
            if key.key == DOWN:
                commandline.history_down()
                return self._edited("history")

        char = key.character
        if char is None:
            return ModeResult(consumed=False, status="ignored")
        commandline.type_char(char)
        return self._edited()

    def _edited(self, status: str = "edit") -> ModeResult:
        return ModeResult(consumed=True, status=status, message=self.context.commandline.text)


__all__ = ["CommandMode"]
