"""Command-line buffer with submission history and completion cycling."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

INACTIVE = -1


@dataclass(slots=True)
class CommandLine:
    """Text being typed in command mode plus its history and completions.

    ``history_index`` counts back from the newest submission (0 = most
    recent); ``completion_index`` indexes ``matches``. Both use ``-1`` for
    "not browsing". ``editing_tmp`` keeps the uncommitted text while either
    one is active.
    """

    commands: Sequence[str] = ()
    text: str = ""
    editing_tmp: str = ""
    history: List[str] = field(default_factory=list)
    history_index: int = INACTIVE
    matches: List[str] = field(default_factory=list)
    completion_index: int = INACTIVE

    @property
    def completing(self) -> bool:
        return self.completion_index != INACTIVE

    def clear(self) -> None:
        self.text = ""
        self.editing_tmp = ""
        self.history_index = INACTIVE
        self._reset_completion()

    def type_char(self, char: str) -> None:
        if self.completing:
            self.editing_tmp = ""
        self._reset_completion()
        self.text += char

    def backspace(self) -> None:
        if not self.text:
            return
        if self.completing:
            self.editing_tmp = ""
        self._reset_completion()
        self.text = self.text[:-1]

    # completion -----------------------------------------------------------

    def complete(self, step: int) -> None:
        """Advance the completion cycle by ``step`` (+1 Tab, -1 Shift-Tab)."""

        if step not in (1, -1):
            raise ValueError("completion step must be 1 or -1")
        if not self.completing:
            self.editing_tmp = self.text
            self.matches = sorted(c for c in self.commands if c.startswith(self.text))

        self.completion_index += step
        if self.completion_index == len(self.matches):
            self.completion_index = INACTIVE
        elif self.completion_index < INACTIVE:
            self.completion_index = len(self.matches) - 1

        if self.completing:
            self.text = self.matches[self.completion_index]
        else:
            self.text = self.editing_tmp
            self.editing_tmp = ""

    def cancel_completion(self) -> bool:
        """Drop an active completion and restore the typed text."""

        if not self.completing:
            return False
        self.text = self.editing_tmp
        self.editing_tmp = ""
        self._reset_completion()
        return True

    def accept_completion(self) -> bool:
        """Commit the highlighted match as the text without submitting it."""

        if not self.completing or not self.matches:
            return False
        self.text = self.matches[self.completion_index]
        self.editing_tmp = ""
        self._reset_completion()
        return True

    def _reset_completion(self) -> None:
        self.matches = []
        self.completion_index = INACTIVE

    # history --------------------------------------------------------------

    def history_up(self) -> None:
        if self.completing:
            return
        if self.history_index + 1 >= len(self.history):
            return
        if self.history_index == INACTIVE:
            self.editing_tmp = self.text
        self.history_index += 1
        self.text = self._history_entry()

    def history_down(self) -> None:
        if self.completing:
            return
        if self.history_index > 0:
            self.history_index -= 1
            self.text = self._history_entry()
        elif self.history_index == 0:
            self.history_index = INACTIVE
            self.text = self.editing_tmp
            self.editing_tmp = ""

    def _history_entry(self) -> str:
        return self.history[len(self.history) - self.history_index - 1]

    # submission -----------------------------------------------------------

    def submit(self) -> str:
        """Record the verbatim text in history, clear the buffer, return it."""

        submitted = self.text
        self.history.append(submitted)
        self.clear()
        return submitted


__all__ = ["CommandLine", "INACTIVE"]
