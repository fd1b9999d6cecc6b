"""Key strokes, chords, and the closed set of actions they can fire."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

CTRL = "ctrl"

# Named keys produced by adapters for non-character input.
ESC = "ESC"
ENTER = "ENTER"
BACKSPACE = "BACKSPACE"
UP = "UP"
DOWN = "DOWN"
TAB = "TAB"
BACKTAB = "BACKTAB"


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single normalized key press; equality and hashing are structural."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            modifier = "+".join(self.modifiers)
            return f"{modifier}+{self.key}"
        return self.key

    @property
    def display(self) -> str:
        prefix = "^" if CTRL in self.modifiers else ""
        return f"{prefix}{self.key}"


@dataclass(frozen=True, slots=True)
class KeySequence:
    """Immutable, order-sensitive chord used as a binding table key."""

    strokes: tuple[KeyStroke, ...]

    def __post_init__(self) -> None:
        if not self.strokes:
            raise ValueError("KeySequence requires at least one stroke")

    def __len__(self) -> int:
        return len(self.strokes)

    def startswith(self, prefix: Iterable[KeyStroke]) -> bool:
        head = tuple(prefix)
        return len(head) <= len(self.strokes) and self.strokes[: len(head)] == head

    @classmethod
    def from_strings(cls, *keys: str) -> "KeySequence":
        return cls(tuple(KeyStroke(key) for key in keys if key))

    @classmethod
    def parse(cls, spec: str) -> Optional["KeySequence"]:
        strokes = parse_chord_spec(spec)
        if not strokes:
            return None
        return cls(strokes)


class Action(Enum):
    """Every action a chord or command can fire. Carries no data."""

    MOVE_DOWN = "MoveDown"
    MOVE_UP = "MoveUp"
    MOVE_UP_DIR = "MoveUpDir"
    ENTER_DIR = "EnterDir"
    QUIT = "Quit"
    MOVE_TO_TOP = "MoveToTop"
    MOVE_TO_BOTTOM = "MoveToBottom"
    COPY_FILES = "CopyFiles"
    CUT_FILES = "CutFiles"
    PASTE_FILES = "PasteFiles"
    OPEN_COMMAND_MODE = "OpenCommandMode"
    TOGGLE_VISUAL_MODE = "ToggleVisualMode"
    DELETE_FILE = "DeleteFile"
    CREATE_BOOKMARK = "CreateBookmark"
    DELETE_BOOKMARK = "DeleteBookmark"
    TOGGLE_BOOKMARK = "ToggleBookmark"
    MOVE_TO_LEFT_PANEL = "MoveToLeftPanel"
    MOVE_TO_RIGHT_PANEL = "MoveToRightPanel"
    MOVE_ENTRY = "MoveEntry"
    TOGGLE_HIDDEN_FILES = "ToggleHiddenFiles"
    CREATE_DIR = "CreateDir"

    @classmethod
    def from_name(cls, name: str) -> Optional["Action"]:
        return _ACTIONS_BY_NAME.get(name.strip())


_ACTIONS_BY_NAME: dict[str, Action] = {action.value: action for action in Action}


class ModeName(str, Enum):
    NORMAL = "normal"
    VISUAL = "visual"
    COMMAND = "command"


class Panel(str, Enum):
    MAIN = "main"
    BOOKMARKS = "bookmarks"


_CHORD_TOKEN = re.compile(r"<[^<>]+>|.")
_ESCAPES = {"<lt>": "<", "<gt>": ">", "<Space>": " "}


def parse_chord_spec(spec: str) -> tuple[KeyStroke, ...]:
    """Translate ``gg`` / ``<C-w><C-h>`` / ``<lt>`` style text into strokes.

    Tokens that match none of the recognised shapes are dropped.
    """

    strokes: list[KeyStroke] = []
    for match in _CHORD_TOKEN.finditer(spec):
        symbol = match.group(0)
        if len(symbol) == 1:
            strokes.append(KeyStroke(symbol))
        elif symbol in _ESCAPES:
            strokes.append(KeyStroke(_ESCAPES[symbol]))
        elif len(symbol) == 5 and symbol[1] in "Cc" and symbol[2] == "-":
            strokes.append(KeyStroke(symbol[3], (CTRL,)))
    return tuple(strokes)


def format_keys(strokes: Iterable[KeyStroke]) -> str:
    """Render a pending chord for display, e.g. ``^w`` for Ctrl+w."""

    return "".join(stroke.display for stroke in strokes)


__all__ = [
    "KeyStroke",
    "KeySequence",
    "Action",
    "ModeName",
    "Panel",
    "parse_chord_spec",
    "format_keys",
    "CTRL",
    "ESC",
    "ENTER",
    "BACKSPACE",
    "UP",
    "DOWN",
    "TAB",
    "BACKTAB",
]
