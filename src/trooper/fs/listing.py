"""Sorted directory listing with a hidden-file toggle."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from trooper.errors import NavigationError


@dataclass(frozen=True, slots=True)
class DirEntry:
    path: Path
    is_dir: bool
    is_file: bool

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def hidden(self) -> bool:
        return self.name.startswith(".")


def _entry(item: os.DirEntry[str]) -> DirEntry:
    try:
        is_dir = item.is_dir()
        is_file = item.is_file()
    except OSError:
        is_dir = is_file = False
    return DirEntry(path=Path(item.path), is_dir=is_dir, is_file=is_file)


def read_dir_sorted(path: Path, *, show_hidden: bool = False) -> List[DirEntry]:
    """Entries ordered by ``(is_file, lowercased full path)``.

    Raises ``OSError`` when the directory cannot be read.
    """

    with os.scandir(path) as items:
        entries = [_entry(item) for item in items]
    entries.sort(key=lambda e: (e.is_file, str(e.path).lower()))
    if not show_hidden:
        entries = [e for e in entries if not e.hidden]
    return entries


class DirectoryListing:
    """Current directory plus its sorted entries.

    A failed ``enter`` leaves both the directory and the entries untouched.
    """

    def __init__(self, path: Path, *, show_hidden: bool = False) -> None:
        self.show_hidden = show_hidden
        self.current_dir = Path(path).absolute()
        self.entries: List[DirEntry] = []
        self.enter(self.current_dir)

    def __len__(self) -> int:
        return len(self.entries)

    def enter(self, path: Path) -> None:
        target = Path(path).absolute()
        try:
            entries = read_dir_sorted(target, show_hidden=self.show_hidden)
        except OSError as exc:
            raise NavigationError(target, exc.strerror or str(exc)) from exc
        self.current_dir = target
        self.entries = entries

    def parent(self) -> Optional[Path]:
        """Parent directory, or ``None`` at the filesystem root."""

        parent = self.current_dir.parent
        if parent == self.current_dir:
            return None
        return parent

    def refresh(self) -> None:
        try:
            self.entries = read_dir_sorted(
                self.current_dir, show_hidden=self.show_hidden
            )
        except OSError as exc:
            raise NavigationError(self.current_dir, exc.strerror or str(exc)) from exc

    def toggle_hidden(self) -> bool:
        self.show_hidden = not self.show_hidden
        self.refresh()
        return self.show_hidden

    def index_of(self, name: str) -> Optional[int]:
        for index, entry in enumerate(self.entries):
            if entry.name == name:
                return index
        return None

    def get(self, index: int) -> Optional[DirEntry]:
        if 0 <= index < len(self.entries):
            return self.entries[index]
        return None


__all__ = ["DirEntry", "DirectoryListing", "read_dir_sorted"]
