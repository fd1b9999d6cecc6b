"""Bookmark records and their JSON-backed store."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import List

from trooper.runtime import telemetry


@dataclass(slots=True)
class Bookmark:
    name: str
    path: Path

    @classmethod
    def for_directory(cls, path: Path) -> "Bookmark":
        return cls(name=path.name or str(path), path=path)


class BookmarkStore:
    """Reads the bookmark list once at startup and writes it back at shutdown."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.logger = telemetry.get_logger("trooper.bookmarks")

    def load(self) -> List[Bookmark]:
        if not self.path.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("[]", encoding="utf-8")
            return []
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            self.logger.warning(f"unreadable bookmark store {self.path}: {exc}")
            return []
        if not isinstance(raw, list):
            return []
        bookmarks: List[Bookmark] = []
        for item in raw:
            if isinstance(item, dict) and "name" in item and "path" in item:
                bookmarks.append(Bookmark(name=str(item["name"]), path=Path(item["path"])))
        return bookmarks

    def save(self, bookmarks: List[Bookmark]) -> None:
        payload = [
            {**asdict(bookmark), "path": str(bookmark.path)} for bookmark in bookmarks
        ]
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


__all__ = ["Bookmark", "BookmarkStore"]
