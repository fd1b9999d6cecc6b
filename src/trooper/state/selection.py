"""Contiguous index-range selection over the file list."""

from __future__ import annotations

from typing import Callable, Optional, Sequence, TypeVar

T = TypeVar("T")


class SelectionModel:
    """Visual-mode range between an anchor and the live cursor.

    The cursor is read through ``cursor`` on every query; the selection
    never stores its own copy of it.
    """

    def __init__(self, cursor: Callable[[], int]) -> None:
        self._cursor = cursor
        self.anchor: Optional[int] = None

    @property
    def active(self) -> bool:
        return self.anchor is not None

    def begin(self) -> None:
        self.anchor = self._cursor()

    def clear(self) -> None:
        self.anchor = None

    def selected_range(self) -> range:
        cursor = self._cursor()
        if self.anchor is None:
            return range(cursor, cursor + 1)
        low, high = sorted((self.anchor, cursor))
        return range(low, high + 1)

    def selected(self, entries: Sequence[T]) -> list[T]:
        """Entries inside the range, in list order, ignoring stale indexes."""

        span = self.selected_range()
        return [entries[i] for i in span if 0 <= i < len(entries)]


__all__ = ["SelectionModel"]
