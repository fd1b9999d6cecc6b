"""Trie-based chord resolution with greedy-shortest matching."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Literal, Optional

from trooper.runtime.telemetry import span

from .config import BindingTable, ChordTable
from .models import Action, KeyStroke, ModeName, format_keys


@dataclass(slots=True)
class TrieNode:
    """Single trie node tracking a bound action and child transitions."""

    action: Optional[Action] = None
    children: Dict[KeyStroke, "TrieNode"] = field(default_factory=dict)

    def child(self, stroke: KeyStroke) -> "TrieNode":
        return self.children.setdefault(stroke, TrieNode())


@dataclass(slots=True)
class KeymapTrie:
    """Concrete trie built for a given mode."""

    mode: ModeName
    root: TrieNode = field(default_factory=TrieNode)

    @classmethod
    def build(cls, mode: ModeName, table: ChordTable) -> "KeymapTrie":
        trie = cls(mode=mode)
        for sequence, action in table.items():
            node = trie.root
            for stroke in sequence.strokes:
                node = node.child(stroke)
            node.action = action
        return trie

    def walk(self, strokes: List[KeyStroke]) -> Optional[TrieNode]:
        node = self.root
        for stroke in strokes:
            child = node.children.get(stroke)
            if child is None:
                return None
            node = child
        return node


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Outcome of feeding one key stroke."""

    status: Literal["fired", "pending", "reset"]
    action: Optional[Action] = None
    chord: tuple[KeyStroke, ...] = ()


class ChordResolver:
    """Accumulates strokes into a pending chord and matches it per mode.

    An exact match fires immediately even when the same strokes also prefix
    a longer chord. A buffer that prefixes nothing is dropped together with
    the stroke that broke it.
    """

    def __init__(
        self, bindings: BindingTable, *, logger_name: str | None = None
    ) -> None:
        self._bindings = bindings
        self._logger_name = logger_name
        self._tries: Dict[ModeName, KeymapTrie] = {
            mode: KeymapTrie.build(mode, bindings.for_mode(mode))
            for mode in (ModeName.NORMAL, ModeName.VISUAL)
        }
        self._pending: List[KeyStroke] = []

    @property
    def bindings(self) -> BindingTable:
        return self._bindings

    @property
    def pending(self) -> tuple[KeyStroke, ...]:
        return tuple(self._pending)

    @property
    def pending_display(self) -> str:
        return format_keys(self._pending)

    def reset(self) -> None:
        self._pending.clear()

    def feed(self, mode: ModeName | str, stroke: KeyStroke) -> ResolutionResult:
        trie = self._tries[ModeName(mode)]
        self._pending.append(stroke)
        chord = tuple(self._pending)
        with span(
            "keymaps::feed",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"mode": trie.mode.value, "chord": format_keys(chord)},
        ) as handle:
            node = trie.walk(self._pending)
            if node is not None and node.action is not None:
                self._pending.clear()
                handle.add_metadata("status", "fired")
                handle.add_metadata("action", node.action.value)
                return ResolutionResult("fired", action=node.action, chord=chord)

            if node is not None and node.children:
                handle.add_metadata("status", "pending")
                return ResolutionResult("pending", chord=chord)

            self._pending.clear()
            handle.add_metadata("status", "reset")
            return ResolutionResult("reset", chord=chord)


__all__ = ["ChordResolver", "ResolutionResult", "KeymapTrie", "TrieNode"]
