"""Parse INI-style binding configuration and merge user overrides over defaults."""

from __future__ import annotations

import configparser
from pathlib import Path
from typing import Dict, Iterator, NamedTuple, Optional, Tuple

from trooper.errors import BindingConfigError
from trooper.runtime import telemetry

from .defaults import DEFAULT_CONFIG
from .models import Action, KeySequence, ModeName

ChordTable = Dict[KeySequence, Action]

SECTIONS: Tuple[ModeName, ...] = (ModeName.NORMAL, ModeName.VISUAL)


class BindingTable(NamedTuple):
    """Chord tables for the two chord-driven modes."""

    normal: ChordTable
    visual: ChordTable

    def for_mode(self, mode: ModeName | str) -> ChordTable:
        if ModeName(mode) is ModeName.VISUAL:
            return self.visual
        if ModeName(mode) is ModeName.NORMAL:
            return self.normal
        raise KeyError(f"Mode '{mode}' has no binding table")


def _new_parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(
        delimiters=("=",),
        comment_prefixes=("#", ";"),
        strict=False,
        interpolation=None,
    )
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    return parser


def _parse(text: str, *, source: str) -> configparser.ConfigParser:
    parser = _new_parser()
    parser.read_string(text, source=source)
    return parser


def _parse_user(text: str, *, source: str) -> Optional[configparser.ConfigParser]:
    log = telemetry.get_logger("trooper.keymaps")
    parser = _new_parser()
    try:
        parser.read_string(text, source=source)
    except configparser.MissingSectionHeaderError as exc:
        log.warning(f"ignoring binding config {source}: {exc}")
        return None
    except configparser.ParsingError as exc:
        # Lines read before the bad ones stay in the parser.
        log.warning(f"partially applied binding config {source}: {exc}")
    except configparser.Error as exc:
        log.warning(f"ignoring binding config {source}: {exc}")
        return None
    return parser


def _entries(
    parser: Optional[configparser.ConfigParser], section: str
) -> Iterator[Tuple[str, str]]:
    if parser is None or not parser.has_section(section):
        return
    for key, value in parser.items(section):
        yield key, value


def load_bindings(
    default_text: str = DEFAULT_CONFIG,
    user_text: Optional[str] = None,
    *,
    source: str = "<user>",
) -> BindingTable:
    """Build the Normal and Visual chord tables.

    Default entries are inserted first and user entries second into the same
    table, so a user entry with an identical chord replaces the default one
    while every other default stays active. Unknown action names and chord
    specs that produce no keys are skipped.
    """

    with telemetry.span(
        "keymaps::load",
        logger_name="trooper.keymaps",
        component="keymaps",
        metadata={"user_config": user_text is not None},
    ) as handle:
        try:
            defaults = _parse(default_text, source="<default>")
        except configparser.Error as exc:
            raise BindingConfigError(f"default binding config is invalid: {exc}") from exc
        user = _parse_user(user_text, source=source) if user_text else None

        tables: Dict[ModeName, ChordTable] = {}
        skipped = 0
        for mode in SECTIONS:
            table: ChordTable = {}
            for parser in (defaults, user):
                for key, value in _entries(parser, mode.value):
                    action = Action.from_name(value)
                    sequence = KeySequence.parse(key)
                    if action is None or sequence is None:
                        skipped += 1
                        continue
                    table[sequence] = action
            tables[mode] = table

        handle.add_metadata("normal", len(tables[ModeName.NORMAL]))
        handle.add_metadata("visual", len(tables[ModeName.VISUAL]))
        handle.add_metadata("skipped", skipped)
        return BindingTable(
            normal=tables[ModeName.NORMAL], visual=tables[ModeName.VISUAL]
        )


def read_binding_config(path: Optional[Path]) -> BindingTable:
    """Load defaults plus the user file at ``path`` when it exists."""

    if path is None or not path.exists():
        return load_bindings()
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        telemetry.get_logger("trooper.keymaps").warning(
            f"cannot read binding config {path}: {exc}"
        )
        return load_bindings()
    return load_bindings(user_text=text, source=str(path))


__all__ = ["BindingTable", "ChordTable", "load_bindings", "read_binding_config"]
