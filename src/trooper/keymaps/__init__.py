"""Chord models, binding configuration, and chord resolution."""

from .models import (
    Action,
    KeySequence,
    KeyStroke,
    ModeName,
    Panel,
    format_keys,
    parse_chord_spec,
)
from .config import BindingTable, ChordTable, load_bindings, read_binding_config
from .defaults import DEFAULT_CONFIG
from .resolver import ChordResolver, ResolutionResult

__all__ = [
    "Action",
    "KeySequence",
    "KeyStroke",
    "ModeName",
    "Panel",
    "format_keys",
    "parse_chord_spec",
    "BindingTable",
    "ChordTable",
    "load_bindings",
    "read_binding_config",
    "DEFAULT_CONFIG",
    "ChordResolver",
    "ResolutionResult",
]
