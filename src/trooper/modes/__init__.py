"""Mode controller and the Normal, Visual and Command modes."""

from .base_mode import KeyInput, Mode, ModeBus, ModeContext, ModeResult
from .chord_mode import ChordMode
from .normal_mode import NormalMode
from .visual_mode import VisualMode
from .command_mode import CommandMode
from .mode_manager import ModeManager, create_default_manager

__all__ = [
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "ChordMode",
    "NormalMode",
    "VisualMode",
    "CommandMode",
    "ModeManager",
    "create_default_manager",
]
