"""Mutable state owned by the control loop: command line, selection, registers."""

from .commandline import INACTIVE, CommandLine
from .registers import RegisterValue, YankMode, YankRegister
from .selection import SelectionModel
from .viewport import ListViewport, Viewport

__all__ = [
    "CommandLine",
    "INACTIVE",
    "RegisterValue",
    "YankMode",
    "YankRegister",
    "SelectionModel",
    "ListViewport",
    "Viewport",
]
