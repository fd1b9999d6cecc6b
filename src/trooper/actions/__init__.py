"""Action handlers and the panel-aware dispatcher."""

from .command import COMMANDS, parse_command, submit_command_line
from .dispatch import (
    PANEL_HANDLERS,
    SHARED_HANDLERS,
    dispatch_action,
    handler_for,
    unhandled,
)
from .files import selected_paths

__all__ = [
    "COMMANDS",
    "parse_command",
    "submit_command_line",
    "PANEL_HANDLERS",
    "SHARED_HANDLERS",
    "dispatch_action",
    "handler_for",
    "unhandled",
    "selected_paths",
]
