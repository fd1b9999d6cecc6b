"""Runtime services: telemetry and settings."""

from . import telemetry
from .settings import Settings, load_settings

__all__ = ["telemetry", "Settings", "load_settings"]
