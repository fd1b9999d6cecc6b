"""Exception hierarchy shared by the file manager core."""

from __future__ import annotations

from pathlib import Path


class TrooperError(Exception):
    """Base class for all file manager errors."""


class BindingConfigError(TrooperError):
    """Raised when binding configuration text cannot be parsed."""


class NavigationError(TrooperError):
    """Raised when a directory cannot be listed or entered."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot open '{path}': {reason}")
        self.path = path
        self.reason = reason


class FileOperationError(TrooperError):
    """Single-item failure during copy, move, delete or mkdir."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class CollisionLimitError(FileOperationError):
    """Raised when no free destination name was found within the rename cap."""

    def __init__(self, path: Path, limit: int) -> None:
        super().__init__(path, f"no free name after {limit} renames")
        self.limit = limit


__all__ = [
    "TrooperError",
    "BindingConfigError",
    "NavigationError",
    "FileOperationError",
    "CollisionLimitError",
]
