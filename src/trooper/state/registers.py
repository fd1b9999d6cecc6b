"""Yank register holding the paths marked by copy or cut."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional

from trooper.errors import FileOperationError


class YankMode(str, Enum):
    COPYING = "copying"
    CUTTING = "cutting"


@dataclass(frozen=True, slots=True)
class RegisterValue:
    paths: tuple[Path, ...] = ()
    mode: Optional[YankMode] = None

    @property
    def text(self) -> str:
        return "".join(f"{path}\n" for path in self.paths)

    @property
    def empty(self) -> bool:
        return not self.paths or self.mode is None


class YankRegister:
    """Process-lifetime register, optionally mirrored to a scratch file.

    The scratch file holds newline-separated absolute paths; the mode lives
    only in memory. Scratch file I/O failures raise ``FileOperationError``
    and leave the register unchanged.
    """

    def __init__(self, scratch_path: Optional[Path] = None) -> None:
        self._scratch_path = scratch_path
        self._value = RegisterValue()

    @property
    def scratch_path(self) -> Optional[Path]:
        return self._scratch_path

    @property
    def mode(self) -> Optional[YankMode]:
        return self._value.mode

    def yank(self, paths: Iterable[Path], mode: YankMode) -> RegisterValue:
        value = RegisterValue(
            paths=tuple(Path(p).absolute() for p in paths), mode=mode
        )
        if self._scratch_path is not None:
            try:
                self._scratch_path.parent.mkdir(parents=True, exist_ok=True)
                self._scratch_path.write_text(value.text, encoding="utf-8")
            except OSError as exc:
                raise FileOperationError(
                    self._scratch_path, exc.strerror or str(exc)
                ) from exc
        self._value = value
        return value

    def get(self) -> RegisterValue:
        if self._scratch_path is None or self._value.mode is None:
            return self._value
        try:
            text = self._scratch_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return RegisterValue()
        except OSError as exc:
            raise FileOperationError(self._scratch_path, exc.strerror or str(exc)) from exc
        paths = tuple(Path(line) for line in text.split("\n") if line)
        return RegisterValue(paths=paths, mode=self._value.mode)


__all__ = ["YankMode", "RegisterValue", "YankRegister"]
