"""Copy, cut, paste, delete, move and mkdir against the yank register.

Every batch operation is best effort: a failing item is logged and
reported, and the remaining items are still processed. Nothing is rolled
back.
"""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple

from trooper.errors import CollisionLimitError, FileOperationError
from trooper.runtime import telemetry
from trooper.runtime.settings import DEFAULT_COLLISION_LIMIT
from trooper.state.registers import RegisterValue, YankMode, YankRegister

from .listing import DirectoryListing

COPY_SUFFIX = " (Copy)"


@dataclass(slots=True)
class OperationReport:
    succeeded: List[Path] = field(default_factory=list)
    failed: List[Tuple[Path, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def free_destination(dest: Path, *, is_dir: bool, limit: int) -> Path:
    """Rename ``dest`` with ``" (Copy)"`` until nothing exists under that name.

    Files keep their extension after the marker (``note (Copy).txt``).
    """

    original = dest
    renames = 0
    while os.path.lexists(dest):
        if renames >= limit:
            raise CollisionLimitError(original, limit)
        if is_dir:
            dest = dest.with_name(f"{dest.name}{COPY_SUFFIX}")
        else:
            dest = dest.with_name(f"{dest.stem}{COPY_SUFFIX}{dest.suffix}")
        renames += 1
    return dest


def _remove(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


class FileOperationEngine:
    """Runs file actions for the directory shown in ``listing``."""

    def __init__(
        self,
        listing: DirectoryListing,
        registers: YankRegister,
        *,
        collision_limit: int = DEFAULT_COLLISION_LIMIT,
        logger_name: str | None = "trooper.fs",
    ) -> None:
        self.listing = listing
        self.registers = registers
        self.collision_limit = collision_limit
        self._logger_name = logger_name

    # register -------------------------------------------------------------

    def copy_files(self, paths: Iterable[Path]) -> RegisterValue:
        return self.registers.yank(paths, YankMode.COPYING)

    def cut_files(self, paths: Iterable[Path]) -> RegisterValue:
        return self.registers.yank(paths, YankMode.CUTTING)

    # mutations ------------------------------------------------------------

    def paste_files(self) -> OperationReport:
        report = OperationReport()
        value = self.registers.get()
        if value.empty:
            return report

        with telemetry.span(
            "fs::paste",
            logger_name=self._logger_name,
            component="fs",
            metadata={"count": len(value.paths), "mode": value.mode},
        ) as handle:
            for source in value.paths:
                try:
                    dest = self._paste_one(source, value.mode)
                except FileOperationError as exc:
                    self._record_failure(handle, report, exc)
                    continue
                report.succeeded.append(dest)
            handle.add_metadata("failed", len(report.failed))
            self._refresh()
        return report

    def _paste_one(self, source: Path, mode: YankMode | None) -> Path:
        try:
            is_dir = source.is_dir()
            dest = free_destination(
                self.listing.current_dir / source.name,
                is_dir=is_dir,
                limit=self.collision_limit,
            )
            if is_dir:
                if dest.resolve().is_relative_to(source.resolve()):
                    raise FileOperationError(
                        source, "cannot paste a directory into itself"
                    )
                shutil.copytree(source, dest, symlinks=True)
            else:
                shutil.copy2(source, dest)
        except FileOperationError:
            raise
        except OSError as exc:
            raise FileOperationError(source, exc.strerror or str(exc)) from exc

        if mode is YankMode.CUTTING:
            try:
                _remove(source)
            except OSError as exc:
                raise FileOperationError(
                    source, f"copied to {dest} but not removed: {exc.strerror or exc}"
                ) from exc
        return dest

    def delete_files(self, paths: Sequence[Path]) -> OperationReport:
        report = OperationReport()
        with telemetry.span(
            "fs::delete",
            logger_name=self._logger_name,
            component="fs",
            metadata={"count": len(paths)},
        ) as handle:
            for path in paths:
                try:
                    _remove(path)
                except OSError as exc:
                    self._record_failure(
                        handle, report, FileOperationError(path, exc.strerror or str(exc))
                    )
                    continue
                report.succeeded.append(path)
            self._refresh()
        return report

    def move_entry(self, path: Path, new_name: str) -> OperationReport:
        report = OperationReport()
        target = path.parent / new_name
        with telemetry.span(
            "fs::move",
            logger_name=self._logger_name,
            component="fs",
            metadata={"source": path, "target": target},
        ) as handle:
            try:
                if os.path.lexists(target):
                    raise FileOperationError(path, f"'{target}' already exists")
                path.rename(target)
            except FileOperationError as exc:
                self._record_failure(handle, report, exc)
            except OSError as exc:
                self._record_failure(
                    handle, report, FileOperationError(path, exc.strerror or str(exc))
                )
            else:
                report.succeeded.append(target)
            self._refresh()
        return report

    def create_dirs(self, names: Sequence[str]) -> OperationReport:
        report = OperationReport()
        with telemetry.span(
            "fs::mkdir",
            logger_name=self._logger_name,
            component="fs",
            metadata={"count": len(names)},
        ) as handle:
            for name in names:
                if not name or "\0" in name:
                    continue
                target = self.listing.current_dir / name
                try:
                    target.mkdir(parents=True, exist_ok=True)
                except OSError as exc:
                    self._record_failure(
                        handle, report, FileOperationError(target, exc.strerror or str(exc))
                    )
                    continue
                report.succeeded.append(target)
            self._refresh()
        return report

    def toggle_hidden(self) -> bool:
        return self.listing.toggle_hidden()

    # helpers --------------------------------------------------------------

    def _record_failure(
        self, handle: telemetry.SpanHandle, report: OperationReport, exc: FileOperationError
    ) -> None:
        report.failed.append((exc.path, exc.reason))
        handle.warn(exc.reason, path=exc.path)

    def _refresh(self) -> None:
        self.listing.refresh()


__all__ = ["FileOperationEngine", "OperationReport", "free_destination", "COPY_SUFFIX"]
