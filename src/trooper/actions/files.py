"""File actions operating on the selected entries of the file list."""

from __future__ import annotations

from pathlib import Path
from typing import List

from trooper.context import ModeContext, ModeResult
from trooper.errors import FileOperationError, NavigationError
from trooper.fs import OperationReport
from trooper.keymaps import ModeName

from .core import clamp_cursor, report_error


def selected_paths(context: ModeContext) -> List[Path]:
    return [entry.path for entry in context.selection.selected(context.listing.entries)]


def _finish(context: ModeContext, label: str, report: OperationReport) -> ModeResult:
    clamp_cursor(context)
    context.bus.emit("listing.changed", context.listing.current_dir)
    if report.failed:
        path, reason = report.failed[0]
        message = f"{len(report.failed)} failed ({path}: {reason})"
        context.bus.emit("status.error", message)
        return ModeResult(consumed=True, status="error", message=message)
    return ModeResult(consumed=True, status=label, message=str(len(report.succeeded)))


def copy_files(context: ModeContext, args: List[str]) -> ModeResult:
    del args
    try:
        value = context.files.copy_files(selected_paths(context))
    except FileOperationError as exc:
        return report_error(context, exc)
    context.bus.emit("register.yank", value)
    return ModeResult(
        consumed=True,
        switch_to=ModeName.NORMAL,
        status="copy",
        message=str(len(value.paths)),
    )


def cut_files(context: ModeContext, args: List[str]) -> ModeResult:
    del args
    try:
        value = context.files.cut_files(selected_paths(context))
    except FileOperationError as exc:
        return report_error(context, exc)
    context.bus.emit("register.yank", value)
    return ModeResult(
        consumed=True,
        switch_to=ModeName.NORMAL,
        status="cut",
        message=str(len(value.paths)),
    )


def paste_files(context: ModeContext, args: List[str]) -> ModeResult:
    del args
    try:
        if context.registers.get().empty:
            return ModeResult(consumed=True, status="noop")
        report = context.files.paste_files()
    except (FileOperationError, NavigationError) as exc:
        return report_error(context, exc)
    return _finish(context, "paste", report)


def delete_files(context: ModeContext, args: List[str]) -> ModeResult:
    del args
    paths = selected_paths(context)
    if not paths:
        return ModeResult(consumed=True, status="noop")
    try:
        report = context.files.delete_files(paths)
    except NavigationError as exc:
        return report_error(context, exc)
    return _finish(context, "delete", report)


def move_entry(context: ModeContext, args: List[str]) -> ModeResult:
    paths = selected_paths(context)
    if len(paths) != 1 or not args:
        return ModeResult(consumed=True, status="noop")
    try:
        report = context.files.move_entry(paths[0], args[0])
    except NavigationError as exc:
        return report_error(context, exc)
    return _finish(context, "move", report)


def create_dirs(context: ModeContext, args: List[str]) -> ModeResult:
    if not args:
        return ModeResult(consumed=True, status="noop")
    try:
        report = context.files.create_dirs(args)
    except NavigationError as exc:
        return report_error(context, exc)
    return _finish(context, "mkdir", report)


def toggle_hidden_files(context: ModeContext, args: List[str]) -> ModeResult:
    del args
    try:
        shown = context.files.toggle_hidden()
    except NavigationError as exc:
        return report_error(context, exc)
    clamp_cursor(context)
    context.bus.emit("listing.changed", context.listing.current_dir)
    return ModeResult(
        consumed=True, status="hidden", message="shown" if shown else "hidden"
    )


__all__ = [
    "selected_paths",
    "copy_files",
    "cut_files",
    "paste_files",
    "delete_files",
    "move_entry",
    "create_dirs",
    "toggle_hidden_files",
]
