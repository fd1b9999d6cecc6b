"""Logging and profiling for the file manager, built on telelog.

The Textual UI owns the terminal while trooper runs, so records go to a log
file and the console stays quiet unless ``TROOPER_LOG_CONSOLE`` is set.

Without a preset the configuration comes from ``TROOPER_*`` variables:
``LOG_LEVEL``, ``LOG_FILE``, ``LOG_JSON``, ``LOG_BUFFERED``, ``LOG_BUFFER_SIZE``,
``LOG_CONSOLE``, ``NO_COLOR``.
Presets (``TROOPER_LOG_PRESET`` or ``trooper --log-preset``):

``console`` -- DEBUG records on the console, for headless runs
``debug``   -- DEBUG records in ``<user log dir>/trooper-debug.log``
``trace``   -- buffered JSON lines in ``<user log dir>/trooper-trace.jsonl``

``TROOPER_LOG_FILE`` overrides the preset file location.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, Optional, Tuple, cast

import telelog  # type: ignore[import]
from platformdirs import user_log_dir

tl = cast(Any, telelog)

ENV_PREFIX = "TROOPER_"
PACKAGE_LOGGER = "trooper"

_loggers: Dict[str, Any] = {}
_config: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.environ.get(f"{ENV_PREFIX}{name}") or None


def _env_flag(name: str) -> bool:
    raw = _env(name)
    return raw is not None and raw.strip().lower() in {"1", "true", "yes", "on"}


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), _text(value)) for key, value in data.items()]


def _log_path(filename: str) -> str:
    explicit = _env("LOG_FILE")
    if explicit:
        return explicit
    directory = Path(user_log_dir(PACKAGE_LOGGER, appauthor=False))
    directory.mkdir(parents=True, exist_ok=True)
    return str(directory / filename)


def _base_config(level: str) -> Any:
    config = tl.Config()
    config.with_min_level(level)
    config.with_profiling(True)
    return config


def _from_environment() -> Any:
    config = _base_config((_env("LOG_LEVEL") or "INFO").upper())
    console = _env_flag("LOG_CONSOLE")
    config.with_console_output(console)
    if console:
        config.with_colored_output(not _env_flag("NO_COLOR"))
    if _env_flag("LOG_JSON"):
        config.with_json_format(True)
    if _env_flag("LOG_BUFFERED"):
        config.with_buffering(True)
        config.with_buffer_size(int(_env("LOG_BUFFER_SIZE") or "2048"))
    log_file = _env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)
    return config


def _console_preset() -> Any:
    config = _base_config("DEBUG")
    config.with_console_output(True)
    config.with_colored_output(not _env_flag("NO_COLOR"))
    return config


def _debug_preset() -> Any:
    config = _base_config("DEBUG")
    config.with_console_output(False)
    config.with_file_output(_log_path("trooper-debug.log"))
    return config


def _trace_preset() -> Any:
    config = _base_config("DEBUG")
    config.with_console_output(False)
    config.with_json_format(True)
    config.with_buffering(True)
    config.with_buffer_size(int(_env("LOG_BUFFER_SIZE") or "2048"))
    config.with_file_output(_log_path("trooper-trace.jsonl"))
    return config


_PRESET_BUILDERS: Dict[str, Callable[[], Any]] = {
    "console": _console_preset,
    "debug": _debug_preset,
    "trace": _trace_preset,
}

PRESETS: Tuple[str, ...] = tuple(_PRESET_BUILDERS)


def configure(*, preset: Optional[str] = None, config: Optional[Any] = None) -> None:
    """Replace the active configuration and drop cached loggers.

    With neither argument the configuration is rebuilt from the environment.
    """

    global _config
    if preset and config is not None:
        raise ValueError("Provide either `config` or `preset`, not both.")
    if preset:
        builder = _PRESET_BUILDERS.get(preset.lower())
        if builder is None:
            raise ValueError(
                f"Unknown log preset '{preset}'; expected one of {', '.join(PRESETS)}."
            )
        config = builder()
    _config = config if config is not None else _from_environment()
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` bound to the active configuration."""

    global _config
    if _config is None:
        _config = _from_environment()
    key = name or PACKAGE_LOGGER
    logger = _loggers.get(key)
    if logger is None:
        logger = _loggers[key] = tl.Logger.with_config(key, _config)
    return logger


def _level_method(logger: Any, level: Any) -> Tuple[Any, bool]:
    name = str(level).lower()
    structured = getattr(logger, f"{name}_with", None)
    if structured is not None:
        return structured, True
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    return plain, False


def _emit(logger: Any, level: Any, message: str, payload: Dict[str, Any]) -> None:
    method, structured = _level_method(logger, level)
    if structured:
        method(message, _pairs(payload))
    else:
        method(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str | Any = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit a structured ``event::<name>`` record."""

    _emit(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    """Handle yielded by ``span``; everything it logs carries the span metadata."""

    logger: Any
    name: str
    component: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def _payload(self, **extra: Any) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"span": self.name, **self.metadata}
        if self.component:
            payload["component"] = self.component
        payload.update({key: _text(value) for key, value in extra.items()})
        return payload

    def fail(self, reason: str) -> None:
        _emit(self.logger, "error", "span::fail", self._payload(reason=reason))

    def warn(self, reason: str, **extra: Any) -> None:
        """Log a recoverable problem without ending the span."""

        _emit(self.logger, "warning", "span::warn", self._payload(reason=reason, **extra))


@contextmanager
def _bound_context(logger: Any, values: Dict[str, str]) -> Iterator[None]:
    for key, value in values.items():
        logger.add_context(key, value)
    try:
        yield
    finally:
        for key in values:
            logger.remove_context(key)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block and, when ``component`` is given, track it as a component.

    ``component=True`` reuses ``name``. ``metadata`` is bound as logger
    context for the duration of the block. An exception escaping the block is
    logged as ``span::fail`` and re-raised.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else (component or None)
    values = {key: _text(value) for key, value in (metadata or {}).items()}
    handle = SpanHandle(log, name, component_name, dict(values))

    with ExitStack() as stack:
        stack.enter_context(_bound_context(log, values))
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


__all__ = [
    "ENV_PREFIX",
    "PRESETS",
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
