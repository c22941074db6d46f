"""Structured logging for rawedit, on top of telelog.

Nothing reaches the console unless ``RAWEDIT_LOG_CONSOLE`` is set, because
the raw-mode screen would show it in the middle of the text. Point
``RAWEDIT_LOG_FILE`` at a file to keep a session log.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from typing import Any, Dict, Iterator, Optional

import telelog  # type: ignore[import]

ENV_PREFIX = "RAWEDIT_"
LOGGER_NAME = "rawedit"

# preset -> (minimum level, json lines, buffered, log file when none is set)
_PRESETS: Dict[str, tuple[str, bool, bool, str]] = {
    "development": ("DEBUG", False, False, "rawedit-dev.log"),
    "production": ("INFO", False, True, "rawedit.log"),
    "performance": ("DEBUG", True, True, "rawedit-performance.log"),
}
PRESETS = tuple(_PRESETS)

_config: Optional[Any] = None
_loggers: Dict[str, Any] = {}


def _env(name: str) -> Optional[str]:
    return os.environ.get(f"{ENV_PREFIX}{name}") or None


def _env_flag(name: str) -> bool:
    return (_env(name) or "").lower() in {"1", "true", "yes", "on"}


def _build_config(
    level: str,
    log_file: Optional[str],
    *,
    json_format: bool = False,
    buffered: bool = False,
) -> Any:
    config = telelog.Config()
    config.with_min_level(level)
    config.with_console_output(_env_flag("LOG_CONSOLE"))
    config.with_json_format(json_format)
    if log_file:
        config.with_file_output(log_file)
    if buffered:
        config.with_buffering(True)
    config.with_profiling(True)
    return config


def configure(*, preset: Optional[str] = None) -> None:
    """Rebuild the logging config from ``preset``, or from the environment.

    Raises ``ValueError`` for a preset name not in ``PRESETS``.
    """

    global _config
    if preset is None:
        _config = _build_config(
            (_env("LOG_LEVEL") or "INFO").upper(),
            _env("LOG_FILE"),
            json_format=_env_flag("LOG_JSON"),
        )
    else:
        try:
            level, json_format, buffered, log_file = _PRESETS[preset]
        except KeyError:
            raise ValueError(
                f"Unknown log preset {preset!r} (choose from {', '.join(PRESETS)})"
            ) from None
        _config = _build_config(
            level,
            _env("LOG_FILE") or log_file,
            json_format=json_format,
            buffered=buffered,
        )
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    key = name or LOGGER_NAME
    if key not in _loggers:
        if _config is None:
            configure()
        _loggers[key] = telelog.Logger.with_config(key, _config)
    return _loggers[key]


def _emit(log: Any, level: str, message: str, fields: Dict[str, Any]) -> None:
    pairs = [(str(key), str(value)) for key, value in fields.items()]
    with_data = getattr(log, f"{level}_with", None)
    if with_data is not None:
        with_data(message, pairs)
    else:
        getattr(log, level)(f"{message} {dict(pairs)}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` with ``data`` as key/value fields."""

    _emit(get_logger(logger_name), level, f"event::{name}", dict(data or {}))


@contextmanager
def span(
    name: str,
    *,
    component: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> Iterator[None]:
    """Profile the block as ``name``, tracked under ``component`` if given.

    ``metadata`` is attached as logger context while the block runs. An
    exception leaving the block is logged as ``span::fail`` and re-raised.
    """

    log = get_logger(logger_name)
    fields = {key: str(value) for key, value in (metadata or {}).items()}
    with ExitStack() as stack:
        for key, value in fields.items():
            log.add_context(key, value)
            stack.callback(log.remove_context, key)
        if component:
            stack.enter_context(log.track_component(component))
        stack.enter_context(log.profile(name))
        try:
            yield
        except Exception as exc:
            _emit(log, "error", "span::fail", {"span": name, "error": exc, **fields})
            raise


__all__ = ["PRESETS", "configure", "get_logger", "record_event", "span"]
