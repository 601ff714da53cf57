"""Root logging setup for one resolution run."""

from __future__ import annotations

import logging
from pathlib import Path

from buildrules.api.logging import JsonFormatter, LoggingConfig
from buildrules.runtime.config import resolve_log_level_name

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Handlers installed by configure_logging; closed again by shutdown_logging.
_INSTALLED: list[logging.Handler] = []


def build_handlers(config: LoggingConfig) -> list[logging.Handler]:
    """Console handler, plus a file handler when ``config.file_path`` is set."""
    console = logging.StreamHandler()
    console.setFormatter(_formatter_for(config.console_format))
    handlers: list[logging.Handler] = [console]
    if config.file_path:
        path = Path(config.file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
        file_handler.setFormatter(_formatter_for(config.file_format))
        handlers.append(file_handler)
    return handlers


def configure_logging(config: LoggingConfig) -> None:
    """Replace root handlers with the ones described by ``config``."""
    shutdown_logging()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))
    for handler in build_handlers(config):
        root.addHandler(handler)
        _INSTALLED.append(handler)


def shutdown_logging() -> None:
    """Detach and close the handlers installed by ``configure_logging``."""
    root = logging.getLogger()
    while _INSTALLED:
        handler = _INSTALLED.pop()
        root.removeHandler(handler)
        handler.close()


def setup_logging() -> None:
    """Text logging on the console, only when nothing is configured yet."""
    if logging.getLogger().handlers:
        return
    configure_logging(LoggingConfig(level_name=resolve_log_level_name(default="INFO")))


def _formatter_for(kind: str) -> logging.Formatter:
    return JsonFormatter() if kind.strip().lower() == "json" else logging.Formatter(_TEXT_FORMAT)


__all__ = ["build_handlers", "configure_logging", "setup_logging", "shutdown_logging"]
