"""Logging for generation runs: rich console output, per-run log files, run context.

Library modules only call :func:`get_logger`; handlers are installed once per
process by :func:`init_logging` (the CLI does this from ``Settings``). Records
travel through a queue so the rich console and file writer run on a listener
thread and never interleave with progress bars.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path
from queue import SimpleQueue
from threading import RLock
from typing import TYPE_CHECKING, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import install as install_rich_traceback

from .context import ContextFilter, log_context
from .progress import progress_manager
from .timing import timeit

if TYPE_CHECKING:
    from findata.core.config import Settings

__all__ = [
    "LoggingConfig",
    "init_logging",
    "configure_from_settings",
    "get_logger",
    "shutdown_logging",
    "log_context",
    "progress_manager",
    "timeit",
]

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(context)s%(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class LoggingConfig:
    """Runtime configuration for the logging subsystem."""

    app_name: str = "findata"
    level: str | int = "INFO"
    log_dir: Optional[Path] = None
    console: bool = True
    rich_tracebacks: bool = True
    queue: bool = True

    @classmethod
    def from_settings(cls, settings: "Settings") -> "LoggingConfig":
        return cls(level=settings.log_level, log_dir=settings.log_dir)


_lock = RLock()
_active: LoggingConfig | None = None
_listener: QueueListener | None = None
_context_filter = ContextFilter()


def _parse_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), logging.INFO)


def run_log_path(directory: Path, app_name: str, started: Optional[datetime] = None) -> Path:
    """One file per generation run, e.g. ``logs/findata_20240131-154500.log``."""

    started = started or datetime.now()
    return directory / f"{app_name}_{started:%Y%m%d-%H%M%S}.log"


def _console_handler(console: Console, cfg: LoggingConfig) -> logging.Handler:
    handler = RichHandler(
        console=console,
        rich_tracebacks=cfg.rich_tracebacks,
        show_level=True,
        show_path=False,
        markup=False,
        log_time_format=DATE_FORMAT,
    )
    handler.setFormatter(logging.Formatter("%(context)s%(message)s"))
    return handler


def _file_handler(cfg: LoggingConfig) -> logging.Handler:
    directory = Path(cfg.log_dir)  # type: ignore[arg-type]
    directory.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(run_log_path(directory, cfg.app_name), encoding="utf-8")
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _build_handlers(cfg: LoggingConfig, level: int) -> list[logging.Handler]:
    if cfg.rich_tracebacks:
        install_rich_traceback(show_locals=False)

    console = Console(stderr=True)
    progress_manager.use_console(console)

    handlers: list[logging.Handler] = []
    if cfg.console:
        handlers.append(_console_handler(console, cfg))
    if cfg.log_dir:
        handlers.append(_file_handler(cfg))
    for handler in handlers:
        handler.setLevel(level)
        handler.addFilter(_context_filter)
    return handlers


def _detach_root_handlers() -> logging.Logger:
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    return root


def init_logging(**kwargs: object) -> None:
    """Install handlers described by ``LoggingConfig(**kwargs)``.

    Calling again with the same options is a no-op; different options tear
    down the previous listener first.
    """

    global _active, _listener

    cfg = LoggingConfig()
    for key, value in kwargs.items():
        if hasattr(cfg, key):
            setattr(cfg, key, value)  # type: ignore[arg-type]

    with _lock:
        if _active == cfg:
            return
        if _active is not None:
            _teardown_locked()

        level = _parse_level(cfg.level)
        root = _detach_root_handlers()
        root.setLevel(logging.NOTSET)
        handlers = _build_handlers(cfg, level)

        if cfg.queue and handlers:
            queue: SimpleQueue = SimpleQueue()
            queue_handler = QueueHandler(queue)
            queue_handler.setLevel(level)
            queue_handler.addFilter(_context_filter)
            root.addHandler(queue_handler)
            _listener = QueueListener(queue, *handlers, respect_handler_level=True)
            _listener.start()
        else:
            for handler in handlers:
                root.addHandler(handler)

        _active = cfg


def configure_from_settings(settings: "Settings") -> None:
    cfg = LoggingConfig.from_settings(settings)
    init_logging(**vars(cfg))


def _teardown_locked() -> None:
    global _listener, _active
    handlers = list(logging.getLogger().handlers)
    if _listener:
        _listener.stop()
        handlers.extend(_listener.handlers)
    _listener = None
    _active = None
    progress_manager.reset_console()
    _detach_root_handlers()
    for handler in handlers:
        handler.close()


def shutdown_logging() -> None:
    """Stop the queue listener and detach handlers (end of a run, or tests)."""

    with _lock:
        _teardown_locked()


def get_logger(name: str | None = None) -> logging.Logger:
    cfg = _active or LoggingConfig()
    return logging.getLogger(name or cfg.app_name)
