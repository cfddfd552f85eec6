from __future__ import annotations

import logging
import os
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import Optional

from .formatter import ConsoleFormatter, JSONFormatter
from .levels import register_levels, to_level

_listener: QueueListener | None = None
_installed: list[tuple[logging.Logger, logging.Handler]] = []


def bootstrap_logging(
    *,
    level: str | int | None = None,
    console: Optional[bool] = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "whatismymmr.jsonl",
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
    logger_name: str = "whatismymmr",
) -> logging.Logger:
    """Attach console and/or JSON-lines file handlers to the package logger.

    Only applications call this; the library never installs handlers on its
    own. Console output is on when ``console`` is true or ``LOG_CONSOLE=true``.
    """
    global _listener
    shutdown_logging()
    register_levels()

    logger = logging.getLogger(logger_name)
    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    logger.setLevel(lvl)

    if console is None:
        console = os.getenv("LOG_CONSOLE", "false").strip().lower() == "true"
    if console:
        stream = logging.StreamHandler()
        console_level = os.getenv("LOG_CONSOLE_LEVEL", "")
        stream.setLevel(to_level(console_level) if console_level else lvl)
        stream.setFormatter(ConsoleFormatter())
        logger.addHandler(stream)
        _installed.append((logger, stream))

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        json_handler = RotatingFileHandler(str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count)
        json_handler.setLevel(lvl)
        json_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        qh = QueueHandler(q)
        logger.addHandler(qh)
        _installed.append((logger, qh))
        _listener = QueueListener(q, json_handler, respect_handler_level=True)
        _listener.start()

    return logger


def shutdown_logging() -> None:
    """Flush the file listener and detach every handler bootstrap_logging added."""
    global _listener
    if _listener:
        _listener.stop()
        for handler in _listener.handlers:
            handler.close()
        _listener = None
    while _installed:
        logger, handler = _installed.pop()
        logger.removeHandler(handler)
        handler.close()
