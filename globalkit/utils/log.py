"""Logging helpers shared across globalkit."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional, TypeVar

from globalkit.config import get_settings

__all__ = ["do_catch_log", "get_logger", "LOG_FORMAT", "ECHO_FORMAT"]

LOG_FORMAT = "%(asctime)s -%(filename)s.%(lineno)d.%(funcName)s: %(message)s"
ECHO_FORMAT = "%(message)s"

T = TypeVar("T")


def get_logger(name: str, file_path: str | Path | None = None) -> logging.Logger:
    """Return a configured logger, attaching a ``file_path`` handler if provided.

    Handlers are only attached the first time a given ``name`` is requested. In
    echo mode records are printed as the bare message.
    """

    settings = get_settings()
    logger = logging.getLogger(name)
    if not logger.handlers:
        formatter = logging.Formatter(ECHO_FORMAT if settings.echo_mode else LOG_FORMAT)
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        if file_path:
            Path(file_path).parent.mkdir(parents=True, exist_ok=True)
            f_handler = logging.FileHandler(file_path, encoding="utf-8")
            f_handler.setFormatter(formatter)
            logger.addHandler(f_handler)
    logger.setLevel(settings.log_level)
    return logger


def do_catch_log(block: Callable[[], T], logger: Optional[logging.Logger] = None) -> Optional[T]:
    """Run ``block`` and return its result, logging and returning ``None`` on error.

    The record carries the caller's file, line and function.
    """

    try:
        return block()
    except Exception as exc:
        (logger or get_logger("globalkit")).exception("Error: %s", exc, stacklevel=2)
        return None
