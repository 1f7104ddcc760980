"""Wall-clock helpers."""
from __future__ import annotations

import time
from typing import Callable

__all__ = ["absolute_time", "elapsed_time", "measure"]


def absolute_time() -> float:
    """Return the current wall-clock time in seconds since the epoch."""

    return time.time()


_START_TIME = absolute_time()


def elapsed_time() -> float:
    """Seconds elapsed since globalkit was imported."""

    return absolute_time() - _START_TIME


def measure(execute: Callable[[], object]) -> float:
    """Run ``execute`` and return how long it took, in seconds.

    Exceptions raised by ``execute`` propagate unchanged.
    """

    started = time.perf_counter()
    execute()
    return time.perf_counter() - started
