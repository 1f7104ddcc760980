"""Run callables on the main thread from worker threads.

Worker threads hand work to :meth:`MainThreadDispatcher.sync` and block until the
main thread picks it up through :meth:`MainThreadDispatcher.run_pending`. On the
main thread ``sync`` simply calls the function.
"""
from __future__ import annotations

import queue
import threading
from concurrent.futures import Future
from typing import Callable, Optional, Tuple, TypeVar

__all__ = ["MainThreadDispatcher", "main_dispatcher", "sync_on_main"]

T = TypeVar("T")

_Job = Tuple[Callable[[], object], "Future[object]"]


class MainThreadDispatcher:
    def __init__(self) -> None:
        self._jobs: "queue.Queue[_Job]" = queue.Queue()

    @staticmethod
    def is_main_thread() -> bool:
        return threading.current_thread() is threading.main_thread()

    def sync(self, work: Callable[[], T]) -> T:
        """Run ``work`` on the main thread and return its result."""

        if self.is_main_thread():
            return work()
        future: "Future[object]" = Future()
        self._jobs.put((work, future))
        return future.result()  # type: ignore[return-value]

    def run_pending(self, timeout: Optional[float] = None) -> int:
        """Execute queued work; must be called from the main thread.

        With ``timeout`` the call waits up to that many seconds for the first job
        when the queue is empty. Returns the number of jobs executed.
        """

        if not self.is_main_thread():
            raise RuntimeError("run_pending() must be called from the main thread")

        executed = 0
        block = timeout is not None
        while True:
            try:
                work, future = self._jobs.get(block=block, timeout=timeout)
            except queue.Empty:
                return executed
            block = False
            if future.set_running_or_notify_cancel():
                try:
                    future.set_result(work())
                except Exception as exc:
                    future.set_exception(exc)
            executed += 1


main_dispatcher = MainThreadDispatcher()


def sync_on_main(work: Callable[[], T]) -> T:
    """Run ``work`` on the main thread through the shared dispatcher."""

    return main_dispatcher.sync(work)
