"""Coordinator-thread contract for host model access."""

from __future__ import annotations

import threading


class HostThreadError(RuntimeError):
    """Host model accessed from a thread other than the coordinator thread."""


class CoordinatorThread:
    """The one thread allowed to read the host model.

    Bound to the thread that creates it unless a thread id is given.
    """

    def __init__(self, thread_id: int | None = None) -> None:
        self._thread_id = thread_id if thread_id is not None else threading.get_ident()

    @property
    def thread_id(self) -> int:
        return self._thread_id

    def is_current(self) -> bool:
        return threading.get_ident() == self._thread_id

    def require(self) -> None:
        if not self.is_current():
            raise HostThreadError(
                f"Host model must be accessed from thread {self._thread_id}, not {threading.get_ident()}"
            )
