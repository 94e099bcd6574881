"""Cooperative cancellation for client calls."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable

from .exceptions import Cancelled, ContextError, DeadlineExceeded


class Context:
    """Cancellation token bound to one or more requests.

    A context is done once :meth:`cancel` was called or its deadline passed.
    The deadline is fixed at construction; cancelling is safe from any thread.
    """

    def __init__(self, *, timeout: float | None = None, deadline: float | None = None) -> None:
        if timeout is not None:
            timeout_deadline = time.monotonic() + timeout
            deadline = timeout_deadline if deadline is None else min(deadline, timeout_deadline)
        self._deadline = deadline
        self._cancelled = threading.Event()
        self._lock = threading.Lock()
        self._callbacks: list[Callable[[], None]] = []
        self._timer: threading.Timer | None = None

    @classmethod
    def background(cls) -> Context:
        """Return a context that is never done unless cancelled explicitly."""
        return cls()

    @property
    def deadline(self) -> float | None:
        """Deadline on the ``time.monotonic()`` clock, if any."""
        return self._deadline

    def cancel(self) -> None:
        self._cancelled.set()
        self._fire()

    def remaining(self) -> float | None:
        if self._deadline is None:
            return None
        return max(self._deadline - time.monotonic(), 0.0)

    def done(self) -> bool:
        return self.error() is not None

    def error(self) -> ContextError | None:
        """Return the reason this context is done, or ``None`` while it is live."""
        if self._cancelled.is_set():
            return Cancelled()
        if self._deadline is not None and time.monotonic() >= self._deadline:
            return DeadlineExceeded()
        return None

    def raise_if_done(self) -> None:
        err = self.error()
        if err is not None:
            raise err

    def add_done_callback(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Run ``callback`` once, when the context is cancelled or its deadline passes.

        A context that is already done runs ``callback`` immediately. Returns
        a function that unregisters the callback.
        """
        with self._lock:
            live = self.error() is None
            if live:
                self._callbacks.append(callback)
                self._start_timer()
        if not live:
            callback()
            return _noop

        def remove() -> None:
            with self._lock:
                if callback in self._callbacks:
                    self._callbacks.remove(callback)
                if not self._callbacks and self._timer is not None:
                    self._timer.cancel()
                    self._timer = None

        return remove

    def _start_timer(self) -> None:
        # caller holds self._lock
        if self._deadline is None or self._timer is not None:
            return
        self._timer = threading.Timer(max(self._deadline - time.monotonic(), 0.0), self._expire)
        self._timer.daemon = True
        self._timer.start()

    def _expire(self) -> None:
        # Timer waits can return a little early on coarse clocks
        delay = self._deadline - time.monotonic()
        if delay > 0:
            time.sleep(delay)
        self._fire()

    def _fire(self) -> None:
        with self._lock:
            callbacks, self._callbacks = self._callbacks, []
            timer, self._timer = self._timer, None
        if timer is not None:
            timer.cancel()
        for callback in callbacks:
            callback()


def _noop() -> None:
    return None
