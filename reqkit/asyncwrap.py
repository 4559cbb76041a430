"""Futures for requests run on a shared thread pool, with cancellation."""

from __future__ import annotations

import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from concurrent.futures import wait as _wait_futures
from enum import Enum
from typing import Any, Optional


class CancellationResult(Enum):
    FAILURE = "failure"
    SUCCESS = "success"
    INVALID_OPERATION = "invalid_operation"


class AsyncWrapper:
    """Wraps a future; its result can be taken once.

    When a cancellation flag is given the wrapper is cancellable: ``cancel``
    sets the flag, and the flag is also set when the wrapper is discarded.
    """

    def __init__(self, future: Future, cancellation_state: Optional[threading.Event] = None) -> None:
        self._future = future
        self._cancelled = cancellation_state
        self._consumed = False

    @property
    def _cancellable(self) -> bool:
        return self._cancelled is not None

    def __del__(self) -> None:
        if self._cancelled is not None:
            self._cancelled.set()

    def _future_valid(self) -> bool:
        return not self._consumed

    def _check(self, action: str) -> None:
        if self.is_cancelled():
            raise RuntimeError(f"Calling AsyncWrapper.{action} on a cancelled request!")
        if not self._future_valid():
            raise RuntimeError(f"Calling AsyncWrapper.{action} when the associated future is invalid!")

    def get(self) -> Any:
        """Wait for and return the result; afterwards the wrapper is invalid."""
        self._check("get")
        self._consumed = True
        return self._future.result()

    def valid(self) -> bool:
        return self._future_valid() and not self.is_cancelled()

    def wait(self) -> None:
        """Block until the result is ready."""
        self._check("wait")
        _wait_futures([self._future])

    def wait_for(self, timeout: float) -> bool:
        """Wait up to ``timeout`` seconds; return True if the result is ready."""
        self._check("wait_for")
        try:
            self._future.exception(timeout=timeout)
        except FutureTimeoutError:
            return False
        return True

    def cancel(self) -> CancellationResult:
        if self._cancelled is None:
            return CancellationResult.INVALID_OPERATION
        if not self._future_valid() or self._cancelled.is_set():
            return CancellationResult.INVALID_OPERATION
        self._cancelled.set()
        return CancellationResult.SUCCESS

    def is_cancelled(self) -> bool:
        return self._cancelled is not None and self._cancelled.is_set()


ProgressCallback = Callable[[int, int, int, int], bool]


class CancellationCallback:
    """A progress callback that stops the transfer once cancellation is flagged.

    A user progress callback, if set, is consulted only while not cancelled.
    """

    def __init__(self, cancellation_state: threading.Event, user_callback: Optional[ProgressCallback] = None) -> None:
        self._state = cancellation_state
        self._user_callback = user_callback

    def set_progress_callback(self, callback: ProgressCallback) -> None:
        self._user_callback = callback

    def __call__(self, dltotal: int, dlnow: int, ultotal: int, ulnow: int) -> bool:
        keep_going = not self._state.is_set()
        if self._user_callback is None:
            return keep_going
        return keep_going and bool(self._user_callback(dltotal, dlnow, ultotal, ulnow))


_pool_lock = threading.Lock()
_pool: Optional[ThreadPoolExecutor] = None


def startup(max_threads: Optional[int] = None) -> None:
    """Start the shared thread pool; does nothing if it is already running."""
    global _pool
    with _pool_lock:
        if _pool is None:
            _pool = ThreadPoolExecutor(max_workers=max_threads)


def cleanup() -> None:
    """Wait for pending tasks and shut the shared thread pool down."""
    global _pool
    with _pool_lock:
        pool, _pool = _pool, None
    if pool is not None:
        pool.shutdown(wait=True)


def submit(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> AsyncWrapper:
    """Run ``fn(*args, **kwargs)`` on the shared pool, starting it if needed."""
    startup()
    with _pool_lock:
        pool = _pool
        if pool is None:
            raise RuntimeError("thread pool was shut down")
        future = pool.submit(fn, *args, **kwargs)
    return AsyncWrapper(future)