"""Cancellable, deadline-bearing context passed to every repository call."""

import threading
import time

from domain.model.errors import DeadlineExceededError, OperationCancelledError


class OperationContext:
    """Carries cancellation and an optional deadline down to storage I/O.

    Deadlines use the monotonic clock. A child context is cancelled when its
    parent is, and never outlives the parent's deadline.
    """

    def __init__(self, deadline: float | None = None, parent: 'OperationContext | None' = None):
        self._cancelled = threading.Event()
        self._parent = parent
        if parent is not None and parent.deadline is not None:
            deadline = parent.deadline if deadline is None else min(deadline, parent.deadline)
        self._deadline = deadline

    @classmethod
    def background(cls) -> 'OperationContext':
        """Context with no deadline; only an explicit cancel() stops it."""
        return cls()

    @classmethod
    def with_timeout(cls, seconds: float, parent: 'OperationContext | None' = None) -> 'OperationContext':
        return cls(deadline=time.monotonic() + seconds, parent=parent)

    @property
    def deadline(self) -> float | None:
        return self._deadline

    @property
    def cancelled(self) -> bool:
        if self._cancelled.is_set():
            return True
        return self._parent is not None and self._parent.cancelled

    def cancel(self) -> None:
        self._cancelled.set()

    def remaining(self) -> float | None:
        """Seconds left before the deadline, or None when unbounded."""
        if self._deadline is None:
            return None
        return max(self._deadline - time.monotonic(), 0.0)

    def check(self) -> float | None:
        """Raise if the context can no longer be used for I/O.

        Returns the seconds left (always positive), or None when unbounded.

        Raises:
            OperationCancelledError: cancel() was called here or on a parent
            DeadlineExceededError: the deadline has passed
        """
        if self.cancelled:
            raise OperationCancelledError("Operation cancelled")
        remaining = self.remaining()
        if remaining is not None and remaining <= 0:
            raise DeadlineExceededError("Operation deadline exceeded")
        return remaining
