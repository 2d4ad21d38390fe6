from __future__ import annotations

import threading
import time
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from linode_sdk.errors import CancelledError, DeadlineExceeded


class RequestContext:
    """Cancellation flag plus optional deadline shared by the calls of one operation."""

    def __init__(self, deadline: Optional[float] = None) -> None:
        self.deadline = deadline
        self._event = threading.Event()

    @classmethod
    def with_timeout(cls, seconds: float) -> "RequestContext":
        return cls(deadline=time.monotonic() + max(0.0, float(seconds)))

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def remaining(self) -> Optional[float]:
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    def expired(self) -> bool:
        remaining = self.remaining()
        return remaining is not None and remaining <= 0

    def check(self) -> None:
        if self.cancelled:
            raise CancelledError("request cancelled")
        if self.expired():
            raise DeadlineExceeded("request deadline exceeded")

    def wait(self, seconds: float) -> bool:
        """Sleep up to ``seconds``; returns True if cancelled in the meantime."""
        remaining = self.remaining()
        if remaining is not None:
            seconds = min(seconds, remaining)
        return self._event.wait(max(0.0, seconds))

    def clamp_timeout(self, timeout: float) -> float:
        remaining = self.remaining()
        if remaining is None:
            return timeout
        return max(0.001, min(timeout, remaining))


CURRENT_CONTEXT: ContextVar[Optional[RequestContext]] = ContextVar("linode_request_context", default=None)


def current_context() -> RequestContext:
    # No ambient context: a private one nobody else can cancel.
    return CURRENT_CONTEXT.get() or RequestContext()


def resolve_context(context: Optional[RequestContext]) -> RequestContext:
    return context if context is not None else current_context()


@contextmanager
def use_context(context: RequestContext) -> Iterator[RequestContext]:
    token = CURRENT_CONTEXT.set(context)
    try:
        yield context
    finally:
        CURRENT_CONTEXT.reset(token)
