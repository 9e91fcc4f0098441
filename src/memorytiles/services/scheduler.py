from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable, Protocol


class Handle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[[], None]) -> Handle: ...

    def call_every(self, interval: float, callback: Callable[[], None]) -> Handle: ...


@dataclass
class ScheduledCall:
    due: float
    callback: Callable[[], None]
    interval: float | None = None
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class FrameScheduler:
    """Scheduler driven by elapsed frame time instead of a wall clock.

    The pygame loop feeds it `clock.tick()` deltas; tests feed it virtual
    seconds. Callbacks run inside `advance`, in due-time order.
    """

    now: float = 0.0
    _queue: list[tuple[float, int, ScheduledCall]] = field(default_factory=list)
    _seq: itertools.count = field(default_factory=itertools.count)

    def _push(self, call: ScheduledCall) -> None:
        heapq.heappush(self._queue, (call.due, next(self._seq), call))

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        call = ScheduledCall(due=self.now + max(0.0, delay), callback=callback)
        self._push(call)
        return call

    def call_every(self, interval: float, callback: Callable[[], None]) -> ScheduledCall:
        if interval <= 0:
            raise ValueError("interval must be positive")
        call = ScheduledCall(due=self.now + interval, callback=callback, interval=interval)
        self._push(call)
        return call

    def advance(self, dt: float) -> int:
        """Move time forward by `dt` seconds and run everything that came due.

        Returns the number of callbacks fired. A repeating call fires once per
        interval covered by `dt`.
        """
        target = self.now + max(0.0, dt)
        fired = 0
        # small epsilon so 0.1 + 0.2 style drift does not skip a due call
        while self._queue and self._queue[0][0] <= target + 1e-9:
            due, _, call = heapq.heappop(self._queue)
            if call.cancelled:
                continue
            self.now = max(self.now, due)
            call.callback()
            fired += 1
            if call.interval is not None and not call.cancelled:
                call.due = due + call.interval
                self._push(call)
        self.now = target
        return fired

    def pending(self) -> int:
        return sum(1 for _, _, c in self._queue if not c.cancelled)
