from __future__ import annotations

from typing import Callable

from memorytiles.services.scheduler import Handle, Scheduler


class SessionTimer:
    """Owns the repeating per-second handle of one round's clock."""

    def __init__(self, scheduler: Scheduler, interval: float = 1.0) -> None:
        self._scheduler = scheduler
        self.interval = interval
        self._handle: Handle | None = None

    @property
    def running(self) -> bool:
        return self._handle is not None

    def start(self, on_tick: Callable[[], None]) -> None:
        if self._handle is not None:
            return
        self._handle = self._scheduler.call_every(self.interval, on_tick)

    def stop(self) -> None:
        if self._handle is None:
            return
        self._handle.cancel()
        self._handle = None
