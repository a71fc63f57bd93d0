import asyncio
from typing import Callable, Protocol


class Handle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Anything that can run a callback after a delay in seconds."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> Handle: ...


class LoopScheduler:
    """Scheduler backed by the running asyncio loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)


class Timer:
    """A single restartable one-shot timer; starting it again replaces the pending call."""

    def __init__(self, scheduler: Scheduler):
        self._scheduler = scheduler
        self._handle: Handle | None = None

    @property
    def active(self) -> bool:
        return self._handle is not None

    def start(self, delay: float, callback: Callable[[], None]) -> None:
        self.cancel()

        def fire() -> None:
            self._handle = None
            callback()

        self._handle = self._scheduler.call_later(delay, fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
