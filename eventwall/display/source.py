"""Data sources feeding the presentation engine.

A source publishes snapshots to subscribers. :class:`PollingSource` fetches on
a scheduler-driven cadence; every fetch is numbered and a result that arrives
after a newer one has been applied is dropped.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, Protocol, TypeVar

from eventwall.display.timers import LoopScheduler, Scheduler, Timer
from eventwall.schemas.display_settings import DisplaySettingsResponse
from eventwall.schemas.photo import DisplayImage

logger = logging.getLogger(__name__)

T = TypeVar("T")

DataCallback = Callable[[T], None]
ErrorCallback = Callable[[Exception], None]


@dataclass(frozen=True)
class Snapshot:
    settings: DisplaySettingsResponse | None
    images: tuple[DisplayImage, ...] = ()


class Subscription:
    def __init__(self, release: Callable[[], None]):
        self._release: Callable[[], None] | None = release

    @property
    def active(self) -> bool:
        return self._release is not None

    def unsubscribe(self) -> None:
        if self._release is not None:
            release, self._release = self._release, None
            release()


class DataSource(Protocol[T]):
    async def fetch(self) -> T: ...

    async def refresh(self) -> None: ...

    def subscribe(self, on_data: DataCallback, on_error: ErrorCallback | None = None) -> Subscription: ...

    def set_cadence(self, seconds: float | None) -> None: ...


class PollingSource(Generic[T]):
    def __init__(self, fetcher: Callable[[], Awaitable[T]], scheduler: Scheduler | None = None):
        self._fetcher = fetcher
        self._timer = Timer(scheduler or LoopScheduler())
        self._subscribers: list[tuple[DataCallback, ErrorCallback | None]] = []
        self._tasks: set[asyncio.Task] = set()
        self._issued = 0
        self._applied = 0
        self.cadence: float | None = None

    async def fetch(self) -> T:
        return await self._fetcher()

    async def refresh(self) -> None:
        self._issued += 1
        seq = self._issued
        try:
            data = await self._fetcher()
        except Exception as e:
            if self._is_stale(seq):
                return
            logger.warning("Fetch #%d failed: %s", seq, e)
            for _, on_error in list(self._subscribers):
                if on_error:
                    on_error(e)
            return

        if self._is_stale(seq):
            return
        for on_data, _ in list(self._subscribers):
            on_data(data)

    def _is_stale(self, seq: int) -> bool:
        if seq < self._applied:
            logger.debug("Dropping stale response #%d (applied #%d)", seq, self._applied)
            return True
        self._applied = seq
        return False

    def subscribe(self, on_data: DataCallback, on_error: ErrorCallback | None = None) -> Subscription:
        entry = (on_data, on_error)
        self._subscribers.append(entry)

        def release() -> None:
            if entry in self._subscribers:
                self._subscribers.remove(entry)

        return Subscription(release)

    def set_cadence(self, seconds: float | None) -> None:
        """Poll every ``seconds``; None or 0 stops polling."""
        if seconds == self.cadence:
            return
        self.cadence = seconds or None
        self._timer.cancel()
        if self.cadence:
            self._timer.start(self.cadence, self._tick)

    def _tick(self) -> None:
        task = asyncio.ensure_future(self.refresh())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        if self.cadence:
            self._timer.start(self.cadence, self._tick)

    async def close(self) -> None:
        self._timer.cancel()
        self.cadence = None
        self._subscribers.clear()
        for task in list(self._tasks):
            task.cancel()
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)


def display_feed(client) -> Callable[[], Awaitable[Snapshot]]:
    """Fetcher combining display settings and approved images from an EventWallClient."""

    async def fetch() -> Snapshot:
        settings, images = await asyncio.gather(client.display_settings(), client.display_images())
        return Snapshot(settings=settings, images=tuple(images))

    return fetch
