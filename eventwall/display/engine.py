"""Slideshow presentation engine.

The engine owns the rotation state (current index, pause flag, interval) and
the advance timer. Snapshots arrive from a :class:`DataSource`; every state
change recomputes the timer and the source's polling cadence, and listeners
receive the new :class:`Frame` whenever it differs from the last one sent.
"""
import logging
from dataclasses import replace
from typing import Callable

from eventwall.display.controls import ControlsVisibility
from eventwall.display.layouts import (
    ControlsState,
    Frame,
    empty_frame,
    error_frame,
    loading_frame,
    render_layout,
)
from eventwall.display.rotation import Direction, infer_direction, sort_for_display, step
from eventwall.display.source import DataSource, Snapshot, Subscription
from eventwall.display.styles import FULL, Scale
from eventwall.display.timers import LoopScheduler, Scheduler, Timer
from eventwall.schemas.display_settings import DisplaySettingsFields

logger = logging.getLogger(__name__)

INTERVAL_CHOICES = (5, 8, 10, 15, 30, 0)  # 0 = manual control
DEFAULT_INTERVAL = 8

FrameListener = Callable[[Frame], None]


class SlideshowEngine:
    def __init__(self, source: DataSource, scheduler: Scheduler | None = None, scale: Scale = FULL):
        self._source = source
        self._scheduler = scheduler or LoopScheduler()
        self._scale = scale

        self.current_index = 0
        self.previous_index = 0
        self.direction = Direction.FORWARD
        self.is_paused = False
        self.slide_interval = DEFAULT_INTERVAL
        self.images: tuple = ()
        self.settings: DisplaySettingsFields | None = None
        self.error: str | None = None
        self.loaded = False

        self._applied_settings: DisplaySettingsFields | None = None
        self._advance = Timer(self._scheduler)
        self._timer_key: tuple | None = None
        self._subscription: Subscription | None = None
        self._listeners: list[FrameListener] = []
        self._last_frame: Frame | None = None
        self.controls = ControlsVisibility(self._scheduler, on_change=lambda _: self._publish())

    async def __aenter__(self) -> "SlideshowEngine":
        await self.start()
        return self

    async def __aexit__(self, *exc_info) -> None:
        self.close()

    async def start(self) -> None:
        if self._subscription is None:
            self._subscription = self._source.subscribe(self._on_data, self._on_error)
        await self._source.refresh()

    def close(self) -> None:
        self._advance.cancel()
        self._timer_key = None
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None
        self._source.set_cadence(None)
        self.controls.close()
        self._listeners.clear()

    # data

    def _on_data(self, snapshot: Snapshot) -> None:
        settings = snapshot.settings
        if settings is not None and settings != self._applied_settings:
            # fresh settings re-seed the transport state; unchanged ones leave manual choices alone
            self.is_paused = not settings.auto_rotate
            self.slide_interval = settings.slide_interval
            self._applied_settings = settings
        self.settings = settings

        self.images = tuple(sort_for_display(snapshot.images))
        if self.current_index >= len(self.images):
            self.current_index = 0
            self.previous_index = 0

        self.error = None
        self.loaded = True
        self._sync()

    def _on_error(self, exc: Exception) -> None:
        self.error = getattr(exc, "message", None) or str(exc) or "Unknown error"
        self.loaded = True
        self._publish()

    # transport

    def next(self) -> None:
        if self.images:
            self._go_to(step(self.current_index, len(self.images), 1))

    def previous(self) -> None:
        if self.images:
            self._go_to(step(self.current_index, len(self.images), -1))

    def toggle_pause(self) -> None:
        self.is_paused = not self.is_paused
        self._sync()

    def set_interval(self, seconds: int) -> None:
        if seconds not in INTERVAL_CHOICES:
            raise ValueError(f"Interval must be one of {INTERVAL_CHOICES}")
        self.slide_interval = seconds
        self._sync()

    def pointer_moved(self) -> None:
        self.controls.pointer_moved()

    def _go_to(self, index: int) -> None:
        self.previous_index = self.current_index
        self.direction = infer_direction(self.previous_index, index, len(self.images))
        self.current_index = index
        self._sync()

    # timer and cadence

    @property
    def running(self) -> bool:
        return (
            not self.is_paused
            and self.settings is not None
            and bool(self.images)
            and self.slide_interval > 0
        )

    def _sync(self) -> None:
        key = (
            self.current_index,
            self.slide_interval,
            self.is_paused,
            self.images,
            self.settings is None,
        )
        if key != self._timer_key:
            self._timer_key = key
            self._advance.cancel()
            if self.running:
                self._advance.start(self.slide_interval, self._on_tick)

        polling = not self.is_paused and self.slide_interval > 0
        self._source.set_cadence(self.slide_interval if polling else None)
        self._publish()

    def _on_tick(self) -> None:
        if self.images:
            self._go_to(step(self.current_index, len(self.images), 1))

    # rendering

    def frame(self) -> Frame:
        if not self.loaded:
            return loading_frame()
        if self.error is not None:
            return error_frame(self.error, self.settings)
        if self.settings is None or not self.images:
            return empty_frame(self.settings)

        rendered = render_layout(
            self.settings, self.images, self.current_index, self.direction, self._scale
        )
        return replace(
            rendered,
            controls=ControlsState(
                visible=self.controls.visible,
                paused=self.is_paused,
                position=self.current_index + 1,
                total=len(self.images),
                interval=self.slide_interval,
                interval_choices=INTERVAL_CHOICES,
            ),
        )

    def subscribe(self, listener: FrameListener) -> Subscription:
        self._listeners.append(listener)

        def release() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return Subscription(release)

    def _publish(self) -> None:
        if not self._listeners:
            return
        current = self.frame()
        if current == self._last_frame:
            return
        self._last_frame = current
        for listener in list(self._listeners):
            listener(current)
