from typing import Callable

from eventwall.display.timers import Scheduler, Timer

HIDE_AFTER_SECONDS = 3.0


class ControlsVisibility:
    """Transport controls shown on pointer movement, hidden after inactivity."""

    def __init__(self, scheduler: Scheduler, on_change: Callable[[bool], None] | None = None):
        self.visible = False
        self._timer = Timer(scheduler)
        self._on_change = on_change

    def pointer_moved(self) -> None:
        self._timer.start(HIDE_AFTER_SECONDS, self._hide)
        self._set(True)

    def _hide(self) -> None:
        self._set(False)

    def _set(self, visible: bool) -> None:
        if visible == self.visible:
            return
        self.visible = visible
        if self._on_change:
            self._on_change(visible)

    def close(self) -> None:
        self._timer.cancel()
        self._on_change = None
