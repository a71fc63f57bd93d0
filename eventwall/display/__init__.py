from eventwall.display.engine import SlideshowEngine
from eventwall.display.layouts import Frame, render_layout
from eventwall.display.source import DataSource, PollingSource, Snapshot, Subscription, display_feed
from eventwall.display.timers import LoopScheduler, Scheduler

__all__ = [
    "SlideshowEngine",
    "Frame",
    "render_layout",
    "DataSource",
    "PollingSource",
    "Snapshot",
    "Subscription",
    "display_feed",
    "LoopScheduler",
    "Scheduler",
]
