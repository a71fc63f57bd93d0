"""Run the slideshow engine against a live server and log every frame.

    python -m eventwall.display --base-url http://localhost:8000 --event my-party
"""
import argparse
import asyncio
import logging

from eventwall.client import EventWallClient
from eventwall.display.engine import SlideshowEngine
from eventwall.display.layouts import Frame
from eventwall.display.source import PollingSource, display_feed
from eventwall.display.timers import LoopScheduler

logger = logging.getLogger("eventwall.display")


def _describe(frame: Frame) -> str:
    if frame.slides and frame.variant != "16:9-multiple":
        slide = frame.slides[0]
        return f"{frame.variant} {frame.index + 1}/{frame.total} {slide.src}"
    return f"{frame.variant} {frame.message or ''}".strip()


async def run(base_url: str, event: str | None, api_key: str | None) -> None:
    scheduler = LoopScheduler()
    async with EventWallClient(base_url, event=event, api_key=api_key) as client:
        source = PollingSource(display_feed(client), scheduler)
        try:
            async with SlideshowEngine(source, scheduler) as engine:
                engine.subscribe(lambda frame: logger.info("frame: %s", _describe(frame)))
                logger.info("frame: %s", _describe(engine.frame()))
                await asyncio.Event().wait()
        finally:
            await source.close()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="python -m eventwall.display", description=__doc__)
    parser.add_argument("--base-url", required=True, help="eventwall server URL")
    parser.add_argument("--event", default=None, help="event slug (defaults to the server's current event)")
    parser.add_argument("--api-key", default=None)
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        asyncio.run(run(args.base_url, args.event, args.api_key))
    except KeyboardInterrupt:
        logger.info("Stopped")


if __name__ == "__main__":
    main()
