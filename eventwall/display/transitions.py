from dataclasses import dataclass, field

from eventwall.display.rotation import Direction

SLIDE_OFFSET = 1000


@dataclass(frozen=True)
class TransitionSpec:
    """Enter/center/exit animation targets plus per-property timing."""

    effect: str
    enter: dict = field(default_factory=dict)
    center: dict = field(default_factory=dict)
    exit: dict = field(default_factory=dict)
    timing: dict = field(default_factory=dict)


def _slide(direction: Direction) -> TransitionSpec:
    sign = 1 if direction == Direction.FORWARD else -1
    return TransitionSpec(
        effect="slide",
        enter={"x": sign * SLIDE_OFFSET, "opacity": 0},
        center={"x": 0, "opacity": 1},
        exit={"x": -sign * SLIDE_OFFSET, "opacity": 0},
        timing={
            "x": {"type": "spring", "stiffness": 300, "damping": 30},
            "opacity": {"duration": 0.2},
        },
    )


def _fade(direction: Direction) -> TransitionSpec:
    return TransitionSpec(
        effect="fade",
        enter={"opacity": 0},
        center={"opacity": 1},
        exit={"opacity": 0},
        timing={"opacity": {"duration": 0.5}},
    )


def _zoom(direction: Direction) -> TransitionSpec:
    return TransitionSpec(
        effect="zoom",
        enter={"scale": 0.8, "opacity": 0},
        center={"scale": 1, "opacity": 1},
        exit={"scale": 0.8, "opacity": 0},
        timing={
            "scale": {"type": "spring", "stiffness": 300, "damping": 30},
            "opacity": {"duration": 0.3},
        },
    )


def _flip(direction: Direction) -> TransitionSpec:
    return TransitionSpec(
        effect="flip",
        enter={"rotateY": 90, "opacity": 0},
        center={"rotateY": 0, "opacity": 1},
        exit={"rotateY": -90, "opacity": 0},
        timing={"rotateY": {"duration": 0.6}, "opacity": {"duration": 0.3}},
    )


_EFFECTS = {"slide": _slide, "fade": _fade, "zoom": _zoom, "flip": _flip}


def transition_for(effect: str, direction: Direction = Direction.FORWARD) -> TransitionSpec:
    """Animation spec for an effect name; unknown names fall back to slide."""
    return _EFFECTS.get(effect, _slide)(direction)
