"""Rotation order and index arithmetic for the slideshow."""
from enum import Enum
from typing import Sequence, TypeVar

T = TypeVar("T")


class Direction(str, Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


def display_sort_key(image) -> tuple[bool, int]:
    # None sorts after every explicit order
    order = image.display_order
    return (order is None, order if order is not None else 0)


def sort_for_display(images: Sequence[T]) -> list[T]:
    """Order by display order ascending, unset last; ties keep their input order."""
    return sorted(images, key=display_sort_key)


def step(index: int, count: int, delta: int) -> int:
    if count == 0:
        return index
    return (index + delta + count) % count


def infer_direction(previous: int, current: int, count: int) -> Direction:
    """Direction of a move from ``previous`` to ``current`` in a rotation of ``count``.

    Wrapping from the last slide to the first is forward, jumping from the
    first to the last is backward; otherwise the index delta decides.
    """
    last = count - 1
    if previous == last and current == 0:
        return Direction.FORWARD
    if previous == 0 and current == last:
        return Direction.BACKWARD
    return Direction.FORWARD if current > previous else Direction.BACKWARD
