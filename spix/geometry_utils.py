"""Helpers for computing gesture paths across items."""

from __future__ import annotations

import math
from enum import Enum

from spix.geometry import Point, Size
from spix.item_path import ItemPosition


class SwipeDirection(Enum):
    """Direction of a swipe gesture."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


class Strategy(Enum):
    """How intermediate points between two points are produced."""

    LINEAR = "linear"


def get_swipe_direction(from_to: tuple[Point, Point]) -> SwipeDirection:
    """Return LEFT when the move goes towards smaller x, otherwise RIGHT."""
    start, end = from_to
    return SwipeDirection.LEFT if start.x > end.x else SwipeDirection.RIGHT


def calculate_path_between_points(
    from_to: tuple[Point, Point], strategy: Strategy = Strategy.LINEAR
) -> list[Point]:
    """Sample the straight line between two points at whole-number x values.

    Points run from the start towards the end horizontally. When both
    points share the same x coordinate the slope is undefined and the
    sampled y values are NaN.
    """
    start, end = from_to
    low, high = min(start.x, end.x), max(start.x, end.x)

    if get_swipe_direction(from_to) is SwipeDirection.LEFT:
        xs = range(math.trunc(high), math.ceil(low) - 1, -1)
    else:
        xs = range(math.trunc(low), math.floor(high) + 1)

    dx = end.x - start.x
    if dx == 0:
        return [Point(float(x), math.nan) for x in xs]

    slope = (end.y - start.y) / dx
    intercept = start.y - slope * start.x
    return [Point(float(x), slope * x + intercept) for x in xs]


def position_for_swipe(
    item_position: ItemPosition, item_size: Size, direction: SwipeDirection
) -> Point:
    """Return where a swipe from ``item_position`` ends on the item's edge."""
    origin = item_position.position_for_item_size(item_size)
    if direction is SwipeDirection.LEFT:
        return Point(0.0, origin.y)
    if direction is SwipeDirection.RIGHT:
        return Point(item_size.width, origin.y)
    if direction is SwipeDirection.UP:
        return Point(origin.x, 0.0)
    if direction is SwipeDirection.DOWN:
        return Point(origin.x, item_size.height)
    return Point(0.0, 0.0)