import math

import pytest

from spix.geometry import Point, Size
from spix.geometry_utils import (
    Strategy,
    SwipeDirection,
    calculate_path_between_points,
    get_swipe_direction,
    position_for_swipe,
)
from spix.item_path import ItemPosition


def _on_line(point, start, end):
    lhs = (point.y - start.y) * (end.x - start.x)
    rhs = (end.y - start.y) * (point.x - start.x)
    return lhs == pytest.approx(rhs)


def test_swipe_direction_left_and_right():
    assert get_swipe_direction((Point(10.0, 0.0), Point(2.0, 0.0))) is SwipeDirection.LEFT
    assert get_swipe_direction((Point(2.0, 0.0), Point(10.0, 0.0))) is SwipeDirection.RIGHT


def test_equal_x_counts_as_right():
    assert get_swipe_direction((Point(5.0, 0.0), Point(5.0, 9.0))) is SwipeDirection.RIGHT


def test_rightward_path_runs_from_start_to_end():
    start, end = Point(0.0, 0.0), Point(10.0, 5.0)
    points = calculate_path_between_points((start, end), Strategy.LINEAR)
    assert points[0] == start
    assert points[-1] == end
    assert all(_on_line(p, start, end) for p in points)
    assert [p.x for p in points] == sorted(p.x for p in points)


def test_leftward_path_runs_from_start_to_end():
    start, end = Point(20.0, 4.0), Point(10.0, 14.0)
    points = calculate_path_between_points((start, end), Strategy.LINEAR)
    assert points[0] == start
    assert points[-1] == end
    assert all(_on_line(p, start, end) for p in points)
    assert [p.x for p in points] == sorted((p.x for p in points), reverse=True)


def test_path_steps_by_one_in_x():
    points = calculate_path_between_points((Point(3.0, 1.0), Point(9.0, 7.0)), Strategy.LINEAR)
    xs = [p.x for p in points]
    assert all(b - a == 1.0 for a, b in zip(xs, xs[1:]))
    assert len(points) == 7


def test_vertical_path_has_undefined_y():
    points = calculate_path_between_points((Point(5.0, 0.0), Point(5.0, 10.0)), Strategy.LINEAR)
    assert [p.x for p in points] == [5.0]
    assert math.isnan(points[0].y)


@pytest.mark.parametrize(
    "direction, expected",
    [
        (SwipeDirection.LEFT, Point(0.0, 15.0)),
        (SwipeDirection.RIGHT, Point(100.0, 15.0)),
        (SwipeDirection.UP, Point(50.0, 0.0)),
        (SwipeDirection.DOWN, Point(50.0, 30.0)),
    ],
)
def test_position_for_swipe_reaches_edge(direction, expected):
    position = ItemPosition("window/item", Point(0.5, 0.5))
    assert position_for_swipe(position, Size(100.0, 30.0), direction) == expected