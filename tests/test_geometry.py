import dataclasses

import pytest

from spix.geometry import Point, Rect, Size


def test_size_defaults_to_zero():
    size = Size()
    assert (size.width, size.height) == (0.0, 0.0)


def test_point_defaults_to_zero():
    point = Point()
    assert (point.x, point.y) == (0.0, 0.0)


def test_point_keeps_coordinates():
    point = Point(3.5, -2.0)
    assert point.x == 3.5
    assert point.y == -2.0


def test_rect_defaults_to_empty_rect_at_origin():
    rect = Rect()
    assert rect.top_left == Point(0.0, 0.0)
    assert rect.size == Size(0.0, 0.0)


def test_rect_from_xywh_matches_explicit_construction():
    rect = Rect.from_xywh(1.0, 2.0, 30.0, 40.0)
    assert rect == Rect(Point(1.0, 2.0), Size(30.0, 40.0))
    assert rect.top_left.x == 1.0
    assert rect.size.height == 40.0


def test_values_compare_by_content():
    assert Size(100.0, 30.0) == Size(100.0, 30.0)
    assert Point(1.0, 2.0) != Point(2.0, 1.0)


def test_values_are_immutable():
    point = Point(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        point.x = 5.0  # type: ignore[misc]
    assert point.x == 1.0
    assert point == Point(1.0, 2.0)