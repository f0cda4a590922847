"""Commands that send mouse, touch and keyboard input to items in a scene."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Protocol

from spix.executer import Command, CommandEnvironment
from spix.geometry import Point, Size
from spix.geometry_utils import (
    Strategy,
    SwipeDirection,
    calculate_path_between_points,
    position_for_swipe,
)
from spix.item_path import ItemPath, ItemPosition
from spix.pasteboard import PasteboardContent

_log = logging.getLogger(__name__)

_LEFT_BUTTON = 1


class _Item(Protocol):
    @property
    def size(self) -> Size: ...


def _as_path(path: str | ItemPath) -> ItemPath:
    return path if isinstance(path, ItemPath) else ItemPath(path)


def _as_position(position: str | ItemPath | ItemPosition) -> ItemPosition:
    if isinstance(position, ItemPosition):
        return position
    return ItemPosition(_as_path(position))


def _midpoint(size: Size) -> Point:
    return Point(size.width / 2.0, size.height / 2.0)


class ClickOnItem(Command):
    """Press and release a mouse button at a position on an item."""

    def __init__(self, position: str | ItemPath | ItemPosition, mouse_button: Any = _LEFT_BUTTON) -> None:
        self.position = _as_position(position)
        self.mouse_button = mouse_button

    def execute(self, env: CommandEnvironment) -> None:
        path = self.position.item_path
        item = env.scene.item_at_path(path)
        if item is None:
            env.state.report_error(f"ClickOnItem: Item not found: {path}")
            return

        point = self.position.position_for_item_size(item.size)
        env.scene.events.mouse_down(item, point, self.mouse_button)
        env.scene.events.mouse_up(item, point, self.mouse_button)


class DragBegin(Command):
    """Press a mouse button in the middle of an item and start moving."""

    def __init__(self, path: str | ItemPath, mouse_button: Any = _LEFT_BUTTON) -> None:
        self.path = _as_path(path)
        self.mouse_button = mouse_button

    def execute(self, env: CommandEnvironment) -> None:
        item = env.scene.item_at_path(self.path)
        if item is None:
            env.state.report_error(f"DragBegin: Item not found: {self.path}")
            return

        mid = _midpoint(item.size)
        env.scene.events.mouse_down(item, mid, self.mouse_button)
        env.scene.events.mouse_move(item, mid)


class DragEnd(Command):
    """Move to the middle of an item and release the mouse button there."""

    def __init__(self, path: str | ItemPath, mouse_button: Any = _LEFT_BUTTON) -> None:
        self.path = _as_path(path)
        self.mouse_button = mouse_button

    def execute(self, env: CommandEnvironment) -> None:
        item = env.scene.item_at_path(self.path)
        if item is None:
            env.state.report_error(f"DragEnd: Item not found: {self.path}")
            return

        mid = _midpoint(item.size)
        env.scene.events.mouse_move(item, mid)
        env.scene.events.mouse_up(item, mid, self.mouse_button)


class DropFromExt(Command):
    """Drop content coming from outside the application onto an item."""

    def __init__(self, path: str | ItemPath, content: PasteboardContent) -> None:
        self.path = _as_path(path)
        self.content = content

    def execute(self, env: CommandEnvironment) -> None:
        item = env.scene.item_at_path(self.path)
        if item is None:
            env.state.report_error(f"DropFromExt: Item not found: {self.path}")
            return

        env.scene.events.ext_mouse_drop(item, _midpoint(item.size), self.content)


class Tap(Command):
    """Touch a position on an item, holding for ``duration`` milliseconds."""

    def __init__(self, position: str | ItemPath | ItemPosition, duration: int = 0) -> None:
        self.position = _as_position(position)
        self.duration = duration

    def execute(self, env: CommandEnvironment) -> None:
        path = self.position.item_path
        _log.debug("Tap: searching item at %s", path)
        item = env.scene.item_at_path(path)
        if item is None:
            env.state.report_error(f"Tap: Item not found: {path}")
            return

        point = self.position.position_for_item_size(item.size)
        _log.debug("Tap: touching at (%s, %s)", point.x, point.y)
        env.scene.events.tap(item, point, self.duration)


class Swipe(Command):
    """Swipe from a position on an item towards one of its edges."""

    def __init__(self, position: str | ItemPath | ItemPosition, direction: SwipeDirection) -> None:
        self.position = _as_position(position)
        self.direction = direction

    def execute(self, env: CommandEnvironment) -> None:
        path = self.position.item_path
        item = env.scene.item_at_path(path)
        if item is None:
            env.state.report_error(f"Swipe: Item not found: {path}")
            return

        size = item.size
        start = self.position.position_for_item_size(size)
        end = position_for_swipe(self.position, size, self.direction)
        _log.debug("Swipe: path from (%s, %s) to (%s, %s)", start.x, start.y, end.x, end.y)
        points = calculate_path_between_points((start, end), Strategy.LINEAR)
        env.scene.events.swipe(item, start, end, points)


class Pinch(Command):
    """Move two touch points along straight lines over an item.

    Exactly two (start, end) pairs are required; otherwise nothing happens.
    """

    def __init__(self, path: str | ItemPath, touchpoints: Iterable[tuple[Point, Point]]) -> None:
        self.path = _as_path(path)
        self.touchpoints = [tuple(pair) for pair in touchpoints]

    def execute(self, env: CommandEnvironment) -> None:
        if len(self.touchpoints) != 2:
            return
        paths = [calculate_path_between_points(pair, Strategy.LINEAR) for pair in self.touchpoints]
        item = env.scene.item_at_path(self.path)
        env.scene.events.pinch(item, paths)


class Rotate(Command):
    """Rotate an item by the given number of degrees with a gesture."""

    def __init__(self, path: str | ItemPath, degree: int) -> None:
        self.path = _as_path(path)
        self.degree = degree

    def execute(self, env: CommandEnvironment) -> None:
        item = env.scene.item_at_path(self.path)
        env.scene.events.rotate(item, self.degree)


class EnterKey(Command):
    """Press and release a key on an item."""

    def __init__(self, path: str | ItemPath, key_code: int, modifiers: int = 0) -> None:
        self.path = _as_path(path)
        self.key_code = key_code
        self.modifiers = modifiers

    def execute(self, env: CommandEnvironment) -> None:
        item = env.scene.item_at_path(self.path)
        if item is None:
            env.state.report_error(f"EnterKey: Item not found: {self.path}")
            return

        env.scene.events.key_press(item, self.key_code, self.modifiers)
        env.scene.events.key_release(item, self.key_code, self.modifiers)


class InputText(Command):
    """Type a string into an item."""

    def __init__(self, path: str | ItemPath, text: str) -> None:
        self.path = _as_path(path)
        self.text = text

    def execute(self, env: CommandEnvironment) -> None:
        item = env.scene.item_at_path(self.path)
        if item is None:
            env.state.report_error(f"InputText: Item not found: {self.path}")
            return

        env.scene.events.string_input(item, self.text)