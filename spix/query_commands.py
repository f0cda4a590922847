"""Commands that read or change item state, and commands that control the run."""

from __future__ import annotations

import time
from collections.abc import Iterable
from concurrent.futures import Future
from datetime import timedelta
from typing import Any

from spix.executer import Command, CommandEnvironment
from spix.geometry import Rect
from spix.item_path import ItemPath


class InvocationError(Exception):
    """Raised by an item when a method cannot be invoked on it."""


def _as_path(path: str | ItemPath) -> ItemPath:
    return path if isinstance(path, ItemPath) else ItemPath(path)


def _as_seconds(wait_time: timedelta | float) -> float:
    if isinstance(wait_time, timedelta):
        return wait_time.total_seconds()
    return wait_time / 1000.0


class ExistsAndVisible(Command):
    """Resolve ``future`` to whether the item exists and is visible."""

    def __init__(self, path: str | ItemPath, future: Future[bool] | None = None) -> None:
        self.path = _as_path(path)
        self.future: Future[bool] = future if future is not None else Future()

    def execute(self, env: CommandEnvironment) -> None:
        item = env.scene.item_at_path(self.path)
        self.future.set_result(bool(item.visible) if item is not None else False)


class GetBoundingBox(Command):
    """Resolve ``future`` to the item's bounds in screen coordinates."""

    def __init__(self, path: str | ItemPath, future: Future[Rect] | None = None) -> None:
        self.path = _as_path(path)
        self.future: Future[Rect] = future if future is not None else Future()

    def execute(self, env: CommandEnvironment) -> None:
        item = env.scene.item_at_path(self.path)
        if item is None:
            self.future.set_result(Rect.from_xywh(0.0, 0.0, 0.0, 0.0))
            env.state.report_error(f"GetBoundingBox: Item not found: {self.path}")
            return
        self.future.set_result(item.bounds)


class GetProperty(Command):
    """Resolve ``future`` to a property of the item as a string."""

    def __init__(
        self, path: str | ItemPath, property_name: str, future: Future[str] | None = None
    ) -> None:
        self.path = _as_path(path)
        self.property_name = property_name
        self.future: Future[str] = future if future is not None else Future()

    def execute(self, env: CommandEnvironment) -> None:
        item = env.scene.item_at_path(self.path)
        if item is None:
            self.future.set_result("")
            env.state.report_error(f"GetProperty: Item not found: {self.path}")
            return
        self.future.set_result(item.string_property(self.property_name))


class SetProperty(Command):
    """Set a property of the item from a string value."""

    def __init__(self, path: str | ItemPath, property_name: str, property_value: str) -> None:
        self.path = _as_path(path)
        self.property_name = property_name
        self.property_value = property_value

    def execute(self, env: CommandEnvironment) -> None:
        item = env.scene.item_at_path(self.path)
        if item is None:
            env.state.report_error(f"SetProperty: Item not found: {self.path}")
            return
        item.set_string_property(self.property_name, self.property_value)


class GetTestStatus(Command):
    """Resolve ``future`` to the errors recorded so far."""

    def __init__(self, errors_only: bool = True, future: Future[list[str]] | None = None) -> None:
        self.errors_only = errors_only
        self.future: Future[list[str]] = future if future is not None else Future()

    def execute(self, env: CommandEnvironment) -> None:
        self.future.set_result(env.state.errors)


class InvokeMethod(Command):
    """Invoke a method on the item and resolve ``future`` to its return value.

    If the item is missing or the invocation fails, an error is recorded
    and the future resolves to None.
    """

    def __init__(
        self,
        path: str | ItemPath,
        method: str,
        args: Iterable[Any] = (),
        future: Future[Any] | None = None,
    ) -> None:
        self.path = _as_path(path)
        self.method = method
        self.args = list(args)
        self.future: Future[Any] = future if future is not None else Future()

    def execute(self, env: CommandEnvironment) -> None:
        item = env.scene.item_at_path(self.path)
        if item is None:
            env.state.report_error(f"InvokeMethod: Item not found: {self.path}")
            self.future.set_result(None)
            return
        try:
            result = item.invoke_method(self.method, self.args)
        except InvocationError:
            env.state.report_error(f"InvokeMethod: Failed to invoke method: {self.method}")
            result = None
        self.future.set_result(result)


class Quit(Command):
    """Ask the application to quit."""

    def execute(self, env: CommandEnvironment) -> None:
        env.scene.events.quit()


class Screenshot(Command):
    """Save an image of the item to ``file_path``."""

    def __init__(self, path: str | ItemPath, file_path: str) -> None:
        self.path = _as_path(path)
        self.file_path = file_path

    def execute(self, env: CommandEnvironment) -> None:
        env.scene.take_screenshot(self.path, self.file_path)


class Wait(Command):
    """Hold the queue for a while.

    ``wait_time`` is a timedelta or a number of milliseconds. The clock
    starts the first time the executer asks whether the command is ready.
    """

    def __init__(self, wait_time: timedelta | float) -> None:
        self.wait_seconds = _as_seconds(wait_time)
        self._start: float | None = None

    def execute(self, env: CommandEnvironment) -> None:
        """Nothing to do once the time has passed."""

    def can_execute_now(self) -> bool:
        if self._start is None:
            self._start = time.monotonic()
            return False
        return time.monotonic() - self._start >= self.wait_seconds