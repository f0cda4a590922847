"""Command queue that runs commands on the thread that owns the scene."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

CommandError = str


class ExecuterState:
    """Errors collected while commands were executed."""

    def __init__(self) -> None:
        self._errors: list[CommandError] = []

    def report_error(self, error: CommandError) -> None:
        """Record an error."""
        self._errors.append(error)

    def has_errors(self) -> bool:
        """Return True if any error was recorded."""
        return bool(self._errors)

    @property
    def errors(self) -> list[CommandError]:
        """A copy of the recorded errors, oldest first."""
        return list(self._errors)

    def errors_description(self) -> str:
        """All errors joined by newlines."""
        description = ""
        for error in self._errors:
            if description:
                description += "\n"
            description += error
        return description


@dataclass
class CommandEnvironment:
    """What a command gets to work with: the scene and the executer state."""

    scene: Any
    state: ExecuterState


class Command(ABC):
    """A unit of work that is run against a scene."""

    @abstractmethod
    def execute(self, env: CommandEnvironment) -> None:
        """Run the command."""

    def can_execute_now(self) -> bool:
        """Return True when the command is ready to run."""
        return True


class CustomCmd(Command):
    """A command built from two callables."""

    def __init__(
        self,
        exec_function: Callable[[CommandEnvironment], None],
        can_exec_function: Callable[[], bool],
    ) -> None:
        self._exec = exec_function
        self._can_exec = can_exec_function

    def execute(self, env: CommandEnvironment) -> None:
        self._exec(env)

    def can_execute_now(self) -> bool:
        return self._can_exec()


class CommandExecuter:
    """Queue of commands processed on the thread that created the executer.

    Commands may be enqueued from any thread; everything else has to be
    called from the owning thread.
    """

    def __init__(self) -> None:
        self._owner_thread = threading.get_ident()
        self._lock = threading.Lock()
        self._queue: deque[Command] = deque()
        self._state = ExecuterState()

    def _check_owner(self) -> None:
        if threading.get_ident() != self._owner_thread:
            raise RuntimeError("CommandExecuter must be used from the thread that created it")

    @property
    def state(self) -> ExecuterState:
        """The state shared by all executed commands."""
        self._check_owner()
        return self._state

    def enqueue_command(self, command: Command) -> None:
        """Add a command to the end of the queue; safe from any thread."""
        with self._lock:
            self._queue.append(command)

    def process_commands(self, scene: Any) -> None:
        """Run queued commands in order until one is not ready yet."""
        self._check_owner()

        if not self._lock.acquire(blocking=False):
            return

        env = CommandEnvironment(scene, self._state)
        try:
            while self._queue:
                if not self._queue[0].can_execute_now():
                    break
                command = self._queue.popleft()

                self._lock.release()
                try:
                    command.execute(env)
                finally:
                    locked = self._lock.acquire(blocking=False)
                if not locked:
                    return
        finally:
            if self._lock.locked():
                self._lock.release()