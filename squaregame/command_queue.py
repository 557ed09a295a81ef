"""First-in first-out queue of commands."""

from __future__ import annotations

from collections import deque

from squaregame.command import Command


class CommandQueue:
    def __init__(self) -> None:
        self._queue: deque[Command] = deque()

    def push(self, command: Command) -> None:
        self._queue.append(command)

    def pop(self) -> Command:
        """Remove and return the oldest command; raise IndexError if empty."""
        if not self._queue:
            raise IndexError("pop from an empty command queue")
        return self._queue.popleft()

    def is_empty(self) -> bool:
        return not self._queue

    def __len__(self) -> int:
        return len(self._queue)