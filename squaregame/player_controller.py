"""Keyboard bindings that turn input into commands for the player."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from enum import Enum, auto
from typing import Any

import pygame

from squaregame.command import Category, Command, derived_action
from squaregame.command_queue import CommandQueue
from squaregame.square import Square

PLAYER_SPEED = 200.0


class Action(Enum):
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    MOVE_UP = auto()
    MOVE_DOWN = auto()


_REALTIME_ACTIONS = frozenset(
    {Action.MOVE_LEFT, Action.MOVE_RIGHT, Action.MOVE_UP, Action.MOVE_DOWN}
)


def _mover(vx: float, vy: float) -> Callable[[Square, float], None]:
    def move(square: Square, dt: float) -> None:
        square.accelerate(vx, vy)

    return move


class PlayerController:
    """Maps keys to actions and actions to player commands."""

    def __init__(self) -> None:
        self._key_binding: dict[int, Action] = {
            pygame.K_LEFT: Action.MOVE_LEFT,
            pygame.K_RIGHT: Action.MOVE_RIGHT,
            pygame.K_UP: Action.MOVE_UP,
            pygame.K_DOWN: Action.MOVE_DOWN,
        }
        velocities = {
            Action.MOVE_LEFT: (-PLAYER_SPEED, 0.0),
            Action.MOVE_RIGHT: (PLAYER_SPEED, 0.0),
            Action.MOVE_UP: (0.0, -PLAYER_SPEED),
            Action.MOVE_DOWN: (0.0, PLAYER_SPEED),
        }
        self._action_binding: dict[Action, Command] = {
            action: Command(
                action=derived_action(Square, _mover(vx, vy)),
                category=Category.PLAYER_ENTITY,
            )
            for action, (vx, vy) in velocities.items()
        }

    def _bindings(self) -> list[tuple[int, Action]]:
        return sorted(self._key_binding.items(), key=lambda item: item[0])

    def handle_event(self, event: Any, commands: CommandQueue) -> None:
        """Push the command of a pressed key whose action is not realtime."""
        if event.type != pygame.KEYDOWN:
            return
        action = self._key_binding.get(event.key)
        if action is not None and not self.is_realtime_action(action):
            commands.push(replace(self._action_binding[action]))

    def handle_realtime_input(self, commands: CommandQueue, pressed: Any = None) -> None:
        """Push commands for every held key bound to a realtime action."""
        if pressed is None:
            pressed = pygame.key.get_pressed()
        for key, action in self._bindings():
            if pressed[key] and self.is_realtime_action(action):
                commands.push(replace(self._action_binding[action]))

    def assign_key(self, action: Action, key: int) -> None:
        self._key_binding = {
            bound_key: bound_action
            for bound_key, bound_action in self._key_binding.items()
            if bound_action is not action
        }
        self._key_binding[key] = action

    def get_assigned_key(self, action: Action) -> int:
        for key, bound_action in self._bindings():
            if bound_action is action:
                return key
        return pygame.K_UNKNOWN

    @staticmethod
    def is_realtime_action(action: Action) -> bool:
        return action in _REALTIME_ACTIONS