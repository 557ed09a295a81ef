"""Screens of the game, the context they share and a filled rectangle shape."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Any

import pygame

from squaregame.utility import IDENTITY, WHITE, Color, Transform, Transformable

if TYPE_CHECKING:
    from squaregame.state_stack import StateStack


class StateID(IntEnum):
    NONE = 0
    TITLE = 1
    MENU = 2
    SETTINGS = 3
    GAME = 4
    LOADING = 5
    PAUSE = 6


@dataclass
class Context:
    """Objects shared by every state."""

    window: Any
    textures: Any
    fonts: Any
    player_controller: Any


class RectangleShape(Transformable):
    """An axis-aligned rectangle filled with one colour."""

    def __init__(
        self, size: Sequence[float] = (0.0, 0.0), fill_color: Color = WHITE
    ) -> None:
        super().__init__()
        self.size = size
        self.fill_color = fill_color

    @property
    def size(self) -> pygame.Vector2:
        return self._size

    @size.setter
    def size(self, value: Sequence[float]) -> None:
        self._size = pygame.Vector2(value)

    def draw(self, target: Any, transform: Transform = IDENTITY) -> None:
        combined = transform.combine(self.get_transform())
        width, height = self._size
        points = [
            combined.transform_point(corner)
            for corner in ((0.0, 0.0), (width, 0.0), (width, height), (0.0, height))
        ]
        alpha = self.fill_color[3] if len(self.fill_color) > 3 else 255
        if alpha <= 0:
            return
        if alpha >= 255:
            pygame.draw.polygon(target, self.fill_color, points)
            return
        overlay = pygame.Surface(target.get_size(), pygame.SRCALPHA)
        pygame.draw.polygon(overlay, self.fill_color, points)
        target.blit(overlay, (0, 0))


class State(ABC):
    """One screen of the game, living on a state stack."""

    def __init__(self, stack: StateStack, context: Context) -> None:
        self._stack = stack
        self._context = context

    @property
    def context(self) -> Context:
        return self._context

    @abstractmethod
    def draw(self) -> None:
        """Draw the state into the context's window."""

    @abstractmethod
    def update(self, dt: float) -> bool:
        """Advance by ``dt`` seconds; return whether lower states update too."""

    @abstractmethod
    def handle_event(self, event: Any) -> bool:
        """React to ``event``; return whether lower states see it too."""

    def request_stack_push(self, state_id: StateID) -> None:
        self._stack.push_state(state_id)

    def request_stack_pop(self) -> None:
        self._stack.pop_state()

    def request_state_clear(self) -> None:
        self._stack.clear_states()