"""Scene nodes with hitpoints and a velocity."""

from __future__ import annotations

from collections.abc import Sequence

import pygame

from squaregame.scene_node import SceneNode


class Entity(SceneNode):
    """A moving scene node with hitpoints."""

    def __init__(self, hitpoints: int) -> None:
        super().__init__()
        self.hitpoints = hitpoints
        self._velocity = pygame.Vector2()

    @property
    def velocity(self) -> pygame.Vector2:
        return self._velocity

    @velocity.setter
    def velocity(self, value: Sequence[float]) -> None:
        self._velocity = pygame.Vector2(value)

    def heal(self, points: int) -> None:
        self.hitpoints += points

    def damage(self, points: int) -> None:
        self.hitpoints -= points

    def destroy(self) -> None:
        self.hitpoints = 0

    def is_destroyed(self) -> bool:
        return self.hitpoints <= 0

    def accelerate(self, dx: float, dy: float) -> None:
        self._velocity += pygame.Vector2(dx, dy)

    def update_current(self, dt: float) -> None:
        self.move(self._velocity * dt)