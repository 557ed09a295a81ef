"""The coloured squares that populate the world."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

import pygame

from squaregame.command import Category
from squaregame.data_tables import SquareType, initialize_entity_data
from squaregame.entity import Entity
from squaregame.text_node import TextNode
from squaregame.utility import RED, YELLOW, Transform

_DATA_TABLE = initialize_entity_data()

_HEALTH_DISPLAY_OFFSET = (7.0, 15.0)


class Square(Entity):
    """A square entity; the player's square turns red while moving."""

    def __init__(
        self,
        square_type: SquareType,
        textures: Any,
        fonts: Any,
        is_player: bool = False,
    ) -> None:
        self.square_type = SquareType(square_type)
        data = _DATA_TABLE[self.square_type]
        super().__init__(data.hitpoints)
        self.vertices = list(data.quad)
        self.is_player = is_player
        self._health_display = self.attach_child(TextNode(fonts, ""))

    @property
    def health_display(self) -> TextNode:
        return self._health_display

    def get_category(self) -> int:
        if self.square_type is SquareType.SELF:
            return Category.PLAYER_ENTITY
        if self.square_type is SquareType.ENEMY0:
            return Category.ENEMY_ENTITY
        return Category.NONE

    def update_current(self, dt: float) -> None:
        super().update_current(dt)
        if not self.is_player:
            return
        color = RED if (self.velocity.x or self.velocity.y) else YELLOW
        self.vertices = [replace(vertex, color=color) for vertex in self.vertices]
        self.update_texts()

    def draw_current(self, target: Any, transform: Transform) -> None:
        for start in (0, 3):
            triangle = self.vertices[start:start + 3]
            points = [transform.transform_point(v.position) for v in triangle]
            pygame.draw.polygon(target, triangle[0].color, points)

    def update_texts(self) -> None:
        self._health_display.string = f"{self.hitpoints}HP"
        self._health_display.position = _HEALTH_DISPLAY_OFFSET