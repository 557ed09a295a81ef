"""The playing field: a scene graph holding the player and the enemies."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

import pygame

from squaregame.command_queue import CommandQueue
from squaregame.data_tables import SquareType
from squaregame.resources import texture_holder
from squaregame.scene_node import SceneNode
from squaregame.square import Square
from squaregame.state import RectangleShape
from squaregame.utility import BLACK
from squaregame.window import View

BACKGROUND_SIZE = (10000.0, 10000.0)
WORLD_HEIGHT = 2000.0
TOTAL_ENEMIES = 100
ENEMY_SPREAD = 1000
BORDER_DISTANCE = 40.0
PLAYER_START_VELOCITY = (100.0, 100.0)


class Layer(IntEnum):
    BACKGROUND = 0
    GROUND = 1


@dataclass(frozen=True)
class SpawnPoint:
    square_type: SquareType
    x: float
    y: float


class World:
    """Owns the scene graph, the command queue and the camera view."""

    def __init__(self, target: Any, fonts: Any, rng: random.Random | None = None) -> None:
        self._target = target
        self._fonts = fonts
        self._textures = texture_holder()
        self._rng = rng if rng is not None else random.Random()
        self.scene_graph = SceneNode()
        self.scene_layers: list[SceneNode] = []
        self.command_queue = CommandQueue()
        self.background_shape = RectangleShape(BACKGROUND_SIZE)
        width, height = target.size
        self.world_view = View((0.0, 0.0), (float(width), float(height)))
        self.world_bounds = (0.0, 0.0, self.world_view.size.x, WORLD_HEIGHT)
        self.spawn_position = pygame.Vector2(self.background_shape.size) / 2.0
        self.total_enemies = TOTAL_ENEMIES
        self.enemy_spawn_points: list[SpawnPoint] = []
        self.player: Square | None = None

        self.load_textures()
        self.build_scene()
        self.world_view.center = self.spawn_position

    def update(self, dt: float) -> None:
        self.player.velocity = (0.0, 0.0)
        while not self.command_queue.is_empty():
            self.scene_graph.on_command(self.command_queue.pop(), dt)
        self.adapt_player_velocity()
        self._spawn_enemies()
        self.scene_graph.update(dt)
        self.world_view.center = self.player.position

    def draw(self) -> None:
        self._target.set_view(self.world_view)
        self._target.draw(self.background_shape)
        self._target.draw(self.scene_graph)

    def load_textures(self) -> None:
        """Squares are drawn as coloured quads, so no texture files are read."""

    def build_scene(self) -> None:
        self.background_shape.position = (0.0, 0.0)
        self.background_shape.fill_color = BLACK

        for _ in Layer:
            self.scene_layers.append(self.scene_graph.attach_child(SceneNode()))

        player = Square(SquareType.SELF, self._textures, self._fonts, True)
        player.position = self.spawn_position
        player.velocity = PLAYER_START_VELOCITY
        self.player = player
        self.scene_layers[Layer.GROUND].attach_child(player)

        self._add_enemies()

    def _add_enemy(self, square_type: SquareType, rel_x: float, rel_y: float) -> None:
        self.enemy_spawn_points.append(
            SpawnPoint(
                square_type,
                self.spawn_position.x + rel_x,
                self.spawn_position.y + rel_y,
            )
        )

    def _add_enemies(self) -> None:
        for _ in range(1, self.total_enemies):
            offset_x = float(self._rng.randrange(2 * ENEMY_SPREAD) - ENEMY_SPREAD)
            offset_y = float(self._rng.randrange(2 * ENEMY_SPREAD) - ENEMY_SPREAD)
            self._add_enemy(SquareType.ENEMY0, offset_x, offset_y)

    def _spawn_enemies(self) -> None:
        ground = self.scene_layers[Layer.GROUND]
        while self.enemy_spawn_points:
            point = self.enemy_spawn_points.pop()
            enemy = Square(point.square_type, self._textures, self._fonts)
            enemy.position = (point.x, point.y)
            ground.attach_child(enemy)

    def adapt_player_position(self) -> None:
        """Keep the player inside the view, away from its border."""
        left, top = self.world_view.center - self.world_view.size / 2.0
        width, height = self.world_view.size
        x, y = self.player.position
        x = min(max(x, left + BORDER_DISTANCE), left + width - BORDER_DISTANCE)
        y = min(max(y, top + BORDER_DISTANCE), top + height - BORDER_DISTANCE)
        self.player.position = (x, y)

    def adapt_player_velocity(self) -> None:
        """Scale diagonal movement down so it is as fast as straight movement."""
        velocity = self.player.velocity
        if velocity.x != 0.0 and velocity.y != 0.0:
            self.player.velocity = velocity / math.sqrt(2.0)
        self.player.accelerate(0.0, 0.0)