"""Geometry, text and layout helpers shared by the game."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import pygame

Color = tuple[int, int, int, int]

GAME_RESOLUTION = (640.0, 360.0)

WHITE: Color = (255, 255, 255, 255)
BLACK: Color = (0, 0, 0, 255)
RED: Color = (255, 0, 0, 255)
YELLOW: Color = (255, 255, 0, 255)
TRANSPARENT: Color = (0, 0, 0, 0)


@dataclass(frozen=True)
class Transform:
    """A 2D affine transform: x' = a*x + b*y + c, y' = d*x + e*y + f."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0
    e: float = 1.0
    f: float = 0.0

    def combine(self, other: Transform) -> Transform:
        """Return the transform that applies ``other`` first, then ``self``."""
        return Transform(
            self.a * other.a + self.b * other.d,
            self.a * other.b + self.b * other.e,
            self.a * other.c + self.b * other.f + self.c,
            self.d * other.a + self.e * other.d,
            self.d * other.b + self.e * other.e,
            self.d * other.c + self.e * other.f + self.f,
        )

    def transform_point(self, point: Sequence[float]) -> pygame.Vector2:
        x, y = point
        return pygame.Vector2(
            self.a * x + self.b * y + self.c,
            self.d * x + self.e * y + self.f,
        )

    def translate(self, x: float, y: float) -> Transform:
        return self.combine(Transform(c=x, f=y))

    def scale(self, sx: float, sy: float) -> Transform:
        return self.combine(Transform(a=sx, e=sy))

    def rotate(self, degrees: float) -> Transform:
        angle = math.radians(degrees)
        cos, sin = math.cos(angle), math.sin(angle)
        return self.combine(Transform(cos, -sin, 0.0, sin, cos, 0.0))


IDENTITY = Transform()


class Transformable:
    """Something with a position, origin, scale and rotation."""

    def __init__(self) -> None:
        self._position = pygame.Vector2()
        self._origin = pygame.Vector2()
        self._scale = pygame.Vector2(1.0, 1.0)
        self.rotation = 0.0

    @property
    def position(self) -> pygame.Vector2:
        return self._position

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        self._position = pygame.Vector2(value)

    @property
    def origin(self) -> pygame.Vector2:
        return self._origin

    @origin.setter
    def origin(self, value: Sequence[float]) -> None:
        self._origin = pygame.Vector2(value)

    @property
    def scale(self) -> pygame.Vector2:
        return self._scale

    @scale.setter
    def scale(self, value: Sequence[float]) -> None:
        self._scale = pygame.Vector2(value)

    def move(self, offset: Sequence[float]) -> None:
        self._position += pygame.Vector2(offset)

    def get_transform(self) -> Transform:
        return (
            IDENTITY.translate(self._position.x, self._position.y)
            .rotate(self.rotation)
            .scale(self._scale.x, self._scale.y)
            .translate(-self._origin.x, -self._origin.y)
        )


class Text(Transformable):
    """A possibly multi-line string drawn with a font at a character size."""

    def __init__(self, font: Any, string: str = "", character_size: int = 30) -> None:
        super().__init__()
        self.font = font
        self.string = string
        self.character_size = character_size
        self.fill_color: Color = WHITE

    def _face(self) -> Any:
        return self.font.sized(self.character_size)

    def local_bounds(self) -> pygame.Rect:
        if self.font is None or not self.string:
            return pygame.Rect(0, 0, 0, 0)
        face = self._face()
        sizes = [face.size(line) for line in self.string.split("\n")]
        width = max(w for w, _ in sizes)
        height = sum(h for _, h in sizes)
        return pygame.Rect(0, 0, width, height)

    def draw(self, target: Any, transform: Transform = IDENTITY) -> None:
        if self.font is None or not self.string:
            return
        face = self._face()
        x, y = transform.combine(self.get_transform()).transform_point((0.0, 0.0))
        for line in self.string.split("\n"):
            surface = face.render(line, True, self.fill_color)
            target.blit(surface, (round(x), round(y)))
            y += surface.get_height()


def center_origin(item: Any) -> None:
    """Put the origin of ``item`` at the centre of its local bounds."""
    bounds = item.local_bounds()
    item.origin = (math.floor(bounds.width / 2), math.floor(bounds.height / 2))


def p2px(percent: float, resolution: Sequence[int]) -> float:
    """Convert a percentage of the horizontal resolution to pixels."""
    return float(math.floor(float(resolution[0]) * (percent / 100.0)))


def p2py(percent: float, resolution: Sequence[int]) -> float:
    """Convert a percentage of the vertical resolution to pixels."""
    return float(math.floor(float(resolution[1]) * (percent / 100.0)))


def calc_char_size(resolution: Sequence[int], mod: int = 60) -> int:
    """Character size that scales with the resolution."""
    return (int(resolution[0]) + int(resolution[1])) // mod