"""Static data describing each kind of square."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from squaregame.utility import RED, WHITE, YELLOW, Color

QUAD_VERTEX_COUNT = 6

_QUAD_CORNERS = (
    (0.0, 0.0),
    (16.0, 0.0),
    (16.0, 16.0),
    (0.0, 16.0),
    (0.0, 0.0),
    (16.0, 16.0),
)


class SquareType(IntEnum):
    SELF = 0
    ENEMY0 = 1


@dataclass(frozen=True)
class Vertex:
    position: tuple[float, float] = (0.0, 0.0)
    color: Color = WHITE


@dataclass
class EntityData:
    """Hitpoints, speed and two-triangle shape of one square kind."""

    hitpoints: int = 0
    speed: float = 0.0
    quad: list[Vertex] = field(
        default_factory=lambda: [Vertex() for _ in range(QUAD_VERTEX_COUNT)]
    )


def _square(color: Color) -> EntityData:
    return EntityData(
        hitpoints=100,
        speed=200.0,
        quad=[Vertex(corner, color) for corner in _QUAD_CORNERS],
    )


def initialize_entity_data() -> dict[SquareType, EntityData]:
    return {
        SquareType.SELF: _square(YELLOW),
        SquareType.ENEMY0: _square(RED),
    }