"""Commands dispatched to scene nodes by category."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntFlag
from typing import Any


class Category(IntFlag):
    """Scene node categories used to address commands."""

    NONE = 0
    SCENE = 1 << 0
    PLAYER_ENTITY = 1 << 1
    ALLIED_ENTITY = 1 << 2
    ENEMY_ENTITY = 1 << 3


NodeAction = Callable[[Any, float], None]


@dataclass
class Command:
    """An action to run on every node whose category matches."""

    action: NodeAction | None = None
    category: int = Category.NONE


def derived_action(node_type: type, fn: Callable[[Any, float], None]) -> NodeAction:
    """Wrap ``fn`` so it only accepts nodes of ``node_type``."""

    def action(node: Any, dt: float) -> None:
        if not isinstance(node, node_type):
            raise TypeError(
                f"command expects {node_type.__name__}, got {type(node).__name__}"
            )
        fn(node, dt)

    return action