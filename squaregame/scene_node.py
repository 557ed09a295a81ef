"""Tree of transformable nodes that update, draw and receive commands."""

from __future__ import annotations

import pygame

from squaregame.command import Category, Command
from squaregame.utility import IDENTITY, Transform, Transformable


class SceneNode(Transformable):
    """A node in the scene graph; owns its children."""

    def __init__(self) -> None:
        super().__init__()
        self._children: list[SceneNode] = []
        self.parent: SceneNode | None = None

    @property
    def children(self) -> tuple[SceneNode, ...]:
        return tuple(self._children)

    def attach_child(self, child: SceneNode) -> SceneNode:
        child.parent = self
        self._children.append(child)
        return child

    def detach_child(self, node: SceneNode) -> SceneNode:
        if not any(child is node for child in self._children):
            raise ValueError("node is not a child of this scene node")
        self._children = [child for child in self._children if child is not node]
        node.parent = None
        return node

    def update(self, dt: float) -> None:
        self.update_current(dt)
        for child in self._children:
            child.update(dt)

    def update_current(self, dt: float) -> None:
        """Update this node alone; plain nodes have no behaviour of their own."""

    def draw(self, target: object, transform: Transform = IDENTITY) -> None:
        combined = transform.combine(self.get_transform())
        self.draw_current(target, combined)
        for child in self._children:
            child.draw(target, combined)

    def draw_current(self, target: object, transform: Transform) -> None:
        """Draw this node alone; plain nodes have nothing to show."""

    def get_world_position(self) -> pygame.Vector2:
        return self.get_world_transform().transform_point((0.0, 0.0))

    def get_world_transform(self) -> Transform:
        transform = IDENTITY
        node = self
        while node is not None:
            transform = node.get_transform().combine(transform)
            node = node.parent
        return transform

    def on_command(self, command: Command, dt: float) -> None:
        if command.category & self.get_category():
            command.action(self, dt)
        for child in self._children:
            child.on_command(command, dt)

    def get_category(self) -> int:
        return Category.SCENE