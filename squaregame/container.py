"""Widget that groups components and moves keyboard selection among them."""

from __future__ import annotations

from typing import Any

import pygame

from squaregame.component import Component
from squaregame.utility import IDENTITY, Transform


class Container(Component):
    """Holds components; Up/Down move the selection, Enter activates it."""

    def __init__(self) -> None:
        super().__init__()
        self._children: list[Component] = []
        self._selected_child: int | None = None

    @property
    def children(self) -> tuple[Component, ...]:
        return tuple(self._children)

    def pack(self, component: Component) -> None:
        self._children.append(component)
        if not self.has_selection() and component.is_selectable():
            self.select(len(self._children) - 1)

    def is_selectable(self) -> bool:
        return False

    def handle_event(self, event: Any) -> None:
        if self.has_selection() and self._children[self._selected_child].is_active:
            self._children[self._selected_child].handle_event(event)
            return
        if event.type != pygame.KEYUP:
            return
        if event.key == pygame.K_UP:
            self.select_previous()
        elif event.key == pygame.K_DOWN:
            self.select_next()
        elif event.key == pygame.K_RETURN and self.has_selection():
            self._children[self._selected_child].activate()

    def draw(self, target: Any, transform: Transform = IDENTITY) -> None:
        combined = transform.combine(self.get_transform())
        for child in self._children:
            child.draw(target, combined)

    def has_selection(self) -> bool:
        return self._selected_child is not None

    def select(self, index: int) -> None:
        child = self._children[index]
        if not child.is_selectable():
            return
        if self.has_selection():
            self._children[self._selected_child].deselect()
        child.select()
        self._selected_child = index

    def _step(self, step: int) -> None:
        if not self.has_selection():
            return
        count = len(self._children)
        index = (self._selected_child + step) % count
        while not self._children[index].is_selectable():
            index = (index + step) % count
        self.select(index)

    def select_next(self) -> None:
        self._step(1)

    def select_previous(self) -> None:
        self._step(-1)