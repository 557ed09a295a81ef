"""Clickable text button."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from squaregame.component import Component
from squaregame.resources import Fonts
from squaregame.utility import IDENTITY, Color, Text, Transform, center_origin

IDLE_COLOR: Color = (200, 200, 200, 200)
SELECTED_COLOR: Color = (255, 255, 255, 255)
PRESSED_COLOR: Color = (20, 20, 20, 50)


class Button(Component):
    """A text button that runs a callback; toggle buttons stay pressed."""

    def __init__(self, fonts: Any, textures: Any) -> None:
        super().__init__()
        self.callback: Callable[[], None] | None = None
        self.toggle = False
        self._text = Text(fonts.get(Fonts.MAIN), "", 16)
        self._text.fill_color = IDLE_COLOR

    @property
    def text(self) -> str:
        return self._text.string

    @text.setter
    def text(self, value: str) -> None:
        self._text.string = value
        center_origin(self._text)

    @property
    def character_size(self) -> int:
        return self._text.character_size

    @character_size.setter
    def character_size(self, size: int) -> None:
        self._text.character_size = size

    @property
    def text_color(self) -> Color:
        return self._text.fill_color

    def is_selectable(self) -> bool:
        return True

    def select(self) -> None:
        super().select()
        self._text.fill_color = SELECTED_COLOR

    def deselect(self) -> None:
        super().deselect()
        self._text.fill_color = IDLE_COLOR

    def activate(self) -> None:
        super().activate()
        if self.toggle:
            self._text.fill_color = PRESSED_COLOR
        if self.callback is not None:
            self.callback()
        if not self.toggle:
            self.deactivate()

    def deactivate(self) -> None:
        super().deactivate()
        if self.toggle:
            self._text.fill_color = SELECTED_COLOR if self.is_selected else IDLE_COLOR

    def handle_event(self, event: Any) -> None:
        """Buttons react only through their container."""

    def draw(self, target: Any, transform: Transform = IDENTITY) -> None:
        self._text.draw(target, transform.combine(self.get_transform()))