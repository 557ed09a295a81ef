"""Overlay shown while the game is paused."""

from __future__ import annotations

from typing import Any

import pygame

from squaregame.resources import Fonts
from squaregame.state import Context, RectangleShape, State, StateID
from squaregame.utility import Text, center_origin

PAUSED_TEXT = "Game Paused"
INSTRUCTION_TEXT = (
    "Press ESC to unpause the Game or \nPress BACKSPACE to return to the main menu"
)
PAUSED_CHARACTER_SIZE = 70
OVERLAY_COLOR = (0, 0, 0, 150)


class PauseState(State):
    """Blocks the game below it; Escape resumes, Backspace goes to the menu."""

    def __init__(self, stack: Any, context: Context) -> None:
        super().__init__(stack, context)
        view_size = context.window.view.size
        font = context.fonts.get(Fonts.MAIN)
        self.background_shape = RectangleShape()

        self.paused_text = Text(font, PAUSED_TEXT, PAUSED_CHARACTER_SIZE)
        center_origin(self.paused_text)
        self.paused_text.position = (0.5 * view_size.x, 0.4 * view_size.y)

        self.instruction_text = Text(font, INSTRUCTION_TEXT)
        center_origin(self.instruction_text)
        self.instruction_text.position = (0.5 * view_size.x, 0.6 * view_size.y)

    def draw(self) -> None:
        window = self.context.window
        window.set_view(window.default_view)
        self.background_shape.fill_color = OVERLAY_COLOR
        self.background_shape.size = window.view.size
        window.draw(self.background_shape)
        window.draw(self.paused_text)
        window.draw(self.instruction_text)

    def update(self, dt: float) -> bool:
        return False

    def handle_event(self, event: Any) -> bool:
        if event.type != pygame.KEYDOWN:
            return False
        if event.key == pygame.K_ESCAPE:
            self.request_stack_pop()
        if event.key == pygame.K_BACKSPACE:
            self.request_state_clear()
            self.request_stack_push(StateID.MENU)
        return False