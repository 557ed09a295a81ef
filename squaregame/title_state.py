"""Title screen with a blinking prompt."""

import pygame

from squaregame.resources import Fonts
from squaregame.state import RectangleShape, State, StateID
from squaregame.utility import BLACK, WHITE, Text, center_origin

BLINK_INTERVAL = 0.5
PROMPT = "Press any key to start"


class TitleState(State):
    """Shows a blinking prompt; any released key opens the menu."""

    def __init__(self, stack, context):
        super().__init__(stack, context)
        view_size = context.window.view.size
        self.background_shape = RectangleShape(view_size, BLACK)

        self.text = Text(context.fonts.get(Fonts.MAIN), PROMPT)
        self.text.fill_color = WHITE
        center_origin(self.text)
        self.text.position = view_size / 2.0

        self.show_text = True
        self._blink_clock = 0.0

    def draw(self):
        shown = [self.background_shape, self.text] if self.show_text else [self.background_shape]
        for drawable in shown:
            self.context.window.draw(drawable)

    def update(self, dt):
        self._blink_clock += dt
        if self._blink_clock >= BLINK_INTERVAL:
            self.show_text = not self.show_text
            self._blink_clock = 0.0
        return True

    def handle_event(self, event):
        if event.type == pygame.KEYUP:
            self.request_stack_pop()
            self.request_stack_push(StateID.MENU)
        return True