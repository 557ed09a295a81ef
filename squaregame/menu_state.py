"""Main menu with Play, Settings and Exit buttons."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from squaregame.button import Button
from squaregame.container import Container
from squaregame.state import Context, RectangleShape, State, StateID
from squaregame.utility import BLACK, calc_char_size, p2px, p2py

_BUTTON_COLUMN = 80.0


class MenuState(State):
    """Lets the player start the game, open the settings or quit."""

    def __init__(self, stack: Any, context: Context) -> None:
        super().__init__(stack, context)
        resolution = context.window.gfx.resolution
        self.background_shape = RectangleShape(
            (float(resolution[0]), float(resolution[1])), BLACK
        )
        self.container = Container()

        entries: list[tuple[str, float, Callable[[], None]]] = [
            ("Play", 40.0, self._play),
            ("Settings", 50.0, lambda: self.request_stack_push(StateID.SETTINGS)),
            ("Exit", 60.0, self.request_stack_pop),
        ]
        for label, row, callback in entries:
            button = Button(context.fonts, context.textures)
            button.position = (p2px(_BUTTON_COLUMN, resolution), p2py(row, resolution))
            button.character_size = calc_char_size(resolution)
            button.text = label
            button.callback = callback
            self.container.pack(button)

    def _play(self) -> None:
        self.request_stack_pop()
        self.request_stack_push(StateID.GAME)

    def draw(self) -> None:
        window = self.context.window
        window.set_view(window.default_view)
        window.draw(self.background_shape)
        window.draw(self.container)

    def update(self, dt: float) -> bool:
        return True

    def handle_event(self, event: Any) -> bool:
        self.container.handle_event(event)
        return False