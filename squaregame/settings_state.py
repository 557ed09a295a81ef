"""Settings screen where the movement keys can be rebound."""

from __future__ import annotations

from typing import Any

import pygame

from squaregame.button import Button
from squaregame.container import Container
from squaregame.label import Label
from squaregame.player_controller import Action
from squaregame.state import Context, RectangleShape, State
from squaregame.utility import BLACK, GAME_RESOLUTION, calc_char_size

BUTTON_COLUMN = 80.0
LABEL_COLUMN = 300.0
LABEL_OFFSET = 15.0
BACK_BUTTON_POSITION = (80.0, 375.0)

_BINDING_ROWS = (
    (Action.MOVE_LEFT, 150.0, "Move Left"),
    (Action.MOVE_RIGHT, 200.0, "Move Right"),
    (Action.MOVE_UP, 250.0, "Move Up"),
    (Action.MOVE_DOWN, 300.0, "Move Down"),
)


class SettingsState(State):
    """Lists the key bindings; a pressed binding button waits for a new key."""

    def __init__(self, stack: Any, context: Context) -> None:
        super().__init__(stack, context)
        view_size = pygame.Vector2(context.window.view.size)
        resolution = context.window.gfx.resolution

        self.background_shape = RectangleShape(view_size, BLACK)
        self.background_shape.scale = (
            view_size.x / GAME_RESOLUTION[0],
            view_size.y / GAME_RESOLUTION[1],
        )

        self.container = Container()
        self.binding_buttons: dict[Action, Button] = {}
        self.binding_labels: dict[Action, Label] = {}
        for action, y, text in _BINDING_ROWS:
            self._add_button_label(action, y, text, resolution)

        self._update_labels()

        back_button = Button(context.fonts, context.textures)
        back_button.position = BACK_BUTTON_POSITION
        back_button.text = "Back"
        back_button.character_size = calc_char_size(resolution)
        back_button.callback = self.request_stack_pop
        self.back_button = back_button
        self.container.pack(back_button)

    def draw(self) -> None:
        window = self.context.window
        window.draw(self.background_shape)
        window.draw(self.container)

    def update(self, dt: float) -> bool:
        return True

    def handle_event(self, event: Any) -> bool:
        binding = next(
            (
                (action, button)
                for action, button in self.binding_buttons.items()
                if button.is_active
            ),
            None,
        )
        if binding is None:
            self.container.handle_event(event)
            return False

        action, button = binding
        if event.type == pygame.KEYUP:
            self.context.player_controller.assign_key(action, event.key)
            button.deactivate()
        self._update_labels()
        return False

    def _update_labels(self) -> None:
        controller = self.context.player_controller
        for action, label in self.binding_labels.items():
            label.text = pygame.key.name(controller.get_assigned_key(action))

    def _add_button_label(
        self, action: Action, y: float, text: str, resolution: Any
    ) -> None:
        fonts, textures = self.context.fonts, self.context.textures
        character_size = calc_char_size(resolution)

        button = Button(fonts, textures)
        button.position = (BUTTON_COLUMN, y)
        button.text = text
        button.character_size = character_size
        button.toggle = True

        label = Label("", fonts)
        label.position = (LABEL_COLUMN, y + LABEL_OFFSET)
        label.character_size = character_size

        self.binding_buttons[action] = button
        self.binding_labels[action] = label
        self.container.pack(button)
        self.container.pack(label)