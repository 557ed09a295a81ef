"""The state in which the world is played."""

from __future__ import annotations

from typing import Any

import pygame

from squaregame.state import Context, State, StateID
from squaregame.world import World


class GameState(State):
    """Runs the world and feeds it the player's input."""

    def __init__(self, stack: Any, context: Context) -> None:
        super().__init__(stack, context)
        self.world = World(context.window, context.fonts)
        self.player_controller = context.player_controller

    def draw(self) -> None:
        self.world.draw()

    def update(self, dt: float) -> bool:
        self.world.update(dt)
        self.player_controller.handle_realtime_input(self.world.command_queue)
        return True

    def handle_event(self, event: Any) -> bool:
        self.player_controller.handle_event(event, self.world.command_queue)
        if event.type == pygame.WINDOWFOCUSLOST:
            self.request_stack_push(StateID.PAUSE)
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.request_stack_push(StateID.PAUSE)
        return True