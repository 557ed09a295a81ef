"""The game application: window, resources, states and the main loop."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

import pygame

from squaregame.game_state import GameState
from squaregame.menu_state import MenuState
from squaregame.pause_state import PauseState
from squaregame.player_controller import PlayerController
from squaregame.resources import Fonts, ResourceLoadError, font_holder, texture_holder
from squaregame.settings_state import SettingsState
from squaregame.state import Context, StateID
from squaregame.state_stack import StateStack
from squaregame.title_state import TitleState
from squaregame.utility import WHITE, Text
from squaregame.window import DEFAULT_CONFIG_PATH, Window

DEFAULT_FONT_PATH = "assets/fonts/PixellettersFull.ttf"
TIME_PER_FRAME = 1.0 / 60.0
STATISTIC_CHARACTER_SIZE = 50
STATISTIC_POSITION = (5.0, 5.0)


class Application:
    """Owns the window and the state stack and runs the fixed-step loop."""

    def __init__(
        self,
        config_path: str = DEFAULT_CONFIG_PATH,
        font_path: str = DEFAULT_FONT_PATH,
    ) -> None:
        self.fonts = font_holder()
        self.fonts.load(Fonts.MAIN, font_path)
        self.textures = texture_holder()
        self.window = Window(config_path)
        self.player_controller = PlayerController()

        context = Context(
            self.window, self.textures, self.fonts, self.player_controller
        )
        self.state_stack = StateStack(context)

        self.statistic_text = Text(
            self.fonts.get(Fonts.MAIN), "", STATISTIC_CHARACTER_SIZE
        )
        self.statistic_text.position = STATISTIC_POSITION
        self._statistic_update_time = 0.0
        self._statistic_num_frames = 0

        self._register_states()
        self.state_stack.push_state(StateID.TITLE)

    def _register_states(self) -> None:
        self.state_stack.register_state(StateID.TITLE, TitleState)
        self.state_stack.register_state(StateID.MENU, MenuState)
        self.state_stack.register_state(StateID.SETTINGS, SettingsState)
        self.state_stack.register_state(StateID.GAME, GameState)
        self.state_stack.register_state(StateID.PAUSE, PauseState)

    def start(self) -> None:
        """Run until the window closes or the last state is popped."""
        clock = pygame.time.Clock()
        last_time = 0.0
        while self.is_running():
            elapsed = clock.tick(self.window.framerate_limit) / 1000.0
            last_time += elapsed
            while last_time > TIME_PER_FRAME:
                last_time -= TIME_PER_FRAME
                self.process_input()
                self.update(TIME_PER_FRAME)
                if self.state_stack.is_empty() and self.is_running():
                    self.window.close()
                if not self.is_running():
                    break
            if not self.is_running():
                break
            self.update_statistic(elapsed)
            self.draw()

    def process_input(self) -> None:
        for event in self.window.poll_events():
            if event.type == pygame.QUIT:
                self.window.close()
            elif event.type == pygame.VIDEORESIZE:
                self.window.set_view(self.window.resize_view())
            self.state_stack.handle_event(event)

    def update(self, dt: float) -> None:
        self.state_stack.update(dt)

    def draw(self) -> None:
        self.window.begin_draw(WHITE)
        self.state_stack.draw()
        self.window.set_view(self.window.default_view)
        self.window.draw(self.statistic_text)
        self.window.end_draw()

    def update_statistic(self, elapsed: float) -> None:
        """Count frames and refresh the FPS text once a second."""
        self._statistic_update_time += elapsed
        self._statistic_num_frames += 1
        if self._statistic_update_time >= 1.0:
            self.statistic_text.string = f"FPS: {self._statistic_num_frames}"
            self._statistic_update_time -= 1.0
            self._statistic_num_frames = 0

    def is_running(self) -> bool:
        return self.window.is_open()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Move a square around the world.")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH)
    parser.add_argument("--font", default=DEFAULT_FONT_PATH)
    args = parser.parse_args(argv)
    try:
        game = Application(args.config, args.font)
    except ResourceLoadError as exc:
        print(exc, file=sys.stderr)
        return 1
    game.start()
    return 0