"""The game window and the views used to draw into it."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import Any

import pygame

from squaregame.gfx import GFX
from squaregame.utility import IDENTITY, Color, Transform

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "cfg/gfx.ini"
_FALLBACK_SIZE = (800, 600)
_FALLBACK_TITLE = "title"
_FALLBACK_FRAMERATE = 1


class View:
    """A rectangle of the world, given by centre and size, shown in the window."""

    def __init__(
        self,
        center: Sequence[float] = (0.0, 0.0),
        size: Sequence[float] = (0.0, 0.0),
    ) -> None:
        self.center = center
        self.size = size

    @classmethod
    def from_rect(cls, left: float, top: float, width: float, height: float) -> View:
        return cls((left + width / 2.0, top + height / 2.0), (width, height))

    @property
    def center(self) -> pygame.Vector2:
        return self._center

    @center.setter
    def center(self, value: Sequence[float]) -> None:
        self._center = pygame.Vector2(value)

    @property
    def size(self) -> pygame.Vector2:
        return self._size

    @size.setter
    def size(self, value: Sequence[float]) -> None:
        self._size = pygame.Vector2(value)

    def copy(self) -> View:
        return View(self._center, self._size)

    def transform(self, target_size: Sequence[float]) -> Transform:
        """Transform from world coordinates to pixels of a target of this size."""
        width, height = target_size
        sx = width / self._size.x if self._size.x else 1.0
        sy = height / self._size.y if self._size.y else 1.0
        return (
            IDENTITY.translate(width / 2.0, height / 2.0)
            .scale(sx, sy)
            .translate(-self._center.x, -self._center.y)
        )


def _open_display(size: tuple[int, int], flags: int, vsync: bool) -> pygame.Surface:
    if vsync:
        try:
            return pygame.display.set_mode(size, flags, vsync=1)
        except pygame.error:
            logger.warning("vsync is not available; opening without it")
    return pygame.display.set_mode(size, flags)


class Window:
    """The display surface, configured from a graphics settings file."""

    def __init__(self, config_path: str | Path = DEFAULT_CONFIG_PATH) -> None:
        self.gfx = GFX()
        try:
            self.gfx.load(config_path)
        except OSError:
            logger.warning("Unable to open file: %s", config_path)
            size, title = _FALLBACK_SIZE, _FALLBACK_TITLE
            fullscreen, framerate, vsync = False, _FALLBACK_FRAMERATE, True
        else:
            size, title = tuple(self.gfx.resolution), self.gfx.title
            fullscreen, framerate, vsync = (
                self.gfx.fullscreen,
                self.gfx.framerate,
                self.gfx.vsync,
            )

        pygame.display.init()
        flags = pygame.RESIZABLE | (pygame.FULLSCREEN if fullscreen else 0)
        self.surface = _open_display(size, flags, vsync)
        pygame.display.set_caption(title)
        self.framerate_limit = framerate
        self.vsync = vsync
        self._default_view = View.from_rect(0.0, 0.0, *self.surface.get_size())
        self._view = self._default_view.copy()
        self._open = True

    @property
    def size(self) -> tuple[int, int]:
        return self.surface.get_size()

    @property
    def view(self) -> View:
        return self._view

    @property
    def default_view(self) -> View:
        return self._default_view

    def poll_events(self) -> Iterator[pygame.event.Event]:
        yield from pygame.event.get()

    def begin_draw(self, color: Color) -> None:
        self.surface.fill(color)

    def draw(self, drawable: Any) -> None:
        drawable.draw(self.surface, self._view.transform(self.size))

    def end_draw(self) -> None:
        pygame.display.flip()

    def set_view(self, view: View) -> None:
        self._view = view.copy()

    def resize_view(self) -> View:
        """Return the current view stretched to the window's aspect ratio."""
        width, height = self.size
        aspect = width / height if height else 1.0
        view = self._view.copy()
        resolution_width, resolution_height = self.gfx.resolution
        view.size = (resolution_width * aspect, float(resolution_height))
        return view

    def is_open(self) -> bool:
        return self._open

    def close(self) -> None:
        self._open = False
        pygame.display.quit()