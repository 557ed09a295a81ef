"""Graphics settings stored as key=value lines."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

import pygame

logger = logging.getLogger(__name__)

_FALLBACK_RESOLUTION = (800, 600)
_INTEGER = re.compile(r"\s*([+-]?\d+)")


class Option(Enum):
    UNKNOWN = -1
    TITLE = 0
    RESOLUTION_HEIGHT = 1
    RESOLUTION_WIDTH = 2
    FULLSCREEN = 3
    VSYNC = 4
    FRAMERATE = 5


_OPTION_NAMES = {
    "title": Option.TITLE,
    "resolution_height": Option.RESOLUTION_HEIGHT,
    "resolution_width": Option.RESOLUTION_WIDTH,
    "fullscreen": Option.FULLSCREEN,
    "vsync": Option.VSYNC,
    "framerate": Option.FRAMERATE,
}


def resolve_option(name: str) -> Option:
    """Map a setting name to its option, or ``Option.UNKNOWN``."""
    return _OPTION_NAMES.get(name, Option.UNKNOWN)


def _to_int(text: str) -> int:
    match = _INTEGER.match(text)
    if match is None:
        raise ValueError(f"invalid integer value: {text!r}")
    return int(match.group(1))


def _desktop_resolution() -> tuple[int, int]:
    try:
        pygame.display.init()
        sizes = pygame.display.get_desktop_sizes()
    except pygame.error:
        return _FALLBACK_RESOLUTION
    if not sizes:
        return _FALLBACK_RESOLUTION
    width, height = sizes[0]
    return (width, height)


def _fullscreen_modes() -> list[tuple[int, int]]:
    try:
        pygame.display.init()
        modes = pygame.display.list_modes()
    except pygame.error:
        return []
    if modes == -1:
        return []
    return [tuple(mode) for mode in modes]


@dataclass
class GFX:
    """Window title, resolution and display options."""

    title: str = "Title"
    resolution: tuple[int, int] = field(default_factory=_desktop_resolution)
    video_modes: list[tuple[int, int]] = field(default_factory=_fullscreen_modes)
    fullscreen: bool = False
    vsync: bool = False
    framerate: int = 60

    def save(self, path: str | Path) -> None:
        width, height = self.resolution
        lines = [
            f"title={self.title}",
            f"resolution_width={width}",
            f"resolution_height={height}",
            f"fullscreen={int(self.fullscreen)}",
            f"vsync={int(self.vsync)}",
            f"framerate={self.framerate}",
        ]
        Path(path).write_text("\n".join(lines) + "\n", encoding="utf-8")

    def load(self, path: str | Path) -> None:
        """Read settings from ``path``; unknown keys are logged and skipped."""
        with open(path, encoding="utf-8") as stream:
            for raw in stream:
                line = raw.rstrip("\n")
                key, separator, value = line.partition("=")
                if not separator:
                    value = line
                match resolve_option(key):
                    case Option.TITLE:
                        self.title = value
                    case Option.RESOLUTION_WIDTH:
                        self.resolution = (_to_int(value), self.resolution[1])
                    case Option.RESOLUTION_HEIGHT:
                        self.resolution = (self.resolution[0], _to_int(value))
                    case Option.FULLSCREEN:
                        self.fullscreen = bool(_to_int(value))
                    case Option.VSYNC:
                        self.vsync = bool(_to_int(value))
                    case Option.FRAMERATE:
                        self.framerate = _to_int(value)
                    case _:
                        logger.warning("Unable to parse: %s", key)