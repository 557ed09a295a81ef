"""Resource identifiers and keyed resource holders."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum, auto
from pathlib import Path
from typing import Any, Generic, TypeVar

import pygame

K = TypeVar("K")
R = TypeVar("R")


class Textures(Enum):
    TILESET = auto()
    TITLE_SCREEN = auto()
    MAIN_MENU_BACKGROUND = auto()
    WORLD_BACKGROUND = auto()
    LOCAL_BACKGROUND = auto()
    BATTLE_BACKGROUND = auto()
    MAGIC0 = auto()
    MAGIC1 = auto()
    MAGIC2 = auto()
    ENEMY = auto()
    BUTTON_NORMAL = auto()
    BUTTON_SELECTED = auto()
    BUTTON_PRESSED = auto()


class Fonts(Enum):
    MAIN = auto()


class ResourceLoadError(RuntimeError):
    """A resource file could not be loaded."""

    def __init__(self, filename: str) -> None:
        super().__init__(f"Failed to load: {filename}")
        self.filename = filename


class FontFace:
    """A font file whose pygame fonts are created lazily per character size."""

    def __init__(self, path: str | None = None) -> None:
        self.path = path
        self._sizes: dict[int, pygame.font.Font] = {}

    def sized(self, size: int) -> pygame.font.Font:
        face = self._sizes.get(size)
        if face is None:
            if not pygame.font.get_init():
                pygame.font.init()
            face = pygame.font.Font(self.path, size)
            self._sizes[size] = face
        return face


class ResourceManager(Generic[K, R]):
    """Holds resources by identifier, each loaded once from a file."""

    def __init__(self, loader: Callable[..., R]) -> None:
        self._loader = loader
        self._resources: dict[K, R] = {}

    def load(self, identifier: K, filename: str, *args: Any) -> R:
        if identifier in self._resources:
            raise ValueError(f"resource {identifier!r} is already loaded")
        try:
            resource = self._loader(filename, *args)
        except ResourceLoadError:
            raise
        except OSError as exc:
            raise ResourceLoadError(filename) from exc
        self._resources[identifier] = resource
        return resource

    def get(self, identifier: K) -> R:
        try:
            return self._resources[identifier]
        except KeyError:
            raise KeyError(f"resource {identifier!r} is not loaded") from None

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._resources


def _load_font(filename: str) -> FontFace:
    path = Path(filename)
    if not path.is_file():
        raise ResourceLoadError(filename)
    return FontFace(str(path))


def _load_texture(filename: str) -> pygame.Surface:
    try:
        return pygame.image.load(filename)
    except (OSError, pygame.error) as exc:
        raise ResourceLoadError(filename) from exc


def font_holder() -> ResourceManager[Fonts, FontFace]:
    return ResourceManager(_load_font)


def texture_holder() -> ResourceManager[Textures, pygame.Surface]:
    return ResourceManager(_load_texture)