import pygame
import pytest

from squaregame.label import Label
from squaregame.resources import Fonts, ResourceManager


@pytest.fixture
def rendered():
    return []


@pytest.fixture
def fonts(rendered):
    def render(line, *_):
        rendered.append(line)
        glyphs = pygame.Surface((max(1, 8 * len(line)), 10))
        glyphs.fill((255, 255, 255))
        return glyphs

    face = type("Face", (), {"size": staticmethod(lambda line: (8 * len(line), 10)), "render": staticmethod(render)})
    holder = ResourceManager(lambda filename: type("Font", (), {"sized": staticmethod(lambda size: face)}))
    holder.load(Fonts.MAIN, "main.ttf")
    return holder


def test_label_defaults(fonts):
    label = Label("Hello", fonts)
    assert (label.text, label.character_size, label.is_selectable()) == ("Hello", 16, False)


def test_set_text_and_size(fonts):
    label = Label("", fonts)
    label.text = "Left"
    label.character_size = 30
    assert (label.text, label.character_size) == ("Left", 30)


def test_draw_renders_text(fonts, rendered):
    surface = pygame.Surface((100, 40))
    Label("Hello", fonts).draw(surface)
    assert max(pygame.transform.average_color(surface)[:3]) > 0
    assert rendered == ["Hello"]


def test_ignores_events(fonts):
    label = Label("x", fonts)
    label.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_RETURN))
    assert label.is_active is False