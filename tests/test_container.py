import pygame
import pytest

from squaregame.button import Button
from squaregame.container import Container
from squaregame.label import Label
from squaregame.resources import Fonts, ResourceManager, texture_holder


class _WhiteBlockFont:
    """Draws every line as a white block and records what it drew."""

    def __init__(self):
        self.drawn = []

    def sized(self, size):
        return self

    def size(self, line):
        return (8 * len(line), 10)

    def render(self, line, *_):
        self.drawn.append(line)
        block = pygame.Surface((max(1, 8 * len(line)), 10))
        block.fill("white")
        return block


@pytest.fixture
def font():
    return _WhiteBlockFont()


@pytest.fixture
def build(font):
    """Pack items into a container: strings become buttons, ("label", text) labels."""
    fonts = ResourceManager(lambda filename: font)
    fonts.load(Fonts.MAIN, "main.ttf")

    def make(*items):
        container = Container()
        made = []
        for item in items:
            if isinstance(item, tuple):
                component = Label(item[1], fonts)
            else:
                component = Button(fonts, texture_holder())
                component.text = item
            container.pack(component)
            made.append(component)
        return container, made

    return make


def key(kind, code):
    return pygame.event.Event(kind, key=code)


def test_empty_container_has_no_selection():
    container = Container()
    container.select_next()
    assert container.has_selection() is False
    assert container.is_selectable() is False


def test_first_selectable_is_selected(build):
    _, (_, first, second) = build(("label", "info"), "a", "b")
    assert first.is_selected is True
    assert second.is_selected is False


def test_down_skips_labels_and_wraps(build):
    container, (first, _, second) = build("a", ("label", "info"), "b")
    container.handle_event(key(pygame.KEYUP, pygame.K_DOWN))
    assert second.is_selected and not first.is_selected
    container.handle_event(key(pygame.KEYUP, pygame.K_DOWN))
    assert first.is_selected and not second.is_selected


def test_up_wraps_backwards(build):
    container, (_, second) = build("a", "b")
    container.handle_event(key(pygame.KEYUP, pygame.K_UP))
    assert second.is_selected is True


def test_enter_activates_selection(build):
    container, (button,) = build("a")
    calls = []
    button.callback = lambda: calls.append(1)
    container.handle_event(key(pygame.KEYUP, pygame.K_RETURN))
    assert calls == [1]


def test_key_down_events_are_ignored(build):
    container, (first, _) = build("a", "b")
    container.handle_event(key(pygame.KEYDOWN, pygame.K_DOWN))
    assert first.is_selected is True


def test_active_child_receives_events(build):
    container, (toggle, other) = build("a", "b")
    toggle.toggle = True
    container.handle_event(key(pygame.KEYUP, pygame.K_RETURN))
    container.handle_event(key(pygame.KEYUP, pygame.K_DOWN))
    assert (toggle.is_active, toggle.is_selected, other.is_selected) == (True, True, False)


def test_select_ignores_unselectable(build):
    container, (button, _) = build("a", ("label", "info"))
    container.select(1)
    assert button.is_selected is True


def test_draw_draws_children(build, font):
    surface = pygame.Surface((100, 100))
    container, _ = build("a", ("label", "info"))
    container.draw(surface)
    assert pygame.transform.average_color(surface)[0] > 0
    assert font.drawn == ["a", "info"]