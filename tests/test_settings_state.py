from types import SimpleNamespace

import pygame
import pytest

from squaregame.player_controller import Action, PlayerController
from squaregame.settings_state import SettingsState
from squaregame.state import Context, StateID
from squaregame.state_stack import StateStack
from squaregame.window import View


class FakeFace:
    def size(self, line):
        return (len(line) * 8, 16)


class FakeFont:
    def sized(self, size):
        return FakeFace()


class FakeFonts:
    def get(self, identifier):
        return FakeFont()


class FakeWindow:
    def __init__(self, view_size=(640.0, 360.0)):
        self.view = View((view_size[0] / 2, view_size[1] / 2), view_size)
        self.gfx = SimpleNamespace(resolution=(800, 600))
        self.drawn = []

    def draw(self, drawable):
        self.drawn.append(drawable)


class RecordingStack:
    def __init__(self):
        self.calls = []

    def push_state(self, state_id):
        self.calls.append(("push", state_id))

    def pop_state(self):
        self.calls.append(("pop",))

    def clear_states(self):
        self.calls.append(("clear",))


def make_context(view_size=(640.0, 360.0)):
    return Context(
        window=FakeWindow(view_size),
        textures=None,
        fonts=FakeFonts(),
        player_controller=PlayerController(),
    )


def key_up(key):
    return pygame.event.Event(pygame.KEYUP, key=key)


@pytest.fixture
def state():
    return SettingsState(RecordingStack(), make_context())


def test_labels_show_default_keys(state):
    assert state.binding_labels[Action.MOVE_LEFT].text == pygame.key.name(pygame.K_LEFT)
    assert state.binding_labels[Action.MOVE_DOWN].text == pygame.key.name(pygame.K_DOWN)


def test_first_binding_button_is_selected(state):
    assert state.binding_buttons[Action.MOVE_LEFT].is_selected
    assert not state.back_button.is_selected


def test_binding_buttons_are_toggles_at_their_rows(state):
    assert all(button.toggle for button in state.binding_buttons.values())
    assert state.binding_buttons[Action.MOVE_DOWN].position == pygame.Vector2(80.0, 300.0)
    assert state.binding_labels[Action.MOVE_DOWN].position == pygame.Vector2(300.0, 315.0)


def test_rebinding_a_key(state):
    state.handle_event(key_up(pygame.K_RETURN))
    assert state.binding_buttons[Action.MOVE_LEFT].is_active

    result = state.handle_event(key_up(pygame.K_a))

    assert result is False
    assert not state.binding_buttons[Action.MOVE_LEFT].is_active
    controller = state.context.player_controller
    assert controller.get_assigned_key(Action.MOVE_LEFT) == pygame.K_a
    assert state.binding_labels[Action.MOVE_LEFT].text == pygame.key.name(pygame.K_a)


def test_key_press_while_binding_is_ignored(state):
    state.handle_event(key_up(pygame.K_RETURN))
    state.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a))

    assert state.binding_buttons[Action.MOVE_LEFT].is_active
    controller = state.context.player_controller
    assert controller.get_assigned_key(Action.MOVE_LEFT) == pygame.K_LEFT


def test_navigation_skips_labels(state):
    state.handle_event(key_up(pygame.K_DOWN))
    assert state.binding_buttons[Action.MOVE_RIGHT].is_selected
    assert not state.binding_buttons[Action.MOVE_LEFT].is_selected


def test_back_button_pops_state():
    context = make_context()
    stack = StateStack(context)
    stack.register_state(StateID.SETTINGS, SettingsState)
    stack.push_state(StateID.SETTINGS)
    stack.update(0.0)
    assert len(stack) == 1

    for _ in range(4):
        stack.handle_event(key_up(pygame.K_DOWN))
    settings = stack.states[0]
    assert settings.back_button.is_selected

    stack.handle_event(key_up(pygame.K_RETURN))
    assert stack.is_empty()


def test_update_lets_lower_states_update(state):
    assert state.update(0.1) is True


def test_draw_draws_background_then_container(state):
    state.draw()
    assert state.context.window.drawn == [state.background_shape, state.container]


def test_background_scaled_to_view():
    state = SettingsState(RecordingStack(), make_context((1280.0, 720.0)))
    assert state.background_shape.scale == pygame.Vector2(2.0, 2.0)
    assert state.background_shape.size == pygame.Vector2(1280.0, 720.0)