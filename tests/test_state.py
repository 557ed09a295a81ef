import pygame
import pytest

from squaregame.state import Context, RectangleShape, State, StateID
from squaregame.state_stack import StateStack


class _Screen(State):
    def draw(self):
        pass

    def update(self, dt):
        return True

    def handle_event(self, event):
        return True


def _context():
    return Context(window=None, textures=None, fonts=None, player_controller=None)


@pytest.fixture
def stack():
    states = StateStack(_context())
    for state_id in (StateID.MENU, StateID.GAME):
        states.register_state(state_id, _Screen)
    return states


@pytest.fixture
def screen(stack):
    return _Screen(stack, stack.context)


def test_state_id_looked_up_by_value_is_pushed(stack, screen):
    screen.request_stack_push(StateID(4))
    stack.update(0.0)
    assert len(stack) == 1
    assert stack.states[0].context is stack.context


def test_state_is_abstract(stack):
    with pytest.raises(TypeError):
        State(stack, _context())


def test_context_is_kept(stack):
    context = _context()
    assert _Screen(stack, context).context is context


def test_requests_wait_for_the_stack(stack, screen):
    screen.request_stack_push(StateID.MENU)
    assert stack.is_empty()
    stack.update(0.0)
    assert len(stack) == 1


def test_request_pop_and_clear(stack, screen):
    sizes = []
    for requests in (
        [lambda: screen.request_stack_push(StateID.MENU), lambda: screen.request_stack_push(StateID.GAME)],
        [screen.request_stack_pop],
        [screen.request_state_clear],
    ):
        for request in requests:
            request()
        stack.update(0.0)
        sizes.append(len(stack))
    assert sizes == [2, 1, 0]


def test_rectangle_fills_its_area():
    surface = pygame.Surface((10, 10))
    shape = RectangleShape((4, 4), (255, 0, 0, 255))
    shape.position = (2, 2)
    shape.draw(surface)
    assert surface.get_at((3, 3))[:3] == (255, 0, 0)
    assert surface.get_at((8, 8))[:3] == (0, 0, 0)


def test_translucent_rectangle_blends():
    surface = pygame.Surface((10, 10))
    surface.fill((255, 255, 255))
    RectangleShape((10, 10), (0, 0, 0, 150)).draw(surface)
    assert 0 < surface.get_at((5, 5))[0] < 255