"""Stack of game states with deferred push, pop and clear."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from squaregame.state import Context, State, StateID

StateFactory = Callable[["StateStack", Context], State]


class StackAction(Enum):
    PUSH = auto()
    POP = auto()
    CLEAR = auto()


@dataclass(frozen=True)
class _PendingChange:
    action: StackAction
    state_id: StateID = StateID.NONE


class StateStack:
    """Runs the states top-down; changes take effect after each pass."""

    def __init__(self, context: Context) -> None:
        self._stack: list[State] = []
        self._pending: list[_PendingChange] = []
        self._context = context
        self._factories: dict[StateID, StateFactory] = {}

    @property
    def context(self) -> Context:
        return self._context

    @property
    def states(self) -> tuple[State, ...]:
        """The live states, bottom first."""
        return tuple(self._stack)

    def register_state(self, state_id: StateID, factory: StateFactory) -> None:
        self._factories[StateID(state_id)] = factory

    def update(self, dt: float) -> None:
        for state in reversed(self._stack):
            if not state.update(dt):
                break
        self._apply_pending_changes()

    def draw(self) -> None:
        for state in self._stack:
            state.draw()

    def handle_event(self, event: Any) -> None:
        for state in reversed(self._stack):
            if not state.handle_event(event):
                break
        self._apply_pending_changes()

    def push_state(self, state_id: StateID) -> None:
        self._pending.append(_PendingChange(StackAction.PUSH, StateID(state_id)))

    def pop_state(self) -> None:
        self._pending.append(_PendingChange(StackAction.POP))

    def clear_states(self) -> None:
        self._pending.append(_PendingChange(StackAction.CLEAR))

    def is_empty(self) -> bool:
        return not self._stack

    def __len__(self) -> int:
        return len(self._stack)

    def _create_state(self, state_id: StateID) -> State:
        try:
            factory = self._factories[state_id]
        except KeyError:
            raise KeyError(f"no state registered for {state_id!r}") from None
        return factory(self, self._context)

    def _apply_pending_changes(self) -> None:
        pending, self._pending = self._pending, []
        for change in pending:
            match change.action:
                case StackAction.PUSH:
                    self._stack.append(self._create_state(change.state_id))
                case StackAction.POP:
                    if not self._stack:
                        raise IndexError("pop from an empty state stack")
                    self._stack.pop()
                case StackAction.CLEAR:
                    self._stack.clear()