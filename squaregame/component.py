"""Base class of the menu widgets."""

from abc import ABC, abstractmethod

from squaregame.utility import IDENTITY, Transformable


class Component(Transformable, ABC):
    """A GUI element that can be selected and activated."""

    def __init__(self):
        super().__init__()
        self._selected = False
        self._active = False

    @property
    def is_selected(self):
        return self._selected

    @property
    def is_active(self):
        return self._active

    def select(self):
        self._selected = True

    def deselect(self):
        self._selected = False

    def activate(self):
        self._active = True

    def deactivate(self):
        self._active = False

    @abstractmethod
    def is_selectable(self):
        """Whether keyboard navigation may stop on this component."""

    @abstractmethod
    def handle_event(self, event):
        """React to an input event."""

    @abstractmethod
    def draw(self, target, transform=IDENTITY):
        """Draw onto ``target`` under ``transform``."""