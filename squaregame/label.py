"""Static text widget."""

from squaregame.component import Component
from squaregame.resources import Fonts
from squaregame.utility import IDENTITY, Text

LABEL_CHARACTER_SIZE = 16


class Label(Component):
    """Text that cannot be selected."""

    def __init__(self, text, fonts):
        super().__init__()
        self._text = Text(fonts.get(Fonts.MAIN), text, LABEL_CHARACTER_SIZE)

    text = property(
        lambda self: self._text.string,
        lambda self, value: setattr(self._text, "string", value),
        doc="The string shown.",
    )
    character_size = property(
        lambda self: self._text.character_size,
        lambda self, size: setattr(self._text, "character_size", size),
        doc="Glyph height in pixels.",
    )

    def is_selectable(self):
        return False

    def handle_event(self, event):
        """Labels ignore input."""

    def draw(self, target, transform=IDENTITY):
        self._text.draw(target, transform.combine(self.get_transform()))