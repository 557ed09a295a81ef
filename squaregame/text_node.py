"""Scene node that shows a line of text."""

from squaregame.resources import Fonts
from squaregame.scene_node import SceneNode
from squaregame.utility import Text, center_origin

TEXT_NODE_CHARACTER_SIZE = 20


class TextNode(SceneNode):
    """A scene node drawing text in the main font, centred on its origin."""

    def __init__(self, fonts, text=""):
        super().__init__()
        self.text = Text(fonts.get(Fonts.MAIN), text, TEXT_NODE_CHARACTER_SIZE)

    @property
    def string(self):
        return self.text.string

    @string.setter
    def string(self, value):
        self.text.string = value
        center_origin(self.text)

    def draw_current(self, target, transform):
        self.text.draw(target, transform)