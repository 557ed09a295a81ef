"""Scene node that shows a texture or part of one."""

import pygame

from squaregame.scene_node import SceneNode


class SpriteNode(SceneNode):
    """A scene node that blits a texture region at its position."""

    def __init__(self, texture, texture_rect=None):
        super().__init__()
        self.texture = texture
        self.texture_rect = texture.get_rect() if texture_rect is None else pygame.Rect(texture_rect)

    def draw_current(self, target, transform):
        corner = transform.transform_point((0.0, 0.0))
        target.blit(self.texture, (round(corner.x), round(corner.y)), self.texture_rect)