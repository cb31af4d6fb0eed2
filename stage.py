# stage.py

import pygame
import numpy as np

from entities_utils import wrap_position

RAIL_COLOR = (0, 82, 172)
RAIL_THICKNESS = 10
RAIL_OFFSETS = (-100.0, -80.0, 80.0, 100.0)


class Stage:
    def __init__(self, width, height, offset_y=0.0):
        self.width = width
        self.height = height
        self.center = np.array([width * 0.5, height * 0.5], dtype=float)
        # vertical placement of the track on screen
        self.offset = np.array([0.0, offset_y], dtype=float)

    @classmethod
    def from_config(cls, config):
        return cls(config.screen_width, config.screen_height / 4,
                   offset_y=config.screen_height * 0.5)

    @property
    def track_y(self):
        return self.center[1] - self.height * 0.5 + self.offset[1]

    def wrap_x(self, x):
        return wrap_position(x, self.width)

    def draw(self, surf):
        for dy in RAIL_OFFSETS:
            rect = (0, int(self.track_y + dy), int(self.width), RAIL_THICKNESS)
            pygame.draw.rect(surf, RAIL_COLOR, rect)
