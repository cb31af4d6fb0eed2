# entities_dot.py

import pygame
import numpy as np

from config import (
    DOT_SCORE_NORMAL, DOT_SCORE_POWER,
    DOT_RADIUS_NORMAL, DOT_RADIUS_POWER
)

DOT_COLOR = (211, 176, 131)


class Dot:
    def __init__(self, pos=(0.0, 0.0)):
        self.pos = np.array(pos, dtype=float)
        self.reset()

    @property
    def x(self):
        return self.pos[0]

    def reset(self, is_power=False):
        self.is_power = is_power
        self.radius = DOT_RADIUS_POWER if is_power else DOT_RADIUS_NORMAL
        self.active = True

    @property
    def eaten(self):
        return not self.active

    def hide(self):
        self.active = False

    def score(self):
        return DOT_SCORE_POWER if self.is_power else DOT_SCORE_NORMAL

    def draw(self, surf):
        if not self.active:
            return
        x, y = self.pos
        if self.is_power:
            center = (int(x + self.radius * 0.5 - DOT_RADIUS_NORMAL),
                      int(y - self.radius * 0.25 + DOT_RADIUS_NORMAL))
            pygame.draw.circle(surf, DOT_COLOR, center, int(self.radius))
        else:
            pygame.draw.rect(surf, DOT_COLOR, (int(x), int(y), int(self.radius), int(self.radius)))
