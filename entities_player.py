# entities_player.py
#
# The player: runs along the track, eats dots, and while powered up
# can knock the enemy out.
# ------------------------------------------------------

from enum import Enum

import pygame
import numpy as np

from config import (
    DIR_R, DIR_L,
    PLAYER_SPEED, PLAYER_POWERUP_SPEED, POWERUP_DURATION,
    PLAYER_DRAW_RADIUS, PLAYER_HIT_RADIUS, POWERUP_RADIUS_SCALE,
    MOUTH_OPEN_TIME, MOUTH_CYCLE_TIME
)
from entities_utils import checked_transition, sector_polygon, fade, InvalidStateTransition
from logging_utils import log_debug
from managers import Countdown

# ──────────────────────────────────────────────────────────
# Helper utilities
# ──────────────────────────────────────────────────────────
BODY_COLORS = {
    "base":    (253, 249,   0),
    "powerup": (255, 161,   0),
}
POWERUP_BLINK_TIME = 1.0
POWERUP_BLINK_STEP = 0.05


class PlayerState(Enum):
    ALIVE = "alive"
    FAILED = "failed"


_TRANSITIONS = {
    PlayerState.ALIVE: {PlayerState.FAILED},
    PlayerState.FAILED: {PlayerState.FAILED},
}


def draw_faded(surface, points, color, alpha):
    """Polygon drawn through an SRCALPHA temp surface so it can fade out."""
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    left, top = min(xs), min(ys)
    w = int(max(xs) - left) + 2
    h = int(max(ys) - top) + 2
    temp = pygame.Surface((w, h), pygame.SRCALPHA)
    pygame.draw.polygon(temp, fade(color, alpha), [(x - left, y - top) for x, y in points])
    surface.blit(temp, (int(left), int(top)))


# ──────────────────────────────────────────────────────────
# Player entity
# ──────────────────────────────────────────────────────────
class Player:
    def __init__(self, pos=(0.0, 0.0)):
        self.pos = np.array(pos, dtype=float)
        self._powerup = Countdown(POWERUP_DURATION)
        self.reset(pos)

    def reset(self, pos=None):
        if pos is not None:
            self.pos[:] = pos
        self.direction = DIR_R
        self._powerup.clear()

        # cosmetic timers, read only by draw()
        self.mouth_timer = 0.0
        self.mouth_open = True
        self.failed_timer = 0.0
        self.failed_scale = 1.0

        self._state = PlayerState.ALIVE

    @property
    def x(self):
        return self.pos[0]

    @x.setter
    def x(self, value):
        self.pos[0] = value

    @property
    def state(self):
        return self._state

    def _set_state(self, new_state):
        self._state = checked_transition(self._state, new_state, _TRANSITIONS, "Player")

    def finish(self):
        if self._state is PlayerState.ALIVE:
            log_debug(f"Player ALIVE -> FAILED x={self.x:.1f}")
        self._set_state(PlayerState.FAILED)

    @property
    def failed(self):
        return self._state is PlayerState.FAILED

    # ──────────────────────────────────────────────────────
    # Power-up
    # ──────────────────────────────────────────────────────
    def start_powerup(self):
        if self.failed:
            raise InvalidStateTransition("Player: cannot power up after failing")
        self._powerup.start()

    @property
    def powerup(self):
        return self._powerup.active

    @property
    def powerup_timer(self):
        return self._powerup.remaining

    def speed(self):
        return PLAYER_POWERUP_SPEED if self.powerup else PLAYER_SPEED

    @property
    def hit_radius(self):
        return PLAYER_HIT_RADIUS * POWERUP_RADIUS_SCALE if self.powerup else PLAYER_HIT_RADIUS

    # ──────────────────────────────────────────────────────
    # Movement
    # ──────────────────────────────────────────────────────
    def update(self, dt, pressed_direction=None):
        """Advance one frame; ``pressed_direction`` is this frame's latest key press."""
        if pressed_direction is not None:
            if pressed_direction not in (DIR_R, DIR_L):
                raise ValueError(f"direction must be DIR_R or DIR_L, got {pressed_direction!r}")
            self.direction = pressed_direction

        if self._state is PlayerState.ALIVE:
            self.pos[0] += self.direction * self.speed() * dt
            self._powerup.tick(dt)
            self.mouth_open = self.mouth_timer <= MOUTH_OPEN_TIME
            self.mouth_timer += dt
            if self.mouth_timer >= MOUTH_CYCLE_TIME:
                self.mouth_timer = 0.0
        else:
            self.failed_scale = max(0.0, 1.0 - self.failed_timer)
            self.failed_timer += dt

    # ──────────────────────────────────────────────────────
    # Draw
    # ──────────────────────────────────────────────────────
    def _body_color(self):
        if self.powerup:
            if self.powerup_timer <= POWERUP_BLINK_TIME:
                step = int(self.powerup_timer // POWERUP_BLINK_STEP)
                return BODY_COLORS["powerup"] if step % 2 == 0 else BODY_COLORS["base"]
            return BODY_COLORS["powerup"]
        return BODY_COLORS["base"]

    def draw(self, surf):
        radius = PLAYER_DRAW_RADIUS * POWERUP_RADIUS_SCALE if self.powerup else PLAYER_DRAW_RADIUS
        if self.failed:
            radius *= self.failed_scale
            if radius < 1.0:
                return
        center = (float(self.pos[0]), float(self.pos[1]))
        color = BODY_COLORS["base"] if self.failed else self._body_color()

        if self.mouth_open:
            if self.direction == DIR_L:
                pts = sector_polygon(center, radius, -60, 240)
            else:
                pts = sector_polygon(center, radius, 120, 420)
        else:
            pts = sector_polygon(center, radius, 0, 360)

        if self.failed:
            draw_faded(surf, pts, color, self.failed_scale)
        else:
            pygame.draw.polygon(surf, color, pts)
