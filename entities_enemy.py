# entities_enemy.py

import math
import random
from enum import Enum

import pygame
import numpy as np

from config import (
    DIR_R, DIR_L,
    ENEMY_SPEED, ENEMY_PANIC_SPEED, PANIC_DURATION,
    KNOCKOUT_DURATION, KNOCKOUT_BASE_SPEED, KNOCKOUT_SPEED_JITTER,
    ENEMY_HIT_RADIUS, ENEMY_KNOCKOUT_SCORE
)
from entities_utils import (
    checked_transition, circular_distances, sector_polygon, InvalidStateTransition
)
from logging_utils import log_debug
from managers import Countdown

BODY_COLOR = (230, 41, 55)
PANIC_COLOR = (0, 121, 241)
EYE_COLOR = (255, 255, 255)
PUPIL_COLOR = (0, 121, 241)

BODY_RADIUS = 50.0
LEG_RADIUS = BODY_RADIUS / 3.0
LEG_AMPLITUDE = 2.0
LEG_CYCLE = math.radians(660)


class EnemyState(Enum):
    ALIVE = "alive"
    KNOCKEDOUT = "knockedout"
    STOP = "stop"


_TRANSITIONS = {
    EnemyState.ALIVE: {EnemyState.KNOCKEDOUT, EnemyState.STOP},
    EnemyState.KNOCKEDOUT: {EnemyState.ALIVE, EnemyState.STOP},
    EnemyState.STOP: {EnemyState.STOP},
}


def _ellipse(surf, color, cx, cy, rx, ry):
    pygame.draw.ellipse(surf, color, (int(cx - rx), int(cy - ry), int(rx * 2), int(ry * 2)))


class Enemy:
    def __init__(self, pos=(0.0, 0.0), rng=random):
        self.pos = np.array(pos, dtype=float)
        self.hit_radius = ENEMY_HIT_RADIUS
        self.rng = rng
        self._panic = Countdown(PANIC_DURATION)
        self._knockout = Countdown(KNOCKOUT_DURATION)
        self.reset(pos)

    def reset(self, pos=None):
        if pos is not None:
            self.pos[:] = pos
        self.direction = DIR_R
        self.leg_anim_timer = 0.0
        self._knockout.clear()
        self._panic.clear()
        self._state = EnemyState.ALIVE

    @property
    def x(self):
        return self.pos[0]

    @x.setter
    def x(self, value):
        self.pos[0] = value

    def score(self):
        return ENEMY_KNOCKOUT_SCORE

    # ──────────────────────────────────────────────────────
    # State machine
    # ──────────────────────────────────────────────────────
    @property
    def state(self):
        return self._state

    def _set_state(self, new_state):
        old = self._state
        self._state = checked_transition(old, new_state, _TRANSITIONS, "Enemy")
        if old is not new_state:
            log_debug(f"Enemy {old.name} -> {new_state.name} x={self.x:.1f}")

    def finish(self):
        self._set_state(EnemyState.STOP)

    def knockout(self):
        if self._state is not EnemyState.ALIVE:
            raise InvalidStateTransition(f"Enemy: cannot knock out from {self._state.name}")
        self._knockout.start()
        self._set_state(EnemyState.KNOCKEDOUT)

    @property
    def knockedout(self):
        return self._state is EnemyState.KNOCKEDOUT

    @property
    def knockout_timer(self):
        return self._knockout.remaining

    def start_panic(self):
        if self._state is EnemyState.STOP:
            raise InvalidStateTransition("Enemy: cannot panic once stopped")
        self._panic.start()

    @property
    def panic(self):
        return self._panic.active

    @property
    def panic_timer(self):
        return self._panic.remaining

    # ──────────────────────────────────────────────────────
    # Movement / AI
    # ──────────────────────────────────────────────────────
    def speed(self):
        if self._state is EnemyState.ALIVE:
            return ENEMY_PANIC_SPEED if self.panic else ENEMY_SPEED
        if self._state is EnemyState.KNOCKEDOUT:
            # stunned drift: fastest right after the hit, jittered every call
            jitter = self.rng.randrange(2 * KNOCKOUT_SPEED_JITTER) - KNOCKOUT_SPEED_JITTER
            return (KNOCKOUT_BASE_SPEED + jitter) * self.knockout_timer ** 2
        return 0.0

    def run_ai(self, player_x, stage_width):
        """Head for the player along the shorter way round, or away while panicking."""
        if self._state is not EnemyState.ALIVE:
            return self.direction
        dist_r, dist_l = circular_distances(self.x, player_x, stage_width)
        if self.panic:
            self.direction = DIR_R if dist_l <= dist_r else DIR_L
        else:
            self.direction = DIR_L if dist_l <= dist_r else DIR_R
        return self.direction

    def update(self, dt):
        if self._state in (EnemyState.ALIVE, EnemyState.KNOCKEDOUT):
            self.pos[0] += self.direction * self.speed() * dt
        if self._state is EnemyState.KNOCKEDOUT and self._knockout.tick(dt):
            self._set_state(EnemyState.ALIVE)
        self._panic.tick(dt)
        self.leg_anim_timer += dt

    # ──────────────────────────────────────────────────────
    # Draw
    # ──────────────────────────────────────────────────────
    def draw(self, surf):
        x, y = float(self.pos[0]), float(self.pos[1])
        facing = -1.0 if self.direction == DIR_L else 1.0

        if not self.knockedout:
            color = PANIC_COLOR if self.panic else BODY_COLOR
            leg_yofs = LEG_AMPLITUDE * math.cos(LEG_CYCLE * self.leg_anim_timer)
            pygame.draw.polygon(surf, color, sector_polygon((x, y), BODY_RADIUS, 45, 315, 32))
            pygame.draw.rect(surf, color, (int(x - BODY_RADIUS), int(y),
                                           int(BODY_RADIUS * 2), int(LEG_RADIUS * 2)))
            leg_y = y + BODY_RADIUS - LEG_RADIUS + leg_yofs
            for leg_x in (x - BODY_RADIUS + LEG_RADIUS,
                          x - BODY_RADIUS + LEG_RADIUS * 2.2,
                          x + BODY_RADIUS - LEG_RADIUS * 2.2,
                          x + BODY_RADIUS - LEG_RADIUS):
                pygame.draw.circle(surf, color, (int(leg_x), int(leg_y)), int(LEG_RADIUS))

        eye_x = x + 10.0 * facing
        pupil_x = x + 15.0 * facing
        eye_y = y - 10.0
        for side in (-17.5, 17.5):
            _ellipse(surf, EYE_COLOR, eye_x + side, eye_y, 12.0, 16.0)
            _ellipse(surf, PUPIL_COLOR, pupil_x + side, eye_y, 8.0, 10.0)
