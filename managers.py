# managers.py

import random

from config import DOT_START_OFFSET_X, DOT_LAYOUT_MAX_ATTEMPTS
from entities_dot import Dot
from entities_utils import check_collision, DotLayoutError
from logging_utils import log_debug


class Countdown:
    """Frame-driven timer that drains by ``dt`` and stops at zero."""

    def __init__(self, duration):
        self.duration = duration
        self.remaining = 0.0

    @property
    def active(self):
        return self.remaining > 0.0

    def start(self):
        self.remaining = self.duration

    def clear(self):
        self.remaining = 0.0

    def tick(self, dt):
        """Drain by ``dt``; True only on the call that brings it to zero."""
        if self.remaining <= 0.0:
            return False
        self.remaining = max(0.0, self.remaining - dt)
        return self.remaining <= 0.0


class DotBatch:
    """Evenly spaced dots along the track, exactly one of them power-type."""

    def __init__(self, stage, dot_count, rng=random):
        self.rng = rng
        interval = stage.width / float(dot_count) if dot_count else 0.0
        self.dots = [
            Dot((DOT_START_OFFSET_X + i * interval, stage.offset[1]))
            for i in range(dot_count)
        ]
        self.power_index = None

    def __iter__(self):
        return iter(self.dots)

    def __len__(self):
        return len(self.dots)

    def active_dots(self):
        return [d for d in self.dots if d.active]

    def all_eaten(self):
        return all(d.eaten for d in self.dots)

    def reset(self, player_pos, clearance_radius):
        """Reactivate every dot and pick a power dot clear of ``player_pos``."""
        if not self.dots:
            raise DotLayoutError("dot batch is empty")
        for attempt in range(1, DOT_LAYOUT_MAX_ATTEMPTS + 1):
            index = self.rng.randrange(len(self.dots))
            for i, dot in enumerate(self.dots):
                dot.reset(is_power=i == index)
            power_dot = self.dots[index]
            if not check_collision(player_pos, clearance_radius, power_dot.pos, power_dot.radius):
                self.power_index = index
                log_debug(f"DotBatch.reset power_index={index} attempts={attempt}")
                return index
        raise DotLayoutError(
            f"no power dot clears the player after {DOT_LAYOUT_MAX_ATTEMPTS} attempts"
        )

    def draw(self, surf):
        for dot in self.dots:
            dot.draw(surf)
