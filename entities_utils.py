# entities_utils.py

import math
import numpy as np


class InvalidStateTransition(ValueError):
    """An entity was asked to enter a state it cannot reach from where it is."""


class DotLayoutError(RuntimeError):
    """No power-dot placement clears the player."""


def sector_polygon(center, radius, start_deg, end_deg, segments=36):
    """Points of a filled circle sector, angles in degrees.

    0° points down and 90° points right, so a wedge missing around 90°
    faces right and one missing around 270° faces left.
    """
    cx, cy = center
    pts = [(cx, cy)]
    step = (end_deg - start_deg) / segments
    for i in range(segments + 1):
        angle = math.radians(start_deg + step * i)
        pts.append((cx + radius * math.sin(angle),
                    cy + radius * math.cos(angle)))
    return pts


def check_collision(c1, r1, c2, r2):
    """Return True if two circles overlap or touch."""
    distance = np.linalg.norm(np.asarray(c1, dtype=float) - np.asarray(c2, dtype=float))
    return distance <= (r1 + r2)


def wrap_position(x, width):
    """Snap a track position that left [0, width] onto the opposite edge."""
    if x > width:
        return 0.0
    if x < 0:
        return float(width)
    return x


def circular_distances(from_x, to_x, width):
    """Distance travelling right and travelling left from ``from_x`` to ``to_x``."""
    dist_r = to_x - from_x
    if dist_r < 0:
        dist_r += width
    dist_l = from_x - to_x
    if dist_l < 0:
        dist_l += width
    return dist_r, dist_l


def checked_transition(current, target, allowed, owner):
    """Validate ``current -> target`` against an allow-list and return ``target``."""
    if not isinstance(target, type(current)):
        raise InvalidStateTransition(f"{owner}: {target!r} is not a {type(current).__name__}")
    if target not in allowed.get(current, ()):
        raise InvalidStateTransition(f"{owner}: cannot go from {current.name} to {target.name}")
    return target


def fade(color, alpha):
    """RGBA tuple for ``color`` at opacity ``alpha`` in [0, 1]."""
    return (*color[:3], int(255 * max(0.0, min(alpha, 1.0))))
