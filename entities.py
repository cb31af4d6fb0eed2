# entities.py

# re‑export everything the game loop needs

from entities_utils import (
    check_collision,
    wrap_position,
    circular_distances,
    InvalidStateTransition,
    DotLayoutError
)

from entities_player import Player, PlayerState

from entities_enemy import Enemy, EnemyState

from entities_dot import Dot
