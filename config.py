# config.py
# All configurable constants and settings

import os
from dataclasses import dataclass

# Optional debug logging toggle – when enabled, state transitions, batch
# resets and score events are appended to logs/debug.txt. Disabled by
# default for normal play sessions.
LOG_ENABLED = bool(int(os.getenv("DOTLINE_LOG_ENABLED", "0")))
LOG_FILE_PATH = "logs/debug.txt"

# Frames per second
FPS = 60


@dataclass(frozen=True)
class StageConfig:
    screen_width: int
    screen_height: int
    dot_count: int


STAGE_PRESETS = {
    "small":  StageConfig(screen_width=720,  screen_height=360, dot_count=10),
    "normal": StageConfig(screen_width=1280, screen_height=480, dot_count=20),
    "large":  StageConfig(screen_width=1920, screen_height=720, dot_count=40),
}

STAGE_NAME = os.getenv("DOTLINE_STAGE", "normal")


def get_stage_config(name):
    """Return the preset called ``name``."""
    try:
        return STAGE_PRESETS[name]
    except KeyError:
        raise ValueError(
            f"unknown stage preset {name!r}, expected one of {sorted(STAGE_PRESETS)}"
        ) from None


# Facing directions along the track
DIR_R = 1.0
DIR_L = -1.0

# Session
READY_DURATION = 2.0

# Player
PLAYER_SPEED = 360.0
PLAYER_POWERUP_SPEED = PLAYER_SPEED * 1.05
POWERUP_DURATION = 3.0
PLAYER_DRAW_RADIUS = 50.0
PLAYER_HIT_RADIUS = 40.0
POWERUP_RADIUS_SCALE = 2.5
MOUTH_OPEN_TIME = (1.0 / 60.0) * 4
MOUTH_CYCLE_TIME = (1.0 / 60.0) * 8

# Enemy
ENEMY_SPEED = 440.0
ENEMY_PANIC_SPEED = ENEMY_SPEED * 0.25
PANIC_DURATION = 3.0
KNOCKOUT_DURATION = 1.5
KNOCKOUT_BASE_SPEED = 2000.0
KNOCKOUT_SPEED_JITTER = 1000
ENEMY_HIT_RADIUS = 40.0
ENEMY_KNOCKOUT_SCORE = 200

# Dots
DOT_SCORE_NORMAL = 10
DOT_SCORE_POWER = 50
DOT_RADIUS_NORMAL = 8.0
DOT_RADIUS_POWER = 24.0
DOT_START_OFFSET_X = 20.0
# Retry budget when choosing a power dot that clears the player
DOT_LAYOUT_MAX_ATTEMPTS = 100

# Settings dictionary re-read by the frame driver
settings_data = {
    "FPS": FPS,
    "STAGE": STAGE_NAME,
}
