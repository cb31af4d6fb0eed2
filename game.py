# game.py
# ──────────────────────────────────────────────────────────────
# Simulation loop: owns the stage, the dot batch, one player,
# one enemy and the session, and steps them once per frame.
# ──────────────────────────────────────────────────────────────

import random

import pygame

from config import DIR_R, DIR_L, STAGE_NAME, get_stage_config
from entities import Player, Enemy, check_collision
from game_session import GameSession
from logging_utils import log_debug
from managers import DotBatch
from stage import Stage
from ui import Hud

START_OFFSET_RATIO = 0.333
BACKGROUND = (0, 0, 0)

KEY_DIRECTIONS = {
    pygame.K_RIGHT: DIR_R,
    pygame.K_LEFT: DIR_L,
}


# ──────────────────────────────────────────────────────────────
# Main Game class
# ──────────────────────────────────────────────────────────────
class Game:
    def __init__(self, stage_config=None, rng=None):
        self.config = stage_config if stage_config is not None else get_stage_config(STAGE_NAME)
        self.rng = rng if rng is not None else random
        log_debug(f"Game.__init__ config={self.config}")

        self.session = GameSession()
        self.stage = Stage.from_config(self.config)
        self.player = Player()
        self.enemy = Enemy(rng=self.rng)
        self.dots = DotBatch(self.stage, self.config.dot_count, rng=self.rng)
        self.hud = Hud(self.config.screen_width, self.config.screen_height)

        # latest direction key pressed since the previous frame
        self.pressed_direction = None
        self.reset()

    # ──────────────────────────────────────────────────────
    # Reset helpers
    def reset_dots(self):
        return self.dots.reset(self.player.pos, 2 * self.player.hit_radius)

    def reset(self):
        log_debug("Game.reset")
        self.session.reset(keep_high_score=True)
        track_y = self.stage.offset[1]
        spread = self.stage.width * START_OFFSET_RATIO
        self.player.reset((self.stage.center[0] - spread, track_y))
        self.enemy.reset((self.stage.center[0] + spread, track_y))
        self.pressed_direction = None
        self.reset_dots()

    # ──────────────────────────────────────────────────────
    # Event handling
    def handle_event(self, event):
        if event.type != pygame.KEYDOWN:
            return
        if event.key in KEY_DIRECTIONS:
            self.pressed_direction = KEY_DIRECTIONS[event.key]
        elif event.key == pygame.K_r:
            self.reset()

    # ──────────────────────────────────────────────────────
    # Gameplay helpers
    def _wrap(self, entity):
        entity.x = self.stage.wrap_x(entity.x)

    def _eat_dots(self):
        for dot in self.dots:
            if dot.eaten:
                continue
            if check_collision(self.player.pos, self.player.hit_radius, dot.pos, dot.radius):
                self.session.add_score(dot.score())
                if dot.is_power:
                    log_debug(f"Game power dot eaten x={dot.x:.1f}")
                    self.player.start_powerup()
                    self.enemy.start_panic()
                dot.hide()

    def _meet_enemy(self):
        if self.enemy.knockedout:
            return
        if not check_collision(self.player.pos, self.player.hit_radius,
                               self.enemy.pos, self.enemy.hit_radius):
            return
        if self.player.powerup:
            self.enemy.knockout()
            self.session.add_score(self.enemy.score())
        else:
            self.session.finish()
            self.enemy.finish()
            self.player.finish()

    # ──────────────────────────────────────────────────────
    # Update loop
    def update(self, dt):
        pressed, self.pressed_direction = self.pressed_direction, None
        self.session.update(dt)

        if self.session.ready:
            return

        if self.session.game_over:
            # only the failure animation keeps running
            self.player.update(dt, pressed)
            self.enemy.update(dt)
            return

        # decided from the player's position before anyone moves
        self.enemy.run_ai(player_x=self.player.x, stage_width=self.stage.width)

        self.player.update(dt, pressed)
        self.enemy.update(dt)
        for character in (self.player, self.enemy):
            self._wrap(character)

        self._eat_dots()
        self._meet_enemy()

        if self.dots.all_eaten():
            self.reset_dots()

    # ──────────────────────────────────────────────────────
    # Draw loop
    def draw(self, surf):
        surf.fill(BACKGROUND)
        self.stage.draw(surf)
        self.dots.draw(surf)
        self.player.draw(surf)
        self.enemy.draw(surf)
        self.hud.draw(surf, self.session)
