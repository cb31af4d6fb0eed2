"""Session-level state: READY countdown, PLAYING, GAME_OVER and the scores."""

from __future__ import annotations

from enum import Enum

from config import READY_DURATION
from entities_utils import checked_transition
from logging_utils import log_debug
from managers import Countdown


class GameState(Enum):
    READY = "ready"
    PLAYING = "playing"
    GAME_OVER = "gameover"


_TRANSITIONS = {
    GameState.READY: {GameState.PLAYING, GameState.GAME_OVER},
    GameState.PLAYING: {GameState.GAME_OVER},
    GameState.GAME_OVER: {GameState.GAME_OVER},
}


class GameSession:
    """One playthrough's state machine plus the current and high score.

    ``current_score`` is the only way to change the score and every
    assignment lifts ``high_score`` along with it.
    """

    def __init__(self) -> None:
        self._ready_timer = Countdown(READY_DURATION)
        self.reset()

    def reset(self, keep_high_score: bool = False) -> None:
        self._state = GameState.READY
        self._current_score = 0
        if not keep_high_score:
            self._high_score = 0
        self._ready_timer.start()
        log_debug(f"GameSession.reset keep_high_score={keep_high_score} high_score={self._high_score}")

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def state_timer(self) -> float:
        return self._ready_timer.remaining

    @property
    def high_score(self) -> int:
        return self._high_score

    @property
    def current_score(self) -> int:
        return self._current_score

    @current_score.setter
    def current_score(self, new_score: int) -> None:
        if new_score < 0:
            raise ValueError(f"score cannot be negative: {new_score}")
        self._current_score = new_score
        if new_score > self._high_score:
            self._high_score = new_score

    def add_score(self, points: int) -> None:
        self.current_score = self._current_score + points

    @property
    def ready(self) -> bool:
        return self._state is GameState.READY

    @property
    def playing(self) -> bool:
        return self._state is GameState.PLAYING

    @property
    def game_over(self) -> bool:
        return self._state is GameState.GAME_OVER

    def _set_state(self, new_state: GameState) -> None:
        self._state = checked_transition(self._state, new_state, _TRANSITIONS, "GameSession")

    def update(self, dt: float) -> None:
        if self._state is GameState.READY and self._ready_timer.tick(dt):
            self._set_state(GameState.PLAYING)
            log_debug("GameSession READY -> PLAYING")

    def finish(self) -> None:
        if self._state is not GameState.GAME_OVER:
            log_debug(f"GameSession {self._state.name} -> GAME_OVER score={self._current_score}")
        self._set_state(GameState.GAME_OVER)
