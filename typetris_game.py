"""Top-level game state machine: routes events to the board and timer"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from typetris_board import Board, FallOutcome, splash_board
from typetris_config import Settings
from typetris_timer import Timer
from typetris_words import WordDealer

logger = logging.getLogger(__name__)


class GameMode(Enum):
    SPLASH = "splash"
    PLAYING = "playing"
    GAME_OVER = "game_over"


# -------------------------------------------------------------
# EVENTS
# -------------------------------------------------------------
@dataclass(frozen=True)
class Tick:
    delta: float    # elapsed seconds since the previous tick


@dataclass(frozen=True)
class Type:
    char: str


@dataclass(frozen=True)
class Delete:
    pass


@dataclass(frozen=True)
class Next:
    pass


@dataclass(frozen=True)
class Left:
    pass


@dataclass(frozen=True)
class Right:
    pass


@dataclass(frozen=True)
class NewGame:
    pass


Event = Union[Tick, Type, Delete, Next, Left, Right, NewGame]


class Game:
    """
    Owns the board, the timer and the score.

    handle_event() returns whether anything visible changed so a renderer
    can skip redraws. Outside PLAYING only NewGame is accepted.
    """

    def __init__(self, settings: Optional[Settings] = None, words=None):
        self.settings = settings or Settings()
        self._words_override = words
        self._build(self.settings)

    def _build(self, settings: Settings) -> None:
        self.words = self._words_override or WordDealer(seed=settings.seed)
        self.timer = Timer(settings.fall_interval, settings.spawn_interval, settings.drift_interval)
        self.score = 0
        if settings.starts_with_splash:
            self.mode = GameMode.SPLASH
            self.board = splash_board(settings.width, settings.height, self.words)
        else:
            self.mode = GameMode.PLAYING
            self.board = Board(settings.width, settings.height, self.words,
                               starts_with_one=settings.starts_with_one)

    # ---------- accessors ----------
    def is_splash(self) -> bool:
        return self.mode is GameMode.SPLASH

    def is_playing(self) -> bool:
        return self.mode is GameMode.PLAYING

    def is_game_over(self) -> bool:
        return self.mode is GameMode.GAME_OVER

    # ---------- events ----------
    def handle_event(self, event: Event) -> bool:
        if isinstance(event, NewGame):
            self._build(self.settings.with_(starts_with_splash=False))
            logger.info("new game on a %dx%d board", self.board.width, self.board.height)
            return True
        if not self.is_playing():
            return False

        if isinstance(event, Tick):
            return self._tick(event.delta)
        if isinstance(event, Type):
            focus = self.board.get_focused()
            return focus is not None and focus.add_char(event.char)
        if isinstance(event, Delete):
            focus = self.board.get_focused()
            return focus is not None and focus.delete_char()
        if isinstance(event, Next):
            return self.board.focus_next()
        if isinstance(event, Left):
            return self.board.left()
        if isinstance(event, Right):
            return self.board.right()
        raise TypeError(f"unknown event {event!r}")

    def _game_over(self) -> bool:
        self.mode = GameMode.GAME_OVER
        logger.info("game over, score %d", self.score)
        return True

    def _tick(self, delta: float) -> bool:
        signal = self.timer.tick(delta)
        changed = False
        if signal.should_fall:
            outcome = self.board.fall_tick(signal.should_drift)
            if outcome is FallOutcome.GAME_OVER:
                return self._game_over()
            if outcome is FallOutcome.BLOCKS_SETTLED:
                removed = self.board.clear_completed()
                rows = {b.y for b in removed}
                if rows:
                    self.score += len(rows)
                    logger.info("cleared %d row(s), score %d", len(rows), self.score)
                changed = True
            elif outcome is FallOutcome.UPDATED:
                changed = True
        if signal.should_spawn:
            if not self.board.spawn_block():
                return self._game_over()
            changed = True
        return changed
