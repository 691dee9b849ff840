"""Keyboard handling: pygame keys -> game events, plus DAS/ARR for held arrows"""
from typing import Optional
import pygame
from typetris_config import CONFIG
from typetris_game import Delete, Event, Left, NewGame, Next, Right, Type

NEXT_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_TAB, pygame.K_SPACE)


def translate_key(e, accepting_new_game: bool = False) -> Optional[Event]:
    """Map a KEYDOWN event to a game event. Plain arrows are left to ShiftRepeat."""
    if e.key == pygame.K_F2:
        return NewGame()
    if accepting_new_game:
        return NewGame() if e.key in (pygame.K_RETURN, pygame.K_KP_ENTER) else None
    ctrl = bool(e.mod & pygame.KMOD_CTRL)
    if ctrl and e.key == pygame.K_h: return Left()
    if ctrl and e.key == pygame.K_l: return Right()
    if e.key in NEXT_KEYS: return Next()
    if e.key == pygame.K_BACKSPACE: return Delete()
    ch = getattr(e, "unicode", "")
    if len(ch) == 1 and ch.isascii() and ch.isprintable():
        return Type(ch)
    return None


class ShiftRepeat:
    def __init__(self):
        self.dir=0; self.held_ms=0; self.last=0; self.initial=False
    def update(self, dt, left, right) -> Optional[Event]:
        step = self._step(dt, left, right)
        if step < 0: return Left()
        if step > 0: return Right()
        return None
    def _step(self, dt, left, right):
        nd=(-1 if left else 0)+(1 if right else 0)
        if nd!=self.dir:
            self.dir=nd; self.held_ms=0; self.last=0; self.initial=False
        if self.dir==0: return 0
        self.held_ms+=dt
        if not self.initial:
            self.initial=True; return self.dir
        if self.held_ms < CONFIG["DAS_MS"]: return 0
        arr=CONFIG["ARR_MS"]
        if arr==0: return self.dir
        self.last+=dt
        if self.last>=arr:
            self.last=0; return self.dir
        return 0
