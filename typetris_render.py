"""
Rendering helpers for Typetris.

- Pre-render the static background (grid + panel frame) once per Dims.
- Cache a surface per letter so block text is not re-rendered every frame.
- Cache HUD text surfaces; re-render only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional, Tuple
from typetris_block import Block
from typetris_game import Game
from typetris_layout import Dims

Color = Tuple[int,int,int]

@dataclass(frozen=True)
class Swatch:
    bg: Color = (10,13,34)
    grid: Color = (40,50,90)
    regular_block: Color = (70,96,200)
    disabled_block: Color = (64,70,96)
    success: Color = (60,170,100)
    error: Color = (200,70,80)
    reticle: Color = (255,224,102)
    text: Color = (240,240,250)
    hud: Color = (200,210,240)
    hud_dim: Color = (165,175,215)

@dataclass
class HudCache:
    score: int = -1
    mode: str = ""
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    message: Optional[list] = None
    controls: Optional[list] = None

SPLASH_TEXT = [
    "Type each word before you can move it.",
    "Line up and fill each row to clear it.",
    "Left/Right arrows move the word.",
    "Enter, Tab or Space drops it.",
    "Press Enter to play.",
]

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, cols: int, rows: int, font: pygame.font.Font,
                 big_font: pygame.font.Font, swatch: Swatch = Swatch()):
        self.dims = dims
        self.cols = cols
        self.rows = rows
        self.font = font
        self.big_font = big_font
        self.swatch = swatch
        self.cell_font = pygame.font.SysFont(None, int(dims.cell * 0.9))
        self._letters: Dict[str, pygame.Surface] = {}
        self._make_static()
        self.hud = HudCache()

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(self.swatch.bg)
        for x in range(self.cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, self.swatch.grid, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(self.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, self.swatch.grid, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)

    def letter(self, ch: str) -> pygame.Surface:
        s = self._letters.get(ch)
        if s is None:
            s = self._letters[ch] = self.cell_font.render(ch, True, self.swatch.text)
        return s

    def cell_rect(self, bx: int, by: int) -> pygame.Rect:
        c = self.dims.cell
        return pygame.Rect(self.dims.board_x + bx*c, self.dims.board_y + by*c, c, c)

    # ---------- Blocks ----------
    def draw_block(self, screen: pygame.Surface, block: Block, focused: bool):
        sw = self.swatch
        for cell in block.cells:
            r = self.cell_rect(cell.position.x, cell.position.y)
            if focused and cell.input is not None:
                col = sw.success if cell.is_correct() else sw.error
            else:
                col = sw.regular_block if block.is_interactable() else sw.disabled_block
            pygame.draw.rect(screen, col, r.inflate(-2, -2))
            glyph = self.letter(cell.assigned)
            screen.blit(glyph, glyph.get_rect(center=r.center))
        outline = self.cell_rect(block.x, block.y)
        outline.width = block.width * self.dims.cell
        pygame.draw.rect(screen, (0,0,0), outline, 2)

    def draw_reticle(self, screen: pygame.Surface, block: Block):
        n = len(block.input_text)
        if n >= len(block.cells):
            return
        pos = block.cells[n].position
        r = self.cell_rect(pos.x, pos.y)
        radius = int(self.dims.cell * 0.4)
        pygame.draw.circle(screen, self.swatch.reticle, r.center, radius, 2)
        inset = max(2, self.dims.cell // 10)
        for cx, cy in (r.topleft, r.topright, r.bottomleft, r.bottomright):
            dx = inset if cx == r.left else -inset
            dy = inset if cy == r.top else -inset
            pygame.draw.line(screen, self.swatch.reticle, (cx + dx, cy + dy), (cx + 2*dx, cy + 2*dy), 2)

    def draw_board(self, screen: pygame.Surface, game: Game):
        screen.blit(self.bg, (0,0))
        focus_index = game.board.get_focused_index()
        for i, block in enumerate(game.board.blocks):
            self.draw_block(screen, block, i == focus_index)
        focus = game.board.get_focused()
        if focus is not None:
            self.draw_reticle(screen, focus)

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, game: Game):
        d = self.dims
        f = self.font
        sw = self.swatch
        if self.hud.title is None:
            self.hud.title = f.render("Typetris", True, (197,202,233))
        if game.score != self.hud.score:
            self.hud.score = game.score
            self.hud.score_s = self.big_font.render(f"Score: {game.score}", True, sw.hud)
        if game.mode.value != self.hud.mode:
            self.hud.mode = game.mode.value
            if game.is_splash():
                self.hud.message = [f.render(line, True, sw.hud) for line in SPLASH_TEXT]
            elif game.is_game_over():
                self.hud.message = [self.big_font.render("Game Over", True, sw.error),
                                    f.render("Press Enter to restart", True, sw.hud)]
            else:
                self.hud.message = []
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        y = d.panel_y + 44
        if not game.is_splash():
            screen.blit(self.hud.score_s, (d.panel_x + 12, y)); y += 48
        for surf in self.hud.message:
            screen.blit(surf, (d.panel_x + 12, y)); y += surf.get_height() + 6
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, sw.hud),
                f.render("letters Type", True, sw.hud_dim),
                f.render("Backspace Delete", True, sw.hud_dim),
                f.render("←/→ or Ctrl+H/L Move", True, sw.hud_dim),
                f.render("Enter/Tab/Space Drop", True, sw.hud_dim),
                f.render("F2 New game • F1 Overlay", True, sw.hud_dim),
            ]
        y = max(y + 20, d.panel_y + d.board_h - 20 * len(self.hud.controls) - 12)
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20

