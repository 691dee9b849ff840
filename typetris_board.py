"""Board: gravity, settling, row clearing and focus handling"""
from __future__ import annotations
import logging
from enum import Enum
from itertools import groupby
from typing import List, Optional

from typetris_block import Block, BlockState

logger = logging.getLogger(__name__)

SPLASH_WORDS = ("type", "each", "word", "then", "drop", "it", "in")


class FallOutcome(Enum):
    GAME_OVER = "game_over"
    BLOCKS_SETTLED = "blocks_settled"
    UPDATED = "updated"
    NO_CHANGE = "no_change"


class Board:
    """
    Owns every block on the field.

    Invariants:
      • no two cells of different blocks share a position
      • at most one block is INTERACTABLE (the focused block)
      • every block lies within [0, width) x [0, height)
    """

    def __init__(self, width: int, height: int, words, starts_with_one: bool = False,
                 blocks: Optional[List[Block]] = None):
        self.width = width
        self.height = height
        self.words = words
        self.blocks: List[Block] = list(blocks) if blocks else []
        if starts_with_one:
            self.spawn_block()

    # ---------- collision helpers ----------
    def collides(self, block: Block) -> bool:
        """True if the block overlaps another block or leaves the field."""
        box = block.bounding_box
        if box.right > self.width or box.bottom > self.height:
            return True
        return any(other is not block and block.intersects(other) for other in self.blocks)

    def no_overlap(self) -> bool:
        cells = [c.position for b in self.blocks for c in b.cells]
        return len(cells) == len(set(cells))

    # ---------- gravity ----------
    def fall_tick(self, include_interactable: bool = False) -> FallOutcome:
        """Move every unsettled block down one row, settling the ones that land.

        The focused block only moves when include_interactable is set (drift).
        """
        newly_settled = False
        has_update = False
        for block in self.blocks:
            if block.is_settled() or (block.is_interactable() and not include_interactable):
                continue
            block.shift(0, 1)
            if self.collides(block):
                block.shift(0, -1)
                block.state = BlockState.SETTLED
                newly_settled = True
                if block.y == 0:
                    return FallOutcome.GAME_OVER
            else:
                has_update = True
        if newly_settled:
            return FallOutcome.BLOCKS_SETTLED
        return FallOutcome.UPDATED if has_update else FallOutcome.NO_CHANGE

    # ---------- row clearing ----------
    def sort(self) -> None:
        self.blocks.sort(key=lambda b: (b.state, b.position))

    def _row_is_complete(self, row: List[Block]) -> bool:
        if row[0].x != 0:
            return False
        for a, b in zip(row, row[1:]):
            if a.bounding_box.right != b.x:
                return False
        return row[-1].bounding_box.right == self.width

    def clear_completed(self) -> List[Block]:
        """Remove settled blocks that fill whole rows and return them.

        Settled blocks above the lowest cleared row go back to FALLING so
        they drop into the gap on the following ticks.
        """
        self.sort()
        settled = [b for b in self.blocks if b.is_settled()]
        cleared_rows = []
        for y, group in groupby(settled, key=lambda b: b.y):
            if self._row_is_complete(list(group)):
                cleared_rows.append(y)
        if not cleared_rows:
            return []

        lowest = max(cleared_rows)
        removed: List[Block] = []
        kept: List[Block] = []
        for block in self.blocks:
            if block.is_settled() and block.y in cleared_rows:
                removed.append(block)
                continue
            if block.is_settled() and block.y < lowest:
                block.state = BlockState.FALLING
            kept.append(block)
        self.blocks = kept
        logger.debug("cleared rows %s, %d blocks cascading", cleared_rows,
                     sum(1 for b in kept if b.is_falling()))
        return removed

    # ---------- focus ----------
    def get_focused_index(self) -> Optional[int]:
        for i, block in enumerate(self.blocks):
            if block.is_interactable():
                return i
        return None

    def get_focused(self) -> Optional[Block]:
        i = self.get_focused_index()
        return None if i is None else self.blocks[i]

    # Blocks are mutable objects, so the mutable accessor is the same lookup.
    get_focused_mut = get_focused

    def focus_next(self) -> bool:
        focus = self.get_focused()
        if focus is None:
            return False
        focus.state = BlockState.FALLING
        return True

    def spawn_block(self) -> bool:
        """Place a freshly drawn block on row 0 and focus it.

        Returns False, leaving the board untouched, when row 0 has no room for it.
        """
        block = Block.random(self.width, self.words)
        if self.collides(block):
            logger.debug("no room to spawn %r at x=%d", block.assigned_text, block.x)
            return False
        self.focus_next()
        self.blocks.append(block)
        logger.debug("spawned %r at x=%d", block.assigned_text, block.x)
        return True

    def push_block(self, block: Block) -> None:
        self.blocks.append(block)

    # ---------- horizontal movement ----------
    def _occupied(self, x: int, y: int, ignore: Block) -> bool:
        for block in self.blocks:
            if block is ignore or block.y != y:
                continue
            if block.x <= x < block.bounding_box.right:
                return True
        return False

    def left(self) -> bool:
        focus = self.get_focused()
        if focus is None or not focus.is_movable():
            return False
        if focus.x == 0 or self._occupied(focus.x - 1, focus.y, focus):
            return False
        focus.shift(-1, 0)
        return True

    def right(self) -> bool:
        focus = self.get_focused()
        if focus is None or not focus.is_movable():
            return False
        edge = focus.bounding_box.right
        if edge >= self.width or self._occupied(edge, focus.y, focus):
            return False
        focus.shift(1, 0)
        return True


def splash_board(width: int, height: int, words) -> Board:
    """Decorative settled layout shown before the first game."""
    board = Board(width, height, words)
    y = height - 1
    x = 0
    for word in SPLASH_WORDS:
        if len(word) > width:
            continue
        if x + len(word) > width:
            y -= 1
            x = 0
        if y < 1:
            break
        board.push_block(Block.line(word, BlockState.SETTLED, x, y))
        x += len(word) + 1
    return board
