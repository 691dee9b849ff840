from __future__ import annotations

from typing import Iterable, Tuple

from typetris_block import Block, BlockState
from typetris_board import Board


class ScriptedWords:
    """Word source that hands out fixed (word, column) placements in order."""

    def __init__(self, placements: Iterable[Tuple[str, int]] = ()):
        self.placements = list(placements)
        self._x = 0

    def random_word(self, max_length: int) -> str:
        word, self._x = self.placements.pop(0)
        assert len(word) <= max_length
        return word

    def randrange(self, n: int) -> int:
        assert 0 <= self._x < n
        return self._x


def interactable(text: str, x: int, y: int) -> Block:
    return Block.line(text, BlockState.INTERACTABLE, x, y)


def falling(text: str, x: int, y: int) -> Block:
    return Block.line(text, BlockState.FALLING, x, y)


def settled(text: str, x: int, y: int) -> Block:
    return Block.line(text, BlockState.SETTLED, x, y)


def typed(block: Block) -> Block:
    for ch in block.assigned_text:
        block.add_char(ch)
    return block


def populated() -> Board:
    """16x32 board with two complete rows (31 and 28) among partial ones."""
    return Board(16, 32, ScriptedWords(), blocks=[
        settled("Taylor", 10, 31),
        settled("hello", 0, 31),
        settled("world", 5, 31),
        settled("Supercali", 3, 30),
        settled("Rustaceanvim", 2, 29),
        settled("LazyVim", 0, 28),
        settled("folke", 7, 28),
        settled("four", 12, 28),
        settled("Stranger", 1, 27),
        settled("Contessa", 3, 26),
        settled("im", 7, 25),
        settled("outtacotta", 4, 24),
        settled("ideas", 5, 23),
    ])


def focused_count(board: Board) -> int:
    return sum(1 for b in board.blocks if b.is_interactable())
