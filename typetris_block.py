"""Block model: word cells, typing and the block state machine"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional

from typetris_geometry import BoundingBox, Position


class InvalidBlockText(ValueError):
    """Raised when a block is built from empty or non-ASCII text."""


class BlockState(IntEnum):
    # Sort order matters: settled blocks group first when the board is sorted.
    SETTLED = 0
    FALLING = 1
    INTERACTABLE = 2


def is_typeable(ch: str) -> bool:
    return len(ch) == 1 and ch.isascii() and ch.isalpha()


@dataclass
class Cell:
    assigned: str
    position: Position
    input: Optional[str] = None

    def __post_init__(self):
        if len(self.assigned) != 1 or not self.assigned.isascii():
            raise InvalidBlockText(f"cell character must be a single ASCII char, got {self.assigned!r}")

    def is_correct(self) -> bool:
        return self.input is not None and self.input == self.assigned


@dataclass
class Block:
    """
    A rigid group of character cells spelling one word.

    Lifecycle:
      • INTERACTABLE: the focused block, accepts typing; moves left/right once correct
      • FALLING: released, moved down by gravity
      • SETTLED: resting on the floor or another block

    The bounding box always matches the cell positions; every shift moves both.
    """
    state: BlockState
    cells: List[Cell]
    bounding_box: BoundingBox = field(init=False)

    def __post_init__(self):
        if not self.cells:
            raise InvalidBlockText("a block needs at least one cell")
        xs = [c.position.x for c in self.cells]
        ys = [c.position.y for c in self.cells]
        self.bounding_box = BoundingBox(min(xs), min(ys),
                                        max(xs) - min(xs) + 1, max(ys) - min(ys) + 1)

    @classmethod
    def line(cls, text: str, state: BlockState, x: int, y: int) -> "Block":
        """Build a one-row block with its first letter at (x, y)."""
        if not text or not text.isascii():
            raise InvalidBlockText(f"block text must be non-empty ASCII, got {text!r}")
        cells = [Cell(ch, Position(x + i, y)) for i, ch in enumerate(text)]
        return cls(state, cells)

    @classmethod
    def random(cls, board_width: int, words) -> "Block":
        """Draw a word that fits the board and place it at a random column of row 0."""
        text = words.random_word(board_width)
        x = words.randrange(board_width - len(text) + 1)
        return cls.line(text, BlockState.INTERACTABLE, x, 0)

    # ---------- geometry ----------
    @property
    def x(self) -> int:
        return self.bounding_box.x

    @property
    def y(self) -> int:
        return self.bounding_box.y

    @property
    def width(self) -> int:
        return self.bounding_box.width

    @property
    def position(self) -> Position:
        return Position(self.bounding_box.x, self.bounding_box.y)

    def shift(self, dx: int, dy: int) -> None:
        self.bounding_box = self.bounding_box.shifted(dx, dy)
        for cell in self.cells:
            cell.position = cell.position.shifted(dx, dy)

    def intersects(self, other: "Block") -> bool:
        # Bounding boxes reject most pairs before the per-cell scan.
        if not self.bounding_box.intersects(other.bounding_box):
            return False
        mine = {c.position for c in self.cells}
        return any(c.position in mine for c in other.cells)

    # ---------- text ----------
    @property
    def assigned_text(self) -> str:
        return "".join(c.assigned for c in self.cells)

    @property
    def input_text(self) -> str:
        return "".join(c.input for c in self.cells if c.input is not None)

    def add_char(self, ch: str) -> bool:
        if not (self.is_interactable() and is_typeable(ch)):
            return False
        for cell in self.cells:
            if cell.input is None:
                cell.input = ch
                return True
        return False

    def delete_char(self) -> bool:
        if not self.is_interactable():
            return False
        for cell in reversed(self.cells):
            if cell.input is not None:
                cell.input = None
                return True
        return False

    # ---------- state ----------
    def is_correct(self) -> bool:
        return all(c.is_correct() for c in self.cells)

    def is_settled(self) -> bool:
        return self.state is BlockState.SETTLED

    def is_falling(self) -> bool:
        return self.state is BlockState.FALLING

    def is_interactable(self) -> bool:
        return self.state is BlockState.INTERACTABLE

    def is_movable(self) -> bool:
        return self.is_interactable() and self.is_correct()
