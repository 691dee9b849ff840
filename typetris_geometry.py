"""Grid primitives: positions and bounding boxes"""
from dataclasses import dataclass
from functools import total_ordering


def saturating_add(value: int, delta: int) -> int:
    """Add a signed delta to a grid coordinate, clamping at zero."""
    return max(0, value + delta)


@total_ordering
@dataclass(frozen=True)
class Position:
    """A cell on the board. Origin is top left.

    Positions order bottom row first (y descending), then left to right
    (x ascending), which is the order rows are scanned in when clearing.
    """
    x: int
    y: int

    def __lt__(self, other: "Position") -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (-self.y, self.x) < (-other.y, other.x)

    def shifted(self, dx: int, dy: int) -> "Position":
        return Position(saturating_add(self.x, dx), saturating_add(self.y, dy))


def compare_positions(a: Position, b: Position) -> int:
    if a == b:
        return 0
    return -1 if a < b else 1


@dataclass(frozen=True)
class BoundingBox:
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def shifted(self, dx: int, dy: int) -> "BoundingBox":
        return BoundingBox(saturating_add(self.x, dx), saturating_add(self.y, dy),
                           self.width, self.height)

    def intersects(self, other: "BoundingBox") -> bool:
        # Boxes that only share an edge do not intersect.
        return not (self.right <= other.x or other.right <= self.x
                    or self.bottom <= other.y or other.bottom <= self.y)

    def contains(self, point: Position) -> bool:
        return (self.x <= point.x <= self.right
                and self.y <= point.y <= self.bottom)
