"""
Grid geometry: points and the four-directional move vocabulary.

The board origin (0, 0) is the bottom-left cell, so UP increases y.
"""

from typing import List

from consts import ALL_MOVES, Move

DELTAS = {
    Move.UP: (0, 1),
    Move.DOWN: (0, -1),
    Move.LEFT: (-1, 0),
    Move.RIGHT: (1, 0),
}

INT16_MIN = -(2**15)
INT16_MAX = 2**15 - 1


class Point:
    """Represents a cell on the game grid"""

    __slots__ = ("_x", "_y")

    def __init__(self, x: int, y: int):
        self._x = x
        self._y = y

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    def __eq__(self, other):
        return isinstance(other, Point) and self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Point({self.x},{self.y})"

    def to_tuple(self):
        return (self.x, self.y)

    @property
    def json(self):
        return {"x": self.x, "y": self.y}

    def shift(self, move: Move) -> "Point":
        dx, dy = DELTAS[move]
        return Point(self.x + dx, self.y + dy)

    def distance(self, other: "Point") -> int:
        """Manhattan distance"""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def neighbors(self) -> List["Point"]:
        return [self.shift(move) for move in ALL_MOVES]

    def towards(self, other: "Point") -> List[Move]:
        """
        Moves that bring us closest to `other`.

        Returns two moves when two directions tie for the smallest resulting
        distance, listed in UP, DOWN, LEFT, RIGHT order.
        """
        # sorted() is stable, so ties keep enumeration order
        pairs = sorted(
            ((move, self.shift(move).distance(other)) for move in ALL_MOVES),
            key=lambda pair: pair[1],
        )

        if pairs[0][1] == pairs[1][1]:
            return [pairs[0][0], pairs[1][0]]
        return [pairs[0][0]]


def shift(point: Point, move: Move) -> Point:
    return point.shift(move)


def distance(a: Point, b: Point) -> int:
    return a.distance(b)


def towards(a: Point, b: Point) -> List[Move]:
    return a.towards(b)
