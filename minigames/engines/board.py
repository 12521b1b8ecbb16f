# -*- coding: utf-8 -*-
"""Grid primitives shared by the board games: points, directions, lines."""
from enum import Enum
from typing import NamedTuple, Optional


class Point(NamedTuple):
    x: int
    y: int

    def __add__(self, other):
        return Point(self.x + other[0], self.y + other[1])


class Direction(Enum):
    # screen coordinates: y grows downward
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def vector(self) -> Point:
        return Point(*self.value)

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))

    @classmethod
    def from_key(cls, key: str) -> Optional["Direction"]:
        return _KEY_DIRECTIONS.get(key)


_KEY_DIRECTIONS = {
    "ArrowUp": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
}


class Grid:
    """Fixed-size rectangular grid, cells addressed as Point(x, y) or row-major index."""

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"grid must be non-empty, got {width}x{height}")
        self.width = width
        self.height = height

    def __repr__(self):
        return f"Grid({self.width}, {self.height})"

    @property
    def size(self) -> int:
        return self.width * self.height

    def contains(self, p) -> bool:
        return 0 <= p[0] < self.width and 0 <= p[1] < self.height

    def cells(self) -> list[Point]:
        return [Point(x, y) for y in range(self.height) for x in range(self.width)]

    def index_of(self, p) -> int:
        return p[1] * self.width + p[0]

    def point_at(self, index: int) -> Point:
        return Point(index % self.width, index // self.width)

    def rows(self) -> list[list[Point]]:
        return [[Point(x, y) for x in range(self.width)] for y in range(self.height)]

    def columns(self) -> list[list[Point]]:
        return [[Point(x, y) for y in range(self.height)] for x in range(self.width)]

    def diagonals(self) -> list[list[Point]]:
        if self.width != self.height:
            return []
        n = self.width
        return [
            [Point(i, i) for i in range(n)],
            [Point(n - 1 - i, i) for i in range(n)],
        ]

    def lines(self) -> list[list[Point]]:
        """Every full row, column and main diagonal."""
        return self.rows() + self.columns() + self.diagonals()

    def neighbors(self, p) -> list[Point]:
        out = []
        for d in Direction:
            q = Point(*p) + d.value
            if self.contains(q):
                out.append(q)
        return out
