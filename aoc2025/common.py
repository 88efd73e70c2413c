"""Helpers shared between days: input files, line/grid parsing, 2D geometry."""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from aoc2025.errors import InputFormatError

logger = logging.getLogger(__name__)


def read_text(path):
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {path}")
    with open(path, "r") as file:
        return file.read()


def read_input(day: int, inputs_dir=None) -> str:
    """Read the input for a day from <inputs dir>/dayNN.txt.

    The directory defaults to AOC_INPUTS_DIR, or ./inputs when unset.
    """
    inputs_dir = Path(inputs_dir or os.getenv("AOC_INPUTS_DIR", "inputs"))
    path = inputs_dir / f"day{day:02}.txt"
    logger.debug("Reading input for day %d from %s", day, path)
    return read_text(path)


def parse_lines(input_string, convert=str):
    values = []
    for line_number, line in enumerate(input_string.splitlines(), 1):
        try:
            values.append(convert(line))
        except ValueError as e:
            raise InputFormatError(f"line {line_number}: cannot parse {line!r}: {e}") from e
    return values


def parse_grid(input_string):
    return [list(line) for line in input_string.splitlines()]


class Direction(Enum):
    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    @property
    def delta(self):
        return self.value

    def turn_right(self):
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 1) % 4]

    def turn_left(self):
        return _CLOCKWISE[(_CLOCKWISE.index(self) - 1) % 4]

    def opposite(self):
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 2) % 4]


_CLOCKWISE = (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)
Direction.ALL = _CLOCKWISE


@dataclass(frozen=True)
class Point:
    x: int = 0
    y: int = 0

    def __add__(self, other):
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Point(self.x - other.x, self.y - other.y)

    def step(self, direction):
        dx, dy = direction.delta
        return Point(self.x + dx, self.y + dy)

    def neighbors4(self):
        for direction in Direction.ALL:
            yield self.step(direction)

    def neighbors8(self):
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx or dy:
                    yield Point(self.x + dx, self.y + dy)

    def manhattan_distance(self, other):
        return abs(self.x - other.x) + abs(self.y - other.y)


class Grid:
    """Rectangular grid indexed by Point; width is taken from the first row."""

    def __init__(self, data):
        self.data = data
        self.height = len(data)
        self.width = len(data[0]) if data else 0

    @classmethod
    def parse(cls, input_string):
        return cls(parse_grid(input_string))

    def in_bounds(self, point):
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    def get(self, point):
        # negative coordinates would otherwise index from the end of a row
        if point.x < 0 or point.y < 0:
            return None
        try:
            return self.data[point.y][point.x]
        except IndexError:
            return None

    def set(self, point, value):
        if not self.in_bounds(point):
            raise IndexError(f"{point} is outside a {self.width}x{self.height} grid")
        self.data[point.y][point.x] = value

    def iter_points(self):
        for y in range(self.height):
            for x in range(self.width):
                yield Point(x, y)

    def find(self, predicate):
        for point in self.iter_points():
            if predicate(self.get(point)):
                return point
        return None
