import pytest

from aoc2025.common import Direction, Grid, Point, parse_grid, parse_lines, read_input, read_text
from aoc2025.errors import InputFormatError


def test_read_input_from_inputs_dir(tmp_path, monkeypatch):
    (tmp_path / "day07.txt").write_text("hello\n")
    monkeypatch.setenv("AOC_INPUTS_DIR", str(tmp_path))
    assert read_input(7) == "hello\n"


def test_read_input_explicit_dir_wins(tmp_path, monkeypatch):
    (tmp_path / "day01.txt").write_text("R5")
    monkeypatch.setenv("AOC_INPUTS_DIR", str(tmp_path / "elsewhere"))
    assert read_input(1, inputs_dir=tmp_path) == "R5"


def test_missing_input_names_path(tmp_path):
    with pytest.raises(FileNotFoundError, match="day03.txt"):
        read_input(3, inputs_dir=tmp_path)
    with pytest.raises(FileNotFoundError, match="nope.txt"):
        read_text(tmp_path / "nope.txt")


def test_parse_lines():
    assert parse_lines("1\n2\n3\n", int) == [1, 2, 3]
    assert parse_lines("ab\ncd") == ["ab", "cd"]
    with pytest.raises(InputFormatError, match="line 2"):
        parse_lines("1\nx\n3", int)


def test_parse_grid():
    assert parse_grid("ab\ncd\n") == [["a", "b"], ["c", "d"]]


def test_point_neighbors():
    p = Point(0, 0)
    assert len(list(p.neighbors4())) == 4
    assert len(set(p.neighbors8())) == 8
    assert p not in set(p.neighbors8())


def test_point_arithmetic():
    assert Point(1, 2) + Point(3, 4) == Point(4, 6)
    assert Point(1, 2) - Point(3, 4) == Point(-2, -2)
    assert Point(0, 0).step(Direction.NORTH) == Point(0, -1)
    assert Point(1, 1).manhattan_distance(Point(-2, 5)) == 7


def test_direction():
    assert Direction.NORTH.turn_right() is Direction.EAST
    assert Direction.NORTH.turn_left() is Direction.WEST
    assert Direction.WEST.turn_right() is Direction.NORTH
    assert Direction.NORTH.opposite() is Direction.SOUTH
    assert Direction.EAST.opposite() is Direction.WEST
    assert len(Direction.ALL) == 4


def test_grid():
    grid = Grid.parse("abc\ndef")
    assert grid.width == 3
    assert grid.height == 2
    assert grid.get(Point(0, 0)) == "a"
    assert grid.get(Point(2, 1)) == "f"
    assert grid.get(Point(-1, 0)) is None
    assert grid.get(Point(3, 0)) is None
    assert grid.in_bounds(Point(2, 1))
    assert not grid.in_bounds(Point(0, 2))


def test_grid_iteration_and_find():
    grid = Grid.parse("ab\ncd")
    assert list(grid.iter_points()) == [Point(0, 0), Point(1, 0), Point(0, 1), Point(1, 1)]
    assert grid.find(lambda value: value == "c") == Point(0, 1)
    assert grid.find(lambda value: value == "z") is None


def test_grid_set():
    grid = Grid.parse("ab\ncd")
    grid.set(Point(1, 1), "#")
    assert grid.get(Point(1, 1)) == "#"
    with pytest.raises(IndexError):
        grid.set(Point(2, 0), "#")
