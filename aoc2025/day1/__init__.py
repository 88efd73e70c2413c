from aoc2025.day1.compute_password import part1
from aoc2025.day1.compute_password2 import part2

__all__ = ["part1", "part2"]
