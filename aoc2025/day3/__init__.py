from aoc2025.day3.max_joltage import part1, part2

__all__ = ["part1", "part2"]
