from aoc2025.day2.find_silly_ids import part1, part2

__all__ = ["part1", "part2"]
