import logging

from aoc2025.common import parse_grid
from aoc2025.errors import InputFormatError

logger = logging.getLogger(__name__)


def parse(input_string):
    banks = parse_grid(input_string)
    if not banks:
        raise InputFormatError("input contains no battery banks")
    for row, bank in enumerate(banks, 1):
        if not bank or not all(battery in "0123456789" for battery in bank):
            raise InputFormatError(f"line {row}: a bank is a non-empty row of digits, got {''.join(bank)!r}")
    logger.debug("Parsed %d battery banks", len(banks))
    return banks


def max_joltage(bank, count):
    if len(bank) < count:
        raise InputFormatError(f"bank {''.join(bank)!r} has fewer than {count} batteries")

    # greedy: take the leftmost largest digit that still leaves enough batteries after it
    digits = []
    begin = 0
    for remaining in range(count, 0, -1):
        window = bank[begin:len(bank) - remaining + 1]
        best = max(window)
        begin += window.index(best) + 1
        digits.append(best)
    return int("".join(digits))


def part1(input_string):
    return sum(max_joltage(bank, 2) for bank in parse(input_string))


def part2(input_string):
    return sum(max_joltage(bank, 12) for bank in parse(input_string))
