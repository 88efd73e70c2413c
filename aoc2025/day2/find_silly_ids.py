"""Sum the product IDs made of a digit block repeated, over comma-separated ID ranges.

An ID whose digits are a k-digit block repeated r times equals
block * multiplier with multiplier = (10**(k*r) - 1) // (10**k - 1),
e.g. 123123 = 123 * 1001. The IDs inside a range are therefore a run of
consecutive multiples and can be summed without enumerating them.
"""

import logging
import re

from aoc2025.errors import InputFormatError

logger = logging.getLogger(__name__)

RANGE_PATTERN = re.compile(r"([0-9]+)-([0-9]+)")


def parse(input_string):
    id_ranges = []
    for id_range in input_string.rstrip().split(","):
        match = RANGE_PATTERN.fullmatch(id_range.strip())
        if match is None:
            raise InputFormatError(f"expected an ID range like 11-22, got {id_range!r}")
        start, end = map(int, match.groups())
        id_ranges.append((start, end))
    logger.debug("Parsed %d ID ranges", len(id_ranges))
    return id_ranges


def sum_repeated(start, end, block_digits, repeats):
    """Sum of IDs in [start, end] made of a block_digits-long block repeated `repeats` times."""
    multiplier = (10 ** (block_digits * repeats) - 1) // (10 ** block_digits - 1)

    # invalid IDs are in [min_multiple, max_multiple] * multiplier
    min_multiple = 10 ** (block_digits - 1)
    max_multiple = 10 ** block_digits - 1
    min_multiple_in_range = (start + multiplier - 1) // multiplier # ceil(start / multiplier)
    max_multiple_in_range = end // multiplier                      # floor(end / multiplier)
    start_multiple = max(min_multiple, min_multiple_in_range)
    end_multiple   = min(max_multiple, max_multiple_in_range)

    if end_multiple < start_multiple:
        return 0
    # sum of the run of multiples
    return (end_multiple * (end_multiple + 1) - (start_multiple - 1) * start_multiple) // 2 * multiplier


def mobius(n):
    result = 1
    factor = 2
    while factor * factor <= n:
        if n % factor == 0:
            n //= factor
            if n % factor == 0:
                return 0
            result = -result
        factor += 1
    if n > 1:
        result = -result
    return result


def sum_doubled_ids(start, end):
    total = 0
    block_digits = 1
    while 10 ** (block_digits - 1) * (10 ** block_digits + 1) <= end:
        total += sum_repeated(start, end, block_digits, 2)
        block_digits += 1
    return total


def sum_repeating_ids(start, end):
    # an ID of n digits is invalid if its period is a proper divisor of n; periods
    # a and b share the IDs with period gcd(a, b), so inclusion-exclusion over
    # the divisors reduces to mobius coefficients
    total = 0
    for id_digits in range(2, len(str(end)) + 1):
        for block_digits in range(1, id_digits):
            if id_digits % block_digits:
                continue
            coefficient = -mobius(id_digits // block_digits)
            if coefficient:
                total += coefficient * sum_repeated(start, end, block_digits, id_digits // block_digits)
    return total


def part1(input_string):
    return sum(sum_doubled_ids(start, end) for start, end in parse(input_string))


def part2(input_string):
    return sum(sum_repeating_ids(start, end) for start, end in parse(input_string))
