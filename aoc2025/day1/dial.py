"""Safe dial with positions 0-99, turned left (down) or right (up) by rotation commands."""

import logging
import re
from typing import Iterator, NamedTuple

from aoc2025.errors import InputFormatError

logger = logging.getLogger(__name__)

DIAL_SIZE = 100
START_POSITION = 50
COMMAND_PATTERN = re.compile(r"[LR][0-9]+")


class Rotation(NamedTuple):
    direction: str  # "L" or "R"
    ticks: int

    @property
    def signed_ticks(self):
        # left rotations count down
        return -self.ticks if self.direction == "L" else self.ticks


def parse(input_string) -> list[Rotation]:
    lines = input_string.split("\n")
    if lines[-1] == "":
        lines.pop()
    if not lines:
        raise InputFormatError("input contains no rotations")

    rotations = []
    for line_number, line in enumerate(lines, 1):
        command = line.rstrip("\r")
        if not COMMAND_PATTERN.fullmatch(command):
            raise InputFormatError(f"line {line_number}: expected L or R followed by a number, got {command!r}")
        rotations.append(Rotation(command[0], int(command[1:])))

    logger.debug("Parsed %d rotations", len(rotations))
    return rotations


def advance(dial_position, rotation):
    return (dial_position + rotation.signed_ticks) % DIAL_SIZE # euclidean modulo to emulate wrapping behavior of dial


def count_crossings(dial_position, rotation):
    """Number of times the dial points at 0 while performing a rotation, including where it stops."""
    if rotation.ticks == 0:
        return 0

    if rotation.direction == "R":
        passes_over_zero, _ = divmod(dial_position + rotation.ticks, DIAL_SIZE)
        return passes_over_zero

    # turning left from 0 needs a full lap before the next 0
    ticks_to_zero = dial_position or DIAL_SIZE
    if rotation.ticks < ticks_to_zero:
        return 0
    return 1 + (rotation.ticks - ticks_to_zero) // DIAL_SIZE


def trajectory(rotations, start=START_POSITION) -> Iterator[tuple[int, Rotation, int]]:
    dial_position = start
    for rotation in rotations:
        next_position = advance(dial_position, rotation)
        yield dial_position, rotation, next_position
        dial_position = next_position
