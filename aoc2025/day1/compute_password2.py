# method 0x434C49434B
# passcode includes count of times dial passes over 0 during rotations

from aoc2025.day1.dial import count_crossings, parse, trajectory


def part2(input_string):
    return sum(
        count_crossings(dial_position, rotation)
        for dial_position, rotation, _ in trajectory(parse(input_string))
    )
