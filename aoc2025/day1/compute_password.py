from aoc2025.day1.dial import parse, trajectory


def part1(input_string):
    # passcode is the number of times the dial ends a rotation on a 0
    passcode = 0
    for _, _, dial_position in trajectory(parse(input_string)):
        if dial_position == 0:
            passcode += 1
    return passcode
