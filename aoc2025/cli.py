"""Command-line runner: solve one day and print both answers."""

import argparse
import logging

from dotenv import load_dotenv

from aoc2025 import day1, day2, day3
from aoc2025.common import read_input, read_text
from aoc2025.errors import InputFormatError
from aoc2025.logging_config import setup_logging

logger = logging.getLogger(__name__)

DAYS = {1: day1, 2: day2, 3: day3}


def build_parser():
    parser = argparse.ArgumentParser(
        prog="aoc2025", description="Solve an Advent of Code 2025 puzzle and print its answers"
    )
    parser.add_argument("day", type=int, choices=sorted(DAYS), help="Puzzle day")
    parser.add_argument(
        "--input",
        help="Input file (default: dayNN.txt in AOC_INPUTS_DIR, or ./inputs)",
    )
    parser.add_argument("--part", type=int, choices=(1, 2), help="Only solve this part")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    return parser


def main(argv=None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    setup_logging("DEBUG" if args.verbose else None)

    solver = DAYS[args.day]
    parts = [args.part] if args.part else [1, 2]
    try:
        input_string = read_text(args.input) if args.input else read_input(args.day)
        # every answer is computed before printing so a bad input prints nothing
        answers = [(part, getattr(solver, f"part{part}")(input_string)) for part in parts]
    except FileNotFoundError as e:
        logger.error("%s", e)
        return 1
    except InputFormatError as e:
        logger.error("Malformed input for day %d: %s", args.day, e)
        return 1

    for part, answer in answers:
        print(f"Part {part}: {answer}")
    return 0
