"""Command line entry point reading problem input from standard input."""

import argparse
import sys

from algodrills.search import min_max_pages, ship_within_days
from algodrills.sequences import hanoi_moves


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algodrills",
        description="Solve a problem whose whitespace-separated input is read from stdin.",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("books", help="input: n k, then n page counts")
    commands.add_parser("ship", help="input: n days, then n package weights")
    commands.add_parser("hanoi", help="input: number of disks")
    return parser


def _read_ints(parser: argparse.ArgumentParser) -> list[int]:
    try:
        return [int(token) for token in sys.stdin.read().split()]
    except ValueError:
        parser.error("input must consist of integers")
    return []


def _counted_list(parser: argparse.ArgumentParser, numbers: list[int]) -> tuple[int, list[int]]:
    if len(numbers) < 2:
        parser.error("expected a count and a parameter")
    count, parameter, *rest = numbers
    if count < 0 or len(rest) < count:
        parser.error(f"expected {count} values after the header")
    return parameter, rest[:count]


def main(argv=None) -> int:
    """Run the chosen solver and print its answer."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    numbers = _read_ints(parser)

    if args.command == "books":
        students, pages = _counted_list(parser, numbers)
        print(min_max_pages(pages, students))
    elif args.command == "ship":
        days, weights = _counted_list(parser, numbers)
        if not weights:
            parser.error("at least one package is required")
        print(ship_within_days(weights, days))
    else:
        if not numbers:
            parser.error("expected the number of disks")
        try:
            moves = hanoi_moves(numbers[0])
        except ValueError as error:
            parser.error(str(error))
        print(len(moves))
        for source, target in moves:
            print(source, target)
    return 0


if __name__ == "__main__":
    sys.exit(main())