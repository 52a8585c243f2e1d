"""Command-line entry point for the number toolkit."""

from __future__ import annotations

import argparse
from typing import Sequence

from numbertoolkit.arith import is_armstrong, is_leap_year, primes_in_range
from numbertoolkit.patterns import hanoi_moves
from numbertoolkit.units import convert


def _run_convert(args: argparse.Namespace) -> int:
    try:
        label, result = convert(args.category, args.choice, args.value)
    except ValueError as exc:
        print(exc)
        return 1
    if isinstance(result, int):
        print(f"{label}: {result}")
    else:
        print(f"{label}: {result:.2f}")
    return 0


def _run_armstrong(args: argparse.Namespace) -> int:
    print("armstrong number" if is_armstrong(args.number) else "not armstrong number")
    return 0


def _run_leap(args: argparse.Namespace) -> int:
    verdict = "is a leap year" if is_leap_year(args.year) else "is not a leap year"
    print(f"{args.year} {verdict}")
    return 0


def _run_primes(args: argparse.Namespace) -> int:
    try:
        primes = primes_in_range(args.low, args.high)
    except ValueError as exc:
        print(exc)
        return 0
    print("Prime numbers are")
    for p in primes:
        print(p)
    print(f"Number of primes between {args.low} & {args.high} = {len(primes)}")
    return 0


def _run_hanoi(args: argparse.Namespace) -> int:
    try:
        moves = hanoi_moves(args.disks, "S", "H", "D")
    except ValueError as exc:
        print(exc)
        return 1
    for disk, src, dst in moves:
        print(f"Move {disk} from {src} to {dst}")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="numbertoolkit")
    commands = parser.add_subparsers(dest="command", required=True)

    p = commands.add_parser(
        "convert",
        help="unit conversion",
        description=(
            "T: 1 Fahrenheit to Celsius, 2 Celsius to Fahrenheit; "
            "C: 1 USD to Euro, 2 USD to JPY, 3 USD to RMB; "
            "M: 1 ounces to pounds, 2 grams to pounds"
        ),
    )
    p.add_argument("category", choices=["T", "C", "M"])
    p.add_argument("choice", type=int)
    p.add_argument("value", type=int)
    p.set_defaults(handler=_run_convert)

    p = commands.add_parser("armstrong", help="check for an Armstrong number")
    p.add_argument("number", type=int)
    p.set_defaults(handler=_run_armstrong)

    p = commands.add_parser("leap", help="check for a leap year")
    p.add_argument("year", type=int)
    p.set_defaults(handler=_run_leap)

    p = commands.add_parser("primes", help="list primes in a range")
    p.add_argument("low", type=int)
    p.add_argument("high", type=int)
    p.set_defaults(handler=_run_primes)

    p = commands.add_parser("hanoi", help="solve the Tower of Hanoi")
    p.add_argument("disks", type=int, nargs="?", default=5)
    p.set_defaults(handler=_run_hanoi)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the chosen command and return its exit status."""
    args = _build_parser().parse_args(argv)
    return args.handler(args)