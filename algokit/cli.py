"""Command-line front end for the number helpers."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from algokit.numbers import (
    fibonacci,
    is_armstrong,
    is_leap_year,
    is_prime,
    reverse_number,
)


def _armstrong(num: int) -> str:
    if is_armstrong(num):
        return f"{num} is an Armstrong number."
    return f"{num} is not an Armstrong number."


def _fibonacci(n: int) -> str:
    return "Fibonacci Series:" + "".join(f" {term}" for term in fibonacci(n))


def _leap_year(year: int) -> str:
    if is_leap_year(year):
        return f"{year} is a leap year."
    return f"{year} isn't a leap year."


def _prime(n: int) -> str:
    if is_prime(n):
        return f"{n} is a prime number."
    return f"{n} is not a prime number."


def _reverse(number: int) -> str:
    return f"Reverse of no. is {reverse_number(number)}"


_COMMANDS: dict[str, tuple[str, str, Callable[[int], str]]] = {
    "armstrong": (
        "check whether a number is an Armstrong number",
        "Enter a three-digit Number: ",
        _armstrong,
    ),
    "fibonacci": (
        "print the first terms of the Fibonacci series",
        "Enter the number of terms: ",
        _fibonacci,
    ),
    "leap-year": (
        "check whether a year is a leap year",
        "Enter a year to check if it is a leap year: ",
        _leap_year,
    ),
    "prime": (
        "check whether a number is prime",
        "Enter a positive integer: ",
        _prime,
    ),
    "reverse": (
        "reverse the digits of a number",
        "Enter the number to be reversed: ",
        _reverse,
    ),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algokit", description="Small number checks and series."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (help_text, _prompt, _handler) in _COMMANDS.items():
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument(
            "value",
            nargs="?",
            type=int,
            help="the number to work on; asked for when left out",
        )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command and print its result; returns the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    _help, prompt, handler = _COMMANDS[args.command]
    value = args.value
    if value is None:
        try:
            text = input(prompt)
        except EOFError:
            parser.error("no number given")
        try:
            value = int(text.strip())
        except ValueError:
            parser.error(f"invalid integer: {text.strip()!r}")
    print(handler(value))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())