"""Counting, summing and factorials behind a small interactive menu."""

import argparse
import math
import sys

_MENU = (
    "\n1.Find the Factorial\n"
    "2.Print numbers from N to 1\n"
    "3.Print numbers from 1 to N \n"
    "4.Print numbers from 1 to N and there Sum\n"
    "5.Print numbers from N to 1 and there Sum\n"
    "6.Print Sum of number digits\n"
    "50.To exit\n"
    "Choose your options : "
)
_EXIT = 50
_INVALID = "Please give valid input\n"


def _check(num):
    if num < 0:
        raise ValueError(f"expected a non-negative number, got {num}")


def factorial(num):
    """Return ``num!`` for a non-negative ``num``."""
    _check(num)
    return math.prod(range(1, num + 1))


def count_down(num):
    """Return the numbers from ``num`` down to 1."""
    _check(num)
    return list(range(num, 0, -1))


def count_up(num):
    """Return the numbers from 1 up to ``num``."""
    _check(num)
    return list(range(1, num + 1))


def sum_up_to(num):
    """Return the sum of the numbers from 1 to ``num``."""
    _check(num)
    return sum(range(num + 1))


def _with_sum(numbers, total):
    return "".join(f"{n}+" for n in numbers) + f"\b = {total}"


_ACTIONS = {
    1: (
        "Enter the Number to find the Factorial : ",
        lambda n: f"Factorial of {n} = {factorial(n)}\n",
    ),
    2: (
        "Enter the number to be print from N to 1 : ",
        lambda n: "".join(f"{v} " for v in count_down(n)),
    ),
    3: (
        "Enter the number to be print from 1 to N : ",
        lambda n: "".join(f"{v} " for v in count_up(n)),
    ),
    4: (
        "Enter the number to be print from 1 to N and get the sum : ",
        lambda n: _with_sum(count_up(n), sum_up_to(n)),
    ),
    5: (
        "Enter the number to be print from N to 1 and get the sum : ",
        lambda n: _with_sum(count_down(n), sum_up_to(n)),
    ),
    6: (
        "Enter the number to get the sum of number digit : ",
        lambda n: str(sum_up_to(n)),
    ),
}


def _tokens(infile):
    for line in infile:
        yield from line.split()


def _as_int(token):
    try:
        return int(token)
    except ValueError:
        return None


def run(infile, outfile):
    """Drive the menu, reading answers from ``infile`` until exit or end of input."""
    tokens = _tokens(infile)
    while True:
        outfile.write(_MENU)
        token = next(tokens, None)
        if token is None:
            return
        choice = _as_int(token)
        if choice == _EXIT:
            outfile.write("Bye Bye\n")
            return
        if choice not in _ACTIONS:
            outfile.write(_INVALID)
            continue
        prompt, action = _ACTIONS[choice]
        outfile.write(prompt)
        token = next(tokens, None)
        if token is None:
            return
        num = _as_int(token)
        if num is None:
            outfile.write(_INVALID)
            continue
        try:
            outfile.write(action(num))
        except ValueError:
            outfile.write(_INVALID)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Counting and factorial menu.")
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())