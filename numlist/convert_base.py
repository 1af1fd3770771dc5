"""Write an integer as digits in another base."""

import argparse
import sys


def _digit(value):
    if value < 10:
        return str(value)
    return chr(value - 10 + ord("A"))


def convert_base(num, base):
    """Return the digits of ``num`` in ``base``; zero gives an empty string.

    Digits above nine are written as letters starting at ``A``.
    """
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    if num < 0:
        return "-" + convert_base(-num, base)
    digits = []
    while num:
        num, remainder = divmod(num, base)
        digits.append(_digit(remainder))
    return "".join(reversed(digits))


def _prompt_int(prompt):
    sys.stdout.write(prompt)
    sys.stdout.flush()
    return int(sys.stdin.readline())


def main(argv=None):
    parser = argparse.ArgumentParser(description="Write an integer in another base.")
    parser.add_argument("num", type=int, nargs="?", help="the number to convert")
    parser.add_argument("base", type=int, nargs="?", help="the target base")
    args = parser.parse_args(argv)
    try:
        num = args.num if args.num is not None else _prompt_int("Enter the number : ")
        base = args.base if args.base is not None else _prompt_int("Enter the base :")
        result = convert_base(num, base)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())