"""Sum the decimal digits of an integer."""

import argparse
import sys


def sum_of_digits(num):
    """Return the sum of the decimal digits of ``num``, negative for negative input."""
    sign = -1 if num < 0 else 1
    num = abs(num)
    total = 0
    while num:
        num, digit = divmod(num, 10)
        total += digit
    return sign * total


def main(argv=None):
    parser = argparse.ArgumentParser(description="Sum the digits of an integer.")
    parser.parse_args(argv)
    sys.stdout.write("Enter the number : ")
    sys.stdout.flush()
    try:
        num = int(sys.stdin.readline())
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(f"\b = {sum_of_digits(num)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())