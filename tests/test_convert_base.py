import io
import sys

import pytest

from numlist.convert_base import convert_base, main


@pytest.mark.parametrize(
    "num, base",
    [(1, 2), (10, 2), (255, 16), (1000, 8), (12345, 36), (99, 3), (7, 7)],
)
def test_round_trip(num, base):
    assert int(convert_base(num, base), base) == num


def test_zero_gives_no_digits():
    assert convert_base(0, 10) == ""


@pytest.mark.parametrize("num", [1, 9, 10, 171, 4096, 65535])
def test_hex_matches_uppercase_format(num):
    assert convert_base(num, 16) == format(num, "X")


@pytest.mark.parametrize("num", [1, 2, 5, 64, 1023])
def test_binary_matches_format(num):
    assert convert_base(num, 2) == format(num, "b")


def test_negative_gets_sign():
    assert convert_base(-10, 2) == "-" + convert_base(10, 2)


@pytest.mark.parametrize("base", [1, 0, -3])
def test_bad_base_raises(base):
    with pytest.raises(ValueError):
        convert_base(10, base)


def test_main_with_arguments(capsys):
    assert main(["255", "16"]) == 0
    assert capsys.readouterr().out == format(255, "X") + "\n"


def test_main_prompts(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("10\n8\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Enter the number : Enter the base :")
    assert out.endswith(format(10, "o") + "\n")


def test_main_bad_base_fails(capsys):
    assert main(["10", "1"]) == 1
    assert "base" in capsys.readouterr().err