import io
import sys

import pytest

from numlist.digits import main, sum_of_digits


@pytest.mark.parametrize("digit", range(10))
def test_single_digit_is_itself(digit):
    assert sum_of_digits(digit) == digit


@pytest.mark.parametrize("num", [7, 42, 908, 123456789])
def test_trailing_zero_changes_nothing(num):
    assert sum_of_digits(num * 10) == sum_of_digits(num)


@pytest.mark.parametrize("power", range(8))
def test_power_of_ten(power):
    assert sum_of_digits(10**power) == 1


@pytest.mark.parametrize("num", [5, 19, 777, 100001, 987654321])
def test_congruent_mod_nine(num):
    assert sum_of_digits(num) % 9 == num % 9


@pytest.mark.parametrize("num", [3, 58, 4321])
def test_negative_is_mirrored(num):
    assert sum_of_digits(-num) == -sum_of_digits(num)


def test_worked_example():
    assert sum_of_digits(12345) == 15


def test_main(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("12345\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "Enter the number : \b = 15\n"


def test_main_rejects_text(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("abc\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err