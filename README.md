# numlist

Small number exercises and a singly linked list: writing an integer in
another base, summing decimal digits, counting, sums and factorials, and
a linked list with a demonstration and an interactive menu.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Commands

- `numlist-convert-base [NUM] [BASE]`: writes `NUM` in `BASE`. Either
  argument left out is asked for on standard input. Digits above 9 are
  written as `A`, `B`, and so on; a negative number gets a leading `-`,
  and zero prints an empty line. A base below 2 or input that is not an
  integer prints an error and exits with status 1.
- `numlist-sum-digits`: asks for a number and prints the sum of its
  decimal digits (negative for a negative number).
- `numlist-recursion`: a menu read from standard input. Option 1 gives a
  factorial, 2 counts from N down to 1, 3 counts from 1 up to N, 4 and 5
  print the terms of the sum of 1 to N (upwards or downwards) followed by
  the total, and 6 prints the sum of 1 to N. Negative numbers and
  unknown choices print `Please give valid input`. Enter `50` to leave;
  the menu also stops at the end of input.
- `numlist-linked-list`: builds the list 0 to 9 and shows it as it goes
  through a prepend, an append, an insertion, a removal and clearing,
  printing the middle value and the length along the way.
- `numlist-list-menu`: an interactive list, starting empty. Option 1
  displays it, 2 appends a number, 3 inserts a number in sorted order,
  and 4 reports every position at which a number appears. Enter `50` to
  leave; the menu also stops at the end of input.

## Library use

```python
from numlist.convert_base import convert_base
from numlist.digits import sum_of_digits
from numlist.recursion import factorial, count_up, count_down, sum_up_to
from numlist.linked_list import LinkedList, create_list

convert_base(255, 16)        # "FF"
convert_base(-5, 2)          # "-101"
sum_of_digits(1234)          # 10
factorial(5)                 # 120
count_up(3)                  # [1, 2, 3]
count_down(3)                # [3, 2, 1]
sum_up_to(4)                 # 10

numbers = create_list(5)     # 0, 1, 2, 3, 4
numbers.prepend(-1)          # -1, 0, 1, 2, 3, 4
numbers.append(10)           # -1, 0, 1, 2, 3, 4, 10
numbers.insert_after(2, 7)   # -1, 0, 7, 1, 2, 3, 4, 10
numbers.remove(10)           # 7 (the index it was at); None if absent
numbers.middle()             # 2
len(numbers)                 # 7
numbers.format()             # "-1,0,7,1,2,3,4,"

ordered = LinkedList([])
for value in (5, 1, 3):
    ordered.insert_sorted(value)
list(ordered)                # [1, 3, 5]
ordered.positions(3)         # [2]
ordered.clear()
```

`factorial`, `count_up`, `count_down` and `sum_up_to` raise `ValueError`
for a negative number; `convert_base` raises `ValueError` for a base
below 2. `LinkedList.middle` raises `IndexError` on an empty list, and
`LinkedList.insert_after` raises `IndexError` on an empty list or a
position past the end.

`numlist.recursion.run` and `numlist.list_menu.run` take an input and an
output text stream, for example `io.StringIO`, so the menus can be driven
from a script or a test.

## Limits

The lists live in memory only: `numlist-list-menu` does not save or load
its list, and everything entered is gone when the menu exits.