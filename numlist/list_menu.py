"""An interactive menu over a linked list."""

import argparse
import sys

from numlist.linked_list import LinkedList

_MENU = (
    "\n"
    "1.Display\n"
    "2.Insert a new node\n"
    "3.Inserted in shorted order\n"
    "4.Search for an element\n"
    "50.Exit\n"
    "Enter your choice : "
)
_EXIT = 50
_WRONG = "Wrong input try again\n"
_NUMBER_PROMPT = "Enter the number : "


def _display(items):
    return items.format() if items else "\nEmpty Link List\n"


def _insert(items, num):
    message = "" if items else "\nCreating new link list \n"
    items.append(num)
    return message


def _insert_sorted(items, num):
    items.insert_sorted(num)
    return ""


def _search(items, num):
    if not items:
        return "Link List is Empty\n"
    found = items.positions(num)
    if not found:
        return f"Element {num} is not present\n"
    return "".join(f"\nElement {num} is present at position {pos}\n" for pos in found)


_ACTIONS = {
    2: (_NUMBER_PROMPT, _insert),
    3: (_NUMBER_PROMPT, _insert_sorted),
    4: ("Entert the element for search : ", _search),
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
    items = LinkedList()
    tokens = _tokens(infile)
    while True:
        outfile.write(_MENU)
        token = next(tokens, None)
        if token is None:
            return
        choice = _as_int(token)
        if choice == _EXIT:
            outfile.write("BYE BYE \n")
            return
        if choice == 1:
            outfile.write(_display(items))
            continue
        if choice not in _ACTIONS:
            outfile.write(_WRONG)
            continue
        prompt, action = _ACTIONS[choice]
        outfile.write(prompt)
        token = next(tokens, None)
        if token is None:
            return
        num = _as_int(token)
        if num is None:
            outfile.write(_WRONG)
            continue
        outfile.write(action(items, num))


def main(argv=None):
    parser = argparse.ArgumentParser(description="Interactive linked list menu.")
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())