"""Small value-exchange and time-splitting helpers, with a demonstration command."""

from __future__ import annotations

import argparse
import sys
from typing import Any, TypeVar

T = TypeVar("T")
U = TypeVar("U")

MINUTES_PER_HOUR = 60


def swap(a: T, b: U) -> tuple[U, T]:
    """Return the two values in exchanged order."""
    return b, a


def split_minutes(minutes: int) -> tuple[int, int]:
    """Split a count of minutes into whole hours and leftover minutes.

    Division truncates toward zero, so the leftover carries the sign of the input.
    """
    hours = abs(minutes) // MINUTES_PER_HOUR
    if minutes < 0:
        hours = -hours
    return hours, minutes - hours * MINUTES_PER_HOUR


class _Cell:
    """A mutable holder that other names can refer to."""

    def __init__(self, value: Any) -> None:
        self.value = value


def _address(obj: object) -> str:
    return hex(id(obj))


def main(argv: list[str] | None = None) -> int:
    """Walk through references, a swap and a minutes conversion, printing each step."""
    parser = argparse.ArgumentParser(
        prog="sortlab-pointers",
        description="Demonstrate references, swapping values and splitting minutes.",
    )
    parser.parse_args(argv)

    a = _Cell(5)
    b = _Cell(9)
    p = _Cell(a)
    q = _Cell(b)
    r = _Cell(p)

    print(f"p = {_address(p.value)}")
    print(f"&a = {_address(a)}")
    print(f"q = {_address(q.value)}")
    print(f"r = {_address(r.value)}")
    print(f"*r = {_address(r.value.value)}")
    print(f"**r = {r.value.value.value}")

    total = p.value.value + q.value.value
    print(total)
    total += r.value.value.value
    print(total)

    a.value, b.value = swap(a.value, b.value)
    print(f"A = {a.value} \nB = {b.value}")

    hours, minutes = split_minutes(265)
    print(f"horas = {hours}\nminutos = {minutes}")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())