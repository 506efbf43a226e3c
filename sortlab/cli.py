"""Command that reads numbers and sorts them with a chosen algorithm."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from sortlab.sorting import (
    bubble_sort_flagged,
    format_values,
    insert_sorted,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)

STOP_VALUE = 99


@dataclass(frozen=True)
class _Algorithm:
    sort: Callable[[Iterable[Any]], list[Any]]
    show_before: bool
    leading_newline: bool


_ALGORITHMS = {
    "bubble": _Algorithm(bubble_sort_flagged, False, False),
    "insertion": _Algorithm(insertion_sort, True, True),
    "merge": _Algorithm(merge_sort, True, False),
    "quick": _Algorithm(quick_sort, True, False),
    "selection": _Algorithm(selection_sort, True, False),
}


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_int(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise EOFError("unexpected end of input") from None


def _prompt(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _show(values: Iterable[Any], leading_newline: bool) -> None:
    prefix = "\n" if leading_newline else ""
    sys.stdout.write(f"{prefix}{format_values(values)}\n")


def _run_sort(algorithm: _Algorithm, tokens: Iterator[str]) -> None:
    _prompt("Digite o tamanho do vetor: ")
    size = _next_int(tokens)
    values = []
    for _ in range(size):
        _prompt("Digite o vetor: ")
        values.append(_next_int(tokens))
    if algorithm.show_before:
        _show(values, algorithm.leading_newline)
    _show(algorithm.sort(values), algorithm.leading_newline)


def _run_insert_sorted(tokens: Iterator[str]) -> None:
    values: list[int] = []
    while True:
        _prompt("Insira um elemento(ou digite 99 para sair): \n")
        try:
            element = _next_int(tokens)
        except EOFError:
            break
        if element == STOP_VALUE:
            break
        insert_sorted(values, element)
        _show(values, True)
        sys.stdout.write(f"{len(values)}\n")


def main(argv: list[str] | None = None) -> int:
    """Read integers from standard input and print them sorted."""
    parser = argparse.ArgumentParser(
        prog="sortlab",
        description="Sort integers read from standard input.",
    )
    parser.add_argument(
        "command",
        choices=[*_ALGORITHMS, "insert-sorted"],
        help="sorting algorithm, or insert-sorted to build a sorted list one value at a time",
    )
    args = parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    try:
        if args.command == "insert-sorted":
            _run_insert_sorted(tokens)
        else:
            _run_sort(_ALGORITHMS[args.command], tokens)
    except (ValueError, EOFError) as error:
        sys.stdout.flush()
        print(f"\nerror: {error}", file=sys.stderr)
        return 1
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())