"""Student records: ordering by height and splitting registrants by age."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

AGE_LIMIT = 14
NAME_LIMIT = 49


@dataclass
class MeasuredStudent:
    """A student identified by number, with a height and an age."""

    id: int
    height: float
    age: int


@dataclass
class Registrant:
    """A named student with an age."""

    name: str
    age: int


def sort_by_height(students: Iterable[MeasuredStudent]) -> list[MeasuredStudent]:
    """Return the students ordered by height using selection sort."""
    ordered = list(students)
    size = len(ordered)
    for i in range(size - 1):
        shortest = i
        for j in range(i + 1, size):
            if ordered[j].height < ordered[shortest].height:
                shortest = j
        ordered[i], ordered[shortest] = ordered[shortest], ordered[i]
    return ordered


def format_heights(students: Iterable[MeasuredStudent]) -> str:
    """Render heights as ``[h] [h] ...`` with six decimal places each."""
    return "".join(f"[{student.height:f}] " for student in students)


def split_by_age(
    registrants: Iterable[Registrant],
) -> tuple[list[Registrant], list[Registrant]]:
    """Split registrants into those aged up to 14 and those older, keeping order."""
    young: list[Registrant] = []
    older: list[Registrant] = []
    for registrant in registrants:
        (young if registrant.age <= AGE_LIMIT else older).append(registrant)
    return young, older


def format_registrants(registrants: Iterable[Registrant]) -> str:
    """Render each registrant as a name line followed by an age line."""
    return "".join(f"{r.name}\n{r.age}\n" for r in registrants)


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_token(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _prompt(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def heights_main(argv: list[str] | None = None) -> int:
    """Read students from standard input and print their heights before and after sorting."""
    parser = argparse.ArgumentParser(
        prog="sortlab-heights",
        description="Read students and list their heights sorted ascending.",
    )
    parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    try:
        _prompt("Digite a quantidade de alunos que deseja cadastrar: ")
        count = int(_next_token(tokens))
        students = []
        for _ in range(count):
            _prompt("Id: ")
            student_id = int(_next_token(tokens))
            _prompt("Altura: ")
            height = float(_next_token(tokens))
            _prompt("Idade: ")
            age = int(_next_token(tokens))
            students.append(MeasuredStudent(student_id, height, age))
    except ValueError as error:
        print(f"\nerror: {error}", file=sys.stderr)
        return 1

    print(f"\n{format_heights(students)}")
    print(f"\n{format_heights(sort_by_height(students))}")
    return 0


def _read_registrants(lines: Iterator[str]) -> list[Registrant]:
    def next_line() -> str:
        try:
            return next(lines)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    count = int(next_line().strip())
    registrants = []
    for _ in range(count):
        name = next_line().rstrip("\r\n")[:NAME_LIMIT]
        age = int(next_line().strip())
        registrants.append(Registrant(name, age))
    return registrants


def register_main(argv: list[str] | None = None) -> int:
    """Read registrants from standard input and print the young ones, then the rest."""
    parser = argparse.ArgumentParser(
        prog="sortlab-register",
        description="List registrants aged up to 14 first, then the older ones.",
    )
    parser.parse_args(argv)

    try:
        registrants = _read_registrants(iter(sys.stdin))
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    young, older = split_by_age(registrants)
    sys.stdout.write(format_registrants(young))
    sys.stdout.write(format_registrants(older))
    sys.stdout.flush()
    return 0


def _heights(students: Sequence[MeasuredStudent]) -> list[float]:
    return [student.height for student in students]