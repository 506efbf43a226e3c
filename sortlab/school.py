"""A small school registry of students and classrooms, with an interactive menu."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import TextIO

NAME_LIMIT = 34
EXIT_OPTION = 99

MENU = (
    "\n==== MENU ====\n"
    "1. Criar aluno\n"
    "2. Criar turma\n"
    "3. Matricular aluno em turma\n"
    "4. Exibir todos os alunos\n"
    "5. Exibir todas as turmas\n"
    "6. Exibir alunos matriculados em uma turma\n"
    "99. Sair\n"
)


class StudentNotFound(LookupError):
    """No student has the requested registration number."""


class ClassroomNotFound(LookupError):
    """No classroom has the requested id."""


@dataclass
class Student:
    """A student known to the school by registration number."""

    name: str
    registration: int
    grades: list[int] = field(default_factory=list)


@dataclass
class Classroom:
    """A classroom and the students enrolled in it, in enrolment order."""

    id: int
    students: list[Student] = field(default_factory=list)


@dataclass
class School:
    """All students and classrooms, each kept in creation order."""

    students: list[Student] = field(default_factory=list)
    classrooms: list[Classroom] = field(default_factory=list)

    def add_student(self, name: str, registration: int) -> Student:
        """Register a student; names longer than 34 characters are cut short."""
        student = Student(name[:NAME_LIMIT], registration)
        self.students.append(student)
        return student

    def add_classroom(self, classroom_id: int) -> Classroom:
        """Create a classroom with the given id."""
        classroom = Classroom(classroom_id)
        self.classrooms.append(classroom)
        return classroom

    def find_student(self, registration: int) -> Student:
        """Return the first student with this registration number."""
        for student in self.students:
            if student.registration == registration:
                return student
        raise StudentNotFound(registration)

    def find_classroom(self, classroom_id: int) -> Classroom:
        """Return the first classroom with this id."""
        for classroom in self.classrooms:
            if classroom.id == classroom_id:
                return classroom
        raise ClassroomNotFound(classroom_id)

    def enroll(self, registration: int, classroom_id: int) -> Classroom:
        """Add a student to a classroom; the student is looked up first."""
        student = self.find_student(registration)
        classroom = self.find_classroom(classroom_id)
        classroom.students.append(student)
        return classroom

    def students_of(self, classroom_id: int) -> list[Student]:
        """Return the students enrolled in a classroom."""
        return list(self.find_classroom(classroom_id).students)


def _read_line(stdin: TextIO) -> str:
    line = stdin.readline()
    if line == "":
        raise EOFError
    return line.rstrip("\r\n")


def _read_int(stdin: TextIO) -> int:
    """Read the first integer on the next non-blank line."""
    while True:
        words = _read_line(stdin).split()
        if words:
            return int(words[0])


def _ask_int(stdin: TextIO, stdout: TextIO, prompt: str) -> int:
    while True:
        stdout.write(prompt)
        stdout.flush()
        try:
            return _read_int(stdin)
        except ValueError:
            continue


def _format_student(student: Student) -> str:
    return f"Aluno: {student.name}. Matricula: {student.registration}\n"


def _create_student(school: School, stdin: TextIO, stdout: TextIO) -> None:
    stdout.write("Digite o nome do aluno: ")
    stdout.flush()
    name = _read_line(stdin)
    registration = _ask_int(stdin, stdout, "Digite a matricula do anulo: ")
    school.add_student(name, registration)


def _create_classroom(school: School, stdin: TextIO, stdout: TextIO) -> None:
    classroom_id = _ask_int(
        stdin, stdout, "Digite o ID da turma que deseja cadastrar: "
    )
    school.add_classroom(classroom_id)


def _enroll(school: School, stdin: TextIO, stdout: TextIO) -> None:
    while True:
        registration = _ask_int(stdin, stdout, "Digite a matricula do aluno: ")
        try:
            school.find_student(registration)
            break
        except StudentNotFound:
            stdout.write("aluno não matriculado")
    while True:
        classroom_id = _ask_int(
            stdin, stdout, "Digite o ID da turma que deseja inserir o aluno: "
        )
        try:
            school.find_classroom(classroom_id)
            break
        except ClassroomNotFound:
            stdout.write("turma não encontrada")
    school.enroll(registration, classroom_id)


def _show_students(school: School, stdout: TextIO) -> None:
    stdout.write("".join(_format_student(s) for s in school.students))


def _show_classrooms(school: School, stdout: TextIO) -> None:
    stdout.write("".join(f"TURMA: {c.id}\n" for c in school.classrooms))


def _show_classroom_students(school: School, stdin: TextIO, stdout: TextIO) -> None:
    while True:
        classroom_id = _ask_int(
            stdin, stdout, "Digite o ID da turma que deseja exibir: "
        )
        try:
            students = school.students_of(classroom_id)
            break
        except ClassroomNotFound:
            stdout.write("Turma não encontrada tente novamente")
    stdout.write("".join(_format_student(s) for s in students))


def run_menu(school: School, stdin: TextIO, stdout: TextIO) -> None:
    """Serve the menu until option 99 is chosen or the input runs out."""
    stdout.write(MENU)
    actions = {
        1: lambda: _create_student(school, stdin, stdout),
        2: lambda: _create_classroom(school, stdin, stdout),
        3: lambda: _enroll(school, stdin, stdout),
        4: lambda: _show_students(school, stdout),
        5: lambda: _show_classrooms(school, stdout),
        6: lambda: _show_classroom_students(school, stdin, stdout),
    }
    try:
        while True:
            stdout.write("Escolha uma opção: ")
            stdout.flush()
            try:
                option = _read_int(stdin)
            except ValueError:
                option = None
            if option == EXIT_OPTION:
                stdout.write("\nSaindo...\n")
                break
            action = actions.get(option) if option is not None else None
            if action is None:
                stdout.write("\nOpção inválida!\n")
            else:
                action()
    except EOFError:
        pass
    stdout.flush()


def main(argv: list[str] | None = None) -> int:
    """Run the school menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="sortlab-school",
        description="Manage students and classrooms through a text menu.",
    )
    parser.parse_args(argv)
    run_menu(School(), sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())