"""Student records kept as comma-separated lines in a text file."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

DEFAULT_PATH = "students.txt"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class Student:
    """One student record."""

    name: str
    roll: int
    marks: float

    def to_line(self) -> str:
        """Render the record as it is stored in the file."""
        return f"{self.name},{self.roll},{self.marks:g}"


def parse_roll(line: str) -> int:
    """Return the roll number stored between the first and last comma."""
    first = line.find(",")
    last = line.rfind(",")
    if first == -1:
        segment = line
    elif first == last:
        segment = line[first + 1 :]
    else:
        segment = line[first + 1 : last]
    match = _LEADING_INT.match(segment)
    if match is None:
        raise ValueError(f"no roll number in record {line!r}")
    return int(match.group(1))


class StudentStore:
    """Student records in a line-oriented text file."""

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_PATH) -> None:
        self.path = Path(path)

    def add(self, student: Student) -> None:
        """Append a record to the file, creating it if needed."""
        with self.path.open("a", encoding="utf-8", newline="") as handle:
            handle.write(student.to_line() + "\n")

    def lines(self) -> list[str]:
        """Return every stored line; raises FileNotFoundError if there is no file."""
        with self.path.open(encoding="utf-8", newline="") as handle:
            parts = handle.read().split("\n")
        if parts[-1] == "":
            parts.pop()
        return parts

    def find(self, roll: int) -> str | None:
        """Return the first line with the given roll number, or None."""
        return next((line for line in self.lines() if parse_roll(line) == roll), None)

    def delete(self, roll: int) -> bool:
        """Remove every line with the given roll number; report whether any was."""
        kept: list[str] = []
        deleted = False
        for line in self.lines():
            if parse_roll(line) == roll:
                deleted = True
            else:
                kept.append(line)
        temp = self.path.with_name("temp.txt")
        with temp.open("w", encoding="utf-8", newline="") as handle:
            handle.writelines(line + "\n" for line in kept)
        os.replace(temp, self.path)
        return deleted


def _ask_number(prompt: str, convert: Callable[[str], float]):
    while True:
        text = input(prompt)
        try:
            return convert(text.strip())
        except ValueError:
            print("Please enter a valid number.")


def _add(store: StudentStore) -> None:
    name = input("Enter name: ")
    roll = _ask_number("Enter roll number: ", int)
    marks = _ask_number("Enter marks: ", float)
    try:
        store.add(Student(name, roll, marks))
    except OSError:
        print("Error opening file!")
        return
    print("Student added successfully!")


def _view(store: StudentStore) -> None:
    try:
        lines = store.lines()
    except FileNotFoundError:
        print("No records found.")
        return
    print("Student Records:")
    for number, line in enumerate(lines, start=1):
        print(f"{number}. {line}")
    if not lines:
        print("No students yet!")


def _search(store: StudentStore) -> None:
    if not store.path.exists():
        print("No records found.")
        return
    roll = _ask_number("Enter roll number to search: ", int)
    line = store.find(roll)
    if line is None:
        print(f"Student with roll {roll} not found.")
    else:
        print(f"Student Found: {line}")


def _delete(store: StudentStore) -> None:
    if not store.path.exists():
        print("No records found.")
        return
    roll = _ask_number("Enter roll number to delete: ", int)
    if store.delete(roll):
        print("Student deleted successfully.")
    else:
        print(f"Student with roll {roll} not found.")


_ACTIONS: dict[int, Callable[[StudentStore], None]] = {
    1: _add,
    2: _view,
    3: _search,
    4: _delete,
}

_MENU = (
    "\n"
    "1. Add Student\n"
    "2. View All Students\n"
    "3. Search Student by Roll\n"
    "4. Delete Student by Roll\n"
    "0. Exit"
)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive record manager on the default file."""
    store = StudentStore()

    print("===============================")
    print("      Student Record Manager   ")
    print("===============================")

    try:
        while True:
            print(_MENU)
            raw = input("Enter your choice: ")
            try:
                choice = int(raw.strip())
            except ValueError:
                choice = None
            if choice == 0:
                print("Exiting program. Bye!")
                return 0
            action = _ACTIONS.get(choice)
            if action is None:
                print("Invalid choice. Try again!")
                continue
            action(store)
    except EOFError:
        print()
        return 0


if __name__ == "__main__":
    raise SystemExit(main())