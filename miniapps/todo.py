"""In-memory to-do list with an interactive menu."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence


@dataclass
class Task:
    """One to-do item."""

    description: str
    done: bool = False


@dataclass
class TodoList:
    """Ordered collection of tasks, numbered from 1."""

    tasks: list[Task] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def add(self, description: str) -> Task:
        """Append a new, not yet done task."""
        task = Task(description)
        self.tasks.append(task)
        return task

    def delete(self, number: int) -> Task:
        """Remove and return the task with the given 1-based number."""
        if not 1 <= number <= len(self.tasks):
            raise IndexError("Invalid task number!")
        return self.tasks.pop(number - 1)

    def render(self) -> str:
        """Return the task listing as shown to the user."""
        if not self.tasks:
            return "No tasks yet. Add some!"
        lines = ["Your Tasks:"]
        lines.extend(
            f"{number}. {task.description}{' [Done]' if task.done else ''}"
            for number, task in enumerate(self.tasks, start=1)
        )
        return "\n".join(lines)


_MENU = (
    "\n"
    "------- MENU -------\n"
    "1. Add Task\n"
    "2. View Tasks\n"
    "3. Delete Task\n"
    "0. Exit\n"
    "---------------------"
)


def _delete_interactive(todo: TodoList) -> None:
    if not todo:
        print("No tasks to delete!")
        return
    print(todo.render())
    raw = input("Enter the task number to delete: ")
    try:
        todo.delete(int(raw.strip()))
    except (ValueError, IndexError):
        print("Invalid task number!")
        return
    print("Task deleted successfully.")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive to-do list."""
    todo = TodoList()

    print("===============================")
    print("     Simple To-Do List App     ")
    print("===============================")

    try:
        while True:
            print(_MENU)
            raw = input("Enter your choice: ")
            try:
                choice = int(raw.strip())
            except ValueError:
                choice = None
            if choice == 1:
                todo.add(input("Enter task description: "))
                print("Task added successfully!")
            elif choice == 2:
                print(todo.render())
            elif choice == 3:
                _delete_interactive(todo)
            elif choice == 0:
                print("Goodbye! Have a productive day!")
                return 0
            else:
                print("Invalid choice. Please try again.")
    except EOFError:
        print()
        return 0


if __name__ == "__main__":
    raise SystemExit(main())