"""Interactive menu for the task organiser."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from typing import Iterable, TextIO

from studytodo.todo import QueuedTask, Task, ToDoList, TodoError

DEFAULT_FILENAME = "todo.txt"

_MENU = (
    "",
    "+-------------------------------------------+",
    "|    Student Task and Deadline Organizers   |",
    "+-------------------------------------------+",
    "|  1. Add Task                              |",
    "|  2. Undo Recently added Task              |",
    "|  3. Save Task to the List                 |",
    "|  4. View All Tasks                        |",
    "|  5. View Completed Tasks                  |",
    "|  6. Mark Task as Complete                 |",
    "|  7. Find Task                             |",
    "|  8. Delete Task                           |",
    "|  9. Clear All Tasks                       |",
    "| 10. Exit                                  |",
    "+-------------------------------------------+",
)


class ExitRequested(Exception):
    """Raised when the user confirms leaving the menu."""


def _lines(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def format_task_list(tasks: Iterable[Task]) -> str:
    """The numbered task list with completion marks."""
    tasks = list(tasks)
    if not tasks:
        return "No tasks to display.\n"
    header = ["", "+--------------------+", "|     Task List      |", "+--------------------+"]
    rows = [
        f"{pos}. [{'Done' if task.completed else ' '}] {task.title} (Due: {task.due_date})"
        for pos, task in enumerate(tasks, 1)
    ]
    return _lines(header + rows)


def format_completed(tasks: Iterable[Task]) -> str:
    """Completed tasks from a task list, numbered by their list positions."""
    header = [
        "",
        "+--------------------------+",
        "|  Completed Task Records  |",
        "+--------------------------+",
    ]
    rows = [
        f"{pos}. [Completed] {task.title} (Due: {task.due_date})"
        for pos, task in enumerate(tasks, 1)
        if task.completed
    ]
    return _lines(header + (rows or ["No completed tasks to show."]))


def format_search(matches: Iterable[tuple[int, Task]], keyword: str) -> str:
    """Search results given as (position, task) pairs."""
    rows = [f"{pos}. {task.title} (Due: {task.due_date})" for pos, task in matches]
    return _lines(["", "Search Results:"] + (rows or [f"No match for: {keyword}"]))


def format_queue(queued: Iterable[QueuedTask]) -> str:
    """The tasks waiting in the queue; empty when there are none."""
    rows = [f" {pos}. {item.title} (Due: {item.due_date})" for pos, item in enumerate(queued, 1)]
    if not rows:
        return ""
    header = [
        "",
        "+---------------------------+",
        "|  Recently Added Task        |",
        "+-----------------------------+",
    ]
    return _lines(header + rows)


def format_menu(queued: Iterable[QueuedTask]) -> str:
    """The queue, the menu and the option prompt."""
    return format_queue(queued) + _lines(_MENU) + "Choose an option: "


def _parse_int(text: str) -> int | None:
    tokens = text.split()
    if not tokens:
        return None
    try:
        return int(tokens[0])
    except ValueError:
        return None


def _parse_char(text: str) -> str:
    stripped = text.strip()
    return stripped[0] if stripped else ""


def _clear_screen(stream: TextIO) -> None:
    isatty = getattr(stream, "isatty", None)
    if not (isatty and isatty()):
        return
    command = ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]
    try:
        subprocess.run(command, check=False)
    except OSError:
        stream.write("\033[2J\033[H")


class _Session:
    def __init__(self, todo: ToDoList, filename: str, stdin: TextIO, stdout: TextIO) -> None:
        self.todo = todo
        self.filename = filename
        self.stdin = stdin
        self.stdout = stdout

    def say(self, text: str = "") -> None:
        self.stdout.write(text + "\n")

    def ask(self, prompt: str) -> str | None:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")

    def ask_text(self, prompt: str) -> str:
        return self.ask(prompt) or ""

    def add(self) -> None:
        title = self.ask_text("Enter task title: ")
        due = self.ask_text("Enter note/due date: ")
        self.todo.add_to_queue(title, due)
        self.say("Task added to queue.")

    def undo(self) -> None:
        item = self.todo.undo_last_queued()
        self.say(f"Undid last queued task: {item.title} (Due: {item.due_date})")

    def process(self) -> None:
        self.todo.process_queue()
        self.say("Recent tasks have been saved to task list.")

    def view_all(self) -> None:
        self.stdout.write(format_task_list(self.todo.tasks))

    def view_completed(self) -> None:
        self.stdout.write(format_completed(self.todo.tasks))

    def mark(self) -> None:
        self.view_all()
        position = _parse_int(
            self.ask_text("\nEnter task number to mark complete (or 0 to cancel): ")
        )
        if position == 0:
            self.say("Cancelled. Returning to menu.")
            return
        if position is None:
            raise TodoError("Invalid task number.")
        self.todo.mark_complete(position)
        self.say("Task marked complete.")

    def find(self) -> None:
        keyword = self.ask_text("Enter keyword to search: ")
        self.stdout.write(format_search(self.todo.find(keyword), keyword))

    def delete(self) -> None:
        position = _parse_int(self.ask_text("Enter task number to delete: "))
        if position is None:
            raise TodoError("Invalid task number.")
        self.todo.delete(position)
        self.say("Task deleted.")

    def clear(self) -> None:
        self.todo.clear()
        self.say("All tasks cleared.")

    def exit(self) -> None:
        answer = _parse_char(
            self.ask_text("\nDo you want to save your tasks before exiting? (y/n): ")
        )
        if answer in ("y", "Y"):
            try:
                self.todo.save(self.filename)
            except OSError as exc:
                self.say(f"Could not save tasks: {exc}")
            else:
                self.say(f'Tasks saved locally under the file name "{self.filename}".')
        confirm = _parse_char(self.ask_text("Are you sure you want to exit? (y/n): "))
        if confirm in ("y", "Y"):
            self.say("Exiting Student Task and Deadline Organizers...")
            raise ExitRequested
        self.say("Exit cancelled. Returning to menu.")


def run(todo: ToDoList, filename: str, stdin: TextIO, stdout: TextIO) -> int:
    """Load the file, then serve the menu until exit or end of input."""
    session = _Session(todo, filename, stdin, stdout)
    todo.load(filename)
    session.say("Tasks loaded.")
    session.view_all()

    actions = {
        1: session.add,
        2: session.undo,
        3: session.process,
        4: session.view_all,
        5: session.view_completed,
        6: session.mark,
        7: session.find,
        8: session.delete,
        9: session.clear,
        10: session.exit,
    }

    while True:
        reply = session.ask(format_menu(todo.queued))
        if reply is None:
            return 0
        action = actions.get(_parse_int(reply))
        try:
            if action is None:
                session.say("Invalid choice.")
            else:
                action()
        except TodoError as exc:
            session.say(str(exc))
        except ExitRequested:
            return 0
        session.ask("\nPress Enter to continue...")
        _clear_screen(stdout)


def main(argv: list[str] | None = None) -> int:
    """Start the interactive organiser."""
    parser = argparse.ArgumentParser(
        prog="studytodo", description="Student task and deadline organiser."
    )
    parser.add_argument("file", nargs="?", default=DEFAULT_FILENAME, help="task file")
    args = parser.parse_args(argv)
    return run(ToDoList(), args.file, sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())