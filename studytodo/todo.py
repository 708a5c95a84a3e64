"""Task list with a staging queue and a pipe-separated text file format."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from os import PathLike
from typing import Iterator, Union

StrPath = Union[str, "PathLike[str]"]

_RECORD_DELIMITERS = ("|", "|", "\n")


@dataclass
class Task:
    """A saved task on the list."""

    title: str
    due_date: str
    completed: bool = False


@dataclass(frozen=True)
class QueuedTask:
    """A task waiting in the queue before it is committed to the list."""

    title: str
    due_date: str


class TodoError(Exception):
    """Raised when an operation cannot be carried out."""


def _parse_records(text: str) -> Iterator[list[str]]:
    """Yield [title, due, status] records, reading fields the way a stream would.

    A record needs all three fields; a field may run across line breaks when
    its delimiter is missing, and the last field may end at end of file.
    """
    pos = 0
    end = len(text)
    while True:
        fields = []
        for delimiter in _RECORD_DELIMITERS:
            if pos >= end:
                return
            found = text.find(delimiter, pos)
            if found == -1:
                fields.append(text[pos:])
                pos = end
            else:
                fields.append(text[pos:found])
                pos = found + 1
        yield fields


class ToDoList:
    """Saved tasks in order, plus a queue of tasks not yet saved."""

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._queue: deque[QueuedTask] = deque()

    @property
    def tasks(self) -> tuple[Task, ...]:
        """The saved tasks, first to last."""
        return tuple(self._tasks)

    @property
    def queued(self) -> tuple[QueuedTask, ...]:
        """The queued tasks, oldest first."""
        return tuple(self._queue)

    def add_to_queue(self, title: str, due_date: str) -> QueuedTask:
        """Queue a new task and return it."""
        item = QueuedTask(title, due_date)
        self._queue.append(item)
        return item

    def undo_last_queued(self) -> QueuedTask:
        """Remove and return the most recently queued task."""
        if not self._queue:
            raise TodoError("Queue is already empty. Nothing to undo.")
        return self._queue.pop()

    def process_queue(self) -> list[Task]:
        """Move every queued task to the end of the list, in queue order."""
        if not self._queue:
            raise TodoError("No tasks to process.")
        added = [Task(item.title, item.due_date) for item in self._queue]
        self._queue.clear()
        self._tasks.extend(added)
        return added

    def completed_tasks(self) -> list[tuple[int, Task]]:
        """Completed tasks with their 1-based positions in the list."""
        return [(pos, task) for pos, task in enumerate(self._tasks, 1) if task.completed]

    def _index(self, position: int) -> int:
        # Positions below 1 select the first task.
        index = max(position, 1) - 1
        if index >= len(self._tasks):
            raise TodoError("Invalid task number.")
        return index

    def mark_complete(self, position: int) -> Task:
        """Mark the task at a 1-based position as completed and return it."""
        task = self._tasks[self._index(position)]
        task.completed = True
        return task

    def find(self, keyword: str) -> list[tuple[int, Task]]:
        """Tasks whose title or due date contains the keyword, with positions."""
        return [
            (pos, task)
            for pos, task in enumerate(self._tasks, 1)
            if keyword in task.title or keyword in task.due_date
        ]

    def delete(self, position: int) -> Task:
        """Remove and return the task at a 1-based position."""
        return self._tasks.pop(self._index(position))

    def clear(self) -> None:
        """Remove every saved task; the queue is left as it is."""
        self._tasks.clear()

    def load(self, path: StrPath) -> int:
        """Append the tasks stored in a file; a missing file loads nothing."""
        try:
            with open(path, encoding="utf-8") as handle:
                text = handle.read()
        except OSError:
            return 0
        loaded = [
            Task(title, due, status == "1") for title, due, status in _parse_records(text)
        ]
        self._tasks.extend(loaded)
        return len(loaded)

    def save(self, path: StrPath) -> None:
        """Write every saved task to a file, one per line."""
        with open(path, "w", encoding="utf-8") as handle:
            for task in self._tasks:
                handle.write(f"{task.title}|{task.due_date}|{int(task.completed)}\n")