# studytodo

A small interactive organiser for student tasks and deadlines.

New tasks go into a staging queue first. You can look over the queue and undo the last
entry. Then you commit the whole batch to your task list. You can mark saved tasks
complete, search them by keyword, delete them, or clear them all. When you exit, the
program offers to write the list to a plain-text file.

## Installation

```
pip install .
```

## Usage

```
studytodo [file]
```

At startup the program reads the task file and shows the current task list. The file
is `todo.txt` in the current directory unless you name another one. If the file is
missing, the program starts with an empty list. The menu then offers these options:

| Option | Action |
|-------:|--------|
| 1 | Add a task to the queue (a title and a note or due date) |
| 2 | Undo the most recently queued task |
| 3 | Save all queued tasks to the task list |
| 4 | View all tasks |
| 5 | View completed tasks |
| 6 | Mark a task as complete (enter 0 to cancel) |
| 7 | Find tasks whose title or due date contains a keyword |
| 8 | Delete a task by its number |
| 9 | Clear all tasks |
| 10 | Exit, with an offer to save first |

While tasks are waiting in the queue, they are listed above the menu. After each
action the program waits for Enter. It then clears the screen when output goes to a
terminal. The program also stops at end of input.

You can also start the menu with `python -m studytodo.cli`.

## File format

Each task takes one line in the form `title|due date|status`. The status is `1` for a
completed task and `0` for a pending one:

```
Read chapter 4|Monday|0
Lab report|2024-05-10|1
```

## Using it from Python

```python
from studytodo.todo import ToDoList

todo = ToDoList()
todo.add_to_queue("Essay draft", "Friday")
todo.process_queue()
todo.mark_complete(1)
todo.save("todo.txt")
```

`ToDoList` provides these members:

- `tasks` is the saved tasks, first to last.
- `queued` is the tasks still in the queue, oldest first.
- `add_to_queue` queues a new task.
- `undo_last_queued` removes the newest queued task and returns it.
- `process_queue` moves every queued task to the end of the list.
- `completed_tasks` returns the finished tasks, each with its 1-based position.
- `find` returns the tasks that match a keyword, each with its 1-based position.
- `mark_complete` and `delete` take a 1-based position. A position below 1 selects the
  first task.
- `clear` removes every saved task and leaves the queue as it is.
- `load` appends the tasks from a file and returns how many were read. A missing file
  loads nothing.
- `save` writes the list to a file.

These operations raise `studytodo.todo.TodoError`:

- a task number past the end of the list
- undoing from an empty queue
- processing an empty queue

The functions in `studytodo.cli` that render screens as text are:

- `format_task_list`
- `format_completed`
- `format_search`
- `format_queue`
- `format_menu`

`run(todo, filename, stdin, stdout)` drives the menu over any pair of text streams.

## Limitations

Changes are written to the file only when you choose to save on exit. There is no
automatic saving. The queue itself is never stored.