import pytest

from studytodo.todo import QueuedTask, Task, ToDoList, TodoError


@pytest.fixture
def todo():
    items = ToDoList()
    items.add_to_queue("Read", "Mon")
    items.add_to_queue("Write", "Tue")
    items.add_to_queue("Review", "Wed")
    items.process_queue()
    return items


def test_queue_keeps_order():
    items = ToDoList()
    items.add_to_queue("A", "x")
    items.add_to_queue("B", "y")
    assert items.queued == (QueuedTask("A", "x"), QueuedTask("B", "y"))
    assert items.tasks == ()


def test_undo_removes_latest():
    items = ToDoList()
    items.add_to_queue("A", "x")
    items.add_to_queue("B", "y")
    assert items.undo_last_queued() == QueuedTask("B", "y")
    assert items.queued == (QueuedTask("A", "x"),)


def test_undo_empty_raises():
    with pytest.raises(TodoError, match="Nothing to undo"):
        ToDoList().undo_last_queued()


def test_process_moves_queue_to_list():
    items = ToDoList()
    items.add_to_queue("A", "x")
    items.add_to_queue("B", "y")
    added = items.process_queue()
    assert added == [Task("A", "x"), Task("B", "y")]
    assert items.tasks == (Task("A", "x", False), Task("B", "y", False))
    assert items.queued == ()


def test_process_appends_after_existing(todo):
    todo.add_to_queue("Extra", "Thu")
    todo.process_queue()
    assert [t.title for t in todo.tasks] == ["Read", "Write", "Review", "Extra"]


def test_process_empty_raises():
    with pytest.raises(TodoError, match="No tasks to process"):
        ToDoList().process_queue()


def test_mark_complete_and_completed_positions(todo):
    todo.mark_complete(2)
    assert todo.completed_tasks() == [(2, Task("Write", "Tue", True))]
    assert not todo.tasks[0].completed


def test_mark_complete_below_one_selects_first(todo):
    todo.mark_complete(-3)
    assert todo.tasks[0].completed


@pytest.mark.parametrize("position", [4, 10])
def test_mark_complete_out_of_range(todo, position):
    with pytest.raises(TodoError, match="Invalid task number"):
        todo.mark_complete(position)


def test_mark_complete_on_empty_list():
    with pytest.raises(TodoError):
        ToDoList().mark_complete(1)


def test_find_matches_title_and_due_date(todo):
    assert [p for p, _ in todo.find("Re")] == [1, 3]
    assert todo.find("Tue") == [(2, Task("Write", "Tue"))]


def test_find_is_case_sensitive(todo):
    assert todo.find("read") == []


def test_find_empty_keyword_matches_all(todo):
    assert len(todo.find("")) == len(todo.tasks)


def test_delete_middle(todo):
    removed = todo.delete(2)
    assert removed.title == "Write"
    assert [t.title for t in todo.tasks] == ["Read", "Review"]


def test_delete_zero_removes_first(todo):
    assert todo.delete(0).title == "Read"
    assert len(todo.tasks) == 2


def test_delete_invalid(todo):
    with pytest.raises(TodoError):
        todo.delete(4)
    assert len(todo.tasks) == 3


def test_clear_keeps_queue(todo):
    todo.add_to_queue("Later", "Fri")
    todo.clear()
    assert todo.tasks == ()
    assert todo.queued == (QueuedTask("Later", "Fri"),)


def test_save_format(tmp_path, todo):
    todo.mark_complete(1)
    path = tmp_path / "todo.txt"
    todo.save(path)
    assert path.read_text(encoding="utf-8") == "Read|Mon|1\nWrite|Tue|0\nReview|Wed|0\n"


def test_save_load_round_trip(tmp_path, todo):
    todo.mark_complete(3)
    path = tmp_path / "todo.txt"
    todo.save(path)
    other = ToDoList()
    assert other.load(path) == 3
    assert other.tasks == todo.tasks


def test_load_missing_file(tmp_path):
    items = ToDoList()
    assert items.load(tmp_path / "absent.txt") == 0
    assert items.tasks == ()


def test_load_appends(tmp_path, todo):
    path = tmp_path / "todo.txt"
    path.write_text("Extra|Thu|0\n", encoding="utf-8")
    todo.load(path)
    assert [t.title for t in todo.tasks] == ["Read", "Write", "Review", "Extra"]


def test_load_only_one_means_completed(tmp_path):
    path = tmp_path / "todo.txt"
    path.write_text("A|x|1\nB|y|true\nC|z|0\n", encoding="utf-8")
    items = ToDoList()
    items.load(path)
    assert [t.completed for t in items.tasks] == [True, False, False]


def test_load_last_line_without_newline(tmp_path):
    path = tmp_path / "todo.txt"
    path.write_text("A|x|0\nB|y|1", encoding="utf-8")
    items = ToDoList()
    assert items.load(path) == 2
    assert items.tasks[1] == Task("B", "y", True)


def test_load_field_runs_across_lines(tmp_path):
    path = tmp_path / "todo.txt"
    path.write_text("x\ny|z|1\n", encoding="utf-8")
    items = ToDoList()
    items.load(path)
    assert items.tasks == (Task("x\ny", "z", True),)


def test_load_ignores_incomplete_record(tmp_path):
    path = tmp_path / "todo.txt"
    path.write_text("A|x|0\nB|y", encoding="utf-8")
    items = ToDoList()
    assert items.load(path) == 1