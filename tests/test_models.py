"""
Tests for Task status derivation and TaskList operations.
"""

import pytest

from tap.core.constants import WIRE_UNSET
from tap.core.exceptions import TaskIndexError
from tap.core.models import Task, TaskList, TaskStatus
from tap.core.timestamp import Timestamp

HOUR = 3600


def make_task(text, created, deadline=None, completed=None):
    return Task(created=created, deadline=deadline, completed=completed, text=text)


# -------------------- Task --------------------

def test_new_task_defaults():
    before = Timestamp.now()
    task = Task()
    assert task.created >= before
    assert task.deadline is None
    assert task.completed is None
    assert task.text == ""


def test_set_text_replaces():
    task = Task()
    task.set_text("buy milk")
    task.set_text("")
    assert task.text == ""


def test_set_deadline_rejects_past(now):
    task = Task(created=now)
    assert task.set_deadline(now - HOUR, now=now) is False
    assert task.deadline is None


def test_set_deadline_accepts_now_and_future(now):
    task = Task(created=now)
    assert task.set_deadline(now, now=now) is True
    assert task.set_deadline(now + HOUR, now=now) is True
    assert task.deadline == now + HOUR


def test_rejected_deadline_keeps_previous(now):
    task = Task(created=now)
    task.set_deadline(now + HOUR, now=now)
    task.set_deadline(now - HOUR, now=now)
    assert task.deadline == now + HOUR


def test_set_completed_rejects_future(now):
    task = Task(created=now)
    assert task.set_completed(now + 1, now=now) is False
    assert task.completed is None
    assert task.set_completed(now, now=now) is True
    assert task.completed == now


def test_completed_without_deadline(now):
    task = make_task("a", now, completed=now)
    assert task.is_completed()
    assert not task.deadline_missed(now + 1000 * HOUR)
    assert task.status(now) is TaskStatus.COMPLETED


def test_completed_before_deadline(now):
    task = make_task("a", now, deadline=now + HOUR, completed=now)
    assert task.is_completed()
    assert not task.deadline_missed(now + 2 * HOUR)


def test_completed_after_deadline_is_missed(now):
    task = make_task("a", now, deadline=now + HOUR, completed=now + 2 * HOUR)
    assert not task.is_completed()
    assert task.deadline_missed(now)
    assert task.status(now) is TaskStatus.DEADLINE_MISSED


def test_open_task_misses_deadline_once_time_passes(now):
    task = make_task("a", now, deadline=now + HOUR)
    assert task.status(now) is TaskStatus.PENDING
    assert task.status(now + HOUR) is TaskStatus.PENDING
    assert task.status(now + HOUR + 1) is TaskStatus.DEADLINE_MISSED


def test_no_deadline_never_missed(now):
    task = make_task("a", now)
    for later in (now, now + HOUR, now + 10 ** 9):
        assert not task.deadline_missed(later)
        assert task.status(later) is TaskStatus.PENDING


@pytest.mark.parametrize("deadline", [None, -HOUR, 0, HOUR])
@pytest.mark.parametrize("completed", [None, -2 * HOUR, 0, 2 * HOUR])
@pytest.mark.parametrize("at", [-3 * HOUR, 0, 3 * HOUR])
def test_completed_and_missed_are_exclusive(now, deadline, completed, at):
    task = make_task(
        "a",
        now - 10 * HOUR,
        deadline=None if deadline is None else now + deadline,
        completed=None if completed is None else now + completed,
    )
    assert not (task.is_completed() and task.deadline_missed(now + at))


def test_record_round_trip_keeps_unset(now):
    task = make_task("write report", now, deadline=now + HOUR)
    record = task.to_dict()
    assert record == {
        "created": now.seconds,
        "deadline": now.seconds + HOUR,
        "completed": WIRE_UNSET,
        "text": "write report",
    }
    assert Task.from_dict(record) == task


def test_record_legacy_seconds_objects(now):
    record = {
        "created": {"seconds": now.seconds},
        "deadline": {"seconds": WIRE_UNSET},
        "completed": {"seconds": now.seconds},
        "text": "old",
    }
    task = Task.from_dict(record)
    assert task.deadline is None
    assert task.completed == now


def test_record_rejects_bad_types(now):
    with pytest.raises(TypeError):
        Task.from_dict({"created": "yesterday", "text": "x"})
    with pytest.raises(KeyError):
        Task.from_dict({"created": now.seconds})


# -------------------- TaskList --------------------

@pytest.fixture
def five(now):
    return TaskList(make_task(f"task {i}", now) for i in range(5))


def test_add_appends(now):
    tasks = TaskList()
    tasks.add(make_task("first", now))
    tasks.add(make_task("second", now))
    assert [t.text for t in tasks] == ["first", "second"]
    assert len(tasks) == 2


def test_remove_shifts_later_tasks(five):
    removed = five.remove(1)
    assert removed.text == "task 1"
    assert [t.text for t in five] == ["task 0", "task 2", "task 3", "task 4"]


@pytest.mark.parametrize("index", [5, 17, -1])
def test_remove_out_of_range(five, index):
    with pytest.raises(TaskIndexError):
        five.remove(index)
    assert len(five) == 5


def test_remove_many_descending_and_deduplicated(five):
    removed = five.remove_many([3, 1, 4, 3])
    assert [t.text for t in removed] == ["task 4", "task 3", "task 1"]
    assert [t.text for t in five] == ["task 0", "task 2"]


def test_remove_many_validates_before_removing(five):
    with pytest.raises(TaskIndexError):
        five.remove_many([0, 9])
    assert len(five) == 5


def test_remove_all(five):
    five.remove_all()
    assert len(five) == 0


def test_complete_sets_now(five, now):
    five.complete(2, now)
    assert five[2].completed == now
    assert five[2].is_completed()


def test_complete_keeps_existing_completion(five, now):
    five.complete(0, now)
    five.complete(0, now + HOUR)
    assert five[0].completed == now


def test_complete_out_of_range(five):
    with pytest.raises(TaskIndexError) as exc:
        five.complete(5)
    assert "invalid index 6" in str(exc.value)


def test_complete_all(five, now):
    five[1].deadline = now + HOUR
    five.complete_all(now)
    assert all(task.is_completed() for task in five)
    assert five.completed_indices() == [0, 1, 2, 3, 4]


def test_completed_indices(five, now):
    five.complete(1, now)
    five.complete(3, now)
    assert five.completed_indices() == [1, 3]
