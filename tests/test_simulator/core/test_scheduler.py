"""
Event scheduler tests

Ordering by wake time, stable ties, front insertion for immediate steps,
and the idempotent cancel.
"""

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent.parent
sys.path.insert(0, str(project_root))

import pytest

from coopsim.core.errors import ContractViolation
from coopsim.core.scheduler import EventScheduler
from coopsim.core.task import Task


class Marker(Task):
    prefix = "P"

    def resume(self, sim):
        pass


def drain(scheduler):
    order = []
    while scheduler:
        order.append(scheduler.pop())
    return order


def test_pop_returns_tasks_in_wake_time_order():
    scheduler = EventScheduler()
    a, b, c = Marker("a"), Marker("b"), Marker("c")
    scheduler.schedule(a, 1, 30)
    scheduler.schedule(b, 1, 10)
    scheduler.schedule(c, 1, 20)

    assert [t.name for t in drain(scheduler)] == ["b", "c", "a"]


def test_ties_keep_insertion_order():
    scheduler = EventScheduler()
    tasks = [Marker(f"t{i}") for i in range(4)]
    for task in tasks:
        scheduler.schedule(task, 1, 50)

    assert drain(scheduler) == tasks


def test_schedule_sets_label_and_wake_time():
    scheduler = EventScheduler()
    task = Marker("p")
    scheduler.schedule(task, 7, 123)

    assert task.label == 7
    assert task.wake_time == 123
    assert task in scheduler


def test_rescheduling_a_pending_task_moves_it():
    scheduler = EventScheduler()
    a, b = Marker("a"), Marker("b")
    scheduler.schedule(a, 1, 10)
    scheduler.schedule(b, 1, 20)
    scheduler.schedule(a, 2, 30)

    assert len(scheduler) == 2
    order = drain(scheduler)
    assert order == [b, a]
    assert a.label == 2


def test_schedule_immediate_jumps_ahead_of_same_instant():
    scheduler = EventScheduler()
    queued, urgent = Marker("queued"), Marker("urgent")
    scheduler.schedule(queued, 1, 100)
    scheduler.schedule_immediate(urgent, 5, 100)

    assert scheduler.peek() is urgent
    assert drain(scheduler) == [urgent, queued]


def test_schedule_immediate_on_empty_list():
    scheduler = EventScheduler()
    task = Marker("only")
    scheduler.schedule_immediate(task, 3, 42)

    assert scheduler.peek() is task
    assert task.wake_time == 42


def test_schedule_immediate_later_than_front_is_rejected():
    scheduler = EventScheduler()
    scheduler.schedule(Marker("early"), 1, 10)

    with pytest.raises(ContractViolation):
        scheduler.schedule_immediate(Marker("late"), 1, 11)


def test_cancel_is_idempotent():
    scheduler = EventScheduler()
    a, b = Marker("a"), Marker("b")
    scheduler.schedule(a, 1, 10)
    scheduler.schedule(b, 1, 20)

    scheduler.cancel(a)
    scheduler.cancel(a)
    scheduler.cancel(Marker("never scheduled"))

    assert a not in scheduler
    assert list(scheduler) == [b]


def test_cancel_of_absent_task_keeps_tied_order():
    scheduler = EventScheduler()
    tied = [Marker(f"t{i}") for i in range(3)]
    for task in tied:
        scheduler.schedule(task, 1, 10)
    urgent = Marker("urgent")
    scheduler.schedule_immediate(urgent, 1, 10)
    expected = [urgent] + tied

    scheduler.cancel(Marker("never scheduled"))
    assert list(scheduler) == expected
    scheduler.cancel(tied[1])
    scheduler.cancel(tied[1])
    assert list(scheduler) == [urgent, tied[0], tied[2]]


def test_task_pending_twice_is_a_contract_violation():
    scheduler = EventScheduler()
    task, other = Marker("twice"), Marker("other")
    scheduler.schedule(other, 1, 5)
    scheduler.schedule(task, 1, 5)
    scheduler._pending.append(task)

    with pytest.raises(ContractViolation):
        scheduler.schedule(task, 1, 6)
    with pytest.raises(ContractViolation):
        scheduler.schedule_immediate(task, 1, 5)
    with pytest.raises(ContractViolation):
        scheduler.cancel(task)
    # The other entry is untouched.
    assert scheduler.is_pending(other)


def test_peek_and_pop_on_empty_scheduler_raise():
    scheduler = EventScheduler()

    with pytest.raises(ContractViolation):
        scheduler.peek()
    with pytest.raises(ContractViolation):
        scheduler.pop()


def test_iteration_is_a_snapshot():
    scheduler = EventScheduler()
    a, b = Marker("a"), Marker("b")
    scheduler.schedule(a, 1, 10)
    scheduler.schedule(b, 1, 20)

    for task in scheduler:
        scheduler.cancel(task)

    assert len(scheduler) == 0


def test_tasks_compare_by_identity():
    first, second = Marker("same"), Marker("same")
    scheduler = EventScheduler()
    scheduler.schedule(first, 1, 5)

    assert first in scheduler
    assert second not in scheduler
    assert first.task_id != second.task_id
    assert first.state_str() == "P1"
