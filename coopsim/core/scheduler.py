from operator import attrgetter
from typing import Iterator, List

from .errors import ContractViolation, require
from .task import Task

_by_wake_time = attrgetter("wake_time")


class EventScheduler:
    """
    Pending-event list ordered by wake time.

    Ties keep insertion order (``list.sort`` is stable), except for tasks
    placed with ``schedule_immediate``, which jump to the front so a causal
    chain at the current instant runs before anything already queued for
    that same instant.
    """

    def __init__(self):
        self._pending: List[Task] = []

    def schedule(self, task: Task, label: int, when: int):
        """Set the task's next step and wake time, then re-sort it into place."""
        task.label = label
        task.wake_time = when
        self._discard(task)
        self._pending.append(task)
        self._pending.sort(key=_by_wake_time)

    def schedule_immediate(self, task: Task, label: int, when: int):
        """
        Put the task at the very front of the pending list.

        The caller guarantees ``when`` is not later than any other pending
        wake time; in practice ``when`` is the current instant.

        Raises:
            ContractViolation: If the front of the list would wake earlier.
        """
        task.label = label
        task.wake_time = when
        self._discard(task)
        if self._pending and when > self._pending[0].wake_time:
            raise ContractViolation(
                f"schedule_immediate({task.name}, {label}, {when}) would run after "
                f"pending {self._pending[0]!r}"
            )
        self._pending.insert(0, task)

    def cancel(self, task: Task):
        """Drop the task's pending wake-up. No-op if it has none."""
        self._discard(task)

    def peek(self) -> Task:
        require(bool(self._pending), "Scheduler has no pending tasks")
        return self._pending[0]

    def pop(self) -> Task:
        require(bool(self._pending), "Scheduler has no pending tasks")
        return self._pending.pop(0)

    def is_pending(self, task: Task) -> bool:
        return any(t is task for t in self._pending)

    def _discard(self, task: Task):
        positions = [i for i, t in enumerate(self._pending) if t is task]
        if len(positions) > 1:
            raise ContractViolation(f"{task.name} is pending {len(positions)} times")
        if positions:
            del self._pending[positions[0]]

    def __contains__(self, task: Task) -> bool:
        return self.is_pending(task)

    def __len__(self) -> int:
        return len(self._pending)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._pending))
