# File: task.py
import itertools
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover - import cycle safe typing
    from .simulation import ElevatorSimulation


class Task(ABC):
    """
    Abstract base class for resumable units of control.

    A task has no call stack of its own. It remembers where it left off in
    ``label`` (a step number) and when it wants to run again in
    ``wake_time``; the scheduler calls ``resume()`` at that time and the
    task either schedules its next step or goes quiet.

    Tasks compare by identity, so one task can sit in the pending set at
    most once and in any number of queues by reference.
    """
    # Task ID counter shared across all class instances
    _task_id_counter = itertools.count()

    # One-letter family prefix used in trace output (E for elevator, U for user)
    prefix: str = "T"

    def __init__(self, name: Optional[str] = None, label: int = 1):
        """
        Initialize the task.

        Args:
            name: Task name. Optional. If not specified, auto-generated from class name and ID.
            label: Initial resumption step.
        """
        self.task_id: int = next(self._task_id_counter)
        self.name: str = name if name is not None else f"{self.__class__.__name__}_{self.task_id}"
        self.label: int = label
        self.wake_time: int = -1

    @abstractmethod
    def resume(self, sim: "ElevatorSimulation"):
        """
        Run the step named by ``self.label`` at ``self.wake_time``.

        Must be implemented in subclasses. The step runs to completion and
        may schedule this task (or others) through ``sim.scheduler``.
        """
        pass

    def state_str(self) -> str:
        """Short label for trace output, e.g. ``E71`` or ``U4``."""
        return f"{self.prefix}{int(self.label)}"

    def __repr__(self) -> str:
        return f"<{self.name} {self.state_str()}@{self.wake_time}>"
