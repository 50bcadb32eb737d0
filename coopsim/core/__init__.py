"""Core simulation entities"""

from .errors import ContractViolation
from .steps import ElevatorStep, PassengerStep
from .task import Task
from .world import Direction, WorldState
from .scheduler import EventScheduler
from .trace import TraceRecord
from .decision import decide
from .elevator import ElevatorTask
from .timers import DoorCloseTimer, InactivityTimer
from .passenger import PassengerTask
from .simulation import ElevatorSimulation

__all__ = [
    'ContractViolation',
    'ElevatorStep',
    'PassengerStep',
    'Task',
    'Direction',
    'WorldState',
    'EventScheduler',
    'TraceRecord',
    'decide',
    'ElevatorTask',
    'DoorCloseTimer',
    'InactivityTimer',
    'PassengerTask',
    'ElevatorSimulation',
]
