"""
Cooperative elevator simulator - core simulation engine

A single car serving a small building, driven by a hand-rolled event
scheduler: the elevator, its door and inactivity timers, and every
passenger are resumable tasks with explicit step labels.
"""

__version__ = "0.1.0"

from .core.simulation import ElevatorSimulation
from .core.scheduler import EventScheduler
from .core.world import Direction, WorldState
from .core.errors import ContractViolation
from .core.trace import TraceRecord

from .interfaces.passenger_source import PassengerInfo, PassengerSourceExhausted

from .implementations.traffic import (
    KNUTH_FIXTURE,
    RandomPassengerSource,
    FixturePassengerSource,
    FallbackPassengerSource,
)
from .implementations.boarding import DirectionalBoardingPolicy, UnconditionalBoardingPolicy

from .infrastructure.message_broker import MessageBroker
from .infrastructure.simpy_driver import SimpyDriver

__all__ = [
    'ElevatorSimulation',
    'EventScheduler',
    'Direction',
    'WorldState',
    'ContractViolation',
    'TraceRecord',
    'PassengerInfo',
    'PassengerSourceExhausted',
    'KNUTH_FIXTURE',
    'RandomPassengerSource',
    'FixturePassengerSource',
    'FallbackPassengerSource',
    'DirectionalBoardingPolicy',
    'UnconditionalBoardingPolicy',
    'MessageBroker',
    'SimpyDriver',
]
