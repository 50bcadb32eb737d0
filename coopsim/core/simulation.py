from __future__ import annotations

import itertools
from typing import Callable, List, Optional

from config import SimulationConfig

from ..implementations.boarding import get_boarding_policy
from ..implementations.traffic import get_passenger_source
from ..interfaces.boarding_policy import IBoardingPolicy
from ..interfaces.passenger_source import IPassengerSource, PassengerSourceExhausted
from .elevator import ElevatorTask
from .errors import ContractViolation, require
from .passenger import PassengerTask
from .scheduler import EventScheduler
from .steps import PassengerStep
from .task import Task
from .timers import DoorCloseTimer, InactivityTimer
from .trace import TraceRecord
from .world import WorldState


class ElevatorSimulation:
    """
    Owns the world, the scheduler and the tasks, and runs them in time order.

    The first passenger is scheduled to arrive at time 0; every arrival
    schedules the next one, so the run only ends at the caller's deadline
    (or when a finite passenger source runs out).

    Args:
        config: Simulation configuration (defaults when omitted)
        source: Passenger source; built from ``config.traffic`` when omitted
        policy: Boarding policy; built from ``config.policy`` when omitted
        broker: Optional MessageBroker receiving trace and lifecycle events
    """

    def __init__(self, config: Optional[SimulationConfig] = None,
                 source: Optional[IPassengerSource] = None,
                 policy: Optional[IBoardingPolicy] = None,
                 broker=None):
        self.config = config if config is not None else SimulationConfig()
        self.timing = self.config.timing
        building = self.config.building
        traffic = self.config.traffic

        self.world = WorldState(num_floors=building.num_floors, home_floor=building.home_floor)
        self.scheduler = EventScheduler()
        self.source = source if source is not None else get_passenger_source(
            traffic.source,
            num_floors=building.num_floors,
            seed=self.config.random_seed,
            patience_range=(traffic.min_patience, traffic.max_patience),
            inter_arrival_range=(traffic.min_inter_arrival, traffic.max_inter_arrival),
        )
        self.policy = policy if policy is not None else get_boarding_policy(self.config.policy.boarding)
        self.broker = broker
        self.verbose = self.config.verbose
        self.check_invariants = self.config.check_invariants

        self.elevator = ElevatorTask()
        self.door_timer = DoorCloseTimer()
        self.inactivity_timer = InactivityTimer()

        self.now = 0
        self.input_exhausted = False
        self.passengers: List[PassengerTask] = []
        self._passenger_numbers = itertools.count(1)
        self._trace_listeners: List[Callable[[TraceRecord], None]] = []

        # The first user enters at time zero.
        self.scheduler.schedule(self.new_passenger(), PassengerStep.ARRIVE, 0)

    # --- Wiring used by the tasks ---

    def new_passenger(self) -> PassengerTask:
        passenger = PassengerTask(next(self._passenger_numbers))
        self.passengers.append(passenger)
        return passenger

    def publish(self, topic: str, message: dict):
        if self.broker is not None:
            self.broker.put(topic, message)

    def add_trace_listener(self, callback: Callable[[TraceRecord], None]):
        self._trace_listeners.append(callback)

    # --- Driver ---

    def next_wake_time(self) -> Optional[int]:
        if not self.scheduler:
            return None
        return self.scheduler.peek().wake_time

    def run_until(self, deadline: int):
        """
        Resume tasks in order until the earliest pending wake time reaches ``deadline``.

        Tasks waking at or after the deadline stay pending, so a later call
        carries on where this one stopped.
        """
        while True:
            wake_time = self.next_wake_time()
            if wake_time is None:
                if self.input_exhausted:
                    return
                raise ContractViolation(f"Scheduler ran dry at {self.now}")
            if wake_time >= deadline:
                return
            if not self.step():
                return

    def step(self) -> bool:
        """
        Resume exactly one task.

        Returns:
            False if the passenger source ran out during this step, True otherwise
        """
        task = self.scheduler.pop()
        require(task.wake_time >= self.now, f"{task!r} would run before {self.now}")
        self.now = task.wake_time
        self._trace(task)
        try:
            task.resume(self)
        except PassengerSourceExhausted as e:
            self._on_input_exhausted(task, e)
            return False
        if self.check_invariants:
            self.verify_invariants()
        return True

    def verify_invariants(self):
        """Raise ContractViolation if the shared state is inconsistent."""
        self.world.check_invariants()
        if self.elevator.is_dormant:
            require(self.world.floor == self.world.home_floor,
                    f"Dormant elevator on floor {self.world.floor}")
        for passenger in self.world.car_occupants:
            require(passenger.origin != passenger.destination, f"{passenger.name} rides nowhere")
        pending = list(self.scheduler)
        require(len({id(t) for t in pending}) == len(pending), "Duplicate pending task")

    def _trace(self, task: Task):
        record = self.snapshot(task)
        if self.verbose:
            print(record.format())
        for callback in self._trace_listeners:
            callback(record)
        if self.broker is not None:
            self.publish("simulation/trace", record.to_dict())

    def snapshot(self, task: Task) -> TraceRecord:
        world = self.world
        return TraceRecord(
            time=task.wake_time,
            direction=world.direction,
            floor=world.floor,
            loading=world.loading,
            recently_active=world.recently_active,
            idle_open=world.idle_open,
            task_label=task.state_str(),
            task_name=task.name,
        )

    def _on_input_exhausted(self, task: Task, error: PassengerSourceExhausted):
        self.input_exhausted = True
        if isinstance(task, PassengerTask):
            task.retired = True
            self.passengers.remove(task)
        print(f"{self.now:04d} [Simulation] Passenger input exhausted: {error}")
