from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict, List, Optional

from .decision import decide
from .errors import ContractViolation, require
from .steps import ElevatorStep, PassengerStep
from .task import Task
from .world import Direction

if TYPE_CHECKING:  # pragma: no cover - import cycle safe typing
    from .simulation import ElevatorSimulation


class PassengerTask(Task):
    """
    One rider, from arrival in the lobby to stepping out of the car.

    A passenger is created (by its predecessor) before its own arrival
    time; the arrival step draws its trip from the passenger source and
    immediately schedules the next passenger, so exactly one future
    arrival is always pending.

    Journey bookkeeping (queue/boarding/alighting times, occupancy, stops)
    is kept on the task itself for the statistics collector.
    """
    prefix = "U"

    def __init__(self, number: int, name: Optional[str] = None):
        super().__init__(name if name is not None else f"User_{number}", label=PassengerStep.ARRIVE)
        self.number = number
        self.origin: Optional[int] = None
        self.destination: Optional[int] = None
        self.patience: Optional[int] = None
        self.retired = False

        # Passenger metrics (self-tracking)
        self.queued_at: Optional[int] = None
        self.boarded_at: Optional[int] = None
        self.alighted_at: Optional[int] = None
        self.gave_up_at: Optional[int] = None
        self.max_occupancy = 0
        self.stopped_at: List[int] = []

        self._handlers: Dict[int, Callable[["ElevatorSimulation", int], None]] = {
            PassengerStep.ARRIVE: self._arrive,
            PassengerStep.GIVE_UP: self._give_up,
            PassengerStep.BOARD: self._board,
            PassengerStep.ALIGHT: self._alight,
        }

    @property
    def direction(self) -> Direction:
        return Direction.UP if self.destination > self.origin else Direction.DOWN

    def resume(self, sim: "ElevatorSimulation"):
        handler = self._handlers.get(self.label)
        if handler is None:
            raise ContractViolation(f"{self.name} has no step {self.label}")
        handler(sim, self.wake_time)

    # --- Steps ---

    def _arrive(self, sim: "ElevatorSimulation", now: int):
        info = sim.source.next_passenger()
        sim.scheduler.schedule(sim.new_passenger(), PassengerStep.ARRIVE, now + info.inter_arrival)
        require(info.origin != info.destination, f"{self.name} arrives already at destination {info.origin}")
        require(0 <= info.origin < sim.world.num_floors and 0 <= info.destination < sim.world.num_floors,
                f"{self.name} trip {info.origin}->{info.destination} leaves the building")

        world = sim.world
        elevator = sim.elevator
        available = sim.policy.is_available(world, info.origin, info.destination)
        if available and elevator.label == ElevatorStep.PREPARE_TO_MOVE:
            # Doors just closed here; reopen them.
            sim.scheduler.schedule_immediate(elevator, ElevatorStep.OPEN_DOORS, now)
        elif available and world.idle_open:
            world.idle_open = False
            world.loading = True
            sim.scheduler.schedule_immediate(elevator, ElevatorStep.LOAD_UNLOAD, now)
        else:
            world.register_hall_call(info.origin, info.destination)
            if not world.recently_active or elevator.is_dormant:
                decide(sim, now, triggered_by_arrival=False)

        self.origin = info.origin
        self.destination = info.destination
        self.patience = info.patience
        self.queued_at = now
        world.hall_queues[self.origin].append(self)
        sim.scheduler.schedule(self, PassengerStep.GIVE_UP, now + info.patience)
        sim.publish("passenger/arrived", {
            "timestamp": now,
            "passenger": self.number,
            "origin": self.origin,
            "destination": self.destination,
            "patience": self.patience,
        })

    def _give_up(self, sim: "ElevatorSimulation", now: int):
        world = sim.world
        about_to_board = sim.policy.is_available(world, self.origin, self.destination) and world.loading
        if about_to_board:
            return
        _remove(world.hall_queues[self.origin], self)
        self.gave_up_at = now
        self.retired = True
        sim.publish("passenger/gave_up", {
            "timestamp": now,
            "passenger": self.number,
            "floor": self.origin,
            "waited": now - self.queued_at,
        })

    def _board(self, sim: "ElevatorSimulation", now: int):
        world = sim.world
        _remove(world.hall_queues[self.origin], self)
        world.car_occupants.appendleft(self)
        world.call_car[self.destination] = True
        if world.direction is Direction.NEUTRAL:
            world.direction = self.direction
            sim.scheduler.schedule(sim.door_timer, ElevatorStep.CLOSE_DOORS, now + sim.timing.door_close_rapid)
        self.boarded_at = now
        occupancy = len(world.car_occupants)
        for rider in world.car_occupants:
            rider.max_occupancy = max(rider.max_occupancy, occupancy)
        sim.publish("passenger/boarded", {
            "timestamp": now,
            "passenger": self.number,
            "floor": self.origin,
            "destination": self.destination,
            "occupancy": occupancy,
        })

    def _alight(self, sim: "ElevatorSimulation", now: int):
        _remove(sim.world.car_occupants, self)
        self.alighted_at = now
        self.retired = True
        sim.publish("passenger/alighted", {
            "timestamp": now,
            "passenger": self.number,
            "origin": self.origin,
            "floor": self.destination,
            "queue_wait": self.boarded_at - self.queued_at,
            "ride": now - self.boarded_at,
            "max_occupancy": self.max_occupancy,
            "stopped_at": list(self.stopped_at),
        })

    # --- Metrics ---

    def get_waiting_time(self) -> Optional[int]:
        if self.queued_at is None or self.boarded_at is None:
            return None
        return self.boarded_at - self.queued_at

    def get_riding_time(self) -> Optional[int]:
        if self.boarded_at is None or self.alighted_at is None:
            return None
        return self.alighted_at - self.boarded_at


def _remove(queue, passenger: PassengerTask):
    matches = [p for p in queue if p is passenger]
    require(len(matches) <= 1, f"{passenger.name} appears {len(matches)} times in one queue")
    if matches:
        queue.remove(passenger)
