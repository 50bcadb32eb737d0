from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Deque, List, NamedTuple

from .errors import require

if TYPE_CHECKING:  # pragma: no cover - import cycle safe typing
    from .passenger import PassengerTask


class Direction(Enum):
    UP = "U"
    DOWN = "D"
    NEUTRAL = "N"


class Demand(NamedTuple):
    """Calls registered on either side of the current floor."""

    passenger_wants_up: bool
    passenger_wants_down: bool
    waiter_wants_up: bool
    waiter_wants_down: bool

    @property
    def up(self) -> bool:
        return self.passenger_wants_up or self.waiter_wants_up

    @property
    def down(self) -> bool:
        return self.passenger_wants_down or self.waiter_wants_down


@dataclass
class WorldState:
    """Shared state of the car, the doors, the call buttons and the queues."""

    num_floors: int = 5
    home_floor: int = 2
    floor: int = field(init=False)
    loading: bool = False  # doors open, people getting in or out
    recently_active: bool = False  # used within the inactivity window
    idle_open: bool = False  # doors open, nobody getting in or out
    direction: Direction = Direction.NEUTRAL
    call_up: List[bool] = field(init=False)
    call_down: List[bool] = field(init=False)
    call_car: List[bool] = field(init=False)
    hall_queues: List[Deque["PassengerTask"]] = field(init=False)
    car_occupants: Deque["PassengerTask"] = field(default_factory=deque)

    def __post_init__(self) -> None:
        if self.num_floors < 2:
            raise ValueError("num_floors must be at least 2")
        if not (0 <= self.home_floor < self.num_floors):
            raise ValueError(f"home_floor must be between 0 and {self.num_floors - 1}")
        self.floor = self.home_floor
        self.call_up = [False] * self.num_floors
        self.call_down = [False] * self.num_floors
        self.call_car = [False] * self.num_floors
        self.hall_queues = [deque() for _ in range(self.num_floors)]

    @property
    def top_floor(self) -> int:
        return self.num_floors - 1

    def has_call(self, floor: int) -> bool:
        return self.call_up[floor] or self.call_down[floor] or self.call_car[floor]

    def demand(self) -> Demand:
        """Scan every other floor for car calls and hall calls above and below."""
        passenger_up = passenger_down = waiter_up = waiter_down = False
        for j in range(self.num_floors):
            if j == self.floor:
                continue
            if self.call_car[j]:
                if j > self.floor:
                    passenger_up = True
                else:
                    passenger_down = True
            if self.call_up[j] or self.call_down[j]:
                if j > self.floor:
                    waiter_up = True
                else:
                    waiter_down = True
        return Demand(passenger_up, passenger_down, waiter_up, waiter_down)

    def register_hall_call(self, origin: int, destination: int) -> None:
        if origin < destination:
            self.call_up[origin] = True
        else:
            self.call_down[origin] = True

    def check_invariants(self) -> None:
        """Raise ContractViolation if the door flags, position or queues are inconsistent."""
        require(not (self.loading and self.idle_open), "doors both loading and idle-open")
        require(0 <= self.floor < self.num_floors, f"floor {self.floor} out of range")
        queued = {id(p) for queue in self.hall_queues for p in queue}
        for passenger in self.car_occupants:
            require(id(passenger) not in queued, f"{passenger.name} is both queued and aboard")
        for floor, queue in enumerate(self.hall_queues):
            for passenger in queue:
                require(passenger.origin == floor, f"{passenger.name} queued on wrong floor {floor}")
