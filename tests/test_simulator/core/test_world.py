"""World state tests: demand scan, hall calls and consistency checks"""

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent.parent
sys.path.insert(0, str(project_root))

import pytest

from coopsim.core.errors import ContractViolation
from coopsim.core.passenger import PassengerTask
from coopsim.core.world import Direction, WorldState


def test_starts_parked_at_home():
    world = WorldState(num_floors=7, home_floor=3)

    assert world.floor == 3
    assert world.top_floor == 6
    assert world.direction is Direction.NEUTRAL
    assert len(world.hall_queues) == 7
    assert not any(world.call_up + world.call_down + world.call_car)


def test_rejects_bad_building():
    with pytest.raises(ValueError):
        WorldState(num_floors=1, home_floor=0)
    with pytest.raises(ValueError):
        WorldState(num_floors=5, home_floor=5)


def test_register_hall_call_uses_trip_direction():
    world = WorldState()
    world.register_hall_call(1, 3)
    world.register_hall_call(4, 0)

    assert world.call_up[1] and not world.call_down[1]
    assert world.call_down[4] and not world.call_up[4]


def test_demand_splits_riders_and_waiters():
    world = WorldState()
    world.call_car[4] = True
    world.call_down[0] = True
    world.call_up[2] = True  # current floor, ignored

    demand = world.demand()

    assert demand.passenger_wants_up
    assert not demand.passenger_wants_down
    assert demand.waiter_wants_down
    assert not demand.waiter_wants_up
    assert demand.up and demand.down


def test_invariants_reject_loading_and_idle_open_together():
    world = WorldState()
    world.loading = True
    world.idle_open = True

    with pytest.raises(ContractViolation):
        world.check_invariants()


def test_invariants_reject_rider_queued_and_aboard():
    world = WorldState()
    rider = PassengerTask(1)
    rider.origin, rider.destination = 2, 4
    world.hall_queues[2].append(rider)
    world.car_occupants.append(rider)

    with pytest.raises(ContractViolation):
        world.check_invariants()


def test_invariants_reject_rider_on_wrong_queue():
    world = WorldState()
    rider = PassengerTask(1)
    rider.origin, rider.destination = 1, 4
    world.hall_queues[3].append(rider)

    with pytest.raises(ContractViolation):
        world.check_invariants()
