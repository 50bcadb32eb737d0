"""
Decision procedure tests

Covers the direction choice for a car without a direction and the
wake-up of a dormant car.
"""

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent.parent
sys.path.insert(0, str(project_root))

from coopsim.core.decision import decide
from coopsim.core.simulation import ElevatorSimulation
from coopsim.core.steps import ElevatorStep
from coopsim.core.world import Direction
from coopsim.implementations.traffic import FixturePassengerSource


def make_simulation():
    return ElevatorSimulation(source=FixturePassengerSource([(0, 1, 1000, 1000)]))


def test_committed_direction_is_left_alone():
    sim = make_simulation()
    sim.world.direction = Direction.DOWN
    sim.world.call_up[4] = True

    decide(sim, 0, triggered_by_arrival=False)

    assert sim.world.direction is Direction.DOWN
    assert sim.elevator not in sim.scheduler


def test_dormant_car_opens_for_a_home_floor_call():
    sim = make_simulation()
    sim.world.call_up[2] = True

    decide(sim, 100, triggered_by_arrival=False)

    assert sim.elevator.label == ElevatorStep.OPEN_DOORS
    assert sim.elevator.wake_time == 120
    assert sim.world.direction is Direction.NEUTRAL


def test_dormant_car_starts_towards_a_call_above():
    sim = make_simulation()
    sim.world.call_down[4] = True

    decide(sim, 0, triggered_by_arrival=False)

    assert sim.world.direction is Direction.UP
    assert sim.elevator.label == ElevatorStep.PREPARE_TO_MOVE
    assert sim.elevator.wake_time == 20


def test_lowest_calling_floor_wins():
    sim = make_simulation()
    sim.world.call_car[4] = True
    sim.world.call_up[0] = True

    decide(sim, 0, triggered_by_arrival=False)

    assert sim.world.direction is Direction.DOWN


def test_no_calls_keeps_the_car_neutral():
    sim = make_simulation()

    decide(sim, 0, triggered_by_arrival=False)

    assert sim.world.direction is Direction.NEUTRAL
    assert sim.elevator not in sim.scheduler


def test_after_a_stop_the_car_heads_home():
    sim = make_simulation()
    sim.elevator.label = ElevatorStep.PREPARE_TO_MOVE
    sim.world.floor = 0

    decide(sim, 0, triggered_by_arrival=True)

    assert sim.world.direction is Direction.UP
    # Not dormant, so the caller moves the car itself.
    assert sim.elevator not in sim.scheduler


def test_after_a_stop_at_home_with_no_calls_the_car_stays():
    sim = make_simulation()
    sim.elevator.label = ElevatorStep.PREPARE_TO_MOVE

    decide(sim, 0, triggered_by_arrival=True)

    assert sim.world.direction is Direction.NEUTRAL


def test_calls_on_the_current_floor_are_ignored_by_the_scan():
    sim = make_simulation()
    sim.elevator.label = ElevatorStep.PREPARE_TO_MOVE
    sim.world.floor = 3
    sim.world.call_up[3] = True

    decide(sim, 0, triggered_by_arrival=False)

    assert sim.world.direction is Direction.NEUTRAL
